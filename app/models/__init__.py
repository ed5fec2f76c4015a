from app.models.quiz import Question
from app.models.record import StoreRecord
from app.models.session import QuizSession, SessionStatus
from app.models.vote import ANSWER_CHOICES, Vote

__all__ = ["ANSWER_CHOICES", "Question", "QuizSession", "SessionStatus", "StoreRecord", "Vote"]
