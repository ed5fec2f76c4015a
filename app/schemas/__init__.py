from app.schemas.quiz import QuestionRecord, ResultsRead, VoteCreate, VoteRead
from app.schemas.session import AdvanceRead, SessionCreate

__all__ = [
    "QuestionRecord",
    "ResultsRead",
    "VoteCreate",
    "VoteRead",
    "AdvanceRead",
    "SessionCreate",
]
