import logging
from typing import Any, Optional

from app.core.errors import NotFound, ValidationError
from app.models import ANSWER_CHOICES, Vote
from app.models.record import coerce_int
from app.models.vote import CHOICE_FIELD, QUESTION_FIELD, VOTER_FIELD
from app.services.catalog import QuizCatalog
from app.services.session_tracker import SessionTracker
from app.store.client import RecordStoreClient

logger = logging.getLogger("quiz")


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class VoteRecorder:
    def __init__(
        self,
        store: RecordStoreClient,
        table: str,
        catalog: QuizCatalog,
        sessions: SessionTracker,
    ):
        self.store = store
        self.table = table
        self.catalog = catalog
        self.sessions = sessions

    async def record_vote(
        self,
        voter_name: Optional[str],
        answer: Any,
        question_id: Optional[str] = None,
        question_number: Any = None,
        session_name: Optional[str] = None,
    ) -> Vote:
        """Validate a vote, resolve the question it is for and write it.

        The question is taken from ``question_id`` when given, otherwise looked
        up by ``question_number``, otherwise the current question of
        ``session_name`` is used. Nothing is written when validation fails.
        """
        if _is_blank(voter_name) or _is_blank(answer):
            raise ValidationError("Missing fields")
        if _is_blank(question_id) and _is_blank(question_number) and _is_blank(session_name):
            raise ValidationError("Missing fields")

        choice = coerce_int(answer)
        if choice not in ANSWER_CHOICES:
            raise ValidationError("answerNumber must be 1, 2, 3 or 4")

        resolved_id = await self._resolve_question_id(question_id, question_number, session_name)
        record = await self.store.create_record(
            self.table,
            {
                VOTER_FIELD: voter_name.strip(),
                QUESTION_FIELD: [resolved_id],
                CHOICE_FIELD: str(choice),
            },
        )
        logger.info("Vote recorded: voter=%r question=%s choice=%s", voter_name, resolved_id, choice)
        return Vote.model_validate(record)

    async def _resolve_question_id(self, question_id, question_number, session_name) -> str:
        if not _is_blank(question_id):
            return question_id

        if not _is_blank(question_number):
            number = coerce_int(question_number)
            if number is None:
                raise ValidationError("questionNumber must be an integer")
        else:
            session = await self.sessions.get_session(session_name)
            number = session.current_question
            if number == 0:
                raise ValidationError("Session has not started")

        question = await self.catalog.get_question_by_number(number)
        if question is None:
            raise NotFound(f"Question {number} not found")
        return question.id
