import asyncio
import logging
from dataclasses import dataclass
from typing import Dict, Optional

from app.core.errors import NotFound, ValidationError
from app.models import Question, QuizSession, SessionStatus
from app.models.session import CURRENT_FIELD, NAME_FIELD
from app.services.catalog import QuizCatalog
from app.store.client import RecordStoreClient, formula_equals

logger = logging.getLogger("quiz")


@dataclass
class ActiveQuestion:
    status: SessionStatus
    session: QuizSession
    question: Optional[Question] = None


class SessionTracker:
    """Named quiz runs and their current-question counters."""

    def __init__(self, store: RecordStoreClient, table: str, catalog: QuizCatalog):
        self.store = store
        self.table = table
        self.catalog = catalog
        # name -> [lock, callers holding or waiting on it]
        self._advance_locks: Dict[str, list] = {}

    async def create_session(self, name: str) -> QuizSession:
        name = (name or "").strip()
        if not name:
            raise ValidationError("sessionName is required")
        record = await self.store.create_record(self.table, {NAME_FIELD: name, CURRENT_FIELD: 0})
        logger.info("Session created: %s (%s)", name, record["id"])
        return QuizSession.model_validate(record)

    async def find_session(self, name: str) -> Optional[QuizSession]:
        name = (name or "").strip()
        records = await self.store.list_records(
            self.table,
            filter_formula=formula_equals(NAME_FIELD, name),
            max_records=1,
        )
        if not records:
            return None
        return QuizSession.model_validate(records[0])

    async def get_session(self, name: str) -> QuizSession:
        session = await self.find_session(name)
        if not session:
            raise NotFound("Session not found")
        return session

    async def advance(self, name: str) -> tuple[int, QuizSession]:
        # The store has no atomic increment, so advances of one session
        # go through a single writer.
        name = (name or "").strip()
        entry = self._advance_locks.get(name)
        if entry is None:
            entry = self._advance_locks[name] = [asyncio.Lock(), 0]
        entry[1] += 1
        try:
            async with entry[0]:
                session = await self.get_session(name)
                new_value = session.current_question + 1
                record = await self.store.update_record(self.table, session.id, {CURRENT_FIELD: new_value})
        finally:
            entry[1] -= 1
            if entry[1] == 0:
                del self._advance_locks[name]
        logger.info("Session %s advanced to question %s", name, new_value)
        return new_value, QuizSession.model_validate(record)

    async def get_active_for_session(self, name: str) -> ActiveQuestion:
        session = await self.get_session(name)
        if session.current_question == 0:
            return ActiveQuestion(status=SessionStatus.WAITING, session=session)
        question = await self.catalog.get_question_by_number(session.current_question)
        if question is None:
            return ActiveQuestion(status=SessionStatus.ENDED, session=session)
        return ActiveQuestion(status=SessionStatus.LIVE, session=session, question=question)
