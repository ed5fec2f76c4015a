import logging
from typing import List, Optional

from app.models import Question
from app.models.quiz import ACTIVE_FIELD, NUMBER_FIELD
from app.store.client import RecordStoreClient, formula_equals

logger = logging.getLogger("quiz")


class QuizCatalog:
    """Read access to the ``Quiz`` table, plus the global active flag."""

    def __init__(self, store: RecordStoreClient, table: str):
        self.store = store
        self.table = table

    async def list_questions(self) -> List[Question]:
        records = await self.store.list_records(self.table, sort=[(NUMBER_FIELD, "asc")])
        return [Question.model_validate(r) for r in records]

    async def get_question_by_number(self, number: int) -> Optional[Question]:
        records = await self.store.list_records(
            self.table,
            filter_formula=formula_equals(NUMBER_FIELD, number),
            max_records=1,
        )
        if not records:
            return None
        return Question.model_validate(records[0])

    async def get_active_question(self) -> Optional[Question]:
        records = await self.store.list_records(
            self.table,
            filter_formula=formula_equals(ACTIVE_FIELD, True),
            sort=[(NUMBER_FIELD, "asc")],
        )
        if not records:
            return None
        if len(records) > 1:
            logger.warning(
                "Multiple active questions flagged (%s), using the first",
                ", ".join(r["id"] for r in records),
            )
        return Question.model_validate(records[0])

    async def activate_next(self) -> Optional[Question]:
        """Move the active flag to the question after the current one.

        Every flagged record is cleared, so at most one question is active
        afterwards. Returns the newly active question, or None when the last
        question was already active.
        """
        questions = await self.list_questions()
        flagged = [q for q in questions if q.active]
        if flagged:
            current = max(q.number or 0 for q in flagged)
            candidates = [q for q in questions if (q.number or 0) > current]
        else:
            candidates = questions
        upcoming = candidates[0] if candidates else None

        # The new flag goes first so it lands in the first batch with the clears.
        updates = [(q.id, {ACTIVE_FIELD: False}) for q in flagged]
        if upcoming is not None:
            updates.insert(0, (upcoming.id, {ACTIVE_FIELD: True}))
        records = await self.store.update_records(self.table, updates) if updates else []

        if upcoming is None:
            logger.info("No next question after active %s", [q.number for q in flagged])
            return None
        logger.info("Active question moved to #%s (%s)", upcoming.number, upcoming.id)
        return Question.model_validate(records[0])
