from typing import Optional

from app.models.record import StoreRecord, coerce_int

NUMBER_FIELD = "Question Number"
TEXT_FIELD = "Question"
ANSWER_FIELDS = {1: "Answer 1", 2: "Answer 2", 3: "Answer 3", 4: "Answer 4"}
CORRECT_FIELD = "Correct Answer"
ACTIVE_FIELD = "Active Question"


class Question(StoreRecord):
    @property
    def number(self) -> Optional[int]:
        return coerce_int(self.fields.get(NUMBER_FIELD))

    @property
    def text(self) -> Optional[str]:
        return self.fields.get(TEXT_FIELD)

    @property
    def answers(self) -> dict[int, Optional[str]]:
        return {choice: self.fields.get(name) for choice, name in ANSWER_FIELDS.items()}

    @property
    def correct_answer(self):
        return self.fields.get(CORRECT_FIELD)

    @property
    def active(self) -> bool:
        return bool(self.fields.get(ACTIVE_FIELD))
