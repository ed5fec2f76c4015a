from typing import Optional

from app.models.record import StoreRecord, coerce_int

VOTER_FIELD = "Voter Name"
QUESTION_FIELD = "Question"
CHOICE_FIELD = "Vote"

ANSWER_CHOICES = (1, 2, 3, 4)


class Vote(StoreRecord):
    @property
    def voter_name(self) -> Optional[str]:
        return self.fields.get(VOTER_FIELD)

    @property
    def question_ids(self) -> list[str]:
        linked = self.fields.get(QUESTION_FIELD) or []
        if isinstance(linked, str):
            return [linked]
        return list(linked)

    @property
    def choice(self) -> Optional[int]:
        choice = coerce_int(self.fields.get(CHOICE_FIELD))
        return choice if choice in ANSWER_CHOICES else None
