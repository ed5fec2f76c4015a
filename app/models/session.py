from enum import Enum

from app.models.record import StoreRecord, coerce_int

NAME_FIELD = "Session Name"
CURRENT_FIELD = "Current Question"


class SessionStatus(str, Enum):
    WAITING = "waiting"
    LIVE = "live"
    ENDED = "ended"


class QuizSession(StoreRecord):
    @property
    def name(self) -> str:
        return self.fields.get(NAME_FIELD, "")

    @property
    def current_question(self) -> int:
        # blank counters in the store mean "not started"
        return coerce_int(self.fields.get(CURRENT_FIELD)) or 0
