from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class StoreRecord(BaseModel):
    """A row of the record store: ``{id, fields, createdTime}``."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    fields: dict[str, Any] = Field(default_factory=dict)
    created_time: Optional[str] = Field(default=None, alias="createdTime")

    def envelope(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


def coerce_int(value: Any) -> Optional[int]:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    try:
        return int(str(value).strip())
    except ValueError:
        return None
