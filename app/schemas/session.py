from typing import Any, Dict, Optional

from pydantic import BaseModel


class SessionCreate(BaseModel):
    sessionName: Optional[str] = None


class AdvanceRead(BaseModel):
    success: bool = True
    newCurrentQuestion: int
    updatedRecord: Dict[str, Any]
