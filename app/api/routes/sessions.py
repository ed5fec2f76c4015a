from fastapi import APIRouter, Depends

from app.dependencies import QuizServices, get_services
from app.schemas import AdvanceRead, SessionCreate

router = APIRouter(prefix="/session", tags=["session"])


@router.post("")
async def create_session(payload: SessionCreate, services: QuizServices = Depends(get_services)):
    session = await services.sessions.create_session(payload.sessionName)
    return session.envelope()


@router.get("/{session_name}")
async def get_session(session_name: str, services: QuizServices = Depends(get_services)):
    session = await services.sessions.get_session(session_name)
    return session.envelope()


@router.post("/{session_name}/next", response_model=AdvanceRead)
async def advance_session(session_name: str, services: QuizServices = Depends(get_services)):
    new_value, record = await services.sessions.advance(session_name)
    return AdvanceRead(newCurrentQuestion=new_value, updatedRecord=record.envelope())
