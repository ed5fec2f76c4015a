from typing import List, Optional

from fastapi import APIRouter, Depends

from app.core.errors import NotFound
from app.dependencies import QuizServices, get_services
from app.models import SessionStatus
from app.schemas import QuestionRecord, ResultsRead, VoteCreate, VoteRead

router = APIRouter(tags=["quiz"])


@router.get("/questions", response_model=List[QuestionRecord])
async def list_questions(services: QuizServices = Depends(get_services)):
    questions = await services.catalog.list_questions()
    return [q.envelope() for q in questions]


@router.get("/question/{num}", response_model=QuestionRecord)
async def get_question(num: int, services: QuizServices = Depends(get_services)):
    question = await services.catalog.get_question_by_number(num)
    if question is None:
        raise NotFound("Question not found")
    return question.envelope()


@router.get("/active")
async def active_question(session: Optional[str] = None, services: QuizServices = Depends(get_services)):
    if session:
        current = await services.sessions.get_active_for_session(session)
        if current.status == SessionStatus.WAITING:
            return {"waiting": True}
        if current.status == SessionStatus.ENDED:
            return {"end": True}
        question = current.question
    else:
        question = await services.catalog.get_active_question()
        if question is None:
            return {"active": False}
    return {"active": True, "questionId": question.id, "fields": question.fields}


@router.post("/next")
async def next_question(services: QuizServices = Depends(get_services)):
    question = await services.catalog.activate_next()
    if question is None:
        return {"message": "No next question found"}
    return {"newActive": question.envelope()}


@router.post("/vote", response_model=VoteRead)
async def vote(payload: VoteCreate, services: QuizServices = Depends(get_services)):
    record = await services.votes.record_vote(
        voter_name=payload.voterName,
        answer=payload.answerNumber,
        question_id=payload.questionId,
        question_number=payload.questionNumber,
        session_name=payload.sessionName,
    )
    return VoteRead(voteRecord=record.envelope())


@router.get("/results/{num}", response_model=ResultsRead)
async def results(num: int, services: QuizServices = Depends(get_services)):
    return await services.results.get_results(num)
