from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, Field


class QuestionRecord(BaseModel):
    id: str
    fields: Dict[str, Any] = Field(default_factory=dict)
    createdTime: Optional[str] = None


class VoteCreate(BaseModel):
    # Every field is optional here so missing values reach the vote
    # recorder and come back as a 400 with a readable message.
    voterName: Optional[str] = None
    questionId: Optional[str] = None
    questionNumber: Optional[Union[int, str]] = None
    answerNumber: Optional[Union[int, str]] = None
    sessionName: Optional[str] = None


class VoteRead(BaseModel):
    success: bool = True
    voteRecord: Dict[str, Any]


class ResultsRead(BaseModel):
    questionNumber: int
    question: Optional[str]
    answers: Dict[str, Optional[str]]
    correctAnswer: Optional[Any] = None
    votes: Dict[str, int]
    totalVotes: int
