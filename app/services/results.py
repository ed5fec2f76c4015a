from typing import Iterable

from app.core.errors import NotFound
from app.models import ANSWER_CHOICES, Question, Vote
from app.models.vote import CHOICE_FIELD, QUESTION_FIELD
from app.schemas import ResultsRead
from app.services.catalog import QuizCatalog
from app.store.client import RecordStoreClient


def tally_votes(votes: Iterable[Vote]) -> dict[int, int]:
    counts = {choice: 0 for choice in ANSWER_CHOICES}
    for vote in votes:
        if vote.choice is not None:
            counts[vote.choice] += 1
    return counts


class ResultsAggregator:
    """Per-answer vote counts, recomputed from the raw ``Votes`` rows."""

    def __init__(self, store: RecordStoreClient, table: str, catalog: QuizCatalog):
        self.store = store
        self.table = table
        self.catalog = catalog

    async def votes_for(self, question: Question) -> list[Vote]:
        # Linked-record formulas only see primary field values, so the
        # match on record id happens here.
        records = await self.store.list_records(self.table, fields=[QUESTION_FIELD, CHOICE_FIELD])
        votes = [Vote.model_validate(r) for r in records]
        return [v for v in votes if question.id in v.question_ids]

    async def get_results(self, question_number: int) -> ResultsRead:
        question = await self.catalog.get_question_by_number(question_number)
        if question is None:
            raise NotFound("Question not found")
        counts = tally_votes(await self.votes_for(question))
        return ResultsRead(
            questionNumber=question_number,
            question=question.text,
            answers={str(k): v for k, v in question.answers.items()},
            correctAnswer=question.correct_answer,
            votes={str(k): v for k, v in counts.items()},
            totalVotes=sum(counts.values()),
        )
