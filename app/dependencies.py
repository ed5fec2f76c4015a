from dataclasses import dataclass
from typing import Optional

from app.core.config import Settings, settings
from app.services.catalog import QuizCatalog
from app.services.results import ResultsAggregator
from app.services.session_tracker import SessionTracker
from app.services.votes import VoteRecorder
from app.store.client import RecordStoreClient


@dataclass
class QuizServices:
    store: RecordStoreClient
    catalog: QuizCatalog
    sessions: SessionTracker
    votes: VoteRecorder
    results: ResultsAggregator


def build_services(store: RecordStoreClient, config: Settings = settings) -> QuizServices:
    catalog = QuizCatalog(store, config.quiz_table)
    sessions = SessionTracker(store, config.session_table, catalog)
    return QuizServices(
        store=store,
        catalog=catalog,
        sessions=sessions,
        votes=VoteRecorder(store, config.votes_table, catalog, sessions),
        results=ResultsAggregator(store, config.votes_table, catalog),
    )


quiz_services: Optional[QuizServices] = None


def init_services(config: Settings = settings) -> QuizServices:
    global quiz_services
    quiz_services = build_services(RecordStoreClient(config), config)
    return quiz_services


async def close_services() -> None:
    global quiz_services
    if quiz_services is not None:
        await quiz_services.store.close()
        quiz_services = None


def get_services() -> QuizServices:
    if quiz_services is None:
        raise RuntimeError("Record store client is not initialised")
    return quiz_services
