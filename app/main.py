import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.routes import quiz, root, sessions
from app.core.config import settings
from app.core.errors import QuizError
from app.core.logging import configure_logging
from app.dependencies import close_services, init_services

logger = logging.getLogger("quiz")


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.log_level)
    settings.require_store_credentials()
    init_services(settings)
    logger.info("Using Airtable base %s", settings.airtable_base_id)
    yield
    await close_services()

app = FastAPI(title="Live Quiz Relay", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(QuizError)
async def quiz_error_handler(request: Request, exc: QuizError):
    if exc.status_code >= 500:
        logger.error("Error in %s %s: %s", request.method, request.url.path, exc.message)
    else:
        logger.info("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg')}" for err in errors
    ) or "Invalid request"
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception("Error in %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": str(exc)})


# HTTP routes
app.include_router(root.router)
app.include_router(quiz.router)
app.include_router(sessions.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host=settings.host, port=settings.port)
