from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from core.config import resolve_logging_config, settings
from core.database import SessionLocal, init_database
from core.errors import register_exception_handlers
from core.logger import configure_logging, get_logger
from models import api_usage, review, session, tag, user, vocabulary  # noqa: F401
from routers import (
    review as review_router,
    tag as tag_router,
    usage as usage_router,
    user as user_router,
    vocabulary as vocabulary_router,
)
from services.usage_service import UsageService

logger = get_logger("app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    config = resolve_logging_config(settings)
    configure_logging(config)
    logger.info("starting in %s on %s", config.environment, config.platform)
    if not init_database():
        logger.error("continuing without schema initialisation")
    yield


app = FastAPI(title="VocabPro", lifespan=lifespan)
app.state.session_factory = SessionLocal
register_exception_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def track_api_usage(request: Request, call_next):
    response = await call_next(request)
    route = request.scope.get("route")
    path = getattr(route, "path", None)
    if path and path != "/status":
        db = request.app.state.session_factory()
        try:
            UsageService(db).record(f"{request.method} {path}")
        finally:
            db.close()
    return response


app.include_router(user_router.router)
app.include_router(vocabulary_router.router)
app.include_router(tag_router.router)
app.include_router(review_router.router)
app.include_router(usage_router.router)


@app.get("/status")
async def status():
    return {"status": "ok"}


if __name__ == "__main__":
    uvicorn.run("main:app", reload=settings.APP_ENV == "development", host="127.0.0.1", port=8000)
