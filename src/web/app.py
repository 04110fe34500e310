"""FastAPI application entry point."""

from contextlib import asynccontextmanager
from datetime import datetime, timezone

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from web.deps import get_config, get_store
from web.models import Health
from web.routes import entries, stats

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    store = app.dependency_overrides.get(get_store, get_store)()
    logger.info("web.startup", db_path=str(store.db_path))
    yield
    logger.info("web.shutdown")


app = FastAPI(
    title="Mood Log",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_config().server.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(entries.router)
app.include_router(stats.router)


@app.get("/api/health", response_model=Health)
async def health():
    return Health(ok=True, time=datetime.now(timezone.utc).isoformat(timespec="milliseconds"))
