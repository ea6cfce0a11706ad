"""FastAPI application exposing the golf statistics engine."""

import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from analytics.config import HandicapConfig

load_dotenv()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load handicap settings from the environment on startup."""
    app.state.handicap_config = HandicapConfig.from_env()
    logging.getLogger(__name__).info(
        "Handicap window %d, best of %d", app.state.handicap_config.window, app.state.handicap_config.best_of
    )
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Golf Stats API",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:5173"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from api.routers import rounds, stats
    app.include_router(rounds.router, prefix="/api/rounds", tags=["rounds"])
    app.include_router(stats.router, prefix="/api/stats", tags=["stats"])

    @app.get("/api/health")
    async def health():
        return {"status": "ok"}

    return app


app = create_app()
