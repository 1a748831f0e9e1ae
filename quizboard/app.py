"""FastAPI application factory and configuration."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from .api import register_routes
from .core import (
    ALLOWED_CORS_ORIGINS,
    BOT_TOKEN,
    HOST,
    PORT,
    RELOAD,
    WEBAPP_DIR,
    WEBAPP_URL,
    QuizboardError,
    configure_logging,
)
from .services.scoring import ScoringLedger
from .services.telegram import TelegramBot
from .storage import Store, build_store

logger = logging.getLogger(__name__)


async def quizboard_error_handler(request: Request, exc: QuizboardError) -> JSONResponse:
    return JSONResponse(exc.to_dict(), status_code=exc.status_code)


def create_app(
    store: Optional[Store] = None,
    bot: Optional[TelegramBot] = None,
) -> FastAPI:
    configure_logging()

    if bot is None and BOT_TOKEN:
        bot = TelegramBot(BOT_TOKEN, WEBAPP_URL)
    if bot is None:
        logger.info("BOT_TOKEN is empty, Telegram webhook disabled")

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        if app.state.bot is not None:
            await app.state.bot.aclose()

    app = FastAPI(title="Quizboard API", version="0.1.0", lifespan=lifespan)
    app.state.ledger = ScoringLedger(store if store is not None else build_store())
    app.state.bot = bot

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_CORS_ORIGINS,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )
    app.add_exception_handler(QuizboardError, quizboard_error_handler)

    register_routes(app)

    # Mounted last so the API routes take precedence over "/".
    if WEBAPP_DIR.is_dir():
        app.mount("/", StaticFiles(directory=WEBAPP_DIR, html=True), name="webapp")
    return app


def main() -> None:
    import uvicorn

    uvicorn.run(
        "quizboard.app:create_app", factory=True, host=HOST, port=PORT, reload=RELOAD
    )


if __name__ == "__main__":
    main()
