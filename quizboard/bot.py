"""Run the Telegram bot with long polling: ``python -m quizboard.bot``."""

from __future__ import annotations

import asyncio
import logging

from .core import BOT_TOKEN, WEBAPP_URL, configure_logging
from .services.telegram import TelegramBot

logger = logging.getLogger(__name__)


async def _run() -> None:
    bot = TelegramBot(BOT_TOKEN, WEBAPP_URL)
    try:
        logger.info("Bot started")
        await bot.poll()
    finally:
        await bot.aclose()


def main() -> None:
    configure_logging()
    if not BOT_TOKEN:
        logger.warning("BOT_TOKEN is empty, the bot will not be started")
        return
    asyncio.run(_run())


if __name__ == "__main__":
    main()
