"""Telegram webhook intake."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx
from fastapi import APIRouter, Depends, Header, HTTPException

from ...core import TELEGRAM_WEBHOOK_SECRET
from ...services.telegram import TelegramBot
from ..deps import get_bot

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/telegram", tags=["telegram"])


@router.post("/webhook")
async def telegram_webhook(
    update: Dict[str, Any],
    bot: Optional[TelegramBot] = Depends(get_bot),
    secret_token: Optional[str] = Header(default=None, alias="X-Telegram-Bot-Api-Secret-Token"),
):
    """Receive one update pushed by Telegram."""

    if bot is None:
        raise HTTPException(503, "Bot is not configured")
    if TELEGRAM_WEBHOOK_SECRET and secret_token != TELEGRAM_WEBHOOK_SECRET:
        raise HTTPException(403, "Invalid secret token")

    # Telegram redelivers updates that get a non-2xx answer, so failures stop here.
    try:
        replied = await bot.handle_update(update)
    except (httpx.HTTPError, RuntimeError) as exc:
        logger.error("Failed to handle update %s: %s", update.get("update_id"), exc)
        replied = False
    return {"ok": True, "replied": replied}


__all__ = ["router"]
