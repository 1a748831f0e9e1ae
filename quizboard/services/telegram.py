"""Telegram Bot API client for the ``/start`` front door."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, List, Optional

import httpx

logger = logging.getLogger(__name__)

API_BASE = "https://api.telegram.org"

START_TEXT = "Нажмите кнопку, чтобы открыть приложение ответов."
OPEN_BUTTON_TEXT = "Открыть приложение"


def start_keyboard(webapp_url: str) -> Dict[str, Any]:
    """Inline keyboard with a single URL button; it works in channels as well as DMs."""

    return {"inline_keyboard": [[{"text": OPEN_BUTTON_TEXT, "url": webapp_url}]]}


def is_start_command(text: Optional[str]) -> bool:
    if not text:
        return False
    command = text.split()[0]
    # "/start@quiz_bot" in group chats
    return command.split("@", 1)[0] == "/start"


class TelegramBot:
    def __init__(
        self,
        token: str,
        webapp_url: str,
        *,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.token = token
        self.webapp_url = webapp_url
        self._client = client or httpx.AsyncClient(timeout=30)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def call(self, method: str, payload: Dict[str, Any]) -> Any:
        response = await self._client.post(
            f"{API_BASE}/bot{self.token}/{method}", json=payload
        )
        response.raise_for_status()
        body = response.json()
        if not body.get("ok"):
            raise RuntimeError(f"Telegram {method} failed: {body.get('description')}")
        return body.get("result")

    async def send_start_reply(self, chat_id: int) -> Any:
        return await self.call(
            "sendMessage",
            {
                "chat_id": chat_id,
                "text": START_TEXT,
                "reply_markup": start_keyboard(self.webapp_url),
            },
        )

    async def handle_update(self, update: Dict[str, Any]) -> bool:
        """React to one update. Returns True when a reply was sent."""

        message = update.get("message") or update.get("channel_post") or {}
        if not is_start_command(message.get("text")):
            return False
        chat_id = (message.get("chat") or {}).get("id")
        if chat_id is None:
            return False
        await self.send_start_reply(chat_id)
        logger.info("Sent start reply to chat %s", chat_id)
        return True

    async def get_updates(self, offset: Optional[int], timeout: int = 25) -> List[Dict[str, Any]]:
        payload: Dict[str, Any] = {"timeout": timeout, "allowed_updates": ["message", "channel_post"]}
        if offset is not None:
            payload["offset"] = offset
        return await self.call("getUpdates", payload) or []

    async def poll(
        self, *, max_batches: Optional[int] = None, retry_delay: float = 5.0
    ) -> None:
        """Long-poll ``getUpdates`` and answer each update in turn."""

        offset: Optional[int] = None
        batches = 0
        while max_batches is None or batches < max_batches:
            batches += 1
            try:
                updates = await self.get_updates(offset)
            except httpx.HTTPError as exc:
                logger.warning("getUpdates failed: %s", exc)
                await asyncio.sleep(retry_delay)
                continue
            for update in updates:
                offset = update["update_id"] + 1
                try:
                    await self.handle_update(update)
                except (httpx.HTTPError, RuntimeError) as exc:
                    logger.error("Failed to handle update %s: %s", update["update_id"], exc)


__all__ = [
    "API_BASE",
    "OPEN_BUTTON_TEXT",
    "START_TEXT",
    "TelegramBot",
    "is_start_command",
    "start_keyboard",
]
