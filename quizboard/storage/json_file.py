"""JSON file store using the ``db.json`` layout of the original service.

Files written by the original service use camelCase keys (``userId``,
``showInRating``) and millisecond ``ts`` values; both are accepted on read.
This store always writes snake_case keys and ISO timestamps.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, List

from pydantic import ValidationError

from ..core.errors import StoreUnavailable
from ..core.time import from_millis
from ..models import StoreDocument
from .base import empty_document

logger = logging.getLogger(__name__)

_LEGACY_KEYS = {"userId": "user_id", "showInRating": "show_in_rating"}


def _rename_legacy(record: Dict[str, Any]) -> Dict[str, Any]:
    renamed = {_LEGACY_KEYS.get(key, key): value for key, value in record.items()}
    ts = renamed.get("ts")
    if isinstance(ts, (int, float)) and not isinstance(ts, bool):
        renamed["ts"] = from_millis(ts)
    return renamed


def _with_keys(mapping: Any) -> Dict[str, Any]:
    """Fill each entry's ``id`` from its mapping key; older files omit it."""

    if not isinstance(mapping, dict):
        return {}
    keyed: Dict[str, Any] = {}
    for key, value in mapping.items():
        if isinstance(value, dict):
            keyed[key] = {**_rename_legacy(value), "id": value.get("id") or key}
    return keyed


def _records(items: Any) -> List[Any]:
    if not isinstance(items, list):
        return []
    return [_rename_legacy(item) if isinstance(item, dict) else item for item in items]


class JsonFileStore:
    """Stores the whole document as one pretty-printed JSON file."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def read(self) -> StoreDocument:
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            logger.info("Store file %s not found, starting empty", self.path)
            return empty_document()
        except (OSError, ValueError) as exc:
            logger.warning("Store file %s unreadable, starting empty: %s", self.path, exc)
            return StoreDocument(degraded=True)

        if not isinstance(raw, dict):
            logger.warning("Store file %s is not a JSON object, starting empty", self.path)
            return StoreDocument(degraded=True)

        try:
            return StoreDocument.model_validate(
                {
                    "users": _with_keys(raw.get("users")),
                    "tasks": _with_keys(raw.get("tasks")),
                    "answers": _records(raw.get("answers")),
                    "banned": raw.get("banned") or [],
                }
            )
        except ValidationError as exc:
            logger.warning("Store file %s is malformed, starting empty: %s", self.path, exc)
            return StoreDocument(degraded=True)

    def write(self, document: StoreDocument) -> None:
        payload = json.dumps(
            document.model_dump(
                mode="json", exclude={"degraded": True, "answers": {"__all__": {"id"}}}
            ),
            ensure_ascii=False,
            indent=2,
        )
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(payload)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            logger.error("Failed to write store file %s", self.path, exc_info=True)
            raise StoreUnavailable() from exc


__all__ = ["JsonFileStore"]
