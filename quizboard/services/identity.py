"""Resolve the user key a submission is recorded under.

A submission can be identified three ways, tried in this order:

* a Telegram user id carried by the mini-app's ``initData`` payload,
* an id the client generated earlier and kept in local storage,
* nothing at all, in which case a fresh random id is minted.

Each case is its own small dataclass so callers can match on it; the
resulting key is namespaced by source (``platform:`` or ``local:``).
"""

from __future__ import annotations

import json
import secrets
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union
from urllib.parse import parse_qs

PLATFORM_PREFIX = "platform"
LOCAL_PREFIX = "local"

# 6 random bytes encode to 8 URL-safe characters.
_TOKEN_BYTES = 6


@dataclass(frozen=True)
class PlatformIdentity:
    user_id: str

    @property
    def user_key(self) -> str:
        return f"{PLATFORM_PREFIX}:{self.user_id}"


@dataclass(frozen=True)
class ClientIdentity:
    client_id: str

    @property
    def user_key(self) -> str:
        return f"{LOCAL_PREFIX}:{self.client_id}"


@dataclass(frozen=True)
class AnonymousIdentity:
    token: str

    @property
    def user_key(self) -> str:
        return f"{LOCAL_PREFIX}:{self.token}"


Identity = Union[PlatformIdentity, ClientIdentity, AnonymousIdentity]


def generate_token() -> str:
    return secrets.token_urlsafe(_TOKEN_BYTES)


def _user_from_init_data(raw: str) -> Optional[Mapping[str, Any]]:
    """Extract the ``user`` object from a raw ``initData`` query string."""

    values = parse_qs(raw).get("user")
    if not values:
        return None
    try:
        user = json.loads(values[0])
    except ValueError:
        return None
    return user if isinstance(user, Mapping) else None


def platform_user_id(identity_payload: Any) -> Optional[str]:
    """Return the platform user id in ``identity_payload``, if any.

    The payload is either the mapping the mini-app exposes as
    ``initDataUnsafe`` or the raw ``initData`` string. The signature is not
    checked.
    """

    if isinstance(identity_payload, str):
        user = _user_from_init_data(identity_payload)
    elif isinstance(identity_payload, Mapping):
        user = identity_payload.get("user")
    else:
        return None

    if not isinstance(user, Mapping):
        return None
    user_id = user.get("id")
    if user_id is None or isinstance(user_id, bool) or str(user_id).strip() == "":
        return None
    return str(user_id).strip()


def classify_identity(identity_payload: Any, client_id: Optional[str]) -> Identity:
    platform_id = platform_user_id(identity_payload)
    if platform_id:
        return PlatformIdentity(platform_id)
    if client_id is not None and str(client_id).strip():
        return ClientIdentity(str(client_id).strip())
    return AnonymousIdentity(generate_token())


def resolve_user_key(identity_payload: Any, client_id: Optional[str]) -> str:
    return classify_identity(identity_payload, client_id).user_key


__all__ = [
    "AnonymousIdentity",
    "ClientIdentity",
    "Identity",
    "LOCAL_PREFIX",
    "PLATFORM_PREFIX",
    "PlatformIdentity",
    "classify_identity",
    "generate_token",
    "platform_user_id",
    "resolve_user_key",
]
