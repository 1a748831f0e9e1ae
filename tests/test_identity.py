"""Tests for user key resolution."""

import json
from urllib.parse import urlencode

from quizboard.services.identity import (
    AnonymousIdentity,
    ClientIdentity,
    PlatformIdentity,
    classify_identity,
    generate_token,
    resolve_user_key,
)


class TestClassifyIdentity:
    def test_platform_id_wins_over_client_id(self):
        identity = classify_identity({"user": {"id": 42}}, "abc")
        assert identity == PlatformIdentity("42")
        assert identity.user_key == "platform:42"

    def test_raw_init_data_string(self):
        init_data = urlencode({"query_id": "q", "user": json.dumps({"id": 7, "first_name": "Ann"})})
        assert resolve_user_key(init_data, None) == "platform:7"

    def test_client_id_when_no_platform_user(self):
        identity = classify_identity({"user": {}}, " abc ")
        assert identity == ClientIdentity("abc")
        assert identity.user_key == "local:abc"

    def test_garbage_payload_is_ignored(self):
        assert resolve_user_key("user=%7Bnot-json", "c1") == "local:c1"
        assert resolve_user_key(["user"], "c1") == "local:c1"
        assert resolve_user_key({"user": {"id": True}}, "c1") == "local:c1"

    def test_anonymous_fallback(self):
        identity = classify_identity(None, None)
        assert isinstance(identity, AnonymousIdentity)
        assert identity.user_key.startswith("local:")
        assert len(identity.token) >= 8


def test_platform_key_is_deterministic():
    payload = {"user": {"id": 123456}}
    assert resolve_user_key(payload, None) == resolve_user_key(payload, "other") == "platform:123456"


def test_anonymous_keys_do_not_collide():
    keys = {resolve_user_key(None, None) for _ in range(200)}
    assert len(keys) == 200


def test_generated_token_length():
    assert len(generate_token()) >= 8
