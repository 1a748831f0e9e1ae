"""Tests for display-name moderation."""

import pytest

from quizboard.core.errors import MissingName, ProfaneName
from quizboard.services.moderation import (
    NAME_MAX_LENGTH,
    NameModerator,
    check_name,
    validate_display_name,
)


def test_clean_name_allowed():
    assert check_name("Анна", [])
    assert check_name("Quiz Fan", ["badguy"])


def test_baseline_profanity_rejected():
    assert not check_name("shit happens", [])


def test_custom_terms_case_insensitive():
    assert not check_name("Злая РЕДИСКА", ["Редиска"])
    assert not check_name("BadGuy", ["badguy"])


def test_banned_terms_not_mutated():
    terms = ["Редиска"]
    NameModerator(terms).is_allowed("редиска")
    assert terms == ["Редиска"]


def test_moderators_do_not_share_terms():
    NameModerator(["badguy"])
    assert NameModerator([]).is_allowed("badguy")


def test_validate_missing_name():
    with pytest.raises(MissingName):
        validate_display_name("   ", [])
    with pytest.raises(MissingName):
        validate_display_name(None, [])


def test_validate_profane_name():
    with pytest.raises(ProfaneName):
        validate_display_name("badguy", ["badguy"])


def test_validate_trims_and_truncates():
    assert validate_display_name("  Анна  ", []) == "Анна"
    assert len(validate_display_name("x" * 100, [])) == NAME_MAX_LENGTH
