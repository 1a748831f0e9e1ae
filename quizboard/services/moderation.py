"""Display-name moderation."""

from __future__ import annotations

from typing import Iterable, Optional

from better_profanity import Profanity

from ..core.errors import MissingName, ProfaneName

NAME_MAX_LENGTH = 40


class NameModerator:
    """Profanity check over the library's baseline list plus extra terms.

    Build one per request from the store's ``banned`` list; the filter is
    never shared or mutated across requests.
    """

    def __init__(self, banned_terms: Iterable[str] = ()) -> None:
        self.extra_terms = [term.strip().lower() for term in banned_terms if term and term.strip()]
        self._filter = Profanity()
        self._filter.load_censor_words()
        if self.extra_terms:
            self._filter.add_censor_words(self.extra_terms)

    def is_allowed(self, name: str) -> bool:
        return not self._filter.contains_profanity(name)

    def validate(self, name: Optional[str]) -> str:
        """Return the cleaned name or raise ``MissingName`` / ``ProfaneName``."""

        cleaned = (name or "").strip()[:NAME_MAX_LENGTH]
        if not cleaned:
            raise MissingName()
        if not self.is_allowed(cleaned):
            raise ProfaneName()
        return cleaned


def check_name(name: str, banned_terms: Iterable[str] = ()) -> bool:
    return NameModerator(banned_terms).is_allowed(name)


def validate_display_name(name: Optional[str], banned_terms: Iterable[str] = ()) -> str:
    return NameModerator(banned_terms).validate(name)


__all__ = [
    "NAME_MAX_LENGTH",
    "NameModerator",
    "check_name",
    "validate_display_name",
]
