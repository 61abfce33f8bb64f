"""GitHub-style heading slugs with per-document uniqueness.

Slugs follow the rules GitHub uses for README anchors: lower-case the text,
drop everything that is not a letter, mark, number, space, hyphen or
underscore, then turn each space into a hyphen. Repeats get a numeric
suffix: ``intro``, ``intro-1``, ``intro-2``.
"""
from __future__ import annotations

import unicodedata

_KEPT_PUNCTUATION = frozenset({" ", "-", "_"})


def _keep(ch: str) -> bool:
    if ch in _KEPT_PUNCTUATION:
        return True
    return unicodedata.category(ch)[0] in ("L", "M", "N")


def slugify(text: str) -> str:
    """Stateless slug for *text* (no uniqueness tracking)."""
    cleaned = "".join(ch for ch in (text or "").lower() if _keep(ch))
    return cleaned.replace(" ", "-")


class Slugger:
    """Generates slugs that are unique within one document scope.

    Pre-existing identifiers handed to :meth:`resolve` are returned verbatim
    and are not registered, so a clash between an author-written ``id`` and a
    generated slug is left as the author wrote it.
    """

    __slots__ = ("_occurrences",)

    def __init__(self) -> None:
        self._occurrences: dict[str, int] = {}

    def slug(self, text: str) -> str:
        """Return a slug for *text* not handed out before by this slugger."""
        original = slugify(text)
        result = original
        while result in self._occurrences:
            self._occurrences[original] += 1
            result = f"{original}-{self._occurrences[original]}"
        self._occurrences[result] = 0
        return result

    def resolve(self, existing: str | None, text: str) -> str:
        """Prefer *existing* when non-empty, otherwise generate a slug."""
        if existing:
            return existing
        return self.slug(text)

    def reset(self) -> None:
        """Forget every slug generated so far."""
        self._occurrences.clear()
