"""Language pack base types."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod


class BaseLanguagePack(ABC):
    """Abstract interface for language-specific tokenization rules."""

    code: str
    name: str
    abbreviations: frozenset[str]

    @abstractmethod
    def clitic_patterns(self) -> tuple[re.Pattern[str], ...]:
        """Patterns matching clitics that must be split off as their own token."""

    def is_abbreviation(self, body: str, following: str = "") -> bool:
        """Return whether `body` followed by a period is one token.

        `body` is the text before the final period, for example ``"Mr"`` or
        ``"N.Y.C"``. `following` is the text after the period, used to tell a
        single-letter initial (``"C. elegans"``) from a sentence that ends in
        one (``"So do I. Then"``).
        """
        if body.casefold() in self.abbreviations:
            return True
        parts = body.split(".")
        if len(parts) >= 2 and all(len(part) == 1 for part in parts):
            return True
        if len(body) == 1 and body.isupper():
            next_word = following.lstrip()
            return bool(next_word) and next_word[0].islower()
        return False
