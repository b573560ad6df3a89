"""Error types raised by the tokenizer core."""

from __future__ import annotations


class RuletokError(ValueError):
    """Base class for invalid-input errors surfaced to callers."""


class UnsupportedLanguageError(RuletokError):
    """Raised when a language tag has no rule set."""

    def __init__(self, language: str) -> None:
        super().__init__(f"unsupported language: {language!r}")
        self.language = language


class EncodingError(RuletokError):
    """Raised when input bytes are not valid UTF-8."""

    def __init__(self, reason: UnicodeDecodeError) -> None:
        super().__init__(f"input is not valid UTF-8: {reason.reason} at byte {reason.start}")
        self.reason = reason
