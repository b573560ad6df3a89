"""Language rule sets for the tokenizer."""

from ruletok.languages.base import BaseLanguagePack
from ruletok.languages.registry import resolve_language_pack, supported_languages

__all__ = ["BaseLanguagePack", "resolve_language_pack", "supported_languages"]
