"""Language pack registry and resolution."""

from __future__ import annotations

import re

from ruletok.errors import UnsupportedLanguageError
from ruletok.languages.base import BaseLanguagePack
from ruletok.languages.english import ENGLISH_PACK
from ruletok.languages.generic import (
    BASQUE_PACK,
    DUTCH_PACK,
    FRENCH_PACK,
    GALICIAN_PACK,
    GERMAN_PACK,
    ITALIAN_PACK,
    POLISH_PACK,
    SPANISH_PACK,
)

_TAG_RE = re.compile(r"^([a-z]{2,3})(?:[-_][a-z0-9]{2,8})*$")

_LANGUAGE_PACKS: dict[str, BaseLanguagePack] = {
    pack.code: pack
    for pack in (
        GERMAN_PACK,
        ENGLISH_PACK,
        SPANISH_PACK,
        BASQUE_PACK,
        FRENCH_PACK,
        GALICIAN_PACK,
        ITALIAN_PACK,
        DUTCH_PACK,
        POLISH_PACK,
    )
}


def supported_languages() -> list[str]:
    """Return the primary language codes that have a rule set."""
    return sorted(_LANGUAGE_PACKS)


def resolve_language_pack(language_code: str) -> BaseLanguagePack:
    """Resolve a language tag such as ``en`` or ``en-US`` to its pack."""
    match = _TAG_RE.match(language_code.strip().casefold())
    if match is None:
        raise UnsupportedLanguageError(language_code)
    pack = _LANGUAGE_PACKS.get(match.group(1))
    if pack is None:
        raise UnsupportedLanguageError(language_code)
    return pack
