"""Corpus-style normalization of token surface text."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from ruletok.tokenize.base import NormalizationProfile

_PENN_BRACKETS = {
    "(": "-LRB-",
    ")": "-RRB-",
    "[": "-LSB-",
    "]": "-RSB-",
    "{": "-LCB-",
    "}": "-RCB-",
}
_PENN_ESCAPES = (
    re.compile(r"(?<!\\)(/)"),
    re.compile(r"(?<!\\)(\*)"),
)
_STRAIGHT_DOUBLE_QUOTES = {
    "“": '"',
    "”": '"',
    "„": '"',
    "«": '"',
    "»": '"',
}


@dataclass(frozen=True)
class NormalizationTable:
    """Rewrite table for one corpus convention.

    Applied in order: character translation, whole-token replacement, then
    backslash escapes. Replacement outputs never contain a table key, which
    keeps normalization idempotent.
    """

    name: str
    charmap: dict[int, str] = field(default_factory=dict)
    token_map: dict[str, str] = field(default_factory=dict)
    escapes: tuple[re.Pattern[str], ...] = ()

    def apply(self, surface: str) -> str:
        if self.charmap:
            surface = surface.translate(self.charmap)
        surface = self.token_map.get(surface, surface)
        for pattern in self.escapes:
            surface = pattern.sub(r"\\\1", surface)
        return surface


_TABLES: dict[str, NormalizationTable] = {
    "default": NormalizationTable(name="default"),
    "ptb": NormalizationTable(
        name="ptb",
        charmap=str.maketrans(
            {
                "“": "``",
                "”": "''",
                "‘": "`",
                "’": "'",
                "…": "...",
                "–": "--",
                "—": "--",
            }
        ),
        token_map=dict(_PENN_BRACKETS),
        escapes=_PENN_ESCAPES,
    ),
    "tutpenn": NormalizationTable(
        name="tutpenn",
        charmap=str.maketrans({**_STRAIGHT_DOUBLE_QUOTES, "…": "..."}),
        token_map=dict(_PENN_BRACKETS),
    ),
    "ctag": NormalizationTable(
        name="ctag",
        charmap=str.maketrans(_STRAIGHT_DOUBLE_QUOTES),
        token_map=dict(_PENN_BRACKETS),
    ),
    "ancora": NormalizationTable(
        name="ancora",
        charmap=str.maketrans({**_STRAIGHT_DOUBLE_QUOTES, "…": "..."}),
    ),
    "alpino": NormalizationTable(
        name="alpino",
        charmap=str.maketrans({"“": '"', "”": '"', "„": '"', "‘": "'", "’": "'", "…": "..."}),
    ),
    "tiger": NormalizationTable(
        name="tiger",
        charmap=str.maketrans({"“": '"', "”": '"', "„": '"'}),
        token_map={"(": "*LRB*", ")": "*RRB*"},
    ),
}


def resolve_table(profile: NormalizationProfile | str) -> NormalizationTable:
    """Return the rewrite table for a profile name."""
    try:
        return _TABLES[profile]
    except KeyError as exc:
        raise ValueError(f"unknown normalization profile: {profile!r}") from exc


def normalize(surface: str, profile: NormalizationProfile | str = "default") -> str:
    """Normalize one token surface according to `profile`."""
    return resolve_table(profile).apply(surface)
