"""English language pack."""

from __future__ import annotations

import re

from ruletok.languages.base import BaseLanguagePack

_SUFFIX_CLITIC_RE = re.compile(r"(?i)(?<=[\w.])(?:n['’]t|['’](?:s|re|ve|ll|d|m))(?!\w)")

_ABBREVIATIONS = frozenset(
    {
        "mr",
        "mrs",
        "ms",
        "dr",
        "prof",
        "sr",
        "jr",
        "st",
        "vs",
        "etc",
        "inc",
        "ltd",
        "co",
        "corp",
        "dept",
        "gen",
        "gov",
        "rev",
        "jan",
        "feb",
        "mar",
        "apr",
        "jun",
        "jul",
        "aug",
        "sep",
        "sept",
        "oct",
        "nov",
        "dec",
        "mt",
        "no",
        "fig",
        "approx",
        "ph.d",
        "e.g",
        "i.e",
    }
)


class EnglishLanguagePack(BaseLanguagePack):
    """English rules: PTB-style suffix clitics (`did n't`, `it 's`)."""

    code = "en"
    name = "English"
    abbreviations = _ABBREVIATIONS

    def clitic_patterns(self) -> tuple[re.Pattern[str], ...]:
        return (_SUFFIX_CLITIC_RE,)


ENGLISH_PACK = EnglishLanguagePack()
