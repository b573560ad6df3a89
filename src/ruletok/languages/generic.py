"""Rule sets for the non-English languages."""

from __future__ import annotations

import re
from collections.abc import Iterable

from ruletok.languages.base import BaseLanguagePack

_FRENCH_ELISION_RE = re.compile(
    r"(?i)(?<!\w)(?:jusqu|lorsqu|puisqu|quoiqu|qu|[cdjlmnst])['’](?=\w)"
)
_ITALIAN_ELISION_RE = re.compile(
    r"(?i)(?<!\w)(?:all|dall|dell|nell|sull|coll|quell|quest|un|[cdlmnstv])['’](?=\w)"
)
_DUTCH_ARTICLE_RE = re.compile(r"(?i)(?<!\w)['’][stn](?!\w)")


class GenericLanguagePack(BaseLanguagePack):
    """Language pack assembled from an abbreviation list and clitic patterns."""

    def __init__(
        self,
        *,
        code: str,
        name: str,
        abbreviations: Iterable[str] = (),
        clitics: tuple[re.Pattern[str], ...] = (),
    ) -> None:
        self.code = code
        self.name = name
        self.abbreviations = frozenset(item.casefold() for item in abbreviations)
        self._clitics = clitics

    def clitic_patterns(self) -> tuple[re.Pattern[str], ...]:
        return self._clitics


GERMAN_PACK = GenericLanguagePack(
    code="de",
    name="German",
    abbreviations="bzw ca dr evtl ggf hr fr nr str usw vgl z.b d.h u.a s.o prof abs jh".split(),
)
SPANISH_PACK = GenericLanguagePack(
    code="es",
    name="Spanish",
    abbreviations="sr sra srta dr dra ud uds etc pág núm av avda tel admón dpto".split(),
)
BASQUE_PACK = GenericLanguagePack(
    code="eu",
    name="Basque",
    abbreviations="adib etab or zk esk k jn and".split(),
)
FRENCH_PACK = GenericLanguagePack(
    code="fr",
    name="French",
    abbreviations="m mm mme mlle dr etc cf av bd p st ste".split(),
    clitics=(_FRENCH_ELISION_RE,),
)
GALICIAN_PACK = GenericLanguagePack(
    code="gl",
    name="Galician",
    abbreviations="sr sra dr dra etc páx núm av tel rúa".split(),
)
ITALIAN_PACK = GenericLanguagePack(
    code="it",
    name="Italian",
    abbreviations="sig sigg sig.ra dott prof ecc pag ing avv on".split(),
    clitics=(_ITALIAN_ELISION_RE,),
)
DUTCH_PACK = GenericLanguagePack(
    code="nl",
    name="Dutch",
    abbreviations="dhr mevr mw bijv enz nr blz dr ca o.a m.a.w".split(),
    clitics=(_DUTCH_ARTICLE_RE,),
)
POLISH_PACK = GenericLanguagePack(
    code="pl",
    name="Polish",
    abbreviations="np itd itp tj tzn dr prof mgr inż ul nr godz tys".split(),
)
