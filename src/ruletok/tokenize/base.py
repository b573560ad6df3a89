"""Token, sentence and document types shared by the tokenizer stages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

NormalizationProfile = Literal["default", "alpino", "ancora", "ctag", "ptb", "tiger", "tutpenn"]
SegmentationPolicy = Literal["none", "single", "double"]
UntokenizablePolicy = Literal["report", "suppress"]

NORMALIZATION_PROFILES: tuple[NormalizationProfile, ...] = (
    "default",
    "alpino",
    "ancora",
    "ctag",
    "ptb",
    "tiger",
    "tutpenn",
)
SEGMENTATION_POLICIES: tuple[SegmentationPolicy, ...] = ("none", "single", "double")


@dataclass(frozen=True)
class Token:
    """A token with its exact position in the raw input.

    `sentence_id` is 0 until the segmenter assigns sentences.
    `trailing_linebreaks` counts the linebreaks between this token and the next.
    """

    surface: str
    start_offset: int
    length: int
    paragraph_id: int = 1
    sentence_id: int = 0
    trailing_linebreaks: int = 0

    @property
    def end_offset(self) -> int:
        return self.start_offset + self.length


@dataclass(frozen=True)
class Sentence:
    """Ordered, non-empty run of tokens sharing one sentence id."""

    sentence_id: int
    tokens: tuple[Token, ...]

    @property
    def paragraph_id(self) -> int:
        return self.tokens[0].paragraph_id

    def surfaces(self) -> list[str]:
        return [token.surface for token in self.tokens]


@dataclass(frozen=True)
class Document:
    """Segmented tokens together with the text they came from."""

    text: str
    language: str
    sentences: tuple[Sentence, ...]

    @property
    def tokens(self) -> list[Token]:
        return [token for sentence in self.sentences for token in sentence.tokens]
