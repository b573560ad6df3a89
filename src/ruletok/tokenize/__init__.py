"""Tokenization stages: engine, normalizer and sentence segmenter."""

from ruletok.tokenize.base import (
    NORMALIZATION_PROFILES,
    SEGMENTATION_POLICIES,
    Document,
    NormalizationProfile,
    SegmentationPolicy,
    Sentence,
    Token,
    UntokenizablePolicy,
)
from ruletok.tokenize.engine import RuleBasedTokenizer, tokenize
from ruletok.tokenize.normalizer import normalize
from ruletok.tokenize.segmenter import is_sentence_final, segment

__all__ = [
    "NORMALIZATION_PROFILES",
    "SEGMENTATION_POLICIES",
    "Document",
    "NormalizationProfile",
    "RuleBasedTokenizer",
    "SegmentationPolicy",
    "Sentence",
    "Token",
    "UntokenizablePolicy",
    "is_sentence_final",
    "normalize",
    "segment",
    "tokenize",
]
