"""Evaluation utilities."""

from ruletok.eval.metrics import (
    DEFAULT_LOOKAHEAD_WINDOW,
    build_result,
    combine_results,
    evaluate,
)
from ruletok.eval.references import load_reference_tokens, parse_sentenceline, parse_tokenline

__all__ = [
    "DEFAULT_LOOKAHEAD_WINDOW",
    "build_result",
    "combine_results",
    "evaluate",
    "load_reference_tokens",
    "parse_sentenceline",
    "parse_tokenline",
]
