"""Sentence segmentation over a token stream."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import replace
from enum import Enum

from ruletok.tokenize.base import SegmentationPolicy, Sentence, Token

_SENTENCE_FINAL_RE = re.compile(r"^[.!?…]+$")
_CLOSING_PUNCTUATION = frozenset(
    {"\"", "'", "”", "’", "»", ")", "]", "}", "''", "-RRB-", "-RSB-", "-RCB-", "*RRB*"}
)
_LINEBREAK_THRESHOLDS: dict[str, int | None] = {
    "none": None,
    "single": 1,
    "double": 2,
}


class _State(Enum):
    IN_SENTENCE = "in_sentence"
    AT_BOUNDARY = "at_boundary"


def is_sentence_final(token: Token) -> bool:
    """Return whether the token is terminal punctuation such as ``.`` or ``?!``."""
    return _SENTENCE_FINAL_RE.match(token.surface) is not None


def segment(tokens: Iterable[Token], policy: SegmentationPolicy | str = "none") -> list[Sentence]:
    """Group tokens into sentences.

    A sentence ends after terminal punctuation, after a token followed by
    enough linebreaks for `policy`, and at every paragraph change. Closing
    quotes and brackets directly after terminal punctuation stay in the
    sentence they close. Trailing tokens without a boundary are flushed as a
    final sentence.
    """
    try:
        threshold = _LINEBREAK_THRESHOLDS[policy]
    except KeyError as exc:
        raise ValueError(f"unknown segmentation policy: {policy!r}") from exc

    sentences: list[Sentence] = []
    pending: list[Token] = []
    state = _State.IN_SENTENCE

    def flush() -> None:
        if not pending:
            return
        sentence_id = len(sentences) + 1
        stamped = tuple(replace(token, sentence_id=sentence_id) for token in pending)
        sentences.append(Sentence(sentence_id=sentence_id, tokens=stamped))
        pending.clear()

    for token in tokens:
        if pending and token.paragraph_id != pending[-1].paragraph_id:
            state = _State.AT_BOUNDARY
        elif state is _State.AT_BOUNDARY and _closes_sentence(pending[-1], token):
            pending.append(token)
            continue
        if state is _State.AT_BOUNDARY:
            flush()
            state = _State.IN_SENTENCE

        pending.append(token)
        if is_sentence_final(token):
            state = _State.AT_BOUNDARY
        elif threshold is not None and token.trailing_linebreaks >= threshold:
            state = _State.AT_BOUNDARY

    flush()
    return sentences


def _closes_sentence(previous: Token, token: Token) -> bool:
    return previous.trailing_linebreaks == 0 and token.surface in _CLOSING_PUNCTUATION
