"""Readers for reference tokenizations."""

from __future__ import annotations

from pathlib import Path

from ruletok.io.text import read_text
from ruletok.models import ReferenceFormat


def parse_tokenline(text: str) -> list[str]:
    """One token per line; blank lines are skipped."""
    return [line.strip() for line in text.splitlines() if line.strip()]


def parse_sentenceline(text: str) -> list[str]:
    """One sentence per line with tokens separated by spaces."""
    tokens: list[str] = []
    for line in text.splitlines():
        tokens.extend(item for item in line.split(" ") if item)
    return tokens


def load_reference_tokens(path: str | Path, input_format: ReferenceFormat = "tokenline") -> list[str]:
    """Load reference tokens from a UTF-8 file in `input_format`."""
    text = read_text(path)
    if input_format == "tokenline":
        return parse_tokenline(text)
    if input_format == "sentenceline":
        return parse_sentenceline(text)
    raise ValueError(f"unknown reference format: {input_format!r}")
