"""Decoding of raw input bytes."""

from __future__ import annotations

from pathlib import Path

from ruletok.errors import EncodingError


def decode_text(data: bytes) -> str:
    """Decode UTF-8 input, raising `EncodingError` on invalid bytes."""
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise EncodingError(exc) from exc


def read_text(path: str | Path) -> str:
    """Read a UTF-8 text file."""
    return decode_text(Path(path).read_bytes())
