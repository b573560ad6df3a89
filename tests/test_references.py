from pathlib import Path

import pytest

from ruletok.errors import EncodingError
from ruletok.eval import load_reference_tokens, parse_sentenceline, parse_tokenline


def test_parse_tokenline_skips_blank_lines() -> None:
    assert parse_tokenline("The\ncat\n\nsat\n.\n") == ["The", "cat", "sat", "."]


def test_parse_sentenceline_flattens_sentences() -> None:
    text = "Mr. Smith did n't go .\n\nHe  stayed .\n"

    assert parse_sentenceline(text) == ["Mr.", "Smith", "did", "n't", "go", ".", "He", "stayed", "."]


def test_load_reference_tokens_formats(tmp_path: Path) -> None:
    tokenline = tmp_path / "ref.tok"
    tokenline.write_text("The\ncat\n", encoding="utf-8")
    sentenceline = tmp_path / "ref.sent"
    sentenceline.write_text("The cat\nsat .\n", encoding="utf-8")

    assert load_reference_tokens(tokenline) == ["The", "cat"]
    assert load_reference_tokens(sentenceline, "sentenceline") == ["The", "cat", "sat", "."]


def test_load_reference_tokens_rejects_unknown_format(tmp_path: Path) -> None:
    path = tmp_path / "ref.tok"
    path.write_text("The\n", encoding="utf-8")

    with pytest.raises(ValueError, match="reference format"):
        load_reference_tokens(path, "conll")  # type: ignore[arg-type]


def test_load_reference_tokens_rejects_invalid_utf8(tmp_path: Path) -> None:
    path = tmp_path / "ref.tok"
    path.write_bytes(b"caf\xe9\n")

    with pytest.raises(EncodingError):
        load_reference_tokens(path)
