import io
import json
import sys
from pathlib import Path

from ruletok.cli import main


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_cli_no_args_shows_help(capsys) -> None:
    exit_code = main([])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert "usage: ruletok" in captured.out


def test_cli_tok_returns_json(tmp_path: Path, capsys) -> None:
    source = _write(tmp_path / "in.txt", "Mr. Smith didn't go to N.Y.C.")

    exit_code = main(["tok", str(source), "-l", "en"])
    captured = capsys.readouterr()

    assert exit_code == 0
    payload = json.loads(captured.out)
    assert payload["metadata"]["language"] == "en"
    assert payload["metadata"]["token_count"] == 7


def test_cli_tok_reads_stdin(monkeypatch, capsys) -> None:
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"Title\nBody text.")))

    exit_code = main(
        ["tok", "-l", "en", "-f", "oneline", "--segment-on-linebreak", "single"]
    )
    captured = capsys.readouterr()

    assert exit_code == 0
    assert captured.out == "Title\nBody text .\n"


def test_cli_tok_tabular_with_normalization(tmp_path: Path, capsys) -> None:
    source = _write(tmp_path / "in.txt", "(a/b)")

    exit_code = main(["tok", str(source), "-l", "en", "-n", "ptb", "-f", "tabular"])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert captured.out.splitlines() == [
        "-LRB-\t0\t1",
        "a\t1\t1",
        "\\/\t2\t1",
        "b\t3\t1",
        "-RRB-\t4\t1",
    ]


def test_cli_tok_writes_output_file(tmp_path: Path, capsys) -> None:
    source = _write(tmp_path / "in.txt", "Hello world.")
    output_path = tmp_path / "out" / "tokens.txt"

    exit_code = main(
        ["tok", str(source), "-l", "en", "-f", "plain", "-o", str(output_path)]
    )
    captured = capsys.readouterr()

    assert exit_code == 0
    assert output_path.read_text(encoding="utf-8") == "Hello\nworld\n.\n"
    assert "Wrote plain output" in captured.out


def test_cli_tok_pretokenized(tmp_path: Path, capsys) -> None:
    source = _write(tmp_path / "in.txt", "do n't stop\n")

    exit_code = main(["tok", str(source), "-l", "en", "--notok", "-f", "oneline"])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert captured.out == "do n't stop\n"


def test_cli_eval_reports_scores(tmp_path: Path, capsys) -> None:
    source = _write(tmp_path / "in.txt", "The cat sat.")
    reference = _write(tmp_path / "ref.txt", "The cat sat .\n")

    exit_code = main(
        ["eval", str(source), "-l", "en", "-r", str(reference), "-i", "sentenceline"]
    )
    captured = capsys.readouterr()

    assert exit_code == 0
    payload = json.loads(captured.out)
    assert payload["true_positive"] == 4
    assert payload["f_score"] == 1.0


def test_cli_unsupported_language_fails(tmp_path: Path, capsys) -> None:
    source = _write(tmp_path / "in.txt", "Hello")

    exit_code = main(["tok", str(source), "-l", "tlh"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "unsupported language" in captured.err


def test_cli_invalid_utf8_fails(tmp_path: Path, capsys) -> None:
    source = tmp_path / "in.txt"
    source.write_bytes(b"caf\xe9")

    exit_code = main(["tok", str(source), "-l", "en"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "not valid UTF-8" in captured.err


def test_cli_missing_input_file(tmp_path: Path, capsys) -> None:
    exit_code = main(["tok", str(tmp_path / "missing.txt"), "-l", "en"])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "error:" in captured.err


def test_cli_verbose_prints_options(tmp_path: Path, capsys) -> None:
    source = _write(tmp_path / "in.txt", "Hi.")

    exit_code = main(["-v", "tok", str(source), "-l", "en", "-f", "oneline"])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert "CLI options" in captured.err
    assert captured.out == "Hi .\n"


def test_cli_eval_rejects_zero_window(tmp_path: Path, capsys) -> None:
    source = _write(tmp_path / "in.txt", "The cat sat.")
    reference = _write(tmp_path / "ref.txt", "The\ncat\nsat\n.\n")

    exit_code = main(["eval", str(source), "-l", "en", "-r", str(reference), "--window", "0"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "window must be >= 1" in captured.err
