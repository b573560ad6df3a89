from pathlib import Path

from ruletok.core import annotate
from ruletok.io import to_json, to_oneline, to_plain, to_tabular, write_output
from ruletok.models import EvaluationResult, ProcessingConfig

TEXT = "Hello world. Bye."


def _document():
    return annotate(TEXT, ProcessingConfig(language="en"))


def test_to_tabular_with_offsets() -> None:
    assert to_tabular(_document()) == (
        "Hello\t0\t5\nworld\t6\t5\n.\t11\t1\n\nBye\t13\t3\n.\t16\t1\n"
    )


def test_to_tabular_without_offsets_matches_plain() -> None:
    document = _document()

    assert to_tabular(document, offsets=False) == "Hello\nworld\n.\n\nBye\n.\n"
    assert to_plain(document) == to_tabular(document, offsets=False)


def test_to_oneline() -> None:
    assert to_oneline(_document()) == "Hello world .\nBye .\n"


def test_to_json_and_write_output(tmp_path: Path) -> None:
    result = EvaluationResult(
        true_positive=1,
        false_positive=0,
        false_negative=1,
        precision=1.0,
        recall=0.5,
        f_score=2 / 3,
    )
    assert '"recall": 0.5' in to_json(result)

    output_path = tmp_path / "out" / "tokens.txt"
    write_output("Hello world .", output_path)
    assert output_path.read_text(encoding="utf-8") == "Hello world .\n"
