"""Output renderers."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel

from ruletok.tokenize import Document


def to_plain(document: Document) -> str:
    """One token per line, with a blank line after each sentence."""
    return to_tabular(document, offsets=False)


def to_tabular(document: Document, *, offsets: bool = True) -> str:
    """Tab-separated `surface start length` rows, blank line after each sentence."""
    blocks: list[str] = []
    for sentence in document.sentences:
        rows: list[str] = []
        for token in sentence.tokens:
            if offsets:
                rows.append(f"{token.surface}\t{token.start_offset}\t{token.length}\n")
            else:
                rows.append(f"{token.surface}\n")
        blocks.append("".join(rows))
    return "\n".join(blocks)


def to_oneline(document: Document) -> str:
    """One sentence per line with space-separated tokens."""
    return "".join(" ".join(sentence.surfaces()) + "\n" for sentence in document.sentences)


def to_json(model: BaseModel) -> str:
    """Serialize a response model to formatted JSON."""
    return model.model_dump_json(indent=2)


def write_output(content: str, output_path: str | Path) -> None:
    """Write rendered output to disk, creating parent directories."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    if content and not content.endswith("\n"):
        content += "\n"
    path.write_text(content, encoding="utf-8")
