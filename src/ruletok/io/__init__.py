"""I/O utilities."""

from ruletok.io.export import to_json, to_oneline, to_plain, to_tabular, write_output
from ruletok.io.text import decode_text, read_text

__all__ = [
    "decode_text",
    "read_text",
    "to_json",
    "to_oneline",
    "to_plain",
    "to_tabular",
    "write_output",
]
