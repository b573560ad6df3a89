"""Annotation pipeline."""

from ruletok.core.pipeline import (
    annotate,
    build_annotated_document,
    document_from_tokenized,
    process,
)

__all__ = ["annotate", "build_annotated_document", "document_from_tokenized", "process"]
