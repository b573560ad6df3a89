"""Annotation pipeline: tokenize, segment and render one document.

Every call builds its own engine from the explicit `ProcessingConfig`, so the
functions here keep no state between calls and can run concurrently.
"""

from __future__ import annotations

import re
from datetime import UTC, datetime

from ruletok import __version__
from ruletok.io import to_json, to_oneline, to_plain, to_tabular
from ruletok.languages import resolve_language_pack
from ruletok.models import (
    AnnotatedDocument,
    DocumentMetadata,
    ProcessingConfig,
    SentenceRecord,
    TokenRecord,
)
from ruletok.tokenize import Document, RuleBasedTokenizer, Sentence, Token, segment
from ruletok.tokenize.normalizer import resolve_table

_FIELD_RE = re.compile(r"\S+")


def process(raw_text: str, config: ProcessingConfig) -> str:
    """Tokenize `raw_text` and render it in `config.output_format`."""
    begin = datetime.now(UTC)
    document = annotate(raw_text, config)
    end = datetime.now(UTC)

    if config.output_format == "plain":
        return to_plain(document)
    if config.output_format == "tabular":
        return to_tabular(document, offsets=config.offsets)
    if config.output_format == "oneline":
        return to_oneline(document)
    return to_json(build_annotated_document(document, config, begin=begin, end=end))


def annotate(raw_text: str, config: ProcessingConfig) -> Document:
    """Produce the segmented document for `raw_text`."""
    if config.pretokenized:
        return document_from_tokenized(raw_text, config.language, config.normalization)

    engine = RuleBasedTokenizer(
        config.language,
        config.normalization,
        report_untokenizable=config.untokenizable == "report",
    )
    tokens = engine.tokenize(raw_text)
    sentences = segment(tokens, config.segment_on_linebreak)
    return Document(text=raw_text, language=engine.language_pack.code, sentences=tuple(sentences))


def document_from_tokenized(
    text: str,
    language: str,
    normalization: str = "default",
) -> Document:
    """Build a document from already-tokenized text.

    Each non-blank line is one sentence and whitespace separates tokens.
    Blank lines start a new paragraph.
    """
    pack = resolve_language_pack(language)
    table = resolve_table(normalization)
    sentences: list[Sentence] = []
    paragraph_id = 1
    blank_run = False
    offset = 0
    for line in text.splitlines(keepends=True):
        fields = list(_FIELD_RE.finditer(line))
        if not fields:
            blank_run = True
            offset += len(line)
            continue
        if blank_run and sentences:
            paragraph_id += 1
        blank_run = False

        sentence_id = len(sentences) + 1
        tokens = tuple(
            Token(
                surface=table.apply(match.group()),
                start_offset=offset + match.start(),
                length=match.end() - match.start(),
                paragraph_id=paragraph_id,
                sentence_id=sentence_id,
                trailing_linebreaks=1 if index == len(fields) - 1 else 0,
            )
            for index, match in enumerate(fields)
        )
        sentences.append(Sentence(sentence_id=sentence_id, tokens=tokens))
        offset += len(line)
    return Document(text=text, language=pack.code, sentences=tuple(sentences))


def build_annotated_document(
    document: Document,
    config: ProcessingConfig,
    *,
    begin: datetime,
    end: datetime,
) -> AnnotatedDocument:
    """Wrap a document with provenance metadata for structured output."""
    records: list[SentenceRecord] = []
    token_count = 0
    for sentence in document.sentences:
        tokens: list[TokenRecord] = []
        for token in sentence.tokens:
            token_count += 1
            tokens.append(
                TokenRecord(
                    id=f"w{token_count}",
                    text=token.surface,
                    offset=token.start_offset,
                    length=token.length,
                    sentence=sentence.sentence_id,
                    paragraph=token.paragraph_id,
                )
            )
        records.append(
            SentenceRecord(
                sentence_id=sentence.sentence_id,
                paragraph_id=sentence.paragraph_id,
                tokens=tokens,
            )
        )

    metadata = DocumentMetadata(
        language=document.language,
        producer=f"ruletok-{document.language}",
        version=__version__,
        normalization=config.normalization,
        segment_on_linebreak=config.segment_on_linebreak,
        pretokenized=config.pretokenized,
        begin_timestamp=begin,
        end_timestamp=end,
        token_count=token_count,
        sentence_count=len(records),
    )
    return AnnotatedDocument(metadata=metadata, raw=document.text, sentences=records)
