"""Shared data models."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from ruletok.tokenize.base import NormalizationProfile, SegmentationPolicy, UntokenizablePolicy

OutputFormat = Literal["plain", "tabular", "oneline", "structured"]
ReferenceFormat = Literal["tokenline", "sentenceline"]


class HealthResponse(BaseModel):
    """Response payload for the API health endpoint."""

    status: Literal["ok"]
    version: str
    env: str


class ProcessingConfig(BaseModel):
    """Options for one tokenization run, shared by the CLI, API and socket server."""

    model_config = ConfigDict(frozen=True)

    language: str = Field(min_length=2)
    normalization: NormalizationProfile = "default"
    untokenizable: UntokenizablePolicy = "suppress"
    segment_on_linebreak: SegmentationPolicy = "none"
    output_format: OutputFormat = "structured"
    offsets: bool = True
    pretokenized: bool = False


class TokenizeRequest(BaseModel):
    """HTTP request payload: raw text plus processing options."""

    text: str
    config: ProcessingConfig


class EvaluateRequest(BaseModel):
    """HTTP request payload for scoring a hypothesis tokenization."""

    reference: list[str]
    hypothesis: list[str]
    window: int | None = Field(default=None, ge=1)


class EvaluationResult(BaseModel):
    """Alignment-based token scores."""

    model_config = ConfigDict(frozen=True)

    true_positive: int = Field(ge=0)
    false_positive: int = Field(ge=0)
    false_negative: int = Field(ge=0)
    precision: float = Field(ge=0.0)
    recall: float = Field(ge=0.0)
    f_score: float = Field(ge=0.0)


class TokenRecord(BaseModel):
    """Token entry of the structured output."""

    id: str
    text: str
    offset: int = Field(ge=0)
    length: int = Field(ge=0)
    sentence: int = Field(ge=1)
    paragraph: int = Field(ge=1)


class SentenceRecord(BaseModel):
    """Sentence grouping of the structured output."""

    sentence_id: int = Field(ge=1)
    paragraph_id: int = Field(ge=1)
    tokens: list[TokenRecord]


class DocumentMetadata(BaseModel):
    """Provenance of a structured document."""

    language: str
    producer: str
    version: str
    normalization: NormalizationProfile
    segment_on_linebreak: SegmentationPolicy
    pretokenized: bool
    begin_timestamp: datetime
    end_timestamp: datetime
    token_count: int = Field(ge=0)
    sentence_count: int = Field(ge=0)


class AnnotatedDocument(BaseModel):
    """Structured output: raw text plus the token layer grouped by sentence."""

    metadata: DocumentMetadata
    raw: str
    sentences: list[SentenceRecord]
