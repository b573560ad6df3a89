"""HTTP API for ruletok."""

from __future__ import annotations

from datetime import UTC, datetime

from fastapi import FastAPI, HTTPException, Response

from ruletok import __version__
from ruletok.config import load_config
from ruletok.core import annotate, build_annotated_document, process
from ruletok.eval import evaluate
from ruletok.models import (
    AnnotatedDocument,
    EvaluateRequest,
    EvaluationResult,
    HealthResponse,
    TokenizeRequest,
)

_MEDIA_TYPES = {
    "plain": "text/plain; charset=utf-8",
    "tabular": "text/tab-separated-values; charset=utf-8",
    "oneline": "text/plain; charset=utf-8",
    "structured": "application/json",
}


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    app = FastAPI(
        title="ruletok",
        version=__version__,
        description="Rule-based multilingual tokenizer service API.",
    )
    config = load_config()

    @app.get("/health", response_model=HealthResponse, tags=["system"])
    def health() -> HealthResponse:
        return HealthResponse(status="ok", version=__version__, env=config.env)

    @app.post("/v1/tokenize", response_model=AnnotatedDocument, tags=["tokenization"])
    def tokenize(request: TokenizeRequest) -> AnnotatedDocument:
        begin = datetime.now(UTC)
        try:
            document = annotate(request.text, request.config)
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        return build_annotated_document(
            document,
            request.config,
            begin=begin,
            end=datetime.now(UTC),
        )

    @app.post("/v1/process", tags=["tokenization"])
    def process_text(request: TokenizeRequest) -> Response:
        try:
            output = process(request.text, request.config)
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        return Response(content=output, media_type=_MEDIA_TYPES[request.config.output_format])

    @app.post("/v1/evaluate", response_model=EvaluationResult, tags=["evaluation"])
    def evaluate_tokens(request: EvaluateRequest) -> EvaluationResult:
        window = config.eval_window if request.window is None else request.window
        return evaluate(request.reference, request.hypothesis, window=window)

    return app


app = create_app()
