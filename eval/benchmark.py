#!/usr/bin/env python3
"""Run tokenization benchmark and write evaluation artifacts.

Manifest format (JSONL):
{
  "id": "doc-001",
  "text": "Mr. Smith didn't go to N.Y.C.",
  "language": "en",
  "normalization": "default",
  "reference_tokens": ["Mr.", "Smith", "did", "n't", "go", "to", "N.Y.C."]
}
"""

from __future__ import annotations

import argparse
import csv
import json
import subprocess
import sys
import time
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from ruletok.core import annotate
from ruletok.eval import DEFAULT_LOOKAHEAD_WINDOW, combine_results, evaluate
from ruletok.models import EvaluationResult, ProcessingConfig


@dataclass(frozen=True)
class BenchmarkCase:
    case_id: str
    text: str
    language: str
    normalization: str
    reference_tokens: list[str]


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run ruletok benchmark and save artifacts.")
    parser.add_argument("--manifest", required=True, help="Path to benchmark JSONL manifest")
    parser.add_argument("--output-root", default="eval/runs", help="Artifact root directory")
    parser.add_argument(
        "--window",
        type=int,
        default=DEFAULT_LOOKAHEAD_WINDOW,
        help="Evaluator lookahead window",
    )
    return parser.parse_args()


def load_manifest(path: Path) -> list[BenchmarkCase]:
    cases: list[BenchmarkCase] = []
    for line_num, raw_line in enumerate(path.read_text(encoding="utf-8").splitlines(), start=1):
        line = raw_line.strip()
        if not line:
            continue
        payload = json.loads(line)
        cases.append(
            BenchmarkCase(
                case_id=str(payload.get("id") or f"line-{line_num}"),
                text=str(payload["text"]),
                language=str(payload.get("language", "en")),
                normalization=str(payload.get("normalization", "default")),
                reference_tokens=[str(token) for token in payload["reference_tokens"]],
            )
        )
    return cases


def run_benchmark(cases: list[BenchmarkCase], *, window: int) -> dict[str, Any]:
    results: list[EvaluationResult] = []
    rows: list[dict[str, Any]] = []
    total_runtime_sec = 0.0

    for case in cases:
        config = ProcessingConfig(language=case.language, normalization=case.normalization)
        started = time.perf_counter()
        document = annotate(case.text, config)
        elapsed = time.perf_counter() - started
        total_runtime_sec += elapsed

        hypothesis = [token.surface for token in document.tokens]
        result = evaluate(case.reference_tokens, hypothesis, window=window)
        results.append(result)
        rows.append(
            {
                "case_id": case.case_id,
                "language": case.language,
                "normalization": case.normalization,
                "runtime_sec": round(elapsed, 6),
                "reference_tokens": len(case.reference_tokens),
                "hypothesis_tokens": len(hypothesis),
                "sentences": len(document.sentences),
                "precision": round(result.precision, 4),
                "recall": round(result.recall, 4),
                "f_score": round(result.f_score, 4),
            }
        )

    total = combine_results(results)
    summary = {
        **total.model_dump(),
        "cases": len(cases),
        "window": window,
        "total_runtime_sec": round(total_runtime_sec, 4),
    }
    return {"summary": summary, "rows": rows}


def write_artifacts(output_root: Path, *, manifest: Path, result: dict[str, Any]) -> Path:
    timestamp = datetime.now(UTC).strftime("%Y%m%dT%H%M%SZ")
    git_sha = _git_sha()
    out_dir = output_root / f"{timestamp}_{git_sha[:8]}"
    out_dir.mkdir(parents=True, exist_ok=True)

    metrics_payload = {
        "generated_at": datetime.now(UTC).isoformat(),
        "git_sha": git_sha,
        "manifest_path": str(manifest),
        "summary": result["summary"],
    }
    (out_dir / "metrics.json").write_text(
        json.dumps(metrics_payload, indent=2, ensure_ascii=False) + "\n",
        encoding="utf-8",
    )

    with (out_dir / "per_document.csv").open("w", encoding="utf-8", newline="") as handle:
        if result["rows"]:
            writer = csv.DictWriter(handle, fieldnames=list(result["rows"][0].keys()))
            writer.writeheader()
            writer.writerows(result["rows"])

    (out_dir / "run.json").write_text(
        json.dumps({"command": " ".join([sys.executable, *sys.argv])}, indent=2) + "\n",
        encoding="utf-8",
    )
    return out_dir


def _git_sha() -> str:
    try:
        proc = subprocess.run(
            ["git", "rev-parse", "HEAD"],
            check=True,
            text=True,
            capture_output=True,
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
    return proc.stdout.strip()


def main() -> int:
    args = parse_args()
    manifest = Path(args.manifest)
    cases = load_manifest(manifest)
    result = run_benchmark(cases, window=args.window)
    out_dir = write_artifacts(Path(args.output_root), manifest=manifest, result=result)
    print(json.dumps(result["summary"], indent=2))
    print(f"Artifacts written to: {out_dir}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
