"""Alignment-based precision/recall/F-score for token sequences."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from ruletok.models import EvaluationResult

DEFAULT_LOOKAHEAD_WINDOW = 8
"""How many tokens ahead, on each side, a mismatch may be resynchronized."""


def evaluate(
    reference: Sequence[str],
    hypothesis: Sequence[str],
    *,
    window: int = DEFAULT_LOOKAHEAD_WINDOW,
) -> EvaluationResult:
    """Score `hypothesis` tokens against `reference` tokens.

    Both sequences are walked with one cursor each. Equal tokens count as a
    true positive. On a mismatch the closest matching pair within `window`
    tokens is searched; skipped reference tokens are false negatives and
    skipped hypothesis tokens are false positives. Without a match in the
    window, the side with fewer remaining tokens advances by one (both when
    equal). Leftovers at the end are false negatives or false positives.
    """
    if window < 1:
        raise ValueError(f"window must be >= 1, got {window}")

    true_positive = 0
    false_positive = 0
    false_negative = 0
    ref_pos = 0
    hyp_pos = 0

    while ref_pos < len(reference) and hyp_pos < len(hypothesis):
        if reference[ref_pos] == hypothesis[hyp_pos]:
            true_positive += 1
            ref_pos += 1
            hyp_pos += 1
            continue

        skip = _find_resync(reference, hypothesis, ref_pos, hyp_pos, window)
        if skip is not None:
            ref_skip, hyp_skip = skip
            false_negative += ref_skip
            false_positive += hyp_skip
            true_positive += 1
            ref_pos += ref_skip + 1
            hyp_pos += hyp_skip + 1
            continue

        ref_left = len(reference) - ref_pos
        hyp_left = len(hypothesis) - hyp_pos
        if ref_left <= hyp_left:
            false_negative += 1
            ref_pos += 1
        if hyp_left <= ref_left:
            false_positive += 1
            hyp_pos += 1

    false_negative += len(reference) - ref_pos
    false_positive += len(hypothesis) - hyp_pos
    return build_result(true_positive, false_positive, false_negative)


def build_result(true_positive: int, false_positive: int, false_negative: int) -> EvaluationResult:
    """Derive precision, recall and F-score from raw counts."""
    precision = _ratio(true_positive, true_positive + false_positive)
    recall = _ratio(true_positive, true_positive + false_negative)
    f_score = _ratio(2 * precision * recall, precision + recall)
    return EvaluationResult(
        true_positive=true_positive,
        false_positive=false_positive,
        false_negative=false_negative,
        precision=precision,
        recall=recall,
        f_score=f_score,
    )


def combine_results(results: Iterable[EvaluationResult]) -> EvaluationResult:
    """Micro-average several evaluation runs by summing their counts."""
    true_positive = 0
    false_positive = 0
    false_negative = 0
    for result in results:
        true_positive += result.true_positive
        false_positive += result.false_positive
        false_negative += result.false_negative
    return build_result(true_positive, false_positive, false_negative)


def _find_resync(
    reference: Sequence[str],
    hypothesis: Sequence[str],
    ref_pos: int,
    hyp_pos: int,
    window: int,
) -> tuple[int, int] | None:
    ref_span = min(window, len(reference) - ref_pos)
    hyp_span = min(window, len(hypothesis) - hyp_pos)
    for distance in range(1, ref_span + hyp_span - 1):
        for ref_skip in range(max(0, distance - hyp_span + 1), min(distance, ref_span - 1) + 1):
            hyp_skip = distance - ref_skip
            if reference[ref_pos + ref_skip] == hypothesis[hyp_pos + hyp_skip]:
                return ref_skip, hyp_skip
    return None


def _ratio(numerator: float, denominator: float) -> float:
    if denominator <= 0:
        return 0.0
    return numerator / denominator
