"""Rule-based tokenizer engine.

Tokenization runs as a fixed sequence of stages over `_Span` candidates:

1. protect: URLs, e-mail addresses, numbers, abbreviations and clitics are
   claimed as atomic spans, in that order of precedence;
2. split: unclaimed text is split into words and punctuation;
3. normalize: the normalization profile rewrites surface text;
4. untokenizable: characters outside the symbol tables are reported as
   tokens or folded into a neighbouring token.

Every stage takes and returns a list of spans ordered by offset, and a
protected span is never looked at again by a later rule. Offsets always
refer to the raw input text.
"""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Callable
from dataclasses import dataclass, replace

from ruletok.languages import BaseLanguagePack, resolve_language_pack
from ruletok.tokenize.base import NormalizationProfile, Token
from ruletok.tokenize.normalizer import resolve_table

_CHUNK_RE = re.compile(r"\S+")
_URL_RE = re.compile(
    r"(?i)(?<![\w@.])(?:https?://|ftp://|www\.)[\w\-.~:/?#\[\]@!$&'()*+,;=%]*[\w/#=&%~+\-]"
)
_EMAIL_RE = re.compile(r"[\w.+-]+@[\w-]+(?:\.[\w-]+)+")
_NUMBER_RE = re.compile(r"(?<![\w-])(?>\d+(?:[.,:/]\d+)*)(?!\w)")
_ABBREVIATION_RE = re.compile(r"(?<![\w.])([^\W\d_]+(?:\.[^\W\d_]+)*)\.")
_WORD = r"[\w\u0300-\u036f]+"
_UNIT_RE = re.compile(rf"{_WORD}(?:[-'’]{_WORD})*|\.{{2,}}|-{{2,}}|[!?]+|\S")
_UNTOKENIZABLE_CATEGORIES = frozenset({"Cc", "Cf", "Co", "Cs", "Cn"})


@dataclass(frozen=True)
class _Span:
    start: int
    end: int
    kind: str
    protected: bool = False
    surface: str = ""


@dataclass(frozen=True)
class _ProtectionRule:
    kind: str
    pattern: re.Pattern[str]
    accept: Callable[[re.Match[str]], bool] | None = None


class RuleBasedTokenizer:
    """Tokenizer bound to one language, normalization profile and policy.

    Instances hold only read-only rule tables, so one instance can be shared
    between threads.
    """

    def __init__(
        self,
        language: str,
        normalization: NormalizationProfile | str = "default",
        *,
        report_untokenizable: bool = False,
    ) -> None:
        self.language_pack = resolve_language_pack(language)
        self.normalization = resolve_table(normalization)
        self.report_untokenizable = report_untokenizable
        self._rules = _build_rules(self.language_pack)

    def tokenize(self, raw_text: str) -> list[Token]:
        """Split `raw_text` into tokens with exact character offsets."""
        spans = [
            _Span(start=match.start(), end=match.end(), kind="chunk")
            for match in _CHUNK_RE.finditer(raw_text)
        ]
        spans = self._protect(raw_text, spans)
        spans = _split(raw_text, spans)
        spans = [
            replace(span, surface=self.normalization.apply(raw_text[span.start : span.end]))
            for span in spans
        ]
        spans = _handle_untokenizable(spans, report=self.report_untokenizable)
        return _to_tokens(raw_text, spans)

    def _protect(self, text: str, spans: list[_Span]) -> list[_Span]:
        for rule in self._rules:
            claimed: list[_Span] = []
            for span in spans:
                if span.protected:
                    claimed.append(span)
                else:
                    claimed.extend(_claim(text, span, rule))
            spans = claimed
        return spans


def tokenize(
    raw_text: str,
    language: str,
    normalization: NormalizationProfile | str = "default",
    report_untokenizable: bool = False,
) -> list[Token]:
    """Tokenize `raw_text` with the rules for `language`."""
    engine = RuleBasedTokenizer(
        language,
        normalization,
        report_untokenizable=report_untokenizable,
    )
    return engine.tokenize(raw_text)


def _build_rules(pack: BaseLanguagePack) -> tuple[_ProtectionRule, ...]:
    rules = [
        _ProtectionRule("url", _URL_RE),
        _ProtectionRule("email", _EMAIL_RE),
        _ProtectionRule("number", _NUMBER_RE),
        _ProtectionRule(
            "abbreviation",
            _ABBREVIATION_RE,
            accept=lambda match: pack.is_abbreviation(match.group(1), _following(match)),
        ),
    ]
    rules.extend(_ProtectionRule("clitic", pattern) for pattern in pack.clitic_patterns())
    return tuple(rules)


def _claim(text: str, span: _Span, rule: _ProtectionRule) -> list[_Span]:
    output: list[_Span] = []
    cursor = span.start
    for match in rule.pattern.finditer(text, span.start, span.end):
        if match.end() == match.start():
            continue
        if rule.accept is not None and not rule.accept(match):
            continue
        if match.start() > cursor:
            output.append(_Span(start=cursor, end=match.start(), kind=span.kind))
        output.append(_Span(start=match.start(), end=match.end(), kind=rule.kind, protected=True))
        cursor = match.end()
    if cursor < span.end:
        output.append(_Span(start=cursor, end=span.end, kind=span.kind))
    return output


def _following(match: re.Match[str]) -> str:
    return match.string[match.end() : match.end() + 32]


def _split(text: str, spans: list[_Span]) -> list[_Span]:
    output: list[_Span] = []
    for span in spans:
        if span.protected:
            output.append(span)
            continue
        for match in _UNIT_RE.finditer(text, span.start, span.end):
            unit = match.group()
            if len(unit) == 1 and _is_untokenizable(unit):
                kind = "untokenizable"
            elif unit[0].isalnum() or unit[0] == "_":
                kind = "word"
            else:
                kind = "punct"
            output.append(_Span(start=match.start(), end=match.end(), kind=kind))
    return output


def _is_untokenizable(char: str) -> bool:
    return char == "\ufffd" or unicodedata.category(char) in _UNTOKENIZABLE_CATEGORIES


def _handle_untokenizable(spans: list[_Span], *, report: bool) -> list[_Span]:
    if report:
        return spans

    output: list[_Span] = []
    pending: tuple[int, int] | None = None
    for span in spans:
        if span.kind == "untokenizable":
            if pending is None and output and output[-1].end == span.start:
                output[-1] = replace(output[-1], end=span.end)
            elif pending is not None and pending[1] == span.start:
                pending = (pending[0], span.end)
            else:
                pending = (span.start, span.end)
            continue
        if pending is not None and pending[1] == span.start:
            span = replace(span, start=pending[0])
        pending = None
        output.append(span)
    return output


def _count_linebreaks(gap: str) -> int:
    return gap.count("\n") + gap.count("\r") - gap.count("\r\n")


def _to_tokens(text: str, spans: list[_Span]) -> list[Token]:
    tokens: list[Token] = []
    paragraph_id = 1
    for index, span in enumerate(spans):
        if index > 0 and _count_linebreaks(text[spans[index - 1].end : span.start]) >= 2:
            paragraph_id += 1
        next_start = spans[index + 1].start if index + 1 < len(spans) else len(text)
        tokens.append(
            Token(
                surface=span.surface,
                start_offset=span.start,
                length=span.end - span.start,
                paragraph_id=paragraph_id,
                trailing_linebreaks=_count_linebreaks(text[span.end : next_start]),
            )
        )
    return tokens
