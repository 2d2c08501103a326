"""Data-quality analysis: local fallback heuristics and model-output resolution."""

from __future__ import annotations

import json
import math
import re
import warnings
from dataclasses import dataclass
from typing import Any, Literal, Sequence, TypedDict

import pandas as pd

from hfassistant.types import CellValue, Record

FALLBACK_RECOMMENDATIONS = ["Remove empty rows", "Trim whitespace", "Handle missing values"]
SAMPLE_SIZE = 10

_EMAIL_RE = re.compile(r"\S+@\S+\.\S+")
# Loose on purpose: plain integers of 7+ digits also match.
_PHONE_RE = re.compile(r"[\+]?[1-9]?[\d\s\-\(\)]{7,15}")
_RELATIVE_DATE_WORDS = frozenset({"now", "today", "tomorrow", "yesterday"})
_DIGIT_RE = re.compile(r"\d")
_ADDRESS_RE = re.compile(
    r"\b\d{1,6}\s+(?:[A-Za-z0-9.'-]+\s+){0,4}"
    r"(?:street|st|avenue|ave|road|rd|boulevard|blvd|lane|ln|drive|dr|court|ct|way|place|pl)\b\.?",
    flags=re.IGNORECASE,
)


class ColumnReport(TypedDict, total=False):
    type: str
    issues: list[str]
    suggestions: list[str]


class PatternsDetected(TypedDict):
    emails: list[str]
    phones: list[str]
    dates: list[str]
    addresses: list[str]


class ColumnAnalysis(TypedDict):
    quality_issues: list[str]
    cleaning_recommendations: list[str]
    column_analysis: dict[str, ColumnReport]
    patterns_detected: PatternsDetected


@dataclass(frozen=True)
class ParsedAnalysis:
    """Analysis decoded from the model's JSON output."""

    data: Any
    source: Literal["model"] = "model"


@dataclass(frozen=True)
class FallbackAnalysis:
    """Analysis computed locally because the model output was not valid JSON."""

    data: ColumnAnalysis | dict
    raw_output: str = ""
    source: Literal["fallback"] = "fallback"


def looks_like_email(value: str) -> bool:
    return _EMAIL_RE.search(value) is not None


def looks_like_phone(value: str) -> bool:
    return _PHONE_RE.search(value) is not None


def looks_like_date(value: str) -> bool:
    # pandas also accepts relative keywords and bare month names
    if value.strip().lower() in _RELATIVE_DATE_WORDS or not _DIGIT_RE.search(value):
        return False
    # pandas warns when it has to guess a format per element
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", UserWarning)
        try:
            parsed = pd.to_datetime(value, errors="coerce")
        except (ValueError, TypeError, OverflowError):
            return False
    return not pd.isna(parsed)


def looks_like_address(value: str) -> bool:
    return _ADDRESS_RE.search(value) is not None


def _as_text(value: CellValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def sample_column(data: Sequence[Record], column: str, *, limit: int = SAMPLE_SIZE) -> list[str]:
    """Truthy values of `column` among the first `limit` rows, as strings."""
    values = [row.get(column) for row in data[:limit]]
    return [_as_text(v) for v in values if v and not (isinstance(v, float) and math.isnan(v))]


def generate_fallback_analysis(data: Sequence[Record]) -> ColumnAnalysis | dict:
    """
    Heuristic data-quality report used when the model cannot be reached or
    returns something that is not JSON.

    Columns are taken from the first record. Each column is classified from
    up to ten non-empty sampled values; a column can land in several lists.
    """
    if not data:
        return {}

    columns = list(data[0].keys()) if data[0] else []
    patterns: PatternsDetected = {"emails": [], "phones": [], "dates": [], "addresses": []}

    for col in columns:
        sample = sample_column(data, col)
        if any(looks_like_email(v) for v in sample):
            patterns["emails"].append(col)
        if any(looks_like_phone(v) for v in sample):
            patterns["phones"].append(col)
        if any(looks_like_date(v) for v in sample):
            patterns["dates"].append(col)
        if any(looks_like_address(v) for v in sample):
            patterns["addresses"].append(col)

    return {
        "quality_issues": [],
        "cleaning_recommendations": list(FALLBACK_RECOMMENDATIONS),
        "column_analysis": {},
        "patterns_detected": patterns,
    }


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant: {name}")


def resolve_analysis(generated_text: str | None, data: Sequence[Record]) -> ParsedAnalysis | FallbackAnalysis:
    """Decode model output as JSON, or fall back to the local heuristics."""
    raw = generated_text or "{}"
    try:
        return ParsedAnalysis(data=json.loads(raw, parse_constant=_reject_constant))
    except ValueError:
        return FallbackAnalysis(data=generate_fallback_analysis(data), raw_output=raw)
