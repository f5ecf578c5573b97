"""Highlight Metrics — detects quantified impact phrases in experience highlights.

Invariants:
    - Detection order is fixed: percentage, growth, performance, efficiency, team
    - A phrase may match more than one kind ("30% reduction" is a percentage and an efficiency)
    - Pure: same highlight in, same metrics out
"""

import re
from dataclasses import dataclass

from resume_site.core.domain_types import MetricKind

MAX_BADGES_PER_ROLE = 3

_PATTERNS: tuple[tuple[MetricKind, re.Pattern[str]], ...] = (
    (MetricKind.PERCENTAGE, re.compile(r"\d+%")),
    (MetricKind.GROWTH, re.compile(r"\d+%\s*YoY", re.IGNORECASE)),
    (MetricKind.PERFORMANCE, re.compile(r"\d+[,\d]*\s*requests?/min", re.IGNORECASE)),
    (MetricKind.EFFICIENCY, re.compile(r"\d+%\s*reduction", re.IGNORECASE)),
    (MetricKind.TEAM, re.compile(r"\d+\s*engineers?", re.IGNORECASE)),
)


@dataclass(frozen=True)
class Metric:
    text: str
    kind: MetricKind


def extract_metrics(highlight: str) -> list[Metric]:
    metrics: list[Metric] = []
    for kind, pattern in _PATTERNS:
        metrics.extend(Metric(text=m, kind=kind) for m in pattern.findall(highlight))
    return metrics


def role_badges(highlights: tuple[str, ...] | list[str]) -> list[Metric]:
    """Metrics across all highlights of one role, first three only."""
    badges = [m for h in highlights for m in extract_metrics(h)]
    return badges[:MAX_BADGES_PER_ROLE]
