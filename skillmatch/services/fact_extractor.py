"""Extract the verifiable facts of an achievement before it is sent for rewriting.

The resulting FactSet is the contract a rewrite is checked against: every
metric string found here must appear verbatim in the rewritten text.
"""

import math
import re

from skillmatch.models.schemas.profile import Achievement, Metric
from skillmatch.models.schemas.verification import FactSet

# Applied in order; every match of every pattern is kept.
METRIC_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\d+%"),  # 40%, 100%
    re.compile(r"\$[\d,]+[KMB]?"),  # $2M, $500K, $1,000
    re.compile(r"\d+[KMB]?\s*(?:users?|customers?|requests?|records?)", re.IGNORECASE),  # 500K users
    re.compile(r"\d+\s*-\s*\d+"),  # 5-10
    re.compile(r"\d+\+"),  # 50+
    re.compile(r"\d+x"),  # 2x, 10x
    re.compile(r"reduced?\s+.*?by\s+\d+%", re.IGNORECASE),  # reduced latency by 40%
    re.compile(r"increased?\s+.*?by\s+\d+%", re.IGNORECASE),  # increased revenue by 30%
    re.compile(r"\d+\s*(?:months?|years?|weeks?|days?)", re.IGNORECASE),  # 3 months
)

# Numbers only; the reduced/increased phrases depend on wording a rewrite may change
NUMERIC_METRIC_PATTERNS: tuple[re.Pattern[str], ...] = METRIC_PATTERNS[:6] + METRIC_PATTERNS[8:]

_ACTION_VERB = re.compile(
    r"^(Built|Developed|Implemented|Led|Managed|Architected|Created|Designed|Improved"
    r"|Reduced|Increased|Launched|Shipped|Deployed|Optimized|Automated|Collaborated)",
    re.IGNORECASE,
)

_CURRENCY_PREFIXES = frozenset("$€£¥")
# Multiplier suffixes read as part of the number: 2x, 500K
_GLUED_WORD_UNITS = frozenset({"x", "k", "m", "b"})


def _format_value(value: float) -> str:
    # inf and nan have no integer form
    if math.isfinite(value) and value == int(value):
        return str(int(value))
    return repr(value)


def format_metric(metric: Metric) -> str:
    """Render a recorded metric the way it would be written in a bullet.

    40 '%' -> '40%', 500 'users' -> '500 users', 2 'x' -> '2x', 1.5 '$' -> '$1.5'.
    """
    value = _format_value(metric.value)
    unit = metric.unit.strip()
    if not unit:
        return value
    if unit in _CURRENCY_PREFIXES:
        return f"{unit}{value}"
    if unit[0].isalnum() and unit.lower() not in _GLUED_WORD_UNITS:
        return f"{value} {unit}"
    return f"{value}{unit}"


def _dedupe(items: list[str]) -> list[str]:
    return list(dict.fromkeys(items))


def find_metrics(text: str, patterns: tuple[re.Pattern[str], ...] = METRIC_PATTERNS) -> list[str]:
    """Every match of every pattern in `text`, in pattern order, without repeats."""
    found: list[str] = []
    for pattern in patterns:
        found.extend(m.group(0) for m in pattern.finditer(text))
    return _dedupe(found)


def extract_facts(achievement: Achievement) -> FactSet:
    """Metrics, technologies and key facts a rewrite of `achievement` must keep."""
    text = achievement.bullet or ""
    metrics = find_metrics(text)
    key_facts: list[str] = []

    for metric in achievement.metrics:
        metrics.append(format_metric(metric))
        if metric.context:
            key_facts.append(metric.context)

    verb = _ACTION_VERB.match(text)
    if verb:
        key_facts.append(verb.group(0))

    for part in (achievement.action, achievement.object, achievement.result):
        if part:
            key_facts.append(part)

    return FactSet(
        metrics=_dedupe(metrics),
        technologies=_dedupe([k for k in achievement.keywords if k]),
        key_facts=_dedupe(key_facts),
    )
