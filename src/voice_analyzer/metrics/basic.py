"""
Basic Statistics

Descriptive statistics shared by every analyzer. All functions accept
empty input and return zero values instead of raising.
"""

from collections import Counter
from collections.abc import Hashable, Iterable, Sequence
from typing import Optional
import math
import statistics

from pydantic import BaseModel, ConfigDict


class Bucket(BaseModel):
    """One bucket of a histogram. ``max`` of None means unbounded."""

    model_config = ConfigDict(frozen=True)

    label: str
    min: float
    max: Optional[float] = None
    count: int
    percentage: float


class FrequencyEntry(BaseModel):
    """A token with its count and share of the table total."""

    model_config = ConfigDict(frozen=True)

    item: str
    count: int
    percentage: float


# (label, min, max) - max is exclusive, None for open-ended
BucketRange = tuple[str, float, Optional[float]]


def round_half_up(value: float) -> int:
    """Nearest integer with halves rounded up: 2.5 -> 3, -2.5 -> -2."""
    return math.floor(value + 0.5)


def round_to(value: float, places: int) -> float:
    """round_half_up at a number of decimal places."""
    scale = 10 ** places
    return round_half_up(value * scale) / scale


def mean(values: Sequence[float]) -> float:
    return float(statistics.mean(values)) if values else 0.0


def median(values: Sequence[float]) -> float:
    return float(statistics.median(values)) if values else 0.0


def standard_deviation(values: Sequence[float]) -> float:
    """Population standard deviation (divides by n, not n - 1)."""
    return statistics.pstdev(values) if values else 0.0


def coefficient_of_variation(values: Sequence[float]) -> float:
    """stddev / mean, 0 when the mean is 0."""
    avg = mean(values)
    return standard_deviation(values) / avg if avg > 0 else 0.0


def in_range(value: float, low: float, high: Optional[float]) -> bool:
    return value >= low and (high is None or value < high)


def distribution(values: Sequence[float], ranges: Iterable[BucketRange]) -> list[Bucket]:
    """
    Histogram of values over caller-supplied [min, max) ranges.

    Percentages are relative to the full input length, so values falling
    outside every range make the percentages sum to less than 100.
    """
    total = len(values)
    buckets = []
    for label, low, high in ranges:
        count = sum(1 for v in values if in_range(v, low, high))
        buckets.append(Bucket(
            label=label,
            min=low,
            max=high,
            count=count,
            percentage=(count / total * 100) if total else 0.0,
        ))
    return buckets


def frequency_map(items: Iterable[Hashable]) -> Counter:
    """Count occurrences of each token."""
    return Counter(items)


def top_n(counts: Counter | dict, n: int) -> list[FrequencyEntry]:
    """
    The n most frequent entries by descending count.

    Ties keep first-seen order. Percentages are relative to the sum of the
    whole table, not just the returned slice.
    """
    total = sum(counts.values())
    ranked = sorted(counts.items(), key=lambda kv: kv[1], reverse=True)[:max(n, 0)]
    return [
        FrequencyEntry(
            item=str(item),
            count=count,
            percentage=(count / total * 100) if total else 0.0,
        )
        for item, count in ranked
    ]
