"""
Advanced Statistics

Sequence and diversity measures used to tell bursty, human-looking
rhythm apart from uniform, machine-looking rhythm.
"""

from collections import Counter
from collections.abc import Hashable, Sequence
from typing import Optional
import math

from pydantic import BaseModel, ConfigDict, Field

from .basic import BucketRange, in_range, mean, standard_deviation


class Cluster(BaseModel):
    """A contiguous run of similar values."""

    model_config = ConfigDict(frozen=True)

    start_index: int
    end_index: int
    size: int
    values: list[float]
    mean: float
    min: float
    max: float

    @classmethod
    def from_run(cls, values: list[float], start_index: int) -> "Cluster":
        return cls(
            start_index=start_index,
            end_index=start_index + len(values) - 1,
            size=len(values),
            values=list(values),
            mean=mean(values),
            min=min(values),
            max=max(values),
        )


class CategorizedBucket(BaseModel):
    """Histogram bucket that also keeps a few of the items that fell in it."""

    model_config = ConfigDict(frozen=True)

    label: str
    min: float
    max: Optional[float] = None
    count: int
    percentage: float
    examples: list[str] = Field(default_factory=list)


def burstiness(values: Sequence[float]) -> float:
    """
    Burstiness coefficient B = (sigma - mu) / (sigma + mu).

    -1 is perfectly uniform, +1 extremely bursty. Sequences shorter than
    two values, or with sigma + mu == 0, score 0.
    """
    if len(values) < 2:
        return 0.0
    avg = mean(values)
    std = standard_deviation(values)
    if std + avg == 0:
        return 0.0
    return (std - avg) / (std + avg)


def detect_clusters(
    values: Sequence[float],
    threshold: float = 5,
    min_size: int = 2,
) -> list[Cluster]:
    """
    Group consecutive values whose step difference is within threshold.

    A step larger than the threshold closes the current run; runs shorter
    than min_size are dropped. The final run is flushed at the end.
    """
    if len(values) < min_size or not values:
        return []

    clusters: list[Cluster] = []
    current = [values[0]]
    start = 0

    for i in range(1, len(values)):
        if abs(values[i] - values[i - 1]) <= threshold:
            current.append(values[i])
            continue
        if len(current) >= min_size:
            clusters.append(Cluster.from_run(current, start))
        current = [values[i]]
        start = i

    if len(current) >= min_size:
        clusters.append(Cluster.from_run(current, start))

    return clusters


def entropy(items: Sequence[Hashable]) -> float:
    """Shannon entropy in bits over a categorical sequence."""
    if not items:
        return 0.0
    total = len(items)
    result = 0.0
    for count in Counter(items).values():
        p = count / total
        result -= p * math.log2(p)
    return result


def type_token_ratio(tokens: Sequence[str]) -> float:
    if not tokens:
        return 0.0
    return len({t.lower() for t in tokens}) / len(tokens)


def moving_avg_type_token_ratio(tokens: Sequence[str], window_size: int = 100) -> float:
    """MATTR: mean TTR over every window of window_size tokens."""
    if len(tokens) < window_size:
        return type_token_ratio(tokens)
    ratios = [
        type_token_ratio(tokens[i:i + window_size])
        for i in range(len(tokens) - window_size + 1)
    ]
    return mean(ratios)


def hapax_legomena_count(tokens: Sequence[str]) -> int:
    """Number of words (case-folded) that occur exactly once."""
    counts = Counter(t.lower() for t in tokens)
    return sum(1 for c in counts.values() if c == 1)


def bigram_uniqueness(tokens: Sequence[str]) -> float:
    """Distinct adjacent word pairs / all adjacent word pairs."""
    if len(tokens) < 2:
        return 0.0
    lowered = [t.lower() for t in tokens]
    bigrams = list(zip(lowered, lowered[1:]))
    return len(set(bigrams)) / len(bigrams)


def categorized_distribution(
    items: Sequence[tuple[float, str]],
    buckets: Sequence[BucketRange],
    max_examples: int = 5,
) -> list[CategorizedBucket]:
    """
    Bucket (value, item) pairs and keep the first few items per bucket.

    Percentages are relative to the number of pairs supplied.
    """
    total = len(items)
    result = []
    for label, low, high in buckets:
        matching = [item for value, item in items if in_range(value, low, high)]
        result.append(CategorizedBucket(
            label=label,
            min=low,
            max=high,
            count=len(matching),
            percentage=(len(matching) / total * 100) if total else 0.0,
            examples=matching[:max_examples],
        ))
    return result
