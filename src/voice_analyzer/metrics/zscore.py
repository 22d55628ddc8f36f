"""
Z-Score Helpers

Compare observed frequencies against a reference baseline.
"""

from collections.abc import Mapping
from enum import Enum

from pydantic import BaseModel, ConfigDict


class Distinctiveness(str, Enum):
    """Five-way classification of a z-score."""

    HIGHLY_DISTINCTIVE = "highly_distinctive"
    DISTINCTIVE = "distinctive"
    NORMAL = "normal"
    AVOIDED = "avoided"
    HIGHLY_AVOIDED = "highly_avoided"


class ZScoreResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: float
    ref_mean: float
    ref_std_dev: float
    z_score: float
    interpretation: str


def z_score(value: float, reference_mean: float, reference_std_dev: float) -> float:
    """
    (value - mean) / stddev.

    Returns 0 when the reference stddev is 0, so a baseline with no
    variance always reads as normal usage.
    """
    if reference_std_dev == 0:
        return 0.0
    return (value - reference_mean) / reference_std_dev


def interpret_z_score(z: float) -> str:
    """Human-readable label for a z-score."""
    if z > 2:
        return "Highly distinctive (much more than typical)"
    if z > 1:
        return "Distinctive (more than typical)"
    if z > 0.5:
        return "Slightly more than typical"
    if z > -0.5:
        return "Normal range"
    if z > -1:
        return "Slightly less than typical"
    if z > -2:
        return "Avoided (less than typical)"
    return "Highly avoided (much less than typical)"


def classify(z: float, distinctive: float = 1.0, highly_distinctive: float = 2.0) -> Distinctiveness:
    """Bucket a z-score into the five stylometric classes."""
    if z > highly_distinctive:
        return Distinctiveness.HIGHLY_DISTINCTIVE
    if z > distinctive:
        return Distinctiveness.DISTINCTIVE
    if z >= -distinctive:
        return Distinctiveness.NORMAL
    if z >= -highly_distinctive:
        return Distinctiveness.AVOIDED
    return Distinctiveness.HIGHLY_AVOIDED


def calculate_z_scores(
    values: Mapping[str, float],
    reference: Mapping[str, tuple[float, float]],
) -> dict[str, ZScoreResult]:
    """
    Z-score every key that appears in both values and reference.

    reference maps key -> (mean, stddev).
    """
    results = {}
    for key, value in values.items():
        if key not in reference:
            continue
        ref_mean, ref_std = reference[key]
        z = z_score(value, ref_mean, ref_std)
        results[key] = ZScoreResult(
            value=value,
            ref_mean=ref_mean,
            ref_std_dev=ref_std,
            z_score=z,
            interpretation=interpret_z_score(z),
        )
    return results
