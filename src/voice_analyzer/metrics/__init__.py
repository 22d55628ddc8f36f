"""
Statistics Primitives

Pure numeric helpers shared by every analyzer.
"""

from .basic import (
    Bucket,
    BucketRange,
    FrequencyEntry,
    coefficient_of_variation,
    distribution,
    frequency_map,
    mean,
    median,
    round_half_up,
    round_to,
    standard_deviation,
    top_n,
)
from .advanced import (
    CategorizedBucket,
    Cluster,
    bigram_uniqueness,
    burstiness,
    categorized_distribution,
    detect_clusters,
    entropy,
    hapax_legomena_count,
    moving_avg_type_token_ratio,
    type_token_ratio,
)
from .zscore import (
    Distinctiveness,
    ZScoreResult,
    calculate_z_scores,
    classify,
    interpret_z_score,
    z_score,
)

__all__ = [
    # Basic
    "Bucket",
    "BucketRange",
    "FrequencyEntry",
    "coefficient_of_variation",
    "distribution",
    "frequency_map",
    "mean",
    "median",
    "round_half_up",
    "round_to",
    "standard_deviation",
    "top_n",
    # Advanced
    "CategorizedBucket",
    "Cluster",
    "bigram_uniqueness",
    "burstiness",
    "categorized_distribution",
    "detect_clusters",
    "entropy",
    "hapax_legomena_count",
    "moving_avg_type_token_ratio",
    "type_token_ratio",
    # Z-scores
    "Distinctiveness",
    "ZScoreResult",
    "calculate_z_scores",
    "classify",
    "interpret_z_score",
    "z_score",
]
