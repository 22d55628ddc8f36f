"""
Clustering and Burstiness

People write in bursts: a run of similar-length sentences, then an
abrupt shift. Generated text tends toward a uniform length. This module
measures that difference, along with how varied paragraph openings are.
"""

import re
from collections import Counter
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from voice_analyzer.config import Thresholds
from voice_analyzer.corpus.splitter import (
    first_sentence,
    split_into_paragraphs,
    split_into_sentences,
    word_count,
)
from voice_analyzer.metrics import (
    CategorizedBucket,
    Cluster,
    burstiness,
    categorized_distribution,
    detect_clusters,
    entropy,
    mean,
    standard_deviation,
)
from voice_analyzer.models import Report
from voice_analyzer.patterns import Rule, first_match, rules


LENGTH_CATEGORIES = (
    ("Very Short (1-7)", 0, 8),
    ("Short (8-14)", 8, 15),
    ("Medium (15-24)", 15, 25),
    ("Long (25-39)", 25, 40),
    ("Very Long (40+)", 40, None),
)

EXAMPLES_PER_CATEGORY = 3
SENTENCE_EXCERPT = 80
OPENING_EXCERPT = 100
EXAMPLES_PER_OPENING = 5
FRAGMENT_MAX_WORDS = 4

# First match wins; "fragment" and "statement" are decided by length after these
OPENING_RULES = rules(
    ("question", r"\?"),
    ("conjunction", r"^(but|and|or|so)\s"),
    ("personal", r"^(i|we|you)\s"),
    ("article", r"^(the|a|this|that)\s"),
)


class SentenceLengthClusters(BaseModel):
    model_config = ConfigDict(frozen=True)

    clusters: list[Cluster] = Field(default_factory=list)
    avg_cluster_size: float
    burstiness: float  # -1 uniform .. +1 extremely bursty
    distribution: list[CategorizedBucket] = Field(default_factory=list)
    guidance: str


class ParagraphOpenings(BaseModel):
    model_config = ConfigDict(frozen=True)

    types: dict[str, int] = Field(default_factory=dict)
    entropy: float
    examples: dict[str, list[str]] = Field(default_factory=dict)
    guidance: str


class LengthVariation(BaseModel):
    model_config = ConfigDict(frozen=True)

    mean: float
    std_dev: float
    coefficient_of_variation: float
    guidance: str


class ClusteringReport(Report):
    report_name = "clustering-patterns"

    sentence_length_clusters: SentenceLengthClusters
    paragraph_openings: ParagraphOpenings
    length_variation: LengthVariation


def classify_opening(sentence: str, table: tuple[Rule, ...] = OPENING_RULES) -> str:
    label = first_match(table, sentence)
    if label:
        return label
    return "fragment" if word_count(sentence) <= FRAGMENT_MAX_WORDS else "statement"


def clustering_guidance(coefficient: float, cluster_count: int, total: int, thresholds: Thresholds) -> str:
    if coefficient < thresholds.burstiness_uniform:
        return (
            f"CRITICAL RISK: Burstiness {coefficient:.2f} indicates UNIFORM distribution (AI pattern).\n\n"
            "This is the #1 detection signal. Writing shows consistent length with no clustering.\n\n"
            "REQUIRED CHANGES:\n"
            "- Write 2-3 consecutive SHORT sentences (8-12 words)\n"
            "- Follow with 1-2 LONG sentences (25-40 words)\n"
            "- Sprinkle in fragments (<5 words) for emphasis\n"
            "- Never maintain same length for 4+ consecutive sentences\n\n"
            "AVOID: Meeting the \"average\" repeatedly. Go deliberately HIGH and LOW."
        )
    if coefficient < thresholds.burstiness_natural:
        return (
            f"MODERATE RISK: Burstiness {coefficient:.2f} shows limited clustering.\n\n"
            f"Found {cluster_count} clusters in {total} sentences.\n\n"
            "IMPROVEMENTS:\n"
            "- Create more length clusters (bursts of 2-3 similar sentences)\n"
            "- Follow clusters with dramatic length shifts\n"
            "- Add occasional fragments and very long sentences\n"
            "- Think in \"short burst, long development, short punch\" patterns"
        )
    return (
        f"SAFE: Burstiness {coefficient:.2f} shows natural clustering (human pattern).\n\n"
        f"Found {cluster_count} clusters. Writing exhibits natural length variation with clustering.\n\n"
        "MAINTAIN:\n"
        "- Continue burst patterns (groups of similar length)\n"
        "- Keep dramatic shifts between clusters\n"
        "- Preserve mix of fragments, short, and long sentences"
    )


def opening_guidance(value: float, thresholds: Thresholds) -> str:
    if value < thresholds.opening_entropy_low:
        return (
            f"LOW DIVERSITY (entropy {value:.2f}): Paragraph openings are repetitive. "
            "AI typically over-uses standard statements.\n\n"
            "VARY OPENINGS:\n"
            "- Start with questions\n"
            "- Use conjunctions (But, And, So)\n"
            "- Begin with fragments\n"
            "- Lead with personal statements (I, We)\n"
            "- Mix article starts (The, A, This)"
        )
    if value < thresholds.opening_entropy_moderate:
        return f"MODERATE DIVERSITY (entropy {value:.2f}): Acceptable range but could vary more."
    return f"HIGH DIVERSITY (entropy {value:.2f}): Natural variety in paragraph openings. Strong human pattern."


def variation_guidance(cv: float, std_dev: float, thresholds: Thresholds) -> str:
    if cv < thresholds.variation_low:
        return (
            f"LOW VARIATION (CV {cv:.2f}): Length distribution is too tight. AI avoids extremes.\n\n"
            f"Standard deviation: {std_dev:.1f} words.\n\n"
            "INCREASE VARIATION:\n"
            "- Use more very short sentences (<8 words)\n"
            "- Use more very long sentences (>30 words)\n"
            "- Aim for SD of 12+ words"
        )
    if cv < thresholds.variation_moderate:
        return f"MODERATE VARIATION (CV {cv:.2f}): Acceptable but could push extremes more."
    return f"HIGH VARIATION (CV {cv:.2f}): Strong natural variation. SD: {std_dev:.1f} words."


def _paragraph_openings(paragraphs: list[str], thresholds: Thresholds) -> ParagraphOpenings:
    types: Counter = Counter()
    examples: dict[str, list[str]] = {}
    labels: list[str] = []

    for paragraph in paragraphs:
        opening = first_sentence(paragraph)
        text = re.sub(r"[.!?]+$", "", opening).strip()
        if not text:
            continue
        label = classify_opening(opening)
        labels.append(label)
        types[label] += 1
        bucket = examples.setdefault(label, [])
        if len(bucket) < EXAMPLES_PER_OPENING:
            bucket.append(text[:OPENING_EXCERPT])

    value = entropy(labels)
    return ParagraphOpenings(
        types=dict(types),
        entropy=value,
        examples=examples,
        guidance=opening_guidance(value, thresholds),
    )


def analyze(text: str, thresholds: Optional[Thresholds] = None) -> ClusteringReport:
    thresholds = thresholds or Thresholds()
    sentences = split_into_sentences(text)
    lengths = [word_count(s) for s in sentences]

    clusters = detect_clusters(lengths, thresholds.cluster_threshold, thresholds.cluster_min_size)
    coefficient = burstiness(lengths)
    avg = mean(lengths)
    std = standard_deviation(lengths)
    cv = std / avg if avg > 0 else 0.0

    return ClusteringReport(
        sentence_length_clusters=SentenceLengthClusters(
            clusters=clusters,
            avg_cluster_size=mean([c.size for c in clusters]),
            burstiness=coefficient,
            distribution=categorized_distribution(
                [(n, s[:SENTENCE_EXCERPT]) for n, s in zip(lengths, sentences)],
                LENGTH_CATEGORIES,
                EXAMPLES_PER_CATEGORY,
            ),
            guidance=clustering_guidance(coefficient, len(clusters), len(lengths), thresholds),
        ),
        paragraph_openings=_paragraph_openings(split_into_paragraphs(text), thresholds),
        length_variation=LengthVariation(
            mean=avg,
            std_dev=std,
            coefficient_of_variation=cv,
            guidance=variation_guidance(cv, std, thresholds),
        ),
    )
