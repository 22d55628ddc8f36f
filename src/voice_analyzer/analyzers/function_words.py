"""
Function Word Stylometry

Frequencies of the reference function words per 1000 words, z-scored
against general English. Function words are used unconsciously and do
not depend on topic, which makes them a stable authorship signal.
"""

from collections import Counter
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from voice_analyzer.config import Thresholds
from voice_analyzer.corpus.splitter import normalize_words
from voice_analyzer.metrics import Distinctiveness, ZScoreResult, calculate_z_scores, classify
from voice_analyzer.models import Report
from voice_analyzer.reference import FunctionWordReference, default_reference


class FunctionWordFrequency(BaseModel):
    model_config = ConfigDict(frozen=True)

    word: str
    count: int
    frequency: float  # per 1000 words
    category: str
    tier: int
    british_marker: bool = False


class DistinctivenessSummary(BaseModel):
    """How many z-scored words fall in each class."""

    model_config = ConfigDict(frozen=True)

    highly_distinctive: int = 0
    distinctive: int = 0
    normal: int = 0
    avoided: int = 0
    highly_avoided: int = 0


class FunctionWordReport(Report):
    report_name = "function-words"

    total_words: int
    function_word_count: int
    function_word_percentage: float
    frequencies: list[FunctionWordFrequency] = Field(default_factory=list)
    z_scores: dict[str, ZScoreResult] = Field(default_factory=dict)
    distinctive: list[FunctionWordFrequency] = Field(default_factory=list)
    avoided: list[FunctionWordFrequency] = Field(default_factory=list)
    british_markers: list[FunctionWordFrequency] = Field(default_factory=list)
    summary: DistinctivenessSummary
    recommendations: list[str] = Field(default_factory=list)


def analyze(
    text: str,
    reference: Optional[FunctionWordReference] = None,
    thresholds: Optional[Thresholds] = None,
) -> FunctionWordReport:
    """
    Count reference function words and compare them with the baseline.

    Only words with a baseline entry get a z-score. A baseline stddev of 0
    yields z = 0, which always reads as normal.
    """
    reference = reference or default_reference()
    thresholds = thresholds or Thresholds()

    words = normalize_words(text)
    total_words = len(words)
    lookup = reference.lookup()
    counts = Counter(w for w in words if w in lookup)

    # "that" is listed as both determiner and conjunction; report it once
    frequencies: list[FunctionWordFrequency] = []
    seen: set[str] = set()
    for fw in reference.words:
        key = fw.word.lower()
        if key in seen:
            continue
        seen.add(key)
        count = counts.get(key, 0)
        frequencies.append(FunctionWordFrequency(
            word=key,
            count=count,
            frequency=count / total_words * 1000 if total_words else 0.0,
            category=fw.category,
            tier=fw.tier,
            british_marker=fw.british_marker,
        ))

    z_scores = calculate_z_scores(
        {fw.word: fw.frequency for fw in frequencies},
        reference.baseline_pairs(),
    )

    def z(fw: FunctionWordFrequency) -> float:
        return z_scores[fw.word].z_score

    scored = [fw for fw in frequencies if fw.word in z_scores]
    distinctive = sorted(
        (fw for fw in scored if z(fw) > thresholds.z_distinctive), key=z, reverse=True
    )
    avoided = sorted(
        (fw for fw in scored if z(fw) < -thresholds.z_distinctive), key=z
    )
    british = sorted(
        (fw for fw in frequencies if fw.british_marker and fw.count > 0),
        key=lambda fw: fw.frequency,
        reverse=True,
    )

    classes = Counter(
        classify(r.z_score, thresholds.z_distinctive, thresholds.z_highly_distinctive)
        for r in z_scores.values()
    )

    recommendations = []
    if total_words < thresholds.short_corpus_words:
        recommendations.append(
            f"Corpus has only {total_words} words; z-scores below "
            f"{thresholds.short_corpus_words} words are noisy. Collect more articles "
            f"before relying on the distinctive/avoided lists."
        )

    function_word_count = sum(counts.values())
    return FunctionWordReport(
        total_words=total_words,
        function_word_count=function_word_count,
        function_word_percentage=function_word_count / total_words * 100 if total_words else 0.0,
        frequencies=frequencies,
        z_scores=z_scores,
        distinctive=distinctive,
        avoided=avoided,
        british_markers=british,
        summary=DistinctivenessSummary(
            highly_distinctive=classes[Distinctiveness.HIGHLY_DISTINCTIVE],
            distinctive=classes[Distinctiveness.DISTINCTIVE],
            normal=classes[Distinctiveness.NORMAL],
            avoided=classes[Distinctiveness.AVOIDED],
            highly_avoided=classes[Distinctiveness.HIGHLY_AVOIDED],
        ),
        recommendations=recommendations,
    )
