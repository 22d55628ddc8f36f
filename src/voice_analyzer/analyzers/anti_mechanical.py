"""
Anti-Mechanical Analysis

Scores how human a text reads on four 0-25 sub-scores that sum to a
0-100 naturalness score:

- sentence length variation
- paragraph asymmetry
- first-person distribution
- repetitive sentence starts

Every constant is fixed, so the same text always gets the same score.
"""

import re
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from voice_analyzer.config import Thresholds
from voice_analyzer.corpus.splitter import (
    first_word,
    split_into_paragraphs,
    split_into_sentences,
    word_count,
)
from voice_analyzer.metrics import mean, round_half_up, standard_deviation
from voice_analyzer.models import Report


FIRST_PERSON = re.compile(r"\b(I|I'm|I've|I'd|I'll|I was|I am|I have|I would)\b", re.IGNORECASE)

SUB_SCORE_MAX = 25
NATURAL_VARIATION_CV = 0.5
BALANCED_I_RATIO = 0.3
REPETITION_RUN = 3
LONG_PARAGRAPH = 5

Interpretation = Literal["mechanical", "somewhat_mechanical", "natural", "very_natural"]


class LengthBands(BaseModel):
    model_config = ConfigDict(frozen=True)

    short: int = 0  # 1-8 words
    medium: int = 0  # 9-20
    long: int = 0  # 21-40
    very_long: int = 0  # 41+

    def present(self) -> int:
        return sum(1 for n in (self.short, self.medium, self.long, self.very_long) if n > 0)


class SentenceLengthVariation(BaseModel):
    model_config = ConfigDict(frozen=True)

    mean: float
    std_dev: float
    coefficient_of_variation: float
    distribution: LengthBands
    has_natural_variation: bool


class ParagraphAsymmetry(BaseModel):
    model_config = ConfigDict(frozen=True)

    mean_sentences: float
    std_dev: float
    symmetry_score: float  # CV of sentences per paragraph, higher is more varied
    single_sentence_paragraphs: int
    long_paragraphs: int


class FirstPersonDistribution(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_count: int
    sentence_start_count: int
    sentence_start_ratio: float
    consecutive_i_start: int
    is_balanced: bool


class RepetitiveStarts(BaseModel):
    model_config = ConfigDict(frozen=True)

    max_consecutive_same_start: int
    problematic_patterns: list[str] = Field(default_factory=list)
    has_repetition_problem: bool


class Naturalness(BaseModel):
    """Sub-scores are reported rounded; the total sums the unrounded values."""

    model_config = ConfigDict(frozen=True)

    sentence_variation_score: int
    paragraph_variation_score: int
    first_person_score: int
    repetition_score: int
    total_score: int
    interpretation: Interpretation


class AntiMechanicalReport(Report):
    report_name = "anti-mechanical"

    sentence_length_variation: SentenceLengthVariation
    paragraph_asymmetry: ParagraphAsymmetry
    first_person_distribution: FirstPersonDistribution
    repetitive_starts: RepetitiveStarts
    naturalness: Naturalness


def length_bands(lengths: list[int]) -> LengthBands:
    return LengthBands(
        short=sum(1 for n in lengths if 1 <= n <= 8),
        medium=sum(1 for n in lengths if 9 <= n <= 20),
        long=sum(1 for n in lengths if 21 <= n <= 40),
        very_long=sum(1 for n in lengths if n > 40),
    )


def sentence_variation_score(cv: float, bands: LengthBands) -> float:
    """CV of 0.8 or more earns the full 25; each band beyond two adds 2.5."""
    score = min(SUB_SCORE_MAX, cv * 31.25)
    score = min(SUB_SCORE_MAX, score + (bands.present() - 2) * 2.5)
    return max(0.0, score)


def paragraph_variation_score(single: int, long: int, symmetry: float) -> float:
    score = 0.0
    if single > 0:
        score += 8
    if long > 0:
        score += 8
    return score + min(9, symmetry * 15)


def first_person_score(start_ratio: float, consecutive_i: int) -> float:
    score = SUB_SCORE_MAX
    if start_ratio > 0.5:
        score -= 15
    elif start_ratio > 0.3:
        score -= 8
    if consecutive_i >= 4:
        score -= 10
    elif consecutive_i >= 3:
        score -= 5
    return max(0, score)


def repetition_score(max_run: int) -> float:
    score = SUB_SCORE_MAX
    if max_run >= 5:
        score -= 20
    elif max_run >= 4:
        score -= 12
    elif max_run >= 3:
        score -= 6
    return max(0, score)


def interpret(total: int, thresholds: Optional[Thresholds] = None) -> Interpretation:
    thresholds = thresholds or Thresholds()
    if total >= thresholds.very_natural:
        return "very_natural"
    if total >= thresholds.natural:
        return "natural"
    if total >= thresholds.somewhat_mechanical:
        return "somewhat_mechanical"
    return "mechanical"


def _longest_i_run(starts: list[str]) -> int:
    longest = current = 0
    for word in starts:
        current = current + 1 if word == "i" else 0
        longest = max(longest, current)
    return longest


def _repetitive_starts(starts: list[str]) -> RepetitiveStarts:
    if not starts:
        return RepetitiveStarts(max_consecutive_same_start=0, has_repetition_problem=False)

    longest = 0
    run = 1
    current = starts[0]
    problematic: list[str] = []
    for word in starts[1:]:
        if word == current and current:
            run += 1
            if run >= REPETITION_RUN and current not in problematic:
                problematic.append(current)
        else:
            longest = max(longest, run)
            run = 1
            current = word
    longest = max(longest, run)

    return RepetitiveStarts(
        max_consecutive_same_start=longest,
        problematic_patterns=problematic,
        has_repetition_problem=longest >= REPETITION_RUN,
    )


def analyze(text: str, thresholds: Optional[Thresholds] = None) -> AntiMechanicalReport:
    sentences = split_into_sentences(text)
    paragraphs = split_into_paragraphs(text)

    # Sentence length variation
    lengths = [word_count(s) for s in sentences]
    avg_length = mean(lengths)
    std_length = standard_deviation(lengths)
    cv = std_length / avg_length if avg_length > 0 else 0.0
    bands = length_bands(lengths)

    # Paragraph asymmetry
    per_paragraph = [len(split_into_sentences(p)) for p in paragraphs]
    avg_paragraph = mean(per_paragraph)
    std_paragraph = standard_deviation(per_paragraph)
    symmetry = std_paragraph / avg_paragraph if avg_paragraph > 0 else 0.0
    single = sum(1 for n in per_paragraph if n == 1)
    long = sum(1 for n in per_paragraph if n >= LONG_PARAGRAPH)

    # First person
    starts = [first_word(s) for s in sentences]
    total_first_person = sum(len(FIRST_PERSON.findall(s)) for s in sentences)
    i_starts = starts.count("i")
    start_ratio = i_starts / len(sentences) if sentences else 0.0
    consecutive_i = _longest_i_run(starts)

    repetition = _repetitive_starts(starts)

    scores = (
        sentence_variation_score(cv, bands),
        paragraph_variation_score(single, long, symmetry),
        first_person_score(start_ratio, consecutive_i),
        repetition_score(repetition.max_consecutive_same_start),
    )
    total = round_half_up(sum(scores))

    return AntiMechanicalReport(
        sentence_length_variation=SentenceLengthVariation(
            mean=avg_length,
            std_dev=std_length,
            coefficient_of_variation=cv,
            distribution=bands,
            has_natural_variation=cv > NATURAL_VARIATION_CV,
        ),
        paragraph_asymmetry=ParagraphAsymmetry(
            mean_sentences=avg_paragraph,
            std_dev=std_paragraph,
            symmetry_score=symmetry,
            single_sentence_paragraphs=single,
            long_paragraphs=long,
        ),
        first_person_distribution=FirstPersonDistribution(
            total_count=total_first_person,
            sentence_start_count=i_starts,
            sentence_start_ratio=start_ratio,
            consecutive_i_start=consecutive_i,
            is_balanced=start_ratio < BALANCED_I_RATIO,
        ),
        repetitive_starts=repetition,
        naturalness=Naturalness(
            sentence_variation_score=round_half_up(scores[0]),
            paragraph_variation_score=round_half_up(scores[1]),
            first_person_score=round_half_up(scores[2]),
            repetition_score=round_half_up(scores[3]),
            total_score=total,
            interpretation=interpret(total, thresholds),
        ),
    )
