"""
Information Density

Describes how a writer packs facts into their prose and how that lines up
with the ~15 word passages AI search tools quote from a page. Nothing
here is a target: the report records the writer's natural habits.

- sentence and paragraph density
- claims and named things in the first 100 / 300 words
- sentences that stand alone versus ones leaning on "This is..." / "It was..."
- claim density across the opening, middle and closing of the text
- an estimated share of the text likely to be cited, from article length
"""

import re
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from voice_analyzer.corpus.splitter import split_into_paragraphs, split_into_sentences, word_count
from voice_analyzer.metrics import mean, median, round_half_up, round_to, standard_deviation
from voice_analyzer.models import Report


CHUNK_MIN_WORDS = 12
CHUNK_MAX_WORDS = 20
OPENING_WORDS = 100
EXTENDED_OPENING_WORDS = 300
ENTITY_DEDUP_FACTOR = 0.7
MAX_DANGLING_PATTERNS = 5

# Matched case-insensitively
CLAIM_PATTERNS = tuple(re.compile(p, re.IGNORECASE) for p in (
    r"\d+%",
    r"\$[\d,]+",
    r"£[\d,]+",
    r"€[\d,]+",
    r"\d+\s*(?:nm|kg|mm|hz|gb|mb|tb|mph|km/h)",
    r"\d+\s*(?:users|customers|companies|people|years|months|days)",
    r"(?:costs?|priced?|worth|retails?)\s+(?:at\s+)?\$?£?€?[\d,]+",
    r"\b\d{4}\b",
    r"(?:founded|established|launched|released)\s+in\s+\d{4}",
))

# Case-sensitive: capitalisation is the signal
ENTITY_PATTERNS = tuple(re.compile(p) for p in (
    r"[A-Z][a-z]+(?:\s+[A-Z][a-z]+)+",
    r"[A-Z]{2,}",
    r"\b(?:the\s+)?[A-Z][a-z]+\s+\d+[A-Za-z]*",
))

# (label, pattern); a sentence starting with one of these leans on earlier context
DANGLING_PATTERNS = tuple((label, re.compile(p, re.IGNORECASE)) for label, p in (
    ('"This is/was..."', r"\bThis\s+(?:is|was|means|shows)"),
    ('"It is/was..."', r"\bIt\s+(?:is|was|can|will|would|should)"),
    ('"They are/were..."', r"\bThey\s+(?:are|were|have|had)"),
    ('"The [generic]..."', r"\bThe\s+(?:product|system|tool|solution|approach)\b"),
))

PRONOUN = re.compile(r"\b(?:it|this|that|they|these|those)\b", re.IGNORECASE)

EXTRACTABILITY_NOTE = (
    "These observations describe natural writing patterns. They are not recommendations "
    "to change style - authentic voice should take priority over optimisation."
)

OpeningStyle = Literal["frontloaded", "building", "contextual", "varied"]
Reliance = Literal["low", "moderate", "high"]


class CorpusProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_words: int
    total_sentences: int
    total_paragraphs: int
    average_article_length: int


class SentenceLengthProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    mean: float
    median: float
    std_dev: float
    chunk_alignment_note: str


class ParagraphDensity(BaseModel):
    model_config = ConfigDict(frozen=True)

    mean_words_per_paragraph: int
    mean_sentences_per_paragraph: float
    variation_coefficient: float


class NaturalPatterns(BaseModel):
    model_config = ConfigDict(frozen=True)

    sentence_length_profile: SentenceLengthProfile
    paragraph_density: ParagraphDensity


class OpeningWindow(BaseModel):
    model_config = ConfigDict(frozen=True)

    typical_claim_count: int
    typical_entity_count: int


class LeadOpening(OpeningWindow):
    style: OpeningStyle


class OpeningPatterns(BaseModel):
    model_config = ConfigDict(frozen=True)

    first_100_words: LeadOpening
    first_300_words: OpeningWindow
    natural_tendency: str


class DanglingPattern(BaseModel):
    model_config = ConfigDict(frozen=True)

    pattern: str
    frequency: int
    example: str


class SelfContainment(BaseModel):
    model_config = ConfigDict(frozen=True)

    standalone_ready_percentage: int
    dangling_patterns: list[DanglingPattern] = Field(default_factory=list)
    pronoun_reliance: Reliance


class PositionDensity(BaseModel):
    model_config = ConfigDict(frozen=True)

    opening: float  # first 20%
    middle: float  # middle 60%
    closing: float  # last 20%


class ClaimDensity(BaseModel):
    model_config = ConfigDict(frozen=True)

    overall: float  # claims per 100 words
    by_position: PositionDensity
    distribution_note: str


class ExtractabilityProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    estimated_coverage: int  # percent
    strengths: list[str] = Field(default_factory=list)
    characteristics: list[str] = Field(default_factory=list)
    note: str = EXTRACTABILITY_NOTE


class InformationDensityReport(Report):
    report_name = "information-density"

    corpus_profile: CorpusProfile
    natural_patterns: NaturalPatterns
    opening_patterns: OpeningPatterns
    self_containment: SelfContainment
    claim_density: ClaimDensity
    extractability_profile: ExtractabilityProfile


def count_claims(text: str) -> int:
    """Percentages, prices, measurements, quantities and years."""
    return sum(len(p.findall(text)) for p in CLAIM_PATTERNS)


def count_entities(text: str) -> int:
    """Proper-noun runs, acronyms and numbered product names, discounted for overlap."""
    raw = sum(len(p.findall(text)) for p in ENTITY_PATTERNS)
    return int(raw * ENTITY_DEDUP_FACTOR)


def chunk_alignment_note(mean_length: float) -> str:
    if CHUNK_MIN_WORDS <= mean_length <= CHUNK_MAX_WORDS:
        return "Natural sentence length aligns well with typical AI extraction chunks (~15 words)"
    if mean_length < CHUNK_MIN_WORDS:
        return "Tends toward shorter sentences - may result in multiple sentences per chunk"
    return "Tends toward longer sentences - chunks may split mid-sentence"


def opening_style(density: int) -> OpeningStyle:
    if density >= 8:
        return "frontloaded"
    if density >= 4:
        return "building"
    if density >= 2:
        return "contextual"
    return "varied"


NATURAL_TENDENCIES = {
    "frontloaded": "Naturally leads with facts and specifics - strong for AI extraction",
    "building": "Builds context before key claims - balanced approach",
    "contextual": "Establishes context first - prioritises reader orientation over immediate facts",
    "varied": "Varied opening styles across articles - adapts to content type",
}


def pronoun_reliance(density: float) -> Reliance:
    if density < 2:
        return "low"
    if density < 4:
        return "moderate"
    return "high"


def estimated_coverage(avg_article_length: float) -> float:
    """
    Share of a page AI answers tend to cite, falling with page length:
    61% under 1K words, 35% at 2K, 22% at 3K, never below 13%.
    """
    if avg_article_length < 1000:
        return 61.0
    if avg_article_length < 2000:
        return 61 - (avg_article_length - 1000) / 1000 * 26
    if avg_article_length < 3000:
        return 35 - (avg_article_length - 2000) / 1000 * 13
    return max(13.0, 22 - (avg_article_length - 3000) / 2000 * 9)


def _per_hundred(count: int, words: float) -> float:
    return count / words * 100 if words else 0.0


def standalone_share(sentences: list[str]) -> float:
    """Percentage of sentences that do not open with a dangling reference."""
    standalone = sum(
        1 for s in sentences
        if not any(pattern.match(s.strip()) for _, pattern in DANGLING_PATTERNS)
    )
    return _per_hundred(standalone, len(sentences))


def _self_containment(text: str, sentences: list[str], total_words: int) -> SelfContainment:
    dangling = []
    for label, pattern in DANGLING_PATTERNS:
        matches = pattern.findall(text)
        if matches:
            dangling.append(DanglingPattern(pattern=label, frequency=len(matches), example=matches[0]))

    density = _per_hundred(len(PRONOUN.findall(text)), total_words)

    return SelfContainment(
        standalone_ready_percentage=round_half_up(standalone_share(sentences)),
        dangling_patterns=dangling[:MAX_DANGLING_PATTERNS],
        pronoun_reliance=pronoun_reliance(density),
    )


def _claim_density(words: list[str], overall: float) -> ClaimDensity:
    total = len(words)
    first_cut, last_cut = int(total * 0.2), int(total * 0.8)

    opening = _per_hundred(count_claims(" ".join(words[:first_cut])), total * 0.2)
    middle = _per_hundred(count_claims(" ".join(words[first_cut:last_cut])), total * 0.6)
    closing = _per_hundred(count_claims(" ".join(words[last_cut:])), total * 0.2)

    if opening > middle and opening > closing:
        note = "Claims concentrated in opening - frontloaded style"
    elif closing > opening:
        note = "Claims build toward conclusion - building style"
    else:
        note = "Claims distributed throughout - even density"

    return ClaimDensity(
        overall=round_to(overall, 2),
        by_position=PositionDensity(
            opening=round_to(opening, 2),
            middle=round_to(middle, 2),
            closing=round_to(closing, 2),
        ),
        distribution_note=note,
    )


def analyze(text: str, article_count: int = 1) -> InformationDensityReport:
    words = text.split()
    total_words = len(words)
    sentences = split_into_sentences(text)
    paragraphs = split_into_paragraphs(text)

    lengths = [word_count(s) for s in sentences]
    mean_length = mean(lengths)
    std_length = standard_deviation(lengths)

    paragraph_words = [word_count(p) for p in paragraphs]
    paragraph_sentences = [len(split_into_sentences(p)) for p in paragraphs]
    mean_paragraph_words = mean(paragraph_words)
    paragraph_cv = standard_deviation(paragraph_words) / mean_paragraph_words if mean_paragraph_words > 0 else 0.0

    lead = " ".join(words[:OPENING_WORDS])
    extended = " ".join(words[:EXTENDED_OPENING_WORDS])
    lead_claims, lead_entities = count_claims(lead), count_entities(lead)
    style = opening_style(lead_claims + lead_entities)

    containment = _self_containment(text, sentences, total_words)
    overall_claims = _per_hundred(count_claims(text), total_words)
    claims = _claim_density(words, overall_claims)

    avg_article_length = total_words / article_count if article_count > 0 else 0.0

    strengths = []
    if CHUNK_MIN_WORDS <= mean_length <= CHUNK_MAX_WORDS:
        strengths.append("Sentence length naturally aligns with AI chunk extraction")
    if standalone_share(sentences) > 70:
        strengths.append("High proportion of self-contained sentences")
    if overall_claims > 3:
        strengths.append("Strong factual claim density")
    if style in ("frontloaded", "building"):
        strengths.append("Natural tendency to lead with substantive content")
    if std_length > mean_length * 0.5:
        strengths.append("Good sentence length variation (natural, not mechanical)")

    characteristics = []
    if containment.pronoun_reliance == "high":
        characteristics.append(
            "Relies on pronouns for flow - natural for readability, may reduce chunk independence"
        )
    if avg_article_length > 2000:
        characteristics.append("Longer-form content - AI may only extract key sections")
    if style == "contextual":
        characteristics.append("Contextual openings - prioritises reader orientation")

    return InformationDensityReport(
        corpus_profile=CorpusProfile(
            total_words=total_words,
            total_sentences=len(sentences),
            total_paragraphs=len(paragraphs),
            average_article_length=round_half_up(avg_article_length),
        ),
        natural_patterns=NaturalPatterns(
            sentence_length_profile=SentenceLengthProfile(
                mean=round_to(mean_length, 1),
                median=median(lengths),
                std_dev=round_to(std_length, 1),
                chunk_alignment_note=chunk_alignment_note(mean_length),
            ),
            paragraph_density=ParagraphDensity(
                mean_words_per_paragraph=round_half_up(mean_paragraph_words),
                mean_sentences_per_paragraph=round_to(mean(paragraph_sentences), 1),
                variation_coefficient=round_to(paragraph_cv, 2),
            ),
        ),
        opening_patterns=OpeningPatterns(
            first_100_words=LeadOpening(
                typical_claim_count=lead_claims,
                typical_entity_count=lead_entities,
                style=style,
            ),
            first_300_words=OpeningWindow(
                typical_claim_count=count_claims(extended),
                typical_entity_count=count_entities(extended),
            ),
            natural_tendency=NATURAL_TENDENCIES[style],
        ),
        self_containment=containment,
        claim_density=claims,
        extractability_profile=ExtractabilityProfile(
            estimated_coverage=round_half_up(estimated_coverage(avg_article_length)),
            strengths=strengths,
            characteristics=characteristics,
        ),
    )
