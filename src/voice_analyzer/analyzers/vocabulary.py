"""
Vocabulary Analysis

Word frequency, lexical richness, contractions, regional spelling and
recurring technical terms.
"""

import re

from pydantic import BaseModel, ConfigDict, Field

from voice_analyzer.corpus.splitter import NON_WORD_CHARS
from voice_analyzer.metrics import (
    FrequencyEntry,
    bigram_uniqueness,
    frequency_map,
    hapax_legomena_count,
    moving_avg_type_token_ratio,
    top_n,
)
from voice_analyzer.models import Report
from voice_analyzer.patterns import count_word


CONTRACTIONS = (
    ("I've", "I have"),
    ("I'm", "I am"),
    ("I'd", "I would"),
    ("you've", "you have"),
    ("you're", "you are"),
    ("it's", "it is"),
    ("that's", "that is"),
    ("won't", "will not"),
    ("can't", "cannot"),
    ("don't", "do not"),
    ("doesn't", "does not"),
)

BRITISH_SPELLINGS = (
    "whilst", "colour", "favourite", "optimise", "analyse", "centre",
    "behaviour", "honour", "favour", "labour", "recognise", "organise",
)

AMERICAN_SPELLINGS = (
    "while", "color", "favorite", "optimize", "analyze", "center",
    "behavior", "honor", "favor", "labor", "recognize", "organize",
)

COMMON_WORDS = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of",
    "with", "by", "from", "as", "is", "was", "are", "be", "have", "has", "had",
    "do", "does", "did", "will", "would", "could", "should", "may", "might",
    "must", "can", "this", "that", "these", "those", "i", "you", "he", "she",
    "it", "we", "they", "my", "your", "his", "her", "its", "our", "their",
})

TOP_WORDS = 1000
TOP_TECHNICAL_TERMS = 50
TECHNICAL_MIN_COUNT = 10

URL_FRAGMENT = re.compile(r"^https?|^www\.|^gravatar|^cdn\.|^static\.", re.IGNORECASE)
FILE_EXTENSION = re.compile(r"^\.?(jpg|jpeg|png|gif|svg|webp|js|css|html|pdf|mp4|webm)$", re.IGNORECASE)
BASE64_FRAGMENT = re.compile(r"^[A-Za-z0-9+/=]+$")
IMAGE_DIMENSIONS = re.compile(r"^\d+x\d+$", re.IGNORECASE)


class WordCount(BaseModel):
    model_config = ConfigDict(frozen=True)

    word: str
    count: int


class ContractionCount(BaseModel):
    model_config = ConfigDict(frozen=True)

    contracted: str
    expanded: str
    count: int


class ContractionUsage(BaseModel):
    model_config = ConfigDict(frozen=True)

    usage_rate: float  # per 100 words
    examples: list[ContractionCount] = Field(default_factory=list)


class CurrencyPreference(BaseModel):
    model_config = ConfigDict(frozen=True)

    gbp: int = 0
    eur: int = 0
    usd: int = 0


class VocabularyReport(Report):
    report_name = "vocabulary"

    total_words: int
    unique_words: int
    vocabulary_richness: float
    hapax_legomena: int
    moving_avg_ttr: float
    bigram_uniqueness: float
    word_frequency: list[FrequencyEntry] = Field(default_factory=list)
    contractions: ContractionUsage
    british_markers: list[WordCount] = Field(default_factory=list)
    american_markers: list[WordCount] = Field(default_factory=list)
    currency_preference: CurrencyPreference
    technical_terms: list[WordCount] = Field(default_factory=list)


def is_valid_word(word: str) -> bool:
    """Reject tokens that are leftovers of page extraction rather than prose."""
    if not word or not word.strip():
        return False
    if URL_FRAGMENT.search(word) or FILE_EXTENSION.match(word):
        return False
    if len(word) > 50 and BASE64_FRAGMENT.match(word):
        return False
    # Pure numbers are dropped unless they look like a year
    if word.isdigit() and not (len(word) == 4 and "1900" <= word <= "2100"):
        return False
    if IMAGE_DIMENSIONS.match(word):
        return False
    if not re.search(r"[a-zA-Z]", word):
        return False
    if len(word) == 1 and word not in ("I", "a", "A"):
        return False
    return True


def _marker_counts(words: tuple[str, ...], text: str) -> list[WordCount]:
    counts = [WordCount(word=w, count=count_word(w, text)) for w in words]
    return [c for c in counts if c.count > 0]


def analyze(text: str) -> VocabularyReport:
    """Build the vocabulary profile of a text."""
    raw_words = [w for w in text.split() if is_valid_word(w)]
    total_words = len(raw_words)

    lower_words = [NON_WORD_CHARS.sub("", w.lower()) for w in raw_words]
    lower_words = [w for w in lower_words if w and is_valid_word(w)]

    counts = frequency_map(lower_words)
    top_words = top_n(counts, TOP_WORDS)

    contraction_counts = [
        ContractionCount(contracted=c, expanded=e, count=count_word(c, text))
        for c, e in CONTRACTIONS
    ]
    contraction_counts = [c for c in contraction_counts if c.count > 0]
    total_contractions = sum(c.count for c in contraction_counts)

    technical_terms = [
        WordCount(word=entry.item, count=entry.count)
        for entry in top_words
        if entry.count >= TECHNICAL_MIN_COUNT
        and len(entry.item) > 3
        and entry.item not in COMMON_WORDS
    ][:TOP_TECHNICAL_TERMS]

    return VocabularyReport(
        total_words=total_words,
        unique_words=len(counts),
        vocabulary_richness=len(counts) / total_words if total_words else 0.0,
        hapax_legomena=hapax_legomena_count(lower_words),
        moving_avg_ttr=moving_avg_type_token_ratio(lower_words),
        bigram_uniqueness=bigram_uniqueness(lower_words),
        word_frequency=top_words,
        contractions=ContractionUsage(
            usage_rate=total_contractions / total_words * 100 if total_words else 0.0,
            examples=contraction_counts,
        ),
        british_markers=_marker_counts(BRITISH_SPELLINGS, text),
        american_markers=_marker_counts(AMERICAN_SPELLINGS, text),
        currency_preference=CurrencyPreference(
            gbp=text.count("£"),
            eur=text.count("€"),
            usd=text.count("$"),
        ),
        technical_terms=technical_terms,
    )
