"""
Sentence Structure Analysis

Length distribution, a rough simple/compound/complex split, and the
words and punctuation sentences start and end with.
"""

import re

from pydantic import BaseModel, ConfigDict, Field

from voice_analyzer.corpus.splitter import split_into_sentences, word_count
from voice_analyzer.metrics import (
    Bucket,
    FrequencyEntry,
    distribution,
    frequency_map,
    mean,
    median,
    standard_deviation,
    top_n,
)
from voice_analyzer.models import Report


LENGTH_BUCKETS = (
    ("1-10", 0, 11),
    ("11-20", 11, 21),
    ("21-30", 21, 31),
    ("31-40", 31, 41),
    ("41+", 41, None),
)

SUBORDINATOR = re.compile(r"\b(which|that|who|when|where|while|whilst|if|because|although)\b", re.IGNORECASE)
COORDINATOR = re.compile(r"\b(and|but|or)\b", re.IGNORECASE)
SENTENCE_ENDER = re.compile(r"[.!?…]+")

TOP_STARTERS = 20
TOP_ENDERS = 10


class LengthStats(BaseModel):
    model_config = ConfigDict(frozen=True)

    mean: float
    median: float
    std_dev: float
    distribution: list[Bucket] = Field(default_factory=list)


class Complexity(BaseModel):
    """Percentages of sentences in each structural class."""

    model_config = ConfigDict(frozen=True)

    simple: float = 0.0
    compound: float = 0.0
    complex: float = 0.0


class ExampleSentence(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    text: str
    word_count: int


class SentenceReport(Report):
    report_name = "sentence"

    total_sentences: int
    length: LengthStats
    complexity: Complexity
    starters: list[FrequencyEntry] = Field(default_factory=list)
    enders: list[FrequencyEntry] = Field(default_factory=list)
    examples: list[ExampleSentence] = Field(default_factory=list)


def classify_complexity(sentence: str) -> str:
    """complex > compound > simple, first match wins."""
    if SUBORDINATOR.search(sentence):
        return "complex"
    if ";" in sentence or ("," in sentence and COORDINATOR.search(sentence)):
        return "compound"
    return "simple"


def _starter(sentence: str) -> str:
    first = sentence.split()[0] if sentence.split() else ""
    return re.sub(r"[^\w]", "", first.lower())


def _examples(sentences: list[str], lengths: list[int]) -> list[ExampleSentence]:
    if not sentences:
        return []
    ranked = sorted(zip(lengths, range(len(sentences))))
    picks = (
        ("shortest", ranked[0]),
        ("typical", ranked[len(ranked) // 2]),
        ("longest", ranked[-1]),
    )
    return [
        ExampleSentence(label=label, text=sentences[i], word_count=length)
        for label, (length, i) in picks
    ]


def analyze(text: str) -> SentenceReport:
    sentences = split_into_sentences(text)
    total = len(sentences)
    lengths = [word_count(s) for s in sentences]

    classes = [classify_complexity(s) for s in sentences]

    def share(label: str) -> float:
        return classes.count(label) / total * 100 if total else 0.0

    starters = [w for w in (_starter(s) for s in sentences) if w]

    return SentenceReport(
        total_sentences=total,
        length=LengthStats(
            mean=mean(lengths),
            median=median(lengths),
            std_dev=standard_deviation(lengths),
            distribution=distribution(lengths, LENGTH_BUCKETS),
        ),
        complexity=Complexity(
            simple=share("simple"),
            compound=share("compound"),
            complex=share("complex"),
        ),
        starters=top_n(frequency_map(starters), TOP_STARTERS),
        enders=top_n(frequency_map(SENTENCE_ENDER.findall(text)), TOP_ENDERS),
        examples=_examples(sentences, lengths),
    )
