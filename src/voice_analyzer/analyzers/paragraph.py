"""
Paragraph Structure Analysis

Sentences per paragraph, how symmetric paragraph sizes are, how
paragraphs open, and formal transition words.
"""

from pydantic import BaseModel, ConfigDict, Field

from voice_analyzer.corpus.splitter import first_sentence, split_into_paragraphs, split_into_sentences
from voice_analyzer.metrics import (
    Bucket,
    coefficient_of_variation,
    distribution,
    mean,
    median,
    standard_deviation,
)
from voice_analyzer.models import Report
from voice_analyzer.patterns import count_word, first_match, rules


SENTENCE_COUNT_BUCKETS = (
    ("1", 0, 2),
    ("2", 2, 3),
    ("3", 3, 4),
    ("4", 4, 5),
    ("5", 5, 6),
    ("6+", 6, None),
)

TRANSITION_WORDS = (
    "however", "moreover", "furthermore", "therefore", "thus", "hence",
    "consequently", "nevertheless", "nonetheless", "meanwhile", "additionally",
    "similarly", "conversely", "alternatively",
)

# Applied to the opening sentence including its terminator
OPENING_RULES = rules(
    ("question", r"\?"),
    ("personal", r"^(I|I've|I'm|My|For me|In my)\b"),
)

OPENING_TYPES = ("statement", "question", "personal")


class SentencesPerParagraph(BaseModel):
    model_config = ConfigDict(frozen=True)

    mean: float
    median: float
    std_dev: float
    distribution: list[Bucket] = Field(default_factory=list)


class OpeningPattern(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: str
    count: int
    percentage: float


class TransitionWordCount(BaseModel):
    model_config = ConfigDict(frozen=True)

    word: str
    count: int


class ParagraphReport(Report):
    report_name = "paragraph"

    total_paragraphs: int
    sentences_per_paragraph: SentencesPerParagraph
    symmetry_score: float  # 1 = every paragraph the same size
    opening_patterns: list[OpeningPattern] = Field(default_factory=list)
    transition_words: list[TransitionWordCount] = Field(default_factory=list)


def classify_opening(paragraph: str) -> str:
    return first_match(OPENING_RULES, first_sentence(paragraph), default="statement")


def analyze(text: str) -> ParagraphReport:
    paragraphs = split_into_paragraphs(text)
    total = len(paragraphs)
    sentence_counts = [len(split_into_sentences(p)) for p in paragraphs]

    openings = [classify_opening(p) for p in paragraphs]
    opening_patterns = [
        OpeningPattern(
            type=kind,
            count=openings.count(kind),
            percentage=openings.count(kind) / total * 100 if total else 0.0,
        )
        for kind in OPENING_TYPES
    ]

    transitions = [TransitionWordCount(word=w, count=count_word(w, text)) for w in TRANSITION_WORDS]

    return ParagraphReport(
        total_paragraphs=total,
        sentences_per_paragraph=SentencesPerParagraph(
            mean=mean(sentence_counts),
            median=median(sentence_counts),
            std_dev=standard_deviation(sentence_counts),
            distribution=distribution(sentence_counts, SENTENCE_COUNT_BUCKETS),
        ),
        symmetry_score=1 - min(coefficient_of_variation(sentence_counts), 1),
        opening_patterns=opening_patterns,
        transition_words=[t for t in transitions if t.count > 0],
    )
