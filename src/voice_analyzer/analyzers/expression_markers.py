"""
Expression Markers

Informal, personal touches that machine-written text tends to lack:
sentence fragments, rhetorical questions, mid-sentence asides,
contractions, hedging and emphasis.

A sentence counts as a fragment when it is four words or fewer, or when
spaCy tags no token in it as a verb or auxiliary.
"""

import re
from typing import Callable, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from spacy.tokens import Doc

from voice_analyzer.corpus.splitter import split_keeping_terminators, word_count
from voice_analyzer.models import Report
from voice_analyzer.nlp import load_nlp
from voice_analyzer.patterns import phrase_pattern


FRAGMENT_MAX_WORDS = 4
HUMAN_FRAGMENT_RATE = 5.0  # per 100 sentences
HUMAN_ASIDE_RATE = 8.0  # per 100 sentences
MAX_EXAMPLES = 15
MAX_QUESTION_EXAMPLES = 10

VERB_TAGS = ("VERB", "AUX")

# A loaded spaCy pipeline, or anything else that turns text into a tagged Doc
Tagger = Callable[[str], Doc]

PARENTHETICAL = re.compile(r"\([^)]+\)")
DASH_ASIDE = re.compile(r"—[^—]+—|\s-\s[^-]+\s-\s")
DASH_ASIDE_EXAMPLE = re.compile(r"[—-][^—-]+[—-]")
COMMA_ASIDE = re.compile(r",\s*(?:of course|naturally|obviously|clearly|frankly)[^,]*", re.IGNORECASE)
CONTRACTION = re.compile(r"\b[a-z]+['’](?:t|s|re|ve|ll|d|m)\b", re.IGNORECASE)

HEDGING_PHRASES = (
    "I think", "I believe", "probably", "possibly", "might",
    "could be", "seems", "appears", "likely", "perhaps",
    "maybe", "somewhat", "sort of", "kind of",
)

EMPHATIC_WORDS = (
    "actually", "really", "very", "quite", "extremely",
    "absolutely", "completely", "totally", "definitely", "certainly",
)


class Fragments(BaseModel):
    model_config = ConfigDict(frozen=True)

    count: int
    rate: float  # per 100 sentences
    examples: list[str] = Field(default_factory=list)
    detection_risk: Literal["safe", "moderate", "high"]
    guidance: str


class RhetoricalQuestions(BaseModel):
    model_config = ConfigDict(frozen=True)

    count: int
    rate: float  # per 1000 words
    examples: list[str] = Field(default_factory=list)
    guidance: str


class AsideTypes(BaseModel):
    model_config = ConfigDict(frozen=True)

    parenthetical: int = 0
    dashes: int = 0
    comma_asides: int = 0


class MidSentenceAsides(BaseModel):
    model_config = ConfigDict(frozen=True)

    count: int
    rate: float  # per 100 sentences
    types: AsideTypes
    examples: list[str] = Field(default_factory=list)
    guidance: str


class MarkerUsage(BaseModel):
    model_config = ConfigDict(frozen=True)

    count: int
    rate: float  # per 100 words
    examples: list[str] = Field(default_factory=list)


class ExpressionMarkersReport(Report):
    report_name = "expression-markers"

    fragments: Fragments
    rhetorical_questions: RhetoricalQuestions
    mid_sentence_asides: MidSentenceAsides
    contractions: MarkerUsage
    hedging_phrases: MarkerUsage
    emphatic_markers: MarkerUsage


def _bare(sentence: str) -> str:
    return sentence.rstrip(".!?… ").strip()


def has_verb(doc: Doc) -> bool:
    return any(token.pos_ in VERB_TAGS for token in doc)


def is_fragment(sentence: str, nlp: Tagger) -> bool:
    """Short sentences are fragments without being tagged."""
    return word_count(sentence) <= FRAGMENT_MAX_WORDS or not has_verb(nlp(sentence))


def fragment_risk(rate: float) -> str:
    ratio = rate / HUMAN_FRAGMENT_RATE
    if ratio < 0.2:
        return "high"
    if ratio < 0.5:
        return "moderate"
    return "safe"


def fragment_guidance(rate: float) -> str:
    ratio = rate / HUMAN_FRAGMENT_RATE
    share = f"{ratio * 100:.0f}%"
    if ratio < 0.2:
        return (
            f"HIGH RISK: Only {share} of human typical. AI rarely uses fragments. "
            "ADD deliberate fragments for emphasis, especially after technical points."
        )
    if ratio < 0.5:
        return f"MODERATE RISK: {share} of human typical. Consider adding more sentence fragments."
    return f"SAFE: {share} of human typical. Natural fragment usage."


def question_guidance(rate: float) -> str:
    if rate < 1.0:
        return "Very few questions. Consider adding rhetorical questions for engagement."
    if rate < 3.0:
        return "Moderate question usage. Acceptable range."
    return "Frequent questions. Strong conversational element."


def aside_guidance(rate: float) -> str:
    ratio = rate / HUMAN_ASIDE_RATE
    share = f"{ratio * 100:.0f}%"
    if ratio < 0.3:
        return (
            f"Very few asides ({share} of human typical). AI avoids parentheticals and dashes. "
            "ADD mid-sentence clarifications and asides."
        )
    if ratio < 0.6:
        return f"Moderate aside usage ({share} of human typical). Consider adding more."
    return f"Strong aside usage ({share} of human typical). Natural conversational style."


def fragments(sentences: list[str], nlp: Tagger) -> Fragments:
    found = [_bare(s) for s in sentences if is_fragment(_bare(s), nlp)]
    rate = len(found) / len(sentences) * 100 if sentences else 0.0
    return Fragments(
        count=len(found),
        rate=rate,
        examples=found[:MAX_EXAMPLES],
        detection_risk=fragment_risk(rate),
        guidance=fragment_guidance(rate),
    )


def rhetorical_questions(sentences: list[str], total_words: int) -> RhetoricalQuestions:
    questions = [s for s in sentences if "?" in s]
    rate = len(questions) / total_words * 1000 if total_words else 0.0
    return RhetoricalQuestions(
        count=len(questions),
        rate=rate,
        examples=questions[:MAX_QUESTION_EXAMPLES],
        guidance=question_guidance(rate),
    )


def mid_sentence_asides(sentences: list[str]) -> MidSentenceAsides:
    parenthetical = dashes = comma_asides = 0
    examples = []

    for sentence in sentences:
        if "(" in sentence and ")" in sentence:
            parenthetical += 1
            match = PARENTHETICAL.search(sentence)
            if match:
                examples.append(match.group(0))

        if DASH_ASIDE.search(sentence):
            dashes += 1
            match = DASH_ASIDE_EXAMPLE.search(sentence)
            if match:
                examples.append(match.group(0))

        asides = COMMA_ASIDE.findall(sentence)
        comma_asides += len(asides)
        examples.extend(asides)

    total = parenthetical + dashes + comma_asides
    rate = total / len(sentences) * 100 if sentences else 0.0
    return MidSentenceAsides(
        count=total,
        rate=rate,
        types=AsideTypes(parenthetical=parenthetical, dashes=dashes, comma_asides=comma_asides),
        examples=examples[:MAX_EXAMPLES],
        guidance=aside_guidance(rate),
    )


def _usage(matches: list[str], total_words: int) -> MarkerUsage:
    return MarkerUsage(
        count=len(matches),
        rate=len(matches) / total_words * 100 if total_words else 0.0,
        examples=matches[:MAX_EXAMPLES],
    )


def _phrase_matches(phrases, text: str) -> list[str]:
    found = []
    for phrase in phrases:
        found.extend(m.group(0) for m in phrase_pattern(phrase).finditer(text))
    return found


def analyze(text: str, nlp: Optional[Tagger] = None) -> ExpressionMarkersReport:
    if nlp is None:
        nlp = load_nlp()
    sentences = split_keeping_terminators(text)
    total_words = word_count(text)

    return ExpressionMarkersReport(
        fragments=fragments(sentences, nlp),
        rhetorical_questions=rhetorical_questions(sentences, total_words),
        mid_sentence_asides=mid_sentence_asides(sentences),
        contractions=_usage(CONTRACTION.findall(text), total_words),
        hedging_phrases=_usage(_phrase_matches(HEDGING_PHRASES, text), total_words),
        emphatic_markers=_usage(_phrase_matches(EMPHATIC_WORDS, text), total_words),
    )
