"""
Phrase Library

Phrases lifted from the corpus for direct imitation: how paragraphs open,
sentence-initial transitions, equipment references and caveats.
"""

import re
from typing import Iterable

from pydantic import BaseModel, ConfigDict, Field

from voice_analyzer.corpus.splitter import PARAGRAPH_BOUNDARY, SENTENCE_BOUNDARY
from voice_analyzer.models import PhraseExample, Report
from voice_analyzer.patterns import any_phrase, first_match, phrase_pattern, rules


MIN_SENTENCE_CHARS = 10
MAX_CAVEAT_CHARS = 100
POSSESSIVE_LIMIT = 30
GENERIC_LIMIT = 20
CAVEAT_LIMIT = 20

OPENING_RULES = rules(
    ("personal_story", r"\b(?:i['’]ve|i['’]m|i was|i have|for me|my|when i|how i)\b"),
    ("direct_action", r"\b(?:right|so|now|let['’]s|first|start|here['’]s|okay)\b"),
    ("protective_warning", r"\b(?:before|make sure|important|note|remember|warning|careful)\b"),
)

TRANSITION_MARKERS = (
    "at this", "once you", "once we", "at that", "after that", "from there",
    "next up", "moving on", "the key", "the thing", "in fact", "actually",
    "however", "though", "still", "meanwhile", "alternatively",
    "for instance", "for example", "essentially", "basically",
)

EQUIPMENT_WORDS = (
    "pc", "rig", "card", "gpu", "block", "pad", "thermal", "cooler",
    "radiator", "pump", "fan", "case", "system", "setup", "hardware",
    "device", "product", "equipment", "unit", "tool",
)

CAVEAT_MARKERS = (
    "it isn't", "it's not", "not perfect", "not ideal", "could be better",
    "i wish", "would have", "should have", "probably", "might not",
    "may not", "doesn't always", "won't always", "can be", "tends to",
    "in my case", "for me", "your mileage",
)

CAVEAT_PATTERN = any_phrase(CAVEAT_MARKERS)

# Marker plus everything up to the first comma
TRANSITION_PATTERNS = tuple(
    re.compile(rf"^{phrase_pattern(marker).pattern}[^,]*", re.IGNORECASE)
    for marker in TRANSITION_MARKERS
)

POSSESSIVE_EQUIPMENT = re.compile(rf"\b(?:my|our)\s+(?:{'|'.join(EQUIPMENT_WORDS)})\b", re.IGNORECASE)
GENERIC_EQUIPMENT = re.compile(rf"\b(?:the|this|that|a)\s+(?:{'|'.join(EQUIPMENT_WORDS)})\b", re.IGNORECASE)


class OpeningPhrases(BaseModel):
    model_config = ConfigDict(frozen=True)

    personal_story: list[PhraseExample] = Field(default_factory=list)
    direct_action: list[PhraseExample] = Field(default_factory=list)
    protective_warning: list[PhraseExample] = Field(default_factory=list)


class EquipmentReferences(BaseModel):
    model_config = ConfigDict(frozen=True)

    with_possessive: list[PhraseExample] = Field(default_factory=list)
    generic: list[PhraseExample] = Field(default_factory=list)


class PhraseLibraryReport(Report):
    report_name = "phrase-library"

    opening_patterns: OpeningPhrases
    transition_phrases: list[PhraseExample] = Field(default_factory=list)
    equipment_references: EquipmentReferences
    caveat_phrases: list[PhraseExample] = Field(default_factory=list)
    total_phrases: int


def _sentences(text: str) -> list[str]:
    return [s.strip() for s in SENTENCE_BOUNDARY.split(text) if len(s.strip()) > MIN_SENTENCE_CHARS]


def _ranked(counts: dict[str, int], limit: int | None = None) -> list[PhraseExample]:
    ordered = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    if limit is not None:
        ordered = ordered[:limit]
    return [PhraseExample(phrase=phrase, count=count) for phrase, count in ordered]


def _tally(phrases: Iterable[str]) -> dict[str, int]:
    counts: dict[str, int] = {}
    for phrase in phrases:
        counts[phrase] = counts.get(phrase, 0) + 1
    return counts


def opening_sentences(text: str) -> list[str]:
    """First sentence over ten characters from each paragraph that has one."""
    openings = []
    for paragraph in PARAGRAPH_BOUNDARY.split(text):
        sentences = _sentences(paragraph)
        if sentences:
            openings.append(sentences[0])
    return openings


def opening_patterns(text: str) -> OpeningPhrases:
    grouped: dict[str, list[PhraseExample]] = {rule.label: [] for rule in OPENING_RULES}
    for sentence in opening_sentences(text):
        label = first_match(OPENING_RULES, sentence)
        if label:
            grouped[label].append(PhraseExample(phrase=sentence, count=1))
    return OpeningPhrases(**grouped)


def transition_phrases(text: str) -> list[PhraseExample]:
    found = []
    for sentence in _sentences(text):
        for pattern in TRANSITION_PATTERNS:
            match = pattern.match(sentence)
            if match:
                found.append(match.group(0).strip())
    return _ranked(_tally(found))


def equipment_references(text: str) -> EquipmentReferences:
    def normalized(pattern):
        return (" ".join(m.group(0).lower().split()) for m in pattern.finditer(text))

    return EquipmentReferences(
        with_possessive=_ranked(_tally(normalized(POSSESSIVE_EQUIPMENT)), POSSESSIVE_LIMIT),
        generic=_ranked(_tally(normalized(GENERIC_EQUIPMENT)), GENERIC_LIMIT),
    )


def caveat_phrases(text: str) -> list[PhraseExample]:
    found = [
        sentence for sentence in _sentences(text)
        if CAVEAT_PATTERN.search(sentence) and len(sentence) < MAX_CAVEAT_CHARS
    ]
    return _ranked(_tally(found), CAVEAT_LIMIT)


def analyze(text: str) -> PhraseLibraryReport:
    openings = opening_patterns(text)
    transitions = transition_phrases(text)
    equipment = equipment_references(text)
    caveats = caveat_phrases(text)

    total = (
        len(openings.personal_story)
        + len(openings.direct_action)
        + len(openings.protective_warning)
        + len(transitions)
        + len(equipment.with_possessive)
        + len(equipment.generic)
        + len(caveats)
    )

    return PhraseLibraryReport(
        opening_patterns=openings,
        transition_phrases=transitions,
        equipment_references=equipment,
        caveat_phrases=caveats,
        total_phrases=total,
    )
