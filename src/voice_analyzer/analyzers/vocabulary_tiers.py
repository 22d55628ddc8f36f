"""
Vocabulary Tiers

Formal vocabulary (verbs, adjectives, adverbs) and zero-tolerance AI slop,
each hit paired with casual replacements from the lexicon.

The formality score is formal words per 1000 words, rounded.
"""

import re
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from voice_analyzer.config import Thresholds
from voice_analyzer.metrics import round_half_up
from voice_analyzer.models import Report
from voice_analyzer.reference import Lexicon, default_lexicon


# Hyphenated compounds stay whole so "cutting-edge" can match
TOKEN = re.compile(r"[a-z0-9]+(?:-[a-z0-9]+)*")


class VocabularyTier(BaseModel):
    model_config = ConfigDict(frozen=True)

    word: str
    count: int
    category: Literal["verb", "adjective", "adverb"]
    formality: Literal["formal", "ai-slop"]
    suggested_alternatives: list[str] = Field(default_factory=list)


class VocabularyTiersReport(Report):
    report_name = "vocabulary-tiers"

    formal_verbs: list[VocabularyTier] = Field(default_factory=list)
    formal_adjectives: list[VocabularyTier] = Field(default_factory=list)
    formal_adverbs: list[VocabularyTier] = Field(default_factory=list)
    ai_slop: list[VocabularyTier] = Field(default_factory=list)
    total_words: int
    total_formal_words: int
    formality_score: int
    recommendations: list[str] = Field(default_factory=list)


def tokenize(text: str) -> list[str]:
    return TOKEN.findall(text.lower())


def inflections(word: str) -> set[str]:
    """The word plus its -s, -ed and -ing forms, dropping a silent e."""
    forms = {word, word + "s", word + "ed", word + "ing"}
    if word.endswith("e"):
        forms |= {word + "d", word[:-1] + "ing"}
    return forms


def _tier(words: tuple[str, ...], counts: dict[str, int], category: str, formality: str,
          lexicon: Lexicon, inflected: bool) -> list[VocabularyTier]:
    tiers = []
    for word in words:
        forms = inflections(word) if inflected else {word}
        count = sum(counts.get(form, 0) for form in forms)
        if count > 0:
            tiers.append(VocabularyTier(
                word=word,
                count=count,
                category=category,
                formality=formality,
                suggested_alternatives=lexicon.alternatives_for(word),
            ))
    return sorted(tiers, key=lambda t: t.count, reverse=True)


def recommendations(report_counts: dict, score: int, thresholds: Thresholds) -> list[str]:
    notes = []
    slop, verbs = report_counts["ai_slop"], report_counts["formal_verbs"]

    if slop:
        notes.append(f"CRITICAL: Found {len(slop)} AI slop words. These MUST be removed.")

    if score > thresholds.formality_high:
        notes.append(f"HIGH FORMALITY: {score} formal words per 1000. Replace with casual equivalents.")
    elif score > thresholds.formality_moderate:
        notes.append(f"MODERATE FORMALITY: {score} formal words per 1000. Consider simplifying.")
    elif score > thresholds.formality_acceptable:
        notes.append(f"ACCEPTABLE: {score} formal words per 1000. Minor tweaks recommended.")
    else:
        notes.append(f"CASUAL VOICE: {score} formal words per 1000. Good natural tone.")

    if verbs:
        top = ", ".join(f'"{v.word}" ({v.count}×)' for v in verbs[:3])
        notes.append(f"Most used formal verbs: {top}")

    return notes


def analyze(text: str, lexicon: Optional[Lexicon] = None,
            thresholds: Optional[Thresholds] = None) -> VocabularyTiersReport:
    lexicon = lexicon or default_lexicon()
    thresholds = thresholds or Thresholds()

    words = tokenize(text)
    counts: dict[str, int] = {}
    for word in words:
        counts[word] = counts.get(word, 0) + 1

    tiers = {
        "formal_verbs": _tier(lexicon.formal_verbs, counts, "verb", "formal", lexicon, inflected=True),
        "formal_adjectives": _tier(lexicon.formal_adjectives, counts, "adjective", "formal", lexicon, inflected=False),
        "formal_adverbs": _tier(lexicon.formal_adverbs, counts, "adverb", "formal", lexicon, inflected=False),
        "ai_slop": _tier(lexicon.ai_slop, counts, "verb", "ai-slop", lexicon, inflected=True),
    }

    total_formal = sum(
        t.count for name in ("formal_verbs", "formal_adjectives", "formal_adverbs") for t in tiers[name]
    )
    score = round_half_up(total_formal / len(words) * 1000) if words else 0

    return VocabularyTiersReport(
        **tiers,
        total_words=len(words),
        total_formal_words=total_formal,
        formality_score=score,
        recommendations=recommendations(tiers, score, thresholds),
    )
