"""
Voice Markers

Person, passive voice, hedging and certainty, plus the phrase lists that
separate a lived-in voice from stock AI and marketing copy.
"""

import re
from collections import Counter

from pydantic import BaseModel, ConfigDict, Field

from voice_analyzer.corpus.splitter import split_into_paragraphs, split_into_sentences
from voice_analyzer.models import Report
from voice_analyzer.patterns import count_matches, count_phrase, rules


FIRST_PERSON_PATTERNS = (
    "I've", "I have", "I am", "I'm", "I was", "I'd", "I would", "I will",
    "I own", "I tested", "my", "mine", "myself",
)

SECOND_PERSON_PATTERNS = ("you", "your", "you're", "you've", "yourself")

HEDGING_WORDS = (
    "perhaps", "possibly", "might", "may", "could", "probably",
    "somewhat", "fairly", "rather", "quite", "relatively",
)

CERTAINTY_WORDS = (
    "definitely", "absolutely", "certainly", "clearly", "obviously",
    "undoubtedly", "undeniably", "unquestionably",
)

CONVERSATIONAL_WORDS = (
    "look", "well", "frankly", "honestly", "actually", "basically",
    "simply", "essentially",
)

AI_CLICHES = (
    # Core tells
    "dive into", "delve into", "delve", "unlock", "leverage", "leveraging",
    "cutting-edge", "game-changer", "transform your", "elevate your",
    "seamless", "seamlessly", "robust", "revolutionize",
    # Landscape and journey metaphors
    "rapidly evolving", "evolving landscape", "digital landscape",
    "in today's world", "in today's", "today's landscape",
    # Power and potential
    "harness", "harnessing", "harness the power", "unlock the potential",
    "unleash", "tap into",
    # Corporate speak
    "utilize", "utilization", "empower", "synergy", "paradigm",
    "ecosystem", "holistic", "streamline",
    # Filler
    "at the end of the day", "it goes without saying",
    "needless to say", "it's worth noting", "it is worth noting",
    "it bears mentioning", "it should be noted",
    # Enthusiasm
    "game changer", "absolute game changer", "truly remarkable",
    "incredibly powerful", "truly amazing", "absolutely essential",
)

NEXT_LEVEL_LABEL = "take your ... to the next level"
NEXT_LEVEL = re.compile(r"\btake\s+your\s+.{1,40}?\s+to\s+the\s+next\s+level\b", re.IGNORECASE)

MARKETING_SPEAK = (
    "best in class", "industry-leading", "premium experience",
    "world-class", "state-of-the-art", "next-generation",
    "revolutionary", "groundbreaking", "unparalleled", "unmatched",
    "second to none", "best-in-class", "market-leading",
)

SIGNATURE_HEDGING = (
    "I'm pretty sure", "my drive-by opinion", "my drive by opinion",
    "I'm hopeful", "in my experience", "I tend to", "might look like",
    "I'm reasonably certain", "from what I've", "I reckon", "I'd say",
)

COLLEGIAL_PATTERNS = (
    "obviously this is inevitable", "we're all busy", "but there's more to it",
    "of course", "to be fair", "let's be honest", "the reality is",
)

IDENTITY_MARKERS = {
    "genuine_interest": (
        "I'm very much into", "I've always loved",
        "I've always been interested", "I'm really into",
    ),
    "honest_obsession": (
        "fell down the slippery slope", "slippery slope", "quickly fell into",
        "became obsessed", "couldn't stop",
    ),
    "humble_helper": (
        "I'm hopeful I can help", "I'm hopeful that I can", "share the lessons",
        "hard lessons I've had", "lessons I've learned", "help you learn from",
    ),
    "transparency_commitment": (
        "I'll be completely transparent", "completely transparent",
        "where I could have saved", "what I'd do differently",
        "what I would do differently", "if I was building this again",
        "if I was doing this again", "many things I would do differently",
    ),
}

HOLLOW_INTENSIFIERS = (
    ("honestly", "just state the fact directly"),
    ("genuinely", "remove - if it's genuine, it shows"),
    ("the real", "drop 'real' - 'the issue' not 'the real issue'"),
    ("really", "often removable - 'I enjoyed' not 'I really enjoyed'"),
    ("truly", "remove - sounds like marketing copy"),
    ("actually really", "pick one or neither"),
    ("I have to say", "just say it"),
    ("I must say", "just say it"),
    ("to be honest", "implies you're not honest elsewhere"),
    ("if I'm being honest", "remove - just be honest"),
    ("in all honesty", "remove - state the fact"),
    ("the truth is", "remove - just state the truth"),
    ("I can honestly say", "just say it"),
    ("quite frankly", "'frankly' alone or remove both"),
)

# "my Simucube 2 Pro", "my NVIDIA 3090 RTX FE"
SPECIFIC_EQUIPMENT = re.compile(r"\bmy\s+[A-Z]\w*(?:\s+[\w\d]+){0,4}")

GENERIC_EQUIPMENT = (
    "the wheelbase", "the wheel base", "a wheelbase", "the pedals",
    "the graphics card", "a graphics card", "the product", "this product",
    "the setup", "your setup", "the hardware", "this hardware",
)

PASSIVE_VOICE = re.compile(r"\b(was|were|been)\s+\w+ed\b", re.IGNORECASE)

# A paragraph may count toward several opening groups
OPENING_GROUPS = {
    "personal_context": rules(
        ("for me", r"^For me,"), ("always", r"^I've always"),
        ("very much", r"^I'm very much"), ("own", r"^I own"),
    ),
    "observation": rules(
        ("surprisingly", r"^Surprisingly"), ("interestingly", r"^Interestingly"),
        ("strangely", r"^Strangely"),
    ),
    "question": rules(
        ("how does", r"^How does"), ("how do", r"^How do"), ("what is", r"^What is"),
        ("why do", r"^Why do"), ("have you", r"^Have you"),
    ),
    "direct_problem": rules(
        ("addressing", r"^Addressing"), ("the main", r"^The (main|core|fundamental)"),
        ("one of the", r"^One of the"),
    ),
}


class PhraseCount(BaseModel):
    model_config = ConfigDict(frozen=True)

    phrase: str
    count: int


class RateWithExamples(BaseModel):
    """Occurrences per 100 words, with the phrases that produced them."""

    model_config = ConfigDict(frozen=True)

    frequency: float
    examples: list[PhraseCount] = Field(default_factory=list)


class EquipmentSpecificity(BaseModel):
    model_config = ConfigDict(frozen=True)

    specific: list[PhraseCount] = Field(default_factory=list)
    generic: list[PhraseCount] = Field(default_factory=list)


class IdentityMarkers(BaseModel):
    model_config = ConfigDict(frozen=True)

    genuine_interest: list[PhraseCount] = Field(default_factory=list)
    honest_obsession: list[PhraseCount] = Field(default_factory=list)
    humble_helper: list[PhraseCount] = Field(default_factory=list)
    transparency_commitment: list[PhraseCount] = Field(default_factory=list)


class OpeningCounts(BaseModel):
    model_config = ConfigDict(frozen=True)

    personal_context: int = 0
    observation: int = 0
    question: int = 0
    direct_problem: int = 0


class HollowIntensifier(BaseModel):
    model_config = ConfigDict(frozen=True)

    phrase: str
    count: int
    alternative: str


class VoiceReport(Report):
    report_name = "voice"

    first_person: RateWithExamples
    second_person: RateWithExamples
    passive_voice_ratio: float  # per 100 sentences
    hedging_language: RateWithExamples
    certainty_markers: list[PhraseCount] = Field(default_factory=list)
    conversational_markers: list[PhraseCount] = Field(default_factory=list)
    ai_cliches: list[PhraseCount] = Field(default_factory=list)
    marketing_speak: list[PhraseCount] = Field(default_factory=list)
    signature_hedging: list[PhraseCount] = Field(default_factory=list)
    collegial_patterns: list[PhraseCount] = Field(default_factory=list)
    equipment_specificity: EquipmentSpecificity
    identity_markers: IdentityMarkers
    opening_patterns: OpeningCounts
    hollow_intensifiers: list[HollowIntensifier] = Field(default_factory=list)


def phrase_counts(phrases, text: str) -> list[PhraseCount]:
    """Counts for each phrase, keeping only those that occur."""
    counts = [PhraseCount(phrase=p, count=count_phrase(p, text)) for p in phrases]
    return [c for c in counts if c.count > 0]


def _rate(phrases, text: str, total_words: int) -> RateWithExamples:
    examples = phrase_counts(phrases, text)
    total = sum(e.count for e in examples)
    return RateWithExamples(
        frequency=total / total_words * 100 if total_words else 0.0,
        examples=examples,
    )


def _opening_counts(text: str) -> OpeningCounts:
    counts = Counter()
    for paragraph in split_into_paragraphs(text):
        first_sentence = re.split(r"[.!?]", paragraph)[0]
        for group, table in OPENING_GROUPS.items():
            if any(rule.matches(first_sentence) for rule in table):
                counts[group] += 1
    return OpeningCounts(**counts)


def analyze(text: str) -> VoiceReport:
    total_words = len(text.split())
    sentences = split_into_sentences(text)

    passive = count_matches(PASSIVE_VOICE, text)

    ai_cliches = phrase_counts(AI_CLICHES, text)
    next_level = count_matches(NEXT_LEVEL, text)
    if next_level:
        ai_cliches.append(PhraseCount(phrase=NEXT_LEVEL_LABEL, count=next_level))

    specific = Counter(m.group(0) for m in SPECIFIC_EQUIPMENT.finditer(text))

    hollow = [
        HollowIntensifier(phrase=p, count=count_phrase(p, text), alternative=alt)
        for p, alt in HOLLOW_INTENSIFIERS
    ]

    return VoiceReport(
        first_person=_rate(FIRST_PERSON_PATTERNS, text, total_words),
        second_person=_rate(SECOND_PERSON_PATTERNS, text, total_words),
        passive_voice_ratio=passive / len(sentences) * 100 if sentences else 0.0,
        hedging_language=_rate(HEDGING_WORDS, text, total_words),
        certainty_markers=phrase_counts(CERTAINTY_WORDS, text),
        conversational_markers=phrase_counts(CONVERSATIONAL_WORDS, text),
        ai_cliches=ai_cliches,
        marketing_speak=phrase_counts(MARKETING_SPEAK, text),
        signature_hedging=phrase_counts(SIGNATURE_HEDGING, text),
        collegial_patterns=phrase_counts(COLLEGIAL_PATTERNS, text),
        equipment_specificity=EquipmentSpecificity(
            specific=[PhraseCount(phrase=p, count=c) for p, c in specific.most_common()],
            generic=phrase_counts(GENERIC_EQUIPMENT, text),
        ),
        identity_markers=IdentityMarkers(**{
            group: phrase_counts(phrases, text) for group, phrases in IDENTITY_MARKERS.items()
        }),
        opening_patterns=_opening_counts(text),
        hollow_intensifiers=[h for h in hollow if h.count > 0],
    )
