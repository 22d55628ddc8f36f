"""
Specificity Patterns

Possessive and demonstrative references ("my rig", "this card") against
generic ones ("the card", "a card", sentence-initial bare plurals). A
writer who owns and tests what they write about leans possessive.
"""

import re
from dataclasses import dataclass, field
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from voice_analyzer.config import Thresholds
from voice_analyzer.models import Report


CONTEXT_CHARS = 60
EXAMPLES_PER_PATTERN = 3
DOMINANT_NOUNS = 10
OWNERSHIP_GUIDANCE = 0.3

# A determiner, then the shortest run of letters up to the next space or
# sentence punctuation
NOUN = r"\s+([a-z][a-z\s-]{1,30}?)(?=\s|[.,!?])"


@dataclass(frozen=True)
class DeterminerRule:
    label: str
    category: str
    pattern: re.Pattern


POSSESSIVE_RULES = (
    DeterminerRule("my/our", "possessive", re.compile(rf"\b(my|our){NOUN}", re.IGNORECASE)),
    DeterminerRule("your/yours", "possessive", re.compile(rf"\b(your|yours){NOUN}", re.IGNORECASE)),
    # Names are case-sensitive
    DeterminerRule("third-person", "possessive", re.compile(rf"\b([A-Z][a-z]+'s|their){NOUN}")),
    DeterminerRule(
        "demonstrative", "demonstrative",
        re.compile(rf"\b(this|that|these|those){NOUN}", re.IGNORECASE),
    ),
)

GENERIC_RULES = (
    DeterminerRule("the", "generic_article", re.compile(rf"\b(the){NOUN}", re.IGNORECASE)),
    DeterminerRule("a/an", "generic_article", re.compile(rf"\b(an?){NOUN}", re.IGNORECASE)),
)

BARE_PLURAL = re.compile(r"(?:^|\.\s+)([A-Z][a-z]+s)\s")


class PatternExample(BaseModel):
    model_config = ConfigDict(frozen=True)

    phrase: str
    context: str


class SpecificityPattern(BaseModel):
    model_config = ConfigDict(frozen=True)

    pattern: str
    category: str
    frequency: int
    examples: list[PatternExample] = Field(default_factory=list)


class NounCount(BaseModel):
    model_config = ConfigDict(frozen=True)

    noun: str
    count: int


class SpecificityReport(Report):
    report_name = "specificity-patterns"

    possessive_patterns: list[SpecificityPattern] = Field(default_factory=list)
    generic_patterns: list[SpecificityPattern] = Field(default_factory=list)
    specificity_ratio: float  # possessive / (possessive + generic)
    dominant_nouns: list[NounCount] = Field(default_factory=list)
    interpretation: str
    guidance: str


@dataclass
class _Tally:
    category: str
    noun: Optional[str]
    frequency: int = 0
    examples: list = field(default_factory=list)


def context(text: str, position: int, width: int = CONTEXT_CHARS) -> str:
    """Text around a position, wrapped in ellipses."""
    start = max(0, position - width)
    return "..." + text[start:position + width].strip() + "..."


def _record(tallies: dict[str, _Tally], phrase: str, category: str, noun: Optional[str], text: str, position: int):
    tally = tallies.setdefault(phrase, _Tally(category=category, noun=noun))
    tally.frequency += 1
    if len(tally.examples) < EXAMPLES_PER_PATTERN:
        tally.examples.append(PatternExample(phrase=phrase, context=context(text, position)))


def _collect(text: str, table, tallies: dict[str, _Tally]) -> None:
    for rule in table:
        for match in rule.pattern.finditer(text):
            determiner, noun = match.group(1), match.group(2).strip()
            if len(noun) < 3:
                continue
            _record(tallies, f"{determiner} {noun}", rule.category, noun, text, match.start())


def _to_patterns(tallies: dict[str, _Tally]) -> list[SpecificityPattern]:
    ordered = sorted(tallies.items(), key=lambda item: item[1].frequency, reverse=True)
    return [
        SpecificityPattern(pattern=phrase, category=t.category, frequency=t.frequency, examples=t.examples)
        for phrase, t in ordered
    ]


def possessive_patterns(text: str) -> tuple[list[SpecificityPattern], dict[str, _Tally]]:
    tallies: dict[str, _Tally] = {}
    _collect(text, POSSESSIVE_RULES, tallies)
    return _to_patterns(tallies), tallies


def generic_patterns(text: str) -> list[SpecificityPattern]:
    tallies: dict[str, _Tally] = {}
    _collect(text, GENERIC_RULES, tallies)
    for match in BARE_PLURAL.finditer(text):
        _record(tallies, match.group(1), "bare_plural", None, text, match.start())
    return _to_patterns(tallies)


def dominant_nouns(tallies: dict[str, _Tally], limit: int = DOMINANT_NOUNS) -> list[NounCount]:
    counts: dict[str, int] = {}
    for tally in tallies.values():
        if tally.noun:
            noun = tally.noun.lower()
            counts[noun] = counts.get(noun, 0) + tally.frequency
    ordered = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [NounCount(noun=noun, count=count) for noun, count in ordered[:limit]]


def interpret(ratio: float, thresholds: Optional[Thresholds] = None) -> str:
    thresholds = thresholds or Thresholds()
    if ratio > thresholds.specificity_high:
        return "High specificity - strong personal ownership and testing authority"
    if ratio > thresholds.specificity_moderate:
        return "Moderate specificity - balanced personal and general references"
    if ratio > thresholds.specificity_low:
        return "Low specificity - predominantly generic references"
    return "Very low specificity - abstract or impersonal voice"


def guidance(ratio: float, nouns: list[NounCount], thresholds: Optional[Thresholds] = None) -> str:
    thresholds = thresholds or Thresholds()
    lines = ["### Specificity Pattern Guidance", ""]

    if ratio > OWNERSHIP_GUIDANCE:
        lines += [
            "**Voice Characteristic:** This writer establishes authority through personal ownership.",
            "",
            "**How to replicate:**",
            '- Use possessive determiners frequently: "my [noun]", "our [approach]"',
            "- Avoid generic articles when discussing tested/owned items",
            '- Demonstratives ("this", "that") show hands-on familiarity',
        ]
    elif ratio > thresholds.specificity_low:
        lines += [
            "**Voice Characteristic:** Balanced between personal experience and general discussion.",
            "",
            "**How to replicate:**",
            "- Mix possessive references with generic articles naturally",
            '- Use "my/our" for personally tested items',
            '- Use "the/a" for general industry discussion',
        ]
    else:
        lines += [
            "**Voice Characteristic:** Abstract, academic, or impersonal tone.",
            "",
            "**How to replicate:**",
            '- Predominantly use definite/indefinite articles ("the", "a/an")',
            "- Avoid personal possessives unless necessary",
            "- Maintain objective distance from subject matter",
        ]
    lines.append("")

    if nouns:
        lines += [f"**Dominant topics:** {', '.join(n.noun for n in nouns[:5])}", ""]

    return "\n".join(lines)


def analyze(text: str, thresholds: Optional[Thresholds] = None) -> SpecificityReport:
    possessive, tallies = possessive_patterns(text)
    generic = generic_patterns(text)

    total_possessive = sum(p.frequency for p in possessive)
    total_generic = sum(p.frequency for p in generic)
    ratio = total_possessive / (total_possessive + total_generic) if total_generic else 0.0

    nouns = dominant_nouns(tallies)
    return SpecificityReport(
        possessive_patterns=possessive,
        generic_patterns=generic,
        specificity_ratio=ratio,
        dominant_nouns=nouns,
        interpretation=interpret(ratio, thresholds),
        guidance=guidance(ratio, nouns, thresholds),
    )
