"""
Paragraph Transitions

How one paragraph hands over to the next. Each paragraph gets a type and
each hand-over gets a linking device, both by ordered rule tables where
the first matching rule wins:

    paragraph type:  warning > personal > example > technical > explanation
    linking device:  additive > contrast > causal > temporal > example >
                     emphasis > question > conversational_restart > implicit

On top of the pairwise transitions, looks for longer topic shifts
(zoom in, zoom out, problem then solution) and energy shifts.
"""

import re
from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from voice_analyzer.corpus.splitter import excerpt, first_sentence, split_into_paragraphs
from voice_analyzer.models import Report
from voice_analyzer.patterns import any_phrase, first_match, rules


MIN_PARAGRAPH_CHARS = 50
EXAMPLES_PER_TRANSITION = 3
EXAMPLE_CHARS = 300

MEASUREMENT = r"\d+\s*(?:nm|kg|mm|watts|hz|fps)\b"

PARAGRAPH_TYPE_RULES = rules(
    ("warning", r"\b(?:before|caveat|warning|watch out|be careful|avoid)\b"),
    ("personal", r"\b(?:i['’]ve|my|i tested|in my experience|i found)\b"),
    ("example", r"\b(?:for example|for instance|consider|imagine|say you)\b"),
    ("technical", rf"\b(?:specifications|performance|features|technical|model|version)\b|{MEASUREMENT}"),
)

# Applied to the lowercased opening sentence of the second paragraph
LINKING_DEVICE_RULES = rules(
    ("additive", r"^(?:and|also|additionally|furthermore|moreover)\b"),
    ("contrast", r"^(?:but|however|though|although|yet|still)\b"),
    ("causal", r"^(?:so|therefore|thus|hence|consequently|as a result)\b"),
    ("temporal", r"^(?:now|then|next|after|before|when|once)\b"),
    ("example", r"^(?:for example|for instance|consider|imagine)\b"),
    ("emphasis", r"^(?:importantly|crucially|note that|remember|the key)\b"),
    ("question", r"\?"),
    ("conversational_restart", r"^(?:look|well|okay|right|actually)\b"),
)


class TransitionExample(BaseModel):
    model_config = ConfigDict(frozen=True)

    paragraph1: str
    transition_sentence: str
    paragraph2: str


class ParagraphTransition(BaseModel):
    model_config = ConfigDict(frozen=True)

    from_type: str
    to_type: str
    linking_device: str
    linking_phrase: Optional[str] = None
    frequency: int
    examples: list[TransitionExample] = Field(default_factory=list)


class TopicShiftPattern(BaseModel):
    model_config = ConfigDict(frozen=True)

    pattern: str
    description: str
    frequency: int
    examples: list[str] = Field(default_factory=list)


class EnergyShift(BaseModel):
    model_config = ConfigDict(frozen=True)

    from_state: str
    to_state: str
    description: str
    markers: list[str] = Field(default_factory=list)
    examples: list[str] = Field(default_factory=list)


class ParagraphTransitionsReport(Report):
    report_name = "paragraph-transitions"

    transitions: list[ParagraphTransition] = Field(default_factory=list)
    topic_shift_patterns: list[TopicShiftPattern] = Field(default_factory=list)
    energy_shifts: list[EnergyShift] = Field(default_factory=list)


def classify_paragraph(paragraph: str) -> str:
    return first_match(PARAGRAPH_TYPE_RULES, paragraph, default="explanation")


def linking_device(paragraph: str) -> str:
    return first_match(LINKING_DEVICE_RULES, first_sentence(paragraph).lower(), default="implicit")


def linking_phrase(paragraph: str, device: str) -> Optional[str]:
    """Opening words that carry the link: one for a restart, else up to three."""
    if device == "implicit":
        return None
    words = re.split(r"[.!?]", paragraph)[0].split()
    if device == "conversational_restart":
        return " ".join(words[:1])
    return " ".join(words[:3])


def detect_transitions(paragraphs: list[str]) -> list[ParagraphTransition]:
    grouped: dict[str, dict] = {}

    for before, after in zip(paragraphs, paragraphs[1:]):
        from_type = classify_paragraph(before)
        to_type = classify_paragraph(after)
        device = linking_device(after)
        key = f"{from_type}->{to_type}:{device}"

        if key not in grouped:
            grouped[key] = {
                "from_type": from_type,
                "to_type": to_type,
                "linking_device": device,
                "linking_phrase": linking_phrase(after, device),
                "frequency": 0,
                "examples": [],
            }
        entry = grouped[key]
        entry["frequency"] += 1
        if len(entry["examples"]) < EXAMPLES_PER_TRANSITION:
            entry["examples"].append(TransitionExample(
                paragraph1=excerpt(before, EXAMPLE_CHARS),
                transition_sentence=re.split(r"[.!?]", after)[0].strip(),
                paragraph2=excerpt(after, EXAMPLE_CHARS),
            ))

    # sorted() is stable, so ties keep first-seen order
    ordered = sorted(grouped.values(), key=lambda e: e["frequency"], reverse=True)
    return [ParagraphTransition(**entry) for entry in ordered]


# ---------------------------------------------------------------------------
# Topic and energy shifts
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ShiftSpec:
    """Adjacent paragraphs where the first matches ``first`` and the second ``second``."""
    title: str
    description: str
    first: re.Pattern
    second: re.Pattern
    label_first: str = ""
    label_second: str = ""

    def find(self, paragraphs: list[str]) -> list[str]:
        found = []
        for before, after in zip(paragraphs, paragraphs[1:]):
            if self.first.search(before) and self.second.search(after):
                found.append(
                    f"{self.label_first}{excerpt(before, EXAMPLE_CHARS)} → "
                    f"{self.label_second}{excerpt(after, EXAMPLE_CHARS)}"
                )
        return found


MEASUREMENT_PATTERN = re.compile(MEASUREMENT, re.IGNORECASE)

TOPIC_SHIFTS = (
    ShiftSpec(
        "Zoom In (General → Specific)",
        "Starts broad, then narrows to specific example or technical detail",
        any_phrase(("generally", "overall", "typically", "most", "many")),
        re.compile(rf"{any_phrase(('specifically', 'for example', 'for instance')).pattern}|{MEASUREMENT}", re.IGNORECASE),
    ),
    ShiftSpec(
        "Zoom Out (Specific → General)",
        "Discusses specific case, then pulls back to broader implications",
        MEASUREMENT_PATTERN,
        any_phrase(("this means", "in practice", "the takeaway", "overall")),
    ),
    ShiftSpec(
        "Problem → Solution Chain",
        "Identifies problem in one paragraph, provides solution in next",
        any_phrase(("problem", "issue", "challenge", "difficult", "struggle")),
        any_phrase(("solution", "fix", "answer", "resolve", "address", "works")),
        label_first="PROBLEM: ",
        label_second="SOLUTION: ",
    ),
)

ENERGY_SHIFTS = (
    (
        ShiftSpec(
            "High Energy (Enthusiasm)",
            "Establishes enthusiasm, then grounds in technical specifics",
            re.compile(rf"!|{any_phrase(('great', 'excellent', 'impressive')).pattern}", re.IGNORECASE),
            any_phrase(("specifications", "technical", "features", "performance")),
        ),
        "Technical Detail",
        "Exclamation marks → specification language",
    ),
    (
        ShiftSpec(
            "Technical Detail",
            "Presents specs, then validates with personal testing",
            any_phrase(("specifications", "technical", "features")),
            any_phrase(("i've", "my", "in my experience")),
        ),
        "Personal Experience",
        "Specification language → first-person",
    ),
)


def topic_shift_patterns(paragraphs: list[str]) -> list[TopicShiftPattern]:
    patterns = []
    for spec in TOPIC_SHIFTS:
        found = spec.find(paragraphs)
        if found:
            patterns.append(TopicShiftPattern(
                pattern=spec.title,
                description=spec.description,
                frequency=len(found),
                examples=found[:2],
            ))
    return patterns


def energy_shifts(paragraphs: list[str]) -> list[EnergyShift]:
    shifts = []
    for spec, to_state, marker in ENERGY_SHIFTS:
        found = spec.find(paragraphs)
        if found:
            shifts.append(EnergyShift(
                from_state=spec.title,
                to_state=to_state,
                description=spec.description,
                markers=[marker],
                examples=found[:3],
            ))
    return shifts


def analyze(text: str) -> ParagraphTransitionsReport:
    paragraphs = [p for p in split_into_paragraphs(text) if len(p) > MIN_PARAGRAPH_CHARS]

    return ParagraphTransitionsReport(
        transitions=detect_transitions(paragraphs),
        topic_shift_patterns=topic_shift_patterns(paragraphs),
        energy_shifts=energy_shifts(paragraphs),
    )
