"""
Argument Flow

How the writer builds an argument: which multi-sentence patterns their
paragraphs follow, which conversational devices steer the reader, and how
pieces tend to open and close.

Each argument pattern is scored for confidence. A "strong" match has the
trigger plus the supporting structure (a warning that also gives an
example and advice); a "weak" match has the trigger alone.
"""

import re
from dataclasses import dataclass
from typing import Callable, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from voice_analyzer.config import Thresholds
from voice_analyzer.corpus.splitter import PARAGRAPH_BOUNDARY, excerpt, split_into_sentences
from voice_analyzer.models import Report


MIN_PARAGRAPH_CHARS = 100
MIN_SENTENCE_CHARS = 20
EXAMPLES_PER_PATTERN = 3
EXAMPLES_PER_DEVICE = 5
MOVE_WINDOW = 10
MOVE_EXCERPT = 300

Confidence = Literal["high", "medium", "low"]
Strength = Optional[Literal["strong", "weak"]]

PRODUCT_NAME = re.compile(r"\b[A-Z][a-z]+\s+[A-Z0-9][a-z0-9]+(\s+(Pro|Ultra|Max|Plus|GT))?\b")


class ArgumentComponents(BaseModel):
    model_config = ConfigDict(frozen=True)

    opening: Optional[str] = None
    claim: Optional[str] = None
    evidence: Optional[str] = None
    conclusion: Optional[str] = None


class ArgumentExample(BaseModel):
    model_config = ConfigDict(frozen=True)

    full_text: str
    components: ArgumentComponents


class ArgumentPattern(BaseModel):
    model_config = ConfigDict(frozen=True)

    pattern: str
    description: str
    frequency: int
    confidence: Confidence
    confidence_score: float  # strong matches / examples
    examples: list[ArgumentExample] = Field(default_factory=list)


class ConversationalDevice(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: str
    trigger: str
    context: str
    purpose: str
    frequency: int
    examples: list[str] = Field(default_factory=list)


class Move(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: str
    description: str
    frequency: int
    examples: list[str] = Field(default_factory=list)


class ArgumentFlowReport(Report):
    report_name = "argument-flow"

    patterns: list[ArgumentPattern] = Field(default_factory=list)
    conversational_devices: list[ConversationalDevice] = Field(default_factory=list)
    opening_moves: list[Move] = Field(default_factory=list)
    closing_moves: list[Move] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Conversational devices
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DeviceSpec:
    trigger: str
    pattern: re.Pattern
    type: str
    context: str
    purpose: str


DEVICES = (
    DeviceSpec(
        "actually", re.compile(r"\bactually\b", re.IGNORECASE), "thought_restart",
        "Appears mid-argument to pivot from expectation to reality",
        "Signals course correction - \"here's what's really true\"",
    ),
    DeviceSpec(
        "look", re.compile(r"\blook[,:\s]", re.IGNORECASE), "reader_alignment",
        "Sentence-initial position, before key point",
        "Breaks formality, demands attention for important point",
    ),
    DeviceSpec(
        "well", re.compile(r"\bwell[,:\s]", re.IGNORECASE), "thought_restart",
        "Transition between thoughts",
        "Signals considerate pause or reconsideration",
    ),
    DeviceSpec(
        "frankly", re.compile(r"\bfrankly\b", re.IGNORECASE), "admission",
        "Before inconvenient truth or unpopular opinion",
        "Signals honest admission, potentially controversial view",
    ),
    DeviceSpec(
        "obviously", re.compile(r"\bobviously\b", re.IGNORECASE), "reader_alignment",
        "Normalizing shortcuts or common knowledge",
        "Establishes shared understanding, validates reader's shortcuts",
    ),
)

MARKDOWN_CLEANUP = (
    (re.compile(r"\[([^\]]*)\]\([^)]*\)"), r"\1"),
    (re.compile(r"^#{1,6}\s+", re.MULTILINE), ""),
    (re.compile(r"\*\*([^*]+)\*\*"), r"\1"),
    (re.compile(r"\*([^*]+)\*"), r"\1"),
    (re.compile(r"`([^`]+)`"), r"\1"),
    (re.compile(r"\s+"), " "),
)


def clean_markdown(text: str) -> str:
    """Strip links, headers, emphasis and code marks from an excerpt."""
    for pattern, replacement in MARKDOWN_CLEANUP:
        text = pattern.sub(replacement, text)
    return text.strip()


def device_examples(sentences: list[str], trigger: str, limit: int = EXAMPLES_PER_DEVICE) -> list[str]:
    """Sentences containing the trigger, each with the sentence before it."""
    examples = []
    for i, sentence in enumerate(sentences):
        if len(examples) >= limit:
            break
        if trigger in sentence.lower():
            context = f"{sentences[i - 1]}. {sentence}." if i > 0 else f"{sentence}."
            examples.append(clean_markdown(context))
    return examples


def conversational_devices(text: str) -> list[ConversationalDevice]:
    sentences = split_into_sentences(text)
    devices = []
    for spec in DEVICES:
        frequency = len(spec.pattern.findall(text))
        if frequency == 0:
            continue
        devices.append(ConversationalDevice(
            type=spec.type,
            trigger=spec.trigger,
            context=spec.context,
            purpose=spec.purpose,
            frequency=frequency,
            examples=device_examples(sentences, spec.trigger),
        ))
    return devices


# ---------------------------------------------------------------------------
# Argument patterns
# ---------------------------------------------------------------------------

def _contains_any(text: str, needles) -> bool:
    return any(n in text for n in needles)


def _long_sentences(paragraph: str) -> list[str]:
    return [s.strip() for s in re.split(r"[.!?]+", paragraph) if len(s.strip()) > MIN_SENTENCE_CHARS]


@dataclass(frozen=True)
class PatternSpec:
    """
    One argument pattern.

    ``detect`` returns None when the paragraph is not an instance, or a
    (strength, components) pair when it is. A strength of None means the
    paragraph counts as an example but toward neither strong nor weak.
    """
    title: str
    description: str
    detect: Callable[[str], Optional[tuple[Strength, ArgumentComponents]]]


def _warning(paragraph: str):
    lower = paragraph.lower()
    if not _contains_any(lower, ("before we", "caveat", "warning", "watch out", "be careful")):
        return None
    sentences = _long_sentences(paragraph)
    if len(sentences) < 2:
        return None
    has_example = _contains_any(lower, ("for example", "for instance")) or re.search(r"\d", paragraph)
    has_advice = _contains_any(lower, ("instead", "should", "recommend"))
    strength = "strong" if has_example and has_advice else "weak"
    return strength, ArgumentComponents(opening=sentences[0], claim=sentences[1], conclusion=sentences[-1])


def _claim_evidence(paragraph: str):
    lower = paragraph.lower()
    if not _contains_any(lower, ("i've tested", "in my experience", "after using", "i've found")):
        return None
    sentences = _long_sentences(paragraph)
    if len(sentences) < 2:
        return None
    concise_claim = len(sentences[0]) < 150
    has_conclusion = _contains_any(lower, ("so ", "therefore", "this means"))
    strength = "strong" if concise_claim and has_conclusion else "weak"
    return strength, ArgumentComponents(
        claim=sentences[0],
        evidence=". ".join(sentences[1:-1]),
        conclusion=sentences[-1],
    )


def _problem_solution(paragraph: str):
    lower = paragraph.lower()
    has_problem = _contains_any(lower, ("the problem", "the issue", "struggle", "challenge"))
    has_solution = _contains_any(lower, ("solution", "fix", "answer", "works", "solved"))
    if not (has_problem and has_solution):
        return None
    sentences = _long_sentences(paragraph)
    has_counter = _contains_any(lower, ("but ", "however", "although"))
    return ("strong" if has_counter else "weak"), ArgumentComponents(
        opening=sentences[0] if sentences else "",
        conclusion=sentences[-1] if sentences else "",
    )


def _specification(paragraph: str):
    product = PRODUCT_NAME.search(paragraph)
    if not product or len(paragraph) <= 200:
        return None
    lower = paragraph.lower()
    has_benefit = _contains_any(lower, ("because", "lets you", "allows"))
    has_defense = _contains_any(lower, ("yes", "expensive", "worth"))
    if has_benefit and has_defense:
        strength = "strong"
    elif has_benefit or has_defense:
        strength = "weak"
    else:
        strength = None
    sentences = _long_sentences(paragraph)
    return strength, ArgumentComponents(
        opening=sentences[0] if sentences else "",
        claim=product.group(0),
    )


ARGUMENT_PATTERNS = (
    PatternSpec(
        "Protective Warning → Specific Example → Practical Advice",
        "Warns readers about common mistakes by starting with a caveat, giving specific "
        "examples, then transitioning to what to do instead",
        _warning,
    ),
    PatternSpec(
        "Claim → Personal Evidence → Conclusion",
        "Makes a claim, supports it with personal testing experience, draws practical conclusion",
        _claim_evidence,
    ),
    PatternSpec(
        "Problem → Solution → Counter-objection",
        "Identifies a problem, proposes solution, then addresses obvious objection preemptively",
        _problem_solution,
    ),
    PatternSpec(
        "Specification → Why It Matters → Preemptive Defense",
        "Names specific product (never generic), explains practical benefit, addresses "
        "price/complexity concern",
        _specification,
    ),
)


def confidence(strong: int, total: int, thresholds: Optional[Thresholds] = None) -> tuple[Confidence, float]:
    """Label and score from the share of strong matches."""
    thresholds = thresholds or Thresholds()
    if total == 0:
        return "low", 0.0
    ratio = strong / total
    if ratio >= thresholds.confidence_high:
        return "high", ratio
    if ratio >= thresholds.confidence_medium:
        return "medium", ratio
    return "low", ratio


def detect_pattern(spec: PatternSpec, paragraphs: list[str], thresholds: Optional[Thresholds] = None) -> ArgumentPattern:
    examples: list[ArgumentExample] = []
    strong = 0
    for paragraph in paragraphs:
        found = spec.detect(paragraph)
        if found is None:
            continue
        strength, components = found
        if strength == "strong":
            strong += 1
        examples.append(ArgumentExample(full_text=paragraph, components=components))
        if len(examples) >= EXAMPLES_PER_PATTERN:
            break

    label, score = confidence(strong, len(examples), thresholds)
    return ArgumentPattern(
        pattern=spec.title,
        description=spec.description,
        frequency=len(examples),
        confidence=label,
        confidence_score=score,
        examples=examples,
    )


# ---------------------------------------------------------------------------
# Opening and closing moves
# ---------------------------------------------------------------------------

def _first_clause(paragraph: str) -> str:
    return re.split(r"[.!?]", paragraph)[0].lower()


def _is_action_opening(paragraph: str) -> bool:
    first = _first_clause(paragraph)
    return len(first) < 100 and (
        _contains_any(first, ("right", "here", "okay"))
        or re.match(r"^(let's|we'll|i'll|you'll)", first) is not None
    )


def _is_personal_opening(paragraph: str) -> bool:
    return _contains_any(_first_clause(paragraph), ("i've", "my", "after"))


def _is_warning_opening(paragraph: str) -> bool:
    return _contains_any(paragraph.lower(), ("before", "caveat", "warning"))


def _is_summary_closing(paragraph: str) -> bool:
    return _contains_any(paragraph.lower(), ("in summary", "to sum up", "bottom line", "key takeaway"))


def _is_recommendation_closing(paragraph: str) -> bool:
    lower = paragraph.lower()
    return _contains_any(lower, ("i'd", "i would")) and _contains_any(lower, ("recommend", "suggest", "buy"))


def _is_forward_closing(paragraph: str) -> bool:
    return _contains_any(paragraph.lower(), ("next", "future", "coming"))


OPENING_MOVES = (
    ("Direct Action", "Opens with immediate call to action or present-tense announcement", _is_action_opening),
    ("Personal Context", "Opens by establishing personal experience or credentials", _is_personal_opening),
    ("Protective Warning", "Opens with caveat or warning to protect reader from common mistake", _is_warning_opening),
)

CLOSING_MOVES = (
    ("Summary", "Explicit summary of key points", _is_summary_closing),
    ("Personal Recommendation", "Closes with specific personal advice or product recommendation", _is_recommendation_closing),
    ("Forward-Looking", "Points toward future developments or next steps", _is_forward_closing),
)


def _moves(paragraphs: list[str], specs, max_examples: int) -> list[Move]:
    moves = []
    for name, description, test in specs:
        hits = [p for p in paragraphs if test(p)]
        if hits:
            moves.append(Move(
                type=name,
                description=description,
                frequency=len(hits),
                examples=[excerpt(p, MOVE_EXCERPT) for p in hits[:max_examples]],
            ))
    return moves


def substantial_paragraphs(text: str) -> list[str]:
    return [p for p in PARAGRAPH_BOUNDARY.split(text) if len(p.strip()) > MIN_PARAGRAPH_CHARS]


def analyze(text: str, thresholds: Optional[Thresholds] = None) -> ArgumentFlowReport:
    paragraphs = substantial_paragraphs(text)

    patterns = [detect_pattern(spec, paragraphs, thresholds) for spec in ARGUMENT_PATTERNS]

    return ArgumentFlowReport(
        patterns=[p for p in patterns if p.examples],
        conversational_devices=conversational_devices(text),
        opening_moves=_moves(paragraphs[:MOVE_WINDOW], OPENING_MOVES, 3),
        closing_moves=_moves(paragraphs[-MOVE_WINDOW:], CLOSING_MOVES, 2),
    )
