"""
Punctuation Analysis

Comma density, dash habits, quotation style and per-1000-word rates for
the rarer marks.

Most people settle on one dash and use it everywhere. A corpus that
mixes hyphens, en-dashes and em-dashes in quantity is flagged, since that
mix is typical of generated or heavily edited text.
"""

import re
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict

from voice_analyzer.config import Thresholds
from voice_analyzer.corpus.splitter import split_into_sentences
from voice_analyzer.metrics import round_half_up
from voice_analyzer.models import Report


DASH_TYPES = (
    ("hyphen", "-"),
    ("en-dash", "–"),
    ("em-dash", "—"),
)

ELLIPSIS = re.compile(r"\.{3}|…")

DashType = Literal["hyphen", "en-dash", "em-dash", "none"]
QuotationStyle = Literal["single", "double", "mixed", "none"]


class DashCounts(BaseModel):
    model_config = ConfigDict(frozen=True)

    hyphen: int = 0
    en_dash: int = 0
    em_dash: int = 0


class DashConsistency(BaseModel):
    model_config = ConfigDict(frozen=True)

    dominant_type: DashType
    consistency_score: int  # share of dashes that are the dominant type, 0-100
    mixed_usage: bool
    ai_detection_flag: bool
    note: str


class PunctuationReport(Report):
    report_name = "punctuation"

    comma_density: float  # per sentence
    dash_types: DashCounts
    dash_consistency: DashConsistency
    ellipsis_frequency: float  # the rest are per 1000 words
    quotation_style: QuotationStyle
    parenthetical_frequency: float
    exclamation_frequency: float
    semicolon_frequency: float
    colon_frequency: float


def dash_consistency(counts: dict[str, int], thresholds: Optional[Thresholds] = None) -> DashConsistency:
    """Judge how consistently one dash type is used."""
    thresholds = thresholds or Thresholds()
    total = sum(counts.values())

    dominant: DashType = "none"
    max_count = 0
    for dash_type, count in counts.items():
        if count > max_count:
            dominant, max_count = dash_type, count

    consistency = round_half_up(max_count / total * 100) if total else 100
    significant = sum(1 for c in counts.values() if c >= thresholds.dash_significant_uses)
    mixed = significant > 1

    flag = False
    note = ""
    if total > thresholds.dash_minimum_total:
        typographic = max(counts.get("en-dash", 0), counts.get("em-dash", 0))
        if mixed and consistency < thresholds.dash_consistency:
            flag = True
            note = (
                f"Mixed dash usage detected ({consistency}% consistency). Human writers "
                f"typically use one dash type consistently. Consider standardising to \"{dominant}\"."
            )
        elif typographic > thresholds.dash_typographic_uses:
            if dominant in ("en-dash", "em-dash"):
                note = (
                    f"Uses {dominant} as primary dash. This is typographically \"correct\" but "
                    f"uncommon in casual/blog writing. May indicate AI or formal editing."
                )
        else:
            note = f"Consistent use of {dominant} ({consistency}% consistency). Natural pattern."
    elif total > 0:
        note = f"Limited dash usage ({total} total). Insufficient data for consistency analysis."
    else:
        note = "No significant dash usage detected."

    return DashConsistency(
        dominant_type=dominant,
        consistency_score=consistency,
        mixed_usage=mixed,
        ai_detection_flag=flag,
        note=note,
    )


def quotation_style(text: str) -> QuotationStyle:
    """A style wins when it outnumbers the other more than two to one."""
    single = text.count("'")
    double = text.count('"')
    if single == 0 and double == 0:
        return "none"
    if single > double * 2:
        return "single"
    if double > single * 2:
        return "double"
    return "mixed"


def analyze(text: str, thresholds: Optional[Thresholds] = None) -> PunctuationReport:
    sentences = split_into_sentences(text)
    total_words = len(text.split())

    def per_thousand(count: int) -> float:
        return count / total_words * 1000 if total_words else 0.0

    counts = {name: text.count(char) for name, char in DASH_TYPES}

    return PunctuationReport(
        comma_density=text.count(",") / len(sentences) if sentences else 0.0,
        dash_types=DashCounts(
            hyphen=counts["hyphen"],
            en_dash=counts["en-dash"],
            em_dash=counts["em-dash"],
        ),
        dash_consistency=dash_consistency(counts, thresholds),
        ellipsis_frequency=per_thousand(len(ELLIPSIS.findall(text))),
        quotation_style=quotation_style(text),
        parenthetical_frequency=per_thousand(text.count("(")),
        exclamation_frequency=per_thousand(text.count("!")),
        semicolon_frequency=per_thousand(text.count(";")),
        colon_frequency=per_thousand(text.count(":")),
    )
