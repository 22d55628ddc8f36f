"""
Markdown Summaries

Short human-readable companions to some of the JSON reports, written
next to them in the analysis directory.
"""

import json
from pathlib import Path
from typing import Optional

from voice_analyzer.analyzers.anti_mechanical import AntiMechanicalReport
from voice_analyzer.analyzers.function_words import FunctionWordFrequency, FunctionWordReport
from voice_analyzer.analyzers.information_density import InformationDensityReport
from voice_analyzer.analyzers.punctuation import PunctuationReport
from voice_analyzer.config import Thresholds


SUMMARY_EXCERPT_CHARS = 500


def _function_word_table(report: FunctionWordReport, words: list[FunctionWordFrequency]) -> list[str]:
    lines = [
        "| Word | Frequency | Z-Score | Interpretation |",
        "|------|-----------|---------|----------------|",
    ]
    for fw in words[:10]:
        z = report.z_scores[fw.word]
        lines.append(f"| **{fw.word}** | {fw.frequency:.2f} | {z.z_score:.2f} | {z.interpretation} |")
    lines.append("")
    return lines


def summarize_function_words(report: FunctionWordReport, thresholds: Optional[Thresholds] = None) -> str:
    thresholds = thresholds or Thresholds()
    lines = [
        "# Function Word Signature",
        "",
        f"**Total words analyzed:** {report.total_words:,}",
        f"**Function words:** {report.function_word_count} ({report.function_word_percentage:.1f}%)",
        "",
    ]

    if report.distinctive:
        lines += [
            "## Highly Distinctive Function Words",
            "",
            "These words appear significantly more often than typical English:",
            "",
        ]
        lines += _function_word_table(report, report.distinctive)

    if report.avoided:
        lines += [
            "## Deliberately Avoided Function Words",
            "",
            "These words appear significantly less often than typical English:",
            "",
        ]
        lines += _function_word_table(report, report.avoided)

    if report.british_markers:
        lines += [
            "## British English Markers",
            "",
            "| Word | Count | Frequency (per 1000) |",
            "|------|-------|----------------------|",
        ]
        lines += [f"| **{fw.word}** | {fw.count} | {fw.frequency:.2f} |" for fw in report.british_markers]
        lines.append("")

    high, low = thresholds.z_highly_distinctive, thresholds.z_distinctive
    lines += [
        "## Stylometric Summary",
        "",
        f"- **Highly distinctive** (z > {high:.1f}): {report.summary.highly_distinctive} words",
        f"- **Distinctive** (z > {low:.1f}): {report.summary.distinctive} words",
        f"- **Normal range**: {report.summary.normal} words",
        f"- **Avoided** (z < -{low:.1f}): {report.summary.avoided} words",
        f"- **Highly avoided** (z < -{high:.1f}): {report.summary.highly_avoided} words",
    ]
    if report.recommendations:
        lines += ["", "## Notes", ""] + [f"- {note}" for note in report.recommendations]

    return "\n".join(lines)


def summarize_punctuation(report: PunctuationReport) -> str:
    dashes, consistency = report.dash_types, report.dash_consistency
    lines = [
        "# Punctuation Analysis",
        "",
        "## Dash Usage",
        "",
        f"- Hyphens (-): {dashes.hyphen}",
        f"- En-dashes (–): {dashes.en_dash}",
        f"- Em-dashes (—): {dashes.em_dash}",
        f"- Dominant type: **{consistency.dominant_type}**",
        f"- Consistency: {consistency.consistency_score}%",
    ]
    if consistency.ai_detection_flag:
        lines += ["", f"**AI Detection Signal:** {consistency.note}"]
    else:
        lines.append(f"- {consistency.note}")

    lines += [
        "",
        "## Other Punctuation",
        "",
        f"- Comma density: {report.comma_density:.2f} per sentence",
        f"- Quotation style: {report.quotation_style}",
        f"- Parentheticals: {report.parenthetical_frequency:.1f} per 1000 words",
        f"- Exclamation marks: {report.exclamation_frequency:.1f} per 1000 words",
        f"- Semicolons: {report.semicolon_frequency:.1f} per 1000 words",
        f"- Colons: {report.colon_frequency:.1f} per 1000 words",
        f"- Ellipses: {report.ellipsis_frequency:.1f} per 1000 words",
        "",
    ]
    return "\n".join(lines)


def summarize_anti_mechanical(report: AntiMechanicalReport, thresholds: Optional[Thresholds] = None) -> str:
    thresholds = thresholds or Thresholds()
    n = report.naturalness
    variation = report.sentence_length_variation
    bands = variation.distribution
    paragraphs = report.paragraph_asymmetry
    first_person = report.first_person_distribution
    starts = report.repetitive_starts

    lines = [
        "# Anti-Mechanical Analysis Summary",
        "",
        "*Evaluates writing naturalness vs robotic/AI patterns*",
        "",
        "## Overall Naturalness Score",
        "",
        f"**Total Score:** {n.total_score}/100 ({n.interpretation.replace('_', ' ')})",
        "",
        "| Component | Score | Max |",
        "|-----------|-------|-----|",
        f"| Sentence Variation | {n.sentence_variation_score} | 25 |",
        f"| Paragraph Variation | {n.paragraph_variation_score} | 25 |",
        f"| First-Person Distribution | {n.first_person_score} | 25 |",
        f"| Repetition Avoidance | {n.repetition_score} | 25 |",
        "",
        "## Sentence Length Variation",
        "",
        f"- **Mean length:** {variation.mean:.1f} words",
        f"- **Standard deviation:** +/-{variation.std_dev:.1f}",
        f"- **Coefficient of variation:** {variation.coefficient_of_variation:.2f}",
        "- **Natural variation:** "
        + ("Yes (CV > 0.5)" if variation.has_natural_variation else "No (too uniform)"),
        "",
        "**Length Distribution:**",
        f"- Short (1-8 words): {bands.short}",
        f"- Medium (9-20 words): {bands.medium}",
        f"- Long (21-40 words): {bands.long}",
        f"- Very long (40+ words): {bands.very_long}",
        "",
        "## Paragraph Asymmetry",
        "",
        f"- **Mean sentences per paragraph:** {paragraphs.mean_sentences:.1f}",
        f"- **Standard deviation:** +/-{paragraphs.std_dev:.1f}",
        f"- **Single-sentence paragraphs:** {paragraphs.single_sentence_paragraphs}",
        f"- **Long paragraphs (5+):** {paragraphs.long_paragraphs}",
        "",
        "## First-Person Distribution",
        "",
        f"- **Total first-person instances:** {first_person.total_count}",
        f"- **Sentence-start instances:** {first_person.sentence_start_count}",
        f"- **Sentence-start ratio:** {first_person.sentence_start_ratio * 100:.1f}%",
        f'- **Max consecutive "I" starts:** {first_person.consecutive_i_start}',
        "- **Balanced distribution:** "
        + ("Yes" if first_person.is_balanced else "No (too many sentence starts)"),
        "",
        "## Repetitive Starts",
        "",
        f"- **Max consecutive same-start:** {starts.max_consecutive_same_start}",
        f"- **Has repetition problem:** {'Yes' if starts.has_repetition_problem else 'No'}",
    ]
    if starts.problematic_patterns:
        lines.append(f"- **Problematic patterns:** {', '.join(starts.problematic_patterns)}")

    very, natural, somewhat = thresholds.very_natural, thresholds.natural, thresholds.somewhat_mechanical
    lines += [
        "",
        "## Interpretation Guide",
        "",
        "| Score Range | Interpretation |",
        "|-------------|----------------|",
        f"| {very}-100 | Very natural - authentic human writing |",
        f"| {natural}-{very - 1} | Natural - good variation |",
        f"| {somewhat}-{natural - 1} | Somewhat mechanical - needs more variation |",
        f"| 0-{somewhat - 1} | Mechanical - likely AI-generated or very formulaic |",
        "",
    ]
    return "\n".join(lines)

def _number(value: float) -> str:
    """Whole numbers without a decimal point, others as they are."""
    return f"{value:g}"


def summarize_information_density(report: InformationDensityReport) -> str:
    profile = report.corpus_profile
    sentences = report.natural_patterns.sentence_length_profile
    openings = report.opening_patterns
    lead, extended = openings.first_100_words, openings.first_300_words
    containment = report.self_containment
    claims = report.claim_density
    extractability = report.extractability_profile

    lines = [
        "# Information Density Analysis",
        "",
        "*Understanding how this writing style interacts with AI extraction*",
        "",
        "> **Note:** This analysis describes natural patterns. It does not prescribe changes.",
        "> Authentic voice should always take priority over optimisation.",
        "",
        "## Corpus Profile",
        "",
        f"- Total words: {profile.total_words:,}",
        f"- Total sentences: {profile.total_sentences:,}",
        f"- Average article length: {profile.average_article_length:,} words",
        "",
        "## Natural Sentence Patterns",
        "",
        f"- Mean length: {_number(sentences.mean)} words",
        f"- Median length: {_number(sentences.median)} words",
        f"- Variation (std dev): ±{_number(sentences.std_dev)} words",
        f"- {sentences.chunk_alignment_note}",
        "",
        "## Opening Style",
        "",
        f"- Style: **{lead.style}**",
        f"- First 100 words: {lead.typical_claim_count} claims, {lead.typical_entity_count} entities",
        f"- First 300 words: {extended.typical_claim_count} claims, {extended.typical_entity_count} entities",
        f"- {openings.natural_tendency}",
        "",
        "## Self-Containment",
        "",
        f"- Standalone-ready sentences: {containment.standalone_ready_percentage}%",
        f"- Pronoun reliance: {containment.pronoun_reliance}",
    ]
    if containment.dangling_patterns:
        lines.append("- Common reference patterns:")
        lines += [f"  - {p.pattern}: {p.frequency} occurrences" for p in containment.dangling_patterns]

    lines += [
        "",
        "## Claim Density",
        "",
        f"- Overall: {_number(claims.overall)} claims per 100 words",
        f"- Opening (first 20%): {_number(claims.by_position.opening)}",
        f"- Middle (60%): {_number(claims.by_position.middle)}",
        f"- Closing (last 20%): {_number(claims.by_position.closing)}",
        f"- {claims.distribution_note}",
        "",
        "## AI Extractability Profile",
        "",
        f"**Estimated coverage:** {extractability.estimated_coverage}% of content likely to be cited by AI",
        "",
    ]
    if extractability.strengths:
        lines.append("**Natural strengths:**")
        lines += [f"- ✓ {s}" for s in extractability.strengths]
        lines.append("")
    if extractability.characteristics:
        lines.append("**Style characteristics:**")
        lines += [f"- {c}" for c in extractability.characteristics]
        lines.append("")

    lines += [f"> {extractability.note}", ""]
    return "\n".join(lines)



def summarize_analysis_dir(analysis_dir: Path) -> str:
    """Overview of every JSON report in a directory, each cut to a short excerpt."""
    sections = ["# Analysis Summary", ""]
    for path in sorted(Path(analysis_dir).glob("*.json")):
        data = json.loads(path.read_text(encoding="utf-8"))
        pretty = json.dumps(data, indent=2, ensure_ascii=False)
        sections += [
            f"## {path.stem}",
            "",
            "```json",
            pretty[:SUMMARY_EXCERPT_CHARS] + "...",
            "```",
            "",
        ]
    return "\n".join(sections)
