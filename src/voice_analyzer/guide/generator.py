"""
Style Guide Generator

Assembles the persisted analysis reports into one Markdown style guide.

Generation is all-or-nothing: every required report is loaded before any
Markdown is rendered, and a missing one raises MissingReportError.

Usage:
    generator = StyleGuideGenerator(Path("data/corpora/my-blog/analysis"), "my-blog")
    path = generator.write()
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, TypeVar

from voice_analyzer.analyzers import (
    ArgumentFlowReport,
    FunctionWordReport,
    ParagraphTransitionsReport,
    PhraseLibraryReport,
    PunctuationReport,
    SentenceReport,
    VocabularyReport,
    VocabularyTiersReport,
    VoiceReport,
)
from voice_analyzer.analyzers.vocabulary import AMERICAN_SPELLINGS, BRITISH_SPELLINGS
from voice_analyzer.config import Settings, Thresholds, get_settings
from voice_analyzer.corpus import read_corpus_metadata
from voice_analyzer.errors import MissingReportError
from voice_analyzer.models import Report

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=Report)

REQUIRED_REPORTS = (
    VocabularyReport,
    SentenceReport,
    VoiceReport,
    PunctuationReport,
    FunctionWordReport,
    VocabularyTiersReport,
    PhraseLibraryReport,
    ArgumentFlowReport,
    ParagraphTransitionsReport,
)

# Shown whether or not the corpus uses them
COMMON_AI_SLOP = (
    ("delve", "explore, look at, examine"),
    ("leverage", "use, apply"),
    ("unlock", "discover, access, enable"),
    ("seamless", "smooth, works well"),
    ("robust", "strong, reliable"),
    ("cutting-edge", "latest, modern"),
    ("game-changer", "big improvement"),
    ("revolutionize", "change completely"),
    ("groundbreaking", "new, innovative"),
)

AMERICAN_FOR_BRITISH = dict(zip(BRITISH_SPELLINGS, AMERICAN_SPELLINGS))


def load_report(analysis_dir: Path, report_type: type[R]) -> R:
    """Load one persisted report, failing loudly if it has not been generated."""
    path = Path(analysis_dir) / report_type.filename()
    if not path.exists():
        raise MissingReportError(path, report_type.report_name)
    return report_type.from_json(path.read_text(encoding="utf-8"))


def format_corpus_name(name: str) -> str:
    return " ".join(part[:1].upper() + part[1:] for part in name.split("-"))


@dataclass(frozen=True)
class GuideSection:
    title: str
    body: str

    def to_markdown(self) -> str:
        return f"## {self.title}\n\n{self.body}" if self.title else self.body


@dataclass(frozen=True)
class StyleGuideDocument:
    corpus_name: str
    generator_version: str
    sections: tuple[GuideSection, ...]

    def to_markdown(self) -> str:
        return "\n\n---\n\n".join(s.to_markdown().rstrip() for s in self.sections) + "\n"

    def section(self, title: str) -> Optional[GuideSection]:
        return next((s for s in self.sections if s.title == title), None)


@dataclass(frozen=True)
class GuideInputs:
    """Every report the guide reads, loaded up front."""
    vocabulary: VocabularyReport
    sentence: SentenceReport
    voice: VoiceReport
    punctuation: PunctuationReport
    function_words: FunctionWordReport
    vocabulary_tiers: VocabularyTiersReport
    phrase_library: PhraseLibraryReport
    argument_flow: ArgumentFlowReport
    paragraph_transitions: ParagraphTransitionsReport

    @classmethod
    def load(cls, analysis_dir: Path) -> "GuideInputs":
        loaded = {
            t.report_name.replace("-", "_"): load_report(analysis_dir, t)
            for t in REQUIRED_REPORTS
        }
        return cls(**loaded)


@dataclass(frozen=True)
class VoiceFlags:
    has_personal: bool
    has_confidence: bool
    has_british: bool
    skews_formal: bool
    never_uses_em_dash: bool

    @classmethod
    def derive(cls, inputs: GuideInputs, thresholds: Thresholds) -> "VoiceFlags":
        return cls(
            has_personal=inputs.voice.first_person.frequency > thresholds.personal_voice,
            has_confidence=inputs.voice.hedging_language.frequency < thresholds.confident_hedging,
            has_british=len(inputs.vocabulary.british_markers) > 0,
            skews_formal=inputs.vocabulary_tiers.formality_score > thresholds.guide_high_formality,
            never_uses_em_dash=inputs.punctuation.dash_types.em_dash == 0,
        )


class StyleGuideGenerator:
    """Renders a style guide from the reports in an analysis directory."""

    def __init__(self, analysis_dir: Path, corpus_name: str, settings: Optional[Settings] = None):
        self.analysis_dir = Path(analysis_dir)
        self.corpus_name = corpus_name
        self.settings = settings or get_settings()

    @property
    def default_output_path(self) -> Path:
        return self.analysis_dir.parent / f"writing_style_{self.corpus_name}.md"

    def generate(self) -> StyleGuideDocument:
        inputs = GuideInputs.load(self.analysis_dir)
        thresholds = self.settings.thresholds
        flags = VoiceFlags.derive(inputs, thresholds)
        metadata = read_corpus_metadata(self.analysis_dir.parent)

        sections = (
            GuideSection("", self._header(metadata)),
            GuideSection("Zero Tolerance Rules", self._zero_tolerance(inputs, flags, thresholds)),
            GuideSection("Core Voice", self._core_voice(inputs, flags)),
            GuideSection("Phrase Library", self._phrase_library(inputs.phrase_library)),
            GuideSection("Sentence Patterns", self._sentence_patterns(inputs, flags)),
            GuideSection("Argument Flow", self._argument_flow(inputs.argument_flow)),
            GuideSection("Paragraph Transitions", self._paragraph_transitions(inputs.paragraph_transitions)),
            GuideSection("Validation Checklist", self._checklist(inputs, flags)),
            GuideSection("Reference Statistics", self._reference(inputs, flags)),
            GuideSection("", f"**Generated by Voice Analyzer v{self.settings.generator_version}**"),
        )
        return StyleGuideDocument(
            corpus_name=self.corpus_name,
            generator_version=self.settings.generator_version,
            sections=sections,
        )

    def write(self, path: Optional[Path] = None) -> Path:
        """Generate the guide and write it; nothing is written if generation fails."""
        document = self.generate()
        path = Path(path) if path is not None else self.default_output_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(document.to_markdown(), encoding="utf-8")
        logger.info("Wrote style guide %s", path)
        return path

    # ------------------------------------------------------------------
    # Sections
    # ------------------------------------------------------------------

    def _header(self, metadata: Optional[dict]) -> str:
        lines = [
            f"# {format_corpus_name(self.corpus_name)} Writing Style Guide",
            "*Executable instructions for voice-matched writing*",
        ]
        stats = (metadata or {}).get("statistics")
        if stats:
            lines += [
                "",
                f"*Corpus: {stats.get('total_words', 0):,} words across "
                f"{stats.get('total_articles', 0)} articles*",
            ]
        return "\n".join(lines)

    def _zero_tolerance(self, inputs: GuideInputs, flags: VoiceFlags, thresholds: Thresholds) -> str:
        tiers, voice, punctuation = inputs.vocabulary_tiers, inputs.voice, inputs.punctuation
        lines = [
            "*These rules MUST be followed. Violations break authenticity.*",
            "",
            "### Forbidden Vocabulary (AI Slop)",
            "",
        ]
        if tiers.ai_slop:
            lines.append("**DETECTED IN CORPUS (must remove):**")
            lines += [
                f"- **{t.word}** ({t.count}× occurrences) → Use: {', '.join(t.suggested_alternatives)}"
                for t in tiers.ai_slop
            ]
            lines.append("")
        lines.append("**Common AI slop to avoid:**")
        lines += [f"- {word} → Use: {fix}" for word, fix in COMMON_AI_SLOP]
        lines.append("")

        lines += [
            "### Formal Words (Replace with Casual)",
            "",
            f"**Formality Score:** {tiers.formality_score} formal words per 1000",
            "",
        ]
        if flags.skews_formal:
            lines.append("**HIGH FORMALITY** - This voice is very casual. Replace formal words.")
        elif tiers.formality_score > thresholds.formality_acceptable:
            lines.append("**ACCEPTABLE** - Minor tweaks recommended.")
        else:
            lines.append("**CASUAL VOICE** - Good natural tone.")
        lines.append("")

        if tiers.formal_verbs:
            lines.append("**Formal verbs found in corpus:**")
            lines += [
                f"- {t.word} ({t.count}×) → {', '.join(t.suggested_alternatives)}"
                for t in tiers.formal_verbs[:10]
            ]
            lines.append("")
        if tiers.formal_adjectives:
            lines.append("**Formal adjectives found in corpus:**")
            lines += [
                f"- {t.word} ({t.count}×) → {', '.join(t.suggested_alternatives)}"
                for t in tiers.formal_adjectives[:5]
            ]
            lines.append("")

        if voice.ai_cliches:
            lines.append("**AI clichés detected in corpus (must eliminate):**")
            lines += [f'- "{c.phrase}" ({c.count} uses) - Remove completely' for c in voice.ai_cliches[:5]]
            lines.append("")
        if voice.hollow_intensifiers:
            lines.append("**Hollow intensifiers (performative sincerity):**")
            lines += [f'- "{h.phrase}" → {h.alternative}' for h in voice.hollow_intensifiers[:5]]
            lines.append("")

        lines += ["### Forbidden Punctuation", ""]
        if flags.never_uses_em_dash:
            lines.append("**No em-dashes** - Use regular hyphens with spaces ( - ) instead of em-dashes (—)")
        else:
            lines += [
                f"**Em-dashes detected:** {punctuation.dash_types.em_dash} occurrences",
                "This writer uses regular hyphens with spaces, not em-dashes (—).",
            ]
        return "\n".join(lines)

    def _core_voice(self, inputs: GuideInputs, flags: VoiceFlags) -> str:
        voice = inputs.voice
        lines = ["**Your voice:**"]
        if flags.has_personal and flags.has_confidence:
            lines += [
                "- Confident practitioner, not a guru or marketer",
                "- First-person authority from real testing/experience",
            ]
        elif flags.has_personal:
            lines += [
                "- Thoughtful expert with personal experience",
                "- Measured caution balanced with practical insight",
            ]
        else:
            lines += [
                "- Authoritative educator style",
                "- Clear explanations with practical examples",
            ]
        lines += ["- Honest caveats and limitations"]
        if flags.has_british:
            lines.append("- British English throughout")
        lines += [
            "- Natural conversational flow",
            "- **ZERO AI clichés** (non-negotiable)",
            "",
            "**Most critical rule:** If it sounds like marketing copy or a LinkedIn post, delete it.",
            "",
        ]

        specific = voice.equipment_specificity.specific
        if specific:
            lines += ["### Equipment Specificity", "", "**Right:**"]
            lines += [f"- {e.phrase}" for e in specific[:5]]
            generic = voice.equipment_specificity.generic
            if generic:
                lines += ["", "**Wrong:**"]
                lines += [f"- {e.phrase}" for e in generic[:5]]
            lines.append("")

        hedging = voice.hedging_language.frequency
        level = "HIGH" if flags.has_confidence else "MODERATE"
        lines += [
            "### Hedging & Confidence Balance",
            "",
            f"**Your confidence level:** {level}",
            "",
            f"**Hedging frequency:** {hedging:.2f} per 100 words "
            f"({'LOW' if flags.has_confidence else 'MODERATE'})",
            "",
        ]
        if flags.has_confidence:
            lines.append("Use hedging words sparingly. You should sound decisive.")
        else:
            lines.append("Balanced hedging maintains credibility whilst showing appropriate caution.")

        if voice.conversational_markers:
            lines += ["", "### Conversational Markers", ""]
            lines += [f'- **"{m.phrase}"** ({m.count}×)' for m in voice.conversational_markers[:8]]
        return "\n".join(lines)

    def _phrase_library(self, library: PhraseLibraryReport) -> str:
        lines = ["*Actual phrases from the corpus. Use these as templates.*", "", "### Opening Patterns", ""]
        openings = (
            ("Personal Story Openings", library.opening_patterns.personal_story, 15),
            ("Direct Action Openings", library.opening_patterns.direct_action, 15),
            ("Protective Warning Openings", library.opening_patterns.protective_warning, 10),
        )
        for title, examples, limit in openings:
            if examples:
                lines.append(f"**{title}:**")
                lines += [f'- "{e.phrase}"' for e in examples[:limit]]
                lines.append("")

        equipment = library.equipment_references
        lines += ["### Equipment References", "", "**Good (with possessives):**"]
        lines += [f'- "{e.phrase}" ({e.count}×)' for e in equipment.with_possessive[:10]]
        lines += ["", "**Generic (avoid when possible):**"]
        lines += [f'- "{e.phrase}" ({e.count}×)' for e in equipment.generic[:10]]

        if library.caveat_phrases:
            lines += ["", "### Honesty & Caveat Phrases", ""]
            lines += [f'- "{e.phrase}"' for e in library.caveat_phrases]
        return "\n".join(lines)

    def _sentence_patterns(self, inputs: GuideInputs, flags: VoiceFlags) -> str:
        length = inputs.sentence.length
        first_person = inputs.voice.first_person
        exclamations = inputs.punctuation.exclamation_frequency

        if length.mean < 18:
            style = "Concise style"
        elif length.mean > 25:
            style = "Complex style"
        else:
            style = "Medium complexity"
        if exclamations > 5:
            enthusiasm = "Enthusiastic"
        elif exclamations > 2:
            enthusiasm = "Measured enthusiasm"
        else:
            enthusiasm = "Restrained"

        lines = [
            "| Metric | Value | Interpretation |",
            "|--------|-------|----------------|",
            f"| Avg sentence length | {length.mean:.1f} words | {style} |",
            f"| Sentence variance | ±{length.std_dev:.1f} words | "
            f"{'HIGH variance = natural' if length.std_dev > 12 else 'Moderate variance'} |",
            f"| First-person frequency | {first_person.frequency:.2f} per 100 words | "
            f"{'Distributed, not clustered' if flags.has_personal else 'Minimal personal voice'} |",
            f"| Exclamation marks | {exclamations:.1f} per 1000 words | {enthusiasm} |",
            "",
            "### Rhythm Variation",
            "",
            "**Target:** Mix of short (5-8 words), medium (15-25), long (30-40), very long (40+)",
            "",
        ]
        if inputs.sentence.examples:
            lines.append("**Examples from corpus:**")
            lines += [
                f'- **{e.label.capitalize()}:** "{e.text}" ({e.word_count} words)'
                for e in inputs.sentence.examples
            ]
            lines.append("")

        lines += ["### First-Person Usage", "", f"**Frequency:** {first_person.frequency:.2f} per 100 words"]
        if first_person.examples:
            lines += ["", "**Patterns:**"]
            lines += [f'- "{e.phrase}" ({e.count}×)' for e in first_person.examples[:8]]
        return "\n".join(lines)

    def _argument_flow(self, flow: ArgumentFlowReport) -> str:
        lines = []
        if flow.patterns:
            for pattern in flow.patterns:
                lines += [
                    f"### {pattern.pattern}",
                    "",
                    pattern.description,
                    "",
                    f"**Frequency:** {pattern.frequency} "
                    f"(confidence: {pattern.confidence}, {pattern.confidence_score:.2f})",
                    "",
                ]
                if pattern.examples:
                    lines += ["```", pattern.examples[0].full_text, "```", ""]
        else:
            lines += ["No recurring argument patterns detected.", ""]

        if flow.conversational_devices:
            lines += ["### Conversational Devices", ""]
            lines += [f'- **"{d.trigger}"** - {d.purpose}' for d in flow.conversational_devices[:5]]
            lines.append("")

        for title, moves in (("Opening Moves", flow.opening_moves), ("Closing Moves", flow.closing_moves)):
            if moves:
                lines += [f"### {title}", ""]
                lines += [f"- **{m.type}** ({m.frequency}×): {m.description}" for m in moves]
                lines.append("")
        return "\n".join(lines).rstrip()

    def _paragraph_transitions(self, report: ParagraphTransitionsReport) -> str:
        lines = []
        if report.transitions:
            lines += ["### Most Common Transitions", ""]
            for t in report.transitions[:10]:
                phrase = f' ("{t.linking_phrase}")' if t.linking_phrase else ""
                lines.append(f"- {t.from_type} → {t.to_type} via {t.linking_device}{phrase}: {t.frequency}×")
            lines.append("")
        if report.topic_shift_patterns:
            lines += ["### Topic Shifts", ""]
            lines += [
                f"- **{s.pattern}** ({s.frequency}×): {s.description}"
                for s in report.topic_shift_patterns
            ]
            lines.append("")
        if report.energy_shifts:
            lines += ["### Energy Shifts", ""]
            lines += [f"- **{s.from_state} → {s.to_state}**: {s.description}" for s in report.energy_shifts]
            lines.append("")
        return "\n".join(lines).rstrip() or "No paragraph transitions detected."

    def _checklist(self, inputs: GuideInputs, flags: VoiceFlags) -> str:
        voice = inputs.voice
        lines = [
            "*After writing, verify:*",
            "",
            "### Critical (Must Pass):",
            "",
            "- [ ] Zero AI slop words (search for: delve, leverage, unlock, seamless, robust)",
        ]
        if flags.never_uses_em_dash:
            lines.append("- [ ] Zero em-dashes (search for: —)")
        if flags.has_british:
            lines.append("- [ ] British spelling (colour, optimise, whilst)")
        lines += [
            '- [ ] Equipment named specifically (not generic "the product")',
            "",
            "### Voice Match (Should Pass):",
            "",
        ]
        if flags.has_personal:
            lines.append(f"- [ ] First-person present (target: ~{voice.first_person.frequency:.1f} per 100 words)")
        lines += [
            f"- [ ] Hedging frequency ~{voice.hedging_language.frequency:.2f}/100 words",
            "- [ ] Sentence length varies wildly (5-word to 40-word sentences)",
            "- [ ] At least one honest caveat included",
            "- [ ] Opening matches corpus patterns (personal/direct/protective)",
        ]
        return "\n".join(lines)

    def _reference(self, inputs: GuideInputs, flags: VoiceFlags) -> str:
        function_words, punctuation = inputs.function_words, inputs.punctuation
        lines = ["*These validate the voice. They don't create it.*", ""]

        for title, words in (
            ("Words used MORE than typical", function_words.distinctive),
            ("Words AVOIDED (use sparingly)", function_words.avoided),
        ):
            if words:
                lines += [f"**{title}:**", ""]
                for fw in words[:8]:
                    z = function_words.z_scores.get(fw.word)
                    if z:
                        lines.append(f'- **"{fw.word}"** (z={z.z_score:.2f}) - {fw.frequency:.2f}/1000 words')
                lines.append("")

        if flags.has_british:
            lines += ["### British English Markers", "", "| American | British | Uses |", "|----------|---------|------|"]
            for marker in inputs.vocabulary.british_markers[:10]:
                american = AMERICAN_FOR_BRITISH.get(marker.word, "")
                lines.append(f"| {american} | {marker.word} | {marker.count} |")
            lines.append("")

        lines += [
            "### Punctuation Patterns",
            "",
            "| Pattern | Value |",
            "|---------|-------|",
            f"| Comma density | {punctuation.comma_density:.2f}/sentence |",
            f"| Semicolons | {punctuation.semicolon_frequency:.1f}/1000 words |",
            f"| Exclamations | {punctuation.exclamation_frequency:.1f}/1000 words |",
            f"| Parentheticals | {punctuation.parenthetical_frequency:.1f}/1000 words |",
        ]
        if flags.never_uses_em_dash:
            lines.append("| Em-dashes | 0 (NEVER use) |")
        return "\n".join(lines)
