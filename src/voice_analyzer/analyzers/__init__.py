"""
Analyzers Module

One module per report. Every analyzer is a pure function of the corpus
text; ``ANALYZERS`` lists them in run order and ``ANALYSIS_GROUPS`` names
the subsets the pipeline can run.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from voice_analyzer.config import Thresholds
from voice_analyzer.errors import UnknownAnalysisTypeError
from voice_analyzer.models import Report
from voice_analyzer.nlp import DEFAULT_SPACY_MODEL, load_nlp
from voice_analyzer.reference import FunctionWordReference, Lexicon

from . import (
    anti_mechanical,
    argument_flow,
    clustering,
    expression_markers,
    function_words,
    information_density,
    paragraph,
    paragraph_transitions,
    phrase_library,
    punctuation,
    sentence,
    specificity,
    vocabulary,
    vocabulary_tiers,
    voice,
)
from .anti_mechanical import AntiMechanicalReport
from .argument_flow import ArgumentFlowReport
from .clustering import ClusteringReport
from .expression_markers import ExpressionMarkersReport
from .function_words import FunctionWordReport
from .information_density import InformationDensityReport
from .paragraph import ParagraphReport
from .paragraph_transitions import ParagraphTransitionsReport
from .phrase_library import PhraseLibraryReport
from .punctuation import PunctuationReport
from .sentence import SentenceReport
from .specificity import SpecificityReport
from .vocabulary import VocabularyReport
from .vocabulary_tiers import VocabularyTiersReport
from .voice import VoiceReport


@dataclass(frozen=True)
class AnalyzerContext:
    """Tunable inputs shared by every analyzer in a run."""
    thresholds: Thresholds
    reference: Optional[FunctionWordReference] = None
    lexicon: Optional[Lexicon] = None
    nlp: Optional[Callable] = None
    spacy_model: str = DEFAULT_SPACY_MODEL
    article_count: int = 1

    def tagger(self) -> Callable:
        """The injected pipeline, else the configured spaCy model (loaded on first use)."""
        return self.nlp if self.nlp is not None else load_nlp(self.spacy_model)


@dataclass(frozen=True)
class Analyzer:
    name: str
    report_type: type[Report]
    run: Callable[[str, AnalyzerContext], Report]

    def __call__(self, text: str, context: AnalyzerContext) -> Report:
        return self.run(text, context)


ANALYZERS = (
    Analyzer("vocabulary", VocabularyReport, lambda text, ctx: vocabulary.analyze(text)),
    Analyzer("sentence", SentenceReport, lambda text, ctx: sentence.analyze(text)),
    Analyzer("voice", VoiceReport, lambda text, ctx: voice.analyze(text)),
    Analyzer("punctuation", PunctuationReport, lambda text, ctx: punctuation.analyze(text, ctx.thresholds)),
    Analyzer("paragraph", ParagraphReport, lambda text, ctx: paragraph.analyze(text)),
    Analyzer(
        "function-words", FunctionWordReport,
        lambda text, ctx: function_words.analyze(text, ctx.reference, ctx.thresholds),
    ),
    Analyzer(
        "anti-mechanical", AntiMechanicalReport,
        lambda text, ctx: anti_mechanical.analyze(text, ctx.thresholds),
    ),
    Analyzer(
        "information-density", InformationDensityReport,
        lambda text, ctx: information_density.analyze(text, ctx.article_count),
    ),
    Analyzer(
        "expression-markers", ExpressionMarkersReport,
        lambda text, ctx: expression_markers.analyze(text, ctx.tagger()),
    ),
    Analyzer("clustering-patterns", ClusteringReport, lambda text, ctx: clustering.analyze(text, ctx.thresholds)),
    Analyzer(
        "vocabulary-tiers", VocabularyTiersReport,
        lambda text, ctx: vocabulary_tiers.analyze(text, ctx.lexicon, ctx.thresholds),
    ),
    Analyzer("phrase-library", PhraseLibraryReport, lambda text, ctx: phrase_library.analyze(text)),
    Analyzer("argument-flow", ArgumentFlowReport, lambda text, ctx: argument_flow.analyze(text, ctx.thresholds)),
    Analyzer(
        "paragraph-transitions", ParagraphTransitionsReport,
        lambda text, ctx: paragraph_transitions.analyze(text),
    ),
    Analyzer(
        "specificity-patterns", SpecificityReport,
        lambda text, ctx: specificity.analyze(text, ctx.thresholds),
    ),
)

ANALYZERS_BY_NAME = {a.name: a for a in ANALYZERS}

REPORT_TYPES: dict[str, type[Report]] = {a.name: a.report_type for a in ANALYZERS}

ANALYSIS_GROUPS: dict[str, tuple[str, ...]] = {
    "vocabulary": ("vocabulary", "vocabulary-tiers", "phrase-library"),
    "syntax": ("sentence", "punctuation", "paragraph"),
    "quick": (
        "voice", "function-words", "anti-mechanical", "information-density", "expression-markers",
        "clustering-patterns", "argument-flow", "paragraph-transitions",
        "specificity-patterns",
    ),
    "full": tuple(a.name for a in ANALYZERS),
}


def analyzers_for(analysis_type: str) -> list[Analyzer]:
    """Analyzers for an analysis type, in run order."""
    try:
        names = ANALYSIS_GROUPS[analysis_type]
    except KeyError:
        raise UnknownAnalysisTypeError(
            f"Unknown analysis type '{analysis_type}'. "
            f"Choose one of: {', '.join(ANALYSIS_GROUPS)}"
        ) from None
    return [ANALYZERS_BY_NAME[name] for name in names]


def report_type(name: str) -> type[Report]:
    try:
        return REPORT_TYPES[name]
    except KeyError:
        raise UnknownAnalysisTypeError(
            f"Unknown report '{name}'. Choose one of: {', '.join(REPORT_TYPES)}"
        ) from None


__all__ = [
    # Registry
    "ANALYSIS_GROUPS",
    "ANALYZERS",
    "ANALYZERS_BY_NAME",
    "REPORT_TYPES",
    "Analyzer",
    "AnalyzerContext",
    "analyzers_for",
    "report_type",
    # Reports
    "AntiMechanicalReport",
    "ArgumentFlowReport",
    "ClusteringReport",
    "ExpressionMarkersReport",
    "FunctionWordReport",
    "InformationDensityReport",
    "ParagraphReport",
    "ParagraphTransitionsReport",
    "PhraseLibraryReport",
    "PunctuationReport",
    "SentenceReport",
    "SpecificityReport",
    "VocabularyReport",
    "VocabularyTiersReport",
    "VoiceReport",
]
