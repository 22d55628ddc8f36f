"""
Corpus Analysis Pipeline

Runs a group of analyzers over a corpus and writes one JSON report per
analyzer, the Markdown summaries and an overview into the corpus's
analysis directory.

Usage:
    analyzer = CorpusAnalyzer()
    result = analyzer.analyze_corpus("my-blog", analysis_type="quick")
"""

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Callable, Optional

from voice_analyzer.analyzers import AnalyzerContext, analyzers_for
from voice_analyzer.config import Settings, get_settings
from voice_analyzer.corpus import load_corpus
from voice_analyzer.guide.summaries import (
    summarize_analysis_dir,
    summarize_anti_mechanical,
    summarize_function_words,
    summarize_information_density,
    summarize_punctuation,
)
from voice_analyzer.models import Report
from voice_analyzer.reference import FunctionWordReference, Lexicon

logger = logging.getLogger(__name__)


@dataclass
class AnalysisProgress:
    """Progress tracking for corpus analysis."""
    phase: str
    current: int
    total: int
    message: str = ""


@dataclass
class AnalysisResult:
    """What an analysis run wrote, and where."""
    corpus_name: str
    analysis_path: Path
    files: list[str] = field(default_factory=list)
    reports: dict[str, Report] = field(default_factory=dict)


class CorpusAnalyzer:
    """
    Runs analyzers over corpus text.

    Reference tables and thresholds are fixed per instance, so every
    analyzer in a run sees the same configuration.
    """

    SUMMARIES = {
        "function-words": ("function-words-summary.md", summarize_function_words, True),
        "punctuation": ("punctuation-summary.md", summarize_punctuation, False),
        "anti-mechanical": ("anti-mechanical-summary.md", summarize_anti_mechanical, True),
        "information-density": ("information-density-summary.md", summarize_information_density, False),
    }

    def __init__(
        self,
        settings: Optional[Settings] = None,
        progress_callback: Optional[Callable[[AnalysisProgress], None]] = None,
        reference: Optional[FunctionWordReference] = None,
        lexicon: Optional[Lexicon] = None,
        nlp: Optional[Callable] = None,
    ):
        self.settings = settings or get_settings()
        self.progress_callback = progress_callback
        self.context = AnalyzerContext(
            thresholds=self.settings.thresholds,
            reference=reference,
            lexicon=lexicon,
            nlp=nlp,
            spacy_model=self.settings.spacy_model,
        )

    def _report_progress(self, phase: str, current: int, total: int, message: str = ""):
        if self.progress_callback:
            self.progress_callback(AnalysisProgress(phase, current, total, message))

    def analyze_text(self, text: str, analysis_type: str = "full", article_count: int = 1) -> dict[str, Report]:
        """Run the analyzers of one analysis type and return their reports by name."""
        selected = analyzers_for(analysis_type)
        context = replace(self.context, article_count=article_count)
        reports: dict[str, Report] = {}
        for i, analyzer in enumerate(selected):
            self._report_progress("analyzing", i, len(selected), f"Running {analyzer.name}...")
            reports[analyzer.name] = analyzer(text, context)
        self._report_progress("analyzing", len(selected), len(selected), "Done")
        return reports

    def write_reports(self, reports: dict[str, Report], analysis_dir: Path) -> list[str]:
        """Write JSON reports, their Markdown summaries and summary.md."""
        analysis_dir.mkdir(parents=True, exist_ok=True)
        written = []

        for name, report in reports.items():
            path = analysis_dir / report.filename()
            path.write_text(report.to_json(), encoding="utf-8")
            written.append(path.name)
            logger.info("Wrote %s", path)

            if name in self.SUMMARIES:
                filename, summarize, takes_thresholds = self.SUMMARIES[name]
                markdown = summarize(report, self.settings.thresholds) if takes_thresholds else summarize(report)
                (analysis_dir / filename).write_text(markdown, encoding="utf-8")
                written.append(filename)

        (analysis_dir / "summary.md").write_text(summarize_analysis_dir(analysis_dir), encoding="utf-8")
        written.append("summary.md")
        return written

    def analyze_corpus(
        self,
        corpus_name: str,
        corpus_dir: Optional[Path] = None,
        analysis_type: str = "full",
    ) -> AnalysisResult:
        """
        Analyze a collected corpus and persist the results.

        Args:
            corpus_name: Name of the corpus directory
            corpus_dir: Directory holding corpora (defaults to settings)
            analysis_type: One of full, quick, vocabulary, syntax

        Returns:
            AnalysisResult naming the analysis directory and written files
        """
        root = Path(corpus_dir) if corpus_dir is not None else self.settings.corpus_dir
        corpus_path = root / corpus_name

        self._report_progress("loading", 0, 1, f"Loading corpus '{corpus_name}'...")
        corpus = load_corpus(corpus_name, corpus_path, self.settings.articles_dirname)
        logger.info(
            "Analyzing corpus %s (%d articles, %d words, type=%s)",
            corpus_name, corpus.article_count, corpus.word_count, analysis_type,
        )

        reports = self.analyze_text(corpus.text, analysis_type, corpus.article_count)

        analysis_path = corpus_path / self.settings.analysis_dirname
        self._report_progress("writing", 0, 1, f"Writing reports to {analysis_path}...")
        files = self.write_reports(reports, analysis_path)

        return AnalysisResult(
            corpus_name=corpus_name,
            analysis_path=analysis_path,
            files=files,
            reports=reports,
        )
