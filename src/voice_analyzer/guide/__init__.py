"""
Guide Module

Markdown output: per-report summaries written during analysis, and the
style guide assembled from the persisted reports.
"""

from .generator import (
    REQUIRED_REPORTS,
    GuideInputs,
    GuideSection,
    StyleGuideDocument,
    StyleGuideGenerator,
    VoiceFlags,
    format_corpus_name,
    load_report,
)
from .summaries import (
    summarize_analysis_dir,
    summarize_anti_mechanical,
    summarize_function_words,
    summarize_information_density,
    summarize_punctuation,
)

__all__ = [
    # Generator
    "REQUIRED_REPORTS",
    "GuideInputs",
    "GuideSection",
    "StyleGuideDocument",
    "StyleGuideGenerator",
    "VoiceFlags",
    "format_corpus_name",
    "load_report",
    # Summaries
    "summarize_analysis_dir",
    "summarize_anti_mechanical",
    "summarize_function_words",
    "summarize_information_density",
    "summarize_punctuation",
]
