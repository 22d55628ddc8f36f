"""Data models."""

from .report import ArticleMeta, Corpus, PhraseExample, Report

__all__ = [
    "ArticleMeta",
    "Corpus",
    "PhraseExample",
    "Report",
]
