"""
Corpus Module

Loading collected articles and the text-splitting rules every analyzer
shares.
"""

from .splitter import (
    excerpt,
    first_sentence,
    first_word,
    normalize_words,
    sentence_lengths,
    split_into_paragraphs,
    split_into_sentences,
    split_keeping_terminators,
    word_count,
)
from .loader import (
    load_articles,
    load_corpus,
    read_corpus_metadata,
    split_frontmatter,
    strip_frontmatter,
    write_corpus_metadata,
)

__all__ = [
    # Splitting
    "excerpt",
    "first_sentence",
    "first_word",
    "normalize_words",
    "sentence_lengths",
    "split_into_paragraphs",
    "split_into_sentences",
    "split_keeping_terminators",
    "word_count",
    # Loading
    "load_articles",
    "load_corpus",
    "read_corpus_metadata",
    "split_frontmatter",
    "strip_frontmatter",
    "write_corpus_metadata",
]
