"""Tests for corpus loading."""

import json

import pytest

from voice_analyzer.corpus import (
    load_articles,
    load_corpus,
    read_corpus_metadata,
    split_frontmatter,
    strip_frontmatter,
    write_corpus_metadata,
)
from voice_analyzer.errors import CorpusNotFoundError, InvalidReportError


ARTICLE = """---
title: My Rig
url: https://example.com/my-rig
date: 2024-05-01
word_count: 42
---

I own a 3090. My rig runs hot.
"""


@pytest.fixture
def corpus_dir(tmp_path):
    """A corpus directory with two articles."""
    articles = tmp_path / "my-blog" / "articles"
    articles.mkdir(parents=True)
    (articles / "b-second.md").write_text("Second body here.\n", encoding="utf-8")
    (articles / "a-first.md").write_text(ARTICLE, encoding="utf-8")
    return tmp_path / "my-blog"


class TestFrontmatter:
    """Test frontmatter parsing."""

    def test_split(self):
        fields, body = split_frontmatter(ARTICLE)
        assert fields["title"] == "My Rig"
        assert fields["url"] == "https://example.com/my-rig"
        assert body == "I own a 3090. My rig runs hot.\n"

    def test_no_frontmatter(self):
        assert split_frontmatter("Just text.") == ({}, "Just text.")
        assert strip_frontmatter("Just text.") == "Just text."


class TestLoadCorpus:
    """Test building a corpus from disk."""

    def test_articles_in_name_order(self, corpus_dir):
        articles = load_articles(corpus_dir / "articles")
        assert [meta.title for meta, _ in articles] == ["My Rig", ""]
        assert articles[0][0].word_count == 42
        assert articles[1][0].word_count == 3
        assert articles[1][0].date == "unknown"

    def test_text_joined_with_blank_lines(self, corpus_dir):
        corpus = load_corpus("my-blog", corpus_dir)
        assert corpus.text == "I own a 3090. My rig runs hot.\n\n\nSecond body here.\n\n\n"
        assert "title:" not in corpus.text
        assert corpus.article_count == 2
        assert corpus.name == "my-blog"

    def test_counts_from_text_without_metadata(self, corpus_dir):
        corpus = load_corpus("my-blog", corpus_dir)
        assert corpus.word_count == 11

    def test_missing_corpus(self, tmp_path):
        with pytest.raises(CorpusNotFoundError):
            load_corpus("nope", tmp_path / "nope")

    def test_missing_articles_dir(self, tmp_path):
        (tmp_path / "empty").mkdir()
        with pytest.raises(CorpusNotFoundError):
            load_corpus("empty", tmp_path / "empty")

    def test_not_found_is_file_not_found(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_corpus("nope", tmp_path / "nope")


class TestCorpusMetadata:
    """Test corpus.json reading and writing."""

    def test_missing_metadata(self, corpus_dir):
        assert read_corpus_metadata(corpus_dir) is None

    def test_write_then_load(self, corpus_dir):
        corpus = load_corpus("my-blog", corpus_dir)
        path = write_corpus_metadata(corpus, corpus_dir, created="2024-06-01T00:00:00")

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["statistics"] == {
            "total_articles": 2,
            "total_words": 45,
            "avg_words_per_article": 23,
        }
        assert data["articles"][0]["wordCount"] == 42

        reloaded = load_corpus("my-blog", corpus_dir)
        assert reloaded.word_count == 45
        assert read_corpus_metadata(corpus_dir)["name"] == "my-blog"

    def test_malformed_metadata(self, corpus_dir):
        (corpus_dir / "corpus.json").write_text("{not json", encoding="utf-8")
        with pytest.raises(InvalidReportError, match="corpus.json"):
            read_corpus_metadata(corpus_dir)
