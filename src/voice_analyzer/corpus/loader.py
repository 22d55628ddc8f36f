"""Load a collected corpus from disk."""

import json
import logging
import re
from pathlib import Path
from typing import Optional

from voice_analyzer.errors import CorpusNotFoundError, InvalidReportError
from voice_analyzer.metrics import round_half_up
from voice_analyzer.models import ArticleMeta, Corpus

from .splitter import word_count

logger = logging.getLogger(__name__)

FRONTMATTER = re.compile(r"\A---.*?---\n\n", re.DOTALL)
FRONTMATTER_FIELD = re.compile(r"^(\w+):\s*(.*)$")

ARTICLE_SEPARATOR = "\n\n"


def split_frontmatter(content: str) -> tuple[dict[str, str], str]:
    """
    Separate a leading ``---`` block from the article body.

    Returns (fields, body). Content without frontmatter comes back
    unchanged with an empty field dict.
    """
    match = FRONTMATTER.match(content)
    if not match:
        return {}, content

    fields = {}
    for line in match.group(0).splitlines():
        field_match = FRONTMATTER_FIELD.match(line.strip())
        if field_match:
            fields[field_match.group(1)] = field_match.group(2).strip()
    return fields, content[match.end():]


def strip_frontmatter(content: str) -> str:
    return split_frontmatter(content)[1]


def _article_meta(fields: dict[str, str], body: str) -> ArticleMeta:
    raw_count = fields.get("word_count", "")
    return ArticleMeta(
        title=fields.get("title", ""),
        url=fields.get("url", ""),
        date=fields.get("date", "unknown"),
        word_count=int(raw_count) if raw_count.isdigit() else word_count(body),
    )


def load_articles(articles_dir: Path) -> list[tuple[ArticleMeta, str]]:
    """Read every ``*.md`` file in name order."""
    if not articles_dir.is_dir():
        raise CorpusNotFoundError(f"Articles directory not found: {articles_dir}")

    articles = []
    for path in sorted(articles_dir.glob("*.md")):
        fields, body = split_frontmatter(path.read_text(encoding="utf-8"))
        articles.append((_article_meta(fields, body), body))

    logger.debug("Loaded %d articles from %s", len(articles), articles_dir)
    return articles


def read_corpus_metadata(corpus_dir: Path) -> Optional[dict]:
    """Contents of ``corpus.json`` if the collection step wrote one."""
    path = corpus_dir / "corpus.json"
    if not path.exists():
        return None
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise InvalidReportError(f"{path} is not valid JSON: {e}") from e


def write_corpus_metadata(corpus: Corpus, corpus_dir: Path, created: str) -> Path:
    """Write ``corpus.json`` in the layout the collection step uses."""
    total_words = sum(a.word_count for a in corpus.articles)
    data = {
        "name": corpus.name,
        "created": created,
        "sitemap_url": corpus.sitemap_url,
        "articles": [
            {"title": a.title, "url": a.url, "date": a.date, "wordCount": a.word_count}
            for a in corpus.articles
        ],
        "statistics": {
            "total_articles": len(corpus.articles),
            "total_words": total_words,
            "avg_words_per_article": round_half_up(total_words / len(corpus.articles)) if corpus.articles else 0,
        },
    }
    path = corpus_dir / "corpus.json"
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
    return path


def load_corpus(corpus_name: str, corpus_dir: Path, articles_dirname: str = "articles") -> Corpus:
    """
    Build a Corpus from ``<corpus_dir>/<articles_dirname>/*.md``.

    Article bodies are joined with blank lines. Counts come from
    ``corpus.json`` when present, otherwise from the loaded text.
    """
    if not corpus_dir.is_dir():
        raise CorpusNotFoundError(f"Corpus '{corpus_name}' not found at {corpus_dir}")

    articles = load_articles(corpus_dir / articles_dirname)
    text = "".join(body + ARTICLE_SEPARATOR for _, body in articles)

    metadata = read_corpus_metadata(corpus_dir) or {}
    stats = metadata.get("statistics", {})

    return Corpus(
        name=metadata.get("name", corpus_name),
        text=text,
        sitemap_url=metadata.get("sitemap_url"),
        word_count=stats.get("total_words", word_count(text)),
        article_count=stats.get("total_articles", len(articles)),
        articles=[meta for meta, _ in articles],
    )
