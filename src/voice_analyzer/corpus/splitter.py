"""Split corpus text into paragraphs, sentences and words."""

import re


SENTENCE_BOUNDARY = re.compile(r"[.!?]+")
PARAGRAPH_BOUNDARY = re.compile(r"\n\n+")
NON_WORD_CHARS = re.compile(r"[^\w'-]")
FIRST_WORD = re.compile(r"^[\"']?(\w+)")


def split_into_sentences(text: str) -> list[str]:
    """
    Split text on runs of terminal punctuation.

    The punctuation itself is dropped, and so are empty pieces. This is
    deliberately naive ("Dr. Smith" splits) so that counts stay comparable
    between corpora.
    """
    return [s.strip() for s in SENTENCE_BOUNDARY.split(text) if s.strip()]


def split_into_paragraphs(text: str) -> list[str]:
    """Split on blank lines, dropping whitespace-only paragraphs."""
    return [p.strip() for p in PARAGRAPH_BOUNDARY.split(text) if p.strip()]


def word_count(text: str) -> int:
    """Number of whitespace-separated tokens."""
    return len(text.split())


def sentence_lengths(text: str) -> list[int]:
    return [word_count(s) for s in split_into_sentences(text)]


def normalize_words(text: str) -> list[str]:
    """
    Lowercased whitespace tokens with everything but word characters,
    apostrophes and hyphens removed.
    """
    words = []
    for token in text.lower().split():
        cleaned = NON_WORD_CHARS.sub("", token)
        if cleaned:
            words.append(cleaned)
    return words


def first_word(sentence: str) -> str:
    """Lowercased first word, skipping one leading quote. Empty if none."""
    match = FIRST_WORD.match(sentence)
    return match.group(1).lower() if match else ""


def excerpt(text: str, limit: int) -> str:
    """First ``limit`` characters, with an ellipsis when truncated."""
    return text[:limit] + "..." if len(text) > limit else text


FIRST_SENTENCE = re.compile(r"^.*?(?:[.!?]+|$)", re.DOTALL)


def first_sentence(paragraph: str) -> str:
    """Opening sentence of a paragraph, terminal punctuation included."""
    return FIRST_SENTENCE.match(paragraph.strip()).group(0).strip()


TERMINATED_SENTENCE = re.compile(r"[^.!?]+[.!?]*")


def split_keeping_terminators(text: str) -> list[str]:
    """Like split_into_sentences, but each sentence keeps its closing punctuation."""
    return [s.strip() for s in TERMINATED_SENTENCE.findall(text) if SENTENCE_BOUNDARY.sub("", s).strip()]
