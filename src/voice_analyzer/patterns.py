"""
Pattern Tables

Regex classification kept as data: an ordered table of
(label, pattern) rules where the first matching rule wins.
"""

from dataclasses import dataclass
from typing import Iterable, Optional
import re


@dataclass(frozen=True)
class Rule:
    """A label and the compiled pattern that selects it."""
    label: str
    pattern: re.Pattern

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None


def rules(*pairs: tuple[str, str], flags: int = re.IGNORECASE) -> tuple[Rule, ...]:
    """Build an ordered rule table from (label, regex) pairs."""
    return tuple(Rule(label, re.compile(regex, flags)) for label, regex in pairs)


def first_match(table: Iterable[Rule], text: str, default: Optional[str] = None) -> Optional[str]:
    """Label of the first rule whose pattern is found in text."""
    for rule in table:
        if rule.matches(text):
            return rule.label
    return default


def count_matches(pattern: str | re.Pattern, text: str, flags: int = re.IGNORECASE) -> int:
    if isinstance(pattern, str):
        pattern = re.compile(pattern, flags)
    return sum(1 for _ in pattern.finditer(text))


def count_word(word: str, text: str) -> int:
    """Case-insensitive whole-word occurrences."""
    return count_matches(rf"\b{re.escape(word)}\b", text)


def phrase_pattern(phrase: str, flags: int = re.IGNORECASE) -> re.Pattern:
    """
    Literal phrase as a regex: any whitespace between words, either
    apostrophe style, and word boundaries at word-character ends.
    """
    body = re.escape(phrase).replace(r"\ ", r"\s+")
    body = body.replace("'", "['’]")
    prefix = r"\b" if phrase[:1].isalnum() else ""
    suffix = r"\b" if phrase[-1:].isalnum() else ""
    return re.compile(prefix + body + suffix, flags)


def count_phrase(phrase: str, text: str) -> int:
    return count_matches(phrase_pattern(phrase), text)


def any_phrase(phrases: Iterable[str], flags: int = re.IGNORECASE) -> re.Pattern:
    """One pattern matching any of the phrases, each built as in phrase_pattern."""
    return re.compile("|".join(f"(?:{phrase_pattern(p).pattern})" for p in phrases), flags)
