"""
Function Word Reference

Core function words for authorship fingerprinting (Mosteller-Wallace,
Burrows' Delta) and baseline frequencies per 1000 words drawn from the
Brown Corpus and BNC.
"""

from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType
from typing import Mapping, Optional


ARTICLE = "article"
DETERMINER = "determiner"
PREPOSITION = "preposition"
CONJUNCTION = "conjunction"
MODAL = "modal"
AUXILIARY = "auxiliary"
PRONOUN = "pronoun"


@dataclass(frozen=True)
class FunctionWord:
    """A reference function word. Tier 1 is the most discriminative."""
    word: str
    category: str
    tier: int
    british_marker: bool = False
    notes: Optional[str] = None


@dataclass(frozen=True)
class BaselineStat:
    """Reference mean and stddev, per 1000 words."""
    mean: float
    std_dev: float


FUNCTION_WORDS: tuple[FunctionWord, ...] = (
    # Articles & determiners
    FunctionWord("a", ARTICLE, 2),
    FunctionWord("an", ARTICLE, 2),
    FunctionWord("the", ARTICLE, 2),
    FunctionWord("this", DETERMINER, 2),
    FunctionWord("that", DETERMINER, 2),
    FunctionWord("these", DETERMINER, 2),
    FunctionWord("those", DETERMINER, 2),
    FunctionWord("some", DETERMINER, 2),
    FunctionWord("any", DETERMINER, 2),
    FunctionWord("all", DETERMINER, 2),
    FunctionWord("every", DETERMINER, 2),
    FunctionWord("no", DETERMINER, 2),
    # Prepositions
    FunctionWord("at", PREPOSITION, 2),
    FunctionWord("by", PREPOSITION, 2),
    FunctionWord("for", PREPOSITION, 2),
    FunctionWord("from", PREPOSITION, 2),
    FunctionWord("in", PREPOSITION, 2),
    FunctionWord("into", PREPOSITION, 2),
    FunctionWord("of", PREPOSITION, 2),
    FunctionWord("on", PREPOSITION, 2),
    FunctionWord("to", PREPOSITION, 2),
    FunctionWord("upon", PREPOSITION, 1, british_marker=True, notes="Highly discriminative"),
    FunctionWord("with", PREPOSITION, 2),
    FunctionWord("without", PREPOSITION, 1),
    FunctionWord("through", PREPOSITION, 2),
    FunctionWord("between", PREPOSITION, 2),
    FunctionWord("within", PREPOSITION, 1),
    FunctionWord("across", PREPOSITION, 2),
    # Conjunctions
    FunctionWord("and", CONJUNCTION, 2),
    FunctionWord("as", CONJUNCTION, 2),
    FunctionWord("but", CONJUNCTION, 2),
    FunctionWord("if", CONJUNCTION, 2),
    FunctionWord("or", CONJUNCTION, 2),
    FunctionWord("so", CONJUNCTION, 2),
    FunctionWord("than", CONJUNCTION, 2),
    FunctionWord("that", CONJUNCTION, 2),
    FunctionWord("though", CONJUNCTION, 1, notes="Highly discriminative"),
    FunctionWord("when", CONJUNCTION, 2),
    FunctionWord("while", CONJUNCTION, 2),
    FunctionWord("whilst", CONJUNCTION, 1, british_marker=True, notes="British preference"),
    FunctionWord("because", CONJUNCTION, 2),
    FunctionWord("although", CONJUNCTION, 2),
    # Modal verbs
    FunctionWord("can", MODAL, 3),
    FunctionWord("could", MODAL, 3),
    FunctionWord("may", MODAL, 1, notes="Highly discriminative"),
    FunctionWord("might", MODAL, 3),
    FunctionWord("must", MODAL, 1, notes="Highly discriminative"),
    FunctionWord("shall", MODAL, 1, notes="Highly discriminative"),
    FunctionWord("should", MODAL, 3),
    FunctionWord("will", MODAL, 3),
    FunctionWord("would", MODAL, 3),
    # Auxiliary verbs
    FunctionWord("be", AUXILIARY, 3),
    FunctionWord("been", AUXILIARY, 3),
    FunctionWord("being", AUXILIARY, 3),
    FunctionWord("do", AUXILIARY, 3),
    FunctionWord("does", AUXILIARY, 3),
    FunctionWord("had", AUXILIARY, 3),
    FunctionWord("has", AUXILIARY, 3),
    FunctionWord("have", AUXILIARY, 3),
    FunctionWord("is", AUXILIARY, 3),
    FunctionWord("was", AUXILIARY, 3),
    FunctionWord("were", AUXILIARY, 3),
    # Pronouns (genre-sensitive)
    FunctionWord("I", PRONOUN, 4, notes="Genre-sensitive, track separately"),
    FunctionWord("we", PRONOUN, 4, notes="Genre-sensitive"),
    FunctionWord("you", PRONOUN, 4, notes="Genre-sensitive"),
    FunctionWord("he", PRONOUN, 4, notes="Genre-sensitive"),
    FunctionWord("she", PRONOUN, 4, notes="Genre-sensitive"),
    FunctionWord("it", PRONOUN, 4, notes="Genre-sensitive"),
    FunctionWord("they", PRONOUN, 4, notes="Genre-sensitive"),
    FunctionWord("one", PRONOUN, 4, notes="Genre-sensitive"),
    FunctionWord("who", PRONOUN, 4, notes="Genre-sensitive"),
)

# Keys are lowercase so they match lowercased corpus tokens ("I" -> "i")
GENERAL_ENGLISH_STATS: Mapping[str, BaselineStat] = MappingProxyType({
    # High-frequency words
    "the": BaselineStat(60.0, 10.0),
    "of": BaselineStat(35.0, 8.0),
    "and": BaselineStat(28.0, 7.0),
    "a": BaselineStat(22.0, 5.0),
    "to": BaselineStat(25.0, 6.0),
    "in": BaselineStat(20.0, 5.0),
    "is": BaselineStat(10.0, 3.0),
    "that": BaselineStat(12.0, 4.0),
    "for": BaselineStat(12.0, 4.0),
    "it": BaselineStat(11.0, 3.0),
    "with": BaselineStat(9.0, 3.0),
    "as": BaselineStat(8.0, 3.0),
    "was": BaselineStat(7.0, 2.5),
    "on": BaselineStat(7.0, 2.5),
    "be": BaselineStat(7.0, 2.5),
    # Modals
    "can": BaselineStat(3.0, 1.5),
    "would": BaselineStat(4.0, 2.0),
    "will": BaselineStat(3.5, 2.0),
    "could": BaselineStat(2.0, 1.0),
    "should": BaselineStat(1.5, 1.0),
    "may": BaselineStat(1.0, 0.8),
    "might": BaselineStat(0.8, 0.6),
    "must": BaselineStat(0.9, 0.7),
    "shall": BaselineStat(0.2, 0.3),
    # British markers
    "whilst": BaselineStat(0.1, 0.2),
    "upon": BaselineStat(0.5, 0.5),
    # Pronouns, highly variable by genre
    "i": BaselineStat(5.0, 5.0),
    "we": BaselineStat(3.0, 3.0),
    "you": BaselineStat(4.0, 4.0),
    "he": BaselineStat(2.5, 2.0),
    "she": BaselineStat(1.5, 1.5),
    "they": BaselineStat(2.0, 1.5),
})


@dataclass(frozen=True)
class FunctionWordReference:
    """
    Immutable bundle of the word table and its baseline statistics.

    Analyzers take one of these as a parameter so tests can pass a
    reduced table.
    """
    words: tuple[FunctionWord, ...] = FUNCTION_WORDS
    baseline: Mapping[str, BaselineStat] = field(default_factory=lambda: GENERAL_ENGLISH_STATS)

    def lookup(self) -> dict[str, FunctionWord]:
        """Lowercase word -> entry. Later duplicates ("that") win."""
        return {fw.word.lower(): fw for fw in self.words}

    def by_tier(self, tier: int) -> list[FunctionWord]:
        return [fw for fw in self.words if fw.tier == tier]

    def by_category(self, category: str) -> list[FunctionWord]:
        return [fw for fw in self.words if fw.category == category]

    def british_markers(self) -> list[FunctionWord]:
        return [fw for fw in self.words if fw.british_marker]

    def baseline_pairs(self) -> dict[str, tuple[float, float]]:
        return {word: (stat.mean, stat.std_dev) for word, stat in self.baseline.items()}


@lru_cache
def default_reference() -> FunctionWordReference:
    """The shared reference table, built once per process."""
    return FunctionWordReference()
