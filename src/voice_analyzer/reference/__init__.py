"""
Reference Data

Static word tables loaded once per process and passed into analyzers.
"""

from .function_words import (
    FUNCTION_WORDS,
    GENERAL_ENGLISH_STATS,
    BaselineStat,
    FunctionWord,
    FunctionWordReference,
    default_reference,
)
from .lexicon import (
    AI_SLOP,
    CASUAL_ALTERNATIVES,
    FORMAL_ADJECTIVES,
    FORMAL_ADVERBS,
    FORMAL_VERBS,
    Lexicon,
    default_lexicon,
)

__all__ = [
    # Function words
    "FUNCTION_WORDS",
    "GENERAL_ENGLISH_STATS",
    "BaselineStat",
    "FunctionWord",
    "FunctionWordReference",
    "default_reference",
    # Lexicon
    "AI_SLOP",
    "CASUAL_ALTERNATIVES",
    "FORMAL_ADJECTIVES",
    "FORMAL_ADVERBS",
    "FORMAL_VERBS",
    "Lexicon",
    "default_lexicon",
]
