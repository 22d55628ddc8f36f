"""
Formal Vocabulary and AI Slop

Word lists for formality scoring plus hand-written casual replacements.
"""

from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType
from typing import Mapping


FORMAL_VERBS = (
    "achieve", "acquire", "demonstrate", "facilitate", "implement",
    "utilize", "obtain", "commence", "conclude", "determine",
    "establish", "examine", "indicate", "investigate", "maintain",
    "perform", "proceed", "provide", "require", "select",
    "subsequent", "sufficient", "undertake", "employ", "enable",
)

FORMAL_ADJECTIVES = (
    "optimal", "comprehensive", "significant", "substantial", "considerable",
    "extensive", "numerous", "various", "particular", "specific",
    "appropriate", "adequate", "sufficient", "relevant", "potential",
)

FORMAL_ADVERBS = (
    "subsequently", "accordingly", "consequently", "furthermore",
    "moreover", "nevertheless", "nonetheless", "additionally",
    "alternatively", "evidently", "presumably", "potentially",
)

# Zero tolerance
AI_SLOP = (
    "delve", "leverage", "unlock", "seamless", "robust",
    "cutting-edge", "game-changer", "revolutionize", "groundbreaking",
    "transform", "elevate", "empower", "synergy", "paradigm",
    "holistic", "dynamic", "innovative", "strategic", "optimize",
)

FALLBACK_ALTERNATIVE = "[rewrite in simpler terms]"

CASUAL_ALTERNATIVES: Mapping[str, tuple[str, ...]] = MappingProxyType({
    # Verbs
    "achieve": ("get", "reach", "hit", "manage"),
    "acquire": ("get", "buy", "pick up", "grab"),
    "demonstrate": ("show", "prove", "test"),
    "facilitate": ("help", "make easier", "enable"),
    "implement": ("use", "put in place", "set up", "install"),
    "utilize": ("use",),
    "obtain": ("get", "find", "buy"),
    "commence": ("start", "begin", "kick off"),
    "conclude": ("finish", "end", "wrap up", "decide"),
    "determine": ("find out", "figure out", "check", "test"),
    "establish": ("set up", "create", "build", "prove"),
    "examine": ("look at", "check", "test", "study"),
    "indicate": ("show", "suggest", "point to"),
    "investigate": ("look into", "check out", "research"),
    "maintain": ("keep", "hold", "run"),
    "perform": ("do", "run", "carry out"),
    "proceed": ("go ahead", "continue", "move on"),
    "provide": ("give", "offer", "supply"),
    "require": ("need", "must have", "call for"),
    "select": ("pick", "choose"),
    "employ": ("use", "hire"),
    "enable": ("let", "allow", "make possible"),
    # Adjectives
    "optimal": ("best", "ideal", "perfect"),
    "comprehensive": ("complete", "full", "thorough"),
    "significant": ("big", "major", "important"),
    "substantial": ("big", "large", "considerable"),
    "extensive": ("large", "wide", "thorough"),
    "numerous": ("many", "lots of", "plenty of"),
    "various": ("different", "several", "a few"),
    "particular": ("specific", "certain", "this"),
    "appropriate": ("right", "suitable", "proper"),
    "adequate": ("enough", "good enough", "sufficient"),
    "relevant": ("related", "connected", "important"),
    # AI slop
    "delve": ("explore", "look at", "examine", "dig into"),
    "leverage": ("use", "apply", "take advantage of"),
    "unlock": ("discover", "access", "enable", "reveal"),
    "seamless": ("smooth", "easy", "works well"),
    "robust": ("strong", "reliable", "solid"),
    "cutting-edge": ("latest", "modern", "new"),
    "game-changer": ("big improvement", "major change"),
    "revolutionize": ("change completely", "transform"),
    "groundbreaking": ("new", "innovative", "first-of-its-kind"),
    "transform": ("change", "improve", "reshape"),
    "elevate": ("improve", "enhance", "lift"),
    "empower": ("enable", "allow", "help"),
    "optimize": ("improve", "fine-tune", "tweak"),
})


@dataclass(frozen=True)
class Lexicon:
    """Formal-word tiers, the slop list and their replacements."""
    formal_verbs: tuple[str, ...] = FORMAL_VERBS
    formal_adjectives: tuple[str, ...] = FORMAL_ADJECTIVES
    formal_adverbs: tuple[str, ...] = FORMAL_ADVERBS
    ai_slop: tuple[str, ...] = AI_SLOP
    alternatives: Mapping[str, tuple[str, ...]] = field(default_factory=lambda: CASUAL_ALTERNATIVES)

    def alternatives_for(self, word: str) -> list[str]:
        return list(self.alternatives.get(word.lower(), (FALLBACK_ALTERNATIVE,)))


@lru_cache
def default_lexicon() -> Lexicon:
    return Lexicon()
