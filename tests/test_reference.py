"""Tests for reference word tables."""

import pytest

from voice_analyzer.reference import (
    AI_SLOP,
    FUNCTION_WORDS,
    GENERAL_ENGLISH_STATS,
    FunctionWordReference,
    Lexicon,
    default_lexicon,
    default_reference,
)
from voice_analyzer.reference.function_words import MODAL, PRONOUN
from voice_analyzer.reference.lexicon import FALLBACK_ALTERNATIVE


class TestFunctionWordReference:
    """Test the function word table."""

    def test_that_listed_twice(self):
        assert [fw.category for fw in FUNCTION_WORDS if fw.word == "that"] == ["determiner", "conjunction"]

    def test_lookup_is_lowercase(self):
        lookup = default_reference().lookup()
        assert "i" in lookup
        assert lookup["that"].category == "conjunction"

    def test_british_markers(self):
        words = {fw.word for fw in default_reference().british_markers()}
        assert words == {"upon", "whilst"}

    def test_baseline_keys_are_lowercase(self):
        assert all(key == key.lower() for key in GENERAL_ENGLISH_STATS)

    def test_baseline_is_read_only(self):
        with pytest.raises(TypeError):
            GENERAL_ENGLISH_STATS["the"] = None

    def test_filters(self):
        reference = default_reference()
        assert all(fw.category == MODAL for fw in reference.by_category(MODAL))
        assert all(fw.category == PRONOUN for fw in reference.by_tier(4))

    def test_default_is_shared(self):
        assert default_reference() is default_reference()
        assert default_reference().baseline_pairs()["the"] == (60.0, 10.0)

    def test_custom_reference(self):
        reference = FunctionWordReference(words=FUNCTION_WORDS[:3], baseline={})
        assert len(reference.lookup()) == 3
        assert reference.baseline_pairs() == {}


class TestLexicon:
    """Test formal vocabulary and slop lists."""

    def test_alternatives(self):
        lexicon = default_lexicon()
        assert lexicon.alternatives_for("Utilize") == ["use"]
        assert lexicon.alternatives_for("delve")[0] == "explore"

    def test_fallback_alternative(self):
        assert default_lexicon().alternatives_for("synergy") == [FALLBACK_ALTERNATIVE]

    def test_slop_list(self):
        assert "delve" in AI_SLOP
        assert "cutting-edge" in AI_SLOP

    def test_injected_lexicon(self):
        lexicon = Lexicon(ai_slop=("blorp",), alternatives={"blorp": ("thing",)})
        assert lexicon.alternatives_for("blorp") == ["thing"]
