"""Tests for vocabulary, sentence, voice, punctuation and paragraph analysis."""

import pytest

from voice_analyzer.analyzers import paragraph, punctuation, sentence, vocabulary, voice
from voice_analyzer.analyzers.punctuation import dash_consistency, quotation_style
from voice_analyzer.analyzers.sentence import classify_complexity
from voice_analyzer.analyzers.vocabulary import is_valid_word
from voice_analyzer.analyzers.voice import NEXT_LEVEL_LABEL


class TestVocabulary:
    """Test the vocabulary profile."""

    TEXT = "I've colour and color. I've got £5 and $3, whilst testing."

    def test_counts_skip_artifacts(self):
        report = vocabulary.analyze(self.TEXT)
        # "£5" and "$3," carry no letters
        assert report.total_words == 9

    def test_contractions(self):
        report = vocabulary.analyze(self.TEXT)
        assert report.contractions.examples[0].contracted == "I've"
        assert report.contractions.examples[0].count == 2
        assert report.contractions.usage_rate == pytest.approx(2 / 9 * 100)

    def test_regional_spelling(self):
        report = vocabulary.analyze(self.TEXT)
        assert [m.word for m in report.british_markers] == ["whilst", "colour"]
        assert [m.word for m in report.american_markers] == ["color"]

    def test_currency(self):
        currency = vocabulary.analyze(self.TEXT).currency_preference
        assert (currency.gbp, currency.eur, currency.usd) == (1, 0, 1)

    @pytest.mark.parametrize(
        "token, valid",
        [
            ("https://example.com", False),
            ("www.example.com", False),
            (".png", False),
            ("123", False),
            ("800x600", False),
            ("b", False),
            ("a", True),
            ("thermal", True),
        ],
    )
    def test_artifact_filter(self, token, valid):
        assert is_valid_word(token) is valid

    def test_technical_terms(self):
        report = vocabulary.analyze("thermal paste " * 10)
        assert [t.word for t in report.technical_terms] == ["thermal", "paste"]

    def test_empty(self):
        report = vocabulary.analyze("")
        assert report.total_words == 0
        assert report.vocabulary_richness == 0
        assert report.word_frequency == []


class TestSentence:
    """Test sentence structure analysis."""

    TEXT = "Short one. This sentence, and another clause, is compound. Because it rains we stay."

    def test_complexity_order(self):
        assert classify_complexity("I left because it rained, and then") == "complex"
        assert classify_complexity("I came; I saw") == "compound"
        assert classify_complexity("Fine, but late") == "compound"
        assert classify_complexity("A plain sentence") == "simple"

    def test_shares(self):
        report = sentence.analyze(self.TEXT)
        assert report.total_sentences == 3
        assert report.complexity.simple == pytest.approx(100 / 3)
        assert report.complexity.compound == pytest.approx(100 / 3)
        assert report.complexity.complex == pytest.approx(100 / 3)

    def test_length_stats(self):
        report = sentence.analyze(self.TEXT)
        assert report.length.median == 5
        assert report.length.distribution[0].count == 3

    def test_starters_and_enders(self):
        report = sentence.analyze(self.TEXT)
        assert {s.item for s in report.starters} == {"short", "this", "because"}
        assert report.enders[0].item == "."
        assert report.enders[0].count == 3

    def test_examples(self):
        examples = sentence.analyze(self.TEXT).examples
        assert [e.label for e in examples] == ["shortest", "typical", "longest"]
        assert examples[0].text == "Short one"
        assert examples[1].word_count == 5
        assert examples[2].word_count == 7

    def test_empty(self):
        report = sentence.analyze("")
        assert report.total_sentences == 0
        assert report.examples == []


class TestVoice:
    """Test voice markers."""

    def test_first_person_rate(self):
        report = voice.analyze("I own my rig. I'd do it again.")
        assert report.first_person.frequency == pytest.approx(3 / 8 * 100)
        assert {e.phrase for e in report.first_person.examples} == {"I own", "I'd", "my"}

    def test_passive_voice(self):
        report = voice.analyze("The pads were tested. It was fixed.")
        assert report.passive_voice_ratio == pytest.approx(100.0)

    def test_ai_cliches(self):
        report = voice.analyze("Let's delve into this. Take your setup to the next level.")
        phrases = {c.phrase for c in report.ai_cliches}
        assert "delve into" in phrases
        assert NEXT_LEVEL_LABEL in phrases

    def test_cliches_need_whole_words(self):
        report = voice.analyze("The door unlocked itself.")
        assert report.ai_cliches == []

    def test_equipment_specificity(self):
        report = voice.analyze("I love my Simucube 2 Pro wheel. The pedals are fine.")
        assert report.equipment_specificity.specific[0].phrase == "my Simucube 2 Pro wheel"
        assert report.equipment_specificity.generic[0].phrase == "the pedals"

    def test_hollow_intensifiers(self):
        report = voice.analyze("Honestly, it works.")
        assert report.hollow_intensifiers[0].phrase == "honestly"
        assert report.hollow_intensifiers[0].alternative

    def test_opening_patterns(self):
        text = "I own a rig. Stuff.\n\nHow does it work? Fine.\n\nThe main issue is heat."
        openings = voice.analyze(text).opening_patterns
        assert openings.personal_context == 1
        assert openings.question == 1
        assert openings.direct_problem == 1
        assert openings.observation == 0

    def test_empty(self):
        report = voice.analyze("")
        assert report.first_person.frequency == 0
        assert report.passive_voice_ratio == 0


class TestPunctuation:
    """Test punctuation analysis."""

    def test_mixed_dashes_flagged(self):
        result = dash_consistency({"hyphen": 6, "en-dash": 5, "em-dash": 0})
        assert result.dominant_type == "hyphen"
        assert result.consistency_score == 55
        assert result.mixed_usage
        assert result.ai_detection_flag

    def test_consistent_dashes(self):
        result = dash_consistency({"hyphen": 12, "en-dash": 0, "em-dash": 0})
        assert result.consistency_score == 100
        assert not result.ai_detection_flag
        assert result.note.startswith("Consistent use of hyphen")

    def test_typographic_dashes_noted_not_flagged(self):
        result = dash_consistency({"hyphen": 0, "en-dash": 0, "em-dash": 11})
        assert result.dominant_type == "em-dash"
        assert not result.ai_detection_flag
        assert result.note.startswith("Uses em-dash")

    def test_limited_and_none(self):
        assert dash_consistency({"hyphen": 2}).note.startswith("Limited dash usage (2 total)")
        none = dash_consistency({"hyphen": 0, "en-dash": 0, "em-dash": 0})
        assert none.dominant_type == "none"
        assert none.consistency_score == 100

    @pytest.mark.parametrize(
        "text, expected",
        [("plain", "none"), ("'a' 'b'", "single"), ('"a"', "double"), ("'a' \"b\"", "mixed")],
    )
    def test_quotation_style(self, text, expected):
        assert quotation_style(text) == expected

    def test_rates(self):
        report = punctuation.analyze("Hello, world! Yes; no: maybe... (ok)")
        assert report.comma_density == pytest.approx(1 / 3)
        assert report.exclamation_frequency == pytest.approx(1000 / 6)
        assert report.ellipsis_frequency == pytest.approx(1000 / 6)
        assert report.dash_types.em_dash == 0

    def test_empty(self):
        report = punctuation.analyze("")
        assert report.comma_density == 0
        assert report.colon_frequency == 0


class TestParagraph:
    """Test paragraph structure analysis."""

    TEXT = "I like this. It works.\n\nDoes it? Yes.\n\nHowever the end is near."

    def test_openings(self):
        report = paragraph.analyze(self.TEXT)
        counts = {p.type: p.count for p in report.opening_patterns}
        assert counts == {"statement": 1, "question": 1, "personal": 1}

    def test_question_wins_over_personal(self):
        assert paragraph.classify_opening("I wonder why? Maybe.") == "question"

    def test_transition_words(self):
        report = paragraph.analyze(self.TEXT)
        assert [(t.word, t.count) for t in report.transition_words] == [("however", 1)]

    def test_symmetry(self):
        report = paragraph.analyze(self.TEXT)
        assert report.total_paragraphs == 3
        assert 0 < report.symmetry_score < 1
        assert paragraph.analyze("One. Two.\n\nThree. Four.").symmetry_score == pytest.approx(1.0)
