"""Tests for function word stylometry."""

import pytest

from voice_analyzer.analyzers import function_words
from voice_analyzer.config import Thresholds
from voice_analyzer.reference import BaselineStat, FunctionWord, FunctionWordReference
from voice_analyzer.reference.function_words import PREPOSITION


def upon_reference(mean: float) -> FunctionWordReference:
    return FunctionWordReference(
        words=(FunctionWord("upon", PREPOSITION, 1, british_marker=True),),
        baseline={"upon": BaselineStat(mean, 1.0)},
    )


# "upon" once in 100 words is 10 per 1000
UPON_TEXT = "upon " + "word " * 99


class TestFunctionWords:
    """Test function word frequencies and z-scores."""

    def test_frequency_per_thousand(self):
        report = function_words.analyze(UPON_TEXT, upon_reference(7.99))
        assert report.total_words == 100
        assert report.function_word_count == 1
        assert report.function_word_percentage == pytest.approx(1.0)
        assert report.frequencies[0].frequency == pytest.approx(10.0)

    def test_just_above_highly_distinctive(self):
        report = function_words.analyze(UPON_TEXT, upon_reference(7.99))
        assert report.z_scores["upon"].z_score == pytest.approx(2.01)
        assert report.summary.highly_distinctive == 1
        assert report.summary.distinctive == 0
        assert [fw.word for fw in report.distinctive] == ["upon"]

    def test_just_below_highly_distinctive(self):
        report = function_words.analyze(UPON_TEXT, upon_reference(8.01))
        assert report.summary.highly_distinctive == 0
        assert report.summary.distinctive == 1

    def test_british_markers(self):
        report = function_words.analyze(UPON_TEXT, upon_reference(7.99))
        assert [fw.word for fw in report.british_markers] == ["upon"]

    def test_short_corpus_recommendation(self):
        report = function_words.analyze(UPON_TEXT, upon_reference(7.99))
        assert report.recommendations
        assert report.recommendations[0].startswith("Corpus has only 100 words")

    def test_no_recommendation_for_long_corpus(self):
        thresholds = Thresholds(short_corpus_words=50)
        report = function_words.analyze(UPON_TEXT, upon_reference(7.99), thresholds)
        assert report.recommendations == []

    def test_that_reported_once(self):
        report = function_words.analyze("that is that")
        that = [fw for fw in report.frequencies if fw.word == "that"]
        assert len(that) == 1
        assert that[0].count == 2

    def test_pronoun_i_lowercased(self):
        report = function_words.analyze("I think I know")
        i = next(fw for fw in report.frequencies if fw.word == "i")
        assert i.count == 2
        assert "i" in report.z_scores

    def test_avoided_sorted_most_negative_first(self):
        report = function_words.analyze("word " * 50)
        assert report.avoided[0].word == "the"
        z = [report.z_scores[fw.word].z_score for fw in report.avoided]
        assert z == sorted(z)

    def test_words_without_baseline_are_not_scored(self):
        report = function_words.analyze("these trees")
        these = next(fw for fw in report.frequencies if fw.word == "these")
        assert these.count == 1
        assert "these" not in report.z_scores

    def test_empty(self):
        report = function_words.analyze("")
        assert report.total_words == 0
        assert report.function_word_percentage == 0.0
        assert all(fw.frequency == 0.0 for fw in report.frequencies)
