"""Tests for anti-mechanical scoring and burstiness clustering."""

import pytest

from voice_analyzer.analyzers import anti_mechanical, clustering
from voice_analyzer.analyzers.anti_mechanical import (
    first_person_score,
    interpret,
    paragraph_variation_score,
    repetition_score,
)
from voice_analyzer.analyzers.clustering import classify_opening
from voice_analyzer.config import Thresholds

WORDS = "alpha bravo charlie delta echo foxtrot golf hotel india juliet".split()


def sentence_of(length: int, start: str) -> str:
    """A sentence of exactly ``length`` words starting with ``start``."""
    words = [start] + [WORDS[i % len(WORDS)] for i in range(length - 1)]
    return " ".join(words) + "."


def text_of(lengths: list[int]) -> str:
    starts = ["Once", "Then", "Later", "After", "Soon", "Now", "Still"]
    return " ".join(sentence_of(n, starts[i % len(starts)]) for i, n in enumerate(lengths))


class TestSentenceVariation:
    """Test the sentence-variation sub-score."""

    def test_high_variation_hits_cap(self):
        report = anti_mechanical.analyze(text_of([3, 35, 5, 40, 4]))
        assert report.naturalness.sentence_variation_score == 25
        assert report.sentence_length_variation.has_natural_variation

    def test_identical_lengths_score_zero(self):
        report = anti_mechanical.analyze(text_of([10, 10, 10, 10, 10]))
        assert report.sentence_length_variation.coefficient_of_variation == 0
        assert report.naturalness.sentence_variation_score == 0

    def test_bands(self):
        bands = anti_mechanical.analyze(text_of([3, 12, 30, 45])).sentence_length_variation.distribution
        assert (bands.short, bands.medium, bands.long, bands.very_long) == (1, 1, 1, 1)


class TestSubScores:
    """Test the remaining sub-scores and the interpretation buckets."""

    def test_paragraph_points(self):
        assert paragraph_variation_score(0, 0, 0) == 0
        assert paragraph_variation_score(1, 1, 0.2) == pytest.approx(19.0)
        assert paragraph_variation_score(1, 1, 2.0) == 25

    def test_first_person_penalties(self):
        assert first_person_score(0.1, 0) == 25
        assert first_person_score(0.4, 3) == 12
        assert first_person_score(0.6, 4) == 0

    def test_repetition_penalties(self):
        assert [repetition_score(n) for n in (2, 3, 4, 5)] == [25, 19, 13, 5]

    @pytest.mark.parametrize(
        "total, expected",
        [
            (85, "very_natural"),
            (84, "natural"),
            (65, "natural"),
            (64, "somewhat_mechanical"),
            (45, "somewhat_mechanical"),
            (44, "mechanical"),
        ],
    )
    def test_interpretation(self, total, expected):
        assert interpret(total) == expected

    def test_custom_thresholds(self):
        assert interpret(50, Thresholds(very_natural=50)) == "very_natural"

    def test_repetitive_i_starts(self):
        text = "I went. I saw. I left. I came. I stayed."
        report = anti_mechanical.analyze(text)
        assert report.first_person_distribution.consecutive_i_start == 5
        assert report.repetitive_starts.problematic_patterns == ["i"]
        assert report.naturalness.first_person_score == 0
        assert report.naturalness.repetition_score == 5

    def test_total_is_sum_and_empty_text(self):
        report = anti_mechanical.analyze("")
        n = report.naturalness
        assert n.total_score == round(
            n.sentence_variation_score + n.paragraph_variation_score
            + n.first_person_score + n.repetition_score
        )
        assert n.repetition_score == 25


class TestClustering:
    """Test burstiness clustering and paragraph openings."""

    @pytest.mark.parametrize(
        "sentence, expected",
        [
            ("But why?", "question"),
            ("But then it rained.", "conjunction"),
            ("I did it again.", "personal"),
            ("The cat sat on it.", "article"),
            ("Gone.", "fragment"),
            ("Running fast across every field today.", "statement"),
        ],
    )
    def test_opening_order(self, sentence, expected):
        assert classify_opening(sentence) == expected

    def test_uniform_text(self):
        report = clustering.analyze(text_of([5] * 6))
        clusters = report.sentence_length_clusters
        assert clusters.burstiness == pytest.approx(-1.0)
        assert clusters.guidance.startswith("CRITICAL RISK")
        assert len(clusters.clusters) == 1
        assert clusters.clusters[0].size == 6
        assert clusters.distribution[0].count == 6
        assert len(clusters.distribution[0].examples) == 3
        assert report.length_variation.guidance.startswith("LOW VARIATION")

    def test_opening_entropy(self):
        text = "Why now?\n\nBut later.\n\nI think so.\n\nThe end came."
        openings = clustering.analyze(text).paragraph_openings
        assert openings.entropy == pytest.approx(2.0)
        assert openings.examples["question"] == ["Why now"]
        assert openings.guidance.startswith("HIGH DIVERSITY")

    def test_empty(self):
        report = clustering.analyze("")
        assert report.sentence_length_clusters.burstiness == 0
        assert report.paragraph_openings.entropy == 0
