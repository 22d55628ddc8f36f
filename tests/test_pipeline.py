"""Tests for the corpus analysis pipeline."""

import json

import pytest

from voice_analyzer.analyzers import ANALYSIS_GROUPS, ANALYZERS
from voice_analyzer.errors import CorpusNotFoundError, UnknownAnalysisTypeError
from voice_analyzer.metrics import round_half_up
from voice_analyzer.pipeline import CorpusAnalyzer


class TestCorpusAnalyzer:
    """Test running analyzers over a corpus on disk."""

    def test_full_analysis_writes_everything(self, settings, corpus_root):
        result = CorpusAnalyzer(settings=settings).analyze_corpus("my-blog")

        analysis = corpus_root / "my-blog" / "analysis"
        assert result.analysis_path == analysis
        for analyzer in ANALYZERS:
            assert (analysis / f"{analyzer.name}.json").exists()
        for summary in (
            "function-words-summary.md",
            "punctuation-summary.md",
            "anti-mechanical-summary.md",
            "information-density-summary.md",
            "summary.md",
        ):
            assert summary in result.files
            assert (analysis / summary).exists()
        assert len(result.files) == len(ANALYZERS) + 5

    def test_reports_are_valid_json(self, settings, corpus_root):
        CorpusAnalyzer(settings=settings).analyze_corpus("my-blog")
        data = json.loads((corpus_root / "my-blog" / "analysis" / "voice.json").read_text(encoding="utf-8"))
        assert data["schema_version"] == 1
        assert "first_person" in data

    def test_quick_analysis(self, settings, corpus_root):
        result = CorpusAnalyzer(settings=settings).analyze_corpus("my-blog", analysis_type="quick")
        assert set(result.reports) == set(ANALYSIS_GROUPS["quick"])
        assert "punctuation-summary.md" not in result.files
        assert "anti-mechanical-summary.md" in result.files
        assert "information-density-summary.md" in result.files

    def test_article_count_reaches_analyzers(self, settings):
        result = CorpusAnalyzer(settings=settings).analyze_corpus("my-blog", analysis_type="quick")
        profile = result.reports["information-density"].corpus_profile
        assert profile.average_article_length == round_half_up(profile.total_words / 2)

    def test_overview_lists_reports(self, settings, corpus_root):
        CorpusAnalyzer(settings=settings).analyze_corpus("my-blog", analysis_type="syntax")
        overview = (corpus_root / "my-blog" / "analysis" / "summary.md").read_text(encoding="utf-8")
        assert overview.startswith("# Analysis Summary")
        for name in ("paragraph", "punctuation", "sentence"):
            assert f"## {name}" in overview

    def test_explicit_corpus_dir(self, corpus_root, tmp_path_factory, monkeypatch):
        monkeypatch.chdir(tmp_path_factory.mktemp("elsewhere"))
        result = CorpusAnalyzer().analyze_corpus("my-blog", corpus_dir=corpus_root, analysis_type="syntax")
        assert (result.analysis_path / "sentence.json").exists()

    def test_progress(self, settings):
        updates = []
        CorpusAnalyzer(settings=settings, progress_callback=updates.append).analyze_corpus(
            "my-blog", analysis_type="syntax"
        )
        assert updates[0].phase == "loading"
        assert updates[-1].phase == "writing"
        analyzing = [u for u in updates if u.phase == "analyzing"]
        assert [u.current for u in analyzing] == [0, 1, 2, 3]
        assert all(u.total == 3 for u in analyzing)
        assert analyzing[-1].message == "Done"

    def test_unknown_type(self, settings):
        with pytest.raises(UnknownAnalysisTypeError):
            CorpusAnalyzer(settings=settings).analyze_corpus("my-blog", analysis_type="deep")

    def test_missing_corpus(self, settings):
        with pytest.raises(CorpusNotFoundError):
            CorpusAnalyzer(settings=settings).analyze_corpus("nowhere")

    def test_analyze_text(self, settings):
        reports = CorpusAnalyzer(settings=settings).analyze_text("I own a 3090. My rig runs hot.", "vocabulary")
        assert list(reports) == ["vocabulary", "vocabulary-tiers", "phrase-library"]
