"""Tests for the command-line interface."""

import json

import pytest
from click.testing import CliRunner

from voice_analyzer import __version__
from voice_analyzer.cli import main


@pytest.fixture
def runner():
    return CliRunner()


def invoke(runner, *args):
    return runner.invoke(main, [str(a) for a in args])


class TestCli:
    """Test each command end to end against a corpus on disk."""

    def test_version(self, runner):
        result = invoke(runner, "--version")
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_analyze(self, runner, corpus_root):
        result = invoke(runner, "analyze", "my-blog", "--corpus-dir", corpus_root, "--type", "syntax")
        assert result.exit_code == 0, result.output
        assert "Analysis complete" in result.output
        assert (corpus_root / "my-blog" / "analysis" / "sentence.json").exists()

    def test_analyze_rejects_unknown_type(self, runner, corpus_root):
        result = invoke(runner, "analyze", "my-blog", "-d", corpus_root, "-t", "deep")
        assert result.exit_code == 2

    def test_analyze_missing_corpus(self, runner, corpus_root):
        result = invoke(runner, "analyze", "nowhere", "-d", corpus_root)
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_analyze_malformed_metadata(self, runner, corpus_root):
        (corpus_root / "my-blog" / "corpus.json").write_text("{not json", encoding="utf-8")
        result = invoke(runner, "analyze", "my-blog", "-d", corpus_root, "-t", "syntax")
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "not valid JSON" in result.output
        assert "Traceback" not in result.output

    def test_guide(self, runner, corpus_root):
        assert invoke(runner, "analyze", "my-blog", "-d", corpus_root).exit_code == 0
        result = invoke(runner, "guide", "my-blog", "-d", corpus_root)
        assert result.exit_code == 0, result.output
        assert "Style guide saved to" in result.output
        assert (corpus_root / "my-blog" / "writing_style_my-blog.md").exists()

    def test_guide_output_option(self, runner, corpus_root, tmp_path):
        invoke(runner, "analyze", "my-blog", "-d", corpus_root)
        output = tmp_path / "guides" / "voice.md"
        result = invoke(runner, "guide", "my-blog", "-d", corpus_root, "-o", output)
        assert result.exit_code == 0, result.output
        assert output.exists()

    def test_guide_without_analysis(self, runner, corpus_root):
        result = invoke(runner, "guide", "my-blog", "-d", corpus_root)
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert not (corpus_root / "my-blog" / "writing_style_my-blog.md").exists()

    def test_score(self, runner, tmp_path):
        path = tmp_path / "sample.txt"
        path.write_text(
            "I tried it. The pump was loud for the first three weeks of testing in my case. "
            "Fine. Then the mount arrived and everything about the noise changed overnight.",
            encoding="utf-8",
        )
        result = invoke(runner, "score", path)
        assert result.exit_code == 0, result.output
        assert "Naturalness: sample.txt" in result.output
        assert "/100" in result.output
        assert "Burstiness" in result.output

    def test_score_missing_file(self, runner, tmp_path):
        result = invoke(runner, "score", tmp_path / "missing.txt")
        assert result.exit_code == 2

    def test_show(self, runner, corpus_root):
        invoke(runner, "analyze", "my-blog", "-d", corpus_root, "-t", "syntax")
        result = invoke(runner, "show", "my-blog", "punctuation", "-d", corpus_root)
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["schema_version"] == 1

    def test_show_unknown_report(self, runner, corpus_root):
        result = invoke(runner, "show", "my-blog", "nope", "-d", corpus_root)
        assert result.exit_code == 1
        assert "Unknown report" in result.output

    def test_index(self, runner, corpus_root):
        result = invoke(runner, "index", "my-blog", "-d", corpus_root)
        assert result.exit_code == 0, result.output
        assert "Indexed 2 articles" in result.output
        data = json.loads((corpus_root / "my-blog" / "corpus.json").read_text(encoding="utf-8"))
        assert data["statistics"]["total_words"] == 250
