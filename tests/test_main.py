"""Tests for the command-line interface."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError
from typer.testing import CliRunner

from cover_lens import __version__
from cover_lens.main import app

runner = CliRunner()

QUIET_ENV = {"COVER_LENS_LOG_LEVEL": "WARNING"}


@pytest.fixture
def strong_letter_path(fixtures_dir: Path) -> Path:
    return fixtures_dir / "strong_letter.txt"


class TestAnalyseCommand:
    """Tests for the analyse command."""

    def test_renders_scores(self, strong_letter_path: Path) -> None:
        """Test the rich summary for a letter on disk."""
        result = runner.invoke(
            app,
            ["analyse", str(strong_letter_path), "-r", "Machine Learning Engineer", "-c", "Acme"],
            env=QUIET_ENV,
        )

        assert result.exit_code == 0
        assert "Overall Score" in result.stdout
        assert "Excellent" in result.stdout
        assert "Score Breakdown" in result.stdout

    def test_json_output(self, strong_letter_path: Path) -> None:
        """Test that --json prints the full analysis and nothing else."""
        result = runner.invoke(
            app,
            [
                "analyse",
                str(strong_letter_path),
                "--role",
                "Machine Learning Engineer",
                "-c",
                "Acme",
                "--json",
            ],
            env=QUIET_ENV,
        )

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["structure"]["score"] == 100
        assert data["personalisation"]["company_mentions"] == 2
        assert data["label"] == {"label": "Excellent", "tone": "success"}
        assert data["red_flags"] == []
        assert data["stats"]["word_count"] == 269

    def test_reads_stdin(self, weak_letter: str) -> None:
        """Test that - reads the letter from stdin."""
        result = runner.invoke(app, ["analyse", "-", "--json"], input=weak_letter, env=QUIET_ENV)

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert [flag["type"] for flag in data["red_flags"]] == [
            "generic_opening",
            "weak_language",
            "too_short",
            "no_paragraphs",
        ]

    def test_saves_markdown_report(self, strong_letter_path: Path, tmp_path: Path) -> None:
        """Test that --output writes a Markdown report."""
        output = tmp_path / "reports" / "letter.md"
        result = runner.invoke(
            app, ["analyse", str(strong_letter_path), "-o", str(output)], env=QUIET_ENV
        )

        assert result.exit_code == 0
        assert "Report saved to" in result.stdout
        assert output.read_text(encoding="utf-8").startswith("## Cover Letter Analysis")

    def test_unknown_role(self, strong_letter_path: Path) -> None:
        """Test that an unsupported role is a usage error."""
        result = runner.invoke(
            app, ["analyse", str(strong_letter_path), "--role", "Prompt Whisperer"], env=QUIET_ENV
        )

        assert result.exit_code == 2

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test that a missing letter file exits with an error."""
        result = runner.invoke(app, ["analyse", str(tmp_path / "nope.txt")], env=QUIET_ENV)

        assert result.exit_code == 1
        assert "File not found" in result.stdout

    def test_oversize_rejected(self, tmp_path: Path) -> None:
        """Test the reject policy for letters over the size limit."""
        letter = tmp_path / "long.txt"
        letter.write_text("word " * 400, encoding="utf-8")
        env = dict(
            QUIET_ENV, COVER_LENS_OVERSIZE_POLICY="reject", COVER_LENS_MAX_INPUT_CHARS="1000"
        )

        result = runner.invoke(app, ["analyse", str(letter)], env=env)

        assert result.exit_code == 1
        assert "limit is 1000" in result.stdout

    def test_oversize_truncated(self, tmp_path: Path) -> None:
        """Test the truncate policy analyses the first characters only."""
        letter = tmp_path / "long.txt"
        letter.write_text("word " * 400, encoding="utf-8")
        env = dict(QUIET_ENV, COVER_LENS_MAX_INPUT_CHARS="1000")

        result = runner.invoke(app, ["analyse", str(letter), "--json"], env=env)

        assert result.exit_code == 0
        assert json.loads(result.stdout)["stats"]["word_count"] == 200

    def test_bad_lexicon_path(self, strong_letter_path: Path, tmp_path: Path) -> None:
        """Test that an invalid lexicon file aborts before analysis."""
        lexicon = tmp_path / "lexicon.json"
        lexicon.write_text("{}", encoding="utf-8")
        env = dict(QUIET_ENV, COVER_LENS_LEXICON_PATH=str(lexicon))

        result = runner.invoke(app, ["analyse", str(strong_letter_path)], env=env)

        assert result.exit_code == 1
        assert "Configuration error" in result.stdout

    def test_invalid_settings(self, strong_letter_path: Path) -> None:
        """Test that an out-of-range setting exits cleanly with a message."""
        env = dict(QUIET_ENV, COVER_LENS_MAX_INPUT_CHARS="5")

        result = runner.invoke(app, ["analyse", str(strong_letter_path)], env=env)

        assert result.exit_code == 1
        assert not isinstance(result.exception, ValidationError)
        assert "Configuration error" in result.stdout
        assert "max_input_chars" in result.stdout

    def test_non_utf8_file(self, tmp_path: Path) -> None:
        """Test that a letter in another encoding exits cleanly with a message."""
        letter = tmp_path / "latin1.txt"
        letter.write_bytes(b"Caf\xe9 au lait, I built pipelines.")

        result = runner.invoke(app, ["analyse", str(letter)], env=QUIET_ENV)

        assert result.exit_code == 1
        assert not isinstance(result.exception, UnicodeDecodeError)
        assert "not valid UTF-8" in result.stdout


class TestRolesCommand:
    """Tests for the roles command."""

    def test_lists_roles(self) -> None:
        """Test every supported role is listed."""
        result = runner.invoke(app, ["roles"])

        assert result.exit_code == 0
        assert "- Machine Learning Engineer" in result.stdout
        assert "- Computer Vision Engineer" in result.stdout


class TestVersionCommand:
    """Tests for the version command."""

    def test_shows_version(self) -> None:
        """Test the version string."""
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert f"Cover Lens v{__version__}" in result.stdout
