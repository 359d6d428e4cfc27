"""Pytest configuration and fixtures."""

from collections.abc import Iterator
from pathlib import Path

import pytest

from cover_lens.analyser import CoverLetterAnalyser
from cover_lens.config import get_settings
from cover_lens.lexicon import load_lexicon
from cover_lens.models.lexicon import Lexicon


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Iterator[None]:
    """Make every test read settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(scope="session")
def lexicon() -> Lexicon:
    """Built-in lexicon, validated once per session."""
    return load_lexicon()


@pytest.fixture
def analyser(lexicon: Lexicon) -> CoverLetterAnalyser:
    """Sequential analyser over the built-in lexicon."""
    return CoverLetterAnalyser(lexicon=lexicon, parallel=False)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def strong_letter(fixtures_dir: Path) -> str:
    """A 269-word, 4-paragraph letter for Acme with a hook and a call to action."""
    return (fixtures_dir / "strong_letter.txt").read_text(encoding="utf-8")


@pytest.fixture
def weak_letter(fixtures_dir: Path) -> str:
    """A short, generic, single-paragraph letter."""
    return (fixtures_dir / "weak_letter.txt").read_text(encoding="utf-8")


def make_letter(sentence_lengths: list[list[int]], word: str = "lorem") -> str:
    """Build filler text with exact word, sentence and paragraph counts.

    Args:
        sentence_lengths: One list per paragraph, one word count per sentence.
        word: Filler token repeated to make up each sentence.
    """
    paragraphs = []
    for lengths in sentence_lengths:
        sentences = [" ".join([word] * (n - 1) + ["ipsum."]) for n in lengths]
        paragraphs.append(" ".join(sentences))
    return "\n\n".join(paragraphs)


@pytest.fixture
def letter_factory():
    """Expose make_letter to tests."""
    return make_letter
