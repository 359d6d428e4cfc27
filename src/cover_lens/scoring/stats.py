"""Basic text statistics."""

from cover_lens.models.analysis import CoverLetterStats
from cover_lens.utils.text import split_paragraphs, split_sentences, split_words


def calculate_stats(text: str) -> CoverLetterStats:
    """Count words, characters, paragraphs and sentences of a trimmed letter."""
    return CoverLetterStats(
        word_count=len(split_words(text)),
        character_count=len(text),
        paragraph_count=len(split_paragraphs(text)),
        sentence_count=len(split_sentences(text)),
    )
