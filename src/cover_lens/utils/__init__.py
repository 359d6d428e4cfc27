"""Utility functions for Cover Lens."""

from cover_lens.utils.text import (
    enforce_size_limit,
    round_half_up,
    split_paragraphs,
    split_sentences,
    split_words,
    whole_word_pattern,
)

__all__ = [
    "enforce_size_limit",
    "round_half_up",
    "split_paragraphs",
    "split_sentences",
    "split_words",
    "whole_word_pattern",
]
