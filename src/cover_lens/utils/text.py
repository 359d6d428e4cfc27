"""Text splitting and matching helpers shared by the analysers."""

import math
import re
from typing import Literal

from cover_lens.exceptions import InputTooLargeError

# A blank line (possibly containing spaces/tabs) separates paragraphs
PARAGRAPH_BREAK = re.compile(r"\n\s*\n")

# Runs of terminal punctuation end a sentence
SENTENCE_BREAK = re.compile(r"[.!?]+")


def split_words(text: str) -> list[str]:
    """Split text into whitespace-delimited tokens."""
    return text.split()


def split_paragraphs(text: str) -> list[str]:
    """Split text into paragraphs separated by blank lines.

    Paragraphs are returned as they appear in the text (not stripped), but
    blocks that are empty after stripping are dropped.

    Examples:
        >>> split_paragraphs("First.\\n\\nSecond.")
        ['First.', 'Second.']
        >>> split_paragraphs("")
        []
    """
    return [p for p in PARAGRAPH_BREAK.split(text) if p.strip()]


def split_sentences(text: str) -> list[str]:
    """Split text on runs of '.', '!' and '?', dropping empty segments."""
    return [s for s in SENTENCE_BREAK.split(text) if s.strip()]


def whole_word_pattern(term: str, suffix: str = "") -> re.Pattern[str]:
    """Compile a case-insensitive whole-word matcher for a literal term.

    Args:
        term: Literal text to match; regex metacharacters are escaped.
        suffix: Optional raw regex appended after the term (e.g. inflections).

    Returns:
        Compiled pattern bounded by word boundaries on both sides.
    """
    return re.compile(rf"\b{re.escape(term)}{suffix}\b", re.IGNORECASE)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 always rounding up.

    Python's built-in round() uses banker's rounding, which would report a
    42.5% letter as 42.
    """
    return int(math.floor(value + 0.5))


def enforce_size_limit(
    text: str,
    max_chars: int,
    policy: Literal["truncate", "reject"] = "truncate",
) -> str:
    """Apply the input-size policy to a letter before analysis.

    Args:
        text: Raw letter text.
        max_chars: Maximum accepted length in characters.
        policy: "truncate" cuts the text, "reject" raises.

    Returns:
        The text, possibly truncated to max_chars.

    Raises:
        InputTooLargeError: If the text is too long and policy is "reject".
    """
    if len(text) <= max_chars:
        return text
    if policy == "reject":
        raise InputTooLargeError(len(text), max_chars)
    return text[:max_chars]
