"""Red-flag detection. Flags are diagnostic and do not affect the score."""

from cover_lens.models.analysis import CoverLetterStats, RedFlag
from cover_lens.models.lexicon import Lexicon, Severity

MIN_WORDS = 150
MAX_WORDS = 500


def detect_red_flags(text: str, stats: CoverLetterStats, lexicon: Lexicon) -> list[RedFlag]:
    """Run every red-flag rule over the whole letter, then the length checks.

    Args:
        text: Trimmed letter text.
        stats: Precomputed statistics for the same text.
        lexicon: Source of the red-flag rules.

    Returns:
        One RedFlag per matching rule (lexicon order), followed by any
        too_short/too_long and no_paragraphs flags.
    """
    red_flags = [
        RedFlag(type=rule.type, message=rule.message, severity=rule.severity)
        for rule in lexicon.red_flags
        if rule.matches(text)
    ]

    if stats.word_count < MIN_WORDS:
        red_flags.append(
            RedFlag(
                type="too_short",
                message="Cover letter is too short - aim for 250-400 words",
                severity=Severity.HIGH,
            )
        )
    elif stats.word_count > MAX_WORDS:
        red_flags.append(
            RedFlag(
                type="too_long",
                message="Cover letter is too long - consider trimming to 250-400 words",
                severity=Severity.MEDIUM,
            )
        )

    # An empty letter has no paragraph breaks either
    if stats.paragraph_count <= 1:
        red_flags.append(
            RedFlag(
                type="no_paragraphs",
                message="Break your letter into 3-5 paragraphs for better readability",
                severity=Severity.HIGH,
            )
        )

    return red_flags
