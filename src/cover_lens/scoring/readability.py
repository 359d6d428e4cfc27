"""Length and paragraph/sentence count scoring."""

from cover_lens.models.analysis import CoverLetterStats, ReadabilityAnalysis

OPTIMAL_WORDS = (250, 400)
NEAR_WORDS = (200, 450)
ACCEPTABLE_WORDS = (150, 500)


def _length_points(word_count: int) -> tuple[int, str]:
    """Points (out of 50) and feedback for the word count."""
    if OPTIMAL_WORDS[0] <= word_count <= OPTIMAL_WORDS[1]:
        return 50, "Optimal length for a cover letter"
    if NEAR_WORDS[0] <= word_count <= NEAR_WORDS[1]:
        if word_count < OPTIMAL_WORDS[0]:
            return 35, "Slightly short - aim for 250-400 words"
        return 35, "Slightly long - aim for 250-400 words"
    if ACCEPTABLE_WORDS[0] <= word_count <= ACCEPTABLE_WORDS[1]:
        if word_count < NEAR_WORDS[0]:
            return 20, "Cover letter is too short - add more substance"
        return 20, "Cover letter is too long - consider trimming"
    if word_count < ACCEPTABLE_WORDS[0]:
        return 5, "Cover letter is significantly too short"
    return 10, "Cover letter is too long - readers may lose interest"


def _paragraph_points(paragraph_count: int) -> int:
    if 3 <= paragraph_count <= 5:
        return 30
    if 2 <= paragraph_count <= 6:
        return 20
    if paragraph_count == 1:
        return 5
    return 10


def _sentence_points(sentence_count: int) -> int:
    if 8 <= sentence_count <= 20:
        return 20
    if 5 <= sentence_count <= 25:
        return 10
    return 5


def analyse_readability(stats: CoverLetterStats) -> ReadabilityAnalysis:
    """Score length (50), paragraph count (30) and sentence count (20)."""
    length_points, length_feedback = _length_points(stats.word_count)
    score = (
        length_points
        + _paragraph_points(stats.paragraph_count)
        + _sentence_points(stats.sentence_count)
    )

    return ReadabilityAnalysis(
        score=score,
        word_count=stats.word_count,
        paragraph_count=stats.paragraph_count,
        sentence_count=stats.sentence_count,
        is_optimal_length=length_points == 50,
        length_feedback=length_feedback,
    )
