"""Action verb variety scoring."""

from cover_lens.models.analysis import ActionVerbAnalysis
from cover_lens.models.lexicon import Lexicon, VerbCategory

# (minimum distinct verbs, score), checked in order
VERB_COUNT_BANDS: list[tuple[int, int]] = [
    (8, 100),
    (6, 80),
    (4, 60),
    (2, 40),
    (1, 20),
]
CATEGORY_VARIETY_THRESHOLD = 3
CATEGORY_VARIETY_BONUS = 10
SUGGESTIONS_PER_CATEGORY = 2
MAX_SUGGESTIONS = 6


def analyse_action_verbs(text: str, lexicon: Lexicon) -> ActionVerbAnalysis:
    """Score the number of distinct action verbs used.

    Verbs match with an optional -ed/-ing/-s suffix. Drawing verbs from at
    least three of the four buckets adds a 10-point bonus (capped at 100).
    Suggestions name verbs from the buckets the letter does not use.
    """
    verbs = lexicon.action_verbs
    found_verbs = [verb for verb in verbs.all_verbs() if verbs.is_used(verb, text)]

    score = next(
        (points for minimum, points in VERB_COUNT_BANDS if len(found_verbs) >= minimum), 0
    )

    categories_used = {verbs.category_of(verb) for verb in found_verbs}
    if len(categories_used) >= CATEGORY_VARIETY_THRESHOLD:
        score = min(100, score + CATEGORY_VARIETY_BONUS)

    suggested_verbs: list[str] = []
    if VerbCategory.ACHIEVEMENT not in categories_used:
        suggested_verbs.extend(verbs.achievement[:SUGGESTIONS_PER_CATEGORY])
    if VerbCategory.TECHNICAL not in categories_used:
        suggested_verbs.extend(verbs.technical[:SUGGESTIONS_PER_CATEGORY])
    if (
        VerbCategory.LEADERSHIP not in categories_used
        and VerbCategory.COLLABORATION not in categories_used
    ):
        suggested_verbs.extend(verbs.collaboration[:SUGGESTIONS_PER_CATEGORY])

    return ActionVerbAnalysis(
        score=score,
        found_verbs=found_verbs,
        suggested_verbs=suggested_verbs[:MAX_SUGGESTIONS],
    )
