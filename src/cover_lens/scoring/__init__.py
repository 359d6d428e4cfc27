"""Rule-based cover letter scoring.

Each analyser is a pure function of the trimmed letter text (or its stats)
and the shared, read-only Lexicon:

- Structure: opening hook, body content, closing call to action
- Keywords: weighted AI/ML and role-specific vocabulary coverage
- Personalisation: company/role mentions, reader focus, concrete metrics
- Action verbs: variety of achievement-oriented verbs
- Readability: word, paragraph and sentence counts

Red flags and recommendations are diagnostic and do not affect the score.
"""

from cover_lens.scoring.action_verbs import analyse_action_verbs
from cover_lens.scoring.aggregate import (
    DIMENSION_WEIGHTS,
    calculate_overall_score,
    get_score_label,
    validate_weights,
)
from cover_lens.scoring.keywords import analyse_keywords
from cover_lens.scoring.personalisation import analyse_personalisation
from cover_lens.scoring.readability import analyse_readability
from cover_lens.scoring.recommendations import MAX_RECOMMENDATIONS, generate_recommendations
from cover_lens.scoring.red_flags import detect_red_flags
from cover_lens.scoring.stats import calculate_stats
from cover_lens.scoring.structure import analyse_structure

__all__ = [
    "DIMENSION_WEIGHTS",
    "MAX_RECOMMENDATIONS",
    "analyse_action_verbs",
    "analyse_keywords",
    "analyse_personalisation",
    "analyse_readability",
    "analyse_structure",
    "calculate_overall_score",
    "calculate_stats",
    "detect_red_flags",
    "generate_recommendations",
    "get_score_label",
    "validate_weights",
]
