"""Weighted composite score and score labels."""

import math

from cover_lens.exceptions import ConfigurationError
from cover_lens.models.analysis import (
    ActionVerbAnalysis,
    KeywordAnalysis,
    PersonalisationAnalysis,
    ReadabilityAnalysis,
    ScoreLabel,
    ScoreTone,
    StructureAnalysis,
)

# Dimension weights for the overall score; must sum to 1.0
DIMENSION_WEIGHTS: dict[str, float] = {
    "structure": 0.20,
    "keywords": 0.25,
    "personalisation": 0.20,
    "action_verbs": 0.15,
    "readability": 0.20,
}

# (minimum percentage, label, tone), checked in order
SCORE_BANDS: list[tuple[int, str, ScoreTone]] = [
    (80, "Excellent", ScoreTone.SUCCESS),
    (60, "Good", ScoreTone.INFO),
    (40, "Fair", ScoreTone.WARNING),
]
LOWEST_BAND = ("Needs Improvement", ScoreTone.DANGER)


def validate_weights(weights: dict[str, float]) -> None:
    """Check that every dimension weight is positive and the weights sum to 1.0.

    Raises:
        ConfigurationError: If the weights are unusable.
    """
    expected = {"structure", "keywords", "personalisation", "action_verbs", "readability"}
    if set(weights) != expected:
        raise ConfigurationError(
            f"Dimension weights must cover exactly {sorted(expected)}, got {sorted(weights)}"
        )
    for name, weight in weights.items():
        if weight <= 0:
            raise ConfigurationError(f"Dimension weight for {name} must be positive, got {weight}")
    total = sum(weights.values())
    if not math.isclose(total, 1.0):
        raise ConfigurationError(f"Dimension weights must sum to 1.0, got {total}")


validate_weights(DIMENSION_WEIGHTS)


def calculate_overall_score(
    structure: StructureAnalysis,
    keywords: KeywordAnalysis,
    personalisation: PersonalisationAnalysis,
    action_verbs: ActionVerbAnalysis,
    readability: ReadabilityAnalysis,
) -> float:
    """Combine normalised dimension scores into a 0-1 composite."""
    total = (
        DIMENSION_WEIGHTS["structure"] * structure.score / structure.max_score
        + DIMENSION_WEIGHTS["keywords"] * keywords.score / keywords.max_score
        + DIMENSION_WEIGHTS["personalisation"] * personalisation.score / personalisation.max_score
        + DIMENSION_WEIGHTS["action_verbs"] * action_verbs.score / action_verbs.max_score
        + DIMENSION_WEIGHTS["readability"] * readability.score / readability.max_score
    )
    # Float summation can land a hair above 1.0 for a perfect letter
    return min(1.0, max(0.0, total))


def get_score_label(percentage: int) -> ScoreLabel:
    """Map an overall percentage to its label and tone."""
    for minimum, label, tone in SCORE_BANDS:
        if percentage >= minimum:
            return ScoreLabel(label=label, tone=tone)
    label, tone = LOWEST_BAND
    return ScoreLabel(label=label, tone=tone)
