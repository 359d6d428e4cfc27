"""Ordered, capped list of actionable suggestions."""

from cover_lens.models.analysis import (
    ActionVerbAnalysis,
    KeywordAnalysis,
    PersonalisationAnalysis,
    ReadabilityAnalysis,
    RedFlag,
    StructureAnalysis,
)
from cover_lens.models.lexicon import Severity

MAX_RECOMMENDATIONS = 5
MAX_RED_FLAG_RECOMMENDATIONS = 2
KEYWORD_SCORE_THRESHOLD = 50
MIN_ACTION_VERBS = 4
EXAMPLES_PER_RECOMMENDATION = 3


def generate_recommendations(
    structure: StructureAnalysis,
    keywords: KeywordAnalysis,
    personalisation: PersonalisationAnalysis,
    action_verbs: ActionVerbAnalysis,
    readability: ReadabilityAnalysis,
    red_flags: list[RedFlag],
    company_name: str | None = None,
) -> list[str]:
    """Build suggestions in fixed dimension order and keep the first five.

    Order: opening, closing, keywords, company name, generic phrases, action
    verbs, length, then up to two high-severity red flags. The list is
    truncated, never re-sorted.
    """
    recommendations: list[str] = []

    if not structure.has_strong_opening:
        recommendations.append(
            "Start with a compelling hook - mention a specific achievement "
            "or your enthusiasm for the company"
        )
    if not structure.has_closing_cta:
        recommendations.append(
            "End with a clear call to action and mention your availability for an interview"
        )

    if keywords.score < KEYWORD_SCORE_THRESHOLD and keywords.missing_keywords:
        examples = ", ".join(keywords.missing_keywords[:EXAMPLES_PER_RECOMMENDATION])
        recommendations.append(
            f"Add more technical keywords relevant to the role, such as: {examples}"
        )

    if personalisation.company_mentions == 0 and not company_name:
        recommendations.append(
            "Mention the company by name to show you've tailored this letter specifically for them"
        )
    if personalisation.generic_phrases:
        recommendations.append(
            "Replace generic phrases with specific, personalised content "
            "about why you want this role"
        )

    if len(action_verbs.found_verbs) < MIN_ACTION_VERBS:
        examples = ", ".join(action_verbs.suggested_verbs[:EXAMPLES_PER_RECOMMENDATION])
        recommendations.append(f"Use more action verbs to describe your achievements: {examples}")

    if not readability.is_optimal_length:
        recommendations.append(readability.length_feedback)

    high_flags = [flag for flag in red_flags if flag.severity == Severity.HIGH]
    recommendations.extend(flag.message for flag in high_flags[:MAX_RED_FLAG_RECOMMENDATIONS])

    return recommendations[:MAX_RECOMMENDATIONS]
