"""Technical and role-specific keyword coverage."""

from cover_lens.models.analysis import CategoryResult, KeywordAnalysis, KeywordMatch
from cover_lens.models.lexicon import Lexicon
from cover_lens.models.roles import AIRole
from cover_lens.utils.text import round_half_up

# Missing keywords considered per category, then kept overall
MISSING_PER_CATEGORY = 5
MAX_MISSING_KEYWORDS = 8


def analyse_keywords(
    text: str,
    lexicon: Lexicon,
    role: AIRole | None = None,
) -> KeywordAnalysis:
    """Score vocabulary coverage out of 100.

    Each keyword present at least once earns its category weight; repeat
    occurrences are counted for reporting but never weighted twice. The score
    is the earned weight as a share of the weight available across all active
    categories (general categories plus the role-specific one).

    Args:
        text: Trimmed letter text.
        lexicon: Keyword tables.
        role: Optional target role adding a "<Role> Specific" category.

    Returns:
        KeywordAnalysis with per-category breakdown and top missing keywords.
    """
    categories = lexicon.categories_for(role)

    found_keywords: list[KeywordMatch] = []
    breakdown: list[CategoryResult] = []
    total_score = 0.0
    total_max_score = 0.0

    for category in categories:
        category_found: list[KeywordMatch] = []
        category_missing: list[str] = []
        category_score = 0.0

        for keyword, count in category.count_occurrences(text):
            if count > 0:
                category_found.append(
                    KeywordMatch(keyword=keyword, count=count, category=category.name)
                )
                category_score += category.weight
            else:
                category_missing.append(keyword)

        found_keywords.extend(category_found)
        total_score += category_score
        total_max_score += category.max_score

        breakdown.append(
            CategoryResult(
                name=category.name,
                found_keywords=category_found,
                missing_keywords=category_missing,
                score=category_score,
                max_score=category.max_score,
            )
        )

    # Same keyword can sit in a general and the role category; first one wins
    unique_found: list[KeywordMatch] = []
    seen: set[str] = set()
    for match in found_keywords:
        key = match.keyword.lower()
        if key not in seen:
            seen.add(key)
            unique_found.append(match)

    # First few missing per category, then highest weight first (stable sort)
    candidates: list[tuple[str, float]] = []
    for category, result in zip(categories, breakdown):
        for keyword in result.missing_keywords[:MISSING_PER_CATEGORY]:
            candidates.append((keyword, category.weight))
    candidates.sort(key=lambda c: c[1], reverse=True)
    top_missing = [keyword for keyword, _ in candidates[:MAX_MISSING_KEYWORDS]]

    score = round_half_up(100 * total_score / total_max_score) if total_max_score > 0 else 0

    return KeywordAnalysis(
        score=score,
        found_keywords=unique_found,
        missing_keywords=top_missing,
        category_breakdown=breakdown,
    )
