"""Personalisation scoring: company, role, reader focus and specifics."""

import re

from cover_lens.models.analysis import PersonalisationAnalysis
from cover_lens.models.lexicon import Lexicon
from cover_lens.models.roles import AIRole
from cover_lens.utils.text import whole_word_pattern

MAX_SCORE = 100
GENERIC_PHRASE_PENALTY = 10

READER_WORDS = re.compile(r"\b(your|you)\b", re.IGNORECASE)


def analyse_personalisation(
    text: str,
    lexicon: Lexicon,
    company_name: str | None = None,
    role: AIRole | None = None,
) -> PersonalisationAnalysis:
    """Score how tailored the letter is, clamped to [0, 100].

    Bonuses: company name (40, or 20 for "your team"-style references when no
    name is given), role title (20), "you/your" language (20) and concrete
    numbers (20). Every blacklisted generic phrase costs 10 points.
    """
    score = 0
    personal_touches: list[str] = []
    generic_phrases: list[str] = []

    company_mentions = 0
    if company_name:
        company_mentions = len(whole_word_pattern(company_name).findall(text))
        if company_mentions >= 2:
            score += 40
            personal_touches.append(f"Company name mentioned {company_mentions} times")
        elif company_mentions == 1:
            score += 25
            personal_touches.append("Company name mentioned once")
    elif lexicon.company_reference.matches(text):
        score += 20
        personal_touches.append('References to "your company/team"')

    role_mentions = 0
    if role is not None:
        role_mentions = len(whole_word_pattern(role.value).findall(text))
        if role_mentions > 0:
            score += 20
            personal_touches.append("Role title mentioned")

    reader_count = len(READER_WORDS.findall(text))
    if reader_count >= 5:
        score += 20
        personal_touches.append('Strong "you/your" language addressing the reader')
    elif reader_count >= 2:
        score += 10
        personal_touches.append("Some direct addressing of the reader")

    if lexicon.specificity.matches(text):
        score += 20
        personal_touches.append("Includes specific numbers or metrics")

    lower_text = text.lower()
    for phrase in lexicon.generic_phrases:
        if phrase in lower_text:
            generic_phrases.append(phrase)
            score -= GENERIC_PHRASE_PENALTY

    score = max(0, min(score, MAX_SCORE))

    return PersonalisationAnalysis(
        score=score,
        company_mentions=company_mentions,
        role_mentions=role_mentions,
        generic_phrases=generic_phrases,
        personal_touches=personal_touches,
    )
