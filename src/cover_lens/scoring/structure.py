"""Opening, body and closing structure scoring."""

from cover_lens.models.analysis import StructureAnalysis
from cover_lens.models.lexicon import Lexicon
from cover_lens.utils.text import split_paragraphs

OPENING_POINTS = 40
DECENT_OPENING_POINTS = 25
BODY_POINTS = 30
CLOSING_POINTS = 30
PARTIAL_CLOSING_POINTS = 15

# Minimum paragraph lengths (characters) for partial credit
DECENT_OPENING_LENGTH = 50
BODY_PARAGRAPH_LENGTH = 100
CLOSING_PARAGRAPH_LENGTH = 30


def analyse_structure(text: str, lexicon: Lexicon) -> StructureAnalysis:
    """Score the letter's shape out of 100.

    Opening (40): a strong hook in the first paragraph earns full marks, a
    non-generic paragraph over 50 characters earns 25.
    Body (30): at least two paragraphs, one of them over 100 characters. A
    single paragraph never earns body points, however long it is.
    Closing (30): a call to action in the last paragraph earns full marks, a
    last paragraph over 30 characters earns 15.
    """
    paragraphs = split_paragraphs(text)
    first_paragraph = paragraphs[0] if paragraphs else ""
    last_paragraph = paragraphs[-1] if paragraphs else ""

    score = 0

    strong_opening = any(rule.matches(first_paragraph) for rule in lexicon.strong_openings)
    starts_generic = lexicon.generic_opening.matches(first_paragraph)

    if strong_opening and not starts_generic:
        score += OPENING_POINTS
        has_strong_opening = True
        opening_feedback = "Strong opening that engages the reader"
    elif not starts_generic and len(first_paragraph) > DECENT_OPENING_LENGTH:
        score += DECENT_OPENING_POINTS
        has_strong_opening = False
        opening_feedback = "Decent opening, but could be more compelling"
    else:
        has_strong_opening = False
        opening_feedback = (
            "Consider a more engaging opening that highlights your enthusiasm "
            "or a key achievement"
        )

    has_body_content = len(paragraphs) >= 2 and any(
        len(p) > BODY_PARAGRAPH_LENGTH for p in paragraphs
    )
    if has_body_content:
        score += BODY_POINTS

    has_closing_cta = any(rule.matches(last_paragraph) for rule in lexicon.strong_closings)
    if has_closing_cta:
        score += CLOSING_POINTS
        closing_feedback = "Clear call to action and availability"
    elif len(last_paragraph) > CLOSING_PARAGRAPH_LENGTH:
        score += PARTIAL_CLOSING_POINTS
        closing_feedback = "Add a clear call to action and mention your availability"
    else:
        closing_feedback = "Add a closing paragraph with a call to action"

    return StructureAnalysis(
        score=score,
        has_strong_opening=has_strong_opening,
        has_body_content=has_body_content,
        has_closing_cta=has_closing_cta,
        opening_feedback=opening_feedback,
        closing_feedback=closing_feedback,
    )
