"""Tests for red-flag detection."""

from cover_lens.models.lexicon import Lexicon, Severity
from cover_lens.scoring import calculate_stats, detect_red_flags


def flag_types(text: str, lexicon: Lexicon) -> list[str]:
    return [flag.type for flag in detect_red_flags(text, calculate_stats(text), lexicon)]


def pattern_flag_types(text: str, lexicon: Lexicon) -> list[str]:
    """Flag types excluding the length and paragraph checks."""
    return [
        t for t in flag_types(text, lexicon) if t not in {"too_short", "too_long", "no_paragraphs"}
    ]


class TestDetectRedFlags:
    """Tests for detect_red_flags."""

    def test_generic_opening_only_at_start(self, lexicon: Lexicon) -> None:
        """Test that the generic opening rule is anchored to the start of the letter."""
        assert pattern_flag_types("I am writing to apply for the role.", lexicon) == [
            "generic_opening"
        ]
        assert pattern_flag_types("Today I am writing to apply for the role.", lexicon) == []

    def test_addressee_flags(self, lexicon: Lexicon) -> None:
        """Test both addressee rules and their severities."""
        text = "To whom it may concern, dear sir or madam."
        flags = detect_red_flags(text, calculate_stats(text), lexicon)

        assert [(f.type, f.severity) for f in flags[:2]] == [
            ("no_addressee", Severity.HIGH),
            ("no_addressee", Severity.MEDIUM),
        ]

    def test_salary_mention(self, lexicon: Lexicon) -> None:
        """Test salary language is flagged."""
        assert pattern_flag_types("My salary expectations are flexible.", lexicon) == [
            "salary_mention"
        ]

    def test_us_spelling(self, lexicon: Lexicon) -> None:
        """Test US spellings are flagged, with the "centered on" exception."""
        assert pattern_flag_types("I love to optimize pipelines.", lexicon) == ["us_spelling"]
        assert pattern_flag_types("My work centered on search.", lexicon) == []

    def test_desperation_and_negative_framing(self, lexicon: Lexicon) -> None:
        """Test desperate and negative language."""
        text = "I was laid off and I am desperate. I lack experience in Spark."
        assert pattern_flag_types(text, lexicon) == [
            "desperation",
            "negative_framing",
            "negative_self",
        ]

    def test_each_rule_reported_once(self, lexicon: Lexicon) -> None:
        """Test that a rule matching several times produces one flag."""
        text = "Salary matters. Compensation matters. Remuneration matters."
        assert pattern_flag_types(text, lexicon) == ["salary_mention"]

    def test_too_short(self, lexicon: Lexicon, letter_factory) -> None:
        """Test the high-severity short-letter flag."""
        text = letter_factory([[10] * 3, [10] * 3, [10] * 3, [10] * 3, [10] * 2])
        flags = detect_red_flags(text, calculate_stats(text), lexicon)

        assert [f.type for f in flags] == ["too_short"]
        assert flags[0].severity is Severity.HIGH

    def test_too_long(self, lexicon: Lexicon, letter_factory) -> None:
        """Test the medium-severity long-letter flag."""
        text = letter_factory([[20] * 6] * 5)
        flags = detect_red_flags(text, calculate_stats(text), lexicon)

        assert [f.type for f in flags] == ["too_long"]
        assert flags[0].severity is Severity.MEDIUM

    def test_length_boundaries(self, lexicon: Lexicon, letter_factory) -> None:
        """Test that 150 and 500 words raise no length flag."""
        assert flag_types(letter_factory([[15] * 5, [15] * 5]), lexicon) == []
        assert flag_types(letter_factory([[25] * 10, [25] * 10]), lexicon) == []

    def test_single_paragraph(self, lexicon: Lexicon, letter_factory) -> None:
        """Test that one paragraph is flagged."""
        text = letter_factory([[20] * 10])
        assert flag_types(text, lexicon) == ["no_paragraphs"]

    def test_empty_text(self, lexicon: Lexicon) -> None:
        """Test that empty text is both too short and unstructured."""
        assert flag_types("", lexicon) == ["too_short", "no_paragraphs"]

    def test_clean_letter(self, lexicon: Lexicon, strong_letter: str) -> None:
        """Test that a well-formed letter has no flags."""
        assert flag_types(strong_letter.strip(), lexicon) == []
