"""Markdown output formatting."""

from pathlib import Path

from cover_lens.models.analysis import CoverLetterAnalysis

DIMENSION_TITLES = {
    "structure": "Structure",
    "keywords": "Keywords",
    "personalisation": "Personalisation",
    "action_verbs": "Action Verbs",
    "readability": "Readability",
}


def save_markdown(content: str, output_path: str | Path) -> Path:
    """Save content to a markdown file.

    Args:
        content: Markdown content to save.
        output_path: Path to save the file.

    Returns:
        Path to the saved file.
    """
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def format_analysis(analysis: CoverLetterAnalysis) -> str:
    """Format a cover letter analysis as a Markdown report.

    Args:
        analysis: Result of CoverLetterAnalyser.analyse.

    Returns:
        Markdown string with score, breakdown, red flags and recommendations.
    """
    output = []
    output.append(
        f"## Cover Letter Analysis (Score: {analysis.overall_percentage}% - {analysis.label.label})"
    )
    output.append("")

    output.append("### Score Breakdown")
    for field, title in DIMENSION_TITLES.items():
        result = getattr(analysis, field)
        output.append(f"- **{title}:** {result.score}/{result.max_score}")
    output.append("")

    stats = analysis.stats
    output.append("### Statistics")
    output.append(f"- **Words:** {stats.word_count}")
    output.append(f"- **Characters:** {stats.character_count}")
    output.append(f"- **Paragraphs:** {stats.paragraph_count}")
    output.append(f"- **Sentences:** {stats.sentence_count}")
    output.append("")

    structure = analysis.structure
    output.append("### Structure")
    output.append(f"- **Opening:** {structure.opening_feedback}")
    output.append(f"- **Closing:** {structure.closing_feedback}")
    output.append(f"- **Length:** {analysis.readability.length_feedback}")
    output.append("")

    keywords = analysis.keywords
    output.append("### Keywords Found")
    if keywords.found_keywords:
        for match in keywords.found_keywords:
            output.append(f"- {match.keyword} ({match.count}x, {match.category})")
    else:
        output.append("- None")
    output.append("")

    if keywords.missing_keywords:
        output.append("### Keywords to Consider")
        for keyword in keywords.missing_keywords:
            output.append(f"- {keyword}")
        output.append("")

    verbs = analysis.action_verbs
    output.append("### Action Verbs")
    output.append(f"- **Used:** {', '.join(verbs.found_verbs) or 'None'}")
    if verbs.suggested_verbs:
        output.append(f"- **Try:** {', '.join(verbs.suggested_verbs)}")
    output.append("")

    personalisation = analysis.personalisation
    if personalisation.personal_touches or personalisation.generic_phrases:
        output.append("### Personalisation")
        for touch in personalisation.personal_touches:
            output.append(f"- {touch}")
        for phrase in personalisation.generic_phrases:
            output.append(f'- Generic phrase: "{phrase}"')
        output.append("")

    if analysis.red_flags:
        output.append("### Red Flags")
        for flag in analysis.red_flags:
            output.append(f"- **[{flag.severity.value.upper()}]** {flag.message}")
        output.append("")

    if analysis.weak_language:
        output.append("### Weak Language")
        for phrase in analysis.weak_language:
            output.append(f'- "{phrase}"')
        output.append("")

    output.append("### Recommendations")
    if analysis.recommendations:
        for i, recommendation in enumerate(analysis.recommendations, 1):
            output.append(f"{i}. {recommendation}")
    else:
        output.append("- No changes needed")

    return "\n".join(output)
