"""Report formatting for analysis results."""

from cover_lens.output.markdown import format_analysis, save_markdown

__all__ = ["format_analysis", "save_markdown"]
