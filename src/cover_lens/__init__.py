"""Cover Lens - rule-based scoring for AI/ML cover letters."""

from cover_lens.analyser import CoverLetterAnalyser, analyse_cover_letter
from cover_lens.models import AIRole, CoverLetterAnalysis

__version__ = "0.1.0"

__all__ = [
    "AIRole",
    "CoverLetterAnalyser",
    "CoverLetterAnalysis",
    "__version__",
    "analyse_cover_letter",
]
