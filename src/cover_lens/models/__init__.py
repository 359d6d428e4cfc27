"""Data models for Cover Lens."""

from cover_lens.models.analysis import (
    ActionVerbAnalysis,
    CategoryResult,
    CoverLetterAnalysis,
    CoverLetterStats,
    KeywordAnalysis,
    KeywordMatch,
    PersonalisationAnalysis,
    ReadabilityAnalysis,
    RedFlag,
    ScoreLabel,
    ScoreTone,
    StructureAnalysis,
)
from cover_lens.models.lexicon import (
    ActionVerbSet,
    KeywordCategory,
    Lexicon,
    PatternRule,
    Severity,
    VerbCategory,
)
from cover_lens.models.roles import AIRole, parse_role

__all__ = [
    "AIRole",
    "ActionVerbAnalysis",
    "ActionVerbSet",
    "CategoryResult",
    "CoverLetterAnalysis",
    "CoverLetterStats",
    "KeywordAnalysis",
    "KeywordCategory",
    "KeywordMatch",
    "Lexicon",
    "PatternRule",
    "PersonalisationAnalysis",
    "ReadabilityAnalysis",
    "RedFlag",
    "ScoreLabel",
    "ScoreTone",
    "Severity",
    "StructureAnalysis",
    "VerbCategory",
    "parse_role",
]
