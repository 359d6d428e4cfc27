"""Result models returned by the analysers."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from cover_lens.models.lexicon import Severity


class _Result(BaseModel):
    model_config = ConfigDict(frozen=True)


class CoverLetterStats(_Result):
    """Basic counts derived from the trimmed letter."""

    word_count: int = Field(ge=0)
    character_count: int = Field(ge=0)
    paragraph_count: int = Field(ge=0)
    sentence_count: int = Field(ge=0)


class KeywordMatch(_Result):
    """A lexicon keyword found in the letter."""

    keyword: str
    count: int = Field(ge=1)
    category: str


class CategoryResult(_Result):
    """Keyword coverage for one category (raw weighted sums, not normalised)."""

    name: str
    found_keywords: list[KeywordMatch] = Field(default_factory=list)
    missing_keywords: list[str] = Field(default_factory=list)
    score: float = Field(ge=0)
    max_score: float = Field(ge=0)


class StructureAnalysis(_Result):
    """Opening / body / closing shape."""

    score: int = Field(ge=0, le=100)
    max_score: int = 100
    has_strong_opening: bool
    has_body_content: bool
    has_closing_cta: bool
    opening_feedback: str
    closing_feedback: str


class KeywordAnalysis(_Result):
    """Technical and role vocabulary coverage."""

    score: int = Field(ge=0, le=100)
    max_score: int = 100
    found_keywords: list[KeywordMatch] = Field(default_factory=list)
    missing_keywords: list[str] = Field(default_factory=list)
    category_breakdown: list[CategoryResult] = Field(default_factory=list)


class PersonalisationAnalysis(_Result):
    """How tailored the letter is to the company and reader."""

    score: int = Field(ge=0, le=100)
    max_score: int = 100
    company_mentions: int = Field(ge=0)
    role_mentions: int = Field(ge=0)
    generic_phrases: list[str] = Field(default_factory=list)
    personal_touches: list[str] = Field(default_factory=list)


class ActionVerbAnalysis(_Result):
    """Variety of achievement-oriented verbs."""

    score: int = Field(ge=0, le=100)
    max_score: int = 100
    found_verbs: list[str] = Field(default_factory=list)
    suggested_verbs: list[str] = Field(default_factory=list)


class ReadabilityAnalysis(_Result):
    """Length and paragraph/sentence counts against target ranges."""

    score: int = Field(ge=0, le=100)
    max_score: int = 100
    word_count: int = Field(ge=0)
    paragraph_count: int = Field(ge=0)
    sentence_count: int = Field(ge=0)
    is_optimal_length: bool
    length_feedback: str


class RedFlag(_Result):
    """A diagnostic issue, independent of the weighted score."""

    type: str
    message: str
    severity: Severity


class ScoreTone(str, Enum):
    """Presentation tone for an overall percentage."""

    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"
    DANGER = "danger"


class ScoreLabel(_Result):
    """Human-readable band for an overall percentage."""

    label: str
    tone: ScoreTone


class CoverLetterAnalysis(_Result):
    """Complete assessment of one cover letter."""

    overall_score: float = Field(ge=0, le=1)
    overall_percentage: int = Field(ge=0, le=100)
    label: ScoreLabel
    structure: StructureAnalysis
    keywords: KeywordAnalysis
    personalisation: PersonalisationAnalysis
    action_verbs: ActionVerbAnalysis
    readability: ReadabilityAnalysis
    red_flags: list[RedFlag] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list, max_length=5)
    weak_language: list[str] = Field(default_factory=list)
    stats: CoverLetterStats
