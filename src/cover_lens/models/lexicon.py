"""Pydantic models for the scoring lexicon.

Every model here is frozen and compiles its regular expressions once, at
construction time, so a malformed lexicon fails validation before any letter
is analysed and compiled matchers are reused across analyses.
"""

import re
from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator, model_validator

from cover_lens.models.roles import AIRole
from cover_lens.utils.text import whole_word_pattern

# Inflections accepted after a verb stem ("deliver" -> "delivered", "delivering")
VERB_SUFFIX = r"(?:ed|ing|s)?"


class Severity(str, Enum):
    """How serious a red flag is."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class VerbCategory(str, Enum):
    """Action-verb buckets, in suggestion order."""

    ACHIEVEMENT = "achievement"
    TECHNICAL = "technical"
    LEADERSHIP = "leadership"
    COLLABORATION = "collaboration"


def _check_unique(values: tuple[str, ...], what: str) -> tuple[str, ...]:
    """Reject blank entries and case-insensitive duplicates."""
    seen: set[str] = set()
    for value in values:
        key = value.strip().lower()
        if not key:
            raise ValueError(f"{what} contains an empty entry")
        if key in seen:
            raise ValueError(f"{what} contains duplicate entry '{value}'")
        seen.add(key)
    return values


class KeywordCategory(BaseModel):
    """A weighted group of keywords."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    weight: float = Field(gt=0)
    keywords: tuple[str, ...]

    _matchers: tuple[re.Pattern[str], ...] = PrivateAttr(default=())

    @field_validator("keywords")
    @classmethod
    def keywords_unique(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        return _check_unique(v, "keywords")

    def model_post_init(self, __context: Any) -> None:
        self._matchers = tuple(whole_word_pattern(kw) for kw in self.keywords)

    @property
    def max_score(self) -> float:
        """Score earned when every keyword in the category is present."""
        return len(self.keywords) * self.weight

    def count_occurrences(self, text: str) -> list[tuple[str, int]]:
        """Count whole-word occurrences of each keyword, in category order."""
        return [
            (keyword, len(matcher.findall(text)))
            for keyword, matcher in zip(self.keywords, self._matchers)
        ]


class PatternRule(BaseModel):
    """A regular expression with the label/message/severity it reports."""

    model_config = ConfigDict(frozen=True)

    pattern: str
    type: str = ""
    message: str = ""
    severity: Severity = Severity.LOW
    ignore_case: bool = True

    _regex: re.Pattern[str] | None = PrivateAttr(default=None)

    @field_validator("pattern")
    @classmethod
    def pattern_compiles(cls, v: str) -> str:
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f"invalid regular expression {v!r}: {e}") from e
        return v

    def model_post_init(self, __context: Any) -> None:
        self._regex = re.compile(self.pattern, re.IGNORECASE if self.ignore_case else 0)

    def matches(self, text: str) -> bool:
        """Return True if the pattern is found anywhere in text."""
        return self._regex.search(text) is not None


class ActionVerbSet(BaseModel):
    """Achievement-oriented verbs grouped into four buckets."""

    model_config = ConfigDict(frozen=True)

    achievement: tuple[str, ...]
    technical: tuple[str, ...]
    leadership: tuple[str, ...]
    collaboration: tuple[str, ...]

    _matchers: Mapping[str, re.Pattern[str]] = PrivateAttr(
        default_factory=lambda: MappingProxyType({})
    )
    _categories: Mapping[str, VerbCategory] = PrivateAttr(
        default_factory=lambda: MappingProxyType({})
    )

    @model_validator(mode="after")
    def verbs_in_one_bucket(self) -> "ActionVerbSet":
        owner: dict[str, VerbCategory] = {}
        for category in VerbCategory:
            verbs = _check_unique(self.bucket(category), f"{category.value} verbs")
            for verb in verbs:
                key = verb.lower()
                if key in owner:
                    raise ValueError(
                        f"verb '{verb}' appears in both {owner[key].value} and {category.value}"
                    )
                owner[key] = category
        return self

    def model_post_init(self, __context: Any) -> None:
        matchers: dict[str, re.Pattern[str]] = {}
        categories: dict[str, VerbCategory] = {}
        for category in VerbCategory:
            for verb in self.bucket(category):
                matchers[verb] = whole_word_pattern(verb, VERB_SUFFIX)
                categories[verb] = category
        self._matchers = MappingProxyType(matchers)
        self._categories = MappingProxyType(categories)

    def bucket(self, category: VerbCategory) -> tuple[str, ...]:
        """Verbs belonging to one category."""
        return getattr(self, category.value)

    def all_verbs(self) -> list[str]:
        """All verbs, achievement first, collaboration last."""
        return list(self._matchers)

    def category_of(self, verb: str) -> VerbCategory:
        """Bucket a verb belongs to."""
        return self._categories[verb]

    def is_used(self, verb: str, text: str) -> bool:
        """Return True if the verb (or an inflection of it) appears in text."""
        return self._matchers[verb].search(text) is not None


class Lexicon(BaseModel):
    """Everything the analysers know about good and bad cover letters.

    Built once per process and shared read-only between analyses.
    """

    model_config = ConfigDict(frozen=True)

    keyword_categories: tuple[KeywordCategory, ...]
    role_keywords: Mapping[AIRole, tuple[str, ...]] = Field(
        default_factory=dict, validate_default=True
    )
    role_category_weight: float = Field(default=2.0, gt=0)
    action_verbs: ActionVerbSet
    generic_phrases: tuple[str, ...] = ()
    weak_language: tuple[str, ...] = ()
    strong_openings: tuple[PatternRule, ...] = ()
    generic_opening: PatternRule
    strong_closings: tuple[PatternRule, ...] = ()
    red_flags: tuple[PatternRule, ...] = ()
    company_reference: PatternRule
    specificity: PatternRule

    _role_categories: Mapping[AIRole, KeywordCategory] = PrivateAttr(
        default_factory=lambda: MappingProxyType({})
    )

    @field_validator("keyword_categories")
    @classmethod
    def category_names_unique(
        cls, v: tuple[KeywordCategory, ...]
    ) -> tuple[KeywordCategory, ...]:
        _check_unique(tuple(c.name for c in v), "keyword category names")
        return v

    @field_validator("role_keywords")
    @classmethod
    def role_keywords_unique(
        cls, v: Mapping[AIRole, tuple[str, ...]]
    ) -> Mapping[AIRole, tuple[str, ...]]:
        for role, keywords in v.items():
            _check_unique(keywords, f"{role.value} keywords")
        return MappingProxyType(dict(v))

    @field_validator("generic_phrases", "weak_language")
    @classmethod
    def phrases_lowercase(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        # Phrases are matched as substrings of the lower-cased letter
        return tuple(p.lower() for p in _check_unique(v, "phrases"))

    def model_post_init(self, __context: Any) -> None:
        self._role_categories = MappingProxyType(
            {
                role: KeywordCategory(
                    name=f"{role.value} Specific",
                    weight=self.role_category_weight,
                    keywords=keywords,
                )
                for role, keywords in self.role_keywords.items()
            }
        )

    def categories_for(self, role: AIRole | None = None) -> list[KeywordCategory]:
        """General categories plus the role-specific one, if the role has a list."""
        categories = list(self.keyword_categories)
        if role is not None and role in self._role_categories:
            categories.append(self._role_categories[role])
        return categories
