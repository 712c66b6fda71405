"""Static bias-pattern tables.

Each bias category is declared once as a ``PatternCategory`` record holding its
severity, score weight, word-boundary patterns and remediation behaviour. The
detector iterates over ``BIAS_PATTERN_CATEGORIES`` and never special-cases a
category, so adding one is a table change only.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Pattern, Tuple

from inclusive_hiring.analysis.models import BiasCategory, Severity


def _word_patterns(*alternations: str) -> Tuple[Pattern[str], ...]:
    """Compile case-insensitive whole-word patterns."""
    return tuple(
        re.compile(rf"\b({alternation})\b", re.IGNORECASE)
        for alternation in alternations
    )


@dataclass(frozen=True)
class PatternCategory(ABC):
    """A group of patterns sharing one discrimination concern."""
    category: BiasCategory
    severity: Severity
    weight: int
    patterns: Tuple[Pattern[str], ...]
    general_suggestion: Optional[str] = None

    def find_matches(self, text: str) -> Iterator[str]:
        """Yield every non-overlapping match, pattern by pattern, in text order."""
        for pattern in self.patterns:
            for match in pattern.finditer(text):
                yield match.group(0)

    @abstractmethod
    def replacement_for(self, matched_text: str) -> str:
        """Inclusive alternative offered for one matched phrase."""


@dataclass(frozen=True)
class SynonymPatternCategory(PatternCategory):
    """Category whose matches are replaced word by word from a synonym table."""
    alternatives: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    fallback: str = "professional"

    def replacement_for(self, matched_text: str) -> str:
        return self.alternatives.get(matched_text.lower(), self.fallback)


@dataclass(frozen=True)
class RemediationPatternCategory(PatternCategory):
    """Category whose matches all share one remediation sentence."""
    remediation: str = ""

    def replacement_for(self, matched_text: str) -> str:
        return self.remediation


GENDER_PATTERNS = SynonymPatternCategory(
    category=BiasCategory.GENDER,
    severity=Severity.MEDIUM,
    weight=15,
    patterns=_word_patterns(
        r"guys?|dudes?|bros?|ninjas?|rockstars?|gurus?",
        r"aggressive|competitive|dominant",
        r"nurturing|supportive|collaborative",
    ),
    general_suggestion="Review language for gender-coded words that may deter candidates",
    alternatives=MappingProxyType({
        "guys": "team members",
        "ninja": "expert",
        "rockstar": "talented professional",
        "guru": "specialist",
        "aggressive": "results-driven",
        "competitive": "goal-oriented",
    }),
    fallback="professional",
)

AGE_PATTERNS = SynonymPatternCategory(
    category=BiasCategory.AGE,
    severity=Severity.HIGH,
    weight=25,
    patterns=_word_patterns(
        r"young|youthful|energetic|fresh|recent graduate",
        r"digital native|millennial|gen z",
        r"experienced|mature|seasoned|senior",
    ),
    general_suggestion="Avoid age-related terms that could be seen as discriminatory",
    alternatives=MappingProxyType({
        "young": "motivated",
        "energetic": "enthusiastic",
        "fresh": "innovative",
        "digital native": "tech-savvy",
        "recent graduate": "entry-level professional",
    }),
    fallback="qualified professional",
)

# TODO: education and socioeconomic carry no targeted general suggestion; add
# one each once product confirms the wording.
EDUCATION_PATTERNS = RemediationPatternCategory(
    category=BiasCategory.EDUCATION,
    severity=Severity.MEDIUM,
    weight=20,
    patterns=_word_patterns(
        r"ivy league|prestigious university|top tier",
        r"must have degree|degree required|bachelor's required",
    ),
    remediation='Consider "relevant experience or equivalent education"',
)

SOCIOECONOMIC_PATTERNS = RemediationPatternCategory(
    category=BiasCategory.SOCIOECONOMIC,
    severity=Severity.HIGH,
    weight=30,
    patterns=_word_patterns(
        r"unpaid|volunteer|passion project|side hustle",
        r"own transportation|reliable car|must have vehicle",
    ),
    remediation="Remove barriers that may exclude qualified candidates",
)

BIAS_PATTERN_CATEGORIES: Tuple[PatternCategory, ...] = (
    GENDER_PATTERNS,
    AGE_PATTERNS,
    EDUCATION_PATTERNS,
    SOCIOECONOMIC_PATTERNS,
)

BASE_SUGGESTIONS: Tuple[str, ...] = (
    "Use inclusive language that welcomes all qualified candidates",
    "Focus on skills and competencies rather than personal characteristics",
    "Consider if educational requirements are truly necessary for the role",
)
