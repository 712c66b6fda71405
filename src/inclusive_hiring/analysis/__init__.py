"""Rule-based job posting and candidate feedback analysis."""

from .models import (
    BiasCategory,
    Severity,
    BiasIssue,
    BiasCheckResult,
    CandidateProfile,
    JobRequirements,
    FeedbackResult
)
from .patterns import (
    PatternCategory,
    SynonymPatternCategory,
    RemediationPatternCategory,
    BIAS_PATTERN_CATEGORIES
)
from .bias import BiasDetector, COMPLIANCE_THRESHOLD, MAX_BIAS_SCORE
from .feedback import FeedbackGenerator, skills_match

__all__ = [
    "BiasCategory",
    "Severity",
    "BiasIssue",
    "BiasCheckResult",
    "CandidateProfile",
    "JobRequirements",
    "FeedbackResult",
    "PatternCategory",
    "SynonymPatternCategory",
    "RemediationPatternCategory",
    "BIAS_PATTERN_CATEGORIES",
    "BiasDetector",
    "COMPLIANCE_THRESHOLD",
    "MAX_BIAS_SCORE",
    "FeedbackGenerator",
    "skills_match"
]
