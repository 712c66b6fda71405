"""
Inclusive Hiring Toolkit: job-posting text analysis for applicant tracking.

This package scores job descriptions for discriminatory language and
synthesizes constructive rejection feedback for candidates. Both engines are
rule based and deterministic; an HTTP API, a CLI, a schema.org JobPosting
generator and an analytics forwarder are built around them.
"""

__version__ = "0.1.0"

from inclusive_hiring.analysis.bias import BiasDetector
from inclusive_hiring.analysis.feedback import FeedbackGenerator
from inclusive_hiring.analysis.models import (
    BiasCheckResult,
    CandidateProfile,
    FeedbackResult,
    JobRequirements,
)

__all__ = [
    "BiasDetector",
    "FeedbackGenerator",
    "BiasCheckResult",
    "CandidateProfile",
    "FeedbackResult",
    "JobRequirements",
]
