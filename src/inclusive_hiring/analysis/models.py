"""Data models for job-description bias checks and candidate feedback."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field


class BiasCategory(str, Enum):
    """Discrimination concerns a flagged phrase can belong to."""
    GENDER = "gender"
    AGE = "age"
    RACE = "race"
    DISABILITY = "disability"
    SOCIOECONOMIC = "socioeconomic"
    EDUCATION = "education"


class Severity(str, Enum):
    """Severity levels for flagged phrases."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


@dataclass(frozen=True)
class BiasIssue:
    """A single biased phrase found in a job description."""
    category: BiasCategory
    matched_text: str
    suggested_replacement: str
    severity: Severity

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "category": self.category.value,
            "matched_text": self.matched_text,
            "suggested_replacement": self.suggested_replacement,
            "severity": self.severity.value
        }


@dataclass(frozen=True)
class BiasCheckResult:
    """Outcome of scanning one job description."""
    score: int  # 0-100, higher means more biased
    issues: Tuple[BiasIssue, ...] = field(default_factory=tuple)
    suggestions: Tuple[str, ...] = field(default_factory=tuple)
    compliant: bool = True

    @property
    def categories(self) -> List[BiasCategory]:
        """Distinct flagged categories in the order they were first found."""
        seen: List[BiasCategory] = []
        for issue in self.issues:
            if issue.category not in seen:
                seen.append(issue.category)
        return seen

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "score": self.score,
            "issues": [issue.to_dict() for issue in self.issues],
            "suggestions": list(self.suggestions),
            "compliant": self.compliant
        }


class CandidateProfile(BaseModel):
    """Candidate data supplied by the caller when a candidate is rejected."""
    name: str = Field(..., description="Candidate full name")
    email: str = Field(..., description="Candidate email address")
    experience_years: int = Field(0, ge=0, description="Years of professional experience")
    skills: List[str] = Field(default_factory=list, description="Candidate skills")
    education: str = Field("", description="Highest education, free text")
    resume_text: str = Field("", description="Plain-text resume")


class JobRequirements(BaseModel):
    """Requirements of the job the candidate applied for."""
    title: str = Field(..., description="Job title")
    required_skills: List[str] = Field(default_factory=list, description="Must-have skills")
    preferred_skills: List[str] = Field(default_factory=list, description="Nice-to-have skills")
    experience_required_years: int = Field(0, ge=0, description="Years of experience required")
    education_required: Optional[str] = Field(None, description="Required education, if any")
    industry: str = Field(..., description="Industry the role belongs to")


@dataclass(frozen=True)
class FeedbackResult:
    """Structured rejection feedback for one candidate."""
    message: str
    strengths: Tuple[str, ...]
    improvements: Tuple[str, ...]
    suggestions: Tuple[str, ...]
    encouragement: str
    next_steps: Tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "message": self.message,
            "strengths": list(self.strengths),
            "improvements": list(self.improvements),
            "suggestions": list(self.suggestions),
            "encouragement": self.encouragement,
            "next_steps": list(self.next_steps)
        }
