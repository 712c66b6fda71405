"""API models for request/response schemas."""

from typing import Dict, List, Optional, Any
from pydantic import BaseModel, Field
from datetime import datetime

from inclusive_hiring.analysis.models import (
    BiasCategory,
    CandidateProfile,
    JobRequirements,
    Severity
)
from inclusive_hiring.postings.schema import JobPostingData


class BiasCheckRequest(BaseModel):
    """Request to scan a job description."""
    description: str = Field("", description="Job description text")
    job_id: Optional[str] = Field(None, description="Job identifier for analytics")


class BiasIssueModel(BaseModel):
    """Flagged phrase."""
    category: BiasCategory = Field(..., description="Bias category")
    matched_text: str = Field(..., description="Text as it appears in the description")
    suggested_replacement: str = Field(..., description="Suggested inclusive alternative")
    severity: Severity = Field(..., description="Issue severity")


class BiasCheckResponse(BaseModel):
    """Bias check outcome."""
    score: int = Field(..., ge=0, le=100, description="Bias score, higher means more biased")
    issues: List[BiasIssueModel] = Field(..., description="Flagged phrases in order found")
    suggestions: List[str] = Field(..., description="Inclusive writing suggestions")
    compliant: bool = Field(..., description="Whether the score is below the compliance threshold")


class FeedbackRequest(BaseModel):
    """Request to generate rejection feedback."""
    candidate: CandidateProfile = Field(..., description="Rejected candidate")
    job: JobRequirements = Field(..., description="Job requirements")
    rejection_reason: str = Field("", description="Internal rejection reason")
    candidate_id: Optional[str] = Field(None, description="Candidate identifier for analytics")
    job_id: Optional[str] = Field(None, description="Job identifier for analytics")


class FeedbackResponse(BaseModel):
    """Generated rejection feedback."""
    message: str = Field(..., description="Personalized rejection message")
    strengths: List[str] = Field(..., description="Requirements the candidate meets")
    improvements: List[str] = Field(..., description="Requirements the candidate misses")
    suggestions: List[str] = Field(..., description="Development suggestions")
    encouragement: str = Field(..., description="Closing encouragement")
    next_steps: List[str] = Field(..., description="Recommended next steps")


class PostingSchemaRequest(BaseModel):
    """Request to build a JobPosting JSON-LD document."""
    posting: JobPostingData = Field(..., description="Job record")
    job_id: Optional[str] = Field(None, description="Identifier value to publish")
    company_id: Optional[str] = Field(None, description="Company identifier for analytics")


class HealthCheck(BaseModel):
    """Health check response."""
    status: str = Field(..., description="Service status")
    timestamp: datetime = Field(..., description="Check timestamp")
    version: str = Field(..., description="Service version")
    components: Dict[str, str] = Field(..., description="Component status")


class ErrorResponse(BaseModel):
    """Error response model."""
    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Error message")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")
    timestamp: datetime = Field(..., description="Error timestamp")
