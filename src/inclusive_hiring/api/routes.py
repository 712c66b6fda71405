"""API routes for the Inclusive Hiring Toolkit."""

from typing import Any, Dict, Optional
from datetime import datetime, timezone
from fastapi import APIRouter, HTTPException, BackgroundTasks

from inclusive_hiring import __version__
from inclusive_hiring.api.models import (
    BiasCheckRequest, BiasCheckResponse, FeedbackRequest, FeedbackResponse,
    PostingSchemaRequest, HealthCheck
)
from inclusive_hiring.analysis.bias import BiasDetector
from inclusive_hiring.analysis.feedback import FeedbackGenerator
from inclusive_hiring.analysis.models import FeedbackResult
from inclusive_hiring.monitoring.analytics import AnalyticsManager
from inclusive_hiring.postings.schema import generate_google_jobs_schema
from inclusive_hiring.config import settings
from inclusive_hiring.utils.logging import get_logger

logger = get_logger(__name__)

# Global instances (initialized in main.py lifespan)
bias_detector: Optional[BiasDetector] = None
feedback_generator: Optional[FeedbackGenerator] = None
analytics: Optional[AnalyticsManager] = None

# Create routers
bias_router = APIRouter(prefix="/bias", tags=["bias"])
feedback_router = APIRouter(prefix="/feedback", tags=["feedback"])
postings_router = APIRouter(prefix="/postings", tags=["postings"])
health_router = APIRouter(prefix="/health", tags=["health"])


def _analytics_active() -> bool:
    return settings.analytics_enabled and analytics is not None


def feedback_quality(result: FeedbackResult) -> int:
    """Number of actionable items handed to the candidate."""
    return len(result.suggestions) + len(result.next_steps)


@bias_router.post("/check", response_model=BiasCheckResponse)
async def check_bias(request: BiasCheckRequest, background_tasks: BackgroundTasks):
    """Score a job description for biased language."""
    if not bias_detector:
        raise HTTPException(status_code=503, detail="Bias detector not initialized")

    logger.info(
        "Bias check request received",
        job_id=request.job_id,
        description_length=len(request.description)
    )

    result = await bias_detector.check_job_description(request.description)

    if _analytics_active() and request.job_id and result.issues:
        background_tasks.add_task(
            analytics.track_bias_detected,
            request.job_id,
            result.score,
            [category.value for category in result.categories]
        )

    return BiasCheckResponse(**result.to_dict())


@feedback_router.post("", response_model=FeedbackResponse)
async def generate_feedback(request: FeedbackRequest, background_tasks: BackgroundTasks):
    """Generate rejection feedback for a candidate."""
    if not feedback_generator:
        raise HTTPException(status_code=503, detail="Feedback generator not initialized")

    logger.info(
        "Feedback request received",
        job_id=request.job_id,
        candidate_id=request.candidate_id,
        job_title=request.job.title
    )

    result = await feedback_generator.generate_feedback(
        candidate=request.candidate,
        job=request.job,
        rejection_reason=request.rejection_reason
    )

    if _analytics_active() and request.candidate_id and request.job_id:
        background_tasks.add_task(
            analytics.track_feedback_generated,
            request.candidate_id,
            request.job_id,
            feedback_quality(result)
        )

    return FeedbackResponse(**result.to_dict())


@postings_router.post("/schema")
async def generate_posting_schema(
    request: PostingSchemaRequest,
    background_tasks: BackgroundTasks
) -> Dict[str, Any]:
    """Build the schema.org JobPosting document for a job record."""
    schema = generate_google_jobs_schema(request.posting, job_id=request.job_id)

    if _analytics_active() and request.company_id:
        background_tasks.add_task(
            analytics.track_job_posted,
            schema["identifier"]["value"],
            request.company_id
        )

    return schema


@health_router.get("/", response_model=HealthCheck)
async def health_check():
    """Health check endpoint."""
    components = {
        "bias_detector": "healthy" if bias_detector else "unavailable",
        "feedback_generator": "healthy" if feedback_generator else "unavailable",
        "analytics": "healthy" if analytics else "unavailable"
    }

    overall_status = "healthy" if all(status == "healthy" for status in components.values()) else "degraded"

    return HealthCheck(
        status=overall_status,
        timestamp=datetime.now(timezone.utc),
        version=__version__,
        components=components
    )


all_routers = [
    bias_router,
    feedback_router,
    postings_router,
    health_router
]
