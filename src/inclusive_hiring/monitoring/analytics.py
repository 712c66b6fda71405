"""Forwarding of named product events to the analytics collector."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import httpx

from inclusive_hiring.config import settings
from inclusive_hiring.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class AnalyticsEvent:
    """A named event with free-form properties."""
    name: str
    properties: Dict[str, Any]
    user_id: Optional[str] = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_payload(self, token: Optional[str], environment: str) -> Dict[str, Any]:
        """Build the collector request body."""
        properties: Dict[str, Any] = {
            "token": token,
            **self.properties,
            "timestamp": self.timestamp.isoformat(),
            "environment": environment
        }
        if self.user_id:
            properties["distinct_id"] = self.user_id

        return {"event": self.name, "properties": properties}


class AnalyticsManager:
    """Client for a Mixpanel-style event tracking endpoint."""

    def __init__(
        self,
        token: Optional[str] = None,
        environment: Optional[str] = None,
        endpoint: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None
    ):
        self.token = token if token is not None else settings.mixpanel_token
        self.environment = environment or settings.environment
        self.endpoint = endpoint or settings.analytics_endpoint

        self.client = client or httpx.AsyncClient(
            headers={"Content-Type": "application/json"},
            timeout=timeout if timeout is not None else settings.analytics_timeout
        )

        self.logger = logger.bind(component="analytics", environment=self.environment)

    async def track_event(self, event: AnalyticsEvent) -> bool:
        """
        Send one event to the collector.

        Development events are only logged. Delivery failures are logged and
        never raised, so tracking cannot break the calling request.

        Returns:
            True if the collector accepted the event
        """
        if self.environment == "development":
            self.logger.info(
                "Analytics event",
                event_name=event.name,
                properties=event.properties,
                user_id=event.user_id
            )
            return False

        try:
            response = await self.client.post(
                self.endpoint,
                json=event.to_payload(self.token, self.environment)
            )
            response.raise_for_status()

        except httpx.HTTPError as e:
            self.logger.error(
                "Failed to track analytics event",
                event_name=event.name,
                error=str(e)
            )
            return False

        self.logger.debug("Analytics event tracked", event_name=event.name)
        return True

    async def track_job_posted(self, job_id: str, company_id: str) -> bool:
        return await self.track_event(AnalyticsEvent(
            name="Job Posted",
            properties={"job_id": job_id, "company_id": company_id}
        ))

    async def track_application_submitted(
        self,
        application_id: str,
        job_id: str,
        candidate_id: str
    ) -> bool:
        return await self.track_event(AnalyticsEvent(
            name="Application Submitted",
            properties={
                "application_id": application_id,
                "job_id": job_id,
                "candidate_id": candidate_id
            }
        ))

    async def track_feedback_generated(
        self,
        candidate_id: str,
        job_id: str,
        feedback_quality: float
    ) -> bool:
        return await self.track_event(AnalyticsEvent(
            name="Feedback Generated",
            properties={
                "candidate_id": candidate_id,
                "job_id": job_id,
                "feedback_quality": feedback_quality
            }
        ))

    async def track_bias_detected(
        self,
        job_id: str,
        bias_score: int,
        bias_types: List[str]
    ) -> bool:
        return await self.track_event(AnalyticsEvent(
            name="Bias Detected",
            properties={
                "job_id": job_id,
                "bias_score": bias_score,
                "bias_types": bias_types
            }
        ))

    async def close(self):
        """Close the underlying HTTP client."""
        await self.client.aclose()
        self.logger.info("Analytics client closed")
