"""schema.org JobPosting (JSON-LD) generation for job records."""

import random
import string
import time
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from inclusive_hiring.utils.logging import get_logger

logger = get_logger(__name__)

SCHEMA_CONTEXT = "https://schema.org/"
_JOB_ID_ALPHABET = string.ascii_lowercase + string.digits


class EmploymentType(str, Enum):
    """Employment types recognised by structured job search."""
    FULL_TIME = "FULL_TIME"
    PART_TIME = "PART_TIME"
    CONTRACTOR = "CONTRACTOR"
    TEMPORARY = "TEMPORARY"
    INTERN = "INTERN"


class SalaryPeriod(str, Enum):
    """Unit the salary range is quoted in."""
    HOUR = "HOUR"
    DAY = "DAY"
    WEEK = "WEEK"
    MONTH = "MONTH"
    YEAR = "YEAR"


class JobLocation(BaseModel):
    """Postal location of the job."""
    street_address: Optional[str] = Field(None, description="Street address")
    address_locality: str = Field(..., description="City")
    address_region: str = Field(..., description="State or region")
    postal_code: Optional[str] = Field(None, description="Postal code")
    address_country: str = Field(..., description="Country code")


class SalaryRange(BaseModel):
    """Salary range offered."""
    min: float = Field(..., ge=0, description="Minimum salary")
    max: float = Field(..., ge=0, description="Maximum salary")
    currency: str = Field(..., description="ISO 4217 currency code")
    period: SalaryPeriod = Field(..., description="Salary period")


class PostingRequirements(BaseModel):
    """Free-text requirements published with the posting."""
    education: Optional[str] = Field(None, description="Education requirements")
    experience: Optional[str] = Field(None, description="Experience requirements")
    skills: List[str] = Field(default_factory=list, description="Skills")


class JobPostingData(BaseModel):
    """Job record to publish."""
    title: str = Field(..., description="Job title")
    description: str = Field(..., description="Job description")
    company_name: str = Field(..., description="Hiring organization name")
    company_website: Optional[str] = Field(None, description="Hiring organization website")
    company_logo: Optional[str] = Field(None, description="Hiring organization logo URL")
    location: JobLocation = Field(..., description="Job location")
    salary: Optional[SalaryRange] = Field(None, description="Salary range")
    employment_type: EmploymentType = Field(..., description="Employment type")
    date_posted: datetime = Field(..., description="Publication date")
    valid_through: datetime = Field(..., description="Expiry date")
    remote: bool = Field(False, description="Whether the job is fully remote")
    benefits: List[str] = Field(default_factory=list, description="Benefits offered")
    requirements: Optional[PostingRequirements] = Field(None, description="Published requirements")


def generate_job_id() -> str:
    """Return an identifier of the form ``job_<epoch ms>_<9 base36 chars>``."""
    suffix = "".join(random.choices(_JOB_ID_ALPHABET, k=9))
    return f"job_{int(time.time() * 1000)}_{suffix}"


def _job_location(job: JobPostingData) -> Dict[str, Any]:
    if job.remote:
        return {
            "@type": "Place",
            "applicantLocationRequirements": {
                "@type": "Country",
                "name": job.location.address_country
            }
        }

    address: Dict[str, Any] = {"@type": "PostalAddress"}
    if job.location.street_address:
        address["streetAddress"] = job.location.street_address
    address["addressLocality"] = job.location.address_locality
    address["addressRegion"] = job.location.address_region
    if job.location.postal_code:
        address["postalCode"] = job.location.postal_code
    address["addressCountry"] = job.location.address_country

    return {"@type": "Place", "address": address}


def _utc_timestamp(value: datetime) -> str:
    """Format as UTC with millisecond precision and a Z suffix; naive values are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def generate_google_jobs_schema(job: JobPostingData, job_id: Optional[str] = None) -> Dict[str, Any]:
    """
    Convert a job record into a schema.org JobPosting document.

    Optional properties are only emitted when the record sets them.

    Args:
        job: Job record to publish
        job_id: Identifier value; generated when omitted

    Returns:
        JSON-LD mapping ready for ``json.dumps``
    """
    organization: Dict[str, Any] = {"@type": "Organization", "name": job.company_name}
    if job.company_website:
        organization["sameAs"] = job.company_website
    if job.company_logo:
        organization["logo"] = job.company_logo

    schema: Dict[str, Any] = {
        "@context": SCHEMA_CONTEXT,
        "@type": "JobPosting",
        "title": job.title,
        "description": job.description,
        "identifier": {
            "@type": "PropertyValue",
            "name": job.company_name,
            "value": job_id or generate_job_id()
        },
        "datePosted": _utc_timestamp(job.date_posted),
        "validThrough": _utc_timestamp(job.valid_through),
        "employmentType": job.employment_type.value,
        "hiringOrganization": organization,
        "jobLocation": _job_location(job)
    }

    if job.salary:
        schema["baseSalary"] = {
            "@type": "MonetaryAmount",
            "currency": job.salary.currency,
            "value": {
                "@type": "QuantitativeValue",
                "minValue": job.salary.min,
                "maxValue": job.salary.max,
                "unitText": job.salary.period.value
            }
        }

    if job.remote:
        schema["jobLocationType"] = "TELECOMMUTE"

    if job.benefits:
        schema["jobBenefits"] = ", ".join(job.benefits)

    if job.requirements and job.requirements.education:
        schema["educationRequirements"] = job.requirements.education

    if job.requirements and job.requirements.experience:
        schema["experienceRequirements"] = job.requirements.experience

    logger.debug(
        "Job posting schema generated",
        title=job.title,
        remote=job.remote,
        has_salary=job.salary is not None
    )

    return schema
