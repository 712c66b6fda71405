"""Structured job posting documents."""

from .schema import (
    EmploymentType,
    SalaryPeriod,
    JobLocation,
    SalaryRange,
    PostingRequirements,
    JobPostingData,
    generate_google_jobs_schema,
    generate_job_id
)

__all__ = [
    "EmploymentType",
    "SalaryPeriod",
    "JobLocation",
    "SalaryRange",
    "PostingRequirements",
    "JobPostingData",
    "generate_google_jobs_schema",
    "generate_job_id"
]
