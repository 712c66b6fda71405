"""Personalized rejection feedback built from candidate/job gap analysis."""

from typing import List

from inclusive_hiring.analysis.models import CandidateProfile, FeedbackResult, JobRequirements
from inclusive_hiring.utils.logging import get_logger

logger = get_logger(__name__)

# Candidates at or above this share of the required years get an experience strength.
EXPERIENCE_STRENGTH_RATIO = 0.8

MISSING_SKILLS_MARKER = "experience needed"
EXPERIENCE_GAP_MARKER = "more years"


def skills_match(candidate_skill: str, required_skill: str) -> bool:
    """Loose, case-insensitive containment test in either direction."""
    candidate = candidate_skill.lower()
    required = required_skill.lower()
    return required in candidate or candidate in required


class FeedbackGenerator:
    """Generates deterministic, templated feedback for rejected candidates."""

    def __init__(self):
        self.logger = logger.bind(component="feedback_generator")

    async def generate_feedback(
        self,
        candidate: CandidateProfile,
        job: JobRequirements,
        rejection_reason: str
    ) -> FeedbackResult:
        """
        Build rejection feedback for a candidate.

        Args:
            candidate: Profile of the rejected candidate
            job: Requirements of the role applied for
            rejection_reason: Internal reason for the rejection; kept in the
                signature for future use and not included in the output

        Returns:
            Message, strengths, improvement areas, suggestions and next steps
        """
        strengths = self._identify_strengths(candidate, job)
        gaps = self._identify_gaps(candidate, job)
        suggestions = self._generate_suggestions(gaps, job)

        result = FeedbackResult(
            message=self._create_personalized_message(candidate, job),
            strengths=tuple(strengths),
            improvements=tuple(gaps),
            suggestions=tuple(suggestions),
            encouragement=self._create_encouragement(candidate),
            next_steps=tuple(self._generate_next_steps(gaps, job))
        )

        self.logger.info(
            "Feedback generated",
            job_title=job.title,
            strengths_count=len(result.strengths),
            gaps_count=len(result.improvements),
            suggestions_count=len(result.suggestions)
        )

        return result

    def _identify_strengths(self, candidate: CandidateProfile, job: JobRequirements) -> List[str]:
        strengths: List[str] = []

        matching_skills = [
            skill for skill in candidate.skills
            if any(skills_match(skill, required) for required in job.required_skills)
        ]
        if matching_skills:
            strengths.append(f"Strong background in {', '.join(matching_skills)}")

        if candidate.experience_years >= job.experience_required_years * EXPERIENCE_STRENGTH_RATIO:
            strengths.append(f"Relevant professional experience ({candidate.experience_years} years)")

        if job.education_required and job.education_required.lower() in candidate.education.lower():
            strengths.append("Educational background aligns with requirements")

        if not strengths:
            strengths.append("Clear interest in the role and industry")

        return strengths

    def _identify_gaps(self, candidate: CandidateProfile, job: JobRequirements) -> List[str]:
        gaps: List[str] = []

        missing_skills = [
            required for required in job.required_skills
            if not any(skills_match(skill, required) for skill in candidate.skills)
        ]
        if missing_skills:
            gaps.append(f"Additional {MISSING_SKILLS_MARKER} in: {', '.join(missing_skills)}")

        # Shares no threshold with the experience strength; both can fire.
        if candidate.experience_years < job.experience_required_years:
            experience_gap = job.experience_required_years - candidate.experience_years
            gaps.append(f"Role requires {experience_gap} {EXPERIENCE_GAP_MARKER} of relevant experience")

        return gaps

    def _generate_suggestions(self, gaps: List[str], job: JobRequirements) -> List[str]:
        suggestions: List[str] = []

        if any(MISSING_SKILLS_MARKER in gap for gap in gaps):
            suggestions.extend([
                "Consider taking online courses or certifications in the required technologies",
                "Build portfolio projects that demonstrate these skills",
                "Look for volunteer or freelance opportunities to gain experience"
            ])

        if any(EXPERIENCE_GAP_MARKER in gap for gap in gaps):
            suggestions.extend([
                "Apply for roles with lower experience requirements to build your background",
                "Highlight transferable skills from other industries or roles",
                "Consider internship or mentorship opportunities in this field"
            ])

        suggestions.append("Keep your LinkedIn profile and resume updated with recent accomplishments")
        suggestions.append(f"Set up job alerts for similar {job.industry} positions")

        return suggestions

    def _create_personalized_message(self, candidate: CandidateProfile, job: JobRequirements) -> str:
        return (
            f"Dear {candidate.name},\n"
            "\n"
            f"Thank you for your interest in the {job.title} position. We appreciate the time "
            "and effort you put into your application and the opportunity to learn about your "
            "background.\n"
            "\n"
            "After careful consideration, we have decided to move forward with candidates whose "
            "experience more closely aligns with our current requirements. This decision was not "
            "easy, as we received many qualified applications."
        )

    def _create_encouragement(self, candidate: CandidateProfile) -> str:
        return (
            "We encourage you to continue developing your skills and applying for opportunities "
            "that match your growing expertise. Your background shows promise, and we believe "
            "you'll find the right fit with continued effort and development.\n"
            "\n"
            "Please don't hesitate to apply for future positions with us that better align with "
            "your evolving skillset. We wish you the best of luck in your career journey."
        )

    def _generate_next_steps(self, gaps: List[str], job: JobRequirements) -> List[str]:
        next_steps: List[str] = []

        if gaps:
            next_steps.extend([
                "Focus on developing the specific skills mentioned in the improvement areas",
                "Update your resume to better highlight relevant experience",
                "Consider informational interviews with professionals in this field"
            ])

        next_steps.append("Follow our company page for future opportunities")
        next_steps.append("Continue building your professional network in the industry")

        return next_steps
