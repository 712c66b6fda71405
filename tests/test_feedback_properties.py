"""Property-based tests for candidate feedback generation."""

import asyncio
from hypothesis import given, strategies as st, settings

from inclusive_hiring.analysis.feedback import FeedbackGenerator, skills_match
from inclusive_hiring.analysis.models import CandidateProfile, JobRequirements


SKILLS = [
    "Python", "Python 3", "JavaScript", "React", "SQL", "PostgreSQL", "AWS",
    "Docker", "Kubernetes", "Machine Learning", "Excel", "Go", "Rust", "Figma",
]

RELATIONSHIP_STEPS = (
    "Follow our company page for future opportunities",
    "Continue building your professional network in the industry",
)


@st.composite
def candidate_strategy(draw):
    """Generate candidate profiles."""
    return CandidateProfile(
        name=draw(st.text(min_size=1, max_size=30)),
        email=draw(st.emails()),
        experience_years=draw(st.integers(min_value=0, max_value=30)),
        skills=draw(st.lists(st.sampled_from(SKILLS), max_size=6, unique=True)),
        education=draw(st.sampled_from(["", "BSc Computer Science", "MBA", "PhD Physics", "High school"])),
        resume_text=draw(st.text(max_size=200))
    )


@st.composite
def job_strategy(draw):
    """Generate job requirements."""
    return JobRequirements(
        title=draw(st.text(min_size=1, max_size=40)),
        required_skills=draw(st.lists(st.sampled_from(SKILLS), max_size=6, unique=True)),
        preferred_skills=draw(st.lists(st.sampled_from(SKILLS), max_size=3, unique=True)),
        experience_required_years=draw(st.integers(min_value=0, max_value=20)),
        education_required=draw(st.one_of(st.none(), st.sampled_from(["BSc", "MBA", "PhD"]))),
        industry=draw(st.sampled_from(["fintech", "healthcare", "retail", "logistics"]))
    )


class TestFeedbackProperties:
    """Property-based tests for feedback generation."""

    def create_generator(self):
        return FeedbackGenerator()

    @given(candidate=candidate_strategy(), job=job_strategy(), reason=st.text(max_size=50))
    @settings(max_examples=50, deadline=None)
    def test_feedback_is_deterministic_property(self, candidate, job, reason):
        """
        Property: Deterministic Feedback

        Identical inputs always produce identical feedback.
        """
        generator = self.create_generator()

        async def run_test():
            first = await generator.generate_feedback(candidate, job, reason)
            second = await self.create_generator().generate_feedback(candidate, job, reason)

            assert first == second
            assert first.to_dict() == second.to_dict()

        asyncio.run(run_test())

    @given(candidate=candidate_strategy(), job=job_strategy())
    @settings(max_examples=75, deadline=None)
    def test_feedback_structure_property(self, candidate, job):
        """
        Property: Feedback Completeness

        1. Strengths are never empty
        2. Next steps always end with the relationship-building steps
        3. Process steps appear exactly when gaps exist
        4. Suggestions always end with the profile and job alert reminders
        """
        result = asyncio.run(self.create_generator().generate_feedback(candidate, job, ""))

        assert len(result.strengths) >= 1
        assert result.next_steps[-2:] == RELATIONSHIP_STEPS
        assert len(result.next_steps) == (5 if result.improvements else 2)
        assert result.suggestions[-1] == f"Set up job alerts for similar {job.industry} positions"
        assert len(result.suggestions) in (2, 5, 8)
        assert len(result.improvements) <= 2

    @given(candidate=candidate_strategy(), job=job_strategy())
    @settings(max_examples=75, deadline=None)
    def test_gap_rules_property(self, candidate, job):
        """
        Property: Gap Identification

        Missing skills and experience deficit are reported exactly when the
        profile falls short, with the exact year difference.
        """
        result = asyncio.run(self.create_generator().generate_feedback(candidate, job, ""))

        missing = [
            required for required in job.required_skills
            if not any(skills_match(skill, required) for skill in candidate.skills)
        ]
        has_skill_gap = any(gap.startswith("Additional experience needed in: ") for gap in result.improvements)
        assert has_skill_gap == bool(missing)

        deficit = job.experience_required_years - candidate.experience_years
        expected_line = f"Role requires {deficit} more years of relevant experience"
        assert (expected_line in result.improvements) == (deficit > 0)

        has_experience_strength = any(
            s.startswith("Relevant professional experience") for s in result.strengths
        )
        assert has_experience_strength == (
            candidate.experience_years >= 0.8 * job.experience_required_years
        )

    @given(required_years=st.integers(min_value=1, max_value=20))
    @settings(max_examples=30, deadline=None)
    def test_experience_boundary_property(self, required_years):
        """
        Property: Experience Thresholds

        A candidate with at least 80% but less than 100% of the required
        years is listed under both strengths and improvements.
        """
        candidate_years = -(-4 * required_years // 5)  # ceil(0.8 * required)
        candidate = CandidateProfile(
            name="Sam",
            email="sam@example.com",
            experience_years=candidate_years,
            skills=["Python"]
        )
        job = JobRequirements(
            title="Engineer",
            required_skills=["Python"],
            experience_required_years=required_years,
            industry="retail"
        )

        result = asyncio.run(self.create_generator().generate_feedback(candidate, job, ""))

        assert f"Relevant professional experience ({candidate_years} years)" in result.strengths
        if candidate_years < required_years:
            assert result.improvements == (
                f"Role requires {required_years - candidate_years} more years of relevant experience",
            )
        else:
            assert result.improvements == ()
