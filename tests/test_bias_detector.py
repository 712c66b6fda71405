"""Tests for the job description bias detector."""

import pytest

from inclusive_hiring.analysis.bias import BiasDetector, COMPLIANCE_THRESHOLD, MAX_BIAS_SCORE
from inclusive_hiring.analysis.models import BiasCategory, BiasCheckResult, Severity
from inclusive_hiring.analysis.patterns import (
    BASE_SUGGESTIONS,
    BIAS_PATTERN_CATEGORIES,
    GENDER_PATTERNS,
    PatternCategory,
    RemediationPatternCategory,
    _word_patterns,
)


GENDER_TIP = "Review language for gender-coded words that may deter candidates"
AGE_TIP = "Avoid age-related terms that could be seen as discriminatory"


class TestBiasDetector:
    """Test cases for BiasDetector."""

    @pytest.fixture
    def detector(self):
        return BiasDetector()

    @pytest.mark.asyncio
    async def test_mixed_gender_and_socioeconomic_posting(self, detector):
        result = await detector.check_job_description(
            "We need an aggressive rockstar ninja, must have vehicle"
        )

        assert isinstance(result, BiasCheckResult)
        assert [issue.matched_text for issue in result.issues] == [
            "rockstar", "ninja", "aggressive", "must have vehicle"
        ]
        assert [issue.category for issue in result.issues] == [
            BiasCategory.GENDER, BiasCategory.GENDER, BiasCategory.GENDER, BiasCategory.SOCIOECONOMIC
        ]
        assert [issue.suggested_replacement for issue in result.issues] == [
            "talented professional",
            "expert",
            "results-driven",
            "Remove barriers that may exclude qualified candidates",
        ]
        assert result.score == 75
        assert result.compliant is False
        assert result.suggestions == BASE_SUGGESTIONS + (GENDER_TIP,)

    @pytest.mark.asyncio
    async def test_inclusive_posting_is_compliant(self, detector):
        result = await detector.check_job_description("We welcome all qualified applicants")

        assert result.score == 0
        assert result.issues == ()
        assert result.compliant is True
        assert result.suggestions == BASE_SUGGESTIONS

    @pytest.mark.asyncio
    @pytest.mark.parametrize("description", ["", None])
    async def test_empty_description_yields_zero_bias(self, detector, description):
        result = await detector.check_job_description(description)

        assert result.score == 0
        assert result.issues == ()
        assert result.compliant is True
        assert len(result.suggestions) == 3

    @pytest.mark.asyncio
    async def test_score_saturates_at_maximum(self, detector):
        result = await detector.check_job_description("young young young young young")

        assert len(result.issues) == 5
        assert result.score == MAX_BIAS_SCORE
        assert result.compliant is False

    @pytest.mark.asyncio
    async def test_repeated_terms_each_add_weight(self, detector):
        result = await detector.check_job_description("Hey guys, calling all guys")

        assert len(result.issues) == 2
        assert result.score == 30

    @pytest.mark.asyncio
    async def test_matching_is_case_insensitive_and_preserves_text(self, detector):
        result = await detector.check_job_description("Looking for a ROCKSTAR Engineer")

        assert len(result.issues) == 1
        issue = result.issues[0]
        assert issue.matched_text == "ROCKSTAR"
        assert issue.suggested_replacement == "talented professional"
        assert issue.severity == Severity.MEDIUM

    @pytest.mark.asyncio
    async def test_matches_whole_words_only(self, detector):
        result = await detector.check_job_description(
            "Youngstown office, seniority-based pay, freshman mentoring program"
        )

        assert result.score == 0

    @pytest.mark.asyncio
    async def test_synonym_fallbacks(self, detector):
        result = await detector.check_job_description("ninjas wanted, senior dudes welcome")

        replacements = {issue.matched_text: issue.suggested_replacement for issue in result.issues}
        assert replacements["ninjas"] == "professional"
        assert replacements["dudes"] == "professional"
        assert replacements["senior"] == "qualified professional"

    @pytest.mark.asyncio
    async def test_age_phrases(self, detector):
        result = await detector.check_job_description(
            "Ideal for a digital native or recent graduate from Gen Z"
        )

        replacements = [issue.suggested_replacement for issue in result.issues]
        assert "tech-savvy" in replacements
        assert "entry-level professional" in replacements
        assert all(issue.category == BiasCategory.AGE for issue in result.issues)
        assert all(issue.severity == Severity.HIGH for issue in result.issues)
        assert result.score == 75
        assert result.suggestions == BASE_SUGGESTIONS + (AGE_TIP,)

    @pytest.mark.asyncio
    async def test_education_issues_add_no_extra_suggestion(self, detector):
        result = await detector.check_job_description("Ivy League background, degree required")

        assert [issue.matched_text for issue in result.issues] == ["Ivy League", "degree required"]
        assert all(issue.category == BiasCategory.EDUCATION for issue in result.issues)
        assert all(
            issue.suggested_replacement == 'Consider "relevant experience or equivalent education"'
            for issue in result.issues
        )
        assert result.score == 40
        assert result.suggestions == BASE_SUGGESTIONS

    @pytest.mark.asyncio
    async def test_socioeconomic_issue_severity_and_suggestions(self, detector):
        result = await detector.check_job_description("This is an unpaid trial period")

        assert result.issues[0].category == BiasCategory.SOCIOECONOMIC
        assert result.issues[0].severity == Severity.HIGH
        assert result.suggestions == BASE_SUGGESTIONS

    @pytest.mark.asyncio
    async def test_compliance_threshold_boundary(self, detector):
        below = await detector.check_job_description("A competitive salary")
        at = await detector.check_job_description("A competitive and supportive team")

        assert below.score == 15
        assert below.compliant is True
        assert at.score == COMPLIANCE_THRESHOLD
        assert at.compliant is False

    @pytest.mark.asyncio
    async def test_suggestion_order_gender_before_age(self, detector):
        result = await detector.check_job_description("young guys")

        assert result.suggestions[-2:] == (GENDER_TIP, AGE_TIP)

    @pytest.mark.asyncio
    async def test_categories_in_first_seen_order(self, detector):
        result = await detector.check_job_description("unpaid internship for young guys")

        assert result.categories == [BiasCategory.GENDER, BiasCategory.AGE, BiasCategory.SOCIOECONOMIC]

    @pytest.mark.asyncio
    async def test_custom_category_table(self):
        disability = RemediationPatternCategory(
            category=BiasCategory.DISABILITY,
            severity=Severity.CRITICAL,
            weight=40,
            patterns=_word_patterns(r"able-bodied"),
            remediation="Describe the physical tasks of the role instead",
        )
        detector = BiasDetector(categories=[GENDER_PATTERNS, disability])

        result = await detector.check_job_description("Able-bodied guru needed")

        assert [issue.category for issue in result.issues] == [BiasCategory.GENDER, BiasCategory.DISABILITY]
        assert result.issues[0].suggested_replacement == "specialist"
        assert result.issues[1].suggested_replacement == "Describe the physical tasks of the role instead"
        assert result.score == 55

    def test_category_without_replacement_rule_cannot_be_built(self):
        with pytest.raises(TypeError):
            PatternCategory(
                category=BiasCategory.RACE,
                severity=Severity.HIGH,
                weight=30,
                patterns=_word_patterns(r"native speaker"),
            )

    def test_default_tables_cover_four_categories(self):
        assert [c.category for c in BIAS_PATTERN_CATEGORIES] == [
            BiasCategory.GENDER, BiasCategory.AGE, BiasCategory.EDUCATION, BiasCategory.SOCIOECONOMIC
        ]
        assert [c.weight for c in BIAS_PATTERN_CATEGORIES] == [15, 25, 20, 30]

    @pytest.mark.asyncio
    async def test_result_serialization(self, detector):
        result = await detector.check_job_description("rockstar")

        assert result.to_dict() == {
            "score": 15,
            "issues": [{
                "category": "gender",
                "matched_text": "rockstar",
                "suggested_replacement": "talented professional",
                "severity": "medium"
            }],
            "suggestions": list(BASE_SUGGESTIONS) + [GENDER_TIP],
            "compliant": True
        }
