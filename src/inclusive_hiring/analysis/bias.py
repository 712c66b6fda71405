"""Rule-based detection of discriminatory language in job descriptions."""

from typing import List, Optional, Sequence

from inclusive_hiring.analysis.models import BiasCheckResult, BiasIssue
from inclusive_hiring.analysis.patterns import (
    BASE_SUGGESTIONS,
    BIAS_PATTERN_CATEGORIES,
    PatternCategory,
)
from inclusive_hiring.utils.logging import get_logger, log_text_summary

logger = get_logger(__name__)

MAX_BIAS_SCORE = 100
COMPLIANCE_THRESHOLD = 30


class BiasDetector:
    """Scores job descriptions against categorized bias patterns."""

    def __init__(self, categories: Sequence[PatternCategory] = BIAS_PATTERN_CATEGORIES):
        self.logger = logger.bind(component="bias_detector")
        self.categories = tuple(categories)

    async def check_job_description(self, description: Optional[str]) -> BiasCheckResult:
        """
        Scan a job description for biased language.

        Every match of every pattern is reported and adds its category weight
        to the score, so repeated terms count each time. The score saturates
        at 100 and a posting is compliant while it stays below 30.

        Args:
            description: Free text of the posting; empty or None is allowed

        Returns:
            Score, flagged issues, writing suggestions and compliance flag
        """
        issues: List[BiasIssue] = []
        total_score = 0

        if description:
            for category in self.categories:
                for matched_text in category.find_matches(description):
                    issues.append(BiasIssue(
                        category=category.category,
                        matched_text=matched_text,
                        suggested_replacement=category.replacement_for(matched_text),
                        severity=category.severity
                    ))
                    total_score += category.weight

        final_score = min(total_score, MAX_BIAS_SCORE)

        result = BiasCheckResult(
            score=final_score,
            issues=tuple(issues),
            suggestions=tuple(self._generate_suggestions(issues)),
            compliant=final_score < COMPLIANCE_THRESHOLD
        )

        self.logger.info(
            "Bias check completed",
            **log_text_summary(
                description or "",
                score=result.score,
                raw_score=total_score,
                issues_count=len(issues),
                categories=[c.value for c in result.categories],
                compliant=result.compliant
            )
        )

        return result

    def _generate_suggestions(self, issues: List[BiasIssue]) -> List[str]:
        """Base writing tips plus one tip per flagged category that defines one."""
        suggestions = list(BASE_SUGGESTIONS)
        flagged = {issue.category for issue in issues}

        for category in self.categories:
            if category.general_suggestion and category.category in flagged:
                suggestions.append(category.general_suggestion)

        return suggestions
