# resume_analyzer/scoring/composite.py
import math
from dataclasses import replace
import logging
from typing import Dict, List, Optional

from resume_analyzer.exceptions import ConfigurationError
from resume_analyzer.industry.profiles import get_profile
from resume_analyzer.models import (
    HeatmapCell, Issue, Section, SectionName, SectionResult, SubScore, clamp_score
)
from resume_analyzer.scoring.base import BULLET_LINE, WORD
from resume_analyzer.vocabulary import ACTION_VERBS

logger = logging.getLogger(__name__)


class CompositeScorer:
    """
    Combine sub-scores into the total and rank every issue
    """

    # Weight distribution for the total score
    WEIGHTS = {
        'keyword': 0.20,
        'grammar': 0.10,
        'formatting': 0.10,
        'section': 0.15,
        'action_verb': 0.15,
        'relevance': 0.10,
        'bullet_point': 0.10,
        'length': 0.10,
    }

    assert math.isclose(sum(WEIGHTS.values()), 1.0, abs_tol=1e-6)

    # Section quality points
    SECTION_BASE = 40
    WEAK_SECTION = 70

    def __init__(self, weights: Optional[Dict[str, float]] = None, summary_size: int = 5):
        self.weights = self.validate_weights(weights if weights is not None else self.WEIGHTS)
        self.summary_size = summary_size

    @classmethod
    def validate_weights(cls, weights: Dict[str, float]) -> Dict[str, float]:
        """
        Check a weight table covers the weighted components and sums to 1

        Raises:
            ConfigurationError: On unknown or missing components, negative
                weights or a sum other than 1
        """
        unknown = set(weights) - set(cls.WEIGHTS)
        missing = set(cls.WEIGHTS) - set(weights)
        if unknown or missing:
            raise ConfigurationError(
                "Weights must cover exactly the weighted components",
                config_key="scoring.weights",
                details={'unknown': sorted(unknown), 'missing': sorted(missing)}
            )

        if any(w < 0 for w in weights.values()):
            raise ConfigurationError("Weights must not be negative", config_key="scoring.weights")

        total = sum(weights.values())
        if not math.isclose(total, 1.0, abs_tol=1e-6):
            raise ConfigurationError(
                f"Weights must sum to 1.0 (got {total:.6f})",
                config_key="scoring.weights",
                details={'sum': total}
            )
        return dict(weights)

    def total(self, sub_scores: Dict[str, SubScore]) -> int:
        """
        Weighted sum of sub-scores

        Args:
            sub_scores: Sub-scores keyed by component name

        Returns:
            Total score 0-100; absent components contribute 0
        """
        total = sum(
            sub_scores[name].value * weight
            for name, weight in self.weights.items()
            if name in sub_scores
        )
        logger.debug(f"Composite total {total:.2f}")
        return clamp_score(total)

    def with_weights(self, sub_scores: Dict[str, SubScore]) -> Dict[str, SubScore]:
        """Copy of the sub-scores carrying their weight in the total"""
        return {
            name: replace(score, weight=self.weights.get(name, 0.0))
            for name, score in sub_scores.items()
        }

    @staticmethod
    def collect_issues(sub_scores: Dict[str, SubScore], ats_issues: List[Issue]) -> List[Issue]:
        """All scorer issues in scorer order, then ATS issues"""
        issues = []
        for score in sub_scores.values():
            issues.extend(score.issues)
        issues.extend(ats_issues)
        return issues

    @staticmethod
    def rank(issues: List[Issue]) -> List[Issue]:
        """Most severe first, then highest impact"""
        return sorted(
            issues,
            key=lambda i: (i.severity.rank, -i.impact, i.category, i.description)
        )

    def summary(self, ranked: List[Issue]) -> str:
        return ' '.join(issue.suggestion for issue in ranked[:self.summary_size])

    # Section quality

    def section_quality(self, section: Section) -> int:
        body = section.body
        words = WORD.findall(body)
        bullets = sum(1 for line in body.splitlines() if BULLET_LINE.match(line))
        verbs = sum(1 for word in words if word.lower() in ACTION_VERBS)

        score = self.SECTION_BASE

        # 1. Content length
        if len(words) > 50:
            score += 20
        elif len(words) > 30:
            score += 15
        elif len(words) > 15:
            score += 10

        # 2. Bullet usage
        if bullets > 3:
            score += 20
        elif bullets > 0:
            score += 15

        # 3. Numbers
        if any(ch.isdigit() for ch in body):
            score += 15

        # 4. Action verbs
        if verbs > 2:
            score += 10
        elif verbs > 0:
            score += 5

        return clamp_score(score)

    def section_suggestions(self, section: Section) -> List[str]:
        body = section.body
        words = len(WORD.findall(body))
        bullets = sum(1 for line in body.splitlines() if BULLET_LINE.match(line))
        has_numbers = any(ch.isdigit() for ch in body)
        name = section.name

        suggestions = []
        if not body.strip():
            return [f"Add content to the {name.value} section"]

        if name in (SectionName.EXPERIENCE, SectionName.PROJECTS):
            if bullets == 0:
                suggestions.append("Use bullet points to highlight achievements")
            if not has_numbers:
                suggestions.append("Add quantifiable achievements with numbers and percentages")
            if words < 50:
                suggestions.append("Expand this section with more details about your achievements")
        elif name == SectionName.SKILLS:
            if words < 20:
                suggestions.append("Add more relevant skills to showcase your expertise")
        elif name == SectionName.SUMMARY:
            if words < 30:
                suggestions.append("Write a 2-4 sentence summary of your experience and strengths")
        elif name == SectionName.EDUCATION:
            if not has_numbers:
                suggestions.append("Include graduation dates and relevant honours")

        if not suggestions:
            suggestions.append(f"Strengthen the {name.value} section with specific, measurable detail")
        return suggestions

    def section_results(self, sections: List[Section]) -> List[SectionResult]:
        results = []
        for section in sections:
            score = self.section_quality(section)
            suggestions = self.section_suggestions(section) if score < self.WEAK_SECTION else []
            results.append(SectionResult(
                name=section.name.value,
                content=section.content,
                score=score,
                suggestions=suggestions
            ))
        return results

    @staticmethod
    def section_scores(results: List[SectionResult]) -> Dict[str, int]:
        """Best quality score per section name"""
        scores: Dict[str, int] = {}
        for result in results:
            scores[result.name] = max(result.score, scores.get(result.name, 0))
        return scores

    @staticmethod
    def heatmap(results: List[SectionResult], industry: str) -> List[HeatmapCell]:
        emphasized = get_profile(industry).emphasized_sections
        return [
            HeatmapCell(
                name=result.name,
                score=result.score,
                weight=2 if result.name in emphasized else 1
            )
            for result in results
        ]
