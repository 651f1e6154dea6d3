# resume_analyzer/comprehensive.py
import logging
from typing import Dict, List, Optional

from resume_analyzer.models import (
    ActionPlan, ATSReport, ComprehensiveAnalysis, IndustryFit, Issue,
    SectionName, Severity, SubScore
)
from resume_analyzer.scoring.base import METRIC, ScoringContext, word_pattern
from resume_analyzer.scoring.composite import CompositeScorer
from resume_analyzer.section_segmenter import SectionSegmenter
from resume_analyzer.vocabulary import LEADERSHIP_WORDS

logger = logging.getLogger(__name__)


class ComprehensiveAnalyzer:
    """
    Whole-resume review: penalty-based overall score, strengths,
    quick wins and a three-stage action plan
    """

    PENALTIES = {
        Severity.CRITICAL: 20,
        Severity.HIGH: 15,
        Severity.MEDIUM: 8,
        Severity.LOW: 3,
    }

    QUICK_WIN_CATEGORIES = ('formatting', 'language', 'contact', 'ats')
    MAX_STRENGTHS = 8
    MAX_QUICK_WINS = 5
    MAX_PLAN_ITEMS = 5

    STRENGTH_MESSAGES = {
        'keyword': "Good keyword optimization matching the target role",
        'grammar': "Clean, concise writing with few grammar issues",
        'formatting': "Consistent and professional formatting throughout",
        'section': "All the standard resume sections are present",
        'action_verb': "Effectively uses strong action verbs to describe achievements",
        'relevance': "Content is closely aligned with the target role",
        'bullet_point': "Well-structured bullet points that are easy to scan",
        'language_tone': "Professional, confident tone",
        'length': "Resume length is well suited to your experience level",
    }

    LEADERSHIP_PATTERNS = [word_pattern(word) for word in sorted(LEADERSHIP_WORDS)]

    def analyze(
        self,
        context: ScoringContext,
        sub_scores: Dict[str, SubScore],
        ats_report: ATSReport,
        ats_issues: List[Issue],
        industry_fit: Optional[IndustryFit] = None
    ) -> ComprehensiveAnalysis:
        """
        Build the comprehensive review

        Args:
            context: Shared scoring inputs
            sub_scores: Sub-scores keyed by component name
            ats_report: ATS outcome
            ats_issues: ATS findings converted to issues
            industry_fit: Detailed industry analysis, when available

        Returns:
            ComprehensiveAnalysis
        """
        issues = CompositeScorer.collect_issues(sub_scores, ats_issues)
        issues.extend(self._contact_issues(context))
        issues.extend(self._experience_issues(context))
        issues = CompositeScorer.rank(issues)

        penalty = sum(self.PENALTIES[issue.severity] for issue in issues)
        overall = max(0, 100 - penalty)

        improvements = industry_fit.improvements if industry_fit else []

        logger.info(f"Comprehensive analysis: {len(issues)} issues, overall {overall}")
        return ComprehensiveAnalysis(
            overall_score=overall,
            issues=issues,
            strengths=self._strengths(context, sub_scores, ats_report),
            quick_wins=self._quick_wins(issues),
            action_plan=self._action_plan(issues, improvements),
            industry_fit=industry_fit
        )

    def _contact_issues(self, context: ScoringContext) -> List[Issue]:
        text = context.text
        issues = []

        if not SectionSegmenter.EMAIL_PATTERN.search(text):
            issues.append(Issue(
                category="contact",
                severity=Severity.HIGH,
                description="No email address found in your contact information",
                suggestion="Add a professional email address at the top of your resume",
                impact=15
            ))
        if not SectionSegmenter.PHONE_PATTERN.search(text):
            issues.append(Issue(
                category="contact",
                severity=Severity.MEDIUM,
                description="No phone number found in your contact information",
                suggestion="Add your phone number with area code, e.g. (555) 123-4567",
                impact=8
            ))
        if not SectionSegmenter.LINKEDIN_PATTERN.search(text):
            issues.append(Issue(
                category="contact",
                severity=Severity.LOW,
                description="LinkedIn profile URL not found",
                suggestion="Add your LinkedIn profile URL: linkedin.com/in/yourname",
                impact=3
            ))
        return issues

    def _experience_issues(self, context: ScoringContext) -> List[Issue]:
        experience = context.section(SectionName.EXPERIENCE)
        text = experience.body if experience else context.text
        issues = []

        if not METRIC.search(text):
            issues.append(Issue(
                category="experience",
                severity=Severity.HIGH,
                description="Your experience lacks specific numbers, percentages or metrics",
                suggestion="Quantify results, e.g. 'Reduced load time by 40%' or 'Managed a $2M budget'",
                impact=15
            ))
        if not any(pattern.search(text) for pattern in self.LEADERSHIP_PATTERNS):
            issues.append(Issue(
                category="experience",
                severity=Severity.LOW,
                description="No leadership or mentoring experience highlighted",
                suggestion="Add examples of leading projects, mentoring colleagues or coordinating teams",
                impact=3
            ))
        return issues

    def _strengths(
        self,
        context: ScoringContext,
        sub_scores: Dict[str, SubScore],
        ats_report: ATSReport
    ) -> List[str]:
        strengths = []

        if METRIC.search(context.text):
            strengths.append("Uses quantifiable achievements with specific metrics and numbers")

        contact = context.section(SectionName.CONTACT)
        if contact and all(
            pattern.search(contact.content)
            for pattern in (
                SectionSegmenter.EMAIL_PATTERN,
                SectionSegmenter.PHONE_PATTERN,
                SectionSegmenter.LINKEDIN_PATTERN,
            )
        ):
            strengths.append("Complete contact information with email, phone and LinkedIn")

        if ats_report.score >= 90:
            strengths.append("Highly compatible with applicant tracking systems")

        for name, score in sub_scores.items():
            if score.value >= 80 and name in self.STRENGTH_MESSAGES:
                strengths.append(self.STRENGTH_MESSAGES[name])

        return strengths[:self.MAX_STRENGTHS] or ["Resume demonstrates a basic professional structure"]

    def _quick_wins(self, issues: List[Issue]) -> List[str]:
        wins = [
            issue.suggestion for issue in issues
            if issue.severity in (Severity.MEDIUM, Severity.LOW)
            and issue.category in self.QUICK_WIN_CATEGORIES
        ]
        return wins[:self.MAX_QUICK_WINS]

    def _action_plan(self, issues: List[Issue], improvements: List[str]) -> ActionPlan:
        immediate = [i.suggestion for i in issues if i.severity in (Severity.CRITICAL, Severity.HIGH)]
        short_term = [i.suggestion for i in issues if i.severity == Severity.MEDIUM]
        long_term = [i.suggestion for i in issues if i.severity == Severity.LOW] + list(improvements)

        return ActionPlan(
            immediate=self._unique(immediate)[:self.MAX_PLAN_ITEMS],
            short_term=self._unique(short_term)[:self.MAX_PLAN_ITEMS],
            long_term=self._unique(long_term)[:self.MAX_PLAN_ITEMS]
        )

    @staticmethod
    def _unique(items: List[str]) -> List[str]:
        return list(dict.fromkeys(items))
