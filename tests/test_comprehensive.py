"""
Unit tests for the comprehensive review
"""
import pytest

from resume_analyzer.comprehensive import ComprehensiveAnalyzer
from resume_analyzer.keywords.extractor import KeywordExtractor
from resume_analyzer.models import ATSReport, IndustryFit, ResumeDocument, Severity, SubScore
from resume_analyzer.scoring.base import ScoringContext
from resume_analyzer.section_segmenter import SectionSegmenter


def make_context(text):
    return ScoringContext(
        document=ResumeDocument(raw_text=text),
        sections=SectionSegmenter().segment(text),
        extraction=KeywordExtractor().extract_with_index(text)
    )


class TestComprehensiveAnalyzer:

    @pytest.fixture
    def reviewer(self):
        return ComprehensiveAnalyzer()

    @pytest.fixture
    def bare_resume(self):
        return "EXPERIENCE\n- Built internal tools\n- Maintained the website\n"

    def test_penalty_score(self, reviewer, bare_resume):
        analysis = reviewer.analyze(make_context(bare_resume), {}, ATSReport(score=100), [])

        severities = sorted(i.severity.rank for i in analysis.issues)
        assert severities == [1, 1, 2, 3, 3]
        # 2 high, 1 medium, 2 low
        assert analysis.overall_score == 100 - 15 * 2 - 8 - 3 * 2

    def test_contact_issues(self, reviewer, bare_resume):
        analysis = reviewer.analyze(make_context(bare_resume), {}, ATSReport(score=100), [])
        contact = {i.description: i.severity for i in analysis.issues if i.category == "contact"}

        assert contact == {
            "No email address found in your contact information": Severity.HIGH,
            "No phone number found in your contact information": Severity.MEDIUM,
            "LinkedIn profile URL not found": Severity.LOW,
        }

    def test_quick_wins_and_action_plan(self, reviewer, bare_resume):
        fit = IndustryFit(
            analysis="", strengths=[], improvements=["Improve formatting consistency"],
            key_words=[], missing_elements=[]
        )
        analysis = reviewer.analyze(make_context(bare_resume), {}, ATSReport(score=100), [], fit)

        assert analysis.quick_wins == [
            "Add your phone number with area code, e.g. (555) 123-4567",
            "Add your LinkedIn profile URL: linkedin.com/in/yourname",
        ]
        assert analysis.action_plan.immediate[0] == "Add a professional email address at the top of your resume"
        assert len(analysis.action_plan.immediate) == 2
        assert analysis.action_plan.long_term[-1] == "Improve formatting consistency"
        assert analysis.industry_fit is fit

    def test_strengths(self, reviewer, bare_resume):
        sub_scores = {'grammar': SubScore(name='grammar', value=90), 'length': SubScore(name='length', value=40)}
        analysis = reviewer.analyze(make_context(bare_resume), sub_scores, ATSReport(score=95), [])

        assert analysis.strengths == [
            "Highly compatible with applicant tracking systems",
            "Clean, concise writing with few grammar issues",
        ]

    def test_sample_resume(self, reviewer, resume_text):
        analysis = reviewer.analyze(make_context(resume_text), {}, ATSReport(score=100), [])

        assert not [i for i in analysis.issues if i.category in ("contact", "experience")]
        assert "Complete contact information with email, phone and LinkedIn" in analysis.strengths
        assert "Uses quantifiable achievements with specific metrics and numbers" in analysis.strengths
        assert analysis.overall_score == 100

    def test_default_strength(self, reviewer, bare_resume):
        analysis = reviewer.analyze(make_context(bare_resume), {}, ATSReport(score=50), [])

        assert analysis.strengths == ["Resume demonstrates a basic professional structure"]
