"""
Unit tests for industry detection and scoring
"""
import pytest

from resume_analyzer.industry import IndustryClassifier, get_profile
from resume_analyzer.industry.profiles import PROFILES


class TestClassify:
    """Industry detection"""

    @pytest.fixture
    def classifier(self):
        return IndustryClassifier()

    def test_sample_resume_is_tech(self, classifier, resume_text):
        match = classifier.classify(resume_text)

        assert match.industry == 'tech'
        assert 0 < match.confidence <= 100
        assert 'python' in match.matched_terms

    def test_too_few_terms_is_general(self, classifier):
        match = classifier.classify("Python developer")

        assert match.industry == 'general'
        assert match.confidence == 0
        assert match.matched_terms == []

    def test_job_description_terms_count(self, classifier):
        resume = "Python developer"
        job = "Backend engineer for our cloud database team"

        assert classifier.classify(resume, job).industry == 'tech'

    def test_finance(self, classifier):
        text = (
            "Financial analyst covering equity securities and bonds. "
            "Built cash flow forecast models and quarterly budget reports for the investment banking team."
        )

        assert classifier.classify(text).industry == 'finance'

    def test_deterministic(self, classifier, resume_text, job_text):
        assert classifier.classify(resume_text, job_text) == classifier.classify(resume_text, job_text)


class TestIndustryScore:

    @pytest.fixture
    def classifier(self):
        return IndustryClassifier()

    @pytest.mark.parametrize("industry", sorted(PROFILES))
    def test_criteria_sum_to_one(self, industry):
        assert sum(get_profile(industry).criteria.values()) == pytest.approx(1.0)

    def test_all_perfect_inputs(self, classifier):
        sections = {name: 100 for name in ('skills', 'projects', 'experience', 'education', 'certifications')}

        assert classifier.score('tech', sections, 100, 100) == 100

    def test_absent_sections_contribute_nothing(self, classifier):
        # tech: experience 0.20, action verbs 0.05, formatting 0.05
        assert classifier.score('tech', {'experience': 100}, 100, 100) == 30

    def test_unknown_industry_uses_general(self, classifier):
        sections = {'experience': 50}

        assert classifier.score('astronaut', sections, 0, 0) == classifier.score('general', sections, 0, 0)


class TestRecommendations:

    @pytest.fixture
    def classifier(self):
        return IndustryClassifier()

    def test_weak_keyword_promotes_matching_templates(self, classifier):
        templates = [r.text for r in get_profile('tech').recommendations]
        recommendations = classifier.recommendations('tech', {'keyword': 40, 'grammar': 95})

        assert recommendations[:2] == [templates[0], templates[3]]
        assert len(recommendations) == 5
        assert sorted(recommendations) == sorted(templates)

    def test_no_weak_scores_keeps_template_order(self, classifier):
        templates = [r.text for r in get_profile('finance').recommendations]

        assert classifier.recommendations('finance', {'keyword': 90}) == templates


class TestDetailedAnalysis:

    @pytest.fixture
    def classifier(self):
        return IndustryClassifier()

    def test_sample_resume(self, classifier, resume_text):
        sections = {'contact': 55, 'summary': 70, 'experience': 95, 'education': 55, 'skills': 85}
        fit = classifier.detailed_analysis('tech', 72, resume_text, sections, 100, 90)

        assert fit.analysis.startswith("Your resume shows a 72/100 fit for Technology positions.")
        assert "good match" in fit.analysis
        assert "Strong skills section showcases relevant Technology expertise" in fit.strengths
        assert "Strong use of action verbs demonstrates impact and initiative" in fit.strengths
        assert 'python' in fit.key_words
        assert "Quantifiable achievements with specific numbers and percentages" not in fit.missing_elements

    def test_missing_elements(self, classifier):
        text = "Backend engineer\n- Responsible for services\n- Worked on the website\n"
        fit = classifier.detailed_analysis('tech', 40, text, {'experience': 40}, 20, 60)

        assert "Version control experience (Git, GitHub, etc.)" in fit.missing_elements
        assert "Quantifiable achievements with specific numbers and percentages" in fit.missing_elements
        assert "More action verbs at the beginning of bullet points" in fit.missing_elements
        assert "Use stronger action verbs to describe achievements" in fit.improvements
        assert "Improve formatting consistency" in fit.improvements
