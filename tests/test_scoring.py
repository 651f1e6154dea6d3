"""
Unit tests for heuristic scorers and the composite
"""
import pytest
from unittest.mock import patch

from resume_analyzer.exceptions import ConfigurationError
from resume_analyzer.keywords.extractor import KeywordExtractor
from resume_analyzer.models import (
    Issue, JobDescription, ResumeDocument, Section, SectionName, Severity, SubScore
)
from resume_analyzer.scoring import (
    ActionVerbScorer, BulletPointScorer, CompositeScorer, FormattingScorer,
    GrammarScorer, KeywordScorer, LanguageToneScorer, LengthScorer,
    RelevanceScorer, ScoringContext, SectionScorer
)
from resume_analyzer.section_segmenter import SectionSegmenter


ALL_SCORERS = [
    KeywordScorer(),
    GrammarScorer(),
    FormattingScorer(),
    SectionScorer(),
    ActionVerbScorer(),
    RelevanceScorer(),
    BulletPointScorer(),
    LanguageToneScorer(),
    LengthScorer(),
]


def make_context(text, job=None):
    sections = SectionSegmenter().segment(text)
    extraction = KeywordExtractor().extract_with_index(text, job)
    return ScoringContext(
        document=ResumeDocument(raw_text=text),
        sections=sections,
        extraction=extraction,
        job_description=JobDescription.from_text(job)
    )


class TestScoreBounds:
    """Every scorer stays within 0-100"""

    @pytest.mark.parametrize("text", [
        "a",
        "!!!!",
        "Résumé — 日本語 ✓ 👩‍💻",
        "EXPERIENCE\n" + "- I was very really just responsible for stuff\n" * 400,
        "word " * 5000,
    ])
    @pytest.mark.parametrize("scorer", ALL_SCORERS, ids=lambda s: s.name)
    def test_pathological_inputs(self, scorer, text):
        result = scorer.score(make_context(text, "Python developer"))

        assert isinstance(result, SubScore)
        assert 0 <= result.value <= 100
        assert result.name == scorer.name

    @pytest.mark.parametrize("scorer", ALL_SCORERS, ids=lambda s: s.name)
    def test_sample_resume(self, scorer, resume_text, job_text):
        result = scorer.score(make_context(resume_text, job_text))

        assert 0 <= result.value <= 100
        assert all(issue.category == scorer.category for issue in result.issues)

    def test_sub_score_clamps(self):
        assert SubScore(name="x", value=140).value == 100
        assert SubScore(name="x", value=-3).value == 0


class TestKeywordScorer:

    def test_job_keywords_weighted_by_importance(self, resume_text, job_text):
        result = KeywordScorer().score(make_context(resume_text, job_text))

        assert 0 < result.value < 100
        assert any('terraform' in i.description.lower() for i in result.issues)

    def test_baseline_without_job(self, resume_text):
        result = KeywordScorer().score(make_context(resume_text))

        assert result.issues[0].severity == Severity.LOW
        assert result.issues[0].impact == 0


class TestRelevanceScorer:

    def test_populated_without_job(self, resume_text):
        result = RelevanceScorer().score(make_context(resume_text))

        assert 0 <= result.value <= 100
        assert "baseline" in result.issues[0].description

    def test_baseline_capped_below_100(self, resume_text):
        with patch.object(RelevanceScorer, 'cosine', return_value=1.0):
            baseline = RelevanceScorer().score(make_context(resume_text))
            targeted = RelevanceScorer().score(make_context(resume_text, "Python and SQL"))

        assert baseline.value == RelevanceScorer.BASELINE_CEILING == 90
        assert targeted.value == 100

    def test_cosine_ignores_extra_terms(self):
        reference = {'python': 1, 'sql': 1}

        assert RelevanceScorer.cosine({'python': 1, 'sql': 1, 'golf': 9}, reference) == pytest.approx(1.0)
        assert RelevanceScorer.cosine({'golf': 1}, reference) == 0.0


class TestGrammarScorer:

    def test_clean_resume(self, resume_text):
        assert GrammarScorer().score(make_context(resume_text)).value == 100

    def test_first_person_pronouns(self):
        text = "I built a service. I led a team. I wrote the docs. I shipped my project."
        result = GrammarScorer().score(make_context(text))

        assert result.value == 90
        assert result.issues[0].description.startswith("First-person pronouns")
        assert result.issues[0].line_number == 1

    def test_passive_voice(self):
        text = (
            "The service was designed by the team.\n"
            "The API was tested in staging.\n"
            "The tests were written later.\n"
            "The docs were reviewed weekly.\n"
            "The data was migrated safely.\n"
            "The servers were patched monthly.\n"
        )
        result = GrammarScorer().score(make_context(text))

        assert result.value == 90
        assert result.issues[0].description == "Passive voice used 6 times"
        assert result.issues[0].line_number == 1

    def test_filler_words(self):
        result = GrammarScorer().score(make_context("Very strong engineer who really just basically ships quite fast."))

        assert result.value == 92
        assert result.issues[0].severity == Severity.LOW

    def test_misspellings(self):
        result = GrammarScorer().score(make_context("Managed teh managment of the enviroment."))

        assert result.value == 85
        assert result.issues[0].severity == Severity.HIGH
        assert "managment -> management" in result.issues[0].description
        assert result.issues[0].impact == 15


class TestFormattingScorer:

    def test_consistent_layout(self, resume_text):
        assert FormattingScorer().score(make_context(resume_text)).value == 100

    def test_mixed_bullet_glyphs(self):
        text = "EXPERIENCE\n- Built the billing service\n* Led the platform migration\n"
        result = FormattingScorer().score(make_context(text))

        assert result.value == 85
        assert result.issues[0].impact == 15
        assert "2 different markers" in result.issues[0].description

    def test_date_formats(self):
        text = (
            "EXPERIENCE\n"
            "Acme Corp Jan 2020 to 03/2021\n"
            "Beta Inc 2018-05 to 2019-06\n"
            "Gamma LLC 01/02/2017\n"
        )
        result = FormattingScorer().score(make_context(text))

        assert result.value == 90
        assert result.issues[0].description == "Dates use 4 different formats"


CONTACT = "Jane Doe\njane@example.com | (555) 123-4567\n\n"
SUMMARY = (
    "SUMMARY\nBackend engineer with six years of experience building Python services, "
    "data pipelines and internal tools for finance teams.\n\n"
)
EXPERIENCE = (
    "EXPERIENCE\n"
    "- Built REST APIs in Python serving two million requests per day\n"
    "- Reduced query latency by 35% through indexing and caching\n\n"
)
EDUCATION = (
    "EDUCATION\nB.S. Computer Science, State University, 2017. Coursework in algorithms, "
    "databases, distributed systems, statistics and machine learning with honours.\n\n"
)
SKILLS = (
    "SKILLS\nPython, SQL, Django, PostgreSQL, AWS, Docker, Kubernetes, Git, Jenkins, "
    "Terraform, Kafka, Redis, Linux, Bash, REST APIs\n"
)


class TestSectionScorer:

    def test_complete_resume(self):
        result = SectionScorer().score(make_context(CONTACT + SUMMARY + EXPERIENCE + EDUCATION + SKILLS))

        assert result.value == 100
        assert result.issues == []

    def test_missing_experience_is_critical(self):
        result = SectionScorer().score(make_context(CONTACT + SUMMARY + EDUCATION + SKILLS))

        assert result.value == 70
        assert len(result.issues) == 1
        assert result.issues[0].severity == Severity.CRITICAL
        assert result.issues[0].description == "Missing experience section"
        assert result.issues[0].impact == 30

    def test_thin_section_costs_half_its_weight(self):
        text = CONTACT + SUMMARY + EXPERIENCE + EDUCATION + "SKILLS\nPython, SQL\n"
        result = SectionScorer().score(make_context(text))

        assert result.value == 100 - 15 // 2
        assert result.issues[0].description == "The skills section is thin"
        assert result.issues[0].severity == Severity.MEDIUM


class TestBulletPointScorer:

    BULLETS = (
        "EXPERIENCE\n"
        "Senior Engineer, Acme Corp\n"
        "- Built the billing service\n"
        "- Led the platform migration\n"
        "- Designed the event pipeline\n"
        "- Mentored new engineers\n"
    )

    def test_wall_of_text(self):
        paragraph = (
            "Worked across many teams on a wide range of projects that involved planning, "
            "building, testing and maintaining internal tools, customer facing services and "
            "reporting systems while also helping with hiring, onboarding, documentation, code "
            "review and support rotations for the wider engineering organisation every single week.\n"
        )
        result = BulletPointScorer().score(make_context(self.BULLETS + paragraph))

        assert result.value == 80 - 10
        assert len(result.issues) == 1
        assert result.issues[0].description == "1 dense paragraph(s) over 40 words"

    @pytest.mark.parametrize("bullets,expected", [
        ("- Cut costs by 30%\n- Grew revenue by $2M\n- Served 40 customers\n- Shipped 12 releases\n", 90),
        ("- Cut costs\n- Grew revenue\n- Served customers\n- Shipped releases\n", 80),
    ])
    def test_metrics_bonus(self, bullets, expected):
        text = (
            "EXPERIENCE\n" + bullets
            + "Owned the roadmap for the payments platform and its partner integrations.\n"
        )

        assert BulletPointScorer().score(make_context(text)).value == expected


class TestLanguageToneScorer:

    def test_professional_tone(self, resume_text):
        assert LanguageToneScorer().score(make_context(resume_text)).value == 100

    def test_buzzwords(self):
        text = "EXPERIENCE\n- Passionate, motivated self-starter and team player\n"
        result = LanguageToneScorer().score(make_context(text))

        assert result.value == 90
        assert result.issues[0].description.startswith("Overused buzzwords")

    def test_exclamation_marks(self):
        result = LanguageToneScorer().score(make_context("EXPERIENCE\n- Shipped the new billing platform!\n"))

        assert result.value == 95
        assert result.issues[0].line_number == 2

    def test_all_caps_body(self):
        text = "EXPERIENCE\n- BUILT THE BILLING PLATFORM FOR EUROPE\n- Led hiring\n"
        result = LanguageToneScorer().score(make_context(text))

        assert result.value == 90
        assert "ALL CAPS" in result.issues[0].description


class TestActionVerbScorer:

    def test_strong_bullets(self, resume_text):
        assert ActionVerbScorer().score(make_context(resume_text)).value == 100

    def test_weak_openers(self):
        text = (
            "EXPERIENCE\n"
            "- Responsible for the billing service\n"
            "- Worked on the data pipeline\n"
            "- Led the platform migration\n"
            "- Helped with hiring\n"
        )
        result = ActionVerbScorer().score(make_context(text))

        assert result.value == 25
        descriptions = [i.description for i in result.issues]
        assert any("weak phrases" in d for d in descriptions)
        assert any("Only 1 of 4" in d for d in descriptions)

    def test_no_bullets(self):
        result = ActionVerbScorer().score(make_context("Engineer with a long career in software."))

        assert result.value == 50

    @pytest.mark.parametrize("word,expected", [
        ('led', True),
        ('lead', True),
        ('manages', True),
        ('building', True),
        ('stuff', False),
        ('', False),
    ])
    def test_is_action_verb(self, word, expected):
        assert ActionVerbScorer().is_action_verb(word) is expected


class TestLengthScorer:

    def test_short_resume(self):
        result = LengthScorer().score(make_context("Python developer with SQL skills"))

        assert result.value < 100
        assert result.issues[0].description.startswith("Resume is short")

    def test_long_resume(self):
        result = LengthScorer().score(make_context("word " * 1300))

        assert result.value == 100 - (1300 - 1200) / 20
        assert result.issues[0].description == "Resume is long (1300 words)"
        assert result.issues[0].severity == Severity.LOW

    def test_senior_limit(self):
        result = LengthScorer().score(make_context("Senior engineer\n" + "word " * 1300))

        assert result.value == 100
        assert result.issues == []


class TestCompositeScorer:

    @pytest.fixture
    def composite(self):
        return CompositeScorer()

    def test_weights_sum_to_one(self):
        assert sum(CompositeScorer.WEIGHTS.values()) == pytest.approx(1.0)

    @pytest.mark.parametrize("weights", [
        {**CompositeScorer.WEIGHTS, 'keyword': 0.5},
        {**CompositeScorer.WEIGHTS, 'tone': 0.0},
        {k: v for k, v in CompositeScorer.WEIGHTS.items() if k != 'length'},
        {**CompositeScorer.WEIGHTS, 'keyword': -0.2, 'grammar': 0.5},
    ])
    def test_invalid_weights(self, weights):
        with pytest.raises(ConfigurationError):
            CompositeScorer(weights=weights)

    def test_total(self, composite):
        perfect = {name: SubScore(name=name, value=100) for name in CompositeScorer.WEIGHTS}
        assert composite.total(perfect) == 100

        half = {name: SubScore(name=name, value=50) for name in CompositeScorer.WEIGHTS}
        assert composite.total(half) == 50

        assert composite.total({}) == 0

    def test_tone_is_not_weighted(self, composite):
        scores = {name: SubScore(name=name, value=80) for name in CompositeScorer.WEIGHTS}
        scores['language_tone'] = SubScore(name='language_tone', value=0)

        assert composite.total(scores) == 80

    def test_rank(self):
        low = Issue("length", Severity.LOW, "b", "fix b", impact=50)
        high_small = Issue("grammar", Severity.HIGH, "c", "fix c", impact=5)
        high_big = Issue("keywords", Severity.HIGH, "d", "fix d", impact=30)
        critical = Issue("sections", Severity.CRITICAL, "a", "fix a", impact=30)

        ranked = CompositeScorer.rank([low, high_small, high_big, critical])

        assert ranked == [critical, high_big, high_small, low]

    def test_summary_joins_top_suggestions(self):
        composite = CompositeScorer(summary_size=2)
        issues = [Issue("x", Severity.HIGH, str(i), f"Fix {i}.") for i in range(4)]

        assert composite.summary(issues) == "Fix 0. Fix 1."

    def test_section_quality(self, composite):
        content = "EXPERIENCE\n- Led team of 5 engineers\n- Built pipeline\n"
        section = Section(SectionName.EXPERIENCE, "EXPERIENCE", content, 0, len(content))

        # base 40 + bullets 15 + numbers 15 + verbs 5
        assert composite.section_quality(section) == 75

    def test_section_results_only_suggest_for_weak_sections(self, composite):
        weak = "SKILLS\nPython\n"
        results = composite.section_results([
            Section(SectionName.SKILLS, "SKILLS", weak, 0, len(weak))
        ])

        assert results[0].score == 40
        assert results[0].suggestions == ["Add more relevant skills to showcase your expertise"]

    def test_section_scores_keep_best(self, composite):
        first = "EXPERIENCE\nAcme\n"
        second = "EXPERIENCE\n- Led team of 5 engineers\n"
        results = composite.section_results([
            Section(SectionName.EXPERIENCE, "EXPERIENCE", first, 0, len(first)),
            Section(SectionName.EXPERIENCE, "EXPERIENCE", second, len(first), len(first) + len(second)),
        ])

        assert CompositeScorer.section_scores(results) == {'experience': results[1].score}

    def test_heatmap_emphasis(self, composite, resume_text):
        results = composite.section_results(SectionSegmenter().segment(resume_text))
        cells = {c.name: c for c in CompositeScorer.heatmap(results, 'tech')}

        assert cells['skills'].weight == 2
        assert cells['contact'].weight == 1
