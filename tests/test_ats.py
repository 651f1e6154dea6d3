"""
Unit tests for ATS compatibility checks
"""
import pytest

from resume_analyzer.ats.checker import ATSChecker, CHECKS
from resume_analyzer.config import ATSConfig
from resume_analyzer.models import ATSIssue, ATSReport, FileType, ResumeDocument, Severity


class TestATSChecker:
    """Rule evaluation and scoring"""

    @pytest.fixture
    def checker(self):
        return ATSChecker()

    def failed(self, report):
        return [issue.type for issue in report.issues]

    def test_clean_plain_text_passes(self, checker, resume_text):
        report = checker.check(ResumeDocument(raw_text=resume_text))

        assert report.score == 100
        assert report.issues == []
        assert len(report.passed_checks) == len(CHECKS)
        assert "File format is ATS-compatible" in report.passed_checks
        assert "File name is ATS-compatible" in report.passed_checks

    def test_score_is_100_minus_impacts(self, checker, resume_text):
        text = "<table><tr><td>Skills</td></tr></table>\n<img src='logo.png'>\n" + resume_text
        report = checker.check(ResumeDocument(raw_text=text))

        assert {'complex_tables', 'images'} <= set(self.failed(report))
        assert report.score == max(0, 100 - sum(i.impact for i in report.issues))
        assert report.score == 100 - 20 - 10

    def test_issues_sorted_by_impact(self, checker):
        text = "header: page 1 of 2\n<table>\n<img src='me.png'>\nfont-family: Papyrus"
        report = checker.check(ResumeDocument(raw_text=text))
        impacts = [i.impact for i in report.issues]

        assert impacts == sorted(impacts, reverse=True)
        assert report.issues[0].type == 'complex_tables'

    def test_score_never_negative(self):
        impacts = {key: 40 for key in ATSConfig().impacts}
        checker = ATSChecker(ATSConfig(impacts=impacts))
        report = checker.check(ResumeDocument(raw_text="<table> <img> text-box"))

        assert report.score == 0

    def test_file_name_with_spaces(self, checker, resume_text):
        document = ResumeDocument(
            raw_text=resume_text,
            file_type=FileType.from_file_name("My Resume (final).pdf"),
            file_name="My Resume (final).pdf"
        )
        report = checker.check(document)

        assert self.failed(report) == ['file_name']
        assert report.score == 95

    def test_unsupported_mime_type(self, checker, resume_text):
        document = ResumeDocument(
            raw_text=resume_text,
            file_type=FileType.from_value("application/zip"),
            mime_type="application/zip"
        )
        report = checker.check(document)

        assert self.failed(report) == ['file_format']
        assert "application/zip" in report.issues[0].description
        assert report.score == 85

    def test_docx_passes_file_format(self, checker, resume_text):
        document = ResumeDocument(raw_text=resume_text, file_type=FileType.DOCX, file_name="Jane_Doe.docx")

        assert checker.check(document).score == 100

    def test_missing_headings_and_contact(self, checker):
        text = "Jane Doe\nI build backend systems in Python and like tidy code.\n"
        report = checker.check(ResumeDocument(raw_text=text))

        assert set(self.failed(report)) == {'section_headings', 'contact_info'}

    def test_special_characters(self, checker, resume_text):
        text = resume_text + "\n" + "★ ✈ ☎ ♥ ☀ ✿ ❖ ♫ ☂ ✂ ✉ ☯"
        report = checker.check(ResumeDocument(raw_text=text))

        assert self.failed(report) == ['special_characters']

    def test_bullets_and_curly_quotes_are_safe(self, checker, resume_text):
        text = resume_text + "\n• “Quoted” — ‘text’ – more\n" * 3

        assert 'special_characters' not in self.failed(checker.check(ResumeDocument(raw_text=text)))

    def test_font_words_in_prose_pass(self, checker, resume_text):
        text = resume_text.replace(
            "- Mentored 4 junior engineers",
            "- Drove high impact work on the Courier service and symbol tables; mentored 4 junior engineers"
        )

        assert checker.check(ResumeDocument(raw_text=text)).score == 100

    @pytest.mark.parametrize("marker", [
        "<font face=\"Papyrus\">Jane Doe</font>",
        "font-family: Impact",
        "Headings set in Comic Sans MS",
    ])
    def test_font_styling_markers_fail(self, checker, resume_text, marker):
        report = checker.check(ResumeDocument(raw_text=resume_text + "\n" + marker))

        assert "fancy_fonts" in self.failed(report)

    def test_configured_impacts(self, resume_text):
        impacts = {**ATSConfig().impacts, 'images': 30}
        checker = ATSChecker(ATSConfig(impacts=impacts))
        report = checker.check(ResumeDocument(raw_text=resume_text + "\nphoto.jpg"))

        assert report.score == 70


class TestToIssues:

    @pytest.mark.parametrize("impact,severity", [
        (20, Severity.HIGH),
        (15, Severity.MEDIUM),
        (10, Severity.MEDIUM),
        (8, Severity.LOW),
        (5, Severity.LOW),
    ])
    def test_severity_from_impact(self, impact, severity):
        report = ATSReport(score=100 - impact, issues=[
            ATSIssue(type='x', description='desc', impact=impact, solution='fix')
        ])
        issue = ATSChecker.to_issues(report)[0]

        assert issue.severity == severity
        assert issue.category == "ats"
        assert issue.suggestion == "fix"
        assert issue.impact == impact
