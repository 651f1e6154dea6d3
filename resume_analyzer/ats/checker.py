# resume_analyzer/ats/checker.py
import re
import logging
from dataclasses import dataclass
from typing import List, Optional

from resume_analyzer.config import ATSConfig
from resume_analyzer.models import (
    ATSIssue, ATSReport, FileType, ResumeDocument, Section, Severity, Issue
)
from resume_analyzer.section_segmenter import SectionSegmenter
from resume_analyzer.vocabulary import STANDARD_SECTIONS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ATSCheck:
    """One rule: a failed check costs its configured impact"""
    type: str
    description: str
    solution: str
    passed_message: str
    detector: str                  # ATSChecker method, True when failed


class ATSChecker:
    """
    Rule engine for ATS compatibility

    Plain text cannot reveal styling, so checks that need unknown
    metadata (file type, file name) pass by default.
    """

    TABLE_MARKERS = re.compile(r'<table|<tr[\s>]|<td[\s>]|<th[\s>]|\|\s*-{3,}\s*\||\+-{3,}\+', re.IGNORECASE)
    PIPE_LINE = re.compile(r'^.*\|.*\|.*$', re.MULTILINE)
    COLUMN_MARKERS = re.compile(r'<column|column-count|multi-column', re.IGNORECASE)
    DOUBLE_TABS = re.compile(r'\t{2,}')
    WIDE_GAPS = re.compile(r'\S {5,}\S')
    IMAGE_MARKERS = re.compile(r'<img|<image|\.(?:jpe?g|png|gif)\b|data:image', re.IGNORECASE)
    HEADER_FOOTER = re.compile(r'<header|<footer|\bheader:|\bfooter:|\bpage\s+\d+\s+of\s+\d+\b', re.IGNORECASE)
    FANCY_FONTS = re.compile(
        r'font-family\s*:|<font\b|\bface\s*=|'
        r'\b(?:comic sans(?: ms)?|brush script(?: mt)?|wingdings|webdings)\b',
        re.IGNORECASE
    )
    SAFE_CHARACTERS = re.compile(r'[\w\s.,;:\'"!?@#$%&*()\[\]{}/\\\-+<>=|~`^’‘“”–—•]')
    TEXT_BOX = re.compile(r'text-?box|<textbox|\[text box\]|w:txbxcontent', re.IGNORECASE)
    BAD_FILE_NAME = re.compile(r'[^\w\-.]')

    def __init__(self, config: Optional[ATSConfig] = None, segmenter: Optional[SectionSegmenter] = None):
        self.config = config or ATSConfig()
        self.segmenter = segmenter or SectionSegmenter()

    def check(self, document: ResumeDocument, sections: Optional[List[Section]] = None) -> ATSReport:
        """
        Run every check

        Args:
            document: Resume text and file metadata
            sections: Segmented sections (segmented here when omitted)

        Returns:
            ATSReport with score = max(0, 100 - sum of failed impacts)
        """
        if sections is None:
            sections = self.segmenter.segment(document.raw_text)

        issues = []
        passed = []

        for check in CHECKS:
            if getattr(self, check.detector)(document, sections):
                impact = self.config.impacts[check.type]
                issues.append(ATSIssue(
                    type=check.type,
                    description=self._describe(check, document),
                    impact=impact,
                    solution=check.solution
                ))
                logger.debug(f"ATS check failed: {check.type} (-{impact})")
            else:
                passed.append(check.passed_message)

        # Stable sort keeps check order among equal impacts
        issues.sort(key=lambda issue: -issue.impact)
        score = max(0, 100 - sum(issue.impact for issue in issues))

        logger.info(f"ATS score {score} ({len(issues)} failed, {len(passed)} passed)")
        return ATSReport(score=score, issues=issues, passed_checks=passed)

    @staticmethod
    def to_issues(report: ATSReport) -> List[Issue]:
        """Map ATS findings onto the common Issue type"""
        issues = []
        for ats_issue in report.issues:
            if ats_issue.impact > 15:
                severity = Severity.HIGH
            elif ats_issue.impact > 8:
                severity = Severity.MEDIUM
            else:
                severity = Severity.LOW

            issues.append(Issue(
                category="ats",
                severity=severity,
                description=ats_issue.description,
                suggestion=ats_issue.solution,
                impact=ats_issue.impact
            ))
        return issues

    # Detectors: return True when the check fails

    def _file_format(self, document: ResumeDocument, sections: List[Section]) -> bool:
        if document.file_type != FileType.OTHER:
            return False
        # Nothing declared means the caller handed over plain text
        return bool(document.mime_type or document.file_name)

    def _file_name(self, document: ResumeDocument, sections: List[Section]) -> bool:
        if not document.file_name:
            return False
        return bool(self.BAD_FILE_NAME.search(document.file_name))

    def _complex_tables(self, document: ResumeDocument, sections: List[Section]) -> bool:
        text = document.raw_text
        return bool(self.TABLE_MARKERS.search(text)) or len(self.PIPE_LINE.findall(text)) > 2

    def _columns(self, document: ResumeDocument, sections: List[Section]) -> bool:
        text = document.raw_text
        if self.COLUMN_MARKERS.search(text):
            return True
        tabbed = [line for line in text.splitlines() if self.DOUBLE_TABS.search(line)]
        return len(tabbed) > 3 or len(self.WIDE_GAPS.findall(text)) > 5

    def _images(self, document: ResumeDocument, sections: List[Section]) -> bool:
        return bool(self.IMAGE_MARKERS.search(document.raw_text))

    def _headers_footers(self, document: ResumeDocument, sections: List[Section]) -> bool:
        return bool(self.HEADER_FOOTER.search(document.raw_text))

    def _fancy_fonts(self, document: ResumeDocument, sections: List[Section]) -> bool:
        return bool(self.FANCY_FONTS.search(document.raw_text))

    def _special_characters(self, document: ResumeDocument, sections: List[Section]) -> bool:
        unusual = len(self.SAFE_CHARACTERS.sub('', document.raw_text))
        return unusual > self.config.special_character_limit

    def _text_boxes(self, document: ResumeDocument, sections: List[Section]) -> bool:
        return bool(self.TEXT_BOX.search(document.raw_text))

    def _section_headings(self, document: ResumeDocument, sections: List[Section]) -> bool:
        standard = {s.name for s in sections if s.heading and s.name in STANDARD_SECTIONS}
        return len(standard) < self.config.min_standard_headings

    def _contact_info(self, document: ResumeDocument, sections: List[Section]) -> bool:
        head = document.raw_text[:self.config.contact_window]
        return not (
            SectionSegmenter.EMAIL_PATTERN.search(head)
            or SectionSegmenter.PHONE_PATTERN.search(head)
            or SectionSegmenter.LINKEDIN_PATTERN.search(head)
        )

    @staticmethod
    def _describe(check: ATSCheck, document: ResumeDocument) -> str:
        if check.type == 'file_format':
            declared = document.mime_type or document.file_name or document.file_type.value
            return check.description.format(file_type=declared)
        return check.description


# Fixed evaluation order; presentation sorts failures by impact
CHECKS: List[ATSCheck] = [
    ATSCheck(
        'file_format',
        "File format of {file_type} may not be fully compatible with all ATS systems.",
        "Convert your resume to a standard .docx or .pdf format for better compatibility.",
        "File format is ATS-compatible",
        '_file_format',
    ),
    ATSCheck(
        'file_name',
        "File name contains spaces or special characters that may cause issues with some ATS systems.",
        "Rename your file using only letters, numbers, and underscores (e.g., John_Smith_Resume.pdf).",
        "File name is ATS-compatible",
        '_file_name',
    ),
    ATSCheck(
        'complex_tables',
        "Complex tables detected in resume, which many ATS systems cannot parse correctly.",
        "Replace tables with simple bullet points or plain text formatting.",
        "No complex tables detected",
        '_complex_tables',
    ),
    ATSCheck(
        'columns',
        "Multi-column layout detected, which can confuse ATS systems.",
        "Use a single-column layout for better ATS compatibility.",
        "Single-column layout detected",
        '_columns',
    ),
    ATSCheck(
        'images',
        "Images or graphics detected in resume, which ATS systems cannot read.",
        "Remove images, logos, and graphics from your resume.",
        "No images detected",
        '_images',
    ),
    ATSCheck(
        'headers_footers',
        "Headers or footers detected, which may be ignored by ATS systems.",
        "Move important information from headers/footers into the main body of your resume.",
        "No headers/footers detected",
        '_headers_footers',
    ),
    ATSCheck(
        'fancy_fonts',
        "Non-standard fonts detected, which may not render correctly in ATS systems.",
        "Use standard fonts like Arial, Calibri, or Times New Roman.",
        "Standard fonts detected",
        '_fancy_fonts',
    ),
    ATSCheck(
        'special_characters',
        "Special characters or symbols detected that may not parse correctly in ATS systems.",
        "Replace special characters with standard text alternatives.",
        "No problematic special characters detected",
        '_special_characters',
    ),
    ATSCheck(
        'text_boxes',
        "Text boxes detected, which may not be read by ATS systems.",
        "Convert text boxes to standard text in the document body.",
        "No text boxes detected",
        '_text_boxes',
    ),
    ATSCheck(
        'section_headings',
        "Non-standard section headings detected, which may confuse ATS systems.",
        "Use standard section headings like 'Experience', 'Education', and 'Skills'.",
        "Standard section headings detected",
        '_section_headings',
    ),
    ATSCheck(
        'contact_info',
        "Contact information may not be at the top of the resume, which is preferred for ATS systems.",
        "Place your name and contact information at the top of your resume.",
        "Contact information properly positioned",
        '_contact_info',
    ),
]
