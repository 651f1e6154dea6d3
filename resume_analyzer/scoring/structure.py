# resume_analyzer/scoring/structure.py
import re
import logging
from typing import List

from resume_analyzer.models import SectionName, Severity, SubScore
from resume_analyzer.scoring.base import (
    BULLET_LINE, METRIC, Scorer, ScoringContext, line_number
)
from resume_analyzer.section_segmenter import SectionSegmenter
from resume_analyzer.vocabulary import SENIORITY_MARKERS

logger = logging.getLogger(__name__)

MONTHS = r'(?:jan|feb|mar|apr|may|jun|jul|aug|sep|sept|oct|nov|dec)[a-z]*\.?'


class FormattingScorer(Scorer):
    """
    Layout consistency: bullets, dates, spacing, line length, quotes
    """

    name = "formatting"
    category = "formatting"

    # Checked in this order; full dates first so MM/YYYY does not double count
    DATE_FORMATS = (
        ('full_numeric', re.compile(r'\b\d{1,2}[/.-]\d{1,2}[/.-]\d{2,4}\b')),
        ('month_year', re.compile(r'\b' + MONTHS + r'\s+\d{4}\b', re.IGNORECASE)),
        ('numeric_month_year', re.compile(r'\b(?:0?[1-9]|1[0-2])/\d{4}\b')),
        ('iso_month', re.compile(r'\b\d{4}-(?:0[1-9]|1[0-2])\b')),
    )

    IRREGULAR_SPACING = re.compile(r'\S(?: {3,}|\t+)\S')
    BOX_DRAWING = re.compile(r'[\u2500-\u257f]|\+-{3,}\+?')
    SMART_QUOTES = re.compile(r'[“”‘’]')
    STRAIGHT_QUOTES = re.compile(r'["\']')

    MAX_LINE_LENGTH = 120
    MAX_WHITESPACE_RATIO = 0.3

    def score(self, context: ScoringContext) -> SubScore:
        text = context.text
        issues = []
        value = 100

        # 1. Bullet glyph consistency
        glyphs = set()
        for line in context.lines:
            match = BULLET_LINE.match(line)
            if match:
                glyph = match.group('glyph')
                glyphs.add('number' if glyph[0].isdigit() else glyph)
        if len(glyphs) > 1:
            value -= 15
            issues.append(self._issue(
                Severity.MEDIUM,
                f"Inconsistent bullet styles ({len(glyphs)} different markers)",
                "Use a single bullet character throughout the resume",
                impact=15
            ))

        # 2. Date formats
        formats = self._date_formats(text)
        if len(formats) > 2:
            value -= 10
            issues.append(self._issue(
                Severity.MEDIUM,
                f"Dates use {len(formats)} different formats",
                "Pick one date format (e.g. 'Jan 2021 - Mar 2023') and use it everywhere",
                impact=10
            ))

        # 3. Irregular spacing and tabs
        spaced = [i for i, line in enumerate(context.lines, 1) if self.IRREGULAR_SPACING.search(line)]
        if len(spaced) > 3:
            value -= 10
            issues.append(self._issue(
                Severity.LOW,
                f"Irregular spacing or tabs on {len(spaced)} lines",
                "Align text with single spaces instead of runs of spaces or tabs",
                impact=10,
                line_number=spaced[0]
            ))

        # 4. Overlong lines
        long_lines = [i for i, line in enumerate(context.lines, 1) if len(line) > self.MAX_LINE_LENGTH]
        if len(long_lines) > 2:
            value -= 10
            issues.append(self._issue(
                Severity.LOW,
                f"{len(long_lines)} lines exceed {self.MAX_LINE_LENGTH} characters",
                "Split long lines into concise bullet points",
                impact=10,
                line_number=long_lines[0]
            ))

        # 5. Mixed quote styles
        if self.SMART_QUOTES.search(text) and self.STRAIGHT_QUOTES.search(text):
            value -= 5
            issues.append(self._issue(
                Severity.LOW,
                "Smart quotes mixed with straight quotes",
                "Use one quote style consistently",
                impact=5
            ))

        # 6. Box-drawing tables
        box = self.BOX_DRAWING.search(text)
        if box:
            value -= 10
            issues.append(self._issue(
                Severity.MEDIUM,
                "Box-drawing or ASCII table characters found",
                "Replace drawn tables with plain lines of text",
                impact=10,
                line_number=line_number(text, box.start())
            ))

        # 7. Whitespace ratio
        whitespace = sum(1 for c in text if c.isspace())
        if text and whitespace / len(text) > self.MAX_WHITESPACE_RATIO:
            value -= 10
            issues.append(self._issue(
                Severity.LOW,
                f"Whitespace makes up {round(100 * whitespace / len(text))}% of the document",
                "Remove excess blank lines and padding",
                impact=10
            ))

        # 8. Heading case
        headings = context.heading_lines
        if len(headings) > 1:
            upper = [h.isupper() for h in headings]
            if any(upper) and not all(upper):
                value -= 5
                issues.append(self._issue(
                    Severity.LOW,
                    "Section headings mix upper case and title case",
                    "Format every section heading the same way",
                    impact=5
                ))

        return self._result(value, issues)

    def _date_formats(self, text: str) -> List[str]:
        found = []
        remaining = text
        for name, pattern in self.DATE_FORMATS:
            if pattern.search(remaining):
                found.append(name)
                remaining = pattern.sub(' ', remaining)
        return found


class SectionScorer(Scorer):
    """
    Presence and completeness of the expected resume sections
    """

    name = "section"
    category = "sections"

    # Points per required section, totalling 100
    REQUIRED = {
        SectionName.CONTACT: 20,
        SectionName.SUMMARY: 15,
        SectionName.EXPERIENCE: 30,
        SectionName.EDUCATION: 20,
        SectionName.SKILLS: 15,
    }

    MIN_SECTION_WORDS = 15

    def score(self, context: ScoringContext) -> SubScore:
        issues = []
        value = 100

        for name, weight in self.REQUIRED.items():
            label = name.value

            if name == SectionName.CONTACT:
                present, weak = self._contact_status(context)
            else:
                section = context.section(name)
                present = section is not None
                weak = present and section.word_count < self.MIN_SECTION_WORDS

            if not present:
                value -= weight
                issues.append(self._issue(
                    Severity.CRITICAL if name == SectionName.EXPERIENCE else Severity.HIGH,
                    f"Missing {label} section",
                    f"Add a clearly labelled '{label.title()}' section",
                    impact=weight
                ))
            elif weak:
                penalty = weight // 2
                value -= penalty
                issues.append(self._issue(
                    Severity.MEDIUM,
                    f"The {label} section is thin",
                    self._weak_advice(name),
                    impact=penalty
                ))

        return self._result(value, issues)

    def _contact_status(self, context: ScoringContext):
        head = context.text[:500]
        has_details = bool(
            SectionSegmenter.EMAIL_PATTERN.search(head)
            or SectionSegmenter.PHONE_PATTERN.search(head)
        )
        section = context.section(SectionName.CONTACT)

        if section is None:
            return has_details, False

        details_in_section = bool(
            SectionSegmenter.EMAIL_PATTERN.search(section.content)
            or SectionSegmenter.PHONE_PATTERN.search(section.content)
        )
        return True, not details_in_section

    @staticmethod
    def _weak_advice(name: SectionName) -> str:
        advice = {
            SectionName.CONTACT: "Include an email address and phone number",
            SectionName.SUMMARY: "Write a 2-3 sentence summary of your experience and strengths",
            SectionName.EXPERIENCE: "Describe each role with 3-5 achievement-focused bullet points",
            SectionName.EDUCATION: "List degree, institution and graduation year",
            SectionName.SKILLS: "List the tools, technologies and skills relevant to your target role",
        }
        return advice[name]


class BulletPointScorer(Scorer):
    """
    Share of experience content written as bullets rather than paragraphs
    """

    name = "bullet_point"
    category = "bullet_points"

    # Short lines without a full stop are titles, companies or dates
    STRUCTURAL_MAX_WORDS = 8
    WALL_OF_TEXT_WORDS = 40

    def score(self, context: ScoringContext) -> SubScore:
        experience = context.section(SectionName.EXPERIENCE)
        region = experience.body.splitlines() if experience else context.body_lines()

        bullets = 0
        paragraphs = []
        metric_lines = 0

        for number, line in enumerate(region, 1):
            stripped = line.strip()
            if not stripped:
                continue
            if METRIC.search(stripped):
                metric_lines += 1
            if BULLET_LINE.match(line):
                bullets += 1
            elif len(stripped.split()) > self.STRUCTURAL_MAX_WORDS or stripped.endswith('.'):
                paragraphs.append(stripped)

        issues = []
        content_lines = bullets + len(paragraphs)

        if content_lines == 0:
            issues.append(self._issue(
                Severity.MEDIUM,
                "No experience descriptions found",
                "Describe each role with bullet points covering scope and results",
                impact=50
            ))
            return self._result(50, issues)

        value = 100 * bullets / content_lines
        if value < 60:
            issues.append(self._issue(
                Severity.MEDIUM,
                f"Only {bullets} of {content_lines} experience statements are bullet points",
                "Convert paragraphs into short bullet points that start with an action verb",
                impact=round(100 - value)
            ))

        walls = [p for p in paragraphs if len(p.split()) > self.WALL_OF_TEXT_WORDS]
        if walls:
            penalty = min(10 * len(walls), 30)
            value -= penalty
            issues.append(self._issue(
                Severity.MEDIUM,
                f"{len(walls)} dense paragraph(s) over {self.WALL_OF_TEXT_WORDS} words",
                "Break dense paragraphs into 3-5 bullets of one line each",
                impact=penalty
            ))

        if metric_lines > 3:
            value += 10

        return self._result(value, issues)


class LengthScorer(Scorer):
    """
    Word count with a linear penalty outside the ideal range
    """

    name = "length"
    category = "length"

    SENIORITY_YEARS = re.compile(r'\b(?:1\d|[2-9]\d)\+?\s+years\b', re.IGNORECASE)

    def score(self, context: ScoringContext) -> SubScore:
        config = context.config
        words = context.document.word_count
        max_words = config.senior_max_words if self.is_senior(context.text) else config.max_words
        floor = config.length_floor
        issues = []

        if words < config.min_words:
            value = floor + (100 - floor) * words / config.min_words
            issues.append(self._issue(
                Severity.MEDIUM if words < 200 else Severity.LOW,
                f"Resume is short ({words} words)",
                f"Aim for {config.min_words}-{max_words} words; add achievements, skills and project detail",
                impact=round(100 - value)
            ))
        elif words > max_words:
            value = max(floor, 100 - (words - max_words) / 20)
            issues.append(self._issue(
                Severity.MEDIUM if words > max_words * 1.5 else Severity.LOW,
                f"Resume is long ({words} words)",
                f"Trim to under {max_words} words by cutting older or less relevant detail",
                impact=round(100 - value)
            ))
        else:
            value = 100

        return self._result(value, issues)

    def is_senior(self, text: str) -> bool:
        lower = text.lower()
        return bool(self.SENIORITY_YEARS.search(text)) or any(m in lower for m in SENIORITY_MARKERS)
