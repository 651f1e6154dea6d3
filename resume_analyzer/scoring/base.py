# resume_analyzer/scoring/base.py
import re
from dataclasses import dataclass, field
from functools import cached_property
from typing import List, Optional, Pattern

from resume_analyzer.config import ScoringConfig
from resume_analyzer.keywords.extractor import KeywordExtraction
from resume_analyzer.models import (
    Issue, JobDescription, Keyword, ResumeDocument, Section, SectionName,
    Severity, SubScore
)

BULLET_LINE = re.compile(r'^\s*(?P<glyph>[•◦▪▫●○■□►▸‣⁃∙·*+\-–—]|\d{1,2}[.)])\s+(?P<text>\S.*)$')
WORD = re.compile(r"[A-Za-z][A-Za-z'\-]*")
METRIC = re.compile(r'\d+(?:\.\d+)?\s*(?:%|percent|x\b|k\b|m\b)|[$€£]\s?\d|\b\d{2,}\b')


def line_number(text: str, index: int) -> int:
    """1-based line number of a character offset"""
    return text.count('\n', 0, max(0, index)) + 1


def first_line_of(text: str, pattern: Pattern) -> Optional[int]:
    match = pattern.search(text)
    return line_number(text, match.start()) if match else None


def word_pattern(word: str) -> Pattern:
    return re.compile(r'(?<![\w-])' + re.escape(word) + r'(?![\w-])', re.IGNORECASE)


@dataclass(frozen=True)
class ScoringContext:
    """Immutable inputs shared by every scorer"""
    document: ResumeDocument
    sections: List[Section]
    extraction: KeywordExtraction
    job_description: Optional[JobDescription] = None
    industry: str = "general"
    config: ScoringConfig = field(default_factory=ScoringConfig)

    @property
    def text(self) -> str:
        return self.document.raw_text

    @property
    def keywords(self) -> List[Keyword]:
        return self.extraction.keywords

    @cached_property
    def lines(self) -> List[str]:
        return self.text.splitlines()

    @cached_property
    def words(self) -> List[str]:
        return WORD.findall(self.text)

    @cached_property
    def heading_lines(self) -> List[str]:
        return [s.heading for s in self.sections if s.heading]

    def section(self, name: SectionName) -> Optional[Section]:
        for section in self.sections:
            if section.name == name:
                return section
        return None

    def bullet_lines(self, text: Optional[str] = None) -> List[str]:
        """Text of every bulleted line (glyph stripped)"""
        source = self.text if text is None else text
        bullets = []
        for line in source.splitlines():
            match = BULLET_LINE.match(line)
            if match:
                bullets.append(match.group('text').strip())
        return bullets

    def body_lines(self) -> List[str]:
        """Non-empty lines that are not section headings"""
        headings = set(self.heading_lines)
        return [line for line in self.lines if line.strip() and line.strip() not in headings]


class Scorer:
    """
    Base class for heuristic scorers

    Subclasses set name/category and implement score(); values are
    clamped to [0, 100] by SubScore.
    """

    name: str = ""
    category: str = ""

    def score(self, context: ScoringContext) -> SubScore:
        raise NotImplementedError

    def _issue(
        self,
        severity: Severity,
        description: str,
        suggestion: str,
        impact: int = 0,
        line_number: Optional[int] = None
    ) -> Issue:
        return Issue(
            category=self.category,
            severity=severity,
            description=description,
            suggestion=suggestion,
            line_number=line_number,
            impact=impact
        )

    def _result(self, value: float, issues: List[Issue]) -> SubScore:
        return SubScore(name=self.name, value=value, issues=issues)
