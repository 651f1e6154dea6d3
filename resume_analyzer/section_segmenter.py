# resume_analyzer/section_segmenter.py
import re
import logging
from typing import List, Optional, Tuple
from rapidfuzz import fuzz, process

from resume_analyzer.config import SegmenterConfig
from resume_analyzer.exceptions import InvalidInputError
from resume_analyzer.models import Section, SectionName
from resume_analyzer.vocabulary import SECTION_ALIASES

logger = logging.getLogger(__name__)


class SectionSegmenter:
    """
    Split plain resume text into named sections using heading heuristics

    Sections are contiguous and together cover every character of the
    input, so joining their contents reproduces the text exactly.
    """

    EMAIL_PATTERN = re.compile(r'[\w.+-]+@[\w-]+(?:\.[\w-]+)+')
    PHONE_PATTERN = re.compile(r'(?:\+?\d{1,3}[\s.-]?)?\(?\d{3}\)?[\s.-]?\d{3}[\s.-]?\d{4}\b')
    LINKEDIN_PATTERN = re.compile(r'linkedin\.com/', re.IGNORECASE)

    # Leading/trailing decoration around headings ("== SKILLS ==", "## Education:")
    DECORATION = re.compile(r'^[\W_]+|[\W_]+$')
    INNER_SPACES = re.compile(r'\s+')
    BULLET_PREFIX = re.compile(r'^[•◦▪▫●○■□►▸‣⁃∙·*+\-–—]\s')

    def __init__(self, config: Optional[SegmenterConfig] = None):
        self.config = config or SegmenterConfig()

        # Alias table in a fixed order so lookups are deterministic
        self._aliases: List[Tuple[str, SectionName]] = [
            (alias, name)
            for name, aliases in SECTION_ALIASES.items()
            for alias in aliases
        ]
        self._alias_lookup = {alias: name for alias, name in self._aliases}
        self._alias_choices = [alias for alias, _ in self._aliases]

    def segment(self, text: str) -> List[Section]:
        """
        Segment resume text

        Args:
            text: Plain resume text

        Returns:
            Ordered, non-overlapping sections covering the whole text

        Raises:
            InvalidInputError: text is empty or whitespace only
        """
        if text is None or not text.strip():
            raise InvalidInputError("Resume text is empty", field="resume_text")

        markers = self._find_headings(text)

        if not markers:
            logger.info("No section headings detected, returning single section")
            return [Section(SectionName.OTHER, "", text, 0, len(text))]

        sections = []

        # 1. Leading text before the first heading
        first_start = markers[0][0]
        leading = text[:first_start]
        if leading.strip():
            sections.append(Section(
                name=self._classify_leading(leading),
                heading="",
                content=leading,
                start_offset=0,
                end_offset=first_start
            ))
        else:
            # Blank lead-in is folded into the first section
            first_start = 0

        # 2. One section per heading, running until the next heading
        for index, (start, name, heading) in enumerate(markers):
            begin = first_start if index == 0 else start
            end = markers[index + 1][0] if index + 1 < len(markers) else len(text)

            sections.append(Section(
                name=name,
                heading=heading,
                content=text[begin:end],
                start_offset=begin,
                end_offset=end
            ))

        logger.info(f"Segmented resume into {len(sections)} sections")
        return sections

    def classify_heading(self, line: str, isolated: bool = False) -> Optional[SectionName]:
        """
        Decide whether a line is a section heading

        Args:
            line: Raw line (may include the line break)
            isolated: Line is surrounded by blank lines

        Returns:
            Canonical section name, or None when the line is body text
        """
        stripped = line.strip()
        if not stripped or len(stripped) > self.config.max_heading_length:
            return None
        if self.BULLET_PREFIX.match(stripped):
            return None

        normalized = self.normalize_heading(stripped)
        if not normalized or len(normalized.split()) > self.config.max_heading_words:
            return None

        emphatic = stripped.isupper() or stripped.endswith(':')
        styled = emphatic or stripped.istitle()

        name = self._lookup_alias(normalized, allow_containment=emphatic)
        if name is None:
            return None

        if styled or isolated:
            return name
        return None

    def normalize_heading(self, heading: str) -> str:
        heading = heading.lower().replace('&', ' and ')
        heading = self.DECORATION.sub('', heading)
        return self.INNER_SPACES.sub(' ', heading).strip()

    @staticmethod
    def find(sections: List[Section], name: SectionName) -> Optional[Section]:
        """First section with the given name"""
        for section in sections:
            if section.name == name:
                return section
        return None

    @staticmethod
    def names(sections: List[Section]) -> List[SectionName]:
        """Distinct section names in document order"""
        seen = []
        for section in sections:
            if section.name not in seen:
                seen.append(section.name)
        return seen

    def _find_headings(self, text: str) -> List[Tuple[int, SectionName, str]]:
        """Scan lines and collect (offset, name, heading text) markers"""
        lines = text.splitlines(keepends=True)
        markers = []
        offset = 0

        for index, line in enumerate(lines):
            previous_blank = index == 0 or not lines[index - 1].strip()
            next_blank = index + 1 >= len(lines) or not lines[index + 1].strip()

            name = self.classify_heading(line, isolated=previous_blank and next_blank)
            if name is not None:
                markers.append((offset, name, line.strip()))
                logger.debug(f"Heading '{line.strip()}' -> {name.value} at offset {offset}")

            offset += len(line)

        return markers

    def _lookup_alias(self, normalized: str, allow_containment: bool) -> Optional[SectionName]:
        # 1. Exact alias
        if normalized in self._alias_lookup:
            return self._alias_lookup[normalized]

        # 2. Alias contained as whole words in a short emphatic heading
        if allow_containment and len(normalized.split()) <= 3:
            padded = f" {normalized} "
            contained = [
                (alias, name) for alias, name in self._aliases
                if f" {alias} " in padded
            ]
            if contained:
                # Longest alias wins; table order breaks ties
                contained.sort(key=lambda item: -len(item[0]))
                return contained[0][1]

        # 3. Fuzzy match for typos and plurals
        best = process.extractOne(
            normalized,
            self._alias_choices,
            scorer=fuzz.ratio,
            score_cutoff=self.config.heading_fuzzy_threshold
        )
        if best:
            return self._alias_lookup[best[0]]

        return None

    def _classify_leading(self, text: str) -> SectionName:
        if (self.EMAIL_PATTERN.search(text)
                or self.PHONE_PATTERN.search(text)
                or self.LINKEDIN_PATTERN.search(text)):
            return SectionName.CONTACT
        return SectionName.OTHER
