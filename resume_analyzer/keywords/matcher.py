# resume_analyzer/keywords/matcher.py
import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple
from nltk.stem import PorterStemmer
from rapidfuzz import fuzz, process

from resume_analyzer.config import KeywordConfig
from resume_analyzer.models import MatchType
from resume_analyzer.vocabulary import SYNONYMS

logger = logging.getLogger(__name__)

_stemmer = PorterStemmer()


def stem_phrase(phrase: str) -> str:
    """Porter-stem every token of a normalized phrase"""
    return ' '.join(_stemmer.stem(token) for token in phrase.split())


def _build_synonym_table() -> Dict[str, Tuple[str, ...]]:
    """Symmetric lookup: any spelling -> every other spelling of the same term"""
    groups: Dict[str, set] = {}
    for canonical, variants in SYNONYMS.items():
        members = {canonical, *variants}
        for member in members:
            groups.setdefault(member, set()).update(members - {member})
    return {term: tuple(sorted(others)) for term, others in groups.items()}


_SYNONYM_TABLE = _build_synonym_table()


@dataclass(frozen=True)
class TermIndex:
    """Counts of every 1-3 gram in one text, by surface form and by stem"""
    terms: Dict[str, int] = field(default_factory=dict)
    stems: Dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_counts(cls, counts: Counter) -> 'TermIndex':
        stems: Counter = Counter()
        for term, count in counts.items():
            stems[stem_phrase(term)] += count
        return cls(terms=dict(counts), stems=dict(stems))


@dataclass(frozen=True)
class MatchResult:
    match_type: MatchType
    matched_text: Optional[str]
    count: int

    @property
    def found(self) -> bool:
        return self.match_type != MatchType.MISSING


class KeywordMatcher:
    """
    Match job-description terms against a resume term index
    """

    def __init__(self, config: Optional[KeywordConfig] = None):
        self.config = config or KeywordConfig()

    def match(self, term: str, index: TermIndex) -> MatchResult:
        """
        Find a term in the resume

        Tries exact, synonym, stemmed and fuzzy matching in that order.

        Args:
            term: Normalized term from the job description
            index: Resume term index

        Returns:
            MatchResult with the resume spelling that matched
        """
        # 1. Exact
        if term in index.terms:
            return MatchResult(MatchType.EXACT, term, index.terms[term])

        # 2. Synonym
        for alternative in _SYNONYM_TABLE.get(term, ()):
            if alternative in index.terms:
                return MatchResult(MatchType.SYNONYM, alternative, index.terms[alternative])

        # 3. Stemmed
        key = stem_phrase(term)
        if key in index.stems:
            return MatchResult(MatchType.STEMMED, term, index.stems[key])

        # 4. Fuzzy (typos, hyphenation)
        fuzzy = self._fuzzy_match(term, index)
        if fuzzy:
            return fuzzy

        return MatchResult(MatchType.MISSING, None, 0)

    def contains(self, term: str, index: TermIndex) -> bool:
        return self.match(term, index).found

    def _fuzzy_match(self, term: str, index: TermIndex) -> Optional[MatchResult]:
        if len(term) < self.config.fuzzy_min_length:
            return None

        width = len(term.split())
        candidates = sorted(
            t for t in index.terms
            if len(t.split()) == width and len(t) >= self.config.fuzzy_min_length
        )
        if not candidates:
            return None

        best = process.extractOne(
            term,
            candidates,
            scorer=fuzz.ratio,
            score_cutoff=self.config.fuzzy_threshold
        )
        if best is None:
            return None

        matched = best[0]
        return MatchResult(MatchType.FUZZY, matched, index.terms[matched])
