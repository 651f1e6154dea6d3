# resume_analyzer/keywords/extractor.py
import re
import logging
from collections import Counter
from dataclasses import dataclass
from typing import List, Dict, Optional, Tuple, FrozenSet
import nltk
from nltk.corpus import stopwords
from nltk.tokenize import RegexpTokenizer
from nltk.tokenize.punkt import PunktSentenceTokenizer

from resume_analyzer.config import KeywordConfig
from resume_analyzer.keywords.matcher import KeywordMatcher, TermIndex, stem_phrase
from resume_analyzer.models import Keyword, KeywordCategory, KeywordSource, MatchType
from resume_analyzer.vocabulary import (
    CERTIFICATIONS, EXTRA_STOP_WORDS, SOFT_SKILLS, SYNONYMS, TECHNICAL_SKILLS
)

logger = logging.getLogger(__name__)


# Download required NLTK data (run once)
def _ensure_nltk_data():
    """Ensure the stopwords corpus is present"""
    try:
        nltk.data.find('corpora/stopwords')
    except LookupError:
        logger.info("Downloading NLTK data: stopwords")
        nltk.download('stopwords', quiet=True)


def _load_stop_words() -> FrozenSet[str]:
    try:
        words = set(stopwords.words('english'))
    except LookupError:
        logger.warning("NLTK stopwords corpus unavailable, filtering with resume filler list only")
        words = set()
    return frozenset(words | EXTRA_STOP_WORDS)


# Call on module import
_ensure_nltk_data()
STOP_WORDS = _load_stop_words()

# Multi-word terms that are kept even when they appear once
CURATED_PHRASES = frozenset(
    term for term in TECHNICAL_SKILLS | SOFT_SKILLS | CERTIFICATIONS if ' ' in term
)

# Technical terms spelled differently, e.g. "k8s" counts as technical
TECHNICAL_ALIASES = frozenset(
    variant
    for canonical, variants in SYNONYMS.items()
    if canonical in TECHNICAL_SKILLS
    for variant in variants
)


@dataclass(frozen=True)
class KeywordExtraction:
    """Keywords plus the term indexes they were built from"""
    keywords: List[Keyword]
    resume_index: TermIndex
    job_index: Optional[TermIndex] = None

    @property
    def job_keywords(self) -> List[Keyword]:
        return [k for k in self.keywords if k.is_from_job_description]

    @property
    def matched(self) -> List[Keyword]:
        return [k for k in self.keywords if k.is_match]

    @property
    def missing(self) -> List[Keyword]:
        return [k for k in self.keywords if k.is_from_job_description and not k.is_match]


class KeywordExtractor:
    """
    Extract and match keywords from resume and job description text
    """

    # Keeps tech spellings together: c++, c#, node.js, ci/cd, scikit-learn
    TOKEN_PATTERN = r"[a-z0-9][a-z0-9+#]*(?:[./\-][a-z0-9+#]+)*"

    # Phrase boundaries inside a sentence
    CHUNK_SPLIT = re.compile(r'[,;:|()\[\]{}•·▪●■►"]+|\s[-–—]\s')
    NUMERIC = re.compile(r'^[\d.,/+\-#]+$')

    def __init__(
        self,
        config: Optional[KeywordConfig] = None,
        matcher: Optional[KeywordMatcher] = None
    ):
        self.config = config or KeywordConfig()
        self.matcher = matcher or KeywordMatcher(self.config)
        self.tokenizer = RegexpTokenizer(self.TOKEN_PATTERN)
        self.sentence_tokenizer = PunktSentenceTokenizer()
        self.stop_words = STOP_WORDS

    def extract(
        self,
        resume_text: str,
        job_description_text: Optional[str] = None
    ) -> List[Keyword]:
        """
        Extract keywords

        Args:
            resume_text: Plain resume text
            job_description_text: Optional job posting

        Returns:
            Deduplicated keywords ordered by importance, count, then text
        """
        return self.extract_with_index(resume_text, job_description_text).keywords

    def extract_with_index(
        self,
        resume_text: str,
        job_description_text: Optional[str] = None
    ) -> KeywordExtraction:
        """Extract keywords and keep the term indexes for relevance scoring"""
        logger.info("Extracting keywords")

        # 1. Count candidate terms in each text
        resume_counts = self.count_terms(resume_text)
        resume_index = TermIndex.from_counts(resume_counts)

        job_index = None
        job_keywords: List[Keyword] = []
        matched_stems = set()

        # 2. Job-description terms, each matched against the resume
        if job_description_text and job_description_text.strip():
            job_counts = self.count_terms(job_description_text)
            job_index = TermIndex.from_counts(job_counts)

            for display, job_count in self._group(self._select_terms(job_counts)):
                result = self.matcher.match(display, resume_index)
                if result.found:
                    matched_stems.add(stem_phrase(result.matched_text))
                    matched_stems.add(stem_phrase(display))

                job_keywords.append(Keyword(
                    text=display,
                    normalized_text=display.strip().lower(),
                    count=job_count + result.count,
                    is_from_job_description=True,
                    is_match=result.found,
                    category=self.categorize(display),
                    importance=self.importance(display, job_count),
                    source=KeywordSource.BOTH if result.found else KeywordSource.JOB_DESCRIPTION,
                    match_type=result.match_type
                ))

        # 3. Resume-only terms: curated vocabulary or repeated
        job_stems = {stem_phrase(k.normalized_text) for k in job_keywords} | matched_stems
        resume_keywords = []

        for display, count in self._group(self._select_terms(resume_counts)):
            if stem_phrase(display) in job_stems:
                continue

            category = self.categorize(display)
            if category == KeywordCategory.GENERAL and count < self.config.min_phrase_count:
                continue

            resume_keywords.append(Keyword(
                text=display,
                normalized_text=display.strip().lower(),
                count=count,
                is_from_job_description=False,
                is_match=False,
                category=category,
                importance=self.importance(display, count),
                source=KeywordSource.RESUME,
                match_type=MatchType.MISSING
            ))

        resume_keywords = self._rank(resume_keywords)[:self.config.max_keywords]
        keywords = self._rank(job_keywords + resume_keywords)

        logger.info(
            f"Extracted {len(keywords)} keywords "
            f"({len(job_keywords)} from job description, "
            f"{len([k for k in job_keywords if k.is_match])} matched)"
        )
        return KeywordExtraction(keywords=keywords, resume_index=resume_index, job_index=job_index)

    def count_terms(self, text: str) -> Counter:
        """
        Count 1..max_ngram grams built from stop-word-free token runs

        Args:
            text: Any text

        Returns:
            Counter of normalized terms
        """
        counts: Counter = Counter()
        if not text:
            return counts

        for chunk in self._chunks(text):
            run: List[str] = []
            for token in self.tokenizer.tokenize(chunk.lower()) + [None]:
                if token is None or self.is_stop_token(token):
                    self._add_ngrams(run, counts)
                    run = []
                else:
                    run.append(token)

        return counts

    def is_stop_token(self, token: str) -> bool:
        if token in self.stop_words:
            return True
        if self.NUMERIC.match(token):
            return True
        return len(token) == 1 and token not in TECHNICAL_SKILLS

    def categorize(self, term: str) -> KeywordCategory:
        """Dictionary lookup with general as fallback"""
        if term in CERTIFICATIONS or any(cert in term for cert in CERTIFICATIONS if ' ' in cert):
            return KeywordCategory.CERTIFICATION
        if term in TECHNICAL_SKILLS or term in TECHNICAL_ALIASES:
            return KeywordCategory.TECHNICAL
        if term in SOFT_SKILLS:
            return KeywordCategory.SOFT
        return KeywordCategory.GENERAL

    def importance(self, term: str, frequency: int) -> int:
        """
        Importance on a 1-5 scale

        Factors:
        - Frequency over 5: +2, over 2: +1
        - Longer than 8 characters: +1
        - Certification: +2, curated technical skill: +1
        """
        importance = 1

        if frequency > 5:
            importance += 2
        elif frequency > 2:
            importance += 1

        if len(term) > 8:
            importance += 1

        category = self.categorize(term)
        if category == KeywordCategory.CERTIFICATION:
            importance += 2
        elif category == KeywordCategory.TECHNICAL:
            importance += 1

        return min(importance, 5)

    def _chunks(self, text: str) -> List[str]:
        chunks = []
        for line in text.splitlines():
            if not line.strip():
                continue
            for sentence in self.sentence_tokenizer.tokenize(line):
                chunks.extend(c for c in self.CHUNK_SPLIT.split(sentence) if c.strip())
        return chunks

    def _add_ngrams(self, run: List[str], counts: Counter):
        for n in range(1, self.config.max_ngram + 1):
            for start in range(len(run) - n + 1):
                counts[' '.join(run[start:start + n])] += 1

    def _select_terms(self, counts: Counter) -> Dict[str, int]:
        """Keep unigrams, plus phrases that repeat or are curated"""
        selected = {}
        for term, count in counts.items():
            if ' ' not in term:
                selected[term] = count
            elif count >= self.config.min_phrase_count or term in CURATED_PHRASES:
                selected[term] = count

        # Drop plain words that only ever occur inside a kept curated phrase
        phrases = [t for t in selected if ' ' in t and t in CURATED_PHRASES]
        for phrase in phrases:
            for word in phrase.split():
                if (word in selected
                        and selected[word] == selected[phrase]
                        and self.categorize(word) == KeywordCategory.GENERAL):
                    del selected[word]

        return selected

    def _group(self, terms: Dict[str, int]) -> List[Tuple[str, int]]:
        """
        Merge spellings sharing a stem key

        Returns:
            (display form, total count) pairs; the display form is the most
            frequent spelling, ties broken lexically
        """
        groups: Dict[str, List[Tuple[str, int]]] = {}
        for term, count in terms.items():
            groups.setdefault(stem_phrase(term), []).append((term, count))

        merged = []
        for key in sorted(groups):
            members = sorted(groups[key], key=lambda item: (-item[1], item[0]))
            merged.append((members[0][0], sum(count for _, count in members)))
        return merged

    @staticmethod
    def _rank(keywords: List[Keyword]) -> List[Keyword]:
        return sorted(keywords, key=lambda k: (-k.importance, -k.count, k.normalized_text))
