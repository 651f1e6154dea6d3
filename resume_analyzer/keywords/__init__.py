# resume_analyzer/keywords/__init__.py
"""
Keyword extraction and resume/job-description matching
"""

from resume_analyzer.keywords.matcher import KeywordMatcher, MatchResult, TermIndex, stem_phrase
from resume_analyzer.keywords.extractor import KeywordExtractor, KeywordExtraction

__all__ = [
    'KeywordMatcher',
    'MatchResult',
    'TermIndex',
    'stem_phrase',
    'KeywordExtractor',
    'KeywordExtraction',
]
