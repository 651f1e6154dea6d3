# resume_analyzer/scoring/__init__.py
"""
Heuristic sub-scorers and the weighted composite
"""

from resume_analyzer.scoring.base import Scorer, ScoringContext
from resume_analyzer.scoring.content import KeywordScorer, ActionVerbScorer, RelevanceScorer
from resume_analyzer.scoring.language import GrammarScorer, LanguageToneScorer
from resume_analyzer.scoring.structure import (
    FormattingScorer, SectionScorer, BulletPointScorer, LengthScorer
)
from resume_analyzer.scoring.composite import CompositeScorer

__all__ = [
    'Scorer',
    'ScoringContext',
    'KeywordScorer',
    'ActionVerbScorer',
    'RelevanceScorer',
    'GrammarScorer',
    'LanguageToneScorer',
    'FormattingScorer',
    'SectionScorer',
    'BulletPointScorer',
    'LengthScorer',
    'CompositeScorer',
]
