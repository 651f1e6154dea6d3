# resume_analyzer/__init__.py
"""
Resume analysis and scoring engine
"""

from resume_analyzer.analyzer import ResumeAnalyzer, analyze, analyze_realtime
from resume_analyzer.config import AnalyzerConfig, get_config
from resume_analyzer.exceptions import (
    ResumeAnalyzerError, InvalidInputError, ExtractionUpstreamError,
    ScorerFailure, AIProviderFailure, ConfigurationError
)
from resume_analyzer.models import (
    AnalysisResult, AIResult, AISuggestion, Issue, Keyword, Section,
    SectionName, Severity, FileType
)

__version__ = "0.1.0"

__all__ = [
    'ResumeAnalyzer',
    'analyze',
    'analyze_realtime',
    'AnalyzerConfig',
    'get_config',
    'ResumeAnalyzerError',
    'InvalidInputError',
    'ExtractionUpstreamError',
    'ScorerFailure',
    'AIProviderFailure',
    'ConfigurationError',
    'AnalysisResult',
    'AIResult',
    'AISuggestion',
    'Issue',
    'Keyword',
    'Section',
    'SectionName',
    'Severity',
    'FileType',
]
