# resume_analyzer/ai/__init__.py
"""
Optional AI-generated suggestions
"""

from resume_analyzer.ai.client import AIProvider, LLMClient
from resume_analyzer.ai.suggestions import AISuggestionAdapter

__all__ = [
    'AIProvider',
    'LLMClient',
    'AISuggestionAdapter',
]
