# resume_analyzer/industry/__init__.py
"""
Industry detection and industry-specific scoring
"""

from resume_analyzer.industry.profiles import IndustryProfile, PROFILES, get_profile
from resume_analyzer.industry.classifier import IndustryClassifier, IndustryMatch

__all__ = [
    'IndustryProfile',
    'PROFILES',
    'get_profile',
    'IndustryClassifier',
    'IndustryMatch',
]
