# resume_analyzer/ats/__init__.py
"""
ATS (Applicant Tracking System) compatibility checks
"""

from resume_analyzer.ats.checker import ATSChecker, ATSCheck, CHECKS

__all__ = [
    'ATSChecker',
    'ATSCheck',
    'CHECKS',
]
