# resume_analyzer/exceptions.py
"""
Error taxonomy for the analysis engine
"""
from typing import Optional, Dict, Any


class ResumeAnalyzerError(Exception):
    """Base exception for all analysis errors"""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.error_code = error_code or self.__class__.__name__.upper()
        self.details = details or {}
        super().__init__(self.message)


class InvalidInputError(ResumeAnalyzerError):
    """Resume text is missing or blank; no partial result is produced"""

    def __init__(self, message: str, field: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        error_details = details or {}
        if field:
            error_details["field"] = field

        super().__init__(
            message=message,
            error_code="INVALID_INPUT",
            details=error_details
        )


class ExtractionUpstreamError(ResumeAnalyzerError):
    """Raised by callers when the text extractor fails; surfaced unchanged"""

    def __init__(
        self,
        message: str,
        file_name: Optional[str] = None,
        mime_type: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        error_details = details or {}
        if file_name:
            error_details["file_name"] = file_name
        if mime_type:
            error_details["mime_type"] = mime_type

        super().__init__(
            message=message,
            error_code="EXTRACTION_UPSTREAM_ERROR",
            details=error_details
        )


class ScorerFailure(ResumeAnalyzerError):
    """A single heuristic stage failed; the pipeline substitutes a zero sub-score"""

    def __init__(self, scorer_name: str, message: str, details: Optional[Dict[str, Any]] = None):
        error_details = details or {}
        error_details["scorer"] = scorer_name
        self.scorer_name = scorer_name

        super().__init__(
            message=message,
            error_code="SCORER_FAILURE",
            details=error_details
        )


class AIProviderFailure(ResumeAnalyzerError):
    """Timeout, transport error or unusable reply from the AI provider"""

    def __init__(
        self,
        message: str,
        provider: Optional[str] = None,
        retryable: bool = False,
        details: Optional[Dict[str, Any]] = None
    ):
        error_details = details or {}
        if provider:
            error_details["provider"] = provider
        error_details["retryable"] = retryable
        self.retryable = retryable

        super().__init__(
            message=message,
            error_code="AI_PROVIDER_FAILURE",
            details=error_details
        )


class ConfigurationError(ResumeAnalyzerError):
    """Invalid or unreadable configuration"""

    def __init__(self, message: str, config_key: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        error_details = details or {}
        if config_key:
            error_details["config_key"] = config_key

        super().__init__(
            message=message,
            error_code="CONFIGURATION_ERROR",
            details=error_details
        )
