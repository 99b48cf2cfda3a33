"""
Custom Exceptions for the Recruiting Engine

Hierarchical exception classes for the engine's boundaries. The scoring
functions themselves sanitise their inputs and never raise these.
"""

from typing import Optional, Dict, Any


class RecruitingEngineError(Exception):
    """Base exception for all recruiting engine errors."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.original_error = original_error

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details
        }


class ValidationError(RecruitingEngineError):
    """Raised when strict input validation fails."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Any = None,
        original_error: Optional[Exception] = None
    ):
        details = {}
        if field:
            details["field"] = field
            details["value"] = value
        super().__init__(message, details, original_error)


class ConfigurationError(RecruitingEngineError):
    """Raised when configuration is missing or invalid."""

    def __init__(
        self,
        message: str,
        missing_keys: Optional[list] = None,
        invalid_keys: Optional[list] = None,
        original_error: Optional[Exception] = None
    ):
        details = {}
        if missing_keys:
            details["missing_keys"] = missing_keys
        if invalid_keys:
            details["invalid_keys"] = invalid_keys
        super().__init__(message, details, original_error)
