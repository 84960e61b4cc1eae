# src/bucket_lister/exceptions.py

"""
Shared custom exceptions for the Bucket Lister service.

Centralizing exception definitions in a separate module prevents circular
import errors between other modules that need to raise or catch them.

Exception Hierarchy:
- BucketListerError (base)
  - BucketListingError
  - ConfigurationError

There is deliberately a single listing error: throttling, access denied and
connection failures all surface the same way to the caller.
"""

from typing import Any, Dict, Optional


class BucketListerError(Exception):
    """Base exception for all Bucket Lister service errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.context = dict(context) if context else {}  # Copy context to prevent mutation

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for structured logging."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "context": self.context,
        }


class BucketListingError(BucketListerError):
    """Raised when the remote ListBuckets call fails for any reason."""

    def __init__(self, message: str, **kwargs):
        if "error_code" not in kwargs:
            kwargs["error_code"] = "LIST_BUCKETS_FAILED"
        super().__init__(message, **kwargs)


class ConfigurationError(BucketListerError):
    """Raised when there's an error in the application configuration."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message, error_code="CONFIGURATION_ERROR", **kwargs)


# === Utility Functions ===


def get_error_message(error: Exception) -> str:
    """Return the human-readable text of an error, whatever its type."""
    if isinstance(error, BucketListerError):
        return error.message
    return str(error)


def get_error_context(error: Exception) -> Dict[str, Any]:
    """Extract error context for logging."""
    if isinstance(error, BucketListerError):
        return error.to_dict()
    else:
        return {
            "error_type": error.__class__.__name__,
            "message": str(error),
        }
