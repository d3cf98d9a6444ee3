"""
Error taxonomy for the summarization pipeline.

Every terminal error is converted into a single ``error`` progress event at
the pipeline boundary; ``PersistenceError`` is the only non-fatal one.
"""

from typing import Any


class YTDigestError(Exception):
    """Base exception for all application errors.

    Attributes:
        message: Human-readable message shown to the caller.
        context: Arbitrary key-value pairs providing additional error context.
    """

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = context


class InvalidRequestError(YTDigestError):
    """Unrecognized provider choice or malformed input."""


class ConfigurationError(YTDigestError):
    """A required credential is absent."""


class ProviderError(YTDigestError):
    """A generation call failed or produced nothing."""

    MISSING_CREDENTIAL = "missing_credential"
    REQUEST_FAILED = "request_failed"

    def __init__(self, message: str, kind: str = REQUEST_FAILED, **context: Any) -> None:
        super().__init__(message, **context)
        self.kind = kind


class MissingCredentialError(ProviderError, ConfigurationError):
    """A provider was asked to generate without its API key."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message, kind=ProviderError.MISSING_CREDENTIAL, **context)


class AcquisitionError(YTDigestError):
    """No transcript could be obtained through any fallback stage."""

    def __init__(self, message: str, stage: str = "unknown", **context: Any) -> None:
        super().__init__(message, **context)
        self.stage = stage


class PersistenceError(YTDigestError):
    """The summary store could not be read or written."""
