"""
Exception hierarchy for the unified Voice AI layer.

Every vendor failure is normalised into one of these classes at the manager
boundary, so callers never have to handle SDK-specific exceptions.
"""

from http import HTTPStatus
from typing import Any

from voice_ai.constants import VoiceAIErrorCode


class VoiceAIError(Exception):
    """Base exception for Voice AI-related errors."""

    def __init__(self, message: str, error_code: str | None = None):
        """
        Initialize Voice AI error.

        Args:
            message: Error message
            error_code: Optional error code from VoiceAIErrorCode
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code


class ProviderError(VoiceAIError):
    """A failure attributed to a specific vendor."""

    def __init__(
        self,
        provider: str,
        message: str,
        cause: BaseException | None = None,
        error_code: str | None = VoiceAIErrorCode.PROVIDER_ERROR,
    ):
        """
        Initialize provider error.

        Args:
            provider: Provider id the failure is attributed to
            message: Error message, prefixed with the provider id
            cause: The original exception, if any
            error_code: Optional error code from VoiceAIErrorCode
        """
        super().__init__(f"[{provider}] {message}", error_code=error_code)
        self.provider = provider
        self.cause = cause


class NotFoundError(ProviderError):
    """The vendor reported that a resource does not exist (404)."""

    def __init__(self, provider: str, resource: str, resource_id: str):
        super().__init__(
            provider,
            f"{resource} not found: {resource_id}",
            error_code=VoiceAIErrorCode.NOT_FOUND,
        )
        self.resource = resource
        self.resource_id = resource_id


class AuthenticationError(ProviderError):
    """The vendor rejected the credentials (401)."""

    def __init__(self, provider: str):
        super().__init__(
            provider,
            "Authentication failed. Check your API key.",
            error_code=VoiceAIErrorCode.AUTHENTICATION_FAILED,
        )


def get_status_code(err: Any) -> int | None:
    """Read the HTTP status from a vendor exception, if it carries one."""
    for attr in ("status_code", "status"):
        value = getattr(err, attr, None)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
    return None


def wrap_error(
    provider: str,
    err: BaseException,
    resource: str | None = None,
    resource_id: str | None = None,
) -> VoiceAIError:
    """
    Translate a vendor client failure into the unified taxonomy.

    Args:
        provider: Provider id the failure is attributed to
        err: Exception raised by the vendor client
        resource: Resource name, when the call targets a single record
        resource_id: Record id, when the call targets a single record

    Returns:
        VoiceAIError: The exception to raise in place of ``err``
    """
    if isinstance(err, VoiceAIError):
        return err

    status_code = get_status_code(err)
    if status_code == HTTPStatus.UNAUTHORIZED:
        wrapped: ProviderError = AuthenticationError(provider)
    elif status_code == HTTPStatus.NOT_FOUND and resource and resource_id:
        wrapped = NotFoundError(provider, resource, resource_id)
    else:
        return ProviderError(provider, str(err) or type(err).__name__, cause=err)
    wrapped.cause = err
    return wrapped
