"""
Voice AI constants and enums.

This module contains the enums shared by the unified data model and every
vendor integration.
"""

from enum import Enum


class CallStatus(str, Enum):
    """Unified call status values. Vendor statuses are normalised onto these."""

    QUEUED = "queued"
    RINGING = "ringing"
    IN_PROGRESS = "in-progress"
    ENDED = "ended"
    ERROR = "error"
    UNKNOWN = "unknown"


class FileStatus(str, Enum):
    """Unified processing status of an uploaded file."""

    PROCESSING = "processing"
    DONE = "done"
    FAILED = "failed"
    UNKNOWN = "unknown"


class VoiceAIProvider(str, Enum):
    """Available Voice AI providers."""

    RETELL = "retell"
    VAPI = "vapi"


class VoiceAIErrorCode(str, Enum):
    """Standard error codes across Voice AI providers."""

    PROVIDER_ERROR = "PROVIDER_ERROR"
    NOT_FOUND = "NOT_FOUND"
    AUTHENTICATION_FAILED = "AUTHENTICATION_FAILED"
    UNSUPPORTED_PARAMS = "UNSUPPORTED_PARAMS"
    INVALID_PARAMS = "INVALID_PARAMS"
    INVALID_PROVIDER = "INVALID_PROVIDER"
    UNKNOWN_PROVIDER = "UNKNOWN_PROVIDER"
