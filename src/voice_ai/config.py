"""
Configuration management for the Voice AI package.

This module handles environment variable configuration and validation
for the vendor integrations using Pydantic settings. Configs can also be
built explicitly, e.g. ``VapiConfig(api_key="...")``.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from voice_ai.constants import VoiceAIProvider
from voice_ai.utils.logger import logger


class VoiceAISettings(BaseSettings):
    """General configuration for Voice AI integrations."""

    model_config = SettingsConfigDict(
        case_sensitive=False, extra="ignore", env_prefix="VOICE_AI_"
    )

    provider: VoiceAIProvider = Field(
        default=VoiceAIProvider.VAPI, description="Default Voice AI provider"
    )
    request_timeout: float = Field(
        default=30, description="HTTP request timeout in seconds"
    )


class VapiConfig(BaseSettings):
    """Vapi-specific configuration."""

    model_config = SettingsConfigDict(
        case_sensitive=False, extra="ignore", env_prefix="VAPI_"
    )

    api_key: str = Field(description="Vapi API key for authentication")
    base_url: str = Field(
        default="https://api.vapi.ai", description="Vapi API base URL"
    )
    timeout: float | None = Field(
        default=None,
        description="Request timeout in seconds, defaults to VOICE_AI_REQUEST_TIMEOUT",
    )


class RetellConfig(BaseSettings):
    """Retell-specific configuration."""

    model_config = SettingsConfigDict(
        case_sensitive=False, extra="ignore", env_prefix="RETELL_"
    )

    api_key: str = Field(description="Retell API key for authentication")
    base_url: str = Field(
        default="https://api.retellai.com", description="Retell API base URL"
    )
    timeout: float | None = Field(
        default=None,
        description="Request timeout in seconds, defaults to VOICE_AI_REQUEST_TIMEOUT",
    )


_voice_ai_settings: VoiceAISettings | None = None
_vapi_settings: VapiConfig | None = None
_retell_settings: RetellConfig | None = None


def get_voice_ai_settings() -> VoiceAISettings:
    """
    Get the global Voice AI settings instance.

    Returns:
        VoiceAISettings: The global settings instance
    """
    global _voice_ai_settings
    if _voice_ai_settings is None:
        _voice_ai_settings = VoiceAISettings()
        logger.info("VoiceAISettings loaded", provider=_voice_ai_settings.provider)
    return _voice_ai_settings


def get_vapi_settings() -> VapiConfig:
    """
    Get the global Vapi settings instance, read from VAPI_* variables.

    Returns:
        VapiConfig: The global Vapi settings instance
    """
    global _vapi_settings
    if _vapi_settings is None:
        _vapi_settings = VapiConfig()
        logger.info("VapiConfig loaded", base_url=_vapi_settings.base_url)
    return _vapi_settings


def get_retell_settings() -> RetellConfig:
    """
    Get the global Retell settings instance, read from RETELL_* variables.

    Returns:
        RetellConfig: The global Retell settings instance
    """
    global _retell_settings
    if _retell_settings is None:
        _retell_settings = RetellConfig()
        logger.info("RetellConfig loaded", base_url=_retell_settings.base_url)
    return _retell_settings


def set_voice_ai_settings(settings: VoiceAISettings | None) -> None:
    """Replace (or with None, reset) the global Voice AI settings."""
    global _voice_ai_settings
    _voice_ai_settings = settings


def set_vapi_settings(settings: VapiConfig | None) -> None:
    """Replace (or with None, reset) the global Vapi settings."""
    global _vapi_settings
    _vapi_settings = settings


def set_retell_settings(settings: RetellConfig | None) -> None:
    """Replace (or with None, reset) the global Retell settings."""
    global _retell_settings
    _retell_settings = settings


def resolve_timeout(timeout: float | None) -> float:
    """Use the vendor timeout when set, else the general request timeout."""
    if timeout is not None:
        return timeout
    return get_voice_ai_settings().request_timeout
