"""
Voice AI provider factory.

Creates a provider instance by id, following the same pattern as the
vendor-specific ``create_*`` helpers.
"""

from voice_ai.base import VoiceProvider
from voice_ai.config import RetellConfig, VapiConfig, get_voice_ai_settings
from voice_ai.constants import VoiceAIErrorCode
from voice_ai.constants import VoiceAIProvider as VoiceAIProviderEnum
from voice_ai.exceptions import VoiceAIError
from voice_ai.providers.retell import create_retell
from voice_ai.providers.vapi import create_vapi
from voice_ai.utils.logger import logger


def create_provider(
    provider: VoiceAIProviderEnum | str | None = None,
    config: RetellConfig | VapiConfig | None = None,
) -> VoiceProvider:
    """
    Create a Voice AI provider instance.

    Args:
        provider: Provider id. Defaults to VOICE_AI_PROVIDER.
        config: Vendor config matching ``provider``. Read from the
            environment when omitted.

    Returns:
        VoiceProvider: The assembled provider

    Raises:
        VoiceAIError: If the provider is not supported or the config does
            not belong to it
    """
    if provider is None:
        provider = get_voice_ai_settings().provider

    try:
        provider_enum = VoiceAIProviderEnum(provider)
    except ValueError as e:
        raise VoiceAIError(
            f"Unsupported Voice AI provider: {provider}",
            error_code=VoiceAIErrorCode.UNKNOWN_PROVIDER,
        ) from e

    if provider_enum == VoiceAIProviderEnum.RETELL:
        if config is not None and not isinstance(config, RetellConfig):
            raise VoiceAIError(
                "Retell provider requires a RetellConfig",
                error_code=VoiceAIErrorCode.INVALID_PROVIDER,
            )
        logger.info("Creating Retell Voice AI provider")
        return create_retell(config)

    if config is not None and not isinstance(config, VapiConfig):
        raise VoiceAIError(
            "Vapi provider requires a VapiConfig",
            error_code=VoiceAIErrorCode.INVALID_PROVIDER,
        )
    logger.info("Creating Vapi Voice AI provider")
    return create_vapi(config)
