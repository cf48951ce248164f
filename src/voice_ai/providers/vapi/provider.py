"""
Vapi provider assembly.

Builds one ``AsyncVapi`` client and wires every Vapi manager onto it.
"""

from vapi import AsyncVapi

from voice_ai.base import VoiceProvider
from voice_ai.config import VapiConfig, get_vapi_settings, resolve_timeout
from voice_ai.providers.vapi.agents import VapiAgentManager
from voice_ai.providers.vapi.calls import VapiCallManager
from voice_ai.providers.vapi.files import VapiFileManager
from voice_ai.providers.vapi.mappers import PROVIDER
from voice_ai.providers.vapi.phone_numbers import VapiPhoneNumberManager
from voice_ai.providers.vapi.tools import VapiToolManager
from voice_ai.utils.logger import logger


def create_vapi(config: VapiConfig | None = None) -> VoiceProvider:
    """
    Create a Vapi-backed provider.

    Args:
        config: Vapi credentials and client options. Read from VAPI_*
            environment variables when omitted.

    Returns:
        VoiceProvider: Provider with agents, calls, phone numbers, tools and
        files managers (no knowledge base)
    """
    config = config or get_vapi_settings()
    client = AsyncVapi(
        token=config.api_key,
        base_url=config.base_url,
        timeout=resolve_timeout(config.timeout),
    )
    logger.info("[Vapi Provider] Client initialized", base_url=config.base_url)

    return VoiceProvider(
        provider_id=PROVIDER,
        agents=VapiAgentManager(client),
        calls=VapiCallManager(client),
        phone_numbers=VapiPhoneNumberManager(client),
        tools=VapiToolManager(client),
        files=VapiFileManager(client),
    )
