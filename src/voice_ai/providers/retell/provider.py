"""
Retell provider assembly.

Builds one ``AsyncRetell`` client and wires every Retell manager onto it.
"""

from retell import AsyncRetell

from voice_ai.base import VoiceProvider
from voice_ai.config import RetellConfig, get_retell_settings, resolve_timeout
from voice_ai.providers.retell.agents import RetellAgentManager
from voice_ai.providers.retell.calls import RetellCallManager
from voice_ai.providers.retell.knowledge_base import RetellKnowledgeBaseManager
from voice_ai.providers.retell.mappers import PROVIDER
from voice_ai.providers.retell.phone_numbers import RetellPhoneNumberManager
from voice_ai.utils.logger import logger


def create_retell(config: RetellConfig | None = None) -> VoiceProvider:
    """
    Create a Retell-backed provider.

    Args:
        config: Retell credentials and client options. Read from RETELL_*
            environment variables when omitted.

    Returns:
        VoiceProvider: Provider with agents, calls, phone numbers and
        knowledge base managers (no tools or files)
    """
    config = config or get_retell_settings()
    client = AsyncRetell(
        api_key=config.api_key,
        base_url=config.base_url,
        timeout=resolve_timeout(config.timeout),
    )
    logger.info("[Retell Provider] Client initialized", base_url=config.base_url)

    return VoiceProvider(
        provider_id=PROVIDER,
        agents=RetellAgentManager(client),
        calls=RetellCallManager(client),
        phone_numbers=RetellPhoneNumberManager(client),
        knowledge_base=RetellKnowledgeBaseManager(client),
    )
