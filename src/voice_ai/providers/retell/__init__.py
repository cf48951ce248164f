"""
Retell Voice AI provider implementation.
"""

from voice_ai.providers.retell.agents import RetellAgentManager
from voice_ai.providers.retell.calls import RetellCallManager
from voice_ai.providers.retell.knowledge_base import RetellKnowledgeBaseManager
from voice_ai.providers.retell.phone_numbers import RetellPhoneNumberManager
from voice_ai.providers.retell.provider import create_retell

__all__ = [
    "RetellAgentManager",
    "RetellCallManager",
    "RetellKnowledgeBaseManager",
    "RetellPhoneNumberManager",
    "create_retell",
]
