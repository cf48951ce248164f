"""
Vapi Voice AI provider implementation.
"""

from voice_ai.providers.vapi.agents import VapiAgentManager
from voice_ai.providers.vapi.calls import VapiCallManager
from voice_ai.providers.vapi.files import VapiFileManager
from voice_ai.providers.vapi.phone_numbers import VapiPhoneNumberManager
from voice_ai.providers.vapi.provider import create_vapi
from voice_ai.providers.vapi.tools import VapiToolManager

__all__ = [
    "VapiAgentManager",
    "VapiCallManager",
    "VapiFileManager",
    "VapiPhoneNumberManager",
    "VapiToolManager",
    "create_vapi",
]
