"""
Voice AI provider implementations.

This package contains the vendor integrations and the factory that selects
between them.
"""

from voice_ai.providers.factory import create_provider
from voice_ai.providers.retell import create_retell
from voice_ai.providers.vapi import create_vapi

__all__ = [
    "create_provider",
    "create_retell",
    "create_vapi",
]
