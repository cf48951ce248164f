"""Lookup table from provider id to an assembled provider."""

from collections.abc import Mapping
from types import MappingProxyType

from voice_ai.base import VoiceProvider
from voice_ai.constants import VoiceAIErrorCode
from voice_ai.exceptions import VoiceAIError


class VoiceRegistry:
    """
    Read-only registry of providers keyed by id.

    The table is copied at construction and never changes afterwards.
    """

    def __init__(self, providers: Mapping[str, VoiceProvider]):
        self._providers = MappingProxyType(dict(providers))

    def lookup(self, id: str) -> VoiceProvider:
        """
        Get a provider by id.

        Raises:
            VoiceAIError: If no provider is registered under ``id``
        """
        if id not in self._providers:
            available = ", ".join(self._providers)
            raise VoiceAIError(
                f'Provider "{id}" not found. Available: {available}',
                error_code=VoiceAIErrorCode.UNKNOWN_PROVIDER,
            )
        return self._providers[id]

    def list_ids(self) -> list[str]:
        """Registered provider ids, in registration order."""
        return list(self._providers)

    provider = lookup
    list_providers = list_ids


def create_registry(providers: Mapping[str, VoiceProvider]) -> VoiceRegistry:
    """Build a registry from a mapping of provider id to provider."""
    return VoiceRegistry(providers)
