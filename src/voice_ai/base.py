"""
Abstract base classes for Voice AI resource managers.

This module defines the interface every vendor integration implements,
ensuring consistent behavior across different voice AI platforms. A
provider is a plain record of managers: the optional ``tools``, ``files``
and ``knowledge_base`` managers are ``None`` for vendors without that
capability, so callers check for presence before use.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from voice_ai.schemas import (
    Agent,
    Call,
    CreateAgentParams,
    CreateCallParams,
    CreateFileParams,
    CreateKnowledgeBaseParams,
    CreateToolParams,
    KnowledgeBase,
    ListAgentsParams,
    ListCallsParams,
    ListFilesParams,
    ListKnowledgeBaseParams,
    ListPhoneNumbersParams,
    ListToolsParams,
    PaginatedList,
    PhoneNumber,
    Tool,
    UpdateAgentParams,
    UpdateCallParams,
    UpdateFileParams,
    UpdateToolParams,
    VoiceFile,
)


class AgentManager(ABC):
    """Interface for managing agents."""

    @abstractmethod
    async def create(self, params: CreateAgentParams) -> Agent:
        """
        Create an agent.

        Raises:
            ProviderError: If the vendor rejects the request
        """

    @abstractmethod
    async def list(self, params: ListAgentsParams | None = None) -> PaginatedList[Agent]:
        """List agents. Returns a single page."""

    @abstractmethod
    async def get(self, id: str) -> Agent:
        """
        Get an agent by ID.

        Raises:
            NotFoundError: If the agent does not exist
        """

    @abstractmethod
    async def update(self, id: str, params: UpdateAgentParams) -> Agent:
        """Update the provided fields of an agent."""

    @abstractmethod
    async def delete(self, id: str) -> None:
        """
        Delete an agent.

        Raises:
            NotFoundError: If the agent does not exist
        """


class CallManager(ABC):
    """Interface for managing calls."""

    @abstractmethod
    async def create(self, params: CreateCallParams) -> Call:
        """Place an outbound phone call."""

    @abstractmethod
    async def list(self, params: ListCallsParams | None = None) -> PaginatedList[Call]:
        """
        List calls.

        Raises:
            ProviderError: If a requested filter cannot be applied by the
                vendor. No request is sent in that case.
        """

    @abstractmethod
    async def get(self, id: str) -> Call:
        """Get a call by ID."""

    @abstractmethod
    async def update(self, id: str, params: UpdateCallParams) -> Call:
        """Update a call record."""

    @abstractmethod
    async def delete(self, id: str) -> None:
        """Delete a call record."""


class PhoneNumberManager(ABC):
    """Interface for reading phone numbers. Vendors may add write methods."""

    @abstractmethod
    async def list(
        self, params: ListPhoneNumbersParams | None = None
    ) -> PaginatedList[PhoneNumber]:
        """List phone numbers."""

    @abstractmethod
    async def get(self, id: str) -> PhoneNumber:
        """Get a phone number by ID."""


class ToolManager(ABC):
    """Interface for managing tools."""

    @abstractmethod
    async def create(self, params: CreateToolParams) -> Tool:
        pass

    @abstractmethod
    async def list(self, params: ListToolsParams | None = None) -> PaginatedList[Tool]:
        pass

    @abstractmethod
    async def get(self, id: str) -> Tool:
        pass

    @abstractmethod
    async def update(self, id: str, params: UpdateToolParams) -> Tool:
        pass

    @abstractmethod
    async def delete(self, id: str) -> None:
        pass


class FileManager(ABC):
    """Interface for managing uploaded files."""

    @abstractmethod
    async def create(self, params: CreateFileParams) -> VoiceFile:
        pass

    @abstractmethod
    async def list(self, params: ListFilesParams | None = None) -> PaginatedList[VoiceFile]:
        pass

    @abstractmethod
    async def get(self, id: str) -> VoiceFile:
        pass

    @abstractmethod
    async def update(self, id: str, params: UpdateFileParams) -> VoiceFile:
        pass

    @abstractmethod
    async def delete(self, id: str) -> None:
        pass


class KnowledgeBaseManager(ABC):
    """Interface for managing knowledge bases. Knowledge bases are not updatable."""

    @abstractmethod
    async def create(self, params: CreateKnowledgeBaseParams) -> KnowledgeBase:
        pass

    @abstractmethod
    async def list(
        self, params: ListKnowledgeBaseParams | None = None
    ) -> PaginatedList[KnowledgeBase]:
        pass

    @abstractmethod
    async def get(self, id: str) -> KnowledgeBase:
        pass

    @abstractmethod
    async def delete(self, id: str) -> None:
        pass


@dataclass(frozen=True)
class VoiceProvider:
    """A vendor integration: its id plus one manager per supported resource."""

    provider_id: str
    agents: AgentManager
    calls: CallManager
    phone_numbers: PhoneNumberManager
    tools: ToolManager | None = None
    files: FileManager | None = None
    knowledge_base: KnowledgeBaseManager | None = None
