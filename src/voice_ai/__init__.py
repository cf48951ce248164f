"""
Unified Voice AI.

One vendor-neutral interface for agents, calls, phone numbers, tools, files
and knowledge bases across Retell and Vapi.
"""

from voice_ai.base import (
    AgentManager,
    CallManager,
    FileManager,
    KnowledgeBaseManager,
    PhoneNumberManager,
    ToolManager,
    VoiceProvider,
)
from voice_ai.config import RetellConfig, VapiConfig, VoiceAISettings
from voice_ai.constants import CallStatus, FileStatus, VoiceAIErrorCode
from voice_ai.constants import VoiceAIProvider as VoiceAIProviderEnum
from voice_ai.define_provider import define_provider, validate_provider
from voice_ai.exceptions import (
    AuthenticationError,
    NotFoundError,
    ProviderError,
    VoiceAIError,
)
from voice_ai.providers import create_provider, create_retell, create_vapi
from voice_ai.registry import VoiceRegistry, create_registry
from voice_ai.schemas import (
    Agent,
    Call,
    CallSort,
    CreateAgentParams,
    CreateCallParams,
    CreateFileParams,
    CreateKnowledgeBaseParams,
    CreatePhoneNumberParams,
    CreateToolParams,
    KnowledgeBase,
    KnowledgeBaseSource,
    ListAgentsParams,
    ListCallsParams,
    ListFilesParams,
    ListKnowledgeBaseParams,
    ListPhoneNumbersParams,
    ListToolsParams,
    ModelConfig,
    PaginatedList,
    PhoneNumber,
    Tool,
    UpdateAgentParams,
    UpdateCallParams,
    UpdateFileParams,
    UpdatePhoneNumberParams,
    UpdateToolParams,
    VoiceConfig,
    VoiceFile,
)

__version__ = "0.1.0"

__all__ = [
    # Providers
    "create_provider",
    "create_retell",
    "create_vapi",
    "create_registry",
    "define_provider",
    "validate_provider",
    "VoiceProvider",
    "VoiceRegistry",
    "AgentManager",
    "CallManager",
    "PhoneNumberManager",
    "ToolManager",
    "FileManager",
    "KnowledgeBaseManager",
    # Config
    "RetellConfig",
    "VapiConfig",
    "VoiceAISettings",
    # Enums
    "CallStatus",
    "FileStatus",
    "VoiceAIErrorCode",
    "VoiceAIProviderEnum",
    # Errors
    "VoiceAIError",
    "ProviderError",
    "NotFoundError",
    "AuthenticationError",
    # Entities
    "Agent",
    "Call",
    "PhoneNumber",
    "Tool",
    "VoiceFile",
    "KnowledgeBase",
    "KnowledgeBaseSource",
    "VoiceConfig",
    "ModelConfig",
    "PaginatedList",
    # Parameters
    "CallSort",
    "CreateAgentParams",
    "UpdateAgentParams",
    "ListAgentsParams",
    "CreateCallParams",
    "UpdateCallParams",
    "ListCallsParams",
    "CreatePhoneNumberParams",
    "UpdatePhoneNumberParams",
    "ListPhoneNumbersParams",
    "CreateToolParams",
    "UpdateToolParams",
    "ListToolsParams",
    "CreateFileParams",
    "UpdateFileParams",
    "ListFilesParams",
    "CreateKnowledgeBaseParams",
    "ListKnowledgeBaseParams",
]
