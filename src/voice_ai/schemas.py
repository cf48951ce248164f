"""
Unified Voice AI Pydantic schemas.

This module contains the vendor-neutral entities returned by every provider
and the parameter models accepted by the resource managers. Optional fields
default to ``None``, which means "not provided": mappers never forward a
``None`` value to a vendor.
"""

from datetime import datetime
from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel, Field

from voice_ai.constants import CallStatus, FileStatus

T = TypeVar("T")

FilterValue = str | int | float | bool


class VoiceConfig(BaseModel):
    """Voice selection for an agent."""

    voice_id: str = Field(..., description="Vendor voice identifier")
    provider: str | None = Field(None, description="Voice provider (e.g. 11labs)")


class ModelConfig(BaseModel):
    """LLM configuration for an agent."""

    provider: str = Field(..., description="Model provider or engine type")
    model: str = Field(..., description="Model name or engine reference")
    system_prompt: str | None = Field(None, description="System prompt")


# Entities


class Agent(BaseModel):
    """Vendor-neutral agent (Retell agent, Vapi assistant)."""

    id: str
    provider: str
    name: str | None = None
    voice: VoiceConfig | None = None
    model: ModelConfig | None = None
    first_message: str | None = None
    metadata: dict[str, Any] | None = None
    raw: Any = Field(None, description="Untouched vendor response")


class Call(BaseModel):
    """Vendor-neutral call record."""

    id: str
    provider: str
    agent_id: str | None = None
    to_number: str | None = None
    from_number: str | None = None
    status: CallStatus = CallStatus.UNKNOWN
    started_at: datetime | None = None
    ended_at: datetime | None = None
    duration: int | None = Field(None, description="Call length in whole seconds")
    transcript: str | None = None
    recording_url: str | None = None
    metadata: dict[str, Any] | None = None
    raw: Any = Field(None, description="Untouched vendor response")


class PhoneNumber(BaseModel):
    """Vendor-neutral phone number."""

    id: str
    provider: str
    number: str | None = None
    name: str | None = None
    agent_id: str | None = None
    inbound_agent_id: str | None = None
    outbound_agent_id: str | None = None
    webhook_url: str | None = None
    area_code: str | None = None
    metadata: dict[str, Any] | None = None
    raw: Any = Field(None, description="Untouched vendor response")


class Tool(BaseModel):
    """Vendor-neutral tool definition."""

    id: str
    provider: str
    type: str
    name: str | None = None
    description: str | None = None
    raw: Any = Field(None, description="Untouched vendor response")


class VoiceFile(BaseModel):
    """Vendor-neutral uploaded file."""

    id: str
    provider: str
    name: str | None = None
    status: FileStatus = FileStatus.UNKNOWN
    bytes: int | None = None
    url: str | None = None
    mime_type: str | None = None
    metadata: dict[str, Any] | None = None
    raw: Any = Field(None, description="Untouched vendor response")


class KnowledgeBaseSource(BaseModel):
    """A single document or URL indexed by a knowledge base."""

    id: str
    type: str
    url: str | None = None


class KnowledgeBase(BaseModel):
    """Vendor-neutral knowledge base."""

    id: str
    provider: str
    name: str
    status: str
    sources: list[KnowledgeBaseSource] = Field(default_factory=list)
    raw: Any = Field(None, description="Untouched vendor response")


class PaginatedList(BaseModel, Generic[T]):
    """
    A single page of results.

    ``has_more`` is always False and ``next_cursor`` is never set: list calls
    return exactly one vendor page and cursors are not chained.
    """

    items: list[T] = Field(default_factory=list)
    next_cursor: str | None = None
    has_more: bool = False


# Agent parameters


class CreateAgentParams(BaseModel):
    """Parameters for creating an agent."""

    name: str | None = None
    voice: VoiceConfig | None = None
    model: ModelConfig | None = None
    first_message: str | None = None
    max_duration_seconds: int | None = None
    background_sound: str | None = None
    voicemail_message: str | None = None
    webhook_url: str | None = None
    webhook_timeout_seconds: int | None = None
    metadata: dict[str, Any] | None = None
    provider_options: dict[str, Any] | None = Field(
        None, description="Vendor-specific fields merged into the request last"
    )


class UpdateAgentParams(CreateAgentParams):
    """Parameters for updating an agent. Only provided fields are sent."""


class ListAgentsParams(BaseModel):
    """Parameters for listing agents."""

    limit: int | None = None
    cursor: str | None = None


# Call parameters


class CreateCallParams(BaseModel):
    """Parameters for placing an outbound phone call."""

    agent_id: str | None = None
    to_number: str = Field(..., description="Number to dial")
    from_number: str | None = None
    metadata: dict[str, Any] | None = None
    provider_options: dict[str, Any] | None = None


class UpdateCallParams(BaseModel):
    """Parameters for updating a call record."""

    metadata: dict[str, Any] | None = None
    provider_options: dict[str, Any] | None = None


class CallSort(BaseModel):
    """Sort specification for call listings."""

    field: Literal["start_time", "created_at"] = "start_time"
    order: Literal["asc", "desc"] = "desc"


class ListCallsParams(BaseModel):
    """Parameters for listing calls. Unsupported filters are rejected."""

    limit: int | None = None
    cursor: str | None = None
    agent_id: str | None = None
    phone_number_id: str | None = None
    call_status: str | None = None
    direction: Literal["inbound", "outbound"] | None = None
    call_type: str | None = None
    user_sentiment: str | None = None
    call_successful: bool | None = None
    start_time: str | None = Field(None, description="ISO-8601 lower bound")
    end_time: str | None = Field(None, description="ISO-8601 upper bound")
    metadata: dict[str, FilterValue] | None = None
    dynamic_variables: dict[str, FilterValue] | None = None
    sort: CallSort | None = None
    provider_options: dict[str, Any] | None = None


# Phone number parameters


class ListPhoneNumbersParams(BaseModel):
    """Parameters for listing phone numbers."""

    limit: int | None = None
    cursor: str | None = None


class UpdatePhoneNumberParams(BaseModel):
    """Parameters for updating a phone number."""

    name: str | None = None
    inbound_agent_id: str | None = None
    outbound_agent_id: str | None = None
    webhook_url: str | None = None
    provider_options: dict[str, Any] | None = None


class CreatePhoneNumberParams(UpdatePhoneNumberParams):
    """Parameters for purchasing a phone number."""

    area_code: str | None = Field(None, description="Numeric area code")


# Tool parameters


class CreateToolParams(BaseModel):
    """Parameters for creating a tool."""

    type: str
    name: str | None = None
    description: str | None = None
    provider_options: dict[str, Any] | None = None


class UpdateToolParams(BaseModel):
    """Parameters for updating a tool."""

    name: str | None = None
    description: str | None = None
    provider_options: dict[str, Any] | None = None


class ListToolsParams(BaseModel):
    """Parameters for listing tools."""

    limit: int | None = None
    cursor: str | None = None


# File parameters


class CreateFileParams(BaseModel):
    """Parameters for uploading a file."""

    file: Any = Field(..., description="File payload accepted by the vendor SDK")
    name: str | None = None
    provider_options: dict[str, Any] | None = None


class UpdateFileParams(BaseModel):
    """Parameters for updating a file."""

    name: str | None = None
    provider_options: dict[str, Any] | None = None


class ListFilesParams(BaseModel):
    """Parameters for listing files."""

    limit: int | None = None
    cursor: str | None = None


# Knowledge base parameters


class CreateKnowledgeBaseParams(BaseModel):
    """Parameters for creating a knowledge base."""

    name: str
    provider_options: dict[str, Any] | None = None


class ListKnowledgeBaseParams(BaseModel):
    """Parameters for listing knowledge bases."""

    limit: int | None = None
    cursor: str | None = None
