"""
Vapi <-> unified translation functions.

Pure functions only: no client calls and no logging. Request mappers emit
keyword arguments for the ``vapi`` SDK and never include a key whose unified
value was not provided. Response records are read in Vapi's camelCase wire
form; SDK objects are dumped with their own ``dict()`` and kept untouched
in ``raw``.
"""

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from pydantic import BaseModel, TypeAdapter

from voice_ai.constants import CallStatus, FileStatus
from voice_ai.constants import VoiceAIProvider as VoiceAIProviderEnum
from voice_ai.schemas import (
    Agent,
    Call,
    CreateAgentParams,
    CreateCallParams,
    CreateFileParams,
    CreateToolParams,
    ModelConfig,
    PhoneNumber,
    Tool,
    UpdateAgentParams,
    UpdateCallParams,
    UpdateFileParams,
    UpdateToolParams,
    VoiceConfig,
    VoiceFile,
)
from voice_ai.utils.numbers import round_half_up
from voice_ai.utils.phone import format_phone_number

PROVIDER = VoiceAIProviderEnum.VAPI.value

DEFAULT_VOICE_PROVIDER = "11labs"

CALL_STATUS_MAPPING = {
    "queued": CallStatus.QUEUED,
    "ringing": CallStatus.RINGING,
    "in-progress": CallStatus.IN_PROGRESS,
    "ended": CallStatus.ENDED,
}

FILE_STATUS_MAPPING = {
    "processing": FileStatus.PROCESSING,
    "done": FileStatus.DONE,
    "failed": FileStatus.FAILED,
}

_datetime_adapter = TypeAdapter(datetime)


def to_record(obj: Any) -> dict[str, Any]:
    """
    Convert a Vapi SDK object (or mapping) into a camelCase dict.

    SDK models keep their wire names in field metadata rather than pydantic
    aliases, so only their own ``dict()`` produces camelCase keys.
    """
    if isinstance(obj, BaseModel):
        return obj.dict()
    if isinstance(obj, Mapping):
        return dict(obj)
    return dict(vars(obj))


def _parse_datetime(value: Any) -> datetime | None:
    if not value:
        return None
    return _datetime_adapter.validate_python(value)


# Assistant <-> Agent


def _map_voice(voice: Mapping[str, Any] | None) -> VoiceConfig | None:
    if not voice:
        return None
    return VoiceConfig(
        voice_id=voice.get("voiceId") or voice.get("voice") or "",
        provider=voice.get("provider"),
    )


def _map_model(model: Mapping[str, Any] | None) -> ModelConfig | None:
    if not model:
        return None
    messages = model.get("messages") or []
    system_prompt = messages[0].get("content") if messages else None
    return ModelConfig(
        provider=model.get("provider") or "",
        model=model.get("model") or "",
        system_prompt=system_prompt,
    )


def map_vapi_assistant(assistant: Any) -> Agent:
    """Map a Vapi assistant response to a unified Agent."""
    record = to_record(assistant)
    return Agent(
        id=record["id"],
        provider=PROVIDER,
        name=record.get("name"),
        voice=_map_voice(record.get("voice")),
        model=_map_model(record.get("model")),
        first_message=record.get("firstMessage"),
        metadata=record.get("metadata"),
        raw=assistant,
    )


def _merge_provider_options(dto: dict[str, Any], provider_options: dict[str, Any]) -> None:
    # A nested ``server`` override is merged into the built server config
    options = dict(provider_options)
    server_override = options.pop("server", None)
    dto.update(options)
    if server_override:
        dto["server"] = {**dto.get("server", {}), **server_override}


def _map_assistant_fields(params: CreateAgentParams | UpdateAgentParams) -> dict[str, Any]:
    dto: dict[str, Any] = {}
    if params.name is not None:
        dto["name"] = params.name
    if params.first_message is not None:
        dto["first_message"] = params.first_message
    if params.max_duration_seconds is not None:
        dto["max_duration_seconds"] = params.max_duration_seconds
    if params.background_sound is not None:
        dto["background_sound"] = params.background_sound
    if params.voicemail_message is not None:
        dto["voicemail_message"] = params.voicemail_message

    server: dict[str, Any] = {}
    if params.webhook_url is not None:
        server["url"] = params.webhook_url
    if params.webhook_timeout_seconds is not None:
        server["timeout_seconds"] = params.webhook_timeout_seconds
    if server:
        dto["server"] = server

    if params.metadata is not None:
        dto["metadata"] = params.metadata
    if params.voice is not None:
        dto["voice"] = {
            "voice_id": params.voice.voice_id,
            "provider": params.voice.provider or DEFAULT_VOICE_PROVIDER,
        }
    if params.model is not None:
        model: dict[str, Any] = {
            "provider": params.model.provider,
            "model": params.model.model,
        }
        if params.model.system_prompt:
            model["messages"] = [
                {"role": "system", "content": params.model.system_prompt}
            ]
        dto["model"] = model

    if params.provider_options:
        _merge_provider_options(dto, params.provider_options)
    return dto


def map_create_agent_to_vapi(params: CreateAgentParams) -> dict[str, Any]:
    """Build the ``assistants.create`` request body."""
    return _map_assistant_fields(params)


def map_update_agent_to_vapi(params: UpdateAgentParams) -> dict[str, Any]:
    """Build the ``assistants.update`` request body (the id is passed separately)."""
    return _map_assistant_fields(params)


# Call


def map_vapi_call_status(status: str | None) -> CallStatus:
    """Map a Vapi call ``status`` onto the unified CallStatus."""
    return CALL_STATUS_MAPPING.get(status or "", CallStatus.UNKNOWN)


def _compute_duration(started_at: datetime | None, ended_at: datetime | None) -> int | None:
    if started_at is None or ended_at is None:
        return None
    return round_half_up((ended_at - started_at).total_seconds())


def map_vapi_call(call: Any) -> Call:
    """Map a Vapi call response to a unified Call. Duration comes from timestamps."""
    record = to_record(call)
    artifact = record.get("artifact") or {}
    customer = record.get("customer") or {}
    phone_number = record.get("phoneNumber") or {}
    started_at = _parse_datetime(record.get("startedAt"))
    ended_at = _parse_datetime(record.get("endedAt"))
    return Call(
        id=record["id"],
        provider=PROVIDER,
        agent_id=record.get("assistantId"),
        to_number=customer.get("number"),
        from_number=phone_number.get("number"),
        status=map_vapi_call_status(record.get("status")),
        started_at=started_at,
        ended_at=ended_at,
        duration=_compute_duration(started_at, ended_at),
        transcript=artifact.get("transcript"),
        recording_url=artifact.get("recordingUrl"),
        metadata=None,
        raw=call,
    )


def map_create_call_to_vapi(params: CreateCallParams) -> dict[str, Any]:
    """
    Build the ``calls.create`` request body.

    Vapi dials from a registered phone number, so ``from_number`` is sent as
    the phone number id.
    """
    dto: dict[str, Any] = {}
    if params.agent_id:
        dto["assistant_id"] = params.agent_id
    if params.to_number:
        dto["customer"] = {"number": format_phone_number(params.to_number)}
    if params.from_number:
        dto["phone_number_id"] = params.from_number
    if params.provider_options:
        dto.update(params.provider_options)
    return dto


def map_update_call_to_vapi(params: UpdateCallParams) -> dict[str, Any]:
    """Build the ``calls.update`` request body. Vapi calls carry no metadata."""
    dto: dict[str, Any] = {}
    if params.provider_options:
        dto.update(params.provider_options)
    return dto


# Phone number


def map_vapi_phone_number(phone_number: Any) -> PhoneNumber:
    """Map a Vapi phone number response to a unified PhoneNumber."""
    record = to_record(phone_number)
    return PhoneNumber(
        id=record["id"],
        provider=PROVIDER,
        number=record.get("number"),
        name=record.get("name"),
        agent_id=record.get("assistantId"),
        metadata=None,
        raw=phone_number,
    )


# Tool


def map_vapi_tool(tool: Any) -> Tool:
    """Map a Vapi tool response. Name and description live under ``function``."""
    record = to_record(tool)
    function = record.get("function") or {}
    return Tool(
        id=record["id"],
        provider=PROVIDER,
        type=record.get("type") or "",
        name=function.get("name"),
        description=function.get("description"),
        raw=tool,
    )


def _map_tool_function(params: CreateToolParams | UpdateToolParams) -> dict[str, Any] | None:
    function: dict[str, Any] = {}
    if params.name is not None:
        function["name"] = params.name
    if params.description is not None:
        function["description"] = params.description
    return function or None


def map_create_tool_to_vapi(params: CreateToolParams) -> dict[str, Any]:
    """Build the ``tools.create`` request, passed whole as ``request=``."""
    dto: dict[str, Any] = {"type": params.type}
    function = _map_tool_function(params)
    if function:
        dto["function"] = function
    if params.provider_options:
        dto.update(params.provider_options)
    return dto


def map_update_tool_to_vapi(params: UpdateToolParams) -> dict[str, Any]:
    """Build the ``tools.update`` request, passed whole as ``request=``."""
    dto: dict[str, Any] = {}
    function = _map_tool_function(params)
    if function:
        dto["function"] = function
    if params.provider_options:
        dto.update(params.provider_options)
    return dto


# File


def map_vapi_file_status(status: str | None) -> FileStatus:
    """Map a Vapi file ``status`` onto the unified FileStatus."""
    return FILE_STATUS_MAPPING.get(status or "", FileStatus.UNKNOWN)


def map_vapi_file(file: Any) -> VoiceFile:
    """Map a Vapi file response to a unified VoiceFile."""
    record = to_record(file)
    return VoiceFile(
        id=record["id"],
        provider=PROVIDER,
        name=record.get("name"),
        status=map_vapi_file_status(record.get("status")),
        bytes=record.get("bytes"),
        url=record.get("url"),
        mime_type=record.get("mimetype"),
        metadata=record.get("metadata"),
        raw=file,
    )


def map_create_file_to_vapi(params: CreateFileParams) -> dict[str, Any]:
    """
    Build the ``files.create`` request body.

    ``files.create`` only takes the upload itself, so a name travels as the
    filename of a ``(filename, content)`` upload.
    """
    dto: dict[str, Any] = {"file": params.file}
    if params.name:
        if isinstance(params.file, tuple):
            dto["file"] = (params.name, *params.file[1:])
        else:
            dto["file"] = (params.name, params.file)
    if params.provider_options:
        dto.update(params.provider_options)
    return dto


def map_update_file_to_vapi(params: UpdateFileParams) -> dict[str, Any]:
    """Build the ``files.update`` request body."""
    dto: dict[str, Any] = {}
    if params.name:
        dto["name"] = params.name
    if params.provider_options:
        dto.update(params.provider_options)
    return dto
