"""
Retell <-> unified translation functions.

Pure functions only: no client calls and no logging. Request mappers emit
keyword arguments for the ``retell`` SDK and never include a key whose
unified value was not provided. Response mappers accept SDK objects or plain
dicts and keep the original object in ``raw``.
"""

import re
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel

from voice_ai.constants import CallStatus, VoiceAIErrorCode
from voice_ai.constants import VoiceAIProvider as VoiceAIProviderEnum
from voice_ai.exceptions import ProviderError
from voice_ai.schemas import (
    Agent,
    Call,
    CreateAgentParams,
    CreateCallParams,
    CreateKnowledgeBaseParams,
    CreatePhoneNumberParams,
    KnowledgeBase,
    KnowledgeBaseSource,
    ModelConfig,
    PhoneNumber,
    UpdateAgentParams,
    UpdateCallParams,
    UpdatePhoneNumberParams,
    VoiceConfig,
)
from voice_ai.utils.numbers import round_half_up
from voice_ai.utils.phone import format_phone_number

PROVIDER = VoiceAIProviderEnum.RETELL.value

CALL_STATUS_MAPPING = {
    "registered": CallStatus.QUEUED,
    "ongoing": CallStatus.IN_PROGRESS,
    "ended": CallStatus.ENDED,
    "error": CallStatus.ERROR,
    "not_connected": CallStatus.UNKNOWN,
}

_AREA_CODE_PATTERN = re.compile(r"^\s*([+-]?\d+)")


def to_record(obj: Any) -> dict[str, Any]:
    """Convert a Retell SDK object (or mapping) into a plain dict."""
    if isinstance(obj, BaseModel):
        return obj.model_dump()
    if isinstance(obj, Mapping):
        return dict(obj)
    return dict(vars(obj))


def _from_epoch_ms(value: Any) -> datetime | None:
    if not value:
        return None
    return datetime.fromtimestamp(value / 1000, tz=timezone.utc)


# Agent


def _map_model_from_retell(response_engine: Mapping[str, Any] | None) -> ModelConfig | None:
    if not response_engine:
        return None
    engine_type = response_engine.get("type")
    if engine_type == "retell-llm":
        return ModelConfig(
            provider="retell-llm", model=response_engine.get("llm_id") or ""
        )
    if engine_type == "custom-llm":
        return ModelConfig(
            provider="custom-llm",
            model=response_engine.get("llm_websocket_url") or "",
        )
    return None


def map_retell_agent(agent: Any) -> Agent:
    """Map a Retell agent response to a unified Agent."""
    record = to_record(agent)
    voice_id = record.get("voice_id")
    return Agent(
        id=record["agent_id"],
        provider=PROVIDER,
        name=record.get("agent_name"),
        voice=VoiceConfig(voice_id=voice_id) if voice_id else None,
        model=_map_model_from_retell(record.get("response_engine")),
        first_message=record.get("begin_message"),
        metadata=None,
        raw=agent,
    )


def _map_agent_fields(params: CreateAgentParams | UpdateAgentParams) -> dict[str, Any]:
    dto: dict[str, Any] = {}
    if params.name is not None:
        dto["agent_name"] = params.name
    if params.voice is not None:
        dto["voice_id"] = params.voice.voice_id
    if params.first_message is not None:
        dto["begin_message"] = params.first_message
    if params.max_duration_seconds is not None:
        dto["max_call_duration_ms"] = params.max_duration_seconds * 1000
    if params.background_sound is not None:
        dto["ambient_sound"] = params.background_sound
    if params.webhook_url is not None:
        dto["webhook_url"] = params.webhook_url
    if params.webhook_timeout_seconds is not None:
        dto["webhook_timeout_ms"] = params.webhook_timeout_seconds * 1000
    if params.voicemail_message is not None:
        dto["voicemail_option"] = {
            "action": {"type": "static_text", "text": params.voicemail_message}
        }
    if params.model is not None:
        dto["response_engine"] = {
            "type": params.model.provider,
            "llm_id": params.model.model,
        }
    if params.provider_options:
        dto.update(params.provider_options)
    return dto


def map_create_agent_to_retell(params: CreateAgentParams) -> dict[str, Any]:
    """Build the ``agent.create`` request body."""
    return _map_agent_fields(params)


def map_update_agent_to_retell(params: UpdateAgentParams) -> dict[str, Any]:
    """Build the ``agent.update`` request body."""
    return _map_agent_fields(params)


# Call


def map_retell_call_status(status: str | None) -> CallStatus:
    """Map a Retell ``call_status`` onto the unified CallStatus."""
    return CALL_STATUS_MAPPING.get(status or "", CallStatus.UNKNOWN)


def _compute_duration(
    start_ms: Any, end_ms: Any, duration_ms: Any
) -> int | None:
    if start_ms and end_ms:
        return round_half_up((end_ms - start_ms) / 1000)
    if duration_ms is not None:
        return round_half_up(duration_ms / 1000)
    return None


def map_retell_call(call: Any) -> Call:
    """Map a Retell call response to a unified Call."""
    record = to_record(call)
    start_ms = record.get("start_timestamp")
    end_ms = record.get("end_timestamp")
    return Call(
        id=record["call_id"],
        provider=PROVIDER,
        agent_id=record.get("agent_id"),
        to_number=record.get("to_number"),
        from_number=record.get("from_number"),
        status=map_retell_call_status(record.get("call_status")),
        started_at=_from_epoch_ms(start_ms),
        ended_at=_from_epoch_ms(end_ms),
        duration=_compute_duration(start_ms, end_ms, record.get("duration_ms")),
        transcript=record.get("transcript"),
        recording_url=record.get("recording_url"),
        metadata=record.get("metadata"),
        raw=call,
    )


def map_create_call_to_retell(params: CreateCallParams) -> dict[str, Any]:
    """Build the ``call.create_phone_call`` request body."""
    dto: dict[str, Any] = {"to_number": format_phone_number(params.to_number)}
    if params.from_number:
        dto["from_number"] = format_phone_number(params.from_number)
    if params.agent_id:
        dto["override_agent_id"] = params.agent_id
    if params.metadata:
        dto["metadata"] = params.metadata
    if params.provider_options:
        dto.update(params.provider_options)
    return dto


def map_update_call_to_retell(params: UpdateCallParams) -> dict[str, Any]:
    """Build the ``call.update`` request body."""
    dto: dict[str, Any] = {}
    if params.metadata:
        dto["metadata"] = params.metadata
    if params.provider_options:
        dto.update(params.provider_options)
    return dto


# Phone number


def _parse_area_code(area_code: str) -> int:
    match = _AREA_CODE_PATTERN.match(area_code)
    if match is None:
        raise ProviderError(
            PROVIDER,
            "Invalid area_code: expected numeric string",
            error_code=VoiceAIErrorCode.INVALID_PARAMS,
        )
    return int(match.group(1))


def _map_phone_number_fields(params: UpdatePhoneNumberParams) -> dict[str, Any]:
    dto: dict[str, Any] = {}
    if params.name is not None:
        dto["nickname"] = params.name
    if params.inbound_agent_id is not None:
        dto["inbound_agent_id"] = params.inbound_agent_id
    if params.outbound_agent_id is not None:
        dto["outbound_agent_id"] = params.outbound_agent_id
    if params.webhook_url is not None:
        dto["inbound_webhook_url"] = params.webhook_url
    return dto


def map_create_phone_number_to_retell(params: CreatePhoneNumberParams) -> dict[str, Any]:
    """
    Build the ``phone_number.create`` request body.

    Raises:
        ProviderError: If ``area_code`` is not numeric
    """
    dto = _map_phone_number_fields(params)
    if params.area_code is not None:
        dto["area_code"] = _parse_area_code(params.area_code)
    if params.provider_options:
        dto.update(params.provider_options)
    return dto


def map_update_phone_number_to_retell(params: UpdatePhoneNumberParams) -> dict[str, Any]:
    """Build the ``phone_number.update`` request body."""
    dto = _map_phone_number_fields(params)
    if params.provider_options:
        dto.update(params.provider_options)
    return dto


def map_retell_phone_number(phone_number: Any) -> PhoneNumber:
    """Map a Retell phone number. Retell keys numbers by the number itself."""
    record = to_record(phone_number)
    inbound_agent_id = record.get("inbound_agent_id")
    area_code = record.get("area_code")
    return PhoneNumber(
        id=record["phone_number"],
        provider=PROVIDER,
        number=record.get("phone_number"),
        name=record.get("nickname"),
        agent_id=inbound_agent_id,
        inbound_agent_id=inbound_agent_id,
        outbound_agent_id=record.get("outbound_agent_id"),
        webhook_url=record.get("inbound_webhook_url"),
        area_code=str(area_code) if area_code is not None else None,
        metadata=None,
        raw=phone_number,
    )


# Knowledge base


def _map_knowledge_base_source(source: Mapping[str, Any]) -> KnowledgeBaseSource:
    url = source.get("url") or source.get("file_url") or source.get("content_url")
    return KnowledgeBaseSource(
        id=source["source_id"],
        type=source["type"],
        url=url,
    )


def map_create_knowledge_base_to_retell(
    params: CreateKnowledgeBaseParams,
) -> dict[str, Any]:
    """Build the ``knowledge_base.create`` request body."""
    dto: dict[str, Any] = {"knowledge_base_name": params.name}
    if params.provider_options:
        dto.update(params.provider_options)
    return dto


def map_retell_knowledge_base(knowledge_base: Any) -> KnowledgeBase:
    """Map a Retell knowledge base. Missing sources become an empty list."""
    record = to_record(knowledge_base)
    sources = record.get("knowledge_base_sources") or []
    return KnowledgeBase(
        id=record["knowledge_base_id"],
        provider=PROVIDER,
        name=record.get("knowledge_base_name") or "",
        status=record.get("status") or "",
        sources=[_map_knowledge_base_source(source) for source in sources],
        raw=knowledge_base,
    )
