"""
Vapi call manager.

Vapi's ``calls.list`` only filters by assistant, phone number and creation
time. Every other unified filter is rejected before a request is made.
"""

from datetime import datetime
from typing import Any

from vapi import AsyncVapi

from voice_ai.base import CallManager
from voice_ai.constants import VoiceAIErrorCode
from voice_ai.exceptions import ProviderError, wrap_error
from voice_ai.providers.vapi.mappers import (
    PROVIDER,
    map_create_call_to_vapi,
    map_update_call_to_vapi,
    map_vapi_call,
)
from voice_ai.schemas import (
    Call,
    CreateCallParams,
    ListCallsParams,
    PaginatedList,
    UpdateCallParams,
)
from voice_ai.utils.logger import logger


def get_unsupported_list_params(params: ListCallsParams) -> list[str]:
    """Return the unified call filters Vapi cannot apply, in a stable order."""
    unsupported: list[str] = []
    if params.cursor:
        unsupported.append("cursor")
    if params.call_status:
        unsupported.append("call_status")
    if params.direction:
        unsupported.append("direction")
    if params.call_type:
        unsupported.append("call_type")
    if params.user_sentiment:
        unsupported.append("user_sentiment")
    if params.call_successful is not None:
        unsupported.append("call_successful")
    if params.metadata:
        unsupported.append("metadata")
    if params.dynamic_variables:
        unsupported.append("dynamic_variables")
    if params.sort is not None:
        unsupported.append("sort")
    return unsupported


def parse_timestamp(value: str, label: str) -> datetime:
    """
    Parse an ISO-8601 filter bound.

    Raises:
        ProviderError: If the value is not a valid ISO timestamp
    """
    try:
        return datetime.fromisoformat(value)
    except (TypeError, ValueError) as e:
        raise ProviderError(
            PROVIDER,
            f"Invalid {label}. Expected ISO timestamp.",
            cause=e,
            error_code=VoiceAIErrorCode.INVALID_PARAMS,
        ) from e


def build_list_query(params: ListCallsParams) -> dict[str, Any]:
    """
    Build the ``calls.list`` keyword arguments.

    Raises:
        ProviderError: If a filter is unsupported or a timestamp is invalid
    """
    unsupported = get_unsupported_list_params(params)
    if unsupported:
        raise ProviderError(
            PROVIDER,
            f"Unsupported list params: {', '.join(unsupported)}",
            error_code=VoiceAIErrorCode.UNSUPPORTED_PARAMS,
        )

    query: dict[str, Any] = {}
    if params.limit:
        query["limit"] = params.limit
    if params.agent_id:
        query["assistant_id"] = params.agent_id
    if params.phone_number_id:
        query["phone_number_id"] = params.phone_number_id
    if params.start_time:
        query["created_at_gt"] = parse_timestamp(params.start_time, "start_time")
    if params.end_time:
        query["created_at_lt"] = parse_timestamp(params.end_time, "end_time")
    if params.provider_options:
        query.update(params.provider_options)
    return query


class VapiCallManager(CallManager):
    """Calls backed by Vapi's ``calls`` resource."""

    def __init__(self, client: AsyncVapi):
        self._client = client

    async def create(self, params: CreateCallParams) -> Call:
        dto = map_create_call_to_vapi(params)
        logger.info(
            "[Vapi Provider] Creating outbound call",
            assistant_id=dto.get("assistant_id"),
            phone_number_id=dto.get("phone_number_id"),
        )
        try:
            result = await self._client.calls.create(**dto)
            return map_vapi_call(result)
        except Exception as e:
            logger.error("[Vapi Provider] Error creating call", error=str(e))
            raise wrap_error(PROVIDER, e) from e

    async def list(self, params: ListCallsParams | None = None) -> PaginatedList[Call]:
        query = build_list_query(params) if params is not None else {}
        try:
            result = await self._client.calls.list(**query)
            items = [map_vapi_call(call) for call in result]
        except Exception as e:
            logger.error("[Vapi Provider] Error listing calls", error=str(e))
            raise wrap_error(PROVIDER, e) from e
        return PaginatedList(items=items, has_more=False)

    async def get(self, id: str) -> Call:
        try:
            result = await self._client.calls.get(id)
            return map_vapi_call(result)
        except Exception as e:
            logger.error("[Vapi Provider] Error getting call status", call_id=id, error=str(e))
            raise wrap_error(PROVIDER, e, "Call", id) from e

    async def update(self, id: str, params: UpdateCallParams) -> Call:
        dto = map_update_call_to_vapi(params)
        try:
            result = await self._client.calls.update(id, **dto)
            return map_vapi_call(result)
        except Exception as e:
            logger.error("[Vapi Provider] Error updating call", call_id=id, error=str(e))
            raise wrap_error(PROVIDER, e, "Call", id) from e

    async def delete(self, id: str) -> None:
        logger.info("[Vapi Provider] Deleting call", call_id=id)
        try:
            await self._client.calls.delete(id)
        except Exception as e:
            logger.error("[Vapi Provider] Error deleting call", call_id=id, error=str(e))
            raise wrap_error(PROVIDER, e, "Call", id) from e
