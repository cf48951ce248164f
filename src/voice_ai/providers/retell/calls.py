"""
Retell call manager.

Retell's ``call.list`` takes a ``filter_criteria`` object that covers most
unified filters. The ones it cannot express are rejected up front so callers
never get an unfiltered result they believe was filtered.
"""

from datetime import datetime, timezone
from typing import Any

from retell import AsyncRetell

from voice_ai.base import CallManager
from voice_ai.constants import VoiceAIErrorCode
from voice_ai.exceptions import ProviderError, wrap_error
from voice_ai.providers.retell.mappers import (
    PROVIDER,
    map_create_call_to_retell,
    map_retell_call,
    map_update_call_to_retell,
)
from voice_ai.schemas import (
    Call,
    CreateCallParams,
    ListCallsParams,
    PaginatedList,
    UpdateCallParams,
)
from voice_ai.utils.logger import logger

SORT_ORDER_MAPPING = {"asc": "ascending", "desc": "descending"}


def get_unsupported_list_params(params: ListCallsParams) -> list[str]:
    """Return the unified call filters Retell cannot apply, in a stable order."""
    unsupported: list[str] = []
    if params.phone_number_id:
        unsupported.append("phone_number_id")
    if params.sort is not None and params.sort.field != "start_time":
        unsupported.append("sort.field")
    return unsupported


def to_timestamp_ms(value: str, label: str) -> int:
    """
    Parse an ISO-8601 string into epoch milliseconds. Naive values are UTC.

    Raises:
        ProviderError: If the value is not a valid ISO timestamp
    """
    try:
        parsed = datetime.fromisoformat(value)
    except (TypeError, ValueError) as e:
        raise ProviderError(
            PROVIDER,
            f"Invalid {label}. Expected ISO timestamp.",
            cause=e,
            error_code=VoiceAIErrorCode.INVALID_PARAMS,
        ) from e
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return round(parsed.timestamp() * 1000)


def build_list_query(params: ListCallsParams) -> dict[str, Any]:
    """
    Build the ``call.list`` keyword arguments.

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
    if params.cursor:
        query["pagination_key"] = params.cursor

    criteria: dict[str, Any] = {}
    if params.agent_id:
        criteria["agent_id"] = [params.agent_id]
    if params.call_status:
        criteria["call_status"] = [params.call_status]
    if params.call_type:
        criteria["call_type"] = [params.call_type]
    if params.direction:
        criteria["direction"] = [params.direction]
    if params.user_sentiment:
        criteria["user_sentiment"] = [params.user_sentiment]
    if params.call_successful is not None:
        criteria["call_successful"] = [params.call_successful]
    if params.start_time:
        criteria["start_timestamp"] = {
            "lower_threshold": to_timestamp_ms(params.start_time, "start_time")
        }
    if params.end_time:
        criteria["end_timestamp"] = {
            "upper_threshold": to_timestamp_ms(params.end_time, "end_time")
        }
    for key, value in (params.metadata or {}).items():
        criteria[f"metadata.{key}"] = [value]
    for key, value in (params.dynamic_variables or {}).items():
        criteria[f"dynamic_variables.{key}"] = [value]
    if criteria:
        query["filter_criteria"] = criteria

    if params.sort is not None:
        query["sort_order"] = SORT_ORDER_MAPPING[params.sort.order]

    if params.provider_options:
        query.update(params.provider_options)
    return query


class RetellCallManager(CallManager):
    """Calls backed by Retell's ``call`` resource."""

    def __init__(self, client: AsyncRetell):
        self._client = client

    async def create(self, params: CreateCallParams) -> Call:
        dto = map_create_call_to_retell(params)
        logger.info("[Retell Provider] Creating phone call", to_number=dto["to_number"])
        try:
            result = await self._client.call.create_phone_call(**dto)
            return map_retell_call(result)
        except Exception as e:
            logger.error("[Retell Provider] Error creating call", error=str(e))
            raise wrap_error(PROVIDER, e) from e

    async def list(self, params: ListCallsParams | None = None) -> PaginatedList[Call]:
        query = build_list_query(params) if params is not None else {}
        try:
            result = await self._client.call.list(**query)
            items = [map_retell_call(call) for call in result]
        except Exception as e:
            logger.error("[Retell Provider] Error listing calls", error=str(e))
            raise wrap_error(PROVIDER, e) from e
        return PaginatedList(items=items, has_more=False)

    async def get(self, id: str) -> Call:
        try:
            result = await self._client.call.retrieve(id)
            return map_retell_call(result)
        except Exception as e:
            logger.error("[Retell Provider] Error getting call", call_id=id, error=str(e))
            raise wrap_error(PROVIDER, e, "Call", id) from e

    async def update(self, id: str, params: UpdateCallParams) -> Call:
        dto = map_update_call_to_retell(params)
        try:
            result = await self._client.call.update(id, **dto)
            return map_retell_call(result)
        except Exception as e:
            logger.error("[Retell Provider] Error updating call", call_id=id, error=str(e))
            raise wrap_error(PROVIDER, e, "Call", id) from e

    async def delete(self, id: str) -> None:
        logger.info("[Retell Provider] Deleting call", call_id=id)
        try:
            await self._client.call.delete(id)
        except Exception as e:
            logger.error("[Retell Provider] Error deleting call", call_id=id, error=str(e))
            raise wrap_error(PROVIDER, e, "Call", id) from e
