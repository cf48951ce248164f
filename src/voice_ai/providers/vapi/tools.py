"""Vapi tool manager."""

from typing import Any

from vapi import AsyncVapi

from voice_ai.base import ToolManager
from voice_ai.exceptions import wrap_error
from voice_ai.providers.vapi.mappers import (
    PROVIDER,
    map_create_tool_to_vapi,
    map_update_tool_to_vapi,
    map_vapi_tool,
)
from voice_ai.schemas import (
    CreateToolParams,
    ListToolsParams,
    PaginatedList,
    Tool,
    UpdateToolParams,
)
from voice_ai.utils.logger import logger


class VapiToolManager(ToolManager):
    """Tools backed by Vapi's ``tools`` resource."""

    def __init__(self, client: AsyncVapi):
        self._client = client

    async def create(self, params: CreateToolParams) -> Tool:
        dto = map_create_tool_to_vapi(params)
        logger.info("[Vapi Provider] Creating tool", tool_type=params.type)
        try:
            result = await self._client.tools.create(request=dto)
            return map_vapi_tool(result)
        except Exception as e:
            logger.error("[Vapi Provider] Error creating tool", error=str(e))
            raise wrap_error(PROVIDER, e) from e

    async def list(self, params: ListToolsParams | None = None) -> PaginatedList[Tool]:
        query: dict[str, Any] = {}
        if params is not None and params.limit:
            query["limit"] = params.limit
        try:
            result = await self._client.tools.list(**query)
            items = [map_vapi_tool(tool) for tool in result]
        except Exception as e:
            logger.error("[Vapi Provider] Error listing tools", error=str(e))
            raise wrap_error(PROVIDER, e) from e
        return PaginatedList(items=items, has_more=False)

    async def get(self, id: str) -> Tool:
        try:
            result = await self._client.tools.get(id)
            return map_vapi_tool(result)
        except Exception as e:
            logger.error("[Vapi Provider] Error getting tool", tool_id=id, error=str(e))
            raise wrap_error(PROVIDER, e, "Tool", id) from e

    async def update(self, id: str, params: UpdateToolParams) -> Tool:
        dto = map_update_tool_to_vapi(params)
        try:
            result = await self._client.tools.update(id, request=dto)
            return map_vapi_tool(result)
        except Exception as e:
            logger.error("[Vapi Provider] Error updating tool", tool_id=id, error=str(e))
            raise wrap_error(PROVIDER, e, "Tool", id) from e

    async def delete(self, id: str) -> None:
        logger.info("[Vapi Provider] Deleting tool", tool_id=id)
        try:
            await self._client.tools.delete(id)
        except Exception as e:
            logger.error("[Vapi Provider] Error deleting tool", tool_id=id, error=str(e))
            raise wrap_error(PROVIDER, e, "Tool", id) from e
