"""Vapi agent manager. Vapi calls agents "assistants"."""

from typing import Any

from vapi import AsyncVapi

from voice_ai.base import AgentManager
from voice_ai.exceptions import wrap_error
from voice_ai.providers.vapi.mappers import (
    PROVIDER,
    map_create_agent_to_vapi,
    map_update_agent_to_vapi,
    map_vapi_assistant,
)
from voice_ai.schemas import (
    Agent,
    CreateAgentParams,
    ListAgentsParams,
    PaginatedList,
    UpdateAgentParams,
)
from voice_ai.utils.logger import logger


class VapiAgentManager(AgentManager):
    """Agents backed by Vapi's ``assistants`` resource."""

    def __init__(self, client: AsyncVapi):
        self._client = client

    async def create(self, params: CreateAgentParams) -> Agent:
        dto = map_create_agent_to_vapi(params)
        logger.info("[Vapi Provider] Creating assistant", fields=sorted(dto))
        try:
            result = await self._client.assistants.create(**dto)
            return map_vapi_assistant(result)
        except Exception as e:
            logger.error("[Vapi Provider] Error creating assistant", error=str(e))
            raise wrap_error(PROVIDER, e) from e

    async def list(self, params: ListAgentsParams | None = None) -> PaginatedList[Agent]:
        query: dict[str, Any] = {}
        if params is not None and params.limit:
            query["limit"] = params.limit
        try:
            result = await self._client.assistants.list(**query)
            items = [map_vapi_assistant(assistant) for assistant in result]
        except Exception as e:
            logger.error("[Vapi Provider] Error listing assistants", error=str(e))
            raise wrap_error(PROVIDER, e) from e
        return PaginatedList(items=items, has_more=False)

    async def get(self, id: str) -> Agent:
        try:
            result = await self._client.assistants.get(id)
            return map_vapi_assistant(result)
        except Exception as e:
            logger.error("[Vapi Provider] Error getting assistant", assistant_id=id, error=str(e))
            raise wrap_error(PROVIDER, e, "Agent", id) from e

    async def update(self, id: str, params: UpdateAgentParams) -> Agent:
        dto = map_update_agent_to_vapi(params)
        logger.info("[Vapi Provider] Updating assistant", assistant_id=id, fields=sorted(dto))
        try:
            result = await self._client.assistants.update(id, **dto)
            return map_vapi_assistant(result)
        except Exception as e:
            logger.error("[Vapi Provider] Error updating assistant", assistant_id=id, error=str(e))
            raise wrap_error(PROVIDER, e, "Agent", id) from e

    async def delete(self, id: str) -> None:
        logger.info("[Vapi Provider] Deleting assistant", assistant_id=id)
        try:
            await self._client.assistants.delete(id)
        except Exception as e:
            logger.error("[Vapi Provider] Error deleting assistant", assistant_id=id, error=str(e))
            raise wrap_error(PROVIDER, e, "Agent", id) from e
