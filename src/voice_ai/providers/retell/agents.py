"""Retell agent manager."""

from retell import AsyncRetell

from voice_ai.base import AgentManager
from voice_ai.exceptions import wrap_error
from voice_ai.providers.retell.mappers import (
    PROVIDER,
    map_create_agent_to_retell,
    map_retell_agent,
    map_update_agent_to_retell,
)
from voice_ai.schemas import (
    Agent,
    CreateAgentParams,
    ListAgentsParams,
    PaginatedList,
    UpdateAgentParams,
)
from voice_ai.utils.logger import logger


class RetellAgentManager(AgentManager):
    """Agents backed by Retell's ``agent`` resource."""

    def __init__(self, client: AsyncRetell):
        self._client = client

    async def create(self, params: CreateAgentParams) -> Agent:
        dto = map_create_agent_to_retell(params)
        logger.info("[Retell Provider] Creating agent", fields=sorted(dto))
        try:
            result = await self._client.agent.create(**dto)
            return map_retell_agent(result)
        except Exception as e:
            logger.error("[Retell Provider] Error creating agent", error=str(e))
            raise wrap_error(PROVIDER, e) from e

    async def list(self, params: ListAgentsParams | None = None) -> PaginatedList[Agent]:
        """List agents. Retell has no native limit, so results are truncated here."""
        try:
            result = await self._client.agent.list()
            items = [map_retell_agent(agent) for agent in result]
        except Exception as e:
            logger.error("[Retell Provider] Error listing agents", error=str(e))
            raise wrap_error(PROVIDER, e) from e

        if params is not None and params.limit:
            items = items[: params.limit]
        return PaginatedList(items=items, has_more=False)

    async def get(self, id: str) -> Agent:
        try:
            result = await self._client.agent.retrieve(id)
            return map_retell_agent(result)
        except Exception as e:
            logger.error("[Retell Provider] Error getting agent", agent_id=id, error=str(e))
            raise wrap_error(PROVIDER, e, "Agent", id) from e

    async def update(self, id: str, params: UpdateAgentParams) -> Agent:
        dto = map_update_agent_to_retell(params)
        logger.info("[Retell Provider] Updating agent", agent_id=id, fields=sorted(dto))
        try:
            result = await self._client.agent.update(id, **dto)
            return map_retell_agent(result)
        except Exception as e:
            logger.error("[Retell Provider] Error updating agent", agent_id=id, error=str(e))
            raise wrap_error(PROVIDER, e, "Agent", id) from e

    async def delete(self, id: str) -> None:
        logger.info("[Retell Provider] Deleting agent", agent_id=id)
        try:
            await self._client.agent.delete(id)
        except Exception as e:
            logger.error("[Retell Provider] Error deleting agent", agent_id=id, error=str(e))
            raise wrap_error(PROVIDER, e, "Agent", id) from e
