"""Retell knowledge base manager."""

from retell import AsyncRetell

from voice_ai.base import KnowledgeBaseManager
from voice_ai.exceptions import wrap_error
from voice_ai.providers.retell.mappers import (
    PROVIDER,
    map_create_knowledge_base_to_retell,
    map_retell_knowledge_base,
)
from voice_ai.schemas import (
    CreateKnowledgeBaseParams,
    KnowledgeBase,
    ListKnowledgeBaseParams,
    PaginatedList,
)
from voice_ai.utils.logger import logger


class RetellKnowledgeBaseManager(KnowledgeBaseManager):
    """Knowledge bases backed by Retell's ``knowledge_base`` resource."""

    def __init__(self, client: AsyncRetell):
        self._client = client

    async def create(self, params: CreateKnowledgeBaseParams) -> KnowledgeBase:
        dto = map_create_knowledge_base_to_retell(params)
        logger.info("[Retell Provider] Creating knowledge base", knowledge_base_name=params.name)
        try:
            result = await self._client.knowledge_base.create(**dto)
            return map_retell_knowledge_base(result)
        except Exception as e:
            logger.error("[Retell Provider] Error creating knowledge base", error=str(e))
            raise wrap_error(PROVIDER, e) from e

    async def list(
        self, params: ListKnowledgeBaseParams | None = None
    ) -> PaginatedList[KnowledgeBase]:
        try:
            result = await self._client.knowledge_base.list()
            items = [map_retell_knowledge_base(kb) for kb in result]
        except Exception as e:
            logger.error("[Retell Provider] Error listing knowledge bases", error=str(e))
            raise wrap_error(PROVIDER, e) from e

        if params is not None and params.limit:
            items = items[: params.limit]
        return PaginatedList(items=items, has_more=False)

    async def get(self, id: str) -> KnowledgeBase:
        try:
            result = await self._client.knowledge_base.retrieve(id)
            return map_retell_knowledge_base(result)
        except Exception as e:
            logger.error(
                "[Retell Provider] Error getting knowledge base", knowledge_base_id=id, error=str(e)
            )
            raise wrap_error(PROVIDER, e, "KnowledgeBase", id) from e

    async def delete(self, id: str) -> None:
        logger.info("[Retell Provider] Deleting knowledge base", knowledge_base_id=id)
        try:
            await self._client.knowledge_base.delete(id)
        except Exception as e:
            logger.error(
                "[Retell Provider] Error deleting knowledge base", knowledge_base_id=id, error=str(e)
            )
            raise wrap_error(PROVIDER, e, "KnowledgeBase", id) from e
