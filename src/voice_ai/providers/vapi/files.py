"""Vapi file manager."""

from vapi import AsyncVapi

from voice_ai.base import FileManager
from voice_ai.exceptions import wrap_error
from voice_ai.providers.vapi.mappers import (
    PROVIDER,
    map_create_file_to_vapi,
    map_update_file_to_vapi,
    map_vapi_file,
)
from voice_ai.schemas import (
    CreateFileParams,
    ListFilesParams,
    PaginatedList,
    UpdateFileParams,
    VoiceFile,
)
from voice_ai.utils.logger import logger


class VapiFileManager(FileManager):
    """Files backed by Vapi's ``files`` resource."""

    def __init__(self, client: AsyncVapi):
        self._client = client

    async def create(self, params: CreateFileParams) -> VoiceFile:
        dto = map_create_file_to_vapi(params)
        logger.info("[Vapi Provider] Uploading file", file_name=params.name)
        try:
            result = await self._client.files.create(**dto)
            return map_vapi_file(result)
        except Exception as e:
            logger.error("[Vapi Provider] Error uploading file", error=str(e))
            raise wrap_error(PROVIDER, e) from e

    async def list(self, params: ListFilesParams | None = None) -> PaginatedList[VoiceFile]:
        """List files. Vapi has no native limit here, so results are truncated locally."""
        try:
            result = await self._client.files.list()
            items = [map_vapi_file(file) for file in result]
        except Exception as e:
            logger.error("[Vapi Provider] Error listing files", error=str(e))
            raise wrap_error(PROVIDER, e) from e

        if params is not None and params.limit:
            items = items[: params.limit]
        return PaginatedList(items=items, has_more=False)

    async def get(self, id: str) -> VoiceFile:
        try:
            result = await self._client.files.get(id)
            return map_vapi_file(result)
        except Exception as e:
            logger.error("[Vapi Provider] Error getting file", file_id=id, error=str(e))
            raise wrap_error(PROVIDER, e, "File", id) from e

    async def update(self, id: str, params: UpdateFileParams) -> VoiceFile:
        dto = map_update_file_to_vapi(params)
        try:
            result = await self._client.files.update(id, **dto)
            return map_vapi_file(result)
        except Exception as e:
            logger.error("[Vapi Provider] Error updating file", file_id=id, error=str(e))
            raise wrap_error(PROVIDER, e, "File", id) from e

    async def delete(self, id: str) -> None:
        logger.info("[Vapi Provider] Deleting file", file_id=id)
        try:
            await self._client.files.delete(id)
        except Exception as e:
            logger.error("[Vapi Provider] Error deleting file", file_id=id, error=str(e))
            raise wrap_error(PROVIDER, e, "File", id) from e
