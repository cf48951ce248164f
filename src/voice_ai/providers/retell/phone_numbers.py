"""Retell phone number manager. Retell identifies numbers by the E.164 string."""

from retell import AsyncRetell

from voice_ai.base import PhoneNumberManager
from voice_ai.exceptions import wrap_error
from voice_ai.providers.retell.mappers import (
    PROVIDER,
    map_create_phone_number_to_retell,
    map_retell_phone_number,
    map_update_phone_number_to_retell,
)
from voice_ai.schemas import (
    CreatePhoneNumberParams,
    ListPhoneNumbersParams,
    PaginatedList,
    PhoneNumber,
    UpdatePhoneNumberParams,
)
from voice_ai.utils.logger import logger


class RetellPhoneNumberManager(PhoneNumberManager):
    """Phone numbers backed by Retell's ``phone_number`` resource."""

    def __init__(self, client: AsyncRetell):
        self._client = client

    async def list(
        self, params: ListPhoneNumbersParams | None = None
    ) -> PaginatedList[PhoneNumber]:
        try:
            result = await self._client.phone_number.list()
            items = [map_retell_phone_number(number) for number in result]
        except Exception as e:
            logger.error("[Retell Provider] Error listing phone numbers", error=str(e))
            raise wrap_error(PROVIDER, e) from e

        if params is not None and params.limit:
            items = items[: params.limit]
        return PaginatedList(items=items, has_more=False)

    async def get(self, id: str) -> PhoneNumber:
        try:
            result = await self._client.phone_number.retrieve(id)
            return map_retell_phone_number(result)
        except Exception as e:
            logger.error(
                "[Retell Provider] Error getting phone number", phone_number=id, error=str(e)
            )
            raise wrap_error(PROVIDER, e, "PhoneNumber", id) from e

    async def create(self, params: CreatePhoneNumberParams) -> PhoneNumber:
        """
        Purchase a phone number.

        Raises:
            ProviderError: If ``area_code`` is not numeric (no request is sent)
        """
        dto = map_create_phone_number_to_retell(params)
        logger.info("[Retell Provider] Creating phone number", area_code=dto.get("area_code"))
        try:
            result = await self._client.phone_number.create(**dto)
            return map_retell_phone_number(result)
        except Exception as e:
            logger.error("[Retell Provider] Error creating phone number", error=str(e))
            raise wrap_error(PROVIDER, e) from e

    async def update(self, id: str, params: UpdatePhoneNumberParams) -> PhoneNumber:
        dto = map_update_phone_number_to_retell(params)
        try:
            result = await self._client.phone_number.update(id, **dto)
            return map_retell_phone_number(result)
        except Exception as e:
            logger.error(
                "[Retell Provider] Error updating phone number", phone_number=id, error=str(e)
            )
            raise wrap_error(PROVIDER, e, "PhoneNumber", id) from e

    async def delete(self, id: str) -> None:
        logger.info("[Retell Provider] Deleting phone number", phone_number=id)
        try:
            await self._client.phone_number.delete(id)
        except Exception as e:
            logger.error(
                "[Retell Provider] Error deleting phone number", phone_number=id, error=str(e)
            )
            raise wrap_error(PROVIDER, e, "PhoneNumber", id) from e
