"""Vapi phone number manager (read only)."""

from typing import Any

from vapi import AsyncVapi

from voice_ai.base import PhoneNumberManager
from voice_ai.exceptions import wrap_error
from voice_ai.providers.vapi.mappers import PROVIDER, map_vapi_phone_number
from voice_ai.schemas import ListPhoneNumbersParams, PaginatedList, PhoneNumber
from voice_ai.utils.logger import logger


class VapiPhoneNumberManager(PhoneNumberManager):
    """Phone numbers backed by Vapi's ``phone_numbers`` resource."""

    def __init__(self, client: AsyncVapi):
        self._client = client

    async def list(
        self, params: ListPhoneNumbersParams | None = None
    ) -> PaginatedList[PhoneNumber]:
        query: dict[str, Any] = {}
        if params is not None and params.limit:
            query["limit"] = params.limit
        try:
            result = await self._client.phone_numbers.list(**query)
            items = [map_vapi_phone_number(number) for number in result]
        except Exception as e:
            logger.error("[Vapi Provider] Error listing phone numbers", error=str(e))
            raise wrap_error(PROVIDER, e) from e
        return PaginatedList(items=items, has_more=False)

    async def get(self, id: str) -> PhoneNumber:
        try:
            result = await self._client.phone_numbers.get(id)
            return map_vapi_phone_number(result)
        except Exception as e:
            logger.error(
                "[Vapi Provider] Error getting phone number", phone_number_id=id, error=str(e)
            )
            raise wrap_error(PROVIDER, e, "PhoneNumber", id) from e
