"""Shared test doubles for the vendor SDK clients."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, create_autospec

import pytest
from vapi import AsyncVapi


class VendorAPIError(Exception):
    """Stand-in for an SDK error carrying an HTTP status code."""

    def __init__(self, message: str, status_code: int | None = None, status: int | None = None):
        super().__init__(message)
        if status_code is not None:
            self.status_code = status_code
        if status is not None:
            self.status = status


def make_resource(*methods: str) -> SimpleNamespace:
    """Build a fake SDK resource whose methods are AsyncMocks."""
    return SimpleNamespace(**{method: AsyncMock() for method in methods})


@pytest.fixture
def retell_client():
    """Fake AsyncRetell client."""
    return SimpleNamespace(
        agent=make_resource("create", "list", "retrieve", "update", "delete"),
        call=make_resource("create_phone_call", "list", "retrieve", "update", "delete"),
        phone_number=make_resource("create", "list", "retrieve", "update", "delete"),
        knowledge_base=make_resource("create", "list", "retrieve", "delete"),
    )


@pytest.fixture
def vapi_client():
    """
    Fake AsyncVapi client.

    ``tools`` and ``files`` are autospecced from a real client, so calls that
    do not match the SDK signatures raise TypeError.
    """
    sdk = AsyncVapi(token="test-token")
    return SimpleNamespace(
        assistants=make_resource("create", "list", "get", "update", "delete"),
        calls=make_resource("create", "list", "get", "update", "delete"),
        phone_numbers=make_resource("list", "get"),
        tools=create_autospec(sdk.tools),
        files=create_autospec(sdk.files),
    )
