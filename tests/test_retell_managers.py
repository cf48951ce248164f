"""Tests for the Retell resource managers against a fake SDK client."""

import pytest

from tests.conftest import VendorAPIError
from voice_ai.constants import CallStatus, VoiceAIErrorCode
from voice_ai.exceptions import AuthenticationError, NotFoundError, ProviderError
from voice_ai.providers.retell import (
    RetellAgentManager,
    RetellCallManager,
    RetellKnowledgeBaseManager,
    RetellPhoneNumberManager,
)
from voice_ai.providers.retell.calls import build_list_query, to_timestamp_ms
from voice_ai.schemas import (
    CallSort,
    CreateAgentParams,
    CreateCallParams,
    CreatePhoneNumberParams,
    ListAgentsParams,
    ListCallsParams,
    ListKnowledgeBaseParams,
    ListPhoneNumbersParams,
    UpdateAgentParams,
    UpdateCallParams,
)


@pytest.fixture
def agent_manager(retell_client):
    return RetellAgentManager(retell_client)


@pytest.fixture
def call_manager(retell_client):
    return RetellCallManager(retell_client)


class TestRetellAgentManager:
    """Test suite for RetellAgentManager."""

    @pytest.mark.asyncio
    async def test_create_agent(self, agent_manager, retell_client):
        """Test that create sends the mapped body and maps the response."""
        retell_client.agent.create.return_value = {"agent_id": "a1", "agent_name": "Sales"}

        agent = await agent_manager.create(CreateAgentParams(name="Sales"))

        retell_client.agent.create.assert_awaited_once_with(agent_name="Sales")
        assert agent.id == "a1"
        assert agent.name == "Sales"

    @pytest.mark.asyncio
    async def test_list_truncates_to_limit(self, agent_manager, retell_client):
        """Test that Retell results are cut client-side when a limit is given."""
        retell_client.agent.list.return_value = [{"agent_id": f"a{i}"} for i in range(5)]

        result = await agent_manager.list(ListAgentsParams(limit=2))

        assert [agent.id for agent in result.items] == ["a0", "a1"]
        assert result.has_more is False
        assert result.next_cursor is None

    @pytest.mark.asyncio
    async def test_list_without_params(self, agent_manager, retell_client):
        retell_client.agent.list.return_value = [{"agent_id": "a1"}, {"agent_id": "a2"}]

        result = await agent_manager.list()

        assert len(result.items) == 2

    @pytest.mark.asyncio
    async def test_get_missing_agent(self, agent_manager, retell_client):
        """Test that a 404 on get becomes NotFoundError."""
        original = VendorAPIError("Not Found", status_code=404)
        retell_client.agent.retrieve.side_effect = original

        with pytest.raises(NotFoundError) as exc_info:
            await agent_manager.get("missing")

        assert str(exc_info.value) == "[retell] Agent not found: missing"
        assert exc_info.value.cause is original

    @pytest.mark.asyncio
    async def test_update_agent(self, agent_manager, retell_client):
        retell_client.agent.update.return_value = {"agent_id": "a1", "begin_message": "Yo"}

        agent = await agent_manager.update("a1", UpdateAgentParams(first_message="Yo"))

        retell_client.agent.update.assert_awaited_once_with("a1", begin_message="Yo")
        assert agent.first_message == "Yo"

    @pytest.mark.asyncio
    async def test_update_missing_agent(self, agent_manager, retell_client):
        """Test that a 404 on update becomes NotFoundError."""
        original = VendorAPIError("missing", status_code=404)
        retell_client.agent.update.side_effect = original

        with pytest.raises(NotFoundError) as exc_info:
            await agent_manager.update("a1", UpdateAgentParams(name="x"))

        assert str(exc_info.value) == "[retell] Agent not found: a1"
        assert exc_info.value.cause is original

    @pytest.mark.asyncio
    async def test_delete_unauthorized(self, agent_manager, retell_client):
        retell_client.agent.delete.side_effect = VendorAPIError("bad key", status_code=401)

        with pytest.raises(AuthenticationError):
            await agent_manager.delete("a1")


class TestRetellCallManager:
    """Test suite for RetellCallManager."""

    @pytest.mark.asyncio
    async def test_create_call(self, call_manager, retell_client):
        retell_client.call.create_phone_call.return_value = {
            "call_id": "c1",
            "call_status": "registered",
            "to_number": "+16502530000",
        }

        call = await call_manager.create(
            CreateCallParams(agent_id="a1", to_number="650-253-0000")
        )

        retell_client.call.create_phone_call.assert_awaited_once_with(
            to_number="+16502530000", override_agent_id="a1"
        )
        assert call.status == CallStatus.QUEUED

    @pytest.mark.asyncio
    async def test_unsupported_filters_fail_before_request(self, call_manager, retell_client):
        """Test that phone_number_id is rejected without calling Retell."""
        with pytest.raises(ProviderError) as exc_info:
            await call_manager.list(ListCallsParams(phone_number_id="pn_1"))

        assert str(exc_info.value) == "[retell] Unsupported list params: phone_number_id"
        assert exc_info.value.error_code == VoiceAIErrorCode.UNSUPPORTED_PARAMS
        retell_client.call.list.assert_not_called()

    @pytest.mark.asyncio
    async def test_sort_by_created_at_is_unsupported(self, call_manager, retell_client):
        params = ListCallsParams(phone_number_id="pn_1", sort=CallSort(field="created_at"))

        with pytest.raises(ProviderError, match="Unsupported list params: phone_number_id, sort.field"):
            await call_manager.list(params)

        retell_client.call.list.assert_not_called()

    @pytest.mark.asyncio
    async def test_invalid_start_time(self, call_manager, retell_client):
        with pytest.raises(ProviderError) as exc_info:
            await call_manager.list(ListCallsParams(start_time="yesterday"))

        assert str(exc_info.value) == "[retell] Invalid start_time. Expected ISO timestamp."
        retell_client.call.list.assert_not_called()

    @pytest.mark.asyncio
    async def test_list_sends_filter_criteria(self, call_manager, retell_client):
        retell_client.call.list.return_value = [{"call_id": "c1", "call_status": "ongoing"}]

        result = await call_manager.list(
            ListCallsParams(limit=10, agent_id="a1", call_successful=True)
        )

        retell_client.call.list.assert_awaited_once_with(
            limit=10,
            filter_criteria={"agent_id": ["a1"], "call_successful": [True]},
        )
        assert result.items[0].status == CallStatus.IN_PROGRESS
        assert result.has_more is False

    @pytest.mark.asyncio
    async def test_list_without_params_sends_nothing(self, call_manager, retell_client):
        retell_client.call.list.return_value = []

        result = await call_manager.list()

        retell_client.call.list.assert_awaited_once_with()
        assert result.items == []

    @pytest.mark.asyncio
    async def test_list_error_keeps_cause(self, call_manager, retell_client):
        original = VendorAPIError("Internal error", status_code=500)
        retell_client.call.list.side_effect = original

        with pytest.raises(ProviderError) as exc_info:
            await call_manager.list(ListCallsParams())

        assert str(exc_info.value) == "[retell] Internal error"
        assert exc_info.value.cause is original

    @pytest.mark.asyncio
    async def test_update_missing_call(self, call_manager, retell_client):
        retell_client.call.update.side_effect = VendorAPIError("nope", status_code=404)

        with pytest.raises(NotFoundError, match="Call not found: c9"):
            await call_manager.update("c9", UpdateCallParams(metadata={"a": 1}))

    @pytest.mark.asyncio
    async def test_get_missing_call(self, call_manager, retell_client):
        retell_client.call.retrieve.side_effect = VendorAPIError("nope", status=404)

        with pytest.raises(NotFoundError, match="Call not found: c9"):
            await call_manager.get("c9")


class TestRetellListQuery:
    """Test suite for the call list query builder."""

    def test_full_query(self):
        query = build_list_query(
            ListCallsParams(
                limit=50,
                cursor="page_2",
                call_status="ended",
                direction="inbound",
                call_type="phone_call",
                user_sentiment="Positive",
                start_time="2024-01-01T00:00:00Z",
                end_time="2024-01-02T00:00:00+00:00",
                metadata={"crm_id": "42"},
                dynamic_variables={"first_name": "Ana"},
                sort=CallSort(order="asc"),
                provider_options={"limit": 25},
            )
        )

        assert query == {
            "limit": 25,
            "pagination_key": "page_2",
            "filter_criteria": {
                "call_status": ["ended"],
                "call_type": ["phone_call"],
                "direction": ["inbound"],
                "user_sentiment": ["Positive"],
                "start_timestamp": {"lower_threshold": 1_704_067_200_000},
                "end_timestamp": {"upper_threshold": 1_704_153_600_000},
                "metadata.crm_id": ["42"],
                "dynamic_variables.first_name": ["Ana"],
            },
            "sort_order": "ascending",
        }

    def test_naive_timestamp_is_utc(self):
        assert to_timestamp_ms("2024-01-01T00:00:00", "start_time") == 1_704_067_200_000

    def test_invalid_end_time(self):
        with pytest.raises(ProviderError, match="Invalid end_time. Expected ISO timestamp."):
            build_list_query(ListCallsParams(end_time="not-a-date"))


class TestRetellPhoneNumberManager:
    """Test suite for RetellPhoneNumberManager."""

    @pytest.mark.asyncio
    async def test_list_truncates_to_limit(self, retell_client):
        retell_client.phone_number.list.return_value = [
            {"phone_number": "+16502530000"},
            {"phone_number": "+16502530001"},
        ]
        manager = RetellPhoneNumberManager(retell_client)

        result = await manager.list(ListPhoneNumbersParams(limit=1))

        assert [number.id for number in result.items] == ["+16502530000"]

    @pytest.mark.asyncio
    async def test_create_with_bad_area_code_sends_nothing(self, retell_client):
        manager = RetellPhoneNumberManager(retell_client)

        with pytest.raises(ProviderError, match="Invalid area_code"):
            await manager.create(CreatePhoneNumberParams(area_code="n/a"))

        retell_client.phone_number.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_get_missing_number(self, retell_client):
        retell_client.phone_number.retrieve.side_effect = VendorAPIError("nope", status_code=404)
        manager = RetellPhoneNumberManager(retell_client)

        with pytest.raises(NotFoundError, match="PhoneNumber not found: \\+16502530000"):
            await manager.get("+16502530000")


class TestRetellKnowledgeBaseManager:
    """Test suite for RetellKnowledgeBaseManager."""

    @pytest.mark.asyncio
    async def test_list_truncates_to_limit(self, retell_client):
        retell_client.knowledge_base.list.return_value = [
            {"knowledge_base_id": f"kb{i}", "knowledge_base_name": "FAQ", "status": "complete"}
            for i in range(3)
        ]
        manager = RetellKnowledgeBaseManager(retell_client)

        result = await manager.list(ListKnowledgeBaseParams(limit=2))

        assert [kb.id for kb in result.items] == ["kb0", "kb1"]

    @pytest.mark.asyncio
    async def test_delete_missing(self, retell_client):
        retell_client.knowledge_base.delete.side_effect = VendorAPIError("gone", status_code=404)
        manager = RetellKnowledgeBaseManager(retell_client)

        with pytest.raises(NotFoundError, match="KnowledgeBase not found: kb1"):
            await manager.delete("kb1")
