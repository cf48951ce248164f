"""
Cross-provider behaviour.

Both providers are assembled through their public factories with the vendor
SDK clients replaced by fakes, then driven through the same scenarios.
"""

from unittest.mock import patch

import pytest

from voice_ai.config import RetellConfig, VapiConfig, VoiceAISettings, set_voice_ai_settings
from voice_ai.constants import VoiceAIErrorCode
from voice_ai.define_provider import validate_provider
from voice_ai.exceptions import ProviderError, VoiceAIError
from voice_ai.providers import create_provider, create_retell, create_vapi
from voice_ai.registry import create_registry
from voice_ai.schemas import CreateAgentParams, ListCallsParams

AGENT_RECORDS = {
    "retell": {"agent_id": "agent_1", "agent_name": "Front desk", "begin_message": "Hi"},
    "vapi": {"id": "agent_1", "name": "Front desk", "firstMessage": "Hi"},
}


@pytest.fixture
def providers(retell_client, vapi_client):
    """Build both providers on top of the fake clients."""
    with (
        patch("voice_ai.providers.retell.provider.AsyncRetell", return_value=retell_client) as retell_cls,
        patch("voice_ai.providers.vapi.provider.AsyncVapi", return_value=vapi_client) as vapi_cls,
    ):
        built = {
            "retell": create_retell(RetellConfig(api_key="retell-key", timeout=5)),
            "vapi": create_vapi(VapiConfig(api_key="vapi-key", timeout=5)),
        }
    retell_cls.assert_called_once_with(
        api_key="retell-key", base_url="https://api.retellai.com", timeout=5
    )
    vapi_cls.assert_called_once_with(
        token="vapi-key", base_url="https://api.vapi.ai", timeout=5
    )
    return built


@pytest.fixture
def clients(retell_client, vapi_client):
    return {"retell": retell_client, "vapi": vapi_client}


@pytest.fixture
def default_settings():
    """Install explicit global settings and reset them afterwards."""
    set_voice_ai_settings(VoiceAISettings(provider="retell", request_timeout=12))
    yield
    set_voice_ai_settings(None)


class TestProviderShape:
    """Assembled providers expose the expected managers."""

    def test_capabilities(self, providers):
        retell, vapi = providers["retell"], providers["vapi"]

        assert retell.provider_id == "retell"
        assert retell.knowledge_base is not None
        assert retell.tools is None
        assert retell.files is None
        assert vapi.provider_id == "vapi"
        assert vapi.tools is not None
        assert vapi.files is not None
        assert vapi.knowledge_base is None

    def test_built_providers_pass_validation(self, providers):
        for provider in providers.values():
            assert validate_provider(provider) is provider

    def test_registry_over_both(self, providers):
        registry = create_registry(providers)

        assert registry.list_ids() == ["retell", "vapi"]
        assert registry.lookup("vapi") is providers["vapi"]


class TestConformance:
    """The same scenario produces the same unified result on every vendor."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("provider_id", ["retell", "vapi"])
    async def test_create_then_get_agent(self, providers, clients, provider_id):
        """Test that create and get agree on the unified agent."""
        client = clients[provider_id]
        resource = client.agent if provider_id == "retell" else client.assistants
        resource.create.return_value = AGENT_RECORDS[provider_id]
        if provider_id == "retell":
            resource.retrieve.return_value = AGENT_RECORDS[provider_id]
        else:
            resource.get.return_value = AGENT_RECORDS[provider_id]
        agents = providers[provider_id].agents

        created = await agents.create(CreateAgentParams(name="Front desk", first_message="Hi"))
        fetched = await agents.get(created.id)

        assert created.model_dump(exclude={"raw"}) == fetched.model_dump(exclude={"raw"})
        assert fetched.id == "agent_1"
        assert fetched.name == "Front desk"
        assert fetched.first_message == "Hi"
        assert fetched.provider == provider_id

    @pytest.mark.asyncio
    @pytest.mark.parametrize("provider_id", ["retell", "vapi"])
    async def test_list_pages_never_report_more(self, providers, clients, provider_id):
        client = clients[provider_id]
        if provider_id == "retell":
            client.call.list.return_value = [{"call_id": "c1"}]
        else:
            client.calls.list.return_value = [{"id": "c1"}]

        result = await providers[provider_id].calls.list(ListCallsParams(limit=1))

        assert [call.id for call in result.items] == ["c1"]
        assert result.has_more is False
        assert result.next_cursor is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("provider_id", ["retell", "vapi"])
    async def test_unsupported_filter_is_prefixed_once(self, providers, provider_id):
        params = ListCallsParams(phone_number_id="pn", sort={"field": "created_at"})

        with pytest.raises(ProviderError) as exc_info:
            await providers[provider_id].calls.list(params)

        message = str(exc_info.value)
        assert message.startswith(f"[{provider_id}] Unsupported list params: ")
        assert message.count(f"[{provider_id}]") == 1


class TestCreateProvider:
    """Test suite for the create_provider factory."""

    def test_explicit_provider(self, retell_client):
        with patch("voice_ai.providers.retell.provider.AsyncRetell", return_value=retell_client):
            provider = create_provider("retell", RetellConfig(api_key="k"))

        assert provider.provider_id == "retell"

    def test_default_provider_from_settings(self, retell_client, default_settings):
        with patch(
            "voice_ai.providers.retell.provider.AsyncRetell", return_value=retell_client
        ) as retell_cls:
            provider = create_provider(config=RetellConfig(api_key="k"))

        assert provider.provider_id == "retell"
        assert retell_cls.call_args.kwargs["timeout"] == 12

    def test_unknown_provider(self):
        with pytest.raises(VoiceAIError) as exc_info:
            create_provider("bland")

        assert exc_info.value.error_code == VoiceAIErrorCode.UNKNOWN_PROVIDER

    def test_mismatched_config(self):
        with pytest.raises(VoiceAIError) as exc_info:
            create_provider("vapi", RetellConfig(api_key="k"))

        assert exc_info.value.error_code == VoiceAIErrorCode.INVALID_PROVIDER
