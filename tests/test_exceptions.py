"""Tests for the error taxonomy and wrap_error."""

import pytest

from tests.conftest import VendorAPIError
from voice_ai.constants import VoiceAIErrorCode
from voice_ai.exceptions import (
    AuthenticationError,
    NotFoundError,
    ProviderError,
    VoiceAIError,
    get_status_code,
    wrap_error,
)


class TestErrorHierarchy:
    """Messages and inheritance of the error classes."""

    def test_provider_error_prefixes_message(self):
        cause = RuntimeError("boom")
        err = ProviderError("vapi", "Something failed", cause)

        assert str(err) == "[vapi] Something failed"
        assert err.provider == "vapi"
        assert err.cause is cause
        assert isinstance(err, VoiceAIError)

    def test_not_found_error_message(self):
        err = NotFoundError("retell", "Agent", "agent_123")

        assert str(err) == "[retell] Agent not found: agent_123"
        assert isinstance(err, ProviderError)
        assert err.error_code == VoiceAIErrorCode.NOT_FOUND

    def test_authentication_error_message(self):
        err = AuthenticationError("vapi")

        assert str(err) == "[vapi] Authentication failed. Check your API key."
        assert isinstance(err, ProviderError)


class TestWrapError:
    """Status code translation."""

    def test_401_becomes_authentication_error(self):
        original = VendorAPIError("unauthorized", status_code=401)

        wrapped = wrap_error("vapi", original)

        assert isinstance(wrapped, AuthenticationError)
        assert wrapped.cause is original

    def test_reads_alternate_status_field(self):
        wrapped = wrap_error("retell", VendorAPIError("unauthorized", status=401))

        assert isinstance(wrapped, AuthenticationError)

    def test_404_with_context_becomes_not_found(self):
        wrapped = wrap_error("retell", VendorAPIError("nope", status_code=404), "Call", "c1")

        assert isinstance(wrapped, NotFoundError)
        assert str(wrapped) == "[retell] Call not found: c1"

    def test_404_without_context_stays_provider_error(self):
        original = VendorAPIError("nope", status_code=404)

        wrapped = wrap_error("retell", original)

        assert type(wrapped) is ProviderError
        assert str(wrapped) == "[retell] nope"
        assert wrapped.cause is original

    def test_other_errors_keep_message_and_cause(self):
        original = VendorAPIError("rate limited", status_code=429)

        wrapped = wrap_error("vapi", original, "Agent", "a1")

        assert type(wrapped) is ProviderError
        assert str(wrapped) == "[vapi] rate limited"
        assert wrapped.cause is original

    def test_error_without_status(self):
        original = ConnectionError("connection reset")

        wrapped = wrap_error("vapi", original)

        assert type(wrapped) is ProviderError
        assert wrapped.cause is original

    def test_library_errors_pass_through(self):
        original = ProviderError("vapi", "Unsupported list params: sort")

        assert wrap_error("vapi", original) is original

    @pytest.mark.parametrize("value", ["404", True, None])
    def test_non_integer_status_is_ignored(self, value):
        err = VendorAPIError("x")
        err.status_code = value

        assert get_status_code(err) is None
