"""
Structural validation for externally built providers.

In-repo providers are correct by construction. A provider assembled by
calling code is checked here before it is trusted: the first missing
manager or method raises.
"""

import inspect
from collections.abc import Mapping
from typing import Any, TypeVar

from voice_ai.constants import VoiceAIErrorCode
from voice_ai.exceptions import VoiceAIError

P = TypeVar("P")

_SCALAR_TYPES = (str, bytes, int, float, bool)

CRUD_METHODS = ("create", "list", "get", "update", "delete")

REQUIRED_MANAGERS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("agents", CRUD_METHODS),
    ("calls", CRUD_METHODS),
    ("phone_numbers", ("list", "get")),
)

OPTIONAL_MANAGERS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("tools", CRUD_METHODS),
    ("files", CRUD_METHODS),
    ("knowledge_base", ("create", "list", "get", "delete")),
)


def _get(obj: Any, name: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def _is_manager(value: Any) -> bool:
    # Managers are instances; functions and classes do not count
    if value is None or isinstance(value, _SCALAR_TYPES):
        return False
    return not (inspect.isroutine(value) or inspect.isclass(value))


def _fail(message: str) -> VoiceAIError:
    return VoiceAIError(
        f"define_provider: {message}", error_code=VoiceAIErrorCode.INVALID_PROVIDER
    )


def _check_methods(manager_name: str, manager: Any, methods: tuple[str, ...]) -> None:
    for method in methods:
        if not callable(_get(manager, method)):
            raise _fail(f"{manager_name}.{method} must be a function")


def validate_provider(candidate: P) -> P:
    """
    Check that ``candidate`` has the shape of a VoiceProvider.

    Accepts objects or mappings. Returns the candidate unchanged.

    Raises:
        VoiceAIError: Naming the first missing field or method
    """
    provider_id = _get(candidate, "provider_id")
    if not isinstance(provider_id, str) or not provider_id:
        raise _fail("provider_id must be a non-empty string")

    for manager_name, _ in REQUIRED_MANAGERS:
        manager = _get(candidate, manager_name)
        if not _is_manager(manager):
            raise _fail(f"{manager_name} manager is required")

    for manager_name, methods in REQUIRED_MANAGERS:
        _check_methods(manager_name, _get(candidate, manager_name), methods)

    for manager_name, methods in OPTIONAL_MANAGERS:
        manager = _get(candidate, manager_name)
        if manager is not None:
            _check_methods(manager_name, manager, methods)

    return candidate


define_provider = validate_provider
