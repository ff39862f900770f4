import asyncio

import pytest
from pydantic import ValidationError

from tandem import RuntimeConfig


def test_defaults() -> None:
    config = RuntimeConfig()
    assert config.max_concurrency is None
    assert config.catch == (Exception,)
    assert config.trace is False
    assert config.max_messages is None


@pytest.mark.parametrize("value", [0, -1])
def test_max_concurrency_must_be_positive(value: int) -> None:
    with pytest.raises(ValidationError):
        RuntimeConfig(max_concurrency=value)


def test_catch_rejects_cancellation() -> None:
    with pytest.raises(ValidationError):
        RuntimeConfig(catch=(BaseException,))
    with pytest.raises(ValidationError):
        RuntimeConfig(catch=(asyncio.CancelledError,))


def test_catch_accepts_exception_types() -> None:
    config = RuntimeConfig(catch=(ValueError, OSError))
    assert config.catch == (ValueError, OSError)


def test_config_is_frozen() -> None:
    config = RuntimeConfig()
    with pytest.raises(ValidationError):
        config.trace = True  # type: ignore[misc]
