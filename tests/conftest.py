"""Pytest fixtures for pipeline_hooks tests."""

import pytest

from pipeline_hooks import configure_logging, disable_logging, set_dispatcher

from mocks import HookA, HookB, HookC, HookD


@pytest.fixture(autouse=True)
def reset_default_dispatcher():
    """Drop the process-wide dispatcher before and after each test."""
    set_dispatcher(None)
    yield
    set_dispatcher(None)


@pytest.fixture
def hooks():
    """One instance of each mock hook, in order A, B, C, D."""
    return [HookA(), HookB(), HookC(), HookD()]


@pytest.fixture
def log_messages():
    """Capture the package's loguru output at DEBUG level."""
    messages = []
    configure_logging(level="DEBUG", sink=lambda message: messages.append(message.record["message"]))
    yield messages
    disable_logging()
