"""
Fixtures for browser-free unit tests of the interaction layer.
"""

from typing import Generator, List, Tuple

import pytest
from loguru import logger

from testsuites.ui_testing.framework.config_loader import ConfigLoader
from testsuites.ui_testing.framework.settings import PlaygroundSettings, Timeouts
from testsuites.unit.fake_page import FakePage


@pytest.fixture
def fake_page() -> FakePage:
    return FakePage()


@pytest.fixture
def settings() -> PlaygroundSettings:
    """Library defaults with short, distinguishable timeouts."""
    return PlaygroundSettings(
        timeouts=Timeouts(
            page_load_settle_ms=1500,
            message_check_ms=700,
            slider_ready_ms=900,
            slider_settle_ms=50,
            safe_wait_ms=300,
        )
    )


@pytest.fixture
def log_records() -> Generator[List[Tuple[str, str]], None, None]:
    """Collect (level, message) pairs emitted through loguru."""
    records: List[Tuple[str, str]] = []
    handler_id = logger.add(
        lambda message: records.append(
            (message.record["level"].name, message.record["message"])
        ),
        level="DEBUG",
    )
    yield records
    logger.remove(handler_id)


@pytest.fixture(autouse=True)
def _fresh_config() -> Generator[None, None, None]:
    ConfigLoader.reset()
    yield
    ConfigLoader.reset()
