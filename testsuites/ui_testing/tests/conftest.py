"""
================================================================================
UI Testing Pytest Configuration
================================================================================

Fixtures for live runs against the Selenium Playground.

Key Features:
- Settings loaded once per session from config/config.yaml + environment
- Browser (local or LambdaTest grid) and page lifecycle per test
- PlaygroundHelper facade fixture
- Screenshot attached to Allure on failure

These tests need a browser and network access; they are skipped unless
pytest runs with --run-ui or RUN_UI_TESTS=1.

================================================================================
"""

from typing import AsyncGenerator, Generator

import allure
import pytest
from loguru import logger
from playwright.async_api import Page

from testsuites.ui_testing.framework.browser_manager import BrowserManager
from testsuites.ui_testing.framework.settings import PlaygroundSettings, init_logger, load_settings
from testsuites.ui_testing.pages import FormData, PlaygroundHelper


# ================================================================================
# Settings
# ================================================================================

@pytest.fixture(scope="session")
def settings() -> PlaygroundSettings:
    """Session-wide settings (YAML + environment overrides)."""
    init_logger()
    return load_settings()


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture
async def browser_manager(
    request: pytest.FixtureRequest,
    settings: PlaygroundSettings,
) -> AsyncGenerator[BrowserManager, None]:
    """
    Browser per test.

    On the LambdaTest grid every test is its own session, named after the test.
    """
    manager = BrowserManager(settings.execution, session_name=request.node.name)
    await manager.start()
    yield manager
    await manager.close()


@pytest.fixture
async def page(request: pytest.FixtureRequest, browser_manager: BrowserManager) -> AsyncGenerator[Page, None]:
    """Fresh page in an isolated context; screenshot attached if the test fails."""
    page = await browser_manager.new_page()
    yield page

    report = getattr(request.node, "rep_call", None)
    if report is not None and report.failed:
        try:
            allure.attach(
                await page.screenshot(full_page=True),
                name="failure_screenshot",
                attachment_type=allure.attachment_type.PNG,
            )
        except Exception as e:
            logger.warning(f"Failed to capture screenshot on failure: {e}")


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def playground(page: Page, settings: PlaygroundSettings) -> Generator[PlaygroundHelper, None, None]:
    """PlaygroundHelper bound to the test's page; locator health attached afterwards."""
    helper = PlaygroundHelper(page, settings)
    yield helper

    for scenario in (helper.simple_form, helper.sliders, helper.input_form):
        if scenario.navigated:
            allure.attach(
                scenario.get_locator_health_report(),
                name=f"locator_health_{scenario.PATH_KEY}",
                attachment_type=allure.attachment_type.TEXT,
            )


@pytest.fixture
def form_data() -> FormData:
    """A fully populated Input Form Submit record."""
    return FormData(
        name="Test User",
        email="test.user@example.com",
        password="Password123!",
        company="Test Company",
        website="https://www.example.com",
        country="United States",
        city="New York",
        address1="123 Test Street",
        address2="Apt 4B",
        state="NY",
        zip_code="10001",
    )


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Expose each phase's report on the item so fixtures can see failures."""
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)
