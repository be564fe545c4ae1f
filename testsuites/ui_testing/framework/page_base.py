"""
================================================================================
Base Page Object
================================================================================

Foundation class for the playground scenario helpers.

Provides:
    - Navigation (playground index -> scenario link -> URL confirmation)
    - Settle delays through the page handle
    - Best-effort element primitives (SmartLocator)
    - Locator health reporting

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import re
from typing import List, Optional, Union

import allure
from loguru import logger
from playwright.async_api import Page

from .settings import PlaygroundSettings
from .smart_locator import CandidateList, SmartLocator


class BasePage:
    """
    Base class for all playground page objects.

    One instance per page session; it keeps no state besides the page
    handle, the settings and whether navigation has happened.

    Usage:
        class SimpleFormPage(BasePage):
            PATH_KEY = "simple_form"
            LINK_TEXT = "Simple Form Demo"

        page_object = SimpleFormPage(page, settings)
        await page_object.navigate()
    """

    # Override in subclasses
    PATH_KEY: str = "playground"
    LINK_TEXT: str = ""
    SETTLE_AFTER_NAVIGATION: bool = False

    def __init__(
        self,
        page: Page,
        settings: Optional[PlaygroundSettings] = None,
    ):
        """
        Initialize page object.

        Args:
            page: Playwright Page object
            settings: Target application settings (library defaults if omitted)
        """
        self.page = page
        self.settings = settings or PlaygroundSettings()
        self.smart = SmartLocator(page)
        self.navigated = False

    @property
    def timeouts(self):
        return self.settings.timeouts

    async def open_playground(self) -> None:
        """Navigate to the playground index page."""
        with allure.step("Open playground"):
            await self.page.goto(self.settings.playground_url)
            await self.page.wait_for_load_state("domcontentloaded")
            logger.debug(f"Navigated to: {self.settings.playground_url}")

    async def navigate(self) -> None:
        """
        Reach this scenario page the way a user does.

        Opens the playground, follows the scenario link, waits for the URL
        and, for widget-heavy pages, applies the page-load settle delay.
        """
        await self.open_playground()
        if not self.LINK_TEXT:
            self.navigated = True
            return

        with allure.step(f"Open '{self.LINK_TEXT}'"):
            await self.page.click(f'a:text("{self.LINK_TEXT}")')
            await self.page.wait_for_url(re.compile(re.escape(self.settings.path(self.PATH_KEY))))
            if self.SETTLE_AFTER_NAVIGATION:
                await self.settle(self.timeouts.page_load_settle_ms)

        self.navigated = True
        logger.info(f"On scenario page: {self.LINK_TEXT}")

    async def settle(self, milliseconds: int) -> None:
        """Unconditional delay for asynchronous widget initialization."""
        await self.page.wait_for_timeout(milliseconds)

    # =========================================================================
    # Best-effort primitives
    # =========================================================================

    async def fill_safely(
        self,
        candidates: Union[CandidateList, List[str]],
        value: str,
    ) -> None:
        await self.smart.fill_safely(candidates, value)

    async def click_safely(self, candidates: Union[CandidateList, List[str]]) -> None:
        await self.smart.click_safely(candidates)

    async def wait_safely(self, selector: str, timeout: Optional[int] = None) -> bool:
        if timeout is None:
            timeout = self.timeouts.safe_wait_ms
        return await self.smart.wait_safely(selector, timeout=timeout)

    def get_locator_health_report(self) -> str:
        """Get smart locator health report."""
        return self.smart.get_health_report()


__all__ = [
    "BasePage",
]
