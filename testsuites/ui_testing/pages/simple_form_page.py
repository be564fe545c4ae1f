"""
================================================================================
Simple Form Demo Page Object (Async / Playwright)
================================================================================

Single input + button page: type a message, press "Get Checked Value",
read the echoed message back.

================================================================================
"""

from __future__ import annotations

from typing import Optional

import allure
from loguru import logger

from testsuites.ui_testing.framework.page_base import BasePage


class SimpleFormPage(BasePage):
    """Simple Form Demo page object (async)."""

    PATH_KEY = "simple_form"
    LINK_TEXT = "Simple Form Demo"

    MESSAGE_INPUT = "#user-message"
    SHOW_BUTTON = "#showInput"
    MESSAGE_OUTPUT = "#message"

    @allure.step("Submit simple form message")
    async def submit_message(self, message: str) -> Optional[str]:
        """
        Type a message and return what the page echoes back.

        Args:
            message: Text to enter

        Returns:
            Text content of the echoed message element
        """
        await self.page.wait_for_selector(self.MESSAGE_INPUT)
        await self.page.fill(self.MESSAGE_INPUT, message)
        await self.page.click(self.SHOW_BUTTON)

        await self.page.wait_for_selector(self.MESSAGE_OUTPUT)
        echoed = await self.page.locator(self.MESSAGE_OUTPUT).text_content()
        logger.debug(f"Simple form echoed: {echoed!r}")
        return echoed
