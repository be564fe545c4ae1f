"""
================================================================================
Playground Helper (Facade)
================================================================================

One object per page session giving tests a single flat surface over the
scenario page objects. Each method forwards to exactly one page object.

Usage:
    helper = PlaygroundHelper(page, settings)
    await helper.open_sliders()
    await helper.set_slider_value(0, 50)
    value = await helper.read_slider_value(0)

================================================================================
"""

from __future__ import annotations

from typing import Optional

from playwright.async_api import Page

from testsuites.ui_testing.framework.settings import PlaygroundSettings

from .input_form_page import FormData, InputFormPage
from .simple_form_page import SimpleFormPage
from .slider_page import SliderPage


class PlaygroundHelper:
    """Aggregate entry point for the Selenium Playground scenarios."""

    def __init__(self, page: Page, settings: Optional[PlaygroundSettings] = None):
        self.page = page
        self.simple_form = SimpleFormPage(page, settings)
        self.sliders = SliderPage(page, settings)
        self.input_form = InputFormPage(page, settings)

    # Playground index
    async def open_playground(self) -> None:
        await self.simple_form.open_playground()

    # Simple Form Demo
    async def open_simple_form(self) -> None:
        await self.simple_form.navigate()

    async def submit_simple_form(self, message: str) -> Optional[str]:
        return await self.simple_form.submit_message(message)

    # Drag & Drop Sliders
    async def open_sliders(self) -> None:
        await self.sliders.navigate()

    async def set_slider_value(self, index: int, target: int) -> None:
        await self.sliders.set_slider_value(index, target)

    async def read_slider_value(self, index: int) -> Optional[str]:
        return await self.sliders.read_slider_value(index)

    # Input Form Submit
    async def open_input_form(self) -> None:
        await self.input_form.navigate()

    async def fill_and_submit(self, data: FormData) -> None:
        await self.input_form.fill_and_submit(data)

    async def submit_empty(self) -> None:
        await self.input_form.submit_empty()

    async def read_success_message(self) -> Optional[str]:
        return await self.input_form.read_success_message()
