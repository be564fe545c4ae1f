"""
================================================================================
Drag & Drop Sliders Page Object (Async / Playwright)
================================================================================

Range-slider page. Values are set directly on the <input type="range">
(deterministic, unlike a pointer drag) and read back through an ordered
strategy chain because each slider renders its value differently.

================================================================================
"""

from __future__ import annotations

from typing import Optional

import allure
from loguru import logger
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page

from testsuites.ui_testing.framework.page_base import BasePage
from testsuites.ui_testing.framework.settings import PlaygroundSettings
from testsuites.ui_testing.framework.value_strategies import (
    RANGE_INPUT_SELECTOR,
    StrategyChain,
    default_slider_chain,
)


# Allowed deviation between requested and observed slider value
SLIDER_TOLERANCE = 2

# Message of the error Playwright raises when a range input does not keep the filled value
MALFORMED_VALUE = "Malformed value"


class SliderOutOfRangeError(IndexError):
    """Raised when a slider index is outside the sliders present on the page."""
    pass


class SliderPage(BasePage):
    """Drag & Drop Sliders page object (async)."""

    PATH_KEY = "sliders"
    LINK_TEXT = "Drag & Drop Sliders"
    SETTLE_AFTER_NAVIGATION = True

    def __init__(
        self,
        page: Page,
        settings: Optional[PlaygroundSettings] = None,
        strategies: Optional[StrategyChain] = None,
    ):
        super().__init__(page, settings)
        self.strategies = strategies or default_slider_chain()

    async def slider_count(self) -> int:
        return await self.page.locator(RANGE_INPUT_SELECTOR).count()

    @allure.step("Set slider #{index} to {target}")
    async def set_slider_value(self, index: int, target: int) -> None:
        """
        Set a slider's value and verify it landed near the target.

        A value more than SLIDER_TOLERANCE away from `target` is logged,
        never raised: sliders snap to their step or clamp to their bounds
        and the read-back is informational.

        Raises:
            ElementNotFoundError: No range input appeared within slider_ready_ms
            SliderOutOfRangeError: `index` is not a valid slider position
        """
        await self.smart.wait_required(
            RANGE_INPUT_SELECTOR,
            timeout=self.timeouts.slider_ready_ms,
            description="range slider",
        )

        count = await self.slider_count()
        if index < 0 or index >= count:
            raise SliderOutOfRangeError(
                f"Slider index {index} is out of range. Found {count} sliders."
            )

        slider = self.page.locator(RANGE_INPUT_SELECTOR).nth(index)
        before = await slider.input_value()
        try:
            await slider.fill(str(target))
        except PlaywrightError as e:
            # Playwright rejects a range value the browser snapped or clamped
            if MALFORMED_VALUE not in str(e):
                raise
            logger.debug(f"Slider #{index} adjusted {target} on input: {e}")
        await self.settle(self.timeouts.slider_settle_ms)

        actual = await slider.input_value()
        logger.debug(f"Slider #{index}: {before} -> {actual} (target {target})")
        try:
            deviation = abs(int(float(actual)) - target)
        except (TypeError, ValueError):
            logger.warning(f"Slider #{index} reports a non-numeric value {actual!r} (target {target})")
            return

        if deviation > SLIDER_TOLERANCE:
            logger.warning(
                f"Slider #{index} value {actual} is {deviation} away from {target} "
                f"(tolerance {SLIDER_TOLERANCE})"
            )

    @allure.step("Read slider #{index}")
    async def read_slider_value(self, index: int) -> Optional[str]:
        """Current value of a slider, or None if no strategy could read it."""
        return await self.strategies.resolve(self.page, index)
