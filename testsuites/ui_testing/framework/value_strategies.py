"""
================================================================================
Value-Resolution Strategies
================================================================================

Reading the current value of a custom widget when no single selector is
reliable. Each strategy encodes one structural assumption about the DOM;
a StrategyChain tries them in order and returns the first non-None value.

Default slider chain (most semantic source first):
    1. OutputElementStrategy   - labelled <output> element
    2. TooltipStrategy         - tooltip / value bubble by known class names
    3. ValueAttributeStrategy  - raw value attribute of the range input

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Awaitable, Callable, Iterable, Optional, Sequence, Tuple

from loguru import logger
from playwright.async_api import Page


RANGE_INPUT_SELECTOR = 'input[type="range"]'

TOOLTIP_CLASSES: Tuple[str, ...] = (
    ".range-slider__tooltip",
    ".rangeslider__value-bubble",
    ".rangeslider__tooltip",
    ".slider-value",
)


class ValueStrategy(ABC):
    """One way of reading the value of the widget at a given position."""

    name: str = "strategy"

    @abstractmethod
    async def read(self, page: Page, index: int) -> Optional[str]:
        """Return the widget value, or None when this DOM shape is absent."""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"


class NthTextStrategy(ValueStrategy):
    """Text content of the index-th element matching a selector."""

    def __init__(self, selector: str, name: str = ""):
        self.selector = selector
        self.name = name or selector

    async def read(self, page: Page, index: int) -> Optional[str]:
        if index < 0:
            return None
        elements = page.locator(self.selector)
        if await elements.count() > index:
            return await elements.nth(index).text_content()
        return None


class OutputElementStrategy(NthTextStrategy):
    """Dedicated <output> element next to each slider."""

    def __init__(self):
        super().__init__("output", name="output-element")


class TooltipStrategy(NthTextStrategy):
    """Tooltip / value bubble rendered by slider libraries."""

    def __init__(self, classes: Sequence[str] = TOOLTIP_CLASSES):
        super().__init__(", ".join(classes), name="tooltip")


class ValueAttributeStrategy(ValueStrategy):
    """The `value` attribute of the range input itself."""

    name = "value-attribute"

    def __init__(self, selector: str = RANGE_INPUT_SELECTOR):
        self.selector = selector

    async def read(self, page: Page, index: int) -> Optional[str]:
        if index < 0:
            return None
        inputs = page.locator(self.selector)
        if await inputs.count() > index:
            return await inputs.nth(index).get_attribute("value")
        return None


class FunctionStrategy(ValueStrategy):
    """Adapts a plain coroutine function `(page, index) -> Optional[str]`."""

    def __init__(
        self,
        func: Callable[[Page, int], Awaitable[Optional[str]]],
        name: str = "",
    ):
        self._func = func
        self.name = name or getattr(func, "__name__", "function")

    async def read(self, page: Page, index: int) -> Optional[str]:
        return await self._func(page, index)


class StrategyChain:
    """
    Ordered, non-empty sequence of strategies.

    resolve() evaluates strictly left to right. A strategy that raises is
    skipped (not retried); the first non-None result is returned and no
    later strategy runs.
    """

    def __init__(self, strategies: Iterable[ValueStrategy]):
        self.strategies: Tuple[ValueStrategy, ...] = tuple(strategies)
        if not self.strategies:
            raise ValueError("StrategyChain needs at least one strategy")

    def __len__(self) -> int:
        return len(self.strategies)

    def __iter__(self):
        return iter(self.strategies)

    async def resolve(self, page: Page, index: int) -> Optional[str]:
        """
        Read the value of the widget at `index`.

        Args:
            page: Playwright Page
            index: Zero-based widget position

        Returns:
            First non-None strategy result, or None when every strategy
            returned None or raised
        """
        for strategy in self.strategies:
            try:
                value = await strategy.read(page, index)
            except Exception as e:
                logger.debug(f"Strategy {strategy.name} failed for widget #{index}: {e}")
                continue
            if value is not None:
                logger.debug(f"Widget #{index} value '{value}' via {strategy.name}")
                return value

        logger.warning(f"No strategy could read the value of widget #{index}")
        return None


def default_slider_chain() -> StrategyChain:
    """Strategy chain used by SliderPage unless another one is injected."""
    return StrategyChain([
        OutputElementStrategy(),
        TooltipStrategy(),
        ValueAttributeStrategy(),
    ])


async def resolve_value(
    page: Page,
    widget_index: int,
    chain: Optional[StrategyChain] = None,
) -> Optional[str]:
    """Shortcut for `(chain or default_slider_chain()).resolve(page, widget_index)`."""
    return await (chain or default_slider_chain()).resolve(page, widget_index)


__all__ = [
    "ValueStrategy",
    "NthTextStrategy",
    "OutputElementStrategy",
    "TooltipStrategy",
    "ValueAttributeStrategy",
    "FunctionStrategy",
    "StrategyChain",
    "default_slider_chain",
    "resolve_value",
    "RANGE_INPUT_SELECTOR",
    "TOOLTIP_CLASSES",
]
