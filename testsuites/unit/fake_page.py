"""
In-memory stand-in for a Playwright Page.

Selectors are matched by exact string. Every locator resolution, every
mutating action and every delay is recorded so tests can assert on order
and call counts without a browser.
"""

from __future__ import annotations

import re
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError


class FakeElement:
    def __init__(
        self,
        text: Optional[str] = None,
        value: Optional[str] = None,
        attributes: Optional[Dict[str, str]] = None,
        options: Iterable[str] = (),
        fail_on: Iterable[str] = (),
        on_fill: Optional[Callable[[str], str]] = None,
        mirror: Optional["FakeElement"] = None,
    ):
        self.text = text
        self.value = value
        self.attributes = dict(attributes or {})
        self.options = list(options)
        self.fail_on = set(fail_on)
        self.on_fill = on_fill
        self.mirror = mirror
        self.selected: Optional[str] = None
        self.clicks = 0

    def _check(self, action: str) -> None:
        if action in self.fail_on:
            raise RuntimeError(f"Element is not interactable ({action})")


class FakeLocator:
    def __init__(self, page: "FakePage", selector: str, elements: List[FakeElement]):
        self._page = page
        self.selector = selector
        self._elements = elements

    def _single(self) -> FakeElement:
        if not self._elements:
            raise PlaywrightTimeoutError(f"Timeout waiting for locator('{self.selector}')")
        return self._elements[0]

    async def count(self) -> int:
        if self.selector in self._page.broken:
            raise RuntimeError(f"Unexpected token in selector '{self.selector}'")
        return len(self._elements)

    @property
    def first(self) -> "FakeLocator":
        return FakeLocator(self._page, self.selector, self._elements[:1])

    def nth(self, index: int) -> "FakeLocator":
        # Negative positions count from the end, as in Playwright
        if index < 0:
            index += len(self._elements)
        picked = self._elements[index:index + 1] if index >= 0 else []
        return FakeLocator(self._page, self.selector, picked)

    async def fill(self, value: str) -> None:
        element = self._single()
        element._check("fill")
        landed = element.on_fill(value) if element.on_fill else value
        element.value = landed
        element.attributes["value"] = landed
        if element.mirror is not None:
            element.mirror.text = landed
        self._page.mutations.append(("fill", self.selector, value))
        if landed != value:
            raise PlaywrightError("Error: Malformed value")

    async def click(self) -> None:
        element = self._single()
        element._check("click")
        element.clicks += 1
        self._page.mutations.append(("click", self.selector, None))

    async def select_option(self, label: str) -> List[str]:
        element = self._single()
        element._check("select")
        if label not in element.options:
            raise PlaywrightTimeoutError(f"No option with label '{label}'")
        element.selected = label
        self._page.mutations.append(("select", self.selector, label))
        return [label]

    async def text_content(self) -> Optional[str]:
        element = self._single()
        element._check("text")
        return element.text

    async def get_attribute(self, name: str) -> Optional[str]:
        element = self._single()
        element._check("attribute")
        return element.attributes.get(name)

    async def input_value(self) -> str:
        element = self._single()
        return element.value or ""


class FakePage:
    def __init__(
        self,
        elements: Optional[Dict[str, List[FakeElement]]] = None,
        broken: Iterable[str] = (),
    ):
        self.elements: Dict[str, List[FakeElement]] = dict(elements or {})
        self.broken = set(broken)
        self.url = "about:blank"
        self.resolved: List[str] = []
        self.mutations: List[Tuple[str, str, Optional[str]]] = []
        self.waited: List[Tuple[str, Optional[int]]] = []
        self.delays: List[int] = []
        self.navigation: List[Tuple[str, object]] = []

    def add(self, selector: str, *elements: FakeElement) -> List[FakeElement]:
        self.elements.setdefault(selector, []).extend(elements)
        return list(elements)

    def locator(self, selector: str) -> FakeLocator:
        self.resolved.append(selector)
        return FakeLocator(self, selector, self.elements.get(selector, []))

    async def wait_for_selector(self, selector: str, timeout: Optional[int] = None) -> None:
        self.waited.append((selector, timeout))
        if not self.elements.get(selector):
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded waiting for '{selector}'")

    async def goto(self, url: str) -> None:
        self.url = url
        self.navigation.append(("goto", url))

    async def wait_for_load_state(self, state: str = "load") -> None:
        self.navigation.append(("load_state", state))

    async def click(self, selector: str) -> None:
        self.navigation.append(("click", selector))
        if selector in self.elements:
            await self.locator(selector).first.click()

    async def fill(self, selector: str, value: str) -> None:
        await self.locator(selector).first.fill(value)

    async def wait_for_url(self, pattern: "re.Pattern[str]") -> None:
        self.navigation.append(("wait_for_url", pattern))

    async def wait_for_timeout(self, milliseconds: int) -> None:
        self.delays.append(milliseconds)
