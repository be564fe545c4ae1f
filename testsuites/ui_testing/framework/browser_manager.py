"""
================================================================================
Browser Manager
================================================================================

Browser lifecycle management for UI automation.

Features:
    - Local launch (headless or headed with slow motion)
    - LambdaTest cloud grid connection over CDP
    - Context isolation per test
    - Capability presets for the supported cloud platforms

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional
from urllib.parse import quote

from loguru import logger
from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    Page,
    Playwright,
)

from .settings import ExecutionSettings


LAMBDATEST_CDP_URL = "wss://cdp.lambdatest.com/playwright"


def build_lambdatest_capabilities(
    username: str,
    access_key: str,
    platform: str = "Windows 10",
    build: str = "Selenium Playground Automation",
    name: str = "Selenium Playground Tests",
    browser_name: str = "Chrome",
    browser_version: str = "latest",
) -> Dict[str, Any]:
    """
    Build the capability payload LambdaTest expects for Playwright sessions.

    Network, video, screenshot and console capture are handled by the grid.
    """
    return {
        "browserName": browser_name,
        "browserVersion": browser_version,
        "LT:Options": {
            "platform": platform,
            "build": build,
            "name": name,
            "user": username,
            "accessKey": access_key,
            "network": True,
            "video": True,
            "screenshot": True,
            "console": True,
            "tunnel": False,
            "geoLocation": "US",
        },
    }


def build_lambdatest_endpoint(capabilities: Dict[str, Any]) -> str:
    """Encode capabilities into the CDP websocket endpoint URL."""
    return f"{LAMBDATEST_CDP_URL}?capabilities={quote(json.dumps(capabilities), safe='')}"


class BrowserManager:
    """
    Manages the browser instance and contexts for UI testing.

    Usage:
        async with BrowserManager(settings.execution) as manager:
            page = await manager.new_page()
            await page.goto("https://www.lambdatest.com/selenium-playground/")

    In `lambdatest` mode with credentials the browser is a remote Chrome on
    the grid; otherwise a local browser is launched.
    """

    # Default browser launch options
    DEFAULT_LAUNCH_OPTIONS: Dict[str, Any] = {
        "headless": True,
        "args": [
            "--ignore-certificate-errors",
        ],
    }

    # Default context options
    DEFAULT_CONTEXT_OPTIONS: Dict[str, Any] = {
        "ignore_https_errors": True,
    }

    def __init__(
        self,
        execution: Optional[ExecutionSettings] = None,
        session_name: str = "Selenium Playground Tests",
    ):
        """
        Initialize browser manager.

        Args:
            execution: Execution settings (local headless chromium if omitted)
            session_name: LambdaTest session name (ignored for local runs)
        """
        self.execution = execution or ExecutionSettings()
        self.session_name = session_name

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._contexts: List[BrowserContext] = []

    async def __aenter__(self) -> "BrowserManager":
        """Async context manager entry - start browser."""
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit - close browser."""
        await self.close()

    @property
    def is_remote(self) -> bool:
        return self.execution.use_lambdatest

    def launch_options(self) -> Dict[str, Any]:
        """Options for a local launch; headed runs are slowed down for visibility."""
        options = {
            **self.DEFAULT_LAUNCH_OPTIONS,
            "headless": self.execution.headless,
        }
        if not self.execution.headless:
            options["slow_mo"] = self.execution.slow_mo
        return options

    def context_options(self, **overrides: Any) -> Dict[str, Any]:
        options = {
            **self.DEFAULT_CONTEXT_OPTIONS,
            "viewport": {
                "width": self.execution.viewport_width,
                "height": self.execution.viewport_height,
            },
        }
        options.update(overrides)
        return options

    def endpoint(self) -> str:
        """LambdaTest CDP endpoint for the configured platform."""
        capabilities = build_lambdatest_capabilities(
            username=self.execution.lt_username or "",
            access_key=self.execution.lt_access_key or "",
            platform=self.execution.platform,
            build=self.execution.build_name,
            name=self.session_name,
        )
        return build_lambdatest_endpoint(capabilities)

    async def start(self) -> None:
        """Start Playwright and launch (or connect to) a browser."""
        self._playwright = await async_playwright().start()

        if self.is_remote:
            # The grid only offers Chrome over CDP
            self._browser = await self._playwright.chromium.connect(self.endpoint())
            logger.info(f"Connected to LambdaTest grid ({self.execution.lt_project})")
            return

        if self.execution.mode == "lambdatest":
            logger.warning("LambdaTest credentials missing; launching a local browser")

        browser_launcher = getattr(self._playwright, self.execution.browser)
        self._browser = await browser_launcher.launch(**self.launch_options())
        logger.debug(
            f"Browser started: {self.execution.browser} "
            f"(headless={self.execution.headless})"
        )

    async def close(self) -> None:
        """Close all contexts and browser."""
        for context in self._contexts:
            try:
                await context.close()
            except Exception as e:
                logger.debug(f"Context already closed: {e}")
        self._contexts.clear()

        if self._browser:
            await self._browser.close()
            self._browser = None

        if self._playwright:
            await self._playwright.stop()
            self._playwright = None

        logger.debug("Browser closed")

    async def new_context(self, **options: Any) -> BrowserContext:
        """
        Create new browser context.

        Each context is isolated - separate cookies, localStorage, etc.
        """
        if not self._browser:
            raise RuntimeError("Browser not started. Call start() first.")

        context = await self._browser.new_context(**self.context_options(**options))
        self._contexts.append(context)
        return context

    async def new_page(
        self,
        context: Optional[BrowserContext] = None,
        **context_options: Any,
    ) -> Page:
        """Create new page in a new or existing context."""
        if context is None:
            context = await self.new_context(**context_options)
        return await context.new_page()


__all__ = [
    "BrowserManager",
    "build_lambdatest_capabilities",
    "build_lambdatest_endpoint",
]
