"""
================================================================================
Smart Locator with Ordered Fallback Candidates
================================================================================

Resilient element interaction for a third-party UI whose selectors drift:
    - Ordered candidate lists (primary selector first, fallbacks after)
    - One evaluator returning Found | NotFound instead of raising
    - Best-effort fill / click / select / wait primitives on top of it
    - Fallback usage analytics for maintenance insights

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Awaitable, Callable, Dict, List, Optional, Tuple, Union

from loguru import logger
from playwright.async_api import Locator, Page


class ElementNotFoundError(Exception):
    """Raised when a required element never appears."""
    pass


@dataclass(frozen=True)
class CandidateList:
    """
    Ordered, non-empty list of selectors for one logical element.

    Attributes:
        selectors: Playwright selectors in priority order
        name: Human-readable element name (used in logs and health report)
    """
    selectors: Tuple[str, ...]
    name: str = ""

    def __post_init__(self) -> None:
        if not self.selectors:
            raise ValueError("CandidateList needs at least one selector")
        if not self.name:
            object.__setattr__(self, "name", self.selectors[0])

    @classmethod
    def of(cls, primary: str, *fallbacks: str, name: str = "") -> "CandidateList":
        """Build a list from a primary selector and optional fallbacks."""
        return cls(selectors=(primary, *fallbacks), name=name)

    @property
    def primary(self) -> str:
        return self.selectors[0]

    def __iter__(self):
        return iter(self.selectors)

    def __len__(self) -> int:
        return len(self.selectors)

    def __str__(self) -> str:
        return ", ".join(self.selectors)


@dataclass(frozen=True)
class Found:
    """A candidate resolved and its action completed."""
    selector: str
    position: int
    locator: Locator

    @property
    def used_fallback(self) -> bool:
        return self.position > 0


@dataclass(frozen=True)
class NotFound:
    """Every candidate was tried; one (selector, reason) record per attempt."""
    name: str
    attempts: Tuple[Tuple[str, str], ...] = field(default_factory=tuple)

    def describe(self) -> str:
        return "\n".join(f"  - {selector} -> {reason}" for selector, reason in self.attempts)


LocatorResolution = Union[Found, NotFound]
LocatorAction = Callable[[Locator], Awaitable[None]]


@dataclass
class LocatorHealth:
    """
    Tracks which candidate satisfied an element.

    Attributes:
        element_name: Human-readable element name
        primary_selector: The preferred selector
        used_selector: The selector that actually worked
        position: Index of the winning candidate (0 = primary)
    """
    element_name: str
    primary_selector: str
    used_selector: str
    position: int


def _coerce(candidates: Union[CandidateList, List[str], Tuple[str, ...]]) -> CandidateList:
    if isinstance(candidates, CandidateList):
        return candidates
    return CandidateList(selectors=tuple(candidates))


class SmartLocator:
    """
    Best-effort element interaction over ordered candidate lists.

    Usage:
        >>> smart = SmartLocator(page)
        >>> email = CandidateList.of("input#inputEmail4", 'input[name="email"]', name="email")
        >>> await smart.fill_safely(email, "user@example.com")
        >>> await smart.click_safely(['button[type="submit"]', "button.btn-primary"])

    Failure policy:
        A single candidate failing (no match, detached element, timeout on
        the action) is recorded and the next candidate is tried at once.
        Only exhaustion is visible, as a logged warning. Callers that must
        fail hard use wait_required().
    """

    def __init__(self, page: Page):
        """
        Initialize SmartLocator with Playwright page.

        Args:
            page: Playwright Page object
        """
        self.page = page
        self._fallback_used: Dict[str, LocatorHealth] = {}

    async def resolve(
        self,
        candidates: Union[CandidateList, List[str]],
        action: Optional[LocatorAction] = None,
    ) -> LocatorResolution:
        """
        Evaluate candidates in order and run `action` on the first match.

        A candidate wins when it matches at least one element and `action`
        (if given) completes on that match. Later candidates are never
        touched once one wins.

        Args:
            candidates: Ordered selectors
            action: Coroutine receiving the matched Locator (all matches)

        Returns:
            Found for the winning candidate, or NotFound with per-candidate reasons
        """
        candidates = _coerce(candidates)
        attempts: List[Tuple[str, str]] = []

        for position, selector in enumerate(candidates):
            try:
                locator = self.page.locator(selector)
                if await locator.count() == 0:
                    attempts.append((selector, "no match"))
                    continue
                if action is not None:
                    await action(locator)
            except Exception as e:
                attempts.append((selector, str(e).splitlines()[0][:120] if str(e) else type(e).__name__))
                logger.debug(f"Candidate failed for '{candidates.name}': {selector} -> {e}")
                continue

            found = Found(selector=selector, position=position, locator=locator)
            self._record(candidates, found)
            return found

        return NotFound(name=candidates.name, attempts=tuple(attempts))

    def _record(self, candidates: CandidateList, found: Found) -> None:
        if found.used_fallback:
            logger.warning(
                f"⚠️ Element '{candidates.name}' used fallback #{found.position}: {found.selector}"
            )
            self._fallback_used[candidates.name] = LocatorHealth(
                element_name=candidates.name,
                primary_selector=candidates.primary,
                used_selector=found.selector,
                position=found.position,
            )
        else:
            logger.debug(f"✅ Element '{candidates.name}' found: {found.selector}")

    @staticmethod
    def _report_exhausted(verb: str, resolution: NotFound) -> None:
        logger.warning(
            f"Could not {verb} any of the selectors for '{resolution.name}':\n"
            f"{resolution.describe()}"
        )

    async def fill_safely(
        self,
        candidates: Union[CandidateList, List[str]],
        value: str,
    ) -> None:
        """
        Fill the first element of the first resolving candidate.

        Never raises; exhaustion is logged.
        """

        async def _fill(locator: Locator) -> None:
            await locator.first.fill(value)

        resolution = await self.resolve(candidates, _fill)
        if isinstance(resolution, NotFound):
            self._report_exhausted("fill", resolution)

    async def click_safely(self, candidates: Union[CandidateList, List[str]]) -> None:
        """Click the first element of the first resolving candidate. Never raises."""

        async def _click(locator: Locator) -> None:
            await locator.first.click()

        resolution = await self.resolve(candidates, _click)
        if isinstance(resolution, NotFound):
            self._report_exhausted("click", resolution)

    async def select_safely(
        self,
        candidates: Union[CandidateList, List[str]],
        label: str,
    ) -> None:
        """Select an option by visible label in the first resolving dropdown. Never raises."""

        async def _select(locator: Locator) -> None:
            await locator.first.select_option(label=label)

        resolution = await self.resolve(candidates, _select)
        if isinstance(resolution, NotFound):
            self._report_exhausted(f"select '{label}' in", resolution)

    async def first_text(self, candidates: Union[CandidateList, List[str]]) -> Optional[str]:
        """Text content of the first resolving candidate, or None."""
        texts: List[Optional[str]] = []

        async def _read(locator: Locator) -> None:
            texts.append(await locator.first.text_content())

        resolution = await self.resolve(candidates, _read)
        if isinstance(resolution, NotFound):
            return None
        return texts[-1]

    async def wait_safely(self, selector: str, timeout: int = 5000) -> bool:
        """
        Wait for a selector to appear.

        Args:
            selector: Playwright selector
            timeout: Timeout in milliseconds

        Returns:
            True if the element appeared, False on timeout or any other failure
        """
        try:
            await self.page.wait_for_selector(selector, timeout=timeout)
            return True
        except Exception as e:
            logger.debug(f"Element did not appear within {timeout}ms: {selector} ({e})")
            return False

    async def wait_required(
        self,
        selector: str,
        timeout: int,
        description: str = "",
    ) -> None:
        """
        Wait for an element the scenario cannot proceed without.

        Raises:
            ElementNotFoundError: When the selector does not appear in time
        """
        try:
            await self.page.wait_for_selector(selector, timeout=timeout)
        except Exception as e:
            error_msg = (
                f"❌ Required element '{description or selector}' did not appear "
                f"within {timeout}ms ({selector})"
            )
            logger.error(error_msg)
            raise ElementNotFoundError(error_msg) from e

    def get_health_report(self) -> str:
        """
        Generate locator health report.

        Lists elements whose primary selector had to fall back
        (candidates for a selector update).
        """
        if not self._fallback_used:
            return "✅ All elements used primary locators. No maintenance needed."

        report_lines = [
            "⚠️ Locator Health Report - Fallbacks Used:",
            "",
            "The following elements used fallback locators.",
            "Consider updating the primary selectors:",
            "",
        ]

        for element_name, health in self._fallback_used.items():
            report_lines.extend([
                f"  [{element_name}]",
                f"    Failed primary: {health.primary_selector}",
                f"    Used: #{health.position} -> {health.used_selector}",
                "",
            ])

        return "\n".join(report_lines)


__all__ = [
    "SmartLocator",
    "CandidateList",
    "Found",
    "NotFound",
    "LocatorResolution",
    "LocatorHealth",
    "ElementNotFoundError",
]
