"""
================================================================================
Input Form Submit Page Object (Async / Playwright)
================================================================================

Multi-field registration form. Every field is filled best-effort through an
ordered candidate list (id selector first, name attribute as fallback) so a
renamed id does not abort the scenario.

NOTE:
  The page also contains an unrelated "continue" button (#contbtn) that
  matches `button[type="submit"]`; the primary submit candidate excludes it.

================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional, Tuple

import allure
from loguru import logger

from testsuites.ui_testing.framework.page_base import BasePage
from testsuites.ui_testing.framework.smart_locator import CandidateList


@dataclass(frozen=True)
class FormData:
    """Values for the Input Form Submit page; None fields are left untouched."""
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    company: Optional[str] = None
    website: Optional[str] = None
    country: Optional[str] = None
    city: Optional[str] = None
    address1: Optional[str] = None
    address2: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "FormData":
        """
        Build FormData from a plain dict (e.g. YAML test data).

        Accepts `zip` as an alias of `zip_code`.

        Raises:
            ValueError: On keys that are not form fields
        """
        values = dict(data)
        if "zip" in values:
            values["zip_code"] = values.pop("zip")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise ValueError(f"Unknown form fields: {', '.join(unknown)}")

        return cls(**{k: None if v is None else str(v) for k, v in values.items()})


def _field(element_id: str, name_attr: str, label: str) -> CandidateList:
    return CandidateList.of(f"input#{element_id}", f'input[name="{name_attr}"]', name=label)


class InputFormPage(BasePage):
    """Input Form Submit page object (async)."""

    PATH_KEY = "input_form"
    LINK_TEXT = "Input Form Submit"
    SETTLE_AFTER_NAVIGATION = True

    # Text inputs in page order; country sits between website and city
    FIELD_CANDIDATES: Dict[str, CandidateList] = {
        "name": _field("name", "name", "name"),
        "email": _field("inputEmail4", "email", "email"),
        "password": _field("inputPassword4", "password", "password"),
        "company": _field("company", "company", "company"),
        "website": _field("websitename", "website", "website"),
        "city": _field("inputCity", "city", "city"),
        "address1": _field("inputAddress1", "address_line1", "address1"),
        "address2": _field("inputAddress2", "address_line2", "address2"),
        "state": _field("inputState", "state", "state"),
        "zip_code": _field("inputZip", "zip", "zip_code"),
    }

    COUNTRY_CANDIDATES = CandidateList.of(
        "select.form-control",
        'select[name="country"]',
        "select",
        name="country",
    )

    SUBMIT_CANDIDATES = CandidateList.of(
        'button[type="submit"]:not(#contbtn)',
        'form button[type="submit"]',
        "button.btn-primary",
        'input[type="submit"]',
        name="submit",
    )

    # CSS indicators are awaited; the text pattern is checked once
    SUCCESS_SELECTORS: Tuple[str, ...] = (".success-msg", ".alert-success")
    SUCCESS_TEXT_PATTERN = "text=/Thanks|Success|successfully/i"

    FIELD_ORDER: Tuple[str, ...] = (
        "name", "email", "password", "company", "website",
        "country",
        "city", "address1", "address2", "state", "zip_code",
    )

    @allure.step("Fill and submit input form")
    async def fill_and_submit(self, data: FormData) -> None:
        """
        Fill every provided field, pick the country, then submit.

        Missing fields on the page are logged and skipped.
        """
        for field_name in self.FIELD_ORDER:
            value = getattr(data, field_name)
            if value is None:
                continue
            if field_name == "country":
                await self.select_country(value)
            else:
                shown = "*" * len(value) if field_name == "password" else value
                with allure.step(f"Fill {field_name}: {shown}"):
                    await self.fill_safely(self.FIELD_CANDIDATES[field_name], value)

        await self.submit()

    @allure.step("Submit empty input form")
    async def submit_empty(self) -> None:
        """Submit without filling anything (required-field validation path)."""
        await self.submit()

    async def select_country(self, country: str) -> None:
        """Select a country by its visible label in the first dropdown present."""
        with allure.step(f"Select country: {country}"):
            await self.smart.select_safely(self.COUNTRY_CANDIDATES, country)

    async def submit(self) -> None:
        await self.click_safely(self.SUBMIT_CANDIDATES)

    @allure.step("Read success message")
    async def read_success_message(self) -> Optional[str]:
        """
        Text of the first success indicator found, or None.

        CSS indicators are each given message_check_ms to become visible;
        the text pattern is only checked for presence.
        """
        for selector in self.SUCCESS_SELECTORS:
            if await self.wait_safely(selector, timeout=self.timeouts.message_check_ms):
                try:
                    return await self.page.locator(selector).first.text_content()
                except Exception as e:
                    logger.debug(f"Success indicator {selector} vanished before reading: {e}")

        text = await self.smart.first_text([self.SUCCESS_TEXT_PATTERN])
        if text is None:
            logger.info("No success message found")
        return text
