"""
================================================================================
Playground Settings & Logging Setup
================================================================================

Typed, immutable run settings built from ConfigLoader, plus the central
Loguru configuration used by the runner and the pytest session.

Every page object receives a PlaygroundSettings instance at construction
time; nothing below the fixtures reads the process environment directly.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from loguru import logger

from .config_loader import ConfigLoader, ConfigurationError


EXECUTION_MODES = ("local", "lambdatest")
BROWSER_TYPES = ("chromium", "firefox", "webkit")

# LambdaTest project presets: project name -> LT:Options platform
LAMBDATEST_PROJECTS: Dict[str, str] = {
    "Windows-10-Chrome": "Windows 10",
    "Windows-11-Chrome": "Windows 11",
}

DEFAULT_BASE_URL = "https://www.lambdatest.com/selenium-playground"

DEFAULT_PATHS: Dict[str, str] = {
    "playground": "/",
    "simple_form": "simple-form-demo",
    "sliders": "drag-drop-range-sliders-demo",
    "input_form": "input-form-demo",
}

DEFAULT_LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


@dataclass(frozen=True)
class Timeouts:
    """
    Named timeouts in milliseconds.

    Attributes:
        page_load_settle_ms: Fixed delay after navigation while widgets attach listeners
        message_check_ms: How long to wait for each success-message selector
        slider_ready_ms: Hard wait for at least one range input to exist
        slider_settle_ms: Delay between setting a slider and re-reading it
        safe_wait_ms: Default timeout for best-effort waits
    """
    page_load_settle_ms: int = 2000
    message_check_ms: int = 5000
    slider_ready_ms: int = 30000
    slider_settle_ms: int = 200
    safe_wait_ms: int = 5000

    def __post_init__(self) -> None:
        for name, value in self.__dict__.items():
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                raise ConfigurationError(
                    f"Timeout '{name}' must be a non-negative integer (ms), got {value!r}"
                )


@dataclass(frozen=True)
class ExecutionSettings:
    """Where and how the browser runs (local launch or LambdaTest grid)."""
    mode: str = "local"
    browser: str = "chromium"
    headless: bool = True
    slow_mo: int = 300
    viewport_width: int = 1280
    viewport_height: int = 720
    lt_username: Optional[str] = None
    lt_access_key: Optional[str] = None
    build_name: str = "Selenium Playground Automation"
    lt_project: str = "Windows-10-Chrome"

    def __post_init__(self) -> None:
        if self.lt_project not in LAMBDATEST_PROJECTS:
            raise ConfigurationError(
                f"Unknown LambdaTest project '{self.lt_project}'. "
                f"Expected one of {tuple(LAMBDATEST_PROJECTS)}"
            )
        if self.mode not in EXECUTION_MODES:
            raise ConfigurationError(
                f"Unknown execution mode '{self.mode}'. Expected one of {EXECUTION_MODES}"
            )
        if self.browser not in BROWSER_TYPES:
            raise ConfigurationError(
                f"Unknown browser '{self.browser}'. Expected one of {BROWSER_TYPES}"
            )

    @property
    def platform(self) -> str:
        return LAMBDATEST_PROJECTS[self.lt_project]

    @property
    def has_lambdatest_credentials(self) -> bool:
        return bool(self.lt_username and self.lt_access_key)

    @property
    def use_lambdatest(self) -> bool:
        """LambdaTest mode only counts when credentials are present."""
        return self.mode == "lambdatest" and self.has_lambdatest_credentials


@dataclass(frozen=True)
class PlaygroundSettings:
    """
    Everything a page object needs to know about the target application.

    Attributes:
        base_url: Root of the playground (no trailing slash)
        paths: Named sub-page paths; also used as URL match fragments
        timeouts: Named timeouts
        execution: Browser/grid settings (consumed by fixtures only)
    """
    base_url: str = DEFAULT_BASE_URL
    paths: Mapping[str, str] = field(default_factory=lambda: dict(DEFAULT_PATHS))
    timeouts: Timeouts = field(default_factory=Timeouts)
    execution: ExecutionSettings = field(default_factory=ExecutionSettings)

    def __post_init__(self) -> None:
        if not self.base_url:
            raise ConfigurationError("playground.base_url must not be empty")
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))
        missing = [name for name in DEFAULT_PATHS if name not in self.paths]
        if missing:
            raise ConfigurationError(f"Missing playground paths: {', '.join(missing)}")

    def path(self, name: str) -> str:
        """Return the configured path fragment for a named sub-page."""
        try:
            return self.paths[name]
        except KeyError:
            raise ConfigurationError(f"Unknown playground path: {name}") from None

    def url_for(self, name: str) -> str:
        """Absolute URL of a named sub-page."""
        fragment = self.path(name).strip("/")
        return f"{self.base_url}/{fragment}" if fragment else f"{self.base_url}/"

    @property
    def playground_url(self) -> str:
        return self.url_for("playground")


def _as_int(loader: ConfigLoader, key: str, default: int) -> int:
    value = loader.get(key, default)
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"'{key}' must be an integer, got {value!r}") from None


def _as_bool(loader: ConfigLoader, key: str, default: bool) -> bool:
    value = loader.get(key, default)
    if isinstance(value, str):
        return value.lower() in ("true", "1", "yes", "on")
    return bool(value)


def load_settings(loader: Optional[ConfigLoader] = None) -> PlaygroundSettings:
    """
    Build PlaygroundSettings from YAML + environment.

    Args:
        loader: ConfigLoader to read from (process singleton if omitted)

    Returns:
        Immutable PlaygroundSettings

    Raises:
        ConfigurationError: On invalid or inconsistent values
    """
    loader = loader or ConfigLoader()
    defaults = Timeouts()

    paths: Dict[str, Any] = dict(DEFAULT_PATHS)
    paths.update(loader.get_section("paths"))
    for name in list(paths):
        paths[name] = str(loader.get(f"paths.{name}", paths[name]))

    timeouts = Timeouts(
        page_load_settle_ms=_as_int(loader, "timeouts.page_load_settle_ms", defaults.page_load_settle_ms),
        message_check_ms=_as_int(loader, "timeouts.message_check_ms", defaults.message_check_ms),
        slider_ready_ms=_as_int(loader, "timeouts.slider_ready_ms", defaults.slider_ready_ms),
        slider_settle_ms=_as_int(loader, "timeouts.slider_settle_ms", defaults.slider_settle_ms),
        safe_wait_ms=_as_int(loader, "timeouts.safe_wait_ms", defaults.safe_wait_ms),
    )

    execution = ExecutionSettings(
        mode=str(loader.get("execution.mode", "local")).lower(),
        browser=str(loader.get("execution.browser", "chromium")).lower(),
        headless=_as_bool(loader, "execution.headless", True),
        slow_mo=_as_int(loader, "execution.slow_mo", 300),
        viewport_width=_as_int(loader, "execution.viewport_width", 1280),
        viewport_height=_as_int(loader, "execution.viewport_height", 720),
        lt_username=loader.get("lt.username"),
        lt_access_key=loader.get("lt.access_key"),
        build_name=str(loader.get("lt.build", "Selenium Playground Automation")),
        lt_project=str(loader.get("lt.project", "Windows-10-Chrome")),
    )

    settings = PlaygroundSettings(
        base_url=str(loader.get("playground.base_url", DEFAULT_BASE_URL)),
        paths=paths,
        timeouts=timeouts,
        execution=execution,
    )

    if execution.mode == "lambdatest" and not execution.has_lambdatest_credentials:
        logger.warning(
            "EXECUTION_MODE=lambdatest but LT_USERNAME/LT_ACCESS_KEY are not set; "
            "falling back to a local browser"
        )

    return settings


# ============================================================
# Logging Setup
# ============================================================

_logger_initialized = False


def init_logger(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    loader: Optional[ConfigLoader] = None,
) -> None:
    """
    Initializes the Loguru logger with standard settings.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to config value.
        log_file: Optional file path to write logs to. Defaults to config value.
        loader: ConfigLoader to read defaults from (process singleton if omitted)
    """
    global _logger_initialized

    if _logger_initialized:
        return

    loader = loader or ConfigLoader()
    level = (level or loader.get("log.level") or "INFO").upper()
    log_format = loader.get("log.format", DEFAULT_LOG_FORMAT)

    logger.remove()
    logger.add(
        sys.stderr,
        format=log_format,
        level=level,
        colorize=True,
    )

    log_file = log_file or loader.get("log.file")
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            format=log_format,
            level=level,
            rotation=loader.get("log.rotation", "10 MB"),
            retention=loader.get("log.retention", "7 days"),
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {level}")


__all__ = [
    "PlaygroundSettings",
    "Timeouts",
    "ExecutionSettings",
    "LAMBDATEST_PROJECTS",
    "load_settings",
    "init_logger",
    "DEFAULT_BASE_URL",
    "DEFAULT_PATHS",
]
