"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based resilient interaction layer for the Selenium Playground.

Components:
    - smart_locator: Ordered candidate evaluation and best-effort primitives
    - value_strategies: Ordered strategies for reading widget values
    - page_base: Base page object (navigation, settle delays, primitives)
    - settings / config_loader: YAML + env configuration, logging setup
    - browser_manager: Local and LambdaTest browser lifecycle

Author: Automation Team
License: MIT
================================================================================
"""

from .browser_manager import BrowserManager
from .config_loader import ConfigLoader, ConfigurationError
from .page_base import BasePage
from .settings import PlaygroundSettings, Timeouts, init_logger, load_settings
from .smart_locator import CandidateList, ElementNotFoundError, Found, NotFound, SmartLocator
from .value_strategies import StrategyChain, ValueStrategy, default_slider_chain

__all__ = [
    "BasePage",
    "BrowserManager",
    "CandidateList",
    "ConfigLoader",
    "ConfigurationError",
    "ElementNotFoundError",
    "Found",
    "NotFound",
    "PlaygroundSettings",
    "SmartLocator",
    "StrategyChain",
    "Timeouts",
    "ValueStrategy",
    "default_slider_chain",
    "init_logger",
    "load_settings",
]
