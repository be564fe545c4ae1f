"""
================================================================================
Page Objects
================================================================================

Scenario page objects for the Selenium Playground plus the PlaygroundHelper
facade that aggregates them.

Author: Automation Team
License: MIT
================================================================================
"""

from .input_form_page import FormData, InputFormPage
from .playground_helper import PlaygroundHelper
from .simple_form_page import SimpleFormPage
from .slider_page import SLIDER_TOLERANCE, SliderOutOfRangeError, SliderPage

__all__ = [
    "FormData",
    "InputFormPage",
    "PlaygroundHelper",
    "SimpleFormPage",
    "SliderPage",
    "SliderOutOfRangeError",
    "SLIDER_TOLERANCE",
]
