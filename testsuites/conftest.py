"""
================================================================================
Root Pytest Configuration
================================================================================

This module provides the pytest configuration for the entire test suite.
It registers common markers, tags tests by directory and gates the live
UI suite behind --run-ui / RUN_UI_TESTS.

================================================================================
"""

import os

import pytest


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for deployment"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )
    config.addinivalue_line(
        "markers", "P3: Low priority tests - extensive validation"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests against the live playground"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "ui: Tests that drive a real browser"
    )
    config.addinivalue_line(
        "markers", "unit: Browser-free tests of the interaction layer"
    )


def _ui_enabled(config) -> bool:
    return config.getoption("--run-ui") or os.getenv("RUN_UI_TESTS", "").lower() in ("1", "true", "yes")


def pytest_collection_modifyitems(config, items):
    """
    Tag tests by directory and skip live UI tests unless enabled.
    """
    run_ui = _ui_enabled(config)
    skip_ui = pytest.mark.skip(reason="live UI test: use --run-ui or RUN_UI_TESTS=1")

    for item in items:
        path = str(item.fspath)

        if "ui_testing" in path:
            item.add_marker(pytest.mark.ui)
            item.add_marker(pytest.mark.e2e)
            if not run_ui:
                item.add_marker(skip_ui)

        if os.sep + "unit" + os.sep in path:
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "Selenium Playground Automation",
        f"Live UI tests: {'enabled' if _ui_enabled(config) else 'skipped'}",
        "=" * 60,
        "",
    ]
