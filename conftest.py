"""
Repository-level pytest configuration.

Registers command-line options (they must live in the rootdir conftest)
and shared path fixtures. Credentials are never stored here; LambdaTest
runs read LT_USERNAME / LT_ACCESS_KEY from the environment.
"""

from __future__ import annotations

from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--run-ui",
        action="store_true",
        default=False,
        help="Run live UI tests against the Selenium Playground (needs a browser and network)",
    )


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent
