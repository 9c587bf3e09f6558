"""
Pytest configuration for integration tests

These tests drive a real headless Chromium and are skipped when Playwright
or its browser binary is not installed.
"""

import os
from pathlib import Path

import pytest

from vizcap_core.config import Config


def pytest_configure(config):
    """Configure pytest"""
    os.environ['VIZCAP_HEADLESS'] = 'true'


@pytest.fixture(scope="session")
def chromium_installed():
    """Skip unless Playwright can find a Chromium executable"""
    sync_api = pytest.importorskip("playwright.sync_api")
    try:
        with sync_api.sync_playwright() as p:
            executable = p.chromium.executable_path
    except Exception as e:
        pytest.skip(f"Playwright unavailable: {e}")
    if not executable or not Path(executable).exists():
        pytest.skip("Chromium not installed (run: playwright install chromium)")
    return executable


@pytest.fixture
def capture_config(chromium_installed):
    """Config with the stock prefixes and a short settle delay"""
    return Config(settle_delay_ms=50, scale=2, viewport_width=2400, viewport_height=1600)


@pytest.fixture
def write_article(tmp_path):
    """Write an HTML document under tmp_path/articles/ and return its path"""
    def _write(name: str, body: str) -> Path:
        path = tmp_path / "articles" / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            "<!doctype html><html><head><style>"
            "body { margin: 0; background: #fff; }"
            "</style></head><body>" + body + "</body></html>",
            encoding="utf-8",
        )
        return path
    return _write
