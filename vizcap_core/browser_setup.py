#!/usr/bin/env python3
import subprocess
import sys

from .diagnostics import get_logger

logger = get_logger(__name__)

LAUNCH_ARGS = [
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
]


def _install_chromium():
    """Run `playwright install chromium` once when the browser binary is missing."""
    print("🔧 Browser missing, installing Chromium...")
    try:
        result = subprocess.run(
            [sys.executable, "-m", "playwright", "install", "chromium"],
            capture_output=True,
            text=True,
            timeout=300
        )
        if result.returncode == 0:
            print("✅ Playwright browsers installed successfully!")
        else:
            logger.warning(f"Playwright install warning: {result.stderr[:200]}")
    except subprocess.TimeoutExpired:
        logger.warning("Playwright install timed out, continuing anyway...")


async def launch_browser(config):
    """
    Start Playwright and launch headless Chromium.

    The Playwright driver is attached to the returned browser so that
    close_browser can stop it.
    """
    from playwright.async_api import async_playwright

    playwright = await async_playwright().start()
    launch_args = {
        "headless": bool(config.headless),
        "args": list(LAUNCH_ARGS),
    }
    try:
        try:
            browser = await playwright.chromium.launch(**launch_args)
        except Exception as e:
            if "Executable doesn't exist" not in str(e):
                raise
            _install_chromium()
            browser = await playwright.chromium.launch(**launch_args)
    except BaseException:
        await playwright.stop()
        raise
    setattr(browser, "_vizcap_playwright", playwright)
    logger.debug(f"Launched Chromium {browser.version} (headless={config.headless})")
    return browser


async def new_capture_context(browser, config):
    """Browser context sized for element capture at the configured device scale."""
    return await browser.new_context(
        viewport={"width": config.viewport_width, "height": config.viewport_height},
        device_scale_factor=config.scale,
    )


async def close_browser(browser) -> None:
    """Close the browser and stop its Playwright driver; errors are only logged."""
    playwright = getattr(browser, "_vizcap_playwright", None)
    try:
        await browser.close()
    except Exception as e:
        logger.warning(f"Failed to close browser: {e}")
    if playwright is not None:
        try:
            await playwright.stop()
        except Exception as e:
            logger.warning(f"Failed to stop Playwright: {e}")
