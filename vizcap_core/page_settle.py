"""
Document load and settle.

A document is ready for capture once navigation reaches network idle,
document.fonts.ready resolves and a short fixed delay has passed for
CSS transitions and animations.
"""

import asyncio

from .diagnostics import get_logger
from .errors import DocumentLoadError
from .targets import CaptureTarget

logger = get_logger(__name__)


async def wait_for_fonts(page) -> None:
    """Block until every font face in the document has loaded."""
    await page.evaluate("() => document.fonts.ready.then(() => true)")


async def load_document(page, target: CaptureTarget, settle_delay_ms: int = 500) -> None:
    """
    Open a local document and wait until it has settled.

    Args:
        page: Playwright page
        target: Document to open
        settle_delay_ms: Extra wait after network idle and fonts

    Raises:
        DocumentLoadError: if navigation or the settle waits fail
    """
    try:
        await page.goto(target.url, wait_until="networkidle")
        await wait_for_fonts(page)
    except Exception as e:
        raise DocumentLoadError(target.path, e) from e

    if settle_delay_ms > 0:
        await asyncio.sleep(settle_delay_ms / 1000)
    logger.debug(f"Document settled: {target.path}")
