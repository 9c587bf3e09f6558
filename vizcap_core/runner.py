"""
Sequential capture run.

One browser serves the whole run. Documents are processed strictly one
after another, and a document that fails to load aborts the rest of the
queue unless config.continue_on_load_error is set.
"""

import asyncio
from dataclasses import dataclass, field
from typing import List, Sequence

from .browser_setup import close_browser, launch_browser
from .capture import DocumentReport, capture_document
from .config import log_config
from .diagnostics import get_logger
from .errors import DocumentLoadError
from .targets import CaptureTarget

logger = get_logger(__name__)


@dataclass
class RunReport:
    documents: List[DocumentReport] = field(default_factory=list)
    load_failures: List[DocumentLoadError] = field(default_factory=list)

    @property
    def captured_count(self) -> int:
        return sum(len(doc.captured) for doc in self.documents)

    @property
    def skipped_count(self) -> int:
        return sum(len(doc.not_found) + len(doc.failed) for doc in self.documents)


async def capture_all(targets: Sequence[CaptureTarget], config) -> RunReport:
    """Capture every target in order with a single browser."""
    log_config(logger, config)
    report = RunReport()
    browser = await launch_browser(config)
    try:
        for target in targets:
            try:
                report.documents.append(await capture_document(browser, target, config))
            except DocumentLoadError as e:
                if not config.continue_on_load_error:
                    raise
                logger.error(str(e))
                print(f"  ❌ {target.path} - {e.cause}")
                report.load_failures.append(e)
    finally:
        await close_browser(browser)
    return report


def run(targets: Sequence[CaptureTarget], config) -> RunReport:
    """Blocking entry point around capture_all."""
    return asyncio.run(capture_all(targets, config))
