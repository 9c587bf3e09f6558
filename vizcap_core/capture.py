"""
Element capture for a single document.

Per document the flow is pending -> loading -> ready -> capturing -> done.
The document reaches done whether or not individual elements fail; only a
load failure stops it.

Progress is printed to stdout; diagnostics go through the module logger.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from .browser_setup import new_capture_context
from .diagnostics import get_logger
from .errors import CaptureError, ElementNotFoundError
from .page_settle import load_document
from .screenshots import ensure_output_dir, expected_size, get_output_path, read_image_size
from .targets import CaptureTarget

logger = get_logger(__name__)


DISCOVER_ELEMENTS_JS = """(patterns) => {
    const results = [];
    document.querySelectorAll('[id]').forEach((el) => {
        const id = el.id;
        if (patterns.some((pattern) => id.startsWith(pattern))) {
            const rect = el.getBoundingClientRect();
            results.push({id, width: rect.width, height: rect.height});
        }
    });
    return results;
}"""

# Document coordinates of an element's border box, unrounded
ELEMENT_BOX_JS = """(el) => {
    const rect = el.getBoundingClientRect();
    return {
        x: rect.left + window.scrollX,
        y: rect.top + window.scrollY,
        width: rect.width,
        height: rect.height,
    };
}"""


class DocumentState(Enum):
    PENDING = "pending"
    LOADING = "loading"
    READY = "ready"
    CAPTURING = "capturing"
    DONE = "done"
    FAILED = "failed"


class ElementStatus(Enum):
    CAPTURED = "captured"
    NOT_FOUND = "not_found"
    FAILED = "failed"


@dataclass
class CapturableElement:
    """An element whose id matched a capture pattern, with its CSS box size"""
    id: str
    width: float
    height: float


@dataclass
class ElementCapture:
    """Outcome of capturing one element"""
    element: CapturableElement
    status: ElementStatus
    path: Optional[Path] = None
    size: Optional[Tuple[int, int]] = None
    error: Optional[str] = None


@dataclass
class DocumentReport:
    """Everything that happened while capturing one document"""
    target: CaptureTarget
    output_dir: Path
    state: DocumentState = DocumentState.PENDING
    captures: List[ElementCapture] = field(default_factory=list)

    def _with_status(self, status: ElementStatus) -> List[ElementCapture]:
        return [c for c in self.captures if c.status == status]

    @property
    def captured(self) -> List[ElementCapture]:
        return self._with_status(ElementStatus.CAPTURED)

    @property
    def not_found(self) -> List[ElementCapture]:
        return self._with_status(ElementStatus.NOT_FOUND)

    @property
    def failed(self) -> List[ElementCapture]:
        return self._with_status(ElementStatus.FAILED)


def id_selector(element_id: str) -> str:
    """Attribute selector for an id; works for ids that are not CSS identifiers."""
    escaped = element_id.replace("\\", "\\\\").replace('"', '\\"')
    return f'[id="{escaped}"]'


async def discover_elements(page, patterns: Sequence[str]) -> List[CapturableElement]:
    """Find every element whose id starts with one of the patterns, in document order."""
    found = await page.evaluate(DISCOVER_ELEMENTS_JS, list(patterns))
    return [
        CapturableElement(id=item["id"], width=item["width"], height=item["height"])
        for item in found
    ]


async def _screenshot_element(page, element: CapturableElement, path: Path, omit_background: bool) -> None:
    # ElementHandle.screenshot widens the box to whole CSS pixels; a page
    # clip keeps fractional edges so the image is round(box * scale).
    handle = await page.query_selector(id_selector(element.id))
    if handle is None:
        raise ElementNotFoundError(element.id)
    try:
        box = await handle.evaluate(ELEMENT_BOX_JS)
        await page.screenshot(
            path=str(path),
            clip=box,
            full_page=True,
            omit_background=omit_background,
        )
    except Exception as e:
        raise CaptureError(element.id, e) from e


async def capture_element(
    page,
    element: CapturableElement,
    output_dir: Path,
    omit_background: bool = False,
) -> ElementCapture:
    """
    Capture one element into <output_dir>/<id>.png.

    Never raises for element-level problems; the returned ElementCapture
    carries the status and, on failure, the underlying message.
    """
    path = get_output_path(output_dir, element.id)
    try:
        await _screenshot_element(page, element, path, omit_background)
    except ElementNotFoundError:
        print(f"  ⚠️  {element.id} - element not found")
        logger.debug(f"Element vanished before capture: {element.id}")
        return ElementCapture(element, ElementStatus.NOT_FOUND, error="element not found")
    except CaptureError as e:
        message = str(e.cause)
        print(f"  ❌ {element.id} - {message}")
        logger.debug(f"Capture failed for {element.id}: {message}")
        return ElementCapture(element, ElementStatus.FAILED, error=message)

    width, height = read_image_size(path)
    print(f"  ✅ {element.id}.png ({width}x{height})")
    return ElementCapture(element, ElementStatus.CAPTURED, path=path, size=(width, height))


async def capture_document(browser, target: CaptureTarget, config) -> DocumentReport:
    """
    Capture every matching element of one document.

    A fresh browser context is opened for the document and closed once all
    of its elements have been processed.

    Raises:
        DocumentLoadError: if the document cannot be opened
    """
    output_dir = ensure_output_dir(target, config.output_dir)
    report = DocumentReport(target=target, output_dir=output_dir)

    print(f"\n📸 Capturing visuals from: {target.path}")
    print(f"📁 Output directory: {output_dir}\n")

    context = await new_capture_context(browser, config)
    try:
        page = await context.new_page()
        report.state = DocumentState.LOADING
        try:
            await load_document(page, target, config.settle_delay_ms)
        except Exception:
            report.state = DocumentState.FAILED
            raise
        report.state = DocumentState.READY

        elements = await discover_elements(page, config.capture_patterns)
        print(f"Found {len(elements)} elements to capture:\n")

        report.state = DocumentState.CAPTURING
        for element in elements:
            capture = await capture_element(page, element, output_dir, config.omit_background)
            if capture.status == ElementStatus.CAPTURED:
                expected = expected_size(element.width, element.height, config.scale)
                if capture.size != expected:
                    logger.debug(
                        f"{element.id}: box {element.width}x{element.height} at {config.scale}x "
                        f"gives {expected}, image is {capture.size}"
                    )
            report.captures.append(capture)
        report.state = DocumentState.DONE
    finally:
        await context.close()

    print(f"\n✨ Done! Images saved to: {output_dir}\n")
    logger.info(
        f"{target.base_name}: {len(report.captured)} captured, "
        f"{len(report.not_found)} not found, {len(report.failed)} failed"
    )
    return report
