"""
vizcap_core package: headless capture of named DOM elements to PNG files

Usage:
    from vizcap_core import get_config, resolve_targets, run

    targets = resolve_targets(["articles/01.html"], script_dir=".")
    report = run(targets, get_config())
"""
from .config import Config, get_config
from .errors import (
    VizcapError,
    ConfigError,
    NoInputError,
    DocumentLoadError,
    ElementNotFoundError,
    CaptureError,
)
from .targets import CaptureTarget, find_html_files, resolve_targets
from .capture import (
    CapturableElement,
    DocumentReport,
    DocumentState,
    ElementCapture,
    ElementStatus,
    capture_document,
    capture_element,
    discover_elements,
)
from .runner import RunReport, capture_all, run

__all__ = [
    # Core
    "Config",
    "get_config",
    # Errors
    "VizcapError",
    "ConfigError",
    "NoInputError",
    "DocumentLoadError",
    "ElementNotFoundError",
    "CaptureError",
    # Targets
    "CaptureTarget",
    "find_html_files",
    "resolve_targets",
    # Capture
    "CapturableElement",
    "DocumentReport",
    "DocumentState",
    "ElementCapture",
    "ElementStatus",
    "capture_document",
    "capture_element",
    "discover_elements",
    # Run
    "RunReport",
    "capture_all",
    "run",
]
