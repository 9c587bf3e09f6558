"""
Capture error taxonomy.

Fatal errors (no input, document load failure) propagate to the CLI.
Element-level errors are recorded on the element's result and never
abort sibling captures.
"""

from pathlib import Path
from typing import Optional


class VizcapError(Exception):
    """Base class for all vizcap errors"""
    pass


class ConfigError(VizcapError):
    """Invalid configuration value"""
    pass


class NoInputError(VizcapError):
    """No input documents could be resolved"""
    pass


class DocumentLoadError(VizcapError):
    """The browser could not open or settle a document"""

    def __init__(self, path: Path, cause: Optional[BaseException] = None):
        self.path = path
        self.cause = cause
        message = f"Failed to load {path}"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message)


class ElementNotFoundError(VizcapError):
    """A discovered element disappeared before it could be captured"""

    def __init__(self, element_id: str):
        self.element_id = element_id
        super().__init__(f"{element_id} - element not found")


class CaptureError(VizcapError):
    """The screenshot call failed for an element"""

    def __init__(self, element_id: str, cause: Optional[BaseException] = None):
        self.element_id = element_id
        self.cause = cause
        super().__init__(f"{element_id} - {cause}" if cause is not None else element_id)
