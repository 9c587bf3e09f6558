"""
Capture target resolution.

A target is an input document: its absolute path and the base name that
names its output directory. Targets come from explicit CLI arguments or
from scanning a conventional articles/ directory.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from .diagnostics import get_logger
from .errors import NoInputError

logger = get_logger(__name__)

PathLike = Union[str, Path]


@dataclass(frozen=True)
class CaptureTarget:
    """An input document to capture from"""
    path: Path
    base_name: str

    @classmethod
    def from_path(cls, path: PathLike) -> 'CaptureTarget':
        absolute = Path(os.path.abspath(path))
        return cls(path=absolute, base_name=absolute.stem)

    @property
    def url(self) -> str:
        return self.path.as_uri()


def find_html_files(
    directory: PathLike,
    articles_dir: str = "articles",
    extensions: Sequence[str] = (".html",),
) -> List[Path]:
    """
    List documents directly inside <directory>/<articles_dir>.

    Args:
        directory: Base directory to look in
        articles_dir: Conventional subdirectory name
        extensions: Filename suffixes that count as documents

    Returns:
        Sorted list of matching file paths, empty if the directory is missing
    """
    base = Path(directory) / articles_dir
    if not base.is_dir():
        return []
    return sorted(
        p for p in base.iterdir()
        if p.is_file() and any(p.name.endswith(ext) for ext in extensions)
    )


def _dedupe(paths: Iterable[PathLike]) -> List[CaptureTarget]:
    seen = set()
    targets = []
    for p in paths:
        target = CaptureTarget.from_path(p)
        if target.path in seen:
            continue
        seen.add(target.path)
        targets.append(target)
    return targets


def resolve_targets(
    args: Sequence[str],
    script_dir: PathLike,
    cwd: Optional[PathLike] = None,
    articles_dir: str = "articles",
    extensions: Sequence[str] = (".html",),
) -> List[CaptureTarget]:
    """
    Turn CLI arguments into capture targets.

    Explicit arguments win; nonexistent paths are dropped. Without arguments
    the articles directory is searched next to the script, then under cwd.

    Raises:
        NoInputError: if nothing could be resolved
    """
    if args:
        existing = []
        for arg in args:
            if Path(arg).is_file():
                existing.append(arg)
            else:
                logger.debug(f"Skipping missing input: {arg}")
        if not existing:
            raise NoInputError("No valid HTML files found in arguments")
        return _dedupe(existing)

    files = find_html_files(script_dir, articles_dir, extensions)
    if not files:
        files = find_html_files(cwd if cwd is not None else os.getcwd(), articles_dir, extensions)
    if not files:
        raise NoInputError(
            f"No HTML files found in {articles_dir}/ directory\n"
            "   Run this from the project directory, or pass file paths as arguments."
        )
    return _dedupe(files)
