#!/usr/bin/env python3
from dataclasses import dataclass, field
import os
from typing import Any, Dict, Optional, Tuple
from dotenv import load_dotenv

from .errors import ConfigError

load_dotenv()

DEFAULT_CAPTURE_PATTERNS = (
    "poster-",  # poster-dark, poster-light, poster-social
    "visual-",  # visual-prng, visual-magic
    "code-",    # code-slots-def, code-barrier
    "logo-",    # logo-icon-only
    "brand-",   # brand-poster
)


def _env_list(name: str, default: Tuple[str, ...]) -> Tuple[str, ...]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return tuple(default)
    return tuple(item.strip() for item in raw.split(",") if item.strip())


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ["true", "1", "yes"]


def _env_number(name: str, default: str, cast):
    raw = os.getenv(name, default)
    try:
        return cast(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from e


@dataclass
class Config:
    """Capture configuration"""
    capture_patterns: Tuple[str, ...] = field(
        default_factory=lambda: _env_list("VIZCAP_CAPTURE_PATTERNS", DEFAULT_CAPTURE_PATTERNS)
    )
    output_dir: str = field(default_factory=lambda: os.getenv("VIZCAP_OUTPUT_DIR", "images"))
    scale: float = field(default_factory=lambda: _env_number("VIZCAP_SCALE", "2", float))

    # Browser settings
    viewport_width: int = field(default_factory=lambda: _env_number("VIZCAP_VIEWPORT_WIDTH", "2400", int))
    viewport_height: int = field(default_factory=lambda: _env_number("VIZCAP_VIEWPORT_HEIGHT", "1600", int))
    settle_delay_ms: int = field(default_factory=lambda: _env_number("VIZCAP_SETTLE_DELAY_MS", "500", int))
    headless: bool = field(default_factory=lambda: _env_bool("VIZCAP_HEADLESS", "true"))
    omit_background: bool = field(default_factory=lambda: _env_bool("VIZCAP_OMIT_BACKGROUND", "false"))

    # Input discovery
    articles_dir: str = field(default_factory=lambda: os.getenv("VIZCAP_ARTICLES_DIR", "articles"))
    extensions: Tuple[str, ...] = field(default_factory=lambda: _env_list("VIZCAP_EXTENSIONS", (".html",)))

    # A load failure aborts the remaining queue unless this is set
    continue_on_load_error: bool = field(default_factory=lambda: _env_bool("VIZCAP_CONTINUE_ON_LOAD_ERROR", "false"))
    enable_debug: bool = field(default_factory=lambda: _env_bool("VIZCAP_DEBUG", "false"))

    def __post_init__(self):
        self.capture_patterns = tuple(self.capture_patterns)
        self.extensions = tuple(self.extensions)
        if self.scale <= 0:
            raise ConfigError(f"scale must be positive, got {self.scale}")
        if self.viewport_width <= 0 or self.viewport_height <= 0:
            raise ConfigError(
                f"viewport must be positive, got {self.viewport_width}x{self.viewport_height}"
            )
        if self.settle_delay_ms < 0:
            raise ConfigError(f"settle delay must not be negative, got {self.settle_delay_ms}")
        if not self.output_dir:
            raise ConfigError("output directory name must not be empty")

    @classmethod
    def from_env(cls) -> 'Config':
        """Build a fresh config from the current environment"""
        return cls()


def get_all_config_variables(cfg: 'Config' = None) -> Dict[str, Any]:
    """
    Map environment variable names to their current values.

    Args:
        cfg: Config to describe (shared config if None)

    Returns:
        Dict mapping env variable names to values
    """
    cfg = cfg or get_config()
    return {
        "VIZCAP_CAPTURE_PATTERNS": ",".join(cfg.capture_patterns),
        "VIZCAP_OUTPUT_DIR": cfg.output_dir,
        "VIZCAP_SCALE": cfg.scale,
        "VIZCAP_VIEWPORT_WIDTH": cfg.viewport_width,
        "VIZCAP_VIEWPORT_HEIGHT": cfg.viewport_height,
        "VIZCAP_SETTLE_DELAY_MS": cfg.settle_delay_ms,
        "VIZCAP_HEADLESS": cfg.headless,
        "VIZCAP_OMIT_BACKGROUND": cfg.omit_background,
        "VIZCAP_ARTICLES_DIR": cfg.articles_dir,
        "VIZCAP_EXTENSIONS": ",".join(cfg.extensions),
        "VIZCAP_CONTINUE_ON_LOAD_ERROR": cfg.continue_on_load_error,
        "VIZCAP_DEBUG": cfg.enable_debug,
    }


def log_config(logger, cfg: 'Config' = None) -> None:
    """Log every configuration variable at DEBUG level."""
    for name, value in get_all_config_variables(cfg).items():
        logger.debug(f"{name}={value}")


_config: Optional[Config] = None


def get_config() -> Config:
    """Shared config, built from the environment on first use."""
    global _config
    if _config is None:
        _config = Config()
    return _config
