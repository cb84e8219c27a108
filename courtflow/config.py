"""
Animation engine configuration.

Defaults for generation and playback. All settings can be overridden via
environment variables.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Optional

from courtflow.core.constants import (
    DEFAULT_DURATION_MS,
    DEFAULT_FPS,
    KEYFRAME_SNAP_MS,
    MAX_DURATION_MS,
    MIN_DURATION_MS,
    TICK_HZ,
)


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return int(value)


@dataclass
class AnimationConfig:
    """Configuration for sequence generation, storage and playback."""

    # Generation
    default_duration_ms: int = field(
        default_factory=lambda: _env_int("COURTFLOW_DEFAULT_DURATION_MS", DEFAULT_DURATION_MS)
    )
    default_fps: int = field(default_factory=lambda: _env_int("COURTFLOW_DEFAULT_FPS", DEFAULT_FPS))
    min_duration_ms: int = MIN_DURATION_MS
    max_duration_ms: int = MAX_DURATION_MS

    # Playback
    tick_hz: int = field(default_factory=lambda: _env_int("COURTFLOW_TICK_HZ", TICK_HZ))
    keyframe_snap_ms: int = field(
        default_factory=lambda: _env_int("COURTFLOW_KEYFRAME_SNAP_MS", KEYFRAME_SNAP_MS)
    )

    # Storage - None keeps everything in memory
    data_dir: Optional[str] = field(default_factory=lambda: os.getenv("COURTFLOW_DATA_DIR") or None)

    log_level: str = field(default_factory=lambda: os.getenv("COURTFLOW_LOG_LEVEL", "INFO"))

    @classmethod
    def from_env(cls) -> "AnimationConfig":
        """Create config from environment variables."""
        return cls()

    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        errors = []
        if self.default_fps <= 0:
            errors.append("COURTFLOW_DEFAULT_FPS must be positive")
        if self.tick_hz <= 0:
            errors.append("COURTFLOW_TICK_HZ must be positive")
        if self.keyframe_snap_ms < 0:
            errors.append("COURTFLOW_KEYFRAME_SNAP_MS must not be negative")
        if not self.min_duration_ms <= self.default_duration_ms <= self.max_duration_ms:
            errors.append(
                f"COURTFLOW_DEFAULT_DURATION_MS must be between "
                f"{self.min_duration_ms} and {self.max_duration_ms}"
            )
        return errors


# Singleton config instance
_config: Optional[AnimationConfig] = None


def get_config() -> AnimationConfig:
    """Get the global animation configuration."""
    global _config
    if _config is None:
        _config = AnimationConfig.from_env()
    return _config


def set_config(config: Optional[AnimationConfig]) -> None:
    """
    Replace the global configuration.

    Passing None makes the next get_config() re-read the environment.
    Useful for testing.
    """
    global _config
    _config = config


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging for the CLI and API entry points."""
    logging.basicConfig(
        level=(level or get_config().log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
