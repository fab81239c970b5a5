"""Simulation settings with environment variable overrides.

Environment variables (all optional):
    LIFEVERSE_ROWS, LIFEVERSE_COLS: universe dimensions
    LIFEVERSE_KIND: dense | sparse | ordered
    LIFEVERSE_STEPS: generations to run
    LIFEVERSE_REFRESH_MS: delay between animation frames
    LIFEVERSE_VIEW: full | pan | center
    LIFEVERSE_LOG_LEVEL: logging level name
"""

import logging
import os
from typing import Optional

from .core.factory import UNIVERSE_KINDS
from .render.animator import ANIMATORS

logger = logging.getLogger(__name__)

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class SimulationConfig:
    """Settings for running and displaying a simulation."""

    def __init__(self,
                 rows: int = 40,
                 cols: int = 40,
                 kind: str = "sparse",
                 steps: int = 100,
                 refresh_ms: int = 100,
                 view: str = "pan",
                 log_level: str = "INFO"):
        """Initialize and validate simulation settings.

        Raises:
            ValueError: If any setting is out of range or unknown
        """
        if rows < 1 or cols < 1:
            raise ValueError("rows and cols must be positive")
        if steps < 0:
            raise ValueError("steps must be non-negative")
        if refresh_ms < 0:
            raise ValueError("refresh_ms must be non-negative")
        if kind not in UNIVERSE_KINDS:
            raise ValueError(f"Unknown universe kind {kind!r}, expected one of {sorted(UNIVERSE_KINDS)}")
        if view not in ANIMATORS:
            raise ValueError(f"Unknown view {view!r}, expected one of {sorted(ANIMATORS)}")
        if log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"Unknown log level {log_level!r}")

        self.rows = rows
        self.cols = cols
        self.kind = kind
        self.steps = steps
        self.refresh_ms = refresh_ms
        self.view = view
        self.log_level = log_level.upper()

    @property
    def refresh_period(self) -> float:
        """Frame delay in seconds."""
        return self.refresh_ms / 1000.0

    @classmethod
    def from_env(cls, environ: Optional[dict] = None) -> 'SimulationConfig':
        """Create settings from LIFEVERSE_* environment variables."""
        env = os.environ if environ is None else environ
        defaults = cls()

        def _int(name: str, default: int) -> int:
            value = env.get(name)
            if value is None:
                return default
            try:
                return int(value)
            except ValueError:
                raise ValueError(f"{name} must be an integer, got {value!r}") from None

        config = cls(
            rows=_int('LIFEVERSE_ROWS', defaults.rows),
            cols=_int('LIFEVERSE_COLS', defaults.cols),
            kind=env.get('LIFEVERSE_KIND', defaults.kind),
            steps=_int('LIFEVERSE_STEPS', defaults.steps),
            refresh_ms=_int('LIFEVERSE_REFRESH_MS', defaults.refresh_ms),
            view=env.get('LIFEVERSE_VIEW', defaults.view),
            log_level=env.get('LIFEVERSE_LOG_LEVEL', defaults.log_level),
        )
        logger.debug(f"Loaded configuration from environment: {config!r}")
        return config

    def copy(self, **overrides) -> 'SimulationConfig':
        """Copy with selected settings replaced (None values are ignored)."""
        values = {
            'rows': self.rows,
            'cols': self.cols,
            'kind': self.kind,
            'steps': self.steps,
            'refresh_ms': self.refresh_ms,
            'view': self.view,
            'log_level': self.log_level,
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        return SimulationConfig(**values)

    def __repr__(self) -> str:
        return (f"SimulationConfig(rows={self.rows}, cols={self.cols}, kind={self.kind!r}, "
                f"steps={self.steps}, refresh_ms={self.refresh_ms}, view={self.view!r}, "
                f"log_level={self.log_level!r})")
