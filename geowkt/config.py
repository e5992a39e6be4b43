"""Configuration for the WKT decoder.

Decoding never reads the environment on its own. Callers that want the
``GEOWKT_*`` variables (optionally from a ``.env`` file) build their settings
once with :meth:`DecoderSettings.from_environment` and pass them along.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

ENV_FILE = ".env"
LOG_LEVEL_ENV = "GEOWKT_LOG_LEVEL"
LOG_FORMAT_ENV = "GEOWKT_LOG_FORMAT"
MAX_DEPTH_ENV = "GEOWKT_MAX_DEPTH"
DEFAULT_MAX_DEPTH = 64
PACKAGE_LOGGER = "geowkt"
_DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _parse_env_line(line: str) -> tuple[str, str] | None:
    line = line.strip()
    if not line or line.startswith("#") or "=" not in line:
        return None
    key, value = (part.strip() for part in line.split("=", 1))
    if not key:
        return None
    return key, value.strip("\"'")


def read_env_file(path: os.PathLike[str] | str = ENV_FILE) -> dict[str, str]:
    """Return the ``KEY=value`` pairs of a ``.env`` file without touching ``os.environ``.

    Blank lines, ``#`` comments and lines without ``=`` are skipped. A missing
    file yields an empty dictionary.
    """

    env_path = Path(path)
    if not env_path.exists():
        return {}

    pairs = (_parse_env_line(line) for line in env_path.read_text(encoding="utf-8").splitlines())
    return dict(pair for pair in pairs if pair is not None)


def load_environment(path: os.PathLike[str] | str = ENV_FILE, *, override: bool = False) -> dict[str, str]:
    """Export the variables of a ``.env`` file into ``os.environ``.

    Args:
        path: Path to the ``.env`` file.
        override: When ``True`` replaces variables already present in
            ``os.environ``.

    Returns:
        The variables read from the file.
    """

    loaded = read_env_file(path)
    for key, value in loaded.items():
        if override or key not in os.environ:
            os.environ[key] = value
    return loaded


def configure_logging(level: str | int | None = None, fmt: str | None = None) -> logging.Logger:
    """Attach a stream handler to the ``geowkt`` logger.

    ``level`` and ``fmt`` fall back to ``GEOWKT_LOG_LEVEL`` (``INFO``) and
    ``GEOWKT_LOG_FORMAT``. Calling it again reconfigures the same handler
    instead of adding another one. The root logger is left alone.
    """

    level = level or os.getenv(LOG_LEVEL_ENV, "INFO")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    formatter = logging.Formatter(fmt or os.getenv(LOG_FORMAT_ENV, _DEFAULT_LOG_FORMAT))

    logger = logging.getLogger(PACKAGE_LOGGER)
    handler = next((h for h in logger.handlers if getattr(h, "_geowkt_handler", False)), None)
    if handler is None:
        handler = logging.StreamHandler()
        handler._geowkt_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    handler.setFormatter(formatter)
    handler.setLevel(level)
    logger.setLevel(level)
    return logger


@dataclass(frozen=True, slots=True)
class DecoderSettings:
    """Limits applied while decoding.

    ``max_depth`` bounds how many geometry collections may be nested inside
    each other.
    """

    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
            raise TypeError("max_depth must be an integer")
        if self.max_depth < 1:
            raise ValueError("max_depth must be at least 1")

    @classmethod
    def from_environment(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        env_file: os.PathLike[str] | str | None = None,
    ) -> "DecoderSettings":
        """Build settings from ``environ`` (``os.environ`` by default).

        Values found in ``env_file`` are used for keys ``environ`` lacks.
        """

        env = dict(read_env_file(env_file)) if env_file is not None else {}
        env.update(os.environ if environ is None else environ)

        raw_depth = env.get(MAX_DEPTH_ENV)
        if raw_depth is None or not raw_depth.strip():
            return cls()
        try:
            max_depth = int(raw_depth)
        except ValueError as exc:
            raise ValueError(f"{MAX_DEPTH_ENV} must be an integer, got {raw_depth!r}") from exc
        return cls(max_depth=max_depth)


__all__ = [
    "DEFAULT_MAX_DEPTH",
    "DecoderSettings",
    "ENV_FILE",
    "configure_logging",
    "load_environment",
    "read_env_file",
]
