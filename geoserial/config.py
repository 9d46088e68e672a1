"""Configuration helpers.

Centralizes logging setup and the loading of environment variables from
``.env`` files. Nothing here runs at import time; entry points call
:func:`load_environment` and :func:`configure_logging` themselves.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from .errors import UnsupportedFormat
from .wkt.codec import FORMATS
from .wkt.encoder import WKT_FORMAT

ENV_FILE_ENV = "GEOSERIAL_ENV_FILE"
LOG_LEVEL_ENV = "GEOSERIAL_LOG_LEVEL"
LOG_FORMAT_ENV = "GEOSERIAL_LOG_FORMAT"
DEFAULT_FORMAT_ENV = "GEOSERIAL_DEFAULT_FORMAT"
STRICT_DIMENSIONS_ENV = "GEOSERIAL_STRICT_DIMENSIONS"
WKT_COLUMN_ENV = "GEOSERIAL_WKT_COLUMN"
_DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_TRUTHY = frozenset({"1", "true", "yes", "on"})


def parse_env_file(env_path: Path) -> Iterator[tuple[str, str]]:
    """Yield the ``KEY=value`` pairs of a ``.env`` file.

    Blank lines, ``#`` comments and lines without a key are skipped;
    surrounding quotes are stripped from values.
    """

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        key, sep, value = raw_line.strip().partition("=")
        key = key.strip()
        if not sep or not key or key.startswith("#"):
            continue
        yield key, value.strip().strip("\"'")


def load_environment(path: os.PathLike[str] | str | None = None, *, override: bool = False) -> dict[str, str]:
    """Export the variables of a ``.env`` file into ``os.environ``.

    ``path`` defaults to ``GEOSERIAL_ENV_FILE`` or ``.env``; a missing file
    loads nothing. Variables already set win unless ``override`` is true.
    Returns every pair read from the file.
    """

    env_path = Path(path if path is not None else os.getenv(ENV_FILE_ENV, ".env"))
    if not env_path.exists():
        return {}

    loaded = dict(parse_env_file(env_path))
    for key, value in loaded.items():
        if override:
            os.environ[key] = value
        else:
            os.environ.setdefault(key, value)
    return loaded


def configure_logging(level: str | int | None = None, fmt: str | None = None) -> None:
    """Point the root logger at ``level`` and ``fmt``.

    Both fall back to ``GEOSERIAL_LOG_LEVEL`` / ``GEOSERIAL_LOG_FORMAT``.
    Handlers already attached to the root logger are reconfigured in place;
    otherwise a stream handler is installed.
    """

    level = level or os.getenv(LOG_LEVEL_ENV, "INFO")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    formatter = logging.Formatter(fmt or os.getenv(LOG_FORMAT_ENV, _DEFAULT_LOG_FORMAT))

    root_logger = logging.getLogger()
    if not root_logger.handlers:
        root_logger.addHandler(logging.StreamHandler())
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)


@dataclass(slots=True)
class Settings:
    """Codec defaults that can be overridden from the environment."""

    default_format: str = WKT_FORMAT
    strict_dimensions: bool = False
    wkt_column: str = "wkt"

    def __post_init__(self) -> None:
        self.default_format = self.default_format.lower()
        if self.default_format not in FORMATS:
            raise UnsupportedFormat(f"Unsupported default format {self.default_format!r}")

    @classmethod
    def from_env(cls) -> Settings:
        return cls(
            default_format=os.getenv(DEFAULT_FORMAT_ENV, WKT_FORMAT),
            strict_dimensions=os.getenv(STRICT_DIMENSIONS_ENV, "").strip().lower() in _TRUTHY,
            wkt_column=os.getenv(WKT_COLUMN_ENV, "wkt"),
        )


__all__ = [
    "Settings",
    "configure_logging",
    "load_environment",
    "parse_env_file",
]
