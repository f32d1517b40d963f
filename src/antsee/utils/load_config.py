# src/antsee/utils/load_config.py

"""Load JSON configs (themes, style sets) from a <data/> directory with caching.

Modes:
- "raw"             -> return parsed JSON as-is
- "validated_dict"  -> return dict[str, Any] after an optional validator

Used by theme loading and by tests needing hot reload.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from collections.abc import Callable
from pathlib import Path
from types import TracebackType
from typing import Any, Literal, overload

# ── Public surface ────────────────────────────────────────────────────────────
Mode = Literal["raw", "validated_dict"]
__all__ = [
    "Mode",
    "load_config",
    "clear_config_cache",
    "temp_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

DATA_DIR_ENV = "ANTSEE_DATA_DIR"


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """Raise when no 'data' directory is found while walking upwards."""


class ConfigFileNotFound(FileNotFoundError):
    """Raise when the requested config file cannot be read or resolved."""


class ConfigParseError(ValueError):
    """Raise when JSON parsing/validation fails for a config file."""


class ConfigTypeError(TypeError):
    """Raise when the parsed JSON doesn't match the expected structure."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
# cache key includes: path, mtime, mode, encoding
_CONFIG_CACHE: dict[tuple[Path, float, str, str], Any] = {}


def clear_config_cache() -> None:
    """Empty the in-memory config cache (useful for pytest/hot-reload)."""
    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()
        log.debug("Config cache cleared.")


def _candidate_data_dirs(start: Path | None = None) -> list[Path]:
    """Compute candidate 'data' directories walking up from start."""
    start = (start or Path(__file__)).resolve()
    return [(p / "data").resolve() for p in [start, *start.parents]]


def _default_data_dir(start: Path | None = None) -> Path:
    """Return the first existing candidate directory or raise."""
    for cand in _candidate_data_dirs(start):
        if cand.is_dir():
            return cand
    raise DataDirNotFound(
        "No 'data' directory found.\n"
        "Tried:\n  " + "\n  ".join(str(p) for p in _candidate_data_dirs(start))
    )


def _env_data_dir() -> Path | None:
    """Resolve data dir from env if set."""
    v = os.environ.get(DATA_DIR_ENV)
    if v:
        return Path(os.path.expanduser(v)).resolve()
    return None


@overload
def load_config(
    file: str | os.PathLike[str],
    mode: Literal["raw"] = "raw",
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
    validator: None = ...,
) -> Any: ...
@overload
def load_config(
    file: str | os.PathLike[str],
    mode: Literal["validated_dict"] = "validated_dict",
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
    validator: Callable[[dict[str, Any]], dict[str, Any]] | None = ...,
) -> dict[str, Any]: ...


def load_config(
    file: str | os.PathLike[str],
    mode: Mode = "raw",
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
    validator: Callable[[dict[str, Any]], Any] | None = None,
) -> Any:
    """Load <data>/<file>.json, parse, coerce by mode, and cache results."""
    # Resolve base directory: explicit > env override > discovery
    if base_dir is None:
        base_dir = _env_data_dir() or _default_data_dir()

    data_dir = Path(base_dir).resolve()

    # Normalize file path and enforce staying under data_dir
    file_str = os.fspath(file)
    file_name = file_str if file_str.endswith(".json") else f"{file_str}.json"
    path = (data_dir / file_name).resolve()
    try:
        path.relative_to(data_dir)
    except ValueError as e:
        raise ConfigFileNotFound(
            f"Refusing to access file outside data dir: {path} (base={data_dir})"
        ) from e

    if not path.is_file():
        raise ConfigFileNotFound(f"Config file not found: {path}")

    # mtime-based cache key for auto-invalidation when file changes
    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot stat {path}: {e}") from e

    cache_key = (path, mtime, mode, encoding)

    # Cache hit (only when no validator is used, because validator may change output)
    with _CACHE_LOCK:
        if cache_key in _CONFIG_CACHE and validator is None:
            log.debug("Config cache HIT: %s (mode=%s)", path.name, mode)
            return _CONFIG_CACHE[cache_key]

    try:
        with path.open("r", encoding=encoding, errors="strict", newline="") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e

    if mode == "raw":
        result: Any = data

    elif mode == "validated_dict":
        if not isinstance(data, dict):
            raise ConfigTypeError(
                f"{path.name}: expected dict for mode 'validated_dict', got {type(data).__name__}"
            )
        if validator is not None:
            try:
                data = validator(data)
            except ConfigParseError:
                raise
            except Exception as e:
                raise ConfigParseError(f"{path.name}: validator failed: {e}") from e
        result = data

    else:
        raise ValueError(f"Unknown mode '{mode}'")

    if validator is None:
        with _CACHE_LOCK:
            _CONFIG_CACHE[cache_key] = result
            log.debug("Config cache MISS → STORED: %s (mode=%s)", path.name, mode)
    else:
        log.debug("Config loaded (validator present, not cached): %s (mode=%s)", path.name, mode)

    return result


# ── Context manager to temporarily override the data directory ───────────────
class temp_data_dir:
    """Temporarily set the data directory via env for the block."""

    def __init__(self, path: os.PathLike[str] | str):
        self._new = str(path)
        self._old: str | None = None

    def __enter__(self) -> temp_data_dir:
        self._old = os.environ.get(DATA_DIR_ENV)
        os.environ[DATA_DIR_ENV] = self._new
        clear_config_cache()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._old is None:
            os.environ.pop(DATA_DIR_ENV, None)
        else:
            os.environ[DATA_DIR_ENV] = self._old
        clear_config_cache()
