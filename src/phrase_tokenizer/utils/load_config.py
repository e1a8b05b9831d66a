# src/phrase_tokenizer/utils/load_config.py

"""Load JSON configs (stop-word lists, ...) from a <data/> directory.

Modes:
- "raw"             -> parsed JSON as-is
- "set"             -> frozenset[str] of lowercased scalars (word lists)
- "validated_dict"  -> dict[str, Any], passed through an optional validator

Results are cached per (path, mtime, mode, ...) so edits on disk are seen.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from collections.abc import Callable
from pathlib import Path
from types import TracebackType
from typing import Any, Literal

import json5

Mode = Literal["raw", "set", "validated_dict"]
__all__ = [
    "Mode",
    "DATA_DIR_ENV_VARS",
    "load_config",
    "clear_config_cache",
    "temp_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

# first one set wins
DATA_DIR_ENV_VARS: tuple[str, ...] = ("PHRASE_TOKENIZER_DATA_DIR", "DATA_DIR")


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """No data dir configured and none found above this package."""


class ConfigFileNotFound(FileNotFoundError):
    """Word-list / config file is missing, unreadable or outside the data dir."""


class ConfigParseError(ValueError):
    """File is not valid JSON (or JSON5), or the validator rejected it."""


class ConfigTypeError(TypeError):
    """Parsed value has the wrong shape for the requested mode."""


# ── Cache ────────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
_CONFIG_CACHE: dict[tuple[Path, float, str, str, bool], Any] = {}


def clear_config_cache() -> None:
    """Empty the in-memory config cache (pytest / hot reload)."""
    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()
    log.debug("load_config: cache cleared")


# ── Data dir resolution ──────────────────────────────────────────────────────
def _env_data_dir() -> Path | None:
    for var in DATA_DIR_ENV_VARS:
        value = os.environ.get(var)
        if value:
            return Path(os.path.expanduser(value)).resolve()
    return None


def _discover_data_dir(start: Path | None = None) -> Path:
    """Return the first 'data' dir found walking up from `start` (this module)."""
    start = (start or Path(__file__)).resolve()
    tried: list[Path] = []
    for parent in [start, *start.parents]:
        cand = parent / "data"
        if cand.is_dir():
            return cand
        tried.append(cand)
    raise DataDirNotFound(
        "No 'data' directory found.\nTried:\n  " + "\n  ".join(str(p) for p in tried)
    )


def _resolve_path(file: str | os.PathLike[str], base_dir: Path | None) -> Path:
    data_dir = (base_dir or _env_data_dir() or _discover_data_dir()).resolve()

    name = os.fspath(file)
    if not name.endswith(".json"):
        name = f"{name}.json"
    path = (data_dir / name).resolve()
    try:
        path.relative_to(data_dir)
    except ValueError as e:
        raise ConfigFileNotFound(
            f"{name!r} resolves outside the data dir {data_dir}"
        ) from e

    if not path.is_file():
        raise ConfigFileNotFound(f"No such config: {path}")
    return path


# ── Parsing & coercion ───────────────────────────────────────────────────────
def _read(path: Path, encoding: str, allow_comments: bool) -> Any:
    try:
        with path.open("r", encoding=encoding, newline="") as f:
            if allow_comments:
                # comments / trailing commas
                return json5.load(f)
            return json.load(f)
    except ValueError as e:
        # json.JSONDecodeError and json5's errors are both ValueErrors
        raise ConfigParseError(f"{path.name}: cannot parse: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e


def _as_word_set(path: Path, data: Any) -> frozenset[str]:
    if not isinstance(data, list):
        raise ConfigTypeError(
            f"{path.name}: expected list for mode 'set', got {type(data).__name__}"
        )
    bad = [x for x in data if not isinstance(x, (str, int, float, bool))]
    if bad:
        preview = ", ".join(type(x).__name__ for x in bad[:3])
        raise ConfigTypeError(
            f"{path.name}: list must contain only scalars for 'set' (first bad types: {preview})"
        )
    return frozenset(str(x).strip().lower() for x in data if str(x).strip())


def load_config(
    file: str | os.PathLike[str],
    mode: Mode = "raw",
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
    validator: Callable[[dict[str, Any]], dict[str, Any]] | None = None,
    allow_comments: bool = False,
) -> Any:
    """Load <data>/<file>.json, coerce it by `mode` and cache the result.

    The data dir is `base_dir` if given, else $PHRASE_TOKENIZER_DATA_DIR /
    $DATA_DIR, else the first 'data' dir above this module (the packaged one).
    Results produced with a validator are not cached.
    """
    if mode not in ("raw", "set", "validated_dict"):
        raise ValueError(f"Unknown mode '{mode}'")

    path = _resolve_path(file, base_dir)
    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot stat {path}: {e}") from e

    key = (path, mtime, mode, encoding, allow_comments)
    if validator is None:
        with _CACHE_LOCK:
            if key in _CONFIG_CACHE:
                log.debug("load_config: cached %s [%s]", path.name, mode)
                return _CONFIG_CACHE[key]

    data = _read(path, encoding, allow_comments)

    if mode == "set":
        result: Any = _as_word_set(path, data)
    elif mode == "validated_dict":
        if not isinstance(data, dict):
            raise ConfigTypeError(
                f"{path.name}: expected dict for mode 'validated_dict', got {type(data).__name__}"
            )
        if validator is not None:
            try:
                data = validator(data)
            except Exception as e:
                raise ConfigParseError(f"{path.name}: rejected by validator: {e}") from e
        result = data
    else:
        result = data

    if validator is None:
        with _CACHE_LOCK:
            _CONFIG_CACHE[key] = result
        log.debug("load_config: loaded %s [%s]", path.name, mode)
    return result


# ── Data dir override ────────────────────────────────────────────────────────
class temp_data_dir:
    """Point PHRASE_TOKENIZER_DATA_DIR at `path` for the duration of the block."""

    _VAR = DATA_DIR_ENV_VARS[0]

    def __init__(self, path: os.PathLike[str] | str):
        self._new = str(path)
        self._old: str | None = None

    def __enter__(self) -> temp_data_dir:
        self._old = os.environ.get(self._VAR)
        os.environ[self._VAR] = self._new
        clear_config_cache()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._old is None:
            os.environ.pop(self._VAR, None)
        else:
            os.environ[self._VAR] = self._old
        clear_config_cache()
