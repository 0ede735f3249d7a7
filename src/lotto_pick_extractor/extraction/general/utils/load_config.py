# src/lotto_pick_extractor/extraction/general/utils/load_config.py

"""Read the bundled data files (sample digit-string groups) from <data/>.

The data dir sits next to the installed package and can be swapped out via
LOTTO_DATA_DIR (or DATA_DIR), which is how the CLI `--data-dir` flag and the
tests point the loader at their own sample files.

Modes:
- "raw"             -> parsed document as-is
- "validated_dict"  -> top-level object, reshaped by an optional validator
  (load_sample_inputs uses it to enforce {title: [digit strings]})

Files may carry json5 comments when read with allow_comments=True.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Callable
from pathlib import Path
from types import TracebackType
from typing import Any, Literal

import json5

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

_ENV_VARS = ("LOTTO_DATA_DIR", "DATA_DIR")


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """No data dir was configured and none was found next to the package."""


class ConfigFileNotFound(FileNotFoundError):
    """The sample file is missing, unreadable, or outside the data dir."""


class ConfigParseError(ValueError):
    """The sample file is not valid JSON/json5, or its groups failed validation."""


class ConfigTypeError(TypeError):
    """The sample file parsed, but its top level has the wrong shape."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
# key: (path, mtime, mode, allow_comments)
_CONFIG_CACHE: dict[tuple[Path, float, str, bool], Any] = {}


def clear_config_cache() -> None:
    """Forget cached documents (after swapping the data dir or editing a file in place)."""
    _CONFIG_CACHE.clear()
    log.debug("Config cache cleared.")


def _candidate_data_dirs(start: Path | None = None) -> list[Path]:
    start = (start or Path(__file__)).resolve()
    return [(p / "data").resolve() for p in [start, *start.parents]]


def _default_data_dir(start: Path | None = None) -> Path:
    """Return the first existing 'data' dir walking up from this package, or raise."""
    for cand in _candidate_data_dirs(start):
        if cand.is_dir():
            return cand
    raise DataDirNotFound(
        "No data dir with sample inputs found (set LOTTO_DATA_DIR).\n"
        "Looked in:\n  " + "\n  ".join(str(p) for p in _candidate_data_dirs(start))
    )


def _env_data_dir() -> Path | None:
    for var in _ENV_VARS:
        v = os.environ.get(var)
        if v:
            return Path(os.path.expanduser(v)).resolve()
    return None


def _resolve_path(file: str | os.PathLike[str], base_dir: Path | None) -> Path:
    # env override > explicit > discovery
    if base_dir is None:
        base_dir = _env_data_dir() or _default_data_dir()
    data_dir = base_dir.resolve()

    file_str = os.fspath(file)
    file_name = file_str if file_str.endswith(".json") else f"{file_str}.json"
    path = (data_dir / file_name).resolve()
    try:
        path.relative_to(data_dir)
    except ValueError as e:
        raise ConfigFileNotFound(
            f"Sample file {path} escapes the data dir {data_dir}"
        ) from e
    if not path.is_file():
        raise ConfigFileNotFound(f"No such sample file: {path}")
    return path


def _parse(path: Path, allow_comments: bool) -> Any:
    try:
        with path.open("r", encoding="utf-8") as f:
            if allow_comments:
                return json5.load(f)
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Sample file {path} is not valid JSON: {e}") from e
    except ValueError as e:
        # json5 reports syntax errors as plain ValueError
        raise ConfigParseError(f"Sample file {path} could not be parsed: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e


def load_config(
    file: str | os.PathLike[str],
    mode: Mode = "raw",
    *,
    base_dir: Path | None = None,
    validator: Callable[[dict[str, Any]], dict[str, Any]] | None = None,
    allow_comments: bool = False,
) -> Any:
    """Read <data>/<file>.json and return it shaped by `mode`.

    Plain reads are cached per (path, mtime, mode, allow_comments); reads
    with a validator are not cached.
    """
    if mode not in ("raw", "validated_dict"):
        raise ValueError(f"Unknown mode '{mode}'")

    path = _resolve_path(file, base_dir)
    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot stat {path}: {e}") from e

    cache_key = (path, mtime, mode, allow_comments)
    if validator is None and cache_key in _CONFIG_CACHE:
        log.debug("Config cache HIT: %s (mode=%s)", path.name, mode)
        return _CONFIG_CACHE[cache_key]

    data = _parse(path, allow_comments)

    if mode == "validated_dict":
        if not isinstance(data, dict):
            raise ConfigTypeError(
                f"{path.name}: expected an object of sample groups, got {type(data).__name__}"
            )
        if validator is not None:
            try:
                data = validator(data)
            except (TypeError, ValueError) as e:
                raise ConfigParseError(f"{path.name}: bad sample groups: {e}") from e

    if validator is None:
        _CONFIG_CACHE[cache_key] = data
        log.debug("Config cache MISS → STORED: %s (mode=%s)", path.name, mode)
    else:
        log.debug("Config loaded (validator present, not cached): %s", path.name)
    return data


# ── Context manager to temporarily override the data directory ───────────────
class temp_data_dir:
    """Read sample files from `path` inside the block (CLI --data-dir, tests)."""

    def __init__(self, path: os.PathLike[str] | str):
        self._new = str(path)
        self._old: str | None = None

    def __enter__(self) -> temp_data_dir:
        self._old = os.environ.get("LOTTO_DATA_DIR")
        os.environ["LOTTO_DATA_DIR"] = self._new
        clear_config_cache()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._old is None:
            os.environ.pop("LOTTO_DATA_DIR", None)
        else:
            os.environ["LOTTO_DATA_DIR"] = self._old
        clear_config_cache()
