# lotto_pick_extractor/extraction/general/utils/__init__.py
"""

Does: Provide data-file loading and topic-gated debug output for the pick pipeline.
Returns: Public API via load_config/clear_config_cache/temp_data_dir and debug/debug_rows.
Used by: Sample loader, selector, CLI, and tests.
"""

from __future__ import annotations

from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    clear_config_cache,
    load_config,
    temp_data_dir,
)
from .log import (
    debug,
    debug_rows,
    is_topic_enabled,
    reload_topics,
)

__all__ = [
    # Data files
    "load_config",
    "clear_config_cache",
    "temp_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Debug output
    "debug",
    "debug_rows",
    "is_topic_enabled",
    "reload_topics",
]
