"""
utils.
=====

Does: Shared plumbing for the library: topic-filtered trace logging and the
      JSON config loader used by themes.
Returns: Re-exports of the public helpers.
"""

from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    clear_config_cache,
    load_config,
    temp_data_dir,
)
from .log import debug, reload_topics

__all__ = [
    "debug",
    "reload_topics",
    "load_config",
    "clear_config_cache",
    "temp_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]
__docformat__ = "google"
