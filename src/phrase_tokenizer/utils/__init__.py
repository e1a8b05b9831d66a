# src/phrase_tokenizer/utils/__init__.py
"""

Does: Provide config loading, stop-word providers and lightweight debug logging.
Returns: Public API via load_config/clear_config_cache, load_stop_words/
         nltk_stop_words/combine_stop_words and debug/reload_topics.
Used by: tokenizer, CLI demo, tests.
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
    reload_topics,
)
from .stop_words import (
    combine_stop_words,
    load_stop_words,
    nltk_stop_words,
)

__all__ = [
    # Config loading
    "load_config",
    "clear_config_cache",
    "temp_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Stop words
    "load_stop_words",
    "nltk_stop_words",
    "combine_stop_words",
    # Logging helpers
    "debug",
    "reload_topics",
]
