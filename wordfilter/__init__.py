"""Top-level package for the configurable word filter."""

from .config import FilterOptions, load_config, create_filter
from .core.filter import WordFilter
from .data.badwords_ko import BAD_WORDS
from .config_loader import load_options, get_filter

__all__ = [
    "BAD_WORDS",
    "FilterOptions",
    "WordFilter",
    "create_filter",
    "get_filter",
    "load_config",
    "load_options",
]
