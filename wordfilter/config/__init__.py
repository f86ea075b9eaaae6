"""Configuration helpers for the word filter."""

from .models import FilterOptions
from .loader import load_config, create_filter

__all__ = ["FilterOptions", "load_config", "create_filter"]
