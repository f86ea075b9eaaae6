"""Configuration loader for the word filter."""
from __future__ import annotations

import os
from typing import Any, Dict, List

from .models import FilterOptions, OPTION_ALIASES
from ..utils.io import read_yaml, read_word_list
from ..core.filter import WordFilter


def _normalize_keys(section: Dict[str, Any]) -> Dict[str, Any]:
    """Map option aliases to field names, rejecting two spellings of one option."""
    out: Dict[str, Any] = {}
    for key, value in section.items():
        name = OPTION_ALIASES.get(key, key)
        if name in out:
            raise ValueError(f"'{key}' duplicates another spelling of '{name}'")
        out[name] = value
    return out


def _string_list(section: Dict[str, Any], key: str, label: str = "") -> List[str]:
    value = section.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValueError(f"'{label or key}' must be a list of strings")
    return value


def load_config(path: str) -> FilterOptions:
    """Load filter options from a YAML file.

    Parameters
    ----------
    path: str
        Path to the YAML configuration file. Options are read from its
        ``filter`` section, or from the top level when there is none.
        ``list`` and ``words`` both name the extra blacklist entries.
    """
    raw: Dict[str, Any] = read_yaml(path)
    if not isinstance(raw, dict):
        raise ValueError(f"{path} must contain a mapping")

    section = raw.get("filter", raw)
    if not isinstance(section, dict):
        raise ValueError("'filter' must be a mapping")
    section = _normalize_keys(section)

    # Word lists
    words = _string_list(section, "words", "list")
    list_file = section.get("list_file")
    if list_file:
        base = os.path.dirname(os.path.abspath(path))
        words = words + read_word_list(os.path.join(base, list_file))
    section["words"] = words
    section["exclude"] = _string_list(section, "exclude")

    empty_list = section.get("empty_list")
    if empty_list is not None and not isinstance(empty_list, bool):
        raise ValueError("'empty_list' must be true or false")

    placeholder = section.get("placeholder")
    if placeholder is not None and not isinstance(placeholder, str):
        raise ValueError("'placeholder' must be a string")

    for key in ("split_pattern", "sanitize_pattern", "mask_pattern"):
        value = section.get(key)
        if value is not None and not isinstance(value, str):
            raise ValueError(f"'{key}' must be a string")

    return FilterOptions.from_mapping(section)


__all__ = ["load_config"]


def create_filter(config_path: str) -> WordFilter:
    """Application factory creating a configured :class:`WordFilter`."""

    return WordFilter(load_config(config_path))


__all__.append("create_filter")
