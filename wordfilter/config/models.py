"""Configuration models for the word filter."""
from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Mapping, Pattern, Union
import warnings

PatternLike = Union[str, Pattern]

DEFAULT_SPLIT_PATTERN = r"\s"
DEFAULT_PLACEHOLDER = "*"
# The trailing ``^`` alternative matches the empty string at the start of a
# token, so sanitizing always substitutes at least once.
DEFAULT_SANITIZE_PATTERN = r"[^a-zA-Z0-9|@]|^"
DEFAULT_MASK_PATTERN = r"(?a)\w"

# Option names accepted by ``from_mapping`` in addition to the field names.
OPTION_ALIASES: Dict[str, str] = {
    "emptyList": "empty_list",
    "list": "words",
    "splitRegex": "split_pattern",
    "splitPattern": "split_pattern",
    "placeHolder": "placeholder",
    "regex": "sanitize_pattern",
    "sanitizePattern": "sanitize_pattern",
    "replaceRegex": "mask_pattern",
    "maskPattern": "mask_pattern",
}


@dataclass
class FilterOptions:
    """Construction options for :class:`~wordfilter.core.filter.WordFilter`."""

    empty_list: bool = False
    words: List[str] = field(default_factory=list)
    exclude: List[str] = field(default_factory=list)
    split_pattern: PatternLike = DEFAULT_SPLIT_PATTERN
    placeholder: str = DEFAULT_PLACEHOLDER
    sanitize_pattern: PatternLike = DEFAULT_SANITIZE_PATTERN
    mask_pattern: PatternLike = DEFAULT_MASK_PATTERN

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "FilterOptions":
        """Build options from a plain mapping.

        Both the field names and the camelCase option names in
        ``OPTION_ALIASES`` are recognised; any other key is ignored. Empty
        values for the placeholder and the patterns fall back to the defaults.
        """
        known = {f.name for f in fields(cls)}
        values: Dict[str, Any] = {}
        for key, value in raw.items():
            name = OPTION_ALIASES.get(key, key)
            if name in known:
                values[name] = value

        return cls(
            empty_list=bool(values.get("empty_list", False)),
            words=list(values.get("words") or []),
            exclude=list(values.get("exclude") or []),
            split_pattern=values.get("split_pattern") or DEFAULT_SPLIT_PATTERN,
            placeholder=values.get("placeholder") or DEFAULT_PLACEHOLDER,
            sanitize_pattern=values.get("sanitize_pattern") or DEFAULT_SANITIZE_PATTERN,
            mask_pattern=values.get("mask_pattern") or DEFAULT_MASK_PATTERN,
        )

    @classmethod
    def from_yaml(cls, path: str) -> "FilterOptions":
        """Load options from *path*, warning when the blacklist ends up empty."""
        from .loader import load_config

        options = load_config(path)
        if options.empty_list and not options.words:
            warnings.warn(
                f"{path} sets empty_list without any words; the filter will not match anything.",
                UserWarning,
            )
        return options
