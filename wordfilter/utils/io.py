"""Utility helpers for I/O operations."""
from __future__ import annotations

from typing import Any, Dict, List

import yaml


def read_yaml(path: str) -> Dict[str, Any]:
    """Read a YAML file and return its content as a dictionary."""
    with open(path, "r", encoding="utf-8") as fh:
        return yaml.safe_load(fh) or {}


def read_word_list(path: str) -> List[str]:
    """Read one word per line, skipping blank lines and ``#`` comments."""
    with open(path, "r", encoding="utf-8") as fh:
        lines = [line.strip() for line in fh]
    return [line for line in lines if line and not line.startswith("#")]


__all__ = ["read_yaml", "read_word_list"]
