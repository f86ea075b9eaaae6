from __future__ import annotations
import re
from typing import Any, Dict, List, Optional, Pattern

from ..config.models import FilterOptions, PatternLike
from ..data.badwords_ko import BAD_WORDS


def _as_pattern(value: PatternLike) -> Pattern:
    if isinstance(value, re.Pattern):
        return value
    return re.compile(value)


# -----------------------------
# Filter
# -----------------------------
class WordFilter:
    """Detects and masks blacklisted words, honouring a whitelist."""

    def __init__(self, options: Optional[FilterOptions] = None, **overrides: Any):
        """Create a filter from ``options`` and/or keyword ``overrides``.

        Overrides accept the same names as :meth:`FilterOptions.from_mapping`;
        unknown names are ignored.
        """
        base = options.__dict__ if options is not None else {}
        options = FilterOptions.from_mapping({**base, **overrides})

        self.options = options
        self.blacklist: List[str] = [] if options.empty_list else list(BAD_WORDS)
        self.blacklist.extend(options.words)
        self.exclude: List[str] = list(options.exclude)
        self.split_pattern = _as_pattern(options.split_pattern)
        self.placeholder = options.placeholder
        self.sanitize_pattern = _as_pattern(options.sanitize_pattern)
        self.mask_pattern = _as_pattern(options.mask_pattern)
        self._compiled: Dict[str, Pattern] = {}

    def _pattern_for(self, word: str) -> Pattern:
        key = word.strip()
        pattern = self._compiled.get(key)
        if pattern is None:
            pattern = self._compiled[key] = re.compile(key)
        return pattern

    # --- detection
    def is_profane(self, text: str) -> bool:
        """Return True if any non-excluded blacklist entry is found in ``text``."""
        for word in self.blacklist:
            pattern = self._pattern_for(word)
            if word in self.exclude:
                continue
            if pattern.search(text):
                return True
        return False

    # --- masking
    def mask_word(self, text: str) -> str:
        """Replace sanitized and maskable characters with the placeholder, taken literally."""
        def repl(match: re.Match) -> str:
            return self.placeholder

        sanitized = self.sanitize_pattern.sub(repl, text)
        return self.mask_pattern.sub(repl, sanitized)

    def clean(self, text: str) -> str:
        """Mask every profane token of ``text``.

        Tokens are rejoined with single spaces whatever the split pattern
        matched, so runs of separators are not preserved.
        """
        tokens = self.split_pattern.split(text)
        return " ".join(
            self.mask_word(token) if self.is_profane(token) else token
            for token in tokens
        )

    # --- list management
    def add_words(self, *words: str) -> None:
        """Blacklist ``words``, lifting a matching whitelist entry for each."""
        self.blacklist.extend(words)
        for word in words:
            if word in self.exclude:
                self.exclude.remove(word)

    def remove_words(self, *words: str) -> None:
        """Whitelist ``words`` (lowercased). The blacklist is left as is."""
        self.exclude.extend(word.lower() for word in words)
