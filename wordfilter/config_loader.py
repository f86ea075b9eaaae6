import os
from functools import lru_cache
from typing import Optional

from wordfilter.config.models import FilterOptions
from wordfilter.core.filter import WordFilter

DEFAULT_CONFIG_PATH = "wordfilter_config.yaml"


@lru_cache()
def load_options(path: Optional[str] = None) -> FilterOptions:
    """Load the filter options.

    Parameters
    ----------
    path: Optional[str]
        Explicit path to the config file. If not provided, the
        ``WORDFILTER_CONFIG_PATH`` environment variable is used. Defaults
        to ``wordfilter_config.yaml``.
    """
    cfg_path = path or os.getenv("WORDFILTER_CONFIG_PATH", DEFAULT_CONFIG_PATH)
    return FilterOptions.from_yaml(cfg_path)


@lru_cache()
def get_filter(path: Optional[str] = None) -> WordFilter:
    """Initialise and cache a :class:`WordFilter` instance.

    The instance is shared by every caller asking for the same path, so
    ``add_words``/``remove_words`` on it are visible to all of them.
    """

    return WordFilter(load_options(path))
