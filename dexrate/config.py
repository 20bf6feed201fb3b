"""Configuration classes for dexrate components."""

from dataclasses import dataclass


@dataclass
class SearchConfig:
    """Configuration for the best-rate search."""

    # Upper bound on the number of vertices in a queued path. Checked with an
    # assertion only, so it is a development diagnostic rather than a limit.
    max_path_len: int = 100


# Global configuration instance
SEARCH_CONFIG = SearchConfig()
