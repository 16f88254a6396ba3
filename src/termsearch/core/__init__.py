"""
Core search functionality.

- api: the FullTextSearch orchestrator
- config: search options and validation
- types: tokens, terms, matches, scores and results
"""

from .api import FullTextSearch
from .config import SearchConfig

__all__ = [
    "FullTextSearch",
    "SearchConfig",
]
