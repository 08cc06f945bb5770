"""Spatial queries over a board: nearest-match search and area scans."""

from herotactics.search.nearest import TilePredicate, search
from herotactics.search.result import NOT_FOUND, NotFound, SearchOutcome, SearchResult, closer
from herotactics.search.scan import diamond, scan

__all__ = [
    "NOT_FOUND",
    "NotFound",
    "SearchOutcome",
    "SearchResult",
    "TilePredicate",
    "closer",
    "diamond",
    "scan",
    "search",
]
