"""Seed search: term parsing, search parameters and the catalog scan itself."""

from .engine import SearchMatch, SeedResult, display_matches, search_file, search_files
from .params import CountType, MatchResponse, ObjectParameter, SearchParameters, SearchStatus
from .parse import SearchTermError, parse_object_args, parse_terms

__all__ = [
    "CountType",
    "MatchResponse",
    "ObjectParameter",
    "SearchMatch",
    "SearchParameters",
    "SearchStatus",
    "SearchTermError",
    "SeedResult",
    "display_matches",
    "parse_object_args",
    "parse_terms",
    "search_file",
    "search_files",
]
