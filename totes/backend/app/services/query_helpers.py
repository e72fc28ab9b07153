"""
Shared filters for the search endpoints
"""
from sqlalchemy import String, cast, func


def id_prefix(column, query: str):
    """Match integer ids whose decimal text starts with query (e.g. '1' -> 1, 10, 12...)."""
    return cast(column, String).startswith((query or "").strip(), autoescape=True)


def contains_ci(column, query: str):
    """Case-insensitive substring match; % and _ in query match literally."""
    return func.lower(column).contains((query or "").strip().lower(), autoescape=True)
