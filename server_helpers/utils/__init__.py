"""Utility helpers package."""

from server_helpers.utils.connection_cache import (
    ConnectionCache,
    cache_connection,
    connection_cache,
    get_cached_connection,
)
from server_helpers.utils.versions import (
    check_version_compatibility,
    extract_major_version,
    is_version_compatible,
    is_version_greater_than_or_equal,
)

__all__ = [
    "ConnectionCache",
    "cache_connection",
    "check_version_compatibility",
    "connection_cache",
    "extract_major_version",
    "get_cached_connection",
    "is_version_compatible",
    "is_version_greater_than_or_equal",
]
