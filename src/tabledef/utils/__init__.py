"""Utility functions for hive-tabledef."""

from tabledef.utils.datetime import format_comment_timestamp, get_current_timestamp

__all__ = [
    "get_current_timestamp",
    "format_comment_timestamp",
]
