"""Common exceptions for hive-tabledef.

Exception Design:
    Every error raised while building a table definition inherits from
    TableDefError and carries an ErrorCode. The typed subclasses also
    inherit from the matching builtin (ValueError, OSError, LookupError)
    so callers can catch them either way.
"""

from tabledef.common.exceptions import (
    TableDefError,
    ErrorCode,
    ArgumentError,
    DelimiterRangeError,
    UnsupportedTypeError,
    ResolutionError,
    ResourceNotFoundError,
    # Helper functions
    argument_error,
    unknown_column_error,
    partition_collision_error,
    delimiter_range_error,
    unsupported_type_error,
    resolution_error,
    resource_not_found_error,
)

__all__ = [
    # Base Exception and Error Codes
    "TableDefError",
    "ErrorCode",
    # Typed errors
    "ArgumentError",
    "DelimiterRangeError",
    "UnsupportedTypeError",
    "ResolutionError",
    "ResourceNotFoundError",
    # Helper functions
    "argument_error",
    "unknown_column_error",
    "partition_collision_error",
    "delimiter_range_error",
    "unsupported_type_error",
    "resolution_error",
    "resource_not_found_error",
]
