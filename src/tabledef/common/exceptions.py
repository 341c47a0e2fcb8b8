from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(Enum):
    """Standard error codes for table definition generation.

    Each category has its own prefix so a failure can be identified
    without inspecting the exception class.

    Attributes:
        VALIDATION_*: Invalid request shape
        TYPE_*: Type mapping failures
        RESOURCE_*: Tables or queries unknown to the describer
        RESOLUTION_*: Path qualification failures
    """
    # Validation errors
    VALIDATION_ERROR = "VALIDATION_001"
    INVALID_ARGUMENT = "VALIDATION_002"
    UNKNOWN_COLUMN = "VALIDATION_003"
    PARTITION_COLLISION = "VALIDATION_004"
    DELIMITER_OUT_OF_RANGE = "VALIDATION_005"
    UNSUPPORTED_CODEC = "VALIDATION_006"

    # Type mapping errors
    UNSUPPORTED_TYPE = "TYPE_001"

    # Resource errors
    RESOURCE_NOT_FOUND = "RESOURCE_001"

    # Resolution errors
    PATH_RESOLUTION_ERROR = "RESOLUTION_001"


class TableDefError(Exception):
    """Base exception for all hive-tabledef errors.

    Attributes:
        message: Error message
        error_code: Error code from ErrorCode enum
        details: Additional error details
        cause: Optional underlying exception
    """

    default_code: ErrorCode = ErrorCode.VALIDATION_ERROR

    def __init__(
        self,
        message: str,
        error_code: Optional[ErrorCode] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        """Initialize the error.

        Args:
            message: Error message
            error_code: Error code from ErrorCode enum, defaults to the
                class's own code
            details: Additional error details
            cause: Optional underlying exception
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.default_code
        self.details = details or {}
        self.cause = cause

        # Lazy import to avoid circular dependency
        from tabledef.logging import get_logger
        logger = get_logger(__name__)
        logger.error(
            message,
            extra={"error_code": self.error_code.value, "details": self.details},
            exc_info=cause,
        )

    def __str__(self) -> str:
        """String representation of the error."""
        msg = f"[{self.error_code.value}] {self.message}"
        if self.cause:
            msg = f"{msg} (caused by: {type(self.cause).__name__}: {str(self.cause)})"
        return msg

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code.value,
            "error_name": self.error_code.name,
            "details": self.details,
        }


class ArgumentError(TableDefError, ValueError):
    """Invalid request shape, e.g. an override for a column that does not exist."""

    default_code = ErrorCode.INVALID_ARGUMENT


class DelimiterRangeError(ArgumentError):
    """A delimiter code outside the range Hive can express."""

    default_code = ErrorCode.DELIMITER_OUT_OF_RANGE


class UnsupportedTypeError(TableDefError, OSError):
    """A source column type with no Hive mapping, explicit or inferred."""

    default_code = ErrorCode.UNSUPPORTED_TYPE


class ResolutionError(TableDefError, OSError):
    """The path qualifier failed to resolve a location."""

    default_code = ErrorCode.PATH_RESOLUTION_ERROR


class ResourceNotFoundError(TableDefError, LookupError):
    """A table or query unknown to the schema describer."""

    default_code = ErrorCode.RESOURCE_NOT_FOUND


# Helper functions for common error scenarios
def argument_error(
    message: str,
    field: Optional[str] = None,
    value: Any = None,
    error_code: ErrorCode = ErrorCode.INVALID_ARGUMENT,
    **kwargs
) -> ArgumentError:
    """Create an argument error.

    Args:
        message: Error message
        field: Field or column that failed validation
        value: Invalid value
        error_code: Specific validation code
        **kwargs: Additional error details

    Returns:
        ArgumentError carrying the given code
    """
    details = kwargs.pop("details", {})
    if field:
        details["field"] = field
    if value is not None:
        details["value"] = str(value)
    return ArgumentError(message=message, error_code=error_code, details=details, **kwargs)


def unknown_column_error(column: str, **kwargs) -> ArgumentError:
    """Create an error for a type override naming a column that is not imported."""
    return argument_error(
        f"No column by the name {column} found while importing data",
        field="map_column_hive",
        value=column,
        error_code=ErrorCode.UNKNOWN_COLUMN,
        **kwargs
    )


def partition_collision_error(column: str, **kwargs) -> ArgumentError:
    """Create an error for a partition key that is also an imported column."""
    return argument_error(
        f"Partition key {column} cannot be a column to import.",
        field="partition_key",
        value=column,
        error_code=ErrorCode.PARTITION_COLLISION,
        **kwargs
    )


def delimiter_range_error(code: int, **kwargs) -> DelimiterRangeError:
    """Create an error for a delimiter Hive cannot express.

    Args:
        code: Offending character code
        **kwargs: Additional error details

    Returns:
        DelimiterRangeError naming the value
    """
    details = kwargs.pop("details", {})
    details["value"] = code
    return DelimiterRangeError(
        message=f"Character {code} is an out-of-range delimiter",
        details=details,
        **kwargs
    )


def unsupported_type_error(
    column: str,
    sql_type: Optional[int] = None,
    **kwargs
) -> UnsupportedTypeError:
    """Create an error for a column whose SQL type has no Hive mapping.

    Args:
        column: Column name
        sql_type: Source type code, if known
        **kwargs: Additional error details

    Returns:
        UnsupportedTypeError naming the column
    """
    details = kwargs.pop("details", {})
    details["column"] = column
    if sql_type is not None:
        details["sql_type"] = sql_type
    return UnsupportedTypeError(
        message=f"Hive does not support the SQL type for column {column}",
        details=details,
        **kwargs
    )


def resolution_error(
    path: str,
    original_error: Exception,
    **kwargs
) -> ResolutionError:
    """Create a path resolution error.

    Args:
        path: Unqualified path handed to the qualifier
        original_error: The underlying exception

    Returns:
        ResolutionError with the qualifier's failure as cause
    """
    details = kwargs.pop("details", {})
    details["path"] = path
    return ResolutionError(
        message=f"Failed to qualify path {path}: {str(original_error)}",
        details=details,
        cause=original_error,
        **kwargs
    )


def resource_not_found_error(
    message: str,
    resource_type: Optional[str] = None,
    resource_name: Optional[str] = None,
    **kwargs
) -> ResourceNotFoundError:
    """Create a resource not found error.

    Args:
        message: Error message
        resource_type: Type of resource (table, query)
        resource_name: Name of the missing resource

    Returns:
        ResourceNotFoundError with RESOURCE_NOT_FOUND code
    """
    details = kwargs.pop("details", {})
    if resource_type:
        details["resource_type"] = resource_type
    if resource_name:
        details["resource_name"] = resource_name
    return ResourceNotFoundError(message=message, details=details, **kwargs)
