"""Unit tests for the exception hierarchy."""

import logging

import pytest

from tabledef.common.exceptions import (
    ArgumentError,
    DelimiterRangeError,
    ErrorCode,
    ResolutionError,
    ResourceNotFoundError,
    TableDefError,
    UnsupportedTypeError,
    partition_collision_error,
    resolution_error,
    resource_not_found_error,
    unknown_column_error,
    unsupported_type_error,
)


class TestTableDefError:
    """Test the base error."""

    def test_str_includes_code(self):
        error = TableDefError("something broke", error_code=ErrorCode.VALIDATION_ERROR)

        assert str(error) == "[VALIDATION_001] something broke"

    def test_str_includes_cause(self):
        error = TableDefError("wrapped", cause=KeyError("k"))

        assert "(caused by: KeyError" in str(error)

    def test_to_dict(self):
        error = unsupported_type_error("payload", 2004)

        assert error.to_dict() == {
            "type": "UnsupportedTypeError",
            "message": "Hive does not support the SQL type for column payload",
            "error_code": "TYPE_001",
            "error_name": "UNSUPPORTED_TYPE",
            "details": {"column": "payload", "sql_type": 2004},
        }

    def test_error_is_logged(self, caplog):
        with caplog.at_level(logging.ERROR, logger="tabledef.common.exceptions"):
            unknown_column_error("missing")

        record = caplog.records[-1]
        assert record.getMessage() == "No column by the name missing found while importing data"
        assert record.error_code == "VALIDATION_003"


class TestTypedErrors:
    """Test that typed errors are catchable as builtins."""

    def test_argument_errors_are_value_errors(self):
        assert isinstance(partition_collision_error("dt"), ValueError)
        assert issubclass(DelimiterRangeError, ArgumentError)

    def test_io_class_errors(self):
        assert isinstance(unsupported_type_error("c"), OSError)
        assert isinstance(resolution_error("/p", OSError("x")), OSError)

    def test_resolution_error_keeps_cause(self):
        cause = OSError("unreachable")

        error = resolution_error("/warehouse/t1", cause)

        assert isinstance(error, ResolutionError)
        assert error.cause is cause
        assert error.details == {"path": "/warehouse/t1"}

    def test_resource_not_found_is_lookup_error(self):
        error = resource_not_found_error("gone", resource_type="table", resource_name="t")

        assert isinstance(error, ResourceNotFoundError)
        assert isinstance(error, LookupError)
        assert error.details == {"resource_type": "table", "resource_name": "t"}

    def test_raise_and_catch_as_base(self):
        with pytest.raises(TableDefError):
            raise partition_collision_error("dt")
