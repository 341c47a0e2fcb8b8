import pytest
from unittest.mock import Mock

from tabledef.settings import TableDefSettings


@pytest.fixture
def settings():
    """Settings pinned to the defaults regardless of the environment."""
    return TableDefSettings(
        log_level="INFO",
        import_tool_name="sqoop",
        comment_time_zone="UTC",
        default_fs=None,
        working_dir="/",
        path_separator="/",
    )


@pytest.fixture
def sink():
    """Diagnostic sink recording warnings and debug output."""
    return Mock()
