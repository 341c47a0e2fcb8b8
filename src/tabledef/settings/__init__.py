"""Settings for hive-tabledef, built on Pydantic Settings.

Configuration Sources (precedence order):
    1. Environment Variables with the ``TABLEDEF_`` prefix (highest priority)
    2. A ``.env`` file in the working directory
    3. Default values in code (lowest priority)

Quick Start:
    >>> from tabledef.settings import get_settings
    >>> settings = get_settings()
    >>> settings.import_tool_name
    'sqoop'
"""

from .base import TableDefSettings
from .main import get_settings, _reload_settings

__all__ = [
    "TableDefSettings",
    "get_settings",
]
