"""Logging filters for context injection.

Every record emitted while a table definition is generated is stamped with
the import it belongs to and the Hive table being defined.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

from tabledef.__version__ import __version__

SDK_NAME = "hive-tabledef"

import_id_var: ContextVar[Optional[str]] = ContextVar("import_id", default=None)
hive_table_var: ContextVar[Optional[str]] = ContextVar("hive_table", default=None)


class ContextFilter(logging.Filter):
    """Stamp records with the current import context and the SDK version."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.import_id = import_id_var.get()
        record.hive_table = hive_table_var.get()
        record.sdk_name = SDK_NAME
        record.sdk_version = __version__
        return True


def set_import_context(
    import_id: Optional[str] = None,
    hive_table: Optional[str] = None,
) -> None:
    """Set import context variables; None leaves a value unchanged."""
    if import_id is not None:
        import_id_var.set(import_id)
    if hive_table is not None:
        hive_table_var.set(hive_table)


def clear_import_context() -> None:
    import_id_var.set(None)
    hive_table_var.set(None)


@contextmanager
def import_context(
    import_id: Optional[str] = None,
    hive_table: Optional[str] = None,
) -> Iterator[None]:
    """Scope the import context to a block, restoring the previous values on exit.

    Example:
        >>> with import_context(hive_table="orders"):
        ...     generate()
    """
    tokens = []
    if import_id is not None:
        tokens.append((import_id_var, import_id_var.set(import_id)))
    if hive_table is not None:
        tokens.append((hive_table_var, hive_table_var.set(hive_table)))
    try:
        yield
    finally:
        for var, token in reversed(tokens):
            var.reset(token)
