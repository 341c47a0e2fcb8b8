"""Protocols for the collaborators the statement builders depend on.

The builders never connect to a database or filesystem themselves; these
interfaces describe what the caller hands in.
"""

from typing import Any, Dict, List, Optional, Protocol, runtime_checkable


@runtime_checkable
class SchemaDescriber(Protocol):
    """Describes the columns of a source table or query.

    Implementations usually wrap a database connection. The connection must
    be usable when handed in; refreshing a stale connection is the caller's
    responsibility.
    """

    def get_column_names(self, table_name: str) -> List[str]:
        """Return the column names of a table, in source order."""
        ...

    def get_column_names_for_query(self, query: str) -> List[str]:
        """Return the column names produced by a query, in order."""
        ...

    def get_column_types(self, table_name: str) -> Dict[str, int]:
        """Return the SQL type code of every column of a table."""
        ...

    def get_column_types_for_query(self, query: str) -> Dict[str, int]:
        """Return the SQL type code of every column produced by a query."""
        ...

    def to_hive_type(self, table_name: Optional[str], column_name: str, sql_type: Optional[int]) -> Optional[str]:
        """Map a column's SQL type to a Hive type.

        Args:
            table_name: Source table, None for query imports
            column_name: Column being mapped
            sql_type: Source type code

        Returns:
            Hive type string, or None when Hive has no mapping
        """
        ...

    def is_hive_type_improvised(self, sql_type: Optional[int]) -> bool:
        """Return True when the Hive type is a less precise stand-in."""
        ...


@runtime_checkable
class PathQualifier(Protocol):
    """Qualifies a path with the scheme and authority of the active filesystem."""

    def qualify(self, path: str) -> str:
        """Return the fully qualified form of ``path``.

        Raises:
            OSError: If the filesystem cannot be resolved
        """
        ...


@runtime_checkable
class DiagnosticSink(Protocol):
    """Receives non-fatal diagnostics. Any ``logging.Logger`` qualifies."""

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        ...

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        ...
