"""In-memory schema describer.

This module provides StaticSchemaDescriber, which implements the
SchemaDescriber protocol from column maps supplied up front. It is useful
when the schema is already known (exported metadata, tests) and no live
connection is available.
"""

from typing import Dict, List, Mapping, Optional

from tabledef.common.exceptions import resource_not_found_error
from tabledef.hive.types import HiveTypeDescriber


class StaticSchemaDescriber(HiveTypeDescriber):
    """Schema describer backed by fixed column maps.

    Column maps are ordered ``{column_name: sql_type}`` mappings; their
    order is the column order reported to the builders. Type mapping falls
    back on the default Hive type table.

    Attributes:
        tables: Table name -> column map
        queries: Query text -> column map
    """

    def __init__(
        self,
        tables: Optional[Mapping[str, Mapping[str, int]]] = None,
        queries: Optional[Mapping[str, Mapping[str, int]]] = None,
    ):
        """Initialize the describer.

        Args:
            tables: Column maps keyed by table name
            queries: Column maps keyed by query text
        """
        self.tables: Dict[str, Dict[str, int]] = {
            name: dict(columns) for name, columns in (tables or {}).items()
        }
        self.queries: Dict[str, Dict[str, int]] = {
            query: dict(columns) for query, columns in (queries or {}).items()
        }

    def _table(self, table_name: str) -> Dict[str, int]:
        try:
            return self.tables[table_name]
        except KeyError as e:
            raise resource_not_found_error(
                f"Table {table_name} is not described",
                resource_type="table",
                resource_name=table_name,
            ) from e

    def _query(self, query: str) -> Dict[str, int]:
        try:
            return self.queries[query]
        except KeyError as e:
            raise resource_not_found_error(
                "Query is not described",
                resource_type="query",
                resource_name=query,
            ) from e

    def get_column_names(self, table_name: str) -> List[str]:
        return list(self._table(table_name))

    def get_column_names_for_query(self, query: str) -> List[str]:
        return list(self._query(query))

    def get_column_types(self, table_name: str) -> Dict[str, int]:
        return dict(self._table(table_name))

    def get_column_types_for_query(self, query: str) -> Dict[str, int]:
        return dict(self._query(query))
