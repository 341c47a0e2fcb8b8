"""Column type resolution."""

from typing import Mapping, Optional, Tuple

from tabledef.common.exceptions import unsupported_type_error
from tabledef.protocols import SchemaDescriber
from tabledef.types import ResolvedColumn


class TypeMapper:
    """Resolves source columns to Hive types.

    An explicit override for a column always wins and is never reported as
    an approximation. Otherwise the schema describer decides both the Hive
    type and whether that type is a less precise stand-in.

    Args:
        describer: Schema describer that knows the SQL-to-Hive type table
        table_name: Source table, None for query imports
        overrides: Column name -> explicit Hive type
    """

    def __init__(
        self,
        describer: SchemaDescriber,
        table_name: Optional[str] = None,
        overrides: Optional[Mapping[str, str]] = None,
    ):
        self.describer = describer
        self.table_name = table_name
        self.overrides = dict(overrides or {})

    def resolve(self, column_name: str, sql_type: Optional[int]) -> Tuple[str, bool]:
        """Resolve one column.

        Args:
            column_name: Column to resolve
            sql_type: Source type code reported for the column

        Returns:
            Tuple of (Hive type, was approximated)

        Raises:
            UnsupportedTypeError: If no override exists and the describer
                has no mapping for the type
        """
        override = self.overrides.get(column_name)
        if override is not None:
            return override, False

        hive_type = self.describer.to_hive_type(self.table_name, column_name, sql_type)
        if not hive_type:
            raise unsupported_type_error(column_name, sql_type)

        return hive_type, bool(self.describer.is_hive_type_improvised(sql_type))

    def resolve_column(self, column_name: str, sql_type: Optional[int]) -> ResolvedColumn:
        hive_type, approximated = self.resolve(column_name, sql_type)
        return ResolvedColumn(
            name=column_name,
            source_type=sql_type,
            hive_type=hive_type,
            was_approximated=approximated,
        )
