"""Default mapping from SQL type codes to Hive types."""

from typing import Dict, FrozenSet, Optional

from tabledef.constants import SqlType


HIVE_TYPES: Dict[int, str] = {
    SqlType.INTEGER: "INT",
    SqlType.SMALLINT: "INT",
    SqlType.VARCHAR: "STRING",
    SqlType.CHAR: "STRING",
    SqlType.LONGVARCHAR: "STRING",
    SqlType.NVARCHAR: "STRING",
    SqlType.NCHAR: "STRING",
    SqlType.LONGNVARCHAR: "STRING",
    SqlType.DATE: "STRING",
    SqlType.TIME: "STRING",
    SqlType.TIMESTAMP: "STRING",
    SqlType.CLOB: "STRING",
    SqlType.NUMERIC: "DOUBLE",
    SqlType.DECIMAL: "DOUBLE",
    SqlType.FLOAT: "DOUBLE",
    SqlType.DOUBLE: "DOUBLE",
    SqlType.REAL: "DOUBLE",
    SqlType.BIT: "BOOLEAN",
    SqlType.BOOLEAN: "BOOLEAN",
    SqlType.TINYINT: "TINYINT",
    SqlType.BIGINT: "BIGINT",
}

# Types Hive can only hold in a less precise form.
IMPROVISED_TYPES: FrozenSet[int] = frozenset({
    SqlType.DATE,
    SqlType.TIME,
    SqlType.TIMESTAMP,
    SqlType.DECIMAL,
    SqlType.NUMERIC,
})


def to_hive_type(sql_type: Optional[int]) -> Optional[str]:
    """Return the Hive type for a SQL type code, or None if Hive has none."""
    if sql_type is None:
        return None
    return HIVE_TYPES.get(sql_type)


def is_hive_type_improvised(sql_type: Optional[int]) -> bool:
    """Return True if ``sql_type`` maps to a less precise Hive type."""
    return sql_type in IMPROVISED_TYPES


class HiveTypeDescriber:
    """Mixin implementing the type half of ``SchemaDescriber``.

    Schema describers that have no source-specific type rules inherit this
    to fall back on the default table.
    """

    def to_hive_type(self, table_name: Optional[str], column_name: str, sql_type: Optional[int]) -> Optional[str]:
        return to_hive_type(sql_type)

    def is_hive_type_improvised(self, sql_type: Optional[int]) -> bool:
        return is_hive_type_improvised(sql_type)
