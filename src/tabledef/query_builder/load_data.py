"""LOAD DATA statement moving imported files into the Hive table."""

from tabledef.query_builder.base import BaseStatementBuilder
from tabledef.types import TableSpec


class LoadDataStatementBuilder(BaseStatementBuilder):
    """Builds the Hive LOAD DATA statement for an import."""

    def build(self, spec: TableSpec, final_path: str) -> str:
        """Build the LOAD DATA statement.

        Args:
            spec: Import options
            final_path: Qualified location of the imported files

        Returns:
            The complete statement
        """
        sql = f"LOAD DATA INPATH {self.quote_string(final_path)}"
        if spec.overwrite:
            sql += " OVERWRITE"
        sql += f" INTO TABLE {self.table_name(spec)}"

        if spec.partition_key is not None and spec.partition_value is not None:
            sql += f" PARTITION ({spec.partition_key}={self.quote_string(spec.partition_value)})"

        self.sink.debug("Load statement: %s", sql)
        return sql
