"""CREATE TABLE statement for an imported table."""

from datetime import datetime
from typing import Callable, Iterable, Optional, Sequence

from tabledef.common.exceptions import partition_collision_error, unknown_column_error
from tabledef.constants import (
    HIVE_TEXT_OUTPUT_FORMAT,
    LZO_INPUT_FORMAT,
    PARTITION_COLUMN_TYPE,
    CreateClause,
)
from tabledef.hive.codecs import is_lzop_codec
from tabledef.hive.delimiters import encode_delimiter
from tabledef.protocols import DiagnosticSink
from tabledef.query_builder.base import BaseStatementBuilder
from tabledef.settings import TableDefSettings
from tabledef.types import ResolvedColumn, TableSpec
from tabledef.utils.datetime import format_comment_timestamp


class CreateTableStatementBuilder(BaseStatementBuilder):
    """Builds the Hive CREATE TABLE statement for an import.

    The statement declares the imported columns in source order, the
    optional partition column, the row format with octal-escaped
    delimiters, the storage format and, for external tables, the location.

    Example:
        >>> builder = CreateTableStatementBuilder()
        >>> builder.build(spec, columns)
        "CREATE TABLE IF NOT EXISTS `out` ( `id` INT, `name` STRING) ROW FORMAT ..."
    """

    def __init__(
        self,
        sink: Optional[DiagnosticSink] = None,
        settings: Optional[TableDefSettings] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """Initialize the builder.

        Args:
            sink: Receiver of warnings and debug output
            settings: Settings to use, defaults to the process-wide instance
            clock: Returns the creation time stamped into the comment
        """
        super().__init__(sink=sink, settings=settings)
        self.clock = clock

    def validate(self, spec: TableSpec, column_names: Iterable[str]) -> None:
        """Check the requested columns against the import options.

        Args:
            spec: Import options
            column_names: Names of the columns being imported

        Raises:
            ArgumentError: If a type override names a column that is not
                imported, or the partition key is an imported column
        """
        names = list(column_names)
        for column in spec.map_column_hive:
            if column not in names:
                raise unknown_column_error(column)

        if spec.partition_key is not None and spec.partition_key in names:
            raise partition_collision_error(spec.partition_key)

    def build(self, spec: TableSpec, columns: Sequence[ResolvedColumn]) -> str:
        """Build the CREATE TABLE statement.

        Args:
            spec: Import options
            columns: Resolved columns, in the order they are declared

        Returns:
            The complete statement

        Raises:
            ArgumentError: If validation fails
            DelimiterRangeError: If a delimiter cannot be escaped for Hive
        """
        self.validate(spec, (column.name for column in columns))

        clause = CreateClause.select(spec.fail_if_exists, spec.is_external).value
        column_list = ", ".join(self._column_definition(column) for column in columns)

        sql = f"{clause} {self.table_name(spec)} ( {column_list}) "

        if spec.comments_enabled:
            sql += f"COMMENT {self.quote_string(self._comment())} "

        if spec.partition_key is not None:
            sql += f"PARTITIONED BY ({spec.partition_key} {PARTITION_COLUMN_TYPE}) "

        sql += (
            "ROW FORMAT DELIMITED"
            f" FIELDS TERMINATED BY '{encode_delimiter(spec.field_delimiter)}'"
            f" LINES TERMINATED BY '{encode_delimiter(spec.record_delimiter)}'"
        )

        if is_lzop_codec(spec.compression_codec):
            sql += (
                f" STORED AS INPUTFORMAT {self.quote_string(LZO_INPUT_FORMAT)}"
                f" OUTPUTFORMAT {self.quote_string(HIVE_TEXT_OUTPUT_FORMAT)}"
            )
        else:
            sql += " STORED AS TEXTFILE"

        if spec.is_external:
            sql += f" LOCATION {self.quote_string(spec.external_table_dir)}"

        self.sink.debug("Create statement: %s", sql)
        return sql

    def _column_definition(self, column: ResolvedColumn) -> str:
        if column.was_approximated:
            self.sink.warning(
                "Column %s had to be cast to a less precise type in Hive", column.name
            )
        return f"{self.quote_identifier(column.name)} {column.hive_type}"

    def _comment(self) -> str:
        moment = self.clock() if self.clock is not None else None
        timestamp = format_comment_timestamp(moment, self.settings.timezone_info)
        return f"Imported by {self.settings.import_tool_name} on {timestamp}"
