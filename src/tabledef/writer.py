"""Table definition writer.

After the source data has been imported into the warehouse directory, it
is registered in Hive with the CREATE TABLE and LOAD DATA INPATH
statements generated here. TableDefWriter ties the collaborators together:
it asks the schema describer for the columns, resolves their Hive types
and hands the result to the statement builders.
"""

from typing import Dict, List, Optional

from tabledef.hive.paths import resolve_final_path
from tabledef.hive.type_mapper import TypeMapper
from tabledef.protocols import DiagnosticSink, PathQualifier, SchemaDescriber
from tabledef.query_builder import CreateTableStatementBuilder, LoadDataStatementBuilder
from tabledef.settings import TableDefSettings, get_settings
from tabledef.types import ResolvedColumn, TableSpec


class TableDefWriter:
    """Generates the Hive statements for one import.

    The describer must hold a usable connection when handed in; the writer
    does not refresh it.

    Args:
        spec: Import options
        describer: Source schema lookups
        qualifier: Filesystem path qualification
        sink: Receiver of warnings and debug output
        settings: Settings to use, defaults to the process-wide instance
    """

    def __init__(
        self,
        spec: TableSpec,
        describer: SchemaDescriber,
        qualifier: PathQualifier,
        sink: Optional[DiagnosticSink] = None,
        settings: Optional[TableDefSettings] = None,
        create_builder: Optional[CreateTableStatementBuilder] = None,
        load_builder: Optional[LoadDataStatementBuilder] = None,
    ):
        self.spec = spec
        self.describer = describer
        self.qualifier = qualifier
        self.settings = settings if settings is not None else get_settings()
        self.create_builder = create_builder or CreateTableStatementBuilder(sink=sink, settings=self.settings)
        self.load_builder = load_builder or LoadDataStatementBuilder(sink=sink, settings=self.settings)

    def get_column_names(self) -> List[str]:
        """Get the column names to import.

        An explicit column list in the TableSpec wins; otherwise the columns of
        the source table or query are used.
        """
        if self.spec.columns is not None:
            return list(self.spec.columns)
        if self.spec.table_name is not None:
            return self.describer.get_column_names(self.spec.table_name)
        return self.describer.get_column_names_for_query(self.spec.sql_query)

    def get_column_types(self) -> Dict[str, int]:
        if self.spec.table_name is not None:
            return self.describer.get_column_types(self.spec.table_name)
        return self.describer.get_column_types_for_query(self.spec.sql_query)

    def resolve_columns(self) -> List[ResolvedColumn]:
        """Resolve the Hive type of every imported column.

        Raises:
            ArgumentError: If an override names an unknown column or the
                partition key is an imported column
            UnsupportedTypeError: If a column type has no Hive mapping
        """
        column_types = self.get_column_types()
        column_names = self.get_column_names()

        self.create_builder.validate(self.spec, column_names)

        mapper = TypeMapper(self.describer, self.spec.table_name, self.spec.map_column_hive)
        return [mapper.resolve_column(name, column_types.get(name)) for name in column_names]

    def get_create_table_stmt(self) -> str:
        """Return the CREATE TABLE statement for the table to load into Hive."""
        return self.create_builder.build(self.spec, self.resolve_columns())

    def get_final_path(self) -> str:
        """Return the qualified location of the imported data.

        Raises:
            ResolutionError: If the path qualifier fails
        """
        return resolve_final_path(
            self.spec.warehouse_dir,
            self.spec.target_dir,
            self.spec.table_name,
            self.qualifier,
            separator=self.settings.path_separator,
        )

    def get_load_data_stmt(self) -> str:
        """Return the LOAD DATA statement to move the imported data into Hive."""
        return self.load_builder.build(self.spec, self.get_final_path())
