"""Public entry point for generating a table definition."""

from typing import Optional

from tabledef.fs import HadoopPathQualifier
from tabledef.logging.filters import import_context
from tabledef.protocols import DiagnosticSink, PathQualifier, SchemaDescriber
from tabledef.settings import TableDefSettings, get_settings
from tabledef.types import TableDefinition, TableSpec
from tabledef.writer import TableDefWriter


def generate_table_definition(
    spec: TableSpec,
    describer: SchemaDescriber,
    qualifier: Optional[PathQualifier] = None,
    sink: Optional[DiagnosticSink] = None,
    settings: Optional[TableDefSettings] = None,
) -> TableDefinition:
    """Generate the CREATE TABLE and LOAD DATA statements for an import.

    Args:
        spec: Import options
        describer: Source schema lookups
        qualifier: Path qualification, defaults to a HadoopPathQualifier
            built from the configured default filesystem
        sink: Receiver of warnings and debug output
        settings: Settings to use, defaults to the process-wide instance

    Returns:
        TableDefinition with both statements, the load path and the
        resolved columns

    Raises:
        ArgumentError: If the request is invalid
        UnsupportedTypeError: If a column type has no Hive mapping
        ResolutionError: If the load path cannot be qualified

    Example:
        >>> describer = StaticSchemaDescriber(tables={"orders": {"id": SqlType.INTEGER}})
        >>> definition = generate_table_definition(TableSpec(table_name="orders"), describer)
        >>> definition.load_statement
        "LOAD DATA INPATH 'file:/orders' INTO TABLE `orders`"
    """
    settings = settings if settings is not None else get_settings()
    if qualifier is None:
        qualifier = HadoopPathQualifier(settings.default_fs, settings.working_dir)

    writer = TableDefWriter(spec, describer, qualifier, sink=sink, settings=settings)
    with import_context(hive_table=spec.output_table_name):
        columns = writer.resolve_columns()
        final_path = writer.get_final_path()

        return TableDefinition(
            create_statement=writer.create_builder.build(spec, columns),
            load_statement=writer.load_builder.build(spec, final_path),
            final_path=final_path,
            columns=columns,
        )
