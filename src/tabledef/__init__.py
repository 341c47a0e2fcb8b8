from tabledef.__version__ import __version__

from tabledef.api import generate_table_definition
from tabledef.writer import TableDefWriter
from tabledef.types import ResolvedColumn, TableDefinition, TableSpec
from tabledef.constants import SqlType
from tabledef.hive import encode_delimiter, resolve_final_path, TypeMapper
from tabledef.query_builder import CreateTableStatementBuilder, LoadDataStatementBuilder
from tabledef.schema import StaticSchemaDescriber
from tabledef.fs import HadoopPathQualifier

from tabledef.common.exceptions import (
    TableDefError,
    ErrorCode,
    ArgumentError,
    DelimiterRangeError,
    UnsupportedTypeError,
    ResolutionError,
)

__all__ = [
    "__version__",

    "generate_table_definition",
    "TableDefWriter",
    "TableSpec",
    "ResolvedColumn",
    "TableDefinition",
    "SqlType",

    # Components
    "encode_delimiter",
    "resolve_final_path",
    "TypeMapper",
    "CreateTableStatementBuilder",
    "LoadDataStatementBuilder",

    # Bundled collaborators
    "StaticSchemaDescriber",
    "HadoopPathQualifier",

    # Exceptions (public API)
    "TableDefError",
    "ErrorCode",
    "ArgumentError",
    "DelimiterRangeError",
    "UnsupportedTypeError",
    "ResolutionError",
]
