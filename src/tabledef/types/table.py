"""Import options and resolved column types."""

from typing import Any, Dict, List, Optional, Union

from pydantic import Field, field_validator, model_validator

from tabledef.constants import CODECS, DEFAULT_FIELD_DELIMITER, DEFAULT_RECORD_DELIMITER
from tabledef.types.base import TableDefBaseModel


class TableSpec(TableDefBaseModel):
    """Options describing one table import.

    The input is either a concrete source table (``table_name``) or a
    free-form query (``sql_query``), never both. Delimiters may be given
    as a character code or as a single character.

    Attributes:
        table_name: Source table to import
        sql_query: Free-form source query to import
        columns: Explicit subset of columns to import, in order
        output_table_name: Hive table to create, defaults to ``table_name``
        database_name: Optional Hive database qualifying the table
        partition_key: Storage-level partition column
        partition_value: Value bound to the partition key at load time
        external_table_dir: Location of an external table
        field_delimiter: Output field delimiter code
        record_delimiter: Output record delimiter code
        compression_codec: Codec short name or class name used for the data files
        fail_if_exists: Fail instead of skipping when the table exists
        overwrite: Replace existing table data on load
        comments_enabled: Stamp the table with a creation comment
        map_column_hive: Explicit Hive type per column name
        warehouse_dir: Parent directory of the imported data
        target_dir: Directory of the imported data, relative to ``warehouse_dir``
    """
    table_name: Optional[str] = Field(default=None, min_length=1)
    sql_query: Optional[str] = Field(default=None, min_length=1)
    columns: Optional[List[str]] = Field(default=None)
    output_table_name: Optional[str] = Field(default=None, min_length=1)
    database_name: Optional[str] = Field(default=None, min_length=1)

    partition_key: Optional[str] = Field(default=None, min_length=1)
    partition_value: Optional[str] = Field(default=None)
    external_table_dir: Optional[str] = Field(default=None)

    field_delimiter: int = Field(default=DEFAULT_FIELD_DELIMITER)
    record_delimiter: int = Field(default=DEFAULT_RECORD_DELIMITER)
    compression_codec: Optional[str] = Field(default=None)

    fail_if_exists: bool = Field(default=False)
    overwrite: bool = Field(default=False)
    comments_enabled: bool = Field(default=True)

    map_column_hive: Dict[str, str] = Field(default_factory=dict)

    warehouse_dir: Optional[str] = Field(default=None)
    target_dir: Optional[str] = Field(default=None)

    @field_validator("field_delimiter", "record_delimiter", mode="before")
    @classmethod
    def coerce_delimiter(cls, v: Union[int, str], info) -> int:
        """Accept a single character in place of its code."""
        if isinstance(v, str):
            if len(v) != 1:
                raise ValueError(f"{info.field_name} must be a single character, got {v!r}")
            return ord(v)
        return v

    @field_validator("external_table_dir")
    @classmethod
    def blank_location_is_unset(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        return v

    @field_validator("compression_codec")
    @classmethod
    def validate_codec(cls, v: Optional[str]) -> Optional[str]:
        """Short codec names must be known; class names pass through."""
        if v is None or "." in v:
            return v
        if v.lower() not in CODECS:
            raise ValueError(f"Unknown compression codec: {v}")
        return v

    @field_validator("map_column_hive")
    @classmethod
    def validate_type_overrides(cls, v: Dict[str, str]) -> Dict[str, str]:
        for column, hive_type in v.items():
            if not hive_type or not hive_type.strip():
                raise ValueError(f"Empty Hive type given for column '{column}'")
        return v

    @model_validator(mode="before")
    @classmethod
    def default_output_table(cls, data: Any) -> Any:
        """Name the Hive table after the source table unless told otherwise."""
        if isinstance(data, dict) and not data.get("output_table_name") and data.get("table_name"):
            data = {**data, "output_table_name": data["table_name"]}
        return data

    @model_validator(mode="after")
    def validate_input_source(self) -> "TableSpec":
        if (self.table_name is None) == (self.sql_query is None):
            raise ValueError("Exactly one of table_name or sql_query must be set")
        if self.output_table_name is None:
            raise ValueError("output_table_name is required when importing from a query")
        if self.sql_query is not None and self.target_dir is None:
            raise ValueError("target_dir is required when importing from a query")
        if self.partition_value is not None and self.partition_key is None:
            raise ValueError("partition_value requires a partition_key")
        return self

    @property
    def is_external(self) -> bool:
        return self.external_table_dir is not None


class ResolvedColumn(TableDefBaseModel):
    """A source column with its Hive type resolved.

    Attributes:
        name: Column name as reported by the source
        source_type: Source SQL type code, None when the source reported none
        hive_type: Hive type emitted in the column list
        was_approximated: True when Hive has no exact equivalent for the source type
    """
    name: str = Field(..., min_length=1)
    source_type: Optional[int] = Field(default=None)
    hive_type: str = Field(..., min_length=1)
    was_approximated: bool = Field(default=False)


class TableDefinition(TableDefBaseModel):
    """The generated statements for one import."""
    create_statement: str
    load_statement: str
    final_path: str
    columns: List[ResolvedColumn] = Field(default_factory=list)
