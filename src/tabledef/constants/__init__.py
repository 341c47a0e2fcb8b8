"""Constants module for hive-tabledef.

Organization:
    - sql: source-side JDBC type codes
    - hive: Hive DDL literals, delimiter limits and the codec registry
"""

from tabledef.constants.sql import SqlType
from tabledef.constants.hive import (
    CODECS,
    COMMENT_DATE_FORMAT,
    DEFAULT_FIELD_DELIMITER,
    DEFAULT_RECORD_DELIMITER,
    HIVE_TEXT_OUTPUT_FORMAT,
    LZO_INPUT_FORMAT,
    LZOP_CODEC,
    MAX_DELIMITER_CODE,
    MIN_DELIMITER_CODE,
    PARTITION_COLUMN_TYPE,
    CreateClause,
)

__all__ = [
    "SqlType",
    "CreateClause",
    "CODECS",
    "COMMENT_DATE_FORMAT",
    "DEFAULT_FIELD_DELIMITER",
    "DEFAULT_RECORD_DELIMITER",
    "HIVE_TEXT_OUTPUT_FORMAT",
    "LZO_INPUT_FORMAT",
    "LZOP_CODEC",
    "MAX_DELIMITER_CODE",
    "MIN_DELIMITER_CODE",
    "PARTITION_COLUMN_TYPE",
]
