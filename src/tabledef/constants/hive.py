"""Hive dialect constants.

Literal fragments of the Hive DDL emitted by the statement builders, the
delimiter limits, and the Hadoop compression codec registry.
"""

from enum import Enum
from typing import Dict, Optional


class CreateClause(str, Enum):
    """Opening phrase of a CREATE TABLE statement.

    Selected by two independent flags: fail-if-exists and whether an
    external location is configured.
    """

    CREATE = "CREATE TABLE"
    CREATE_IF_NOT_EXISTS = "CREATE TABLE IF NOT EXISTS"
    CREATE_EXTERNAL = "CREATE EXTERNAL TABLE"
    CREATE_EXTERNAL_IF_NOT_EXISTS = "CREATE EXTERNAL TABLE IF NOT EXISTS"

    @classmethod
    def select(cls, fail_if_exists: bool, external: bool) -> "CreateClause":
        if fail_if_exists:
            return cls.CREATE_EXTERNAL if external else cls.CREATE
        return cls.CREATE_EXTERNAL_IF_NOT_EXISTS if external else cls.CREATE_IF_NOT_EXISTS


# Delimiters are written as '\ooo' with ooo in [000, 177].
MAX_DELIMITER_CODE = 0o177
MIN_DELIMITER_CODE = 0

# Hive's own defaults: Ctrl-A between fields, newline between records.
DEFAULT_FIELD_DELIMITER = 0o001
DEFAULT_RECORD_DELIMITER = ord("\n")

COMMENT_DATE_FORMAT = "%Y/%m/%d %H:%M:%S"

PARTITION_COLUMN_TYPE = "STRING"

LZO_INPUT_FORMAT = "com.hadoop.mapred.DeprecatedLzoTextInputFormat"
HIVE_TEXT_OUTPUT_FORMAT = "org.apache.hadoop.hive.ql.io.HiveIgnoreKeyTextOutputFormat"


# Short codec names accepted on the command line -> Hadoop codec classes.
LZOP_CODEC = "lzop"

CODECS: Dict[str, Optional[str]] = {
    "none": None,
    "deflate": "org.apache.hadoop.io.compress.DefaultCodec",
    "default": "org.apache.hadoop.io.compress.DefaultCodec",
    "gzip": "org.apache.hadoop.io.compress.GzipCodec",
    "bzip2": "org.apache.hadoop.io.compress.BZip2Codec",
    "lzo": "com.hadoop.compression.lzo.LzoCodec",
    LZOP_CODEC: "com.hadoop.compression.lzo.LzopCodec",
    "lz4": "org.apache.hadoop.io.compress.Lz4Codec",
    "snappy": "org.apache.hadoop.io.compress.SnappyCodec",
}
