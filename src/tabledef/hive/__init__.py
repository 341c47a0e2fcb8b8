"""Hive-specific building blocks: delimiters, codecs, types and paths."""

from tabledef.hive.codecs import get_codec_class_name, is_lzop_codec
from tabledef.hive.delimiters import encode_delimiter
from tabledef.hive.paths import join_warehouse_path, resolve_final_path
from tabledef.hive.type_mapper import TypeMapper
from tabledef.hive.types import HiveTypeDescriber, is_hive_type_improvised, to_hive_type

__all__ = [
    "encode_delimiter",
    "get_codec_class_name",
    "is_lzop_codec",
    "TypeMapper",
    "HiveTypeDescriber",
    "to_hive_type",
    "is_hive_type_improvised",
    "join_warehouse_path",
    "resolve_final_path",
]
