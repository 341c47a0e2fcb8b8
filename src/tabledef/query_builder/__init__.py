"""Statement builders for Hive DDL.

Builders translate import options into Hive statements but do NOT execute
them; that is left to the caller.

Available Builders:
    - CreateTableStatementBuilder: CREATE [EXTERNAL] TABLE [IF NOT EXISTS]
    - LoadDataStatementBuilder: LOAD DATA INPATH ... INTO TABLE
"""

from tabledef.query_builder.base import BaseStatementBuilder
from tabledef.query_builder.create_table import CreateTableStatementBuilder
from tabledef.query_builder.load_data import LoadDataStatementBuilder

__all__ = [
    "BaseStatementBuilder",
    "CreateTableStatementBuilder",
    "LoadDataStatementBuilder",
]
