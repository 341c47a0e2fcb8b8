"""Type definitions for hive-tabledef."""

from .base import TableDefBaseModel
from .table import ResolvedColumn, TableDefinition, TableSpec

__all__ = [
    "TableDefBaseModel",
    "TableSpec",
    "ResolvedColumn",
    "TableDefinition",
]
