"""Protocol definitions for hive-tabledef.

Protocols provide type-safe interfaces without requiring inheritance,
following Python's structural subtyping (duck typing with type hints).
"""

from .collaborators import DiagnosticSink, PathQualifier, SchemaDescriber

__all__ = [
    "SchemaDescriber",
    "PathQualifier",
    "DiagnosticSink",
]
