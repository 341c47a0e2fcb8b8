"""Bundled schema describers."""

from tabledef.schema.static import StaticSchemaDescriber

__all__ = ["StaticSchemaDescriber"]
