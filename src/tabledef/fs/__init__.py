"""Filesystem path helpers."""

from tabledef.fs.qualifier import DEFAULT_FS, HadoopPathQualifier

__all__ = ["DEFAULT_FS", "HadoopPathQualifier"]
