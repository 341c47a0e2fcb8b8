"""Compression codec lookups."""

from typing import Optional

from tabledef.common.exceptions import ErrorCode, argument_error
from tabledef.constants import CODECS, LZOP_CODEC


def get_codec_class_name(codec_name: str) -> Optional[str]:
    """Return the Hadoop codec class for a short codec name.

    Args:
        codec_name: Short name such as ``gzip`` or ``lzop``

    Returns:
        Fully qualified class name, or None for ``none``

    Raises:
        ArgumentError: If the name is not a known codec
    """
    key = codec_name.lower()
    if key not in CODECS:
        raise argument_error(
            f"Unknown compression codec: {codec_name}",
            field="compression_codec",
            value=codec_name,
            error_code=ErrorCode.UNSUPPORTED_CODEC,
        )
    return CODECS[key]


def is_lzop_codec(codec: Optional[str]) -> bool:
    """Check whether ``codec`` names the LZOP codec, by short or class name."""
    if codec is None:
        return False
    # Exact match only; "LZOP" is stored as TEXTFILE
    return codec == LZOP_CODEC or codec == CODECS[LZOP_CODEC]
