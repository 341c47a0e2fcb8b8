"""Delimiter encoding for Hive's ROW FORMAT clause."""

from tabledef.common.exceptions import delimiter_range_error
from tabledef.constants import MAX_DELIMITER_CODE, MIN_DELIMITER_CODE


def encode_delimiter(code: int) -> str:
    """Return the character ``code`` in Hive's octal escape form.

    Hive accepts delimiter characters written as ``\\ooo`` where ``ooo`` is
    a three-digit octal number between 000 and 177. Values may not be
    truncated (``\\12`` is wrong, ``\\012`` is right) nor carry an extra
    leading zero (``\\0177`` is wrong).

    Args:
        code: Character code of the delimiter

    Returns:
        A four-character string such as ``\\011``

    Raises:
        DelimiterRangeError: If ``code`` is outside [0, 127]
    """
    if code < MIN_DELIMITER_CODE or code > MAX_DELIMITER_CODE:
        raise delimiter_range_error(code)
    return "\\%03o" % code
