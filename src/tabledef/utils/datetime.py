"""DateTime utilities for table comments."""

from datetime import datetime, timezone
from typing import Optional

import pytz

from tabledef.constants import COMMENT_DATE_FORMAT


def get_current_timestamp() -> datetime:
    """Get current UTC timestamp."""
    return datetime.now(timezone.utc)


def format_comment_timestamp(
    moment: Optional[datetime] = None,
    tz: Optional[pytz.BaseTzInfo] = None,
) -> str:
    """Format a timestamp for the table comment.

    Args:
        moment: Timestamp to format, defaults to now. Naive values are taken as UTC.
        tz: Time zone to render in, defaults to UTC

    Returns:
        Datetime string in format 'YYYY/MM/DD HH:MM:SS'
    """
    if moment is None:
        moment = get_current_timestamp()
    elif moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(tz or pytz.utc).strftime(COMMENT_DATE_FORMAT)
