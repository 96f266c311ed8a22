"""Timestamp formatting used in repository messages and commit records."""

from __future__ import annotations

from datetime import datetime

TIMESTAMP_FORMAT = "[%Y-%m-%d %H:%M:%S]"


def current_timestamp(now: datetime | None = None) -> str:
    """Return *now* (default: the current local time) as ``[YYYY-mm-dd HH:MM:SS]``.

    Naive datetimes are taken as local time; aware ones are converted to it.
    """
    if now is None:
        now = datetime.now()
    elif now.tzinfo is not None:
        now = now.astimezone()
    return now.strftime(TIMESTAMP_FORMAT)