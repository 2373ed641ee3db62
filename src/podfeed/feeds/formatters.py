"""Text formatting helpers for feed values.

Dates follow RFC 2822 in GMT, numbers are plain base-10 without
grouping, and URLs are joined with exactly one slash.
"""

import logging
from datetime import date, datetime, time, timezone
from decimal import Decimal
from email.utils import format_datetime

from podfeed.feeds.models import DateOrTime, PubDate, PubDateTime
from podfeed.xml import CData

logger = logging.getLogger(__name__)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def to_utc(dt: datetime) -> datetime:
    """Return ``dt`` as an aware UTC datetime; naive values are taken as UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def format_datetime_rfc2822(dt: datetime) -> str:
    """Format an instant, e.g. ``Fri, 05 Jun 2020 04:09:26 GMT``."""
    return format_datetime(to_utc(dt), usegmt=True)


def format_date_rfc2822(d: date) -> str:
    """Format a calendar date at midnight, e.g. ``Fri, 05 Jun 2020 00:00:00 GMT``."""
    return format_datetime(datetime.combine(d, time(), tzinfo=timezone.utc), usegmt=True)


def format_pub_date(value: DateOrTime) -> str:
    """Format either variant of a publication date."""
    if isinstance(value, PubDate):
        return format_date_rfc2822(value.value)
    if isinstance(value, PubDateTime):
        return format_datetime_rfc2822(value.value)
    raise TypeError(f"Unsupported publication date: {value!r}")


def format_int(value: int) -> str:
    return str(int(value))


def format_float(value: float) -> str:
    """Shortest decimal form without exponent; integral values lose the ``.0``.

    >>> format_float(5.15), format_float(1.0), format_float(0.00001)
    ('5.15', '1', '0.00001')
    """
    if float(value).is_integer():
        return str(int(value))
    return format(Decimal(repr(float(value))), "f")


def join_url(base: str, path: str) -> str:
    """Join ``base`` and ``path`` with a single slash at the seam."""
    return f"{base.rstrip('/')}/{path.lstrip('/')}"


def cdata(text: str) -> CData:
    """Mark ``text`` for verbatim output in a CDATA section.

    The text is not inspected: a literal ``]]>`` inside it ends the
    section early and yields invalid XML.
    """
    return CData(text)


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO 8601 timestamp, falling back to the epoch.

    Args:
        value: Timestamp text such as ``2020-06-05T04:09:26Z``

    Returns:
        Aware UTC datetime, or 1970-01-01T00:00:00Z if ``value`` is malformed
    """
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return to_utc(datetime.fromisoformat(text))
    except ValueError:
        logger.warning("Invalid timestamp %r, using epoch", value)
        return EPOCH
