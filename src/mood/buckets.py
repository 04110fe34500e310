"""Calendar bucket keys for day, ISO-week and month granularity.

All derivations are in UTC. A key identifies one calendar bucket; the
bucket start is the UTC midnight that opens it, in epoch milliseconds.
"""

from datetime import date, datetime, timedelta, timezone

from mood.models import MS_PER_DAY
from shared_types import Granularity

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def utc_date(ts: int) -> date:
    """UTC calendar date of an epoch-millisecond timestamp."""
    return (_EPOCH + timedelta(milliseconds=ts)).date()


def date_to_ts(d: date) -> int:
    """Epoch milliseconds of UTC midnight on ``d``."""
    return (d - _EPOCH.date()).days * MS_PER_DAY


def _thursday_of_week(d: date) -> date:
    # weekday(): Monday=0 .. Sunday=6
    return d + timedelta(days=3 - d.weekday())


def day_key(ts: int) -> str:
    return utc_date(ts).isoformat()


def month_key(ts: int) -> str:
    d = utc_date(ts)
    return f"{d.year:04d}-{d.month:02d}"


def iso_week_key(ts: int) -> str:
    """ISO-8601 week key ``YYYY-Www``.

    The year is the ISO week-year, i.e. the year of the week's Thursday, so
    late-December days can land in week 1 of the next year and early-January
    days in week 52/53 of the previous one.
    """
    thursday = _thursday_of_week(utc_date(ts))
    iso_year = thursday.year
    first_thursday = _thursday_of_week(date(iso_year, 1, 4))
    week = 1 + round((thursday - first_thursday).days / 7)
    return f"{iso_year:04d}-W{week:02d}"


def iso_week_start(iso_year: int, week: int) -> date:
    """Monday of ISO week ``week`` in ``iso_year``, counted from Jan 4."""
    jan4 = date(iso_year, 1, 4)
    monday_week1 = jan4 - timedelta(days=jan4.weekday())
    return monday_week1 + timedelta(weeks=week - 1)


def bucket_key(ts: int, granularity) -> str:
    """Bucket key of ``ts``; unrecognized granularity buckets by day."""
    g = Granularity.parse(granularity)
    if g is Granularity.MONTH:
        return month_key(ts)
    if g is Granularity.WEEK:
        return iso_week_key(ts)
    return day_key(ts)


def bucket_start_ts(key: str, granularity) -> int:
    """Canonical start (UTC midnight, epoch ms) of the bucket named by ``key``."""
    g = Granularity.parse(granularity)
    if g is Granularity.MONTH:
        year, month = (int(p) for p in key.split("-"))
        return date_to_ts(date(year, month, 1))
    if g is Granularity.WEEK:
        year, week = key.split("-W")
        return date_to_ts(iso_week_start(int(year), int(week)))
    return date_to_ts(date.fromisoformat(key))
