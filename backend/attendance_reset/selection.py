from datetime import datetime
from typing import Iterable, List, Optional

import pytz

from .models import AttendanceRecord, TimeWindow


def local_midnight(now: Optional[datetime] = None, timezone: Optional[str] = None) -> datetime:
    """
    Midnight at the start of `now`'s calendar day, as an aware datetime.

    With `timezone` the day is taken in that IANA zone, otherwise in the host's zone.
    """
    if timezone:
        tz = pytz.timezone(timezone)
        now = now.astimezone(tz) if now else datetime.now(tz)
        return tz.localize(datetime(now.year, now.month, now.day))

    now = now.astimezone() if now else datetime.now().astimezone()
    return datetime(now.year, now.month, now.day).astimezone()


def today_window(now: Optional[datetime] = None, timezone: Optional[str] = None) -> TimeWindow:
    return TimeWindow.for_day(local_midnight(now, timezone))


def filter_only_today(records: Iterable[AttendanceRecord], window: TimeWindow) -> List[AttendanceRecord]:
    # Fetch order is kept; records without a parseable checkIn never match
    return [r for r in records if window.contains(r.check_in)]
