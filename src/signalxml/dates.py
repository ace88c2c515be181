from datetime import datetime, tzinfo

from signalxml.errors import DateOutOfRangeError

# Fixed English names; the import tool expects these regardless of locale.
_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def int_to_time(millis: int | None, tz: tzinfo | None = None) -> str | None:
    """Render epoch milliseconds as e.g. ``Nov 14, 2023 10:13:20 PM``.

    Sub-second precision is dropped. The local zone is used unless ``tz`` is
    given.
    """
    if millis is None:
        return None
    try:
        t = datetime.fromtimestamp(millis // 1000, tz)
    except (OverflowError, ValueError, OSError) as e:
        raise DateOutOfRangeError(millis) from e
    hour = t.hour % 12 or 12
    meridiem = "AM" if t.hour < 12 else "PM"
    return (
        f"{_MONTHS[t.month - 1]} {t.day:02d}, {t.year} "
        f"{hour}:{t.minute:02d}:{t.second:02d} {meridiem}"
    )
