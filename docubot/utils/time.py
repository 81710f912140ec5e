import re
from datetime import datetime, timedelta, timezone

_FRACTION_RE = re.compile(r"\.(\d+)")


def parse_iso_utc(ts: str | None) -> datetime | None:
    """Parse an ISO-8601 timestamp (with optional trailing 'Z') to an aware datetime.

    Returns None if the input is falsy. Naive values are taken to be UTC.
    Fractional seconds of any precision (Go writes nanoseconds) are cut or
    padded to microseconds.
    """
    if not ts:
        return None
    if ts.endswith("Z"):
        ts = ts[:-1] + "+00:00"
    ts = _FRACTION_RE.sub(lambda m: "." + (m.group(1) + "000000")[:6], ts, count=1)
    dt = datetime.fromisoformat(ts)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def format_iso_utc(dt: datetime | None) -> str | None:
    if dt is None:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def duration_seconds(exp: timedelta | int | float) -> int:
    """Whole seconds in exp, fractional part truncated."""
    seconds = exp.total_seconds() if isinstance(exp, timedelta) else float(exp)
    if seconds < 0:
        raise ValueError(f"Expiry must not be negative, got {seconds}")
    return int(seconds)
