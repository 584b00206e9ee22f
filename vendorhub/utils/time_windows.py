from datetime import date, datetime, timedelta, timezone
from typing import List, NamedTuple, Optional


def utcnow() -> datetime:
    """Naive UTC timestamp; every DateTime column stores naive UTC."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Window(NamedTuple):
    start: datetime
    end: datetime

    def contains(self, moment: Optional[datetime]) -> bool:
        return moment is not None and self.start <= moment < self.end


def trailing_windows(days: int, now: Optional[datetime] = None) -> tuple:
    """
    Returns (current, previous): the ``days``-long window ending at ``now``
    and the window of equal length immediately before it.
    """
    now = now or utcnow()
    span = timedelta(days=days)
    current = Window(now - span, now)
    previous = Window(now - 2 * span, now - span)
    return current, previous


def last_n_dates(n: int, now: Optional[datetime] = None) -> List[date]:
    today = (now or utcnow()).date()
    return [today - timedelta(days=offset) for offset in range(n - 1, -1, -1)]
