from datetime import datetime
from typing import Optional

from hackclub.models.event import Event
from hackclub.utils.helpers import as_utc, get_utc_now


def is_submission_window_open(event: Event, now: Optional[datetime] = None) -> bool:
    """
    Check whether an event still accepts submissions

    Events without an end date never close. Otherwise the window is open up to
    and including the end date.
    """
    if event.end_date is None:
        return True
    now = as_utc(now) if now is not None else get_utc_now()
    return now <= as_utc(event.end_date)
