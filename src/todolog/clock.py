"""Today's date, the only wall-clock reading the todo log takes.

The log is not timezone-aware: dates are local calendar dates.
"""

import datetime


def today() -> datetime.date:
    """Return the current local calendar date."""
    return datetime.date.today()
