"""Day-streak calculation.

A streak counts consecutive calendar days with at least one logged action.
The calculation is pure: callers supply "now" and the calendar-day function.
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional


@dataclass(frozen=True)
class StreakState:
    """Streak counters after a logging transaction."""

    current_streak: int
    longest_streak: int


def compute_streak(
    last_action_date: Optional[datetime],
    current_streak: int,
    longest_streak: int,
    now: datetime,
    day_of: Callable[[datetime], date],
) -> StreakState:
    """Advance the streak for one logging transaction.

    Rules, in order:
    1. No previous action: the streak starts at 1.
    2. Previous action today: unchanged.
    3. Previous action yesterday: the streak grows by one day.
    4. Anything older: the streak restarts at 1, longest is kept.

    Must be called at most once per transaction, however many actions the
    batch contained.

    Args:
        last_action_date: Instant of the user's previous logging transaction
        current_streak: Current streak before this transaction
        longest_streak: Longest streak before this transaction
        now: Instant of this transaction
        day_of: Maps an instant to its calendar day

    Returns:
        New streak state
    """
    if last_action_date is None:
        return StreakState(current_streak=1, longest_streak=max(longest_streak, 1))

    today = day_of(now)
    last_day = day_of(last_action_date)

    if last_day == today:
        return StreakState(current_streak=current_streak, longest_streak=longest_streak)

    if last_day == today - timedelta(days=1):
        updated = current_streak + 1
        return StreakState(
            current_streak=updated, longest_streak=max(longest_streak, updated)
        )

    # max() only matters for inconsistent stored counters (longest 0 with a date)
    return StreakState(current_streak=1, longest_streak=max(longest_streak, 1))
