"""Consecutive-day logging streak tracking."""

import logging
from dataclasses import dataclass, field, replace
from datetime import date, timedelta

from usda_nutrition.domain.streaks import (
    Achievements,
    RecentDay,
    StreakPeriod,
    StreakState,
    StreakStatus,
    StreakUpdate,
)

_logger = logging.getLogger(__name__)

WEEK_STREAK_DAYS = 7
MONTH_STREAK_DAYS = 30
HUNDRED_DAYS = 100


@dataclass
class StreakTracker:
    """State machine over logged dates.

    One ``log_day`` event is expected per successful daily log write; repeated
    events for the same date are no-ops. The daily log itself lives elsewhere,
    so resetting the streak never touches nutrition history.
    """

    state: StreakState = field(default_factory=StreakState)

    def log_day(self, day: date) -> StreakUpdate:
        """Register activity on ``day`` and update the streak counters."""
        state = self.state
        if day in state.streak_log:
            return StreakUpdate(
                streak_updated=False,
                reason="Already logged today",
                current_streak=state.current_streak,
            )

        state.streak_log.add(day)
        state.total_days_logged += 1
        state.last_active_date = day

        if state.current_streak == 0:
            state.current_streak = 1
            state.streak_start_date = day
        elif _previous_day(day) in state.streak_log:
            state.current_streak += 1
        else:
            state.current_streak = 1
            state.streak_start_date = day

        state.longest_streak = max(state.longest_streak, state.current_streak)
        _logger.info(
            "Streak updated for %s: current=%s longest=%s",
            day.isoformat(),
            state.current_streak,
            state.longest_streak,
        )
        return StreakUpdate(
            streak_updated=True,
            reason="Streak updated successfully",
            current_streak=state.current_streak,
            is_new_record=state.current_streak == state.longest_streak,
        )

    def reset(self) -> StreakState:
        """Zero the streak and return the state it had before."""
        previous = replace(self.state, streak_log=set(self.state.streak_log))
        self.state = StreakState()
        _logger.info("Streak reset (was current=%s)", previous.current_streak)
        return previous

    def is_logged(self, day: date) -> bool:
        """Return True when ``day`` is in the streak log."""
        return day in self.state.streak_log

    def logged_dates(self) -> list[date]:
        """Return the streak log in ascending order."""
        return sorted(self.state.streak_log)

    def periods(self) -> list[StreakPeriod]:
        """Group logged dates into maximal runs of consecutive days."""
        periods: list[StreakPeriod] = []
        for day in self.logged_dates():
            if periods and periods[-1].end_date == _previous_day(day):
                last = periods[-1]
                periods[-1] = StreakPeriod(
                    start_date=last.start_date, end_date=day, days=last.days + 1
                )
            else:
                periods.append(StreakPeriod(start_date=day, end_date=day, days=1))
        return periods

    def recent_days(self, today: date, days: int = 7) -> list[RecentDay]:
        """Return the last ``days`` dates ending today, oldest first."""
        return [
            RecentDay(
                date=today - timedelta(days=offset),
                logged=self.is_logged(today - timedelta(days=offset)),
                is_today=offset == 0,
            )
            for offset in range(days - 1, -1, -1)
        ]

    def status(self, today: date) -> StreakStatus:
        """Describe whether today is logged and whether the streak is at risk."""
        current = self.state.current_streak
        logged_today = self.is_logged(today)
        if logged_today:
            message = (
                f"Great! You've already logged today. Current streak: {current} days!"
            )
        elif current > 0:
            message = (
                f"Don't break your {current}-day streak! Log your nutrition today."
            )
        else:
            message = "Start your nutrition tracking streak today!"
        return StreakStatus(
            can_log_today=not logged_today,
            streak_at_risk=not logged_today and current > 0,
            message=message,
        )

    def achievements(self) -> Achievements:
        """Return unlocked milestones."""
        return Achievements(
            first_day=self.state.total_days_logged >= 1,
            week_streak=self.state.longest_streak >= WEEK_STREAK_DAYS,
            month_streak=self.state.longest_streak >= MONTH_STREAK_DAYS,
            hundred_days=self.state.total_days_logged >= HUNDRED_DAYS,
        )


def _previous_day(day: date) -> date | None:
    if day == date.min:
        return None
    return day - timedelta(days=1)
