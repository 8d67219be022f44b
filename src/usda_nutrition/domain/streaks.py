"""Domain models for consecutive-day logging streaks."""

from dataclasses import dataclass, field
from datetime import date


@dataclass
class StreakState:
    """Mutable streak counters derived from the set of logged dates."""

    current_streak: int = 0
    longest_streak: int = 0
    last_active_date: date | None = None
    streak_log: set[date] = field(default_factory=set)
    total_days_logged: int = 0
    streak_start_date: date | None = None


@dataclass(frozen=True)
class StreakUpdate:
    """Outcome of a log-day event."""

    streak_updated: bool
    reason: str
    current_streak: int
    is_new_record: bool = False


@dataclass(frozen=True)
class StreakPeriod:
    """A maximal run of consecutive logged dates."""

    start_date: date
    end_date: date
    days: int


@dataclass(frozen=True)
class RecentDay:
    """Whether a recent date was logged."""

    date: date
    logged: bool
    is_today: bool


@dataclass(frozen=True)
class StreakStatus:
    """User-facing view of today's streak situation."""

    can_log_today: bool
    streak_at_risk: bool
    message: str


@dataclass(frozen=True)
class Achievements:
    """Milestones unlocked by streak and logging totals."""

    first_day: bool
    week_streak: bool
    month_streak: bool
    hundred_days: bool
