"""
Calendar grid for the music-idea calendar.

Lays the month containing a given day onto a fixed 6 x 7 grid. Cells
outside the month are kept (flagged `in_month=False`) so every grid has
the same shape.
"""

import calendar
import datetime as dt
import logging
from collections import defaultdict

from pydantic import BaseModel, Field

from homeboard.core.config.models import WeekStart
from homeboard.core.content.models import MusicIdea

logger = logging.getLogger(__name__)

GRID_WEEKS = 6
DAYS_PER_WEEK = 7


class CalendarCell(BaseModel):
    """One day on the grid."""

    date: dt.date
    in_month: bool
    is_today: bool = False
    ideas: list[MusicIdea] = Field(default_factory=list)

    @property
    def is_placeholder(self) -> bool:
        """True when no idea exists for this date."""
        return not self.ideas


class CalendarGrid(BaseModel):
    """A month laid out as GRID_WEEKS rows of seven cells."""

    year: int
    month: int
    week_start: WeekStart
    weeks: list[list[CalendarCell]]

    @property
    def title(self) -> str:
        return f"{calendar.month_name[self.month]} {self.year}"

    @property
    def weekday_names(self) -> list[str]:
        first = 0 if self.week_start == WeekStart.MONDAY else 6
        return [calendar.day_abbr[(first + i) % DAYS_PER_WEEK] for i in range(DAYS_PER_WEEK)]

    @property
    def cells(self) -> list[CalendarCell]:
        return [cell for week in self.weeks for cell in week]


def grid_start(today: dt.date, week_start: WeekStart = WeekStart.MONDAY) -> dt.date:
    """First date shown on the grid: the week-start day on or before the 1st."""
    first_of_month = today.replace(day=1)
    start_weekday = 0 if week_start == WeekStart.MONDAY else 6
    offset = (first_of_month.weekday() - start_weekday) % DAYS_PER_WEEK
    return first_of_month - dt.timedelta(days=offset)


def build_calendar_grid(
    ideas: list[MusicIdea],
    today: dt.date,
    week_start: WeekStart = WeekStart.MONDAY,
) -> CalendarGrid:
    """
    Map dated music ideas onto the grid for the month containing `today`.

    Args:
        ideas: Music ideas in file order; ideas sharing a date stay in that order
        today: The date to highlight; also selects the month
        week_start: Day each grid row starts on

    Returns:
        CalendarGrid with exactly one cell marked as today
    """
    by_date: dict[dt.date, list[MusicIdea]] = defaultdict(list)
    for idea in ideas:
        by_date[idea.date].append(idea)

    start = grid_start(today, week_start)
    weeks: list[list[CalendarCell]] = []
    for week_index in range(GRID_WEEKS):
        row = []
        for day_index in range(DAYS_PER_WEEK):
            day = start + dt.timedelta(days=week_index * DAYS_PER_WEEK + day_index)
            row.append(
                CalendarCell(
                    date=day,
                    in_month=day.month == today.month,
                    is_today=day == today,
                    ideas=list(by_date.get(day, [])),
                )
            )
        weeks.append(row)

    shown = sum(len(week) for week in weeks)
    logger.debug(
        "Built calendar for %s-%02d: %d cells, %d dated ideas",
        today.year,
        today.month,
        shown,
        len(by_date),
    )
    return CalendarGrid(year=today.year, month=today.month, week_start=week_start, weeks=weeks)
