"""Month grid for the music-idea calendar."""

from .grid import CalendarCell, CalendarGrid, build_calendar_grid, grid_start

__all__ = ["CalendarCell", "CalendarGrid", "build_calendar_grid", "grid_start"]
