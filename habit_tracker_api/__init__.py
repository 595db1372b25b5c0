"""
Top-level package for the Habit Tracker API.

All functionality lives in submodules under ``app``; import
``habit_tracker_api.app.main`` to obtain the application factory.
"""

__all__ = []
