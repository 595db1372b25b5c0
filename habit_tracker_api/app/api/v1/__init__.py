"""Version 1 of the Habit Tracker API."""
