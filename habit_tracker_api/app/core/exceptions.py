"""
Domain errors raised by the habit store.

The service layer signals failures with ``ValueError`` subclasses; the
API layer catches the specific kind and maps it to an HTTP status code.
The store never leaves partial writes behind when one of these is
raised.
"""


class HabitStoreError(ValueError):
    """Base class for all habit store failures."""


class InvalidInputError(HabitStoreError):
    """A required field or query parameter is missing or blank."""


class HabitNotFoundError(HabitStoreError):
    """The referenced habit id does not exist."""

    def __init__(self, habit_id: int) -> None:
        self.habit_id = habit_id
        super().__init__(f"Habit {habit_id} not found")


class DuplicateHabitNameError(HabitStoreError):
    """A write would give two habits the same name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Habit with name '{name}' already exists")
