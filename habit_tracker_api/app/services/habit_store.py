"""
In-memory storage and business rules for habits.

``HabitStore`` owns the authoritative collection of habits for the
process.  It assigns identifiers, stamps creation times and enforces
the one invariant of the domain: no two habits share a name.  All
state lives in a plain dict guarded by a single lock, so the store can
be shared between request handlers running on different threads.

The store is created by the application factory and injected into the
API layer; tests build a fresh instance instead of resetting global
state.
"""

from __future__ import annotations

import itertools
import logging
import threading
from dataclasses import dataclass, field, replace
from datetime import date, datetime
from typing import Callable, Dict, List, Optional

from habit_tracker_api.app.core.exceptions import (
    DuplicateHabitNameError,
    HabitNotFoundError,
    InvalidInputError,
)

logger = logging.getLogger(__name__)


@dataclass
class Habit:
    """A single habit record as held by the store."""

    id: int
    name: str
    description: Optional[str] = None
    completed: bool = False
    last_completed: Optional[date] = None
    created_at: datetime = field(default_factory=datetime.now)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


class HabitStore:
    """Thread-safe in-memory repository of habits.

    Every public method takes the store lock for its whole duration, so
    the duplicate-name check and the write that follows it happen
    atomically.  Habits handed out by the store are copies; changing
    them does not affect stored state.

    Parameters
    ----------
    clock : Callable[[], datetime]
        Source of the current time.  Used for ``created_at`` and to
        decide whether a ``last_completed`` date lies in the future.
        Defaults to :func:`datetime.now`.
    """

    def __init__(self, clock: Callable[[], datetime] = datetime.now) -> None:
        self._clock = clock
        self._lock = threading.Lock()
        self._habits: Dict[int, Habit] = {}
        self._ids = itertools.count(1)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def list_all(self) -> List[Habit]:
        """Return all habits ordered by ascending id."""
        with self._lock:
            return [replace(h) for h in self._sorted()]

    def get_by_id(self, habit_id: int) -> Habit:
        """Return the habit with ``habit_id``.

        Raises ``HabitNotFoundError`` if there is no such habit.
        """
        with self._lock:
            return replace(self._get(habit_id))

    def search_by_name(self, query: Optional[str]) -> List[Habit]:
        """Return habits whose name contains ``query``, ignoring case.

        Results are ordered by ascending id.  An empty query matches
        every habit.  Raises ``InvalidInputError`` if ``query`` is
        ``None``.
        """
        if query is None:
            raise InvalidInputError("Search query 'name' is required")
        needle = query.lower()
        with self._lock:
            return [
                replace(h)
                for h in self._sorted()
                if h.name is not None and needle in h.name.lower()
            ]

    def count(self) -> int:
        with self._lock:
            return len(self._habits)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def create(
        self,
        name: Optional[str],
        description: Optional[str] = None,
        completed: Optional[bool] = None,
    ) -> Habit:
        """Store a new habit and return it.

        The id comes from the store's sequence and ``created_at`` from
        its clock; ``completed`` defaults to ``False``.

        Raises ``InvalidInputError`` for a missing or blank name and
        ``DuplicateHabitNameError`` if the name is already taken.
        """
        if _is_blank(name):
            raise InvalidInputError("Habit name must not be blank")
        with self._lock:
            if self._name_taken(name):
                logger.debug("Rejected duplicate habit name %r", name)
                raise DuplicateHabitNameError(name)
            habit = Habit(
                id=next(self._ids),
                name=name,
                description=description,
                completed=bool(completed),
                created_at=self._clock(),
            )
            self._habits[habit.id] = habit
            logger.info("Created habit %s (%r)", habit.id, habit.name)
            return replace(habit)

    def update(
        self,
        habit_id: int,
        name: Optional[str],
        description: Optional[str] = None,
        completed: Optional[bool] = None,
        last_completed: Optional[date] = None,
    ) -> Habit:
        """Replace the mutable fields of an existing habit.

        ``name``, ``description`` and ``last_completed`` are overwritten
        with the given values.  The stored ``completed`` flag becomes
        ``True`` when ``completed`` is true, or when ``last_completed``
        is given and is not after today; otherwise it is ``False``.
        ``id`` and ``created_at`` never change.

        Raises ``HabitNotFoundError``, ``InvalidInputError`` or
        ``DuplicateHabitNameError``, checked in that order.  Nothing is
        modified when an error is raised.
        """
        with self._lock:
            existing = self._get(habit_id)
            if _is_blank(name):
                raise InvalidInputError("Habit name must not be blank")
            if self._name_taken(name, exclude_id=habit_id):
                logger.debug("Rejected rename of habit %s to duplicate %r", habit_id, name)
                raise DuplicateHabitNameError(name)

            completed_flag = bool(completed)
            if not completed_flag and last_completed is not None:
                completed_flag = last_completed <= self._clock().date()

            existing.name = name
            existing.description = description
            existing.completed = completed_flag
            existing.last_completed = last_completed
            logger.info("Updated habit %s", habit_id)
            return replace(existing)

    def delete(self, habit_id: int) -> None:
        """Remove a habit.  Raises ``HabitNotFoundError`` if absent."""
        with self._lock:
            if self._habits.pop(habit_id, None) is None:
                raise HabitNotFoundError(habit_id)
            logger.info("Deleted habit %s", habit_id)

    # ------------------------------------------------------------------
    # Helpers; callers must hold the lock
    # ------------------------------------------------------------------
    def _get(self, habit_id: int) -> Habit:
        habit = self._habits.get(habit_id)
        if habit is None:
            raise HabitNotFoundError(habit_id)
        return habit

    def _sorted(self) -> List[Habit]:
        return sorted(self._habits.values(), key=lambda h: h.id)

    def _name_taken(self, name: str, exclude_id: Optional[int] = None) -> bool:
        # Linear scan; names are not indexed.
        return any(
            h.name == name for h in self._habits.values() if h.id != exclude_id
        )
