"""
Habit endpoints for API v1.

These routes translate HTTP requests into ``HabitStore`` calls and map
the store's errors onto status codes: invalid input is 400, an unknown
id is 404 and a duplicate name is 409.  The store itself is created by
``create_app`` and looked up from ``app.state`` for every request.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from habit_tracker_api.app.core.exceptions import (
    DuplicateHabitNameError,
    HabitNotFoundError,
    InvalidInputError,
)
from habit_tracker_api.app.schemas.habit import HabitCreate, HabitRead, HabitUpdate
from habit_tracker_api.app.services.habit_store import HabitStore

router = APIRouter()


def get_habit_store(request: Request) -> HabitStore:
    """Return the store owned by the running application."""
    return request.app.state.habit_store


@router.get("/Habits", response_model=List[HabitRead])
async def list_habits(store: HabitStore = Depends(get_habit_store)) -> List[HabitRead]:
    """Return all habits ordered by id."""
    return [HabitRead.model_validate(h) for h in store.list_all()]


# Declared before ``/Habits/{habit_id}`` so that ``search`` is not
# parsed as an id.
@router.get("/Habits/search", response_model=List[HabitRead])
async def search_habits(
    name: Optional[str] = Query(None, description="Case-insensitive substring of the habit name"),
    store: HabitStore = Depends(get_habit_store),
) -> List[HabitRead]:
    """Return habits whose name contains ``name``.

    The ``name`` parameter is required; an empty value matches every
    habit.  Responds with 400 when it is missing.
    """
    try:
        habits = store.search_by_name(name)
    except InvalidInputError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return [HabitRead.model_validate(h) for h in habits]


@router.get("/Habits/{habit_id}", response_model=HabitRead)
async def get_habit(habit_id: int, store: HabitStore = Depends(get_habit_store)) -> HabitRead:
    """Retrieve a single habit, or 404."""
    try:
        return HabitRead.model_validate(store.get_by_id(habit_id))
    except HabitNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.post("/Habits", response_model=HabitRead, status_code=status.HTTP_201_CREATED)
async def create_habit(
    habit_in: HabitCreate,
    store: HabitStore = Depends(get_habit_store),
) -> HabitRead:
    """Create a habit.

    Responds with 400 if the name is missing or blank and 409 if a
    habit with exactly the same name already exists.
    """
    try:
        habit = store.create(
            name=habit_in.name,
            description=habit_in.description,
            completed=habit_in.completed,
        )
    except InvalidInputError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except DuplicateHabitNameError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    return HabitRead.model_validate(habit)


# Older clients post to the singular path; it behaves exactly like
# ``POST /Habits``.
router.add_api_route(
    "/habit",
    create_habit,
    methods=["POST"],
    response_model=HabitRead,
    status_code=status.HTTP_201_CREATED,
)


@router.put("/Habits/{habit_id}", response_model=HabitRead)
async def update_habit(
    habit_id: int,
    habit_in: HabitUpdate,
    store: HabitStore = Depends(get_habit_store),
) -> HabitRead:
    """Replace name, description and completion state of a habit.

    A ``lastCompleted`` date that is today or earlier marks the habit
    as completed.  ``id`` and ``createdAt`` are never changed.
    """
    try:
        habit = store.update(
            habit_id,
            name=habit_in.name,
            description=habit_in.description,
            completed=habit_in.completed,
            last_completed=habit_in.last_completed,
        )
    except HabitNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except InvalidInputError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except DuplicateHabitNameError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    return HabitRead.model_validate(habit)


@router.delete("/Habits/{habit_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_habit(habit_id: int, store: HabitStore = Depends(get_habit_store)) -> None:
    """Delete a habit; 404 if it does not exist."""
    try:
        store.delete(habit_id)
    except HabitNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return None
