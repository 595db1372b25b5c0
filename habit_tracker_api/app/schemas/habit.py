"""
Pydantic models for habit payloads.

Field names on the wire are camelCase (``lastCompleted``,
``createdAt``) to match existing clients; request bodies also accept
the snake_case attribute names.  ``name`` is optional at this level on
purpose: a missing name is reported by the store as invalid input
(HTTP 400) rather than as a schema validation failure.
"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field


class HabitCreate(BaseModel):
    """Schema for creating a habit."""

    name: Optional[str] = Field(None, examples=["Read"])
    description: Optional[str] = Field(None, examples=["Read 10 pages"])
    completed: Optional[bool] = Field(None, examples=[False])

    model_config = {
        "populate_by_name": True,
    }


class HabitUpdate(HabitCreate):
    """Schema for replacing the mutable fields of a habit.

    A ``lastCompleted`` date that is not in the future marks the habit
    as completed even when ``completed`` is false or omitted.
    """

    last_completed: Optional[date] = Field(None, alias="lastCompleted", examples=["2025-09-01"])


class HabitRead(BaseModel):
    """Schema for reading a habit from the API."""

    id: int
    name: str
    description: Optional[str] = None
    completed: bool = False
    last_completed: Optional[date] = Field(None, alias="lastCompleted")
    created_at: datetime = Field(..., alias="createdAt")

    model_config = {
        "from_attributes": True,
        "populate_by_name": True,
    }
