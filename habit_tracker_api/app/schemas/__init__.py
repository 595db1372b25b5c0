"""
Pydantic schema definitions for API payloads.

Schemas are kept apart from the store's ``Habit`` record so that the
wire representation can evolve independently of storage.
"""
