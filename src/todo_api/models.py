from __future__ import annotations

from typing import TypedDict


# PUBLIC_INTERFACE
class TodoEntity(TypedDict):
    """
    A lightweight domain model representing a stored Todo item.

    Fields:
    - id: Unique integer identifier, assigned by the store
    - title: Short title
    - completed: Boolean completion flag
    - order: Display/sort hint
    """

    id: int
    title: str
    completed: bool
    order: int
