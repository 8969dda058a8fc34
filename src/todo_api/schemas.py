from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# PUBLIC_INTERFACE
class TodoCreate(BaseModel):
    """
    Schema for creating a new Todo item. The id is optional; the store
    assigns one when it is absent.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Buy groceries",
                "completed": False,
                "order": 1,
            }
        }
    )

    id: Optional[int] = Field(default=None, description="Requested identifier; assigned by the store when omitted")
    title: str = Field(..., description="Short title for the todo item")
    completed: bool = Field(default=False, description="Completion status flag")
    order: int = Field(default=0, description="Display/sort hint")


# PUBLIC_INTERFACE
class TodoUpdate(BaseModel):
    """
    Schema for updating an existing Todo item.
    All fields are optional; only provided, non-null fields are written.
    An id in the body is accepted but never changes the stored id.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "updated title",
                "completed": True,
                "order": 1,
            }
        }
    )

    id: Optional[int] = Field(default=None, description="Ignored; the path id identifies the todo")
    title: Optional[str] = Field(default=None, description="Short title for the todo item")
    completed: Optional[bool] = Field(default=None, description="Completion status flag")
    order: Optional[int] = Field(default=None, description="Display/sort hint")

    def changes(self) -> dict:
        """Return the fields this update writes, keyed by entity field name."""
        return self.model_dump(exclude={"id"}, exclude_none=True)


# PUBLIC_INTERFACE
class TodoOut(BaseModel):
    """
    Schema returned by the API for a Todo item.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "title": "Buy groceries",
                "completed": False,
                "order": 1,
            }
        }
    )

    id: int = Field(..., description="Unique identifier of the todo item")
    title: str = Field(..., description="Short title for the todo item")
    completed: bool = Field(..., description="Completion status flag")
    order: int = Field(..., description="Display/sort hint")
