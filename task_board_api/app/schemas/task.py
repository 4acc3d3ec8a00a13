"""
Pydantic models for task board items.

A task is a single item on the board: a free‑form ``name``, a
completion flag and an integer ``priority`` where lower numbers come
first.  On the wire the completion flag is called ``isComplete``; in
Python code it is ``is_complete``.  Both spellings are accepted when
parsing input.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TaskCreate(BaseModel):
    """Schema for creating or replacing a task.

    Used as the request body of both ``POST /tasks`` and
    ``PUT /tasks/{id}``.  An ``id`` may be present in the payload (for
    example when a client sends back a record it fetched earlier) but it
    is ignored: ids are assigned by the store and never change.
    """

    id: Optional[int] = Field(None, description="Ignored; ids are assigned by the store")
    name: str = Field(..., description="Label of the task")
    is_complete: bool = Field(False, alias="isComplete", description="Whether the task is done")
    priority: int = Field(0, description="Ordering priority; lower numbers appear first")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("name")
    @classmethod
    def name_must_be_utf8(cls, value: str) -> str:
        # Lone surrogates parse from JSON escapes but cannot be rendered back.
        try:
            value.encode("utf-8")
        except UnicodeEncodeError:
            raise ValueError("name must be valid Unicode text") from None
        return value


class TaskRead(BaseModel):
    """Schema for a stored task.

    Instances returned by a task store are copies; mutating one does not
    change the stored record until it is passed back to ``save``.
    """

    id: int
    name: str
    is_complete: bool = Field(False, alias="isComplete")
    priority: int = 0

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)
