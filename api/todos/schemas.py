"""
Pydantic schemas for todo endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Todo(BaseModel):
    # Strict: upstream records are returned as received, never coerced.
    model_config = ConfigDict(strict=True, populate_by_name=True)

    id: int
    user_id: int = Field(..., alias="userId")
    title: str = Field(..., min_length=1)
    completed: bool = False

    def describe(self) -> str:
        state = "Completed" if self.completed else "Pending"
        return f"Todo #{self.id}: {self.title} (User: {self.user_id}) - {state}"
