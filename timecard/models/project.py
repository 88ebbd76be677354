"""Project data model."""

from typing import Optional
from pydantic import BaseModel, Field


class Project(BaseModel):
    """Represents a project in the reference table."""

    id: Optional[int] = Field(default=None, description="Database ID")
    name: str = Field(..., min_length=1, description="Project name")
    code: str = Field(..., min_length=1, description="Project code (e.g., '20-008')")

    model_config = {"frozen": True}
