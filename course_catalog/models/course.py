"""
Course API schemas.

Request bodies arrive with names already stripped of surrounding
whitespace, so every later comparison sees the same string the user
meant. CourseSubmission is what the uniqueness rule inspects.

Dependencies: pydantic
System role: Course API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from course_catalog.boundary.db.models.course_model import CourseStatus

class _StripsName(BaseModel):
    @field_validator("name", mode="before", check_fields=False)
    @classmethod
    def strip_name(cls, value: object) -> object:
        return value.strip() if isinstance(value, str) else value


class CourseSubmission(BaseModel):
    """A name on its way to being stored; course_id is set when renaming."""

    model_config = ConfigDict(frozen=True)

    name: str
    course_id: uuid.UUID | None = None


class CreateCourseRequest(_StripsName):
    name: str = Field(min_length=1, max_length=255, description="Course name")
    description: str | None = Field(None, max_length=4096)
    metadata: dict = Field(default_factory=dict)


class UpdateCourseRequest(_StripsName):
    """Partial update; omitted fields keep their stored value."""

    name: str | None = Field(None, min_length=1, max_length=255, description="Course name")
    description: str | None = Field(None, max_length=4096)
    metadata: dict | None = Field(None, description="Replaces stored metadata wholesale")


class CourseResponse(BaseModel):
    id: uuid.UUID
    name: str
    description: str | None
    metadata: dict
    status: CourseStatus
    created_at: datetime
    updated_at: datetime


class FieldErrorResponse(BaseModel):
    """Body of 400/409 responses raised by business rules."""

    field: str | None
    message: str
