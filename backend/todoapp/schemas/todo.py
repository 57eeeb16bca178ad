"""Todo Schemas - Pydantic models with field-level validation for API boundaries.

Invariants:
    - TodoCreate.title passes check_title: sanitized, 1-100 chars
    - Wire format is camelCase (isCompleted); Python attributes are snake_case
    - TodoResponse reads straight from ORM objects (from_attributes)

Design Decisions:
    - field_validator delegates to core/validate_title.py: one policy shared with the client
    - PydanticCustomError carries the rejection reason as the error "type"
      (empty_title / title_too_long) so the 400 body is machine-readable
    - TodoToggle.is_completed is optional: the server derives the new value itself
"""

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from todoapp.core.validate_title import check_title


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )


class TodoCreate(_CamelModel):
    """Create request - title is sanitized before length checks."""
    title: str

    @field_validator("title")
    @classmethod
    def sanitize_and_check(cls, v: str) -> str:
        check = check_title(v)
        if not check.ok:
            raise PydanticCustomError(check.rejection.value, check.message)
        return check.title


class TodoToggle(_CamelModel):
    """Toggle request - id must repeat the path id."""
    id: int
    is_completed: bool | None = None


class TodoResponse(_CamelModel):
    """Todo as seen on the wire."""
    id: int
    title: str
    is_completed: bool = False
