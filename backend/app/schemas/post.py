"""Post Schemas — request/response contracts for the /api/data CRUD route.

Invariants:
    - PostCreate.title: 1-200 chars after stripping; content non-empty after stripping
    - user_id and id must parse as UUIDs (malformed ids never reach the database)
    - PostUpdate fields other than id are optional, but never blank when present
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

TITLE_MAX_LENGTH = 200


def _required(v: str, message: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError(message)
    return v


class PostCreate(BaseModel):
    """New post — every field required."""
    title: str = Field(max_length=TITLE_MAX_LENGTH)
    content: str
    user_id: UUID

    @field_validator("title")
    @classmethod
    def title_required(cls, v: str) -> str:
        return _required(v, "Title is required")

    @field_validator("content")
    @classmethod
    def content_required(cls, v: str) -> str:
        return _required(v, "Content is required")


class PostUpdate(BaseModel):
    """Partial update — only the fields sent are written."""
    id: UUID
    title: str | None = Field(None, max_length=TITLE_MAX_LENGTH)
    content: str | None = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str | None) -> str | None:
        return None if v is None else _required(v, "Title cannot be empty")

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, v: str | None) -> str | None:
        return None if v is None else _required(v, "Content cannot be empty")

    def changes(self) -> dict:
        """Fields to write, excluding id and anything not sent."""
        return self.model_dump(exclude={"id"}, exclude_none=True)


class PostDelete(BaseModel):
    id: UUID


class PostResponse(BaseModel):
    """Post as stored."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    content: str
    user_id: UUID
    created_at: datetime


class Pagination(BaseModel):
    total: int
    limit: int
    offset: int


class PostEnvelope(BaseModel):
    data: PostResponse


class PostListEnvelope(BaseModel):
    data: list[PostResponse]
    pagination: Pagination


class MessageResponse(BaseModel):
    message: str


class PageParams(BaseModel):
    """Paging for the list view; ignored when a single post is requested."""
    limit: int = Field(10, ge=1, le=100)
    offset: int = Field(0, ge=0)
