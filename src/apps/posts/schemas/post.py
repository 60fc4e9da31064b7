"""Post schemas."""

from pydantic import BaseModel, Field


class CreatePostRequest(BaseModel):
    """Schema for creating a post."""
    content: str


class UpdatePostRequest(BaseModel):
    """Schema for replacing a post's content."""
    post_id: int = Field(ge=0, lt=2**64)
    updated_content: str
