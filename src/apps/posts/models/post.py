"""Post model."""

from sqlmodel import Field, SQLModel


class Post(SQLModel):
    """A short text post; ``post_id`` is assigned by the store."""

    post_id: int = Field(ge=0, lt=2**64)
    content: str = Field()
