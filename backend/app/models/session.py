"""
Session model for the movie catalog sessions collection.
"""
from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Session(BaseModel):
    """
    Login session document for MongoDB mflix_db.sessions collection.

    user_id holds the user's email. A user may have any number of sessions.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    user_id: str = Field(..., description="Email of the user owning the session")
    jwt: str = Field(..., description="Issued JWT, unique across sessions")
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Session creation timestamp"
    )

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_object_id(cls, value: Any) -> Any:
        return str(value) if value is not None else None

    def to_document(self) -> dict[str, Any]:
        """Document to insert; the database assigns _id."""
        return self.model_dump(exclude={"id"})
