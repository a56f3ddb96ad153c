"""
User model for the movie catalog users collection.
"""
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.networks import validate_email


class User(BaseModel):
    """
    User document model for MongoDB mflix_db.users collection.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    email: str = Field(..., description="Unique email address, also the user identifier")
    name: str = Field(default="", description="Display name")
    password: str = Field(default="", description="Password hashed by the caller")
    preferences: Optional[dict[str, Any]] = Field(
        None,
        description="Free-form preferences, replaced wholesale on update"
    )

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_object_id(cls, value: Any) -> Any:
        return str(value) if value is not None else None

    @field_validator("email")
    @classmethod
    def _check_email(cls, value: str) -> str:
        # Stored exactly as given: lookups filter on the caller's string
        validate_email(value)
        return value

    def to_document(self) -> dict[str, Any]:
        """Document to insert; the database assigns _id."""
        return self.model_dump(exclude={"id"})
