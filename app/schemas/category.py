# app/schemas/category.py
import uuid

from pydantic import BaseModel, ConfigDict, field_validator
from sqlmodel import SQLModel, Field


class CategoryRead(BaseModel):
    """
    Category representation for clients.

    Also used as the embedded `category` object of product responses.
    """

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    icon: str | None = None
    color: str | None = None


class CategoryCreate(SQLModel):
    """
    Payload for creating a category.
    """

    model_config = ConfigDict(extra="forbid")

    name: str = Field(max_length=100)
    icon: str | None = Field(default=None, max_length=100)
    color: str | None = Field(default=None, max_length=20)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty")
        return v


class CategoryUpdate(SQLModel):
    """
    Partial update payload for categories.
    All fields are optional.
    """

    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(default=None, max_length=100)
    icon: str | None = Field(default=None, max_length=100)
    color: str | None = Field(default=None, max_length=20)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty")
        return v
