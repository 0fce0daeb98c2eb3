# app/models/category.py
import uuid

from sqlmodel import SQLModel, Field


class Category(SQLModel, table=True):
    """
    Product category.

    Products reference a category by id; the products API only checks that
    the referenced row exists and embeds it in responses.
    """

    __tablename__ = "categories"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    name: str = Field(
        max_length=100,
        index=True,
        description="Display name of the category",
    )

    icon: str | None = Field(
        default=None,
        max_length=100,
        description="Icon identifier used by the storefront",
    )

    color: str | None = Field(
        default=None,
        max_length=20,
        description="Display color, e.g. '#ffcc00'",
    )
