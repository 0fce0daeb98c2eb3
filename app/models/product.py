# app/models/product.py
import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import JSON, Column
from sqlmodel import SQLModel, Field, Relationship

from app.models.category import Category


class Product(SQLModel, table=True):
    """
    Product catalog entry.

    - `image` is the primary image URL, always built server-side from an upload.
    - `images` is the gallery, stored as a JSON array of URLs and replaced
      wholesale by the gallery endpoint.
    - `category` is loaded eagerly so every read is category-expanded.
    """

    __tablename__ = "products"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    name: str = Field(
        max_length=255,
        index=True,
        description="Display name of the product",
    )

    description: str = Field(description="Short description")

    rich_description: str = Field(
        default="",
        description="Long description / HTML",
    )

    image: str = Field(
        default="",
        description="Absolute URL of the primary image",
    )

    images: list[str] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False),
        description="Absolute URLs of gallery images, in upload order",
    )

    brand: str = Field(default="", max_length=255)

    price: float = Field(
        default=0,
        ge=0,
        description="Unit price",
    )

    category_id: uuid.UUID | None = Field(
        default=None,
        foreign_key="categories.id",
        ondelete="SET NULL",
        index=True,
        description="FK to categories.id",
    )

    count_in_stock: int = Field(
        ge=0,
        le=255,
        description="How many units currently in stock",
    )

    rating: float = Field(default=0, ge=0)

    num_reviews: int = Field(default=0, ge=0)

    is_featured: bool = Field(
        default=False,
        index=True,
        description="Whether this product is shown in the featured list",
    )

    date_created: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)",
    )

    category: Optional[Category] = Relationship(
        sa_relationship_kwargs={"lazy": "joined"},
    )
