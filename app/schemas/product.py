# app/schemas/product.py
import uuid
from datetime import datetime

from fastapi import Form
from pydantic import AliasGenerator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.schemas.category import CategoryRead


class ProductForm(BaseModel):
    """
    Typed multipart payload shared by create and update.

    Clients send camelCase form fields (`countInStock`, `isFeatured`, ...);
    `as_form` maps them onto this model so FastAPI validates them before the
    handler runs. The primary image travels as a separate file part.

    There is no partial update: optional fields left out of the form fall
    back to their defaults.
    """

    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1, max_length=255)
    description: str
    rich_description: str = ""
    brand: str = Field(default="", max_length=255)
    price: float = Field(default=0, ge=0)
    category: str
    count_in_stock: int = Field(ge=0, le=255)
    rating: float = Field(default=0, ge=0)
    num_reviews: int = Field(default=0, ge=0)
    is_featured: bool = False

    @classmethod
    def as_form(
        cls,
        name: str = Form(..., min_length=1, max_length=255),
        description: str = Form(...),
        rich_description: str = Form("", alias="richDescription"),
        brand: str = Form("", max_length=255),
        price: float = Form(0, ge=0),
        category: str = Form(...),
        count_in_stock: int = Form(..., alias="countInStock", ge=0, le=255),
        rating: float = Form(0, ge=0),
        num_reviews: int = Form(0, alias="numReviews", ge=0),
        is_featured: bool = Form(False, alias="isFeatured"),
    ) -> "ProductForm":
        return cls(
            name=name,
            description=description,
            rich_description=rich_description,
            brand=brand,
            price=price,
            category=category,
            count_in_stock=count_in_stock,
            rating=rating,
            num_reviews=num_reviews,
            is_featured=is_featured,
        )


class ProductRead(BaseModel):
    """
    Product representation for clients.

    - Keys are serialized in camelCase (`countInStock`, `isFeatured`, ...).
    - `category` is the full embedded Category, or null when the reference
      no longer resolves.
    """

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=AliasGenerator(serialization_alias=to_camel),
    )

    id: uuid.UUID
    name: str
    description: str
    rich_description: str = ""
    image: str
    images: list[str] = []
    brand: str = ""
    price: float
    category: CategoryRead | None = None
    count_in_stock: int
    rating: float = 0
    num_reviews: int = 0
    is_featured: bool = False
    date_created: datetime
