# app/repositories/product_repo.py
import uuid

from sqlalchemy import func
from sqlmodel import Session, col, select

from app.models.product import Product


class ProductRepository:
    """
    Data access layer for Product.

    - Pure DB operations (CRUD + queries).
    - No FastAPI, no business logic.
    - `Product.category` is eagerly joined, so every row comes back
      category-expanded.
    """

    def get_by_id(self, session: Session, product_id: uuid.UUID) -> Product | None:
        return session.get(Product, product_id)

    def list_all(
        self,
        session: Session,
        category_ids: list[uuid.UUID] | None = None,
    ) -> list[Product]:
        """
        All products, optionally restricted to the given categories.

        An empty `category_ids` list matches nothing; `None` means no filter.
        """
        stmt = select(Product)
        if category_ids is not None:
            stmt = stmt.where(col(Product.category_id).in_(category_ids))
        stmt = stmt.order_by(Product.date_created)
        return session.exec(stmt).all()

    def count(self, session: Session) -> int:
        stmt = select(func.count()).select_from(Product)
        return session.exec(stmt).one()

    def list_featured(self, session: Session, limit: int = 0) -> list[Product]:
        """
        Featured products. `limit=0` returns all of them.
        """
        stmt = (
            select(Product)
            .where(Product.is_featured == True)  # noqa: E712
            .order_by(Product.date_created)
        )
        if limit > 0:
            stmt = stmt.limit(limit)
        return session.exec(stmt).all()

    def create(self, session: Session, product: Product) -> Product:
        session.add(product)
        session.commit()
        session.refresh(product)
        return product

    def update(self, session: Session, product: Product) -> Product:
        session.add(product)
        session.commit()
        session.refresh(product)
        return product

    def delete(self, session: Session, product: Product) -> None:
        session.delete(product)
        session.commit()
