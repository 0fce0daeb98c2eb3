# app/repositories/category_repo.py
import uuid

from sqlmodel import Session, select

from app.models.category import Category


class CategoryRepository:
    """
    Data access layer for Category.

    - Pure DB operations (CRUD + queries).
    - No FastAPI, no business logic.
    """

    def get_by_id(self, session: Session, category_id: uuid.UUID) -> Category | None:
        return session.get(Category, category_id)

    def list_all(self, session: Session) -> list[Category]:
        stmt = select(Category).order_by(Category.name)
        return session.exec(stmt).all()

    def create(self, session: Session, category: Category) -> Category:
        session.add(category)
        session.commit()
        session.refresh(category)
        return category

    def update(self, session: Session, category: Category) -> Category:
        session.add(category)
        session.commit()
        session.refresh(category)
        return category

    def delete(self, session: Session, category: Category) -> None:
        session.delete(category)
        session.commit()
