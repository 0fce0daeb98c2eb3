# app/services/category_service.py
import logging
import uuid

from fastapi import status
from sqlmodel import Session

from app.core.responses import ApiError, success_response
from app.models.category import Category
from app.repositories.category_repo import CategoryRepository
from app.schemas.category import CategoryCreate, CategoryUpdate

logger = logging.getLogger(__name__)


class CategoryService:
    """
    Business logic for Category.

    Deleting a category does not touch the products that reference it.
    """

    def __init__(self, repo: CategoryRepository):
        self.repo = repo

    @staticmethod
    def _parse_id(raw: str) -> uuid.UUID:
        try:
            return uuid.UUID(raw)
        except ValueError:
            raise ApiError(status.HTTP_400_BAD_REQUEST, "Invalid category id")

    def list_categories(self, session: Session) -> list[Category]:
        return self.repo.list_all(session)

    def get_category(self, session: Session, category_id: str) -> Category | None:
        try:
            parsed = uuid.UUID(category_id)
        except ValueError:
            return None
        return self.repo.get_by_id(session, parsed)

    def _get_existing(self, session: Session, category_id: str) -> Category:
        category = self.repo.get_by_id(session, self._parse_id(category_id))
        if category is None:
            raise ApiError(
                status.HTTP_404_NOT_FOUND,
                "The category with given ID does not exist",
            )
        return category

    def create_category(self, session: Session, payload: CategoryCreate) -> Category:
        category = Category(name=payload.name, icon=payload.icon, color=payload.color)
        created = self.repo.create(session, category)
        logger.info("Created category %s (%s)", created.id, created.name)
        return created

    def update_category(
        self,
        session: Session,
        category_id: str,
        payload: CategoryUpdate,
    ) -> Category:
        """
        Partial update: only fields present in the payload are changed.
        """
        category = self._get_existing(session, category_id)
        category.sqlmodel_update(payload.model_dump(exclude_unset=True))
        return self.repo.update(session, category)

    def delete_category(self, session: Session, category_id: str) -> dict[str, object]:
        category = self.repo.get_by_id(session, self._parse_id(category_id))
        if category is None:
            raise ApiError(status.HTTP_404_NOT_FOUND, "category not found!")

        self.repo.delete(session, category)
        logger.info("Deleted category %s", category_id)
        return success_response("the category is deleted!")
