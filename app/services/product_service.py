# app/services/product_service.py
import logging
import uuid

from fastapi import UploadFile, status
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from app.core.responses import ApiError, success_response, validate_existence
from app.core.storage_utils import UploadStorage
from app.models.category import Category
from app.models.product import Product
from app.repositories.category_repo import CategoryRepository
from app.repositories.product_repo import ProductRepository
from app.schemas.product import ProductForm

logger = logging.getLogger(__name__)


class ProductService:
    """
    Business logic for Product.

    Responsibilities:
      - parse path/query identifiers
      - check the referenced category exists before writing
      - hand uploads to UploadStorage and turn filenames into absolute URLs
      - map store failures to HTTP errors

    Uploaded files are never removed: if a write fails after the file was
    stored, the file stays on disk.
    """

    def __init__(self, repo: ProductRepository, category_repo: CategoryRepository):
        self.repo = repo
        self.category_repo = category_repo

    # ----- Helpers -----

    @staticmethod
    def _parse_id(raw: str | None) -> uuid.UUID | None:
        """Return the UUID for `raw`, or None if it is not a valid identifier."""
        if not raw:
            return None
        try:
            return uuid.UUID(raw.strip())
        except ValueError:
            return None

    def _get_category(self, session: Session, raw_id: str) -> Category | None:
        category_id = self._parse_id(raw_id)
        if category_id is None:
            return None
        return self.category_repo.get_by_id(session, category_id)

    @staticmethod
    def _form_fields(form: ProductForm, category: Category) -> dict[str, object]:
        """Column values taken from the submitted form."""
        fields = form.model_dump(exclude={"category"})
        fields["category_id"] = category.id
        return fields

    # ----- Reads -----

    def list_products(
        self,
        session: Session,
        categories: str | None = None,
    ) -> list[Product]:
        """
        List products, optionally filtered by a comma-separated list of
        category ids. Ids that do not parse match nothing.
        """
        category_ids = None
        if categories:
            parsed = (self._parse_id(raw) for raw in categories.split(","))
            category_ids = [cid for cid in parsed if cid is not None]
        return self.repo.list_all(session, category_ids=category_ids)

    def get_product(self, session: Session, product_id: str) -> Product | None:
        parsed = self._parse_id(product_id)
        if parsed is None:
            return None
        return self.repo.get_by_id(session, parsed)

    def count_products(self, session: Session) -> int:
        return self.repo.count(session)

    def list_featured(self, session: Session, count: int = 0) -> list[Product]:
        """
        Featured products, at most `count` of them (0 = no limit).
        """
        try:
            return self.repo.list_featured(session, limit=count)
        except SQLAlchemyError:
            session.rollback()
            logger.exception("Failed to load featured products")
            raise ApiError(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "the featured products cannot be loaded!",
            )

    # ----- Writes -----

    def create_product(
        self,
        session: Session,
        form: ProductForm,
        image: UploadFile | None,
        storage: UploadStorage,
        base_url: str,
    ) -> Product:
        """
        Create a product from a multipart form and its primary image.

        Order of checks: category, then image presence, then image type.
        The file is written only once all of them pass.
        """
        category = validate_existence(
            self._get_category(session, form.category), "Invalid Category"
        )
        validate_existence(image, "No image in the request")

        filename = storage.save(image)
        product = Product(
            image=f"{base_url}{filename}",
            **self._form_fields(form, category),
        )

        try:
            created = self.repo.create(session, product)
        except SQLAlchemyError:
            session.rollback()
            logger.exception("Failed to create product %r", form.name)
            raise ApiError(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "The product cannot be created",
            )

        logger.info("Created product %s (%s)", created.id, created.name)
        return created

    def update_product(
        self,
        session: Session,
        product_id: str,
        form: ProductForm,
        image: UploadFile | None,
        storage: UploadStorage,
        base_url: str,
    ) -> Product:
        """
        Overwrite a product with the submitted form.

        - The primary image is replaced only when a new file is uploaded.
        - The gallery is left untouched.
        """
        parsed_id = validate_existence(self._parse_id(product_id), "Invalid product id")
        category = validate_existence(
            self._get_category(session, form.category), "Invalid category"
        )
        product = validate_existence(
            self.repo.get_by_id(session, parsed_id), "Invalid product"
        )

        if image:
            product.image = f"{base_url}{storage.save(image)}"
        product.sqlmodel_update(self._form_fields(form, category))

        try:
            updated = self.repo.update(session, product)
        except SQLAlchemyError:
            session.rollback()
            logger.exception("Failed to update product %s", parsed_id)
            raise ApiError(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "the product cannot be updated!",
            )

        logger.info("Updated product %s", updated.id)
        return updated

    def update_gallery(
        self,
        session: Session,
        product_id: str,
        files: list[UploadFile],
        storage: UploadStorage,
        base_url: str,
        max_images: int = 10,
    ) -> Product:
        """
        Replace the gallery of a product with the uploaded files.

        No files => the gallery becomes empty. Previous gallery entries are
        discarded, not merged.
        """
        parsed_id = self._parse_id(product_id)
        if parsed_id is None:
            raise ApiError(status.HTTP_400_BAD_REQUEST, "Invalid Product Id")

        if len(files) > max_images:
            raise ApiError(
                status.HTTP_400_BAD_REQUEST,
                f"Too many images (max {max_images})",
            )

        # Reject the whole batch before anything is written
        for f in files:
            storage.extension_for(f.content_type)

        product = self.repo.get_by_id(session, parsed_id)
        if product is None:
            raise ApiError(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "the gallery cannot be updated!",
            )

        product.images = [f"{base_url}{storage.save(f)}" for f in files]

        try:
            updated = self.repo.update(session, product)
        except SQLAlchemyError:
            session.rollback()
            logger.exception("Failed to update gallery of product %s", parsed_id)
            raise ApiError(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "the gallery cannot be updated!",
            )

        logger.info("Replaced gallery of product %s (%d images)", updated.id, len(files))
        return updated

    def delete_product(self, session: Session, product_id: str) -> dict[str, object]:
        """
        Delete a product by id.

        - 404 if nothing matched.
        - 500 with the underlying error text if the id is malformed or the
          store fails.
        """
        try:
            product = self.repo.get_by_id(session, uuid.UUID(product_id))
            if product is not None:
                self.repo.delete(session, product)
        except (ValueError, SQLAlchemyError) as exc:
            session.rollback()
            logger.error("Failed to delete product %s: %s", product_id, exc)
            raise ApiError(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "the product cannot be deleted!",
                error=str(exc),
            )

        if product is None:
            raise ApiError(status.HTTP_404_NOT_FOUND, "product not found!")

        logger.info("Deleted product %s", product_id)
        return success_response("the product is deleted!")
