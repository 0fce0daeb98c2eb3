# app/routers/products.py
from fastapi import (
    APIRouter,
    Depends,
    File,
    Path,
    Request,
    UploadFile,
)
from sqlmodel import Session

from app.core.auth import require_admin
from app.core.config import get_settings
from app.core.responses import send_response
from app.core.storage_utils import UploadStorage, get_upload_storage
from app.database import get_session
from app.repositories.category_repo import CategoryRepository
from app.repositories.product_repo import ProductRepository
from app.schemas.product import ProductForm, ProductRead
from app.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["Products"])

settings = get_settings()

repo = ProductRepository()
category_repo = CategoryRepository()
service = ProductService(repo, category_repo)


# -------- Public endpoints --------


@router.get("", response_model=list[ProductRead])
def list_products(
    session: Session = Depends(get_session),
    categories: str | None = None,
):
    """
    List products with their categories embedded.

    - `categories` is an optional comma-separated list of category ids.
    - An empty result is reported as 404.
    """
    products = service.list_products(session, categories)
    return send_response(products, "The product list is empty")


@router.get("/get/count", response_model=int)
def count_products(session: Session = Depends(get_session)):
    """
    Total number of products.
    """
    return send_response(service.count_products(session), "There are no products")


@router.get("/get/featured", response_model=list[ProductRead])
def list_all_featured_products(session: Session = Depends(get_session)):
    """
    Every featured product (same as a `count` of 0).
    """
    return service.list_featured(session)


@router.get("/get/featured/{count}", response_model=list[ProductRead])
def list_featured_products(
    count: int = Path(..., ge=0),
    session: Session = Depends(get_session),
):
    """
    Featured products, at most `count` of them.

    - A `count` of 0 returns every featured product.
    """
    return service.list_featured(session, count)


@router.get("/{product_id}", response_model=ProductRead)
def get_product(
    product_id: str,
    session: Session = Depends(get_session),
):
    """
    Get a single product by id.
    """
    product = service.get_product(session, product_id)
    return send_response(product, "The product with given ID does not exist")


# -------- Admin endpoints --------


@router.post(
    "",
    response_model=ProductRead,
    dependencies=[Depends(require_admin)],
)
def create_product(
    request: Request,
    form: ProductForm = Depends(ProductForm.as_form),
    image: UploadFile | None = File(None),
    session: Session = Depends(get_session),
    storage: UploadStorage = Depends(get_upload_storage),
):
    """
    Create a product (admin only).

    - Multipart form with the product fields plus one `image` file.
    - Accepts PNG and JPEG.
    """
    return service.create_product(
        session=session,
        form=form,
        image=image,
        storage=storage,
        base_url=storage.base_url(request),
    )


@router.put(
    "/gallery-images/{product_id}",
    response_model=ProductRead,
    dependencies=[Depends(require_admin)],
    summary="Replace the gallery images of a product",
)
def update_gallery_images(
    request: Request,
    product_id: str,
    images: list[UploadFile] | None = File(None),
    session: Session = Depends(get_session),
    storage: UploadStorage = Depends(get_upload_storage),
):
    """
    Replace the gallery of a product (admin only).

    - Up to 10 files under the `images` field.
    - The previous gallery is discarded.
    """
    return service.update_gallery(
        session=session,
        product_id=product_id,
        files=images or [],
        storage=storage,
        base_url=storage.base_url(request),
        max_images=settings.MAX_GALLERY_IMAGES,
    )


@router.put(
    "/{product_id}",
    response_model=ProductRead,
    dependencies=[Depends(require_admin)],
)
def update_product(
    request: Request,
    product_id: str,
    form: ProductForm = Depends(ProductForm.as_form),
    image: UploadFile | None = File(None),
    session: Session = Depends(get_session),
    storage: UploadStorage = Depends(get_upload_storage),
):
    """
    Overwrite a product (admin only).

    - Without a new `image` file the current image is kept.
    """
    return service.update_product(
        session=session,
        product_id=product_id,
        form=form,
        image=image,
        storage=storage,
        base_url=storage.base_url(request),
    )


@router.delete(
    "/{product_id}",
    dependencies=[Depends(require_admin)],
)
def delete_product(
    product_id: str,
    session: Session = Depends(get_session),
) -> dict[str, object]:
    """
    Delete a product (admin only).

    - Uploaded files are left on disk.
    """
    return service.delete_product(session, product_id)
