# app/routers/categories.py
from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.core.auth import require_admin
from app.core.responses import send_response
from app.database import get_session
from app.repositories.category_repo import CategoryRepository
from app.schemas.category import CategoryCreate, CategoryRead, CategoryUpdate
from app.services.category_service import CategoryService

router = APIRouter(prefix="/categories", tags=["Categories"])

repo = CategoryRepository()
service = CategoryService(repo)


@router.get("", response_model=list[CategoryRead])
def list_categories(session: Session = Depends(get_session)):
    return send_response(
        service.list_categories(session), "The category list is empty"
    )


@router.get("/{category_id}", response_model=CategoryRead)
def get_category(
    category_id: str,
    session: Session = Depends(get_session),
):
    return send_response(
        service.get_category(session, category_id),
        "The category with given ID does not exist",
    )


@router.post(
    "",
    response_model=CategoryRead,
    dependencies=[Depends(require_admin)],
)
def create_category(
    payload: CategoryCreate,
    session: Session = Depends(get_session),
):
    """
    Create a category (admin only).
    """
    return service.create_category(session, payload)


@router.put(
    "/{category_id}",
    response_model=CategoryRead,
    dependencies=[Depends(require_admin)],
)
def update_category(
    category_id: str,
    payload: CategoryUpdate,
    session: Session = Depends(get_session),
):
    """
    Update a category (admin only). Omitted fields are kept.
    """
    return service.update_category(session, category_id, payload)


@router.delete(
    "/{category_id}",
    dependencies=[Depends(require_admin)],
)
def delete_category(
    category_id: str,
    session: Session = Depends(get_session),
) -> dict[str, object]:
    """
    Delete a category (admin only).

    Products that reference it are not modified.
    """
    return service.delete_category(session, category_id)
