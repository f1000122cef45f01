# app/routers/products.py
import uuid

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from app.core.auth import require_admin
from app.database import get_session
from app.repositories.product_repo import ProductRepository
from app.schemas.product import (
    CategoryCreate,
    CategoryRead,
    ProductImageUpdate,
    ProductImageUpdated,
    ProductRead,
)
from app.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["Products"])
categories_router = APIRouter(prefix="/categories", tags=["Categories"])

repo = ProductRepository()
service = ProductService(repo)


# -------- Products --------


@router.get("", response_model=list[ProductRead])
def list_products(session: Session = Depends(get_session)):
    """
    Full menu with category names.
    """
    return service.list_products(session)


@router.post("/{product_id}/image", response_model=ProductImageUpdated)
def update_product_image(
    product_id: uuid.UUID,
    payload: ProductImageUpdate,
    session: Session = Depends(get_session),
):
    """
    Point a product at another image file under /images.
    """
    product = service.update_image(session, product_id, payload.image)
    return ProductImageUpdated(product=product)


# -------- Categories --------


@categories_router.get("", response_model=list[CategoryRead])
def list_categories(session: Session = Depends(get_session)):
    return service.list_categories(session)


@categories_router.post(
    "",
    response_model=CategoryRead,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_category(
    payload: CategoryCreate,
    session: Session = Depends(get_session),
):
    """
    Add a menu category (admin only). 409 if the name exists.
    """
    return service.create_category(session, payload)
