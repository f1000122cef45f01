# app/services/product_service.py
import uuid

from fastapi import HTTPException, status
from sqlmodel import Session

from app.models.product import Category, Product
from app.repositories.product_repo import ProductRepository
from app.schemas.product import CategoryCreate, ProductRead

UNCATEGORIZED = "Uncategorized"
DEFAULT_PRODUCT_IMAGE = "default_food.jpg"


def to_product_read(product: Product, category: Category | None) -> ProductRead:
    return ProductRead(
        id=product.id,
        name=product.name,
        price=product.price,
        category=category.name if category else UNCATEGORIZED,
        stock=product.stock,
        image=product.image or DEFAULT_PRODUCT_IMAGE,
    )


class ProductService:
    """
    Business logic for the menu (products & categories).

    Responsibilities:
      - flatten products for the till (category name, fallback image)
      - category name uniqueness
      - image filename updates
    """

    def __init__(self, repo: ProductRepository):
        self.repo = repo

    # ----- Products -----

    def list_products(self, session: Session) -> list[ProductRead]:
        rows = self.repo.list_with_categories(session)
        return [to_product_read(product, category) for product, category in rows]

    def update_image(
        self,
        session: Session,
        product_id: uuid.UUID,
        image: str,
    ) -> ProductRead:
        """
        Point a product at a different image file.

        Raises:
            HTTPException(404): if the product does not exist.
        """
        product = self.repo.get_by_id(session, product_id)
        if not product:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Product not found",
            )

        product.image = image
        product = self.repo.update(session, product)

        category = None
        if product.category_id:
            category = self.repo.get_category(session, product.category_id)
        return to_product_read(product, category)

    # ----- Categories -----

    def list_categories(self, session: Session) -> list[Category]:
        return self.repo.list_categories(session)

    def create_category(self, session: Session, payload: CategoryCreate) -> Category:
        """
        Raises:
            HTTPException(409): if a category with this name exists.
        """
        if self.repo.get_category_by_name(session, payload.name) is not None:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Category already exists",
            )
        return self.repo.create_category(session, Category(name=payload.name))
