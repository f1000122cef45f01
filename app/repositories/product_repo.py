# app/repositories/product_repo.py
import uuid

from sqlalchemy import func
from sqlmodel import Session, select

from app.models.product import Category, Product


class ProductRepository:
    """
    Data access layer for Product & Category.

    - Pure DB operations (CRUD + queries).
    - No FastAPI, no business logic.
    """

    # ----- Products -----

    def get_by_id(self, session: Session, product_id: uuid.UUID) -> Product | None:
        return session.get(Product, product_id)

    def get_by_name(self, session: Session, name: str) -> Product | None:
        stmt = select(Product).where(Product.name == name)
        return session.exec(stmt).first()

    def list_with_categories(
        self,
        session: Session,
    ) -> list[tuple[Product, Category | None]]:
        """
        All products joined to their (optional) category.
        """
        stmt = (
            select(Product, Category)
            .join(Category, Category.id == Product.category_id, isouter=True)
            .order_by(Product.created_at)
        )
        return list(session.exec(stmt).all())

    def count(self, session: Session) -> int:
        stmt = select(func.count()).select_from(Product)
        value = session.exec(stmt).one()
        return int(value or 0)

    def total_stock(self, session: Session) -> int:
        stmt = select(func.coalesce(func.sum(Product.stock), 0))
        value = session.exec(stmt).one()
        return int(value or 0)

    def update(self, session: Session, product: Product) -> Product:
        session.add(product)
        session.commit()
        session.refresh(product)
        return product

    # ----- Categories -----

    def get_category(self, session: Session, category_id: uuid.UUID) -> Category | None:
        return session.get(Category, category_id)

    def get_category_by_name(self, session: Session, name: str) -> Category | None:
        stmt = select(Category).where(Category.name == name)
        return session.exec(stmt).first()

    def list_categories(self, session: Session) -> list[Category]:
        stmt = select(Category).order_by(Category.created_at)
        return session.exec(stmt).all()

    def count_categories(self, session: Session) -> int:
        stmt = select(func.count()).select_from(Category)
        value = session.exec(stmt).one()
        return int(value or 0)

    def create_category(self, session: Session, category: Category) -> Category:
        session.add(category)
        session.commit()
        session.refresh(category)
        return category
