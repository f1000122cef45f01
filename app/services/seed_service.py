# app/services/seed_service.py
import logging

from sqlmodel import Session

from app.core.security import hash_password
from app.models.product import Category, Product
from app.models.user import User
from app.repositories.product_repo import ProductRepository
from app.repositories.user_repo import UserRepository

logger = logging.getLogger(__name__)

DEFAULT_STOCK = 100

DEFAULT_CATEGORIES: tuple[str, ...] = (
    "Rice",
    "Sizzling",
    "Party",
    "Drink",
    "Cafe",
    "Milk",
    "Frappe",
    "Snack & Appetizer",
    "Budget Meals Served with Rice",
    "Specialties",
)

DEFAULT_USERS: tuple[tuple[str, str, str], ...] = (
    # username, password, role
    ("admin", "admin123", "admin"),
    ("staff", "staff123", "staff"),
)

# (name, price, category, image)
DEFAULT_PRODUCTS: tuple[tuple[str, float, str, str], ...] = (
    ("Korean Spicy Bulgogi (Pork)", 158, "Rice", "korean_spicy_bulgogi.jpg"),
    ("Korean Salt and Pepper (Pork)", 158, "Rice", "korean_salt_pepper_pork.jpg"),
    ("Crispy Pork Lechon Kawali", 158, "Rice", "lechon_kawali.jpg"),
    ("Cream Dory Fish Fillet", 138, "Rice", "cream_dory.jpg"),
    ("Buttered Honey Chicken", 128, "Rice", "buttered_honey_chicken.jpg"),
    ("Buttered Spicy Chicken", 128, "Rice", "buttered_spicy_chicken.jpg"),
    ("Chicken Adobo", 128, "Rice", "chicken_adobo.jpg"),
    ("Pork Shanghai", 128, "Rice", "pork_shanghai.jpg"),

    ("Sizzling Pork Sisig", 168, "Sizzling", "pork_sisig.jpg"),
    ("Sizzling Liempo", 168, "Sizzling", "liempo.jpg"),
    ("Sizzling Porkchop", 148, "Sizzling", "porkchop.jpg"),
    ("Sizzling Fried Chicken", 148, "Sizzling", "fried_chicken.jpg"),

    ("Pancit Bihon (S)", 300, "Party", "pancit_bihon_small.jpg"),
    ("Pancit Bihon (M)", 500, "Party", "pancit_bihon_medium.jpg"),
    ("Pancit Bihon (L)", 700, "Party", "pancit_bihon_large.jpg"),
    ("Pancit Canton (S)", 300, "Party", "pancit_canton_small.jpg"),
    ("Pancit Canton (M)", 500, "Party", "pancit_canton_medium.jpg"),
    ("Pancit Canton (L)", 700, "Party", "pancit_canton_large.jpg"),
    ("Spaghetti (S)", 400, "Party", "spaghetti_small.jpg"),
    ("Spaghetti (M)", 700, "Party", "spaghetti_medium.jpg"),
    ("Spaghetti (L)", 1000, "Party", "spaghetti_large.jpg"),

    ("Cucumber Lemonade (Glass)", 38, "Drink", "cucumber_lemonade.jpg"),
    ("Cucumber Lemonade (Pitcher)", 108, "Drink", "cucumber_lemonade_pitcher.jpg"),
    ("Blue Lemonade (Glass)", 38, "Drink", "blue_lemonade.jpg"),
    ("Blue Lemonade (Pitcher)", 108, "Drink", "blue_lemonade_pitcher.jpg"),
    ("Red Tea (Glass)", 38, "Drink", "red_tea.jpg"),
    ("Soda (Mismo)", 28, "Drink", "soda.jpg"),
    ("Soda 1.5L", 118, "Drink", "soda_1.5L.jpg"),

    ("Cafe Americano Tall", 88, "Cafe", "cafe_americano.jpg"),
    ("Cafe Americano Grande", 108, "Cafe", "cafe_americano_grande.jpg"),
    ("Cafe Latte Tall", 108, "Cafe", "cafe_latte.jpg"),
    ("Cafe Latte Grande", 128, "Cafe", "cafe_latte_grande.jpg"),
    ("Caramel Macchiato Tall", 108, "Cafe", "caramel_macchiato.jpg"),
    ("Caramel Macchiato Grande", 128, "Cafe", "caramel_macchiato_grande.jpg"),

    ("Milk Tea Regular HC", 68, "Milk", "milk_tea.jpg"),
    ("Milk Tea Regular MC", 88, "Milk", "milk_tea_mc.jpg"),
    ("Matcha Green Tea HC", 78, "Milk", "matcha_green_tea.jpg"),
    ("Matcha Green Tea MC", 88, "Milk", "matcha_green_tea_mc.jpg"),

    ("Matcha Green Tea HC", 108, "Frappe", "matcha_frappe.png"),
    ("Matcha Green Tea MC", 138, "Frappe", "matcha_frappe_mc.png"),
    ("Cookies & Cream HC", 98, "Frappe", "cookies_cream_frappe.png"),
    ("Cookies & Cream MC", 128, "Frappe", "cookies_cream_frappe_mc.png"),
    ("Strawberry&Cream HC", 180, "Frappe", "Strawberr_Cream_frappe_HC.png"),

    ("Cheesy Nachos", 88, "Snack & Appetizer", "cheesy_nachos.jpg"),
    ("Nachos Supreme", 108, "Snack & Appetizer", "nachos_supreme.jpg"),
    ("French fries", 58, "Snack & Appetizer", "french_fries.jpg"),
    ("Clubhouse Sandwich", 118, "Snack & Appetizer", "clubhouse_sandwich.jpg"),
    ("Fish and Fries", 128, "Snack & Appetizer", "fish_fries.jpg"),
    ("Cheesy Dynamite Lumpia", 88, "Snack & Appetizer", "cheesy_dynamite.jpg"),

    ("Fried Chicken", 78, "Budget Meals Served with Rice", "fried_chicken_meal.jpg"),
    ("Buttered Honey Chicken", 78, "Budget Meals Served with Rice", "buttered_honey_chicken_meal.jpg"),
    ("Buttered Spicy Chicken", 78, "Budget Meals Served with Rice", "buttered_spicy_chicken_meal.jpg"),
    ("Tinapa Rice", 108, "Budget Meals Served with Rice", "tinapa_rice.jpg"),
    ("Fried Rice", 128, "Budget Meals Served with Rice", "fried_rice.jpg"),
    ("Plain Rice", 18, "Budget Meals Served with Rice", "plain_rice.jpg"),

    ("Sinigang (PORK)", 188, "Specialties", "sinigang_pork.jpg"),
    ("Sinigang (Shrimp)", 178, "Specialties", "sinigang_shrimp.jpg"),
    ("Paknet (Pakbet w/ Bagnet)", 188, "Specialties", "pakbet_bagnet.jpg"),
    ("Buttered Shrimp", 108, "Specialties", "buttered_shrimp.jpg"),
    ("Special Bulalo (good for 2-3 Persons)", 128, "Specialties", "bulalo.jpg"),
    ("Special Bulalo Buy 1 Take 1 (good for 6-8 Persons)", 18, "Specialties", "bulalo_buy1take1.jpg"),
)


class SeedService:
    """
    First-run data: menu categories, one admin and one staff account,
    and the default menu.

    Each step only runs when its table (or role) is still empty, so
    calling this on every startup is safe.
    """

    def __init__(
        self,
        product_repo: ProductRepository,
        user_repo: UserRepository,
    ):
        self.product_repo = product_repo
        self.user_repo = user_repo

    def seed_defaults(self, session: Session) -> None:
        self._seed_categories(session)
        self._seed_users(session)
        self._seed_products(session)

    def _seed_categories(self, session: Session) -> None:
        if self.product_repo.count_categories(session) > 0:
            return

        logger.info("Initializing database with default categories...")
        for name in DEFAULT_CATEGORIES:
            if self.product_repo.get_category_by_name(session, name) is None:
                session.add(Category(name=name))
        session.commit()
        logger.info("Default categories created.")

    def _seed_users(self, session: Session) -> None:
        for username, password, role in DEFAULT_USERS:
            if self.user_repo.count_by_role(session, role) > 0:
                continue
            if self.user_repo.get_by_username(session, username) is not None:
                continue
            self.user_repo.create(
                session,
                User(
                    username=username,
                    password_hash=hash_password(password),
                    role=role,
                ),
            )
            logger.info("Default %s user created: %s", role, username)

    def _seed_products(self, session: Session) -> None:
        if self.product_repo.count(session) > 0:
            return

        category_ids = {c.name: c.id for c in self.product_repo.list_categories(session)}

        # Upsert by name: a later entry with the same name replaces an
        # earlier one (e.g. the Frappe "Matcha Green Tea HC").
        for name, price, category, image in DEFAULT_PRODUCTS:
            product = self.product_repo.get_by_name(session, name)
            if product is None:
                product = Product(name=name, price=price)
            product.price = price
            product.category_id = category_ids.get(category)
            product.stock = DEFAULT_STOCK
            product.image = image
            session.add(product)
            session.flush()
        session.commit()
        logger.info(
            "Created %d default products.",
            len({name for name, *_ in DEFAULT_PRODUCTS}),
        )
