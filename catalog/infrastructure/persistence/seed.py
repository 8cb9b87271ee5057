"""
Donnees initiales du catalogue.

Insere les roles, quelques categories et des produits de demonstration
dans une base vide. Sans effet si des roles existent deja.
"""

from datetime import datetime
from decimal import Decimal

from loguru import logger
from sqlmodel import Session, func, select

from catalog.infrastructure.persistence.models import (
    CategoryModel,
    ProductCategoryLink,
    ProductModel,
    RoleModel,
)

ROLES = ("ROLE_OPERATOR", "ROLE_ADMIN")

CATEGORIES = ("Books", "Electronics", "Computers")

# (nom, description, prix, image, categories)
PRODUCTS = (
    ("The Lord of the Rings", "Fantasy novel in three volumes.", Decimal("90.50"),
     "https://img.example.com/1-big.jpg", ("Books",)),
    ("Smart TV", "Ultra HD television with streaming apps.", Decimal("2190.00"),
     "https://img.example.com/2-big.jpg", ("Electronics", "Computers")),
    ("Macbook Pro", "Laptop with 16 GB of memory.", Decimal("1250.00"),
     "https://img.example.com/3-big.jpg", ("Computers",)),
    ("PC Gamer", "Desktop computer for gaming.", Decimal("1200.00"),
     "https://img.example.com/4-big.jpg", ("Computers",)),
    ("Phone", "Good phone.", Decimal("800.00"),
     "https://img.example.com/5-big.jpg", ("Electronics",)),
)


def seed_database(session: Session) -> bool:
    """
    Insere les donnees initiales.

    Retourne :
        True si des donnees ont ete inserees, False si la base etait deja peuplee
    """
    if session.exec(select(func.count()).select_from(RoleModel)).one():
        logger.info("Base deja initialisee, seed ignore")
        return False

    for authority in ROLES:
        session.add(RoleModel(authority=authority))

    categories = {name: CategoryModel(name=name) for name in CATEGORIES}
    session.add_all(categories.values())
    session.flush()

    release = datetime(2020, 7, 13, 20, 50, 7)  # UTC
    for name, description, price, img_url, category_names in PRODUCTS:
        product = ProductModel(
            name=name, description=description, price=price, img_url=img_url, date=release
        )
        session.add(product)
        session.flush()
        for category_name in category_names:
            session.add(
                ProductCategoryLink(product_id=product.id, category_id=categories[category_name].id)
            )

    session.commit()
    logger.info(
        f"Seed termine: {len(ROLES)} roles, {len(CATEGORIES)} categories, {len(PRODUCTS)} produits"
    )
    return True
