"""
Fixtures pytest partagees pour les tests du catalogue.

Ce module contient les fixtures communes utilisees dans les tests:
- Objets de test (produit "Phone" dans la categorie "Electronics", utilisateur)
- Mocks des ports (repositories, hacheur)
- Base SQLite en memoire et session SQLModel
"""

from dataclasses import replace
from datetime import datetime, timezone
from decimal import Decimal
from typing import Iterator
from unittest.mock import MagicMock

import pytest
from sqlalchemy import Engine
from sqlmodel import Session

from catalog.core.entities import Category, Product, Role, User
from catalog.core.ports.repositories import (
    ICategoryRepository,
    IProductRepository,
    IRoleRepository,
    IUserRepository,
    StoreOutcome,
)
from catalog.core.ports.security import ISecretHasher
from catalog.infrastructure.persistence.database import create_db_engine, init_db
from catalog.services.dto import CategoryView, ProductView

EXISTING_ID = 1
NON_EXISTING_ID = 1000
DEPENDENT_ID = 4


# ============================================================================
# Objets de test
# ============================================================================


@pytest.fixture
def electronics() -> Category:
    return Category(id=1, name="Electronics")


@pytest.fixture
def books() -> Category:
    return Category(id=2, name="Books")


@pytest.fixture
def phone(electronics: Category) -> Product:
    """Produit existant : Phone, categorie Electronics."""
    return Product(
        id=EXISTING_ID,
        name="Phone",
        description="Good Phone",
        price=Decimal("800.00"),
        img_url="https://img.com/img.png",
        date=datetime(2020, 10, 20, 3, 0, tzinfo=timezone.utc),
        categories=(electronics,),
    )


@pytest.fixture
def phone_view() -> ProductView:
    """Vue produit referencant la categorie 1."""
    return ProductView(
        name="Phone",
        description="Good Phone",
        price=Decimal("800.00"),
        img_url="https://img.com/img.png",
        date=datetime(2020, 10, 20, 3, 0, tzinfo=timezone.utc),
        categories=[CategoryView(id=1, name="Electronics")],
    )


@pytest.fixture
def operator() -> Role:
    return Role(id=1, authority="ROLE_OPERATOR")


@pytest.fixture
def admin() -> Role:
    return Role(id=2, authority="ROLE_ADMIN")


@pytest.fixture
def alex(operator: Role) -> User:
    """Utilisateur existant avec le role operateur."""
    return User(
        id=EXISTING_ID,
        first_name="Alex",
        last_name="Brown",
        email="alex@gmail.com",
        password_hash="hashed:123456",
        roles=(operator,),
    )


# ============================================================================
# Mocks des ports
# ============================================================================


@pytest.fixture
def mock_category_repo(electronics: Category, books: Category) -> MagicMock:
    """Categories 1 (Electronics) et 2 (Books) existent, les autres non."""
    repo = MagicMock(spec=ICategoryRepository)
    known = {electronics.id: electronics, books.id: books}
    repo.get_by_id.side_effect = known.get
    repo.list_all.return_value = [books, electronics]
    repo.save.side_effect = lambda category: category if category.id else Category(
        id=3, name=category.name
    )
    repo.delete_by_id.return_value = StoreOutcome.DELETED
    return repo


@pytest.fixture
def mock_product_repo(phone: Product) -> MagicMock:
    """
    Repository produit : seul l'id 1 existe.

    save() retourne la valeur recue (id 26 attribue a une insertion).
    delete_by_id() : 1 supprime, 1000 absent, 4 encore reference.
    """
    repo = MagicMock(spec=IProductRepository)
    repo.get_by_id.side_effect = lambda product_id: phone if product_id == EXISTING_ID else None
    repo.save.side_effect = lambda product: product if product.id else _with_id(product, 26)
    repo.hydrate_categories.side_effect = lambda products: list(products)
    repo.delete_by_id.side_effect = {
        EXISTING_ID: StoreOutcome.DELETED,
        NON_EXISTING_ID: StoreOutcome.NOT_FOUND,
        DEPENDENT_ID: StoreOutcome.CONSTRAINT_VIOLATION,
    }.get
    return repo


@pytest.fixture
def mock_role_repo(operator: Role, admin: Role) -> MagicMock:
    repo = MagicMock(spec=IRoleRepository)
    known = {operator.id: operator, admin.id: admin}
    repo.get_by_id.side_effect = known.get
    repo.list_all.return_value = [operator, admin]
    return repo


@pytest.fixture
def mock_user_repo(alex: User) -> MagicMock:
    repo = MagicMock(spec=IUserRepository)
    repo.get_by_id.side_effect = lambda user_id: alex if user_id == EXISTING_ID else None
    repo.get_by_email.side_effect = lambda email: alex if email == alex.email else None
    repo.save.side_effect = lambda user: user if user.id else _with_id(user, 2)
    repo.delete_by_id.side_effect = {
        EXISTING_ID: StoreOutcome.DELETED,
        NON_EXISTING_ID: StoreOutcome.NOT_FOUND,
        DEPENDENT_ID: StoreOutcome.CONSTRAINT_VIOLATION,
    }.get
    return repo


@pytest.fixture
def mock_hasher() -> MagicMock:
    """Hacheur previsible : "hashed:<clair>"."""
    hasher = MagicMock(spec=ISecretHasher)
    hasher.hash.side_effect = lambda plain: f"hashed:{plain}"
    hasher.verify.side_effect = lambda plain, hashed: hashed == f"hashed:{plain}"
    return hasher


def _with_id(entity, new_id: int):
    return replace(entity, id=new_id)


# ============================================================================
# Base en memoire
# ============================================================================


@pytest.fixture
def engine() -> Iterator[Engine]:
    """Engine SQLite en memoire avec les tables creees."""
    engine = create_db_engine("sqlite://")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine: Engine) -> Iterator[Session]:
    with Session(engine) as session:
        yield session
