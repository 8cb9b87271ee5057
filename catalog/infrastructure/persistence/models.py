"""
Modeles SQLModel pour la base de donnees du catalogue.

Ces modeles representent les tables de la base de donnees.
Ils sont distincts des entites de domaine (dataclass dans core/entities/)
selon l'architecture hexagonale.

Tables:
- categories: Categories de produits
- products: Produits du catalogue
- product_categories: Liens produit <-> categorie (plusieurs-a-plusieurs)
- roles: Roles (autorites)
- users: Utilisateurs (e-mail unique)
- user_roles: Liens utilisateur <-> role (plusieurs-a-plusieurs)

Les liens appartiennent au produit / a l'utilisateur (suppression en cascade)
et empechent la suppression d'une categorie / d'un role encore reference.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel


class CategoryModel(SQLModel, table=True):
    """Modele representant une categorie."""

    __tablename__ = "categories"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(index=True)


class ProductModel(SQLModel, table=True):
    """
    Modele representant un produit.

    Les categories sont portees par la table de liens product_categories.
    """

    __tablename__ = "products"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(index=True)
    description: str = ""
    price: Decimal = Field(default=Decimal("0"), max_digits=12, decimal_places=2)
    img_url: str | None = None
    # Instant de sortie : UTC sans fuseau, SQLite ne conservant pas l'offset
    date: datetime | None = Field(default=None, sa_type=DateTime(timezone=False))


class ProductCategoryLink(SQLModel, table=True):
    """Lien produit <-> categorie."""

    __tablename__ = "product_categories"

    product_id: int = Field(foreign_key="products.id", primary_key=True, ondelete="CASCADE")
    category_id: int = Field(
        foreign_key="categories.id", primary_key=True, index=True, ondelete="RESTRICT"
    )


class RoleModel(SQLModel, table=True):
    """Modele representant un role."""

    __tablename__ = "roles"

    id: int | None = Field(default=None, primary_key=True)
    authority: str = Field(unique=True)


class UserModel(SQLModel, table=True):
    """Modele representant un utilisateur. password contient l'empreinte, jamais le clair."""

    __tablename__ = "users"

    id: int | None = Field(default=None, primary_key=True)
    first_name: str
    last_name: str = ""
    email: str = Field(unique=True, index=True)
    password: str


class UserRoleLink(SQLModel, table=True):
    """Lien utilisateur <-> role."""

    __tablename__ = "user_roles"

    user_id: int = Field(foreign_key="users.id", primary_key=True, ondelete="CASCADE")
    role_id: int = Field(foreign_key="roles.id", primary_key=True, ondelete="RESTRICT")
