"""
Fonctions de conversion entre entites du domaine et vues (DTO).

Fonctions pures : aucune n'accede au stockage. La resolution des
associations (categories, roles) par id est faite par les services, qui
passent ici des entites deja resolues.
"""

from collections.abc import Iterable
from dataclasses import replace
from datetime import timezone
from typing import Optional, TypeVar

from catalog.core.entities import Category, Product, Role, User
from catalog.services.dto import (
    CategoryView,
    ProductView,
    RoleView,
    UserCredentials,
    UserView,
)

_E = TypeVar("_E", Category, Role)


def category_to_view(category: Category) -> CategoryView:
    return CategoryView(id=category.id, name=category.name)


def view_to_category(view: CategoryView, category_id: Optional[int] = None) -> Category:
    """Construit une categorie depuis sa vue ; category_id prime sur view.id."""
    return Category(id=category_id if category_id is not None else view.id, name=view.name)


def product_to_view(product: Product) -> ProductView:
    """Convertit un produit (categories comprises) en vue."""
    return ProductView(
        id=product.id,
        name=product.name,
        description=product.description,
        price=product.price,
        img_url=product.img_url,
        date=product.date,
        categories=[category_to_view(category) for category in product.categories],
    )


def apply_product_view(
    product: Product, view: ProductView, categories: Iterable[Category]
) -> Product:
    """
    Recopie les champs modifiables d'une vue dans une nouvelle valeur Product.

    L'identifiant de `product` est conserve ; l'ensemble des categories est
    entierement remplace par `categories`.

    Args :
        product : Valeur de depart (Product() pour une creation)
        view : Vue portant les nouvelles valeurs
        categories : Categories deja resolues

    Retourne :
        Le nouveau Product, pret pour un save unique
    """
    release = view.date
    if release is not None and release.tzinfo is None:
        release = release.replace(tzinfo=timezone.utc)
    return replace(
        product,
        name=view.name,
        description=view.description,
        price=view.price,
        img_url=view.img_url,
        date=release,
        categories=unique_by_id(categories),
    )


def role_to_view(role: Role) -> RoleView:
    return RoleView(id=role.id, authority=role.authority)


def user_to_view(user: User) -> UserView:
    """Convertit un utilisateur en vue, sans empreinte de mot de passe."""
    return UserView(
        id=user.id,
        first_name=user.first_name,
        last_name=user.last_name,
        email=user.email,
        roles=[role_to_view(role) for role in user.roles],
    )


def apply_user_view(user: User, view: UserView, roles: Iterable[Role]) -> User:
    """Recopie nom, prenom et e-mail ; remplace entierement les roles."""
    return replace(
        user,
        first_name=view.first_name,
        last_name=view.last_name,
        email=view.email.strip().lower(),
        roles=unique_by_id(roles),
    )


def user_to_credentials(user: User) -> UserCredentials:
    """Vue porteuse d'empreinte, reservee au chemin d'authentification."""
    return UserCredentials(
        id=user.id,
        username=user.email,
        password_hash=user.password_hash,
        authorities=user.authorities,
    )


def referenced_ids(views: Iterable[CategoryView | RoleView]) -> list[int]:
    """
    Identifiants references par une liste de vues, doublons retires.

    Une reference sans id ne designe aucune entite : elle est conservee
    comme None pour etre signalee par la resolution.
    """
    seen: set[Optional[int]] = set()
    ids = []
    for view in views:
        if view.id in seen:
            continue
        seen.add(view.id)
        ids.append(view.id)
    return ids


def unique_by_id(items: Iterable[_E]) -> tuple[_E, ...]:
    """Retire les doublons (meme id) en conservant le premier."""
    seen = set()
    result = []
    for item in items:
        if item.id in seen:
            continue
        seen.add(item.id)
        result.append(item)
    return tuple(result)
