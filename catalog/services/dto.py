"""
Vues (DTO) exposees par les services a la couche de transport.

Les vues sont des modeles pydantic decouples des entites persistees. Elles
portent les contraintes de forme (longueurs, prix positif) verifiees par la
couche HTTP ; les services ne revalident rien. Les champs sont serialises en
camelCase (imgUrl, firstName) et acceptent aussi leur nom Python.
"""

from datetime import datetime
from decimal import Decimal
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

# Prix serialise en nombre JSON (pydantic produit une chaine par defaut)
Price = Annotated[
    Decimal,
    Field(ge=0, max_digits=12, decimal_places=2),
    PlainSerializer(float, return_type=float, when_used="json"),
]

_VIEW_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    from_attributes=True,
)


class CategoryView(BaseModel):
    """Categorie telle qu'exposee au client."""

    model_config = _VIEW_CONFIG

    id: Optional[int] = None
    name: str = Field(default="", max_length=100)


class ProductView(BaseModel):
    """
    Produit tel qu'expose au client.

    En entree, seuls les identifiants de `categories` sont utilises :
    les categories sont resolues par id, jamais creees.
    """

    model_config = _VIEW_CONFIG

    id: Optional[int] = None
    name: str = Field(min_length=1, max_length=120)
    description: str = ""
    price: Price
    img_url: Optional[str] = None
    date: Optional[datetime] = None
    categories: list[CategoryView] = Field(default_factory=list)


class RoleView(BaseModel):
    """Role tel qu'expose au client."""

    model_config = _VIEW_CONFIG

    id: Optional[int] = None
    authority: str = ""


class UserView(BaseModel):
    """Utilisateur tel qu'expose au client (jamais de mot de passe)."""

    model_config = _VIEW_CONFIG

    id: Optional[int] = None
    first_name: str = Field(min_length=1, max_length=80)
    last_name: str = Field(default="", max_length=80)
    email: str = Field(min_length=3, max_length=254, pattern=r"^[^@\s]+@[^@\s]+$")
    roles: list[RoleView] = Field(default_factory=list)


class UserInsertView(UserView):
    """Creation d'utilisateur : porte le mot de passe en clair, hache par le service."""

    password: str = Field(min_length=6, repr=False)


class UserUpdateView(UserView):
    """Mise a jour d'utilisateur : le mot de passe n'est pas modifiable par ce chemin."""


class UserCredentials(BaseModel):
    """Identite et empreinte destinees au collaborateur d'authentification."""

    model_config = ConfigDict(frozen=True)

    id: int
    username: str
    password_hash: str = Field(repr=False)
    authorities: tuple[str, ...] = ()
