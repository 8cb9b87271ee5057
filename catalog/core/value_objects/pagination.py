"""
Objets valeur de pagination.

PageRequest decrit la page demandee (numero, taille, tri) et Page transporte
une tranche de resultats avec ses metadonnees. Le numero de page commence a 0.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, replace
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class SortDirection(Enum):
    """Sens du tri."""

    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class PageRequest:
    """
    Page demandee par l'appelant.

    Attributs:
        page: Numero de page (0-indexe)
        size: Nombre d'elements par page (>= 1)
        sort: Nom du champ de tri (None = ordre par identifiant)
        direction: Sens du tri
    """

    page: int = 0
    size: int = 12
    sort: Optional[str] = None
    direction: SortDirection = SortDirection.ASC

    def __post_init__(self) -> None:
        if self.page < 0:
            raise ValueError(f"page doit etre >= 0 (recu {self.page})")
        if self.size < 1:
            raise ValueError(f"size doit etre >= 1 (recu {self.size})")

    @property
    def offset(self) -> int:
        """Index du premier element de la page."""
        return self.page * self.size

    @classmethod
    def parse(cls, page: int = 0, size: int = 12, sort: Optional[str] = None) -> "PageRequest":
        """
        Construit une PageRequest depuis les parametres de requete.

        Le tri suit la forme "champ" ou "champ,asc|desc" (ex: "name,desc").
        """
        if not sort:
            return cls(page=page, size=size)
        field_name, _, raw_direction = sort.partition(",")
        direction = SortDirection(raw_direction.strip().lower()) if raw_direction else SortDirection.ASC
        return cls(page=page, size=size, sort=field_name.strip() or None, direction=direction)


@dataclass(frozen=True)
class Page(Generic[T]):
    """
    Tranche de resultats avec ses metadonnees.

    Attributs:
        items: Elements de la page, dans l'ordre de la requete
        page: Numero de page (0-indexe)
        size: Taille de page demandee
        total: Nombre total d'elements correspondant a la requete
    """

    items: tuple[T, ...] = ()
    page: int = 0
    size: int = 12
    total: int = 0

    @property
    def total_pages(self) -> int:
        """Nombre total de pages."""
        if self.total == 0:
            return 0
        return (self.total + self.size - 1) // self.size

    @property
    def is_first(self) -> bool:
        return self.page == 0

    @property
    def is_last(self) -> bool:
        return self.page >= self.total_pages - 1

    def with_items(self, items: Sequence[U]) -> "Page[U]":
        """Remplace les elements en conservant les metadonnees."""
        return replace(self, items=tuple(items))

    def map(self, func: Callable[[T], U]) -> "Page[U]":
        """Applique func a chaque element en conservant ordre et metadonnees."""
        return self.with_items([func(item) for item in self.items])
