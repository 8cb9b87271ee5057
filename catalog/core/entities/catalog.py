"""
Catalog entities.

Entities representing the products sold through the catalog and the
categories used to classify them.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Category:
    """
    Product category.

    Categories are shared reference entities: products point to them by id
    and never create or modify them.

    Attributes:
        id: Internal database ID (None before persistence)
        name: Display name (e.g. "Electronics")
    """

    id: Optional[int] = None
    name: str = ""


@dataclass(frozen=True)
class Product:
    """
    Product of the catalog.

    The category set is owned by the product and is always rewritten
    wholesale on update. It is a tuple of unique categories, never None.

    Attributes:
        id: Internal database ID (None before persistence)
        name: Product name
        description: Long description
        price: Unit price (non-negative)
        img_url: Reference to the product image
        date: Release instant (UTC)
        categories: Associated categories, unique by id
    """

    id: Optional[int] = None
    name: str = ""
    description: str = ""
    price: Decimal = Decimal("0")
    img_url: Optional[str] = None
    date: Optional[datetime] = None
    categories: tuple[Category, ...] = ()

    @property
    def category_ids(self) -> tuple[int, ...]:
        """IDs of the associated categories, in stored order."""
        return tuple(category.id for category in self.categories if category.id is not None)
