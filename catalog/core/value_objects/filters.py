"""
Objets valeur de filtrage des produits.
"""

from dataclasses import dataclass
from typing import Optional

# Valeur sentinelle "toutes categories" (les identifiants reels commencent a 1)
ALL_CATEGORIES = 0


@dataclass(frozen=True)
class ProductFilter:
    """
    Critere de recherche des produits.

    Attributs:
        category_id: Categorie requise (None = toutes les categories)
        name: Fragment de nom, insensible a la casse ("" = tous)
    """

    category_id: Optional[int] = None
    name: str = ""

    @classmethod
    def of(cls, category_id: Optional[int] = None, name: Optional[str] = None) -> "ProductFilter":
        """Normalise la sentinelle ALL_CATEGORIES et un nom absent."""
        if category_id == ALL_CATEGORIES:
            category_id = None
        return cls(category_id=category_id, name=(name or "").strip())

    @property
    def has_category(self) -> bool:
        return self.category_id is not None
