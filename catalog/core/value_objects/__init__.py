"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- PageRequest : Page demandee (numero, taille, tri)
- Page : Tranche de resultats avec metadonnees de pagination
- SortDirection : Sens du tri (ASC, DESC)
- ProductFilter : Critere de recherche des produits (categorie, nom)
- ALL_CATEGORIES : Sentinelle "toutes categories"
"""

from catalog.core.value_objects.filters import ALL_CATEGORIES, ProductFilter
from catalog.core.value_objects.pagination import Page, PageRequest, SortDirection

__all__ = [
    "ALL_CATEGORIES",
    "Page",
    "PageRequest",
    "ProductFilter",
    "SortDirection",
]
