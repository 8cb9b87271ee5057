"""
Service catalogue orchestrant les cas d'utilisation produits et categories.

Responsabilites:
- Recherche paginee des produits (filtre categorie + fragment de nom) suivie
  d'une hydratation groupee des categories (jamais de requete par produit)
- Lecture, creation, mise a jour et suppression des produits
- Reecriture complete de l'ensemble des categories d'un produit, chaque
  reference etant resolue par id (echec immediat si introuvable)
- CRUD des categories

Chaque ecriture resout et valide tout avant d'emettre un unique save ou
delete_by_id : une erreur ne laisse aucun etat partiel.
"""

from typing import Optional

from loguru import logger

from catalog.core.entities import Category, Product
from catalog.core.ports.repositories import ICategoryRepository, IProductRepository
from catalog.core.value_objects import Page, PageRequest, ProductFilter
from catalog.services.dto import CategoryView, ProductView
from catalog.services.errors import (
    raise_for_outcome,
    require_found,
    require_reference,
    store_constraints,
)
from catalog.services.mapping import (
    apply_product_view,
    category_to_view,
    product_to_view,
    referenced_ids,
    view_to_category,
)

PRODUCT = "Product"
CATEGORY = "Category"


class CatalogService:
    """
    Service des produits et categories.

    Example:
        service = CatalogService(
            products=SQLModelProductRepository(session),
            categories=SQLModelCategoryRepository(session),
        )

        page = service.list_products(category_id=2, name="phone", page_request=PageRequest(size=12))
        created = service.create_product(ProductView(name="Phone", price=Decimal("800"), ...))
    """

    def __init__(
        self,
        products: IProductRepository,
        categories: ICategoryRepository,
    ) -> None:
        """
        Initialise le service catalogue.

        Args:
            products: Repository des produits
            categories: Repository des categories (resolution des references)
        """
        self._products = products
        self._categories = categories

    # ------------------------------------------------------------------
    # Produits
    # ------------------------------------------------------------------

    def list_products(
        self,
        category_id: Optional[int] = None,
        name: str = "",
        page_request: Optional[PageRequest] = None,
    ) -> Page[ProductView]:
        """
        Recherche paginee des produits.

        Premiere requete : la page de produits correspondant au filtre (et le
        total). Seconde requete : les categories de tous les produits de la
        page. L'ordre des elements et les metadonnees de la premiere requete
        sont conserves tels quels.

        Args:
            category_id: Categorie requise (None ou ALL_CATEGORIES = toutes)
            name: Fragment de nom insensible a la casse ("" = tous)
            page_request: Page demandee (defaut: premiere page)

        Returns:
            Page de ProductView avec categories
        """
        criteria = ProductFilter.of(category_id, name)
        page = self._products.find_page(criteria, page_request or PageRequest())
        hydrated = self._products.hydrate_categories(page.items)
        return page.with_items(hydrated).map(product_to_view)

    def get_product(self, product_id: int) -> ProductView:
        """
        Retourne un produit avec ses categories.

        Raises:
            NotFoundError: Aucun produit avec cet id
        """
        product = require_found(self._products.get_by_id(product_id), PRODUCT, product_id)
        return product_to_view(product)

    def create_product(self, view: ProductView) -> ProductView:
        """
        Cree un produit.

        L'id eventuel de la vue est ignore : il est attribue par le stockage.

        Raises:
            UnresolvedReferenceError: Une categorie referencee n'existe pas
                (rien n'est persiste)
        """
        categories = self._resolve_categories(view.categories)
        product = apply_product_view(Product(), view, categories)
        with store_constraints(PRODUCT, None, CATEGORY, list(product.category_ids)):
            saved = self._products.save(product)
        logger.info(f"Produit cree: {saved.id} ({saved.name})")
        return product_to_view(saved)

    def update_product(self, product_id: int, view: ProductView) -> ProductView:
        """
        Met a jour un produit.

        Tous les champs modifiables sont ecrases et l'ensemble des categories
        est entierement remplace par celles de la vue (pas de fusion).
        L'identifiant n'est jamais modifie.

        Raises:
            NotFoundError: Aucun produit avec cet id
            UnresolvedReferenceError: Une categorie referencee n'existe pas
        """
        existing = require_found(self._products.get_by_id(product_id), PRODUCT, product_id)
        categories = self._resolve_categories(view.categories)
        updated = apply_product_view(existing, view, categories)
        with store_constraints(PRODUCT, product_id, CATEGORY, list(updated.category_ids)):
            saved = self._products.save(updated)
        logger.info(f"Produit mis a jour: {product_id}")
        return product_to_view(saved)

    def delete_product(self, product_id: int) -> None:
        """
        Supprime un produit.

        Raises:
            NotFoundError: Aucun produit avec cet id
            ConflictError: Le produit est encore reference ailleurs
        """
        raise_for_outcome(self._products.delete_by_id(product_id), PRODUCT, product_id)
        logger.info(f"Produit supprime: {product_id}")

    def _resolve_categories(self, views: list[CategoryView]) -> list[Category]:
        """Resout chaque categorie referencee par id, en echouant a la premiere absente."""
        return [
            require_reference(
                self._categories.get_by_id(category_id) if category_id is not None else None,
                CATEGORY,
                category_id,
            )
            for category_id in referenced_ids(views)
        ]

    # ------------------------------------------------------------------
    # Categories
    # ------------------------------------------------------------------

    def list_categories(self) -> list[CategoryView]:
        """Liste toutes les categories, triees par nom."""
        return [category_to_view(category) for category in self._categories.list_all()]

    def get_category(self, category_id: int) -> CategoryView:
        category = require_found(self._categories.get_by_id(category_id), CATEGORY, category_id)
        return category_to_view(category)

    def create_category(self, view: CategoryView) -> CategoryView:
        saved = self._categories.save(Category(name=view.name))
        logger.info(f"Categorie creee: {saved.id} ({saved.name})")
        return category_to_view(saved)

    def update_category(self, category_id: int, view: CategoryView) -> CategoryView:
        """
        Renomme une categorie.

        Raises:
            NotFoundError: Aucune categorie avec cet id
        """
        require_found(self._categories.get_by_id(category_id), CATEGORY, category_id)
        saved = self._categories.save(view_to_category(view, category_id))
        return category_to_view(saved)

    def delete_category(self, category_id: int) -> None:
        """
        Supprime une categorie.

        Raises:
            NotFoundError: Aucune categorie avec cet id
            ConflictError: Des produits referencent encore la categorie
        """
        raise_for_outcome(self._categories.delete_by_id(category_id), CATEGORY, category_id)
        logger.info(f"Categorie supprimee: {category_id}")
