"""
Implementation SQLModel du repository Product.

Implemente l'interface IProductRepository pour la persistance des produits
dans la base de donnees via SQLModel.

La recherche paginee se fait en deux temps : une requete pour la page de
produits (et une pour le total), puis une requete groupee pour les categories
de tous les produits de la page (hydrate_categories).
"""

from collections import defaultdict
from collections.abc import Sequence
from dataclasses import replace
from datetime import datetime, timezone
from typing import Optional

from loguru import logger
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, func, select

from catalog.core.entities.catalog import Category, Product
from catalog.core.ports.repositories import IProductRepository, StoreOutcome
from catalog.core.value_objects import Page, PageRequest, ProductFilter, SortDirection
from catalog.infrastructure.persistence.integrity import constraint_error
from catalog.infrastructure.persistence.models import (
    CategoryModel,
    ProductCategoryLink,
    ProductModel,
)
from catalog.infrastructure.persistence.repositories.category_repository import (
    category_from_model,
)

# Champs autorises pour le tri
_SORTABLE = {
    "id": ProductModel.id,
    "name": ProductModel.name,
    "price": ProductModel.price,
    "date": ProductModel.date,
}


def _to_utc_naive(value: Optional[datetime]) -> Optional[datetime]:
    """SQLite ne conserve pas le fuseau : on stocke l'instant UTC sans tzinfo."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def _from_utc_naive(value: Optional[datetime]) -> Optional[datetime]:
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


class SQLModelProductRepository(IProductRepository):
    """
    Repository SQLModel pour les produits.

    Implemente IProductRepository avec conversion bidirectionnelle
    entre l'entite Product (domaine) et ProductModel (persistance).
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    def _to_entity(self, model: ProductModel, categories: Sequence[Category] = ()) -> Product:
        """
        Convertit un modele DB en entite domaine.

        Args :
            model : Le modele ProductModel depuis la DB
            categories : Categories deja chargees

        Retourne :
            L'entite Product correspondante
        """
        return Product(
            id=model.id,
            name=model.name,
            description=model.description,
            price=model.price,
            img_url=model.img_url,
            date=_from_utc_naive(model.date),
            categories=tuple(categories),
        )

    def _copy_fields(self, entity: Product, model: ProductModel) -> None:
        """Recopie les champs scalaires de l'entite dans le modele."""
        model.name = entity.name
        model.description = entity.description
        model.price = entity.price
        model.img_url = entity.img_url
        model.date = _to_utc_naive(entity.date)

    def get_by_id(self, product_id: int) -> Optional[Product]:
        """Recupere un produit par son ID, categories comprises."""
        model = self._session.get(ProductModel, product_id)
        if model is None:
            return None
        return self.hydrate_categories([self._to_entity(model)])[0]

    def find_page(self, criteria: ProductFilter, page_request: PageRequest) -> Page[Product]:
        """Recherche paginee par categorie et fragment de nom."""
        statement = select(ProductModel)
        if criteria.has_category:
            statement = statement.join(
                ProductCategoryLink, ProductCategoryLink.product_id == ProductModel.id
            ).where(ProductCategoryLink.category_id == criteria.category_id)
        if criteria.name:
            statement = statement.where(
                ProductModel.name.icontains(criteria.name, autoescape=True)
            )

        total = self._session.exec(select(func.count()).select_from(statement.subquery())).one()

        statement = (
            statement.order_by(*self._order_by(page_request))
            .offset(page_request.offset)
            .limit(page_request.size)
        )
        models = self._session.exec(statement).all()
        return Page(
            items=tuple(self._to_entity(model) for model in models),
            page=page_request.page,
            size=page_request.size,
            total=total,
        )

    def _order_by(self, page_request: PageRequest) -> list:
        """Clauses de tri ; l'ID departage toujours pour un ordre stable."""
        column = _SORTABLE.get(page_request.sort or "id")
        if column is None:
            logger.debug(f"Champ de tri ignore: {page_request.sort}")
            column = ProductModel.id
        clause = column.desc() if page_request.direction is SortDirection.DESC else column.asc()
        if column is ProductModel.id:
            return [clause]
        return [clause, ProductModel.id.asc()]

    def hydrate_categories(self, products: Sequence[Product]) -> list[Product]:
        """Charge les categories de tous les produits en une seule requete."""
        ids = [product.id for product in products if product.id is not None]
        if not ids:
            return list(products)

        statement = (
            select(ProductCategoryLink.product_id, CategoryModel)
            .join(CategoryModel, CategoryModel.id == ProductCategoryLink.category_id)
            .where(ProductCategoryLink.product_id.in_(ids))
            .order_by(CategoryModel.name, CategoryModel.id)
        )
        by_product: dict[int, list[Category]] = defaultdict(list)
        for product_id, model in self._session.exec(statement).all():
            by_product[product_id].append(category_from_model(model))

        return [
            replace(product, categories=tuple(by_product.get(product.id, ())))
            for product in products
        ]

    def save(self, product: Product) -> Product:
        """
        Sauvegarde un produit (insertion ou mise a jour) et reecrit ses liens.

        Champs scalaires, suppression des anciens liens et insertion des
        nouveaux sont valides par un seul commit.
        """
        existing = None
        if product.id is not None:
            existing = self._session.get(ProductModel, product.id)

        try:
            if existing:
                # Mise a jour : les anciens liens sont supprimes avant reinsertion
                model = existing
                self._copy_fields(product, model)
                self._session.add(model)
                links = self._session.exec(
                    select(ProductCategoryLink).where(ProductCategoryLink.product_id == model.id)
                ).all()
                for link in links:
                    self._session.delete(link)
            else:
                # Insertion : flush pour obtenir l'ID attribue
                model = ProductModel()
                self._copy_fields(product, model)
                self._session.add(model)
            self._session.flush()

            for category_id in dict.fromkeys(product.category_ids):
                self._session.add(ProductCategoryLink(product_id=model.id, category_id=category_id))
            self._session.commit()
        except IntegrityError as e:
            self._session.rollback()
            signal = constraint_error(e)
            if signal is None:
                raise
            raise signal from e
        except Exception:
            self._session.rollback()
            raise

        return self.get_by_id(model.id)

    def delete_by_id(self, product_id: int) -> StoreOutcome:
        """Supprime un produit et ses liens de categories."""
        model = self._session.get(ProductModel, product_id)
        if model is None:
            return StoreOutcome.NOT_FOUND
        try:
            # Les liens sont supprimes par la base (ON DELETE CASCADE)
            self._session.delete(model)
            self._session.commit()
        except IntegrityError:
            self._session.rollback()
            return StoreOutcome.CONSTRAINT_VIOLATION
        return StoreOutcome.DELETED
