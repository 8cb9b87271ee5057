"""
Implementation SQLModel du repository Category.

Implemente l'interface ICategoryRepository pour la persistance des categories
dans la base de donnees via SQLModel.
"""

from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from catalog.core.entities.catalog import Category
from catalog.core.ports.repositories import ICategoryRepository, StoreOutcome
from catalog.infrastructure.persistence.models import CategoryModel


def category_from_model(model: CategoryModel) -> Category:
    """Convertit un modele DB en entite domaine."""
    return Category(id=model.id, name=model.name)


class SQLModelCategoryRepository(ICategoryRepository):
    """
    Repository SQLModel pour les categories.

    Implemente ICategoryRepository avec conversion bidirectionnelle
    entre l'entite Category (domaine) et CategoryModel (persistance).
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    def get_by_id(self, category_id: int) -> Optional[Category]:
        """Recupere une categorie par son ID."""
        model = self._session.get(CategoryModel, category_id)
        if model:
            return category_from_model(model)
        return None

    def list_all(self) -> list[Category]:
        """Liste toutes les categories, triees par nom."""
        statement = select(CategoryModel).order_by(CategoryModel.name, CategoryModel.id)
        return [category_from_model(model) for model in self._session.exec(statement).all()]

    def save(self, category: Category) -> Category:
        """Sauvegarde une categorie (insertion ou mise a jour)."""
        existing = None
        if category.id is not None:
            existing = self._session.get(CategoryModel, category.id)

        if existing:
            # Mise a jour
            existing.name = category.name
            model = existing
        else:
            # Insertion
            model = CategoryModel(name=category.name)
        self._session.add(model)
        self._session.commit()
        self._session.refresh(model)
        return category_from_model(model)

    def delete_by_id(self, category_id: int) -> StoreOutcome:
        """Supprime une categorie, refusee si des produits la referencent."""
        model = self._session.get(CategoryModel, category_id)
        if model is None:
            return StoreOutcome.NOT_FOUND
        try:
            self._session.delete(model)
            self._session.commit()
        except IntegrityError:
            self._session.rollback()
            return StoreOutcome.CONSTRAINT_VIOLATION
        return StoreOutcome.DELETED
