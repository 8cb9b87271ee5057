"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) définissant les contrats pour la persistance des données.
Les implémentations (adaptateurs) fourniront les mécanismes de stockage concrets
(SQLite via SQLModel, mocks pour les tests, etc.).

Les échecs attendus du stockage ne sont pas signalés par exception : une recherche
retourne None si l'entité est absente, et une suppression retourne un StoreOutcome
que le service interprète explicitement.

Une écriture refusée par une contrainte d'intégrité (référence disparue ou
valeur unique déjà prise entre la vérification et l'écriture) est signalée
par StoreConstraintError, type du port et non du moteur de stockage.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from enum import Enum
from typing import Optional

from catalog.core.entities.account import Role, User
from catalog.core.entities.catalog import Category, Product
from catalog.core.value_objects import Page, PageRequest, ProductFilter


class StoreOutcome(Enum):
    """Résultat d'une mutation destructive au niveau du stockage."""

    DELETED = "deleted"
    NOT_FOUND = "not_found"
    CONSTRAINT_VIOLATION = "constraint_violation"


class ViolatedConstraint(Enum):
    """Nature de la contrainte d'intégrité violée par une écriture."""

    FOREIGN_KEY = "foreign_key"
    UNIQUE = "unique"


class StoreConstraintError(Exception):
    """Écriture annulée par le stockage (rollback effectué)."""

    def __init__(self, constraint: ViolatedConstraint, detail: str = "") -> None:
        self.constraint = constraint
        self.detail = detail
        super().__init__(f"{constraint.value}: {detail}" if detail else constraint.value)


class ICategoryRepository(ABC):
    """
    Interface de stockage des catégories.

    Définit les opérations pour persister et récupérer les entités Category.
    """

    @abstractmethod
    def get_by_id(self, category_id: int) -> Optional[Category]:
        """Récupère une catégorie par son ID."""
        ...

    @abstractmethod
    def list_all(self) -> list[Category]:
        """Liste toutes les catégories, triées par nom."""
        ...

    @abstractmethod
    def save(self, category: Category) -> Category:
        """Sauvegarde une catégorie (insertion si id absent, sinon mise à jour)."""
        ...

    @abstractmethod
    def delete_by_id(self, category_id: int) -> StoreOutcome:
        """Supprime une catégorie. Échoue si elle est encore référencée."""
        ...


class IProductRepository(ABC):
    """
    Interface de stockage des produits.

    Définit les opérations pour persister et récupérer les entités Product,
    y compris la recherche paginée et l'hydratation groupée des catégories.
    """

    @abstractmethod
    def get_by_id(self, product_id: int) -> Optional[Product]:
        """Récupère un produit par son ID, catégories chargées."""
        ...

    @abstractmethod
    def find_page(self, criteria: ProductFilter, page_request: PageRequest) -> Page[Product]:
        """
        Recherche paginée des produits.

        Les produits retournés n'ont pas encore leurs catégories : utiliser
        hydrate_categories() sur le contenu de la page.

        Args :
            criteria : Filtre catégorie / fragment de nom
            page_request : Page, taille et tri demandés

        Retourne :
            La page de produits et le nombre total de correspondances
        """
        ...

    @abstractmethod
    def hydrate_categories(self, products: Sequence[Product]) -> list[Product]:
        """
        Charge les catégories de tous les produits en une seule requête.

        Retourne :
            Les produits avec leurs catégories, dans le même ordre
        """
        ...

    @abstractmethod
    def save(self, product: Product) -> Product:
        """
        Sauvegarde un produit et réécrit ses liens de catégories.

        Les champs et les liens sont écrits dans une seule transaction.

        Raises:
            StoreConstraintError: Catégorie disparue (FOREIGN_KEY)
        """
        ...

    @abstractmethod
    def delete_by_id(self, product_id: int) -> StoreOutcome:
        """Supprime un produit et ses liens de catégories."""
        ...


class IRoleRepository(ABC):
    """
    Interface de stockage des rôles.
    """

    @abstractmethod
    def get_by_id(self, role_id: int) -> Optional[Role]:
        """Récupère un rôle par son ID."""
        ...

    @abstractmethod
    def list_all(self) -> list[Role]:
        """Liste tous les rôles."""
        ...


class IUserRepository(ABC):
    """
    Interface de stockage des utilisateurs.

    Définit les opérations pour persister et récupérer les entités User.
    """

    @abstractmethod
    def get_by_id(self, user_id: int) -> Optional[User]:
        """Récupère un utilisateur par son ID, rôles chargés."""
        ...

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[User]:
        """Récupère un utilisateur par son e-mail, rôles chargés."""
        ...

    @abstractmethod
    def find_page(self, page_request: PageRequest) -> Page[User]:
        """Liste paginée des utilisateurs, rôles chargés en une requête groupée."""
        ...

    @abstractmethod
    def save(self, user: User) -> User:
        """
        Sauvegarde un utilisateur et réécrit ses liens de rôles.

        Raises:
            StoreConstraintError: Rôle disparu (FOREIGN_KEY) ou e-mail pris (UNIQUE)
        """
        ...

    @abstractmethod
    def delete_by_id(self, user_id: int) -> StoreOutcome:
        """Supprime un utilisateur et ses liens de rôles."""
        ...
