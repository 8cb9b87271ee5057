"""
Implementations SQLModel des repositories.

Ce module contient les implementations concretes des interfaces repository
definies dans catalog/core/ports/repositories.py, utilisant SQLModel pour
la persistance.

Chaque repository :
- Herite de l'interface ABC correspondante du domaine
- Recoit une session SQLModel via injection de dependances
- Convertit entre entites de domaine (dataclass) et modeles DB (SQLModel)
- Signale les echecs attendus par None ou StoreOutcome ; une ecriture refusee
  par une contrainte leve StoreConstraintError, jamais une erreur SQLAlchemy
"""

from catalog.infrastructure.persistence.repositories.category_repository import (
    SQLModelCategoryRepository,
)
from catalog.infrastructure.persistence.repositories.product_repository import (
    SQLModelProductRepository,
)
from catalog.infrastructure.persistence.repositories.role_repository import (
    SQLModelRoleRepository,
)
from catalog.infrastructure.persistence.repositories.user_repository import (
    SQLModelUserRepository,
)

__all__ = [
    "SQLModelCategoryRepository",
    "SQLModelProductRepository",
    "SQLModelRoleRepository",
    "SQLModelUserRepository",
]
