"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Ports repository : Contrats de persistance des données
- ICategoryRepository : Stockage des catégories
- IProductRepository : Stockage des produits (pagination, hydratation)
- IRoleRepository : Stockage des rôles
- IUserRepository : Stockage des utilisateurs
- StoreOutcome : Résultat étiqueté d'une suppression
- StoreConstraintError : Écriture refusée par une contrainte d'intégrité

Ports sécurité :
- ISecretHasher : Hachage à sens unique des mots de passe
"""

from catalog.core.ports.repositories import (
    ICategoryRepository,
    IProductRepository,
    IRoleRepository,
    IUserRepository,
    StoreConstraintError,
    StoreOutcome,
    ViolatedConstraint,
)
from catalog.core.ports.security import ISecretHasher

__all__ = [
    # Repositories
    "ICategoryRepository",
    "IProductRepository",
    "IRoleRepository",
    "IUserRepository",
    "StoreConstraintError",
    "StoreOutcome",
    "ViolatedConstraint",
    # Sécurité
    "ISecretHasher",
]
