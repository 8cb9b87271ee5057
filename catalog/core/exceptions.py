"""
Taxonomie des erreurs du domaine.

Les services levent ces exceptions ; la couche HTTP les traduit en codes
de statut (voir catalog.web.errors). Aucun type d'erreur du stockage
ne doit remonter au-dela des services.
"""

from typing import Optional


class CatalogError(Exception):
    """Classe de base des erreurs du domaine."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NotFoundError(CatalogError):
    """L'identifiant demande n'existe pas (lecture ou chargement avant mutation)."""

    def __init__(self, entity: str, identifier: object) -> None:
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity} not found: {identifier}")


class ConflictError(CatalogError):
    """Mutation refusee par une contrainte d'integrite (entite encore referencee, doublon)."""

    def __init__(self, message: str, entity: Optional[str] = None, identifier: object = None) -> None:
        self.entity = entity
        self.identifier = identifier
        super().__init__(message)


class UnresolvedReferenceError(CatalogError):
    """Une entite associee (categorie, role) referencee par id n'existe pas."""

    def __init__(self, entity: str, identifier: object) -> None:
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"Referenced {entity} does not exist: {identifier}")


class IdentityUnknownError(CatalogError):
    """Aucune identite ne correspond a l'identifiant de connexion (ou secret invalide)."""

    def __init__(self, login: str) -> None:
        self.login = login
        super().__init__("Unknown identity")


__all__ = [
    "CatalogError",
    "ConflictError",
    "IdentityUnknownError",
    "NotFoundError",
    "UnresolvedReferenceError",
]
