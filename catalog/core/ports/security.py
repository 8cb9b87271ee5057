"""
Port de hachage des secrets (mots de passe).
"""

from abc import ABC, abstractmethod


class ISecretHasher(ABC):
    """Hachage à sens unique des mots de passe."""

    @abstractmethod
    def hash(self, plain: str) -> str:
        """Retourne l'empreinte du secret en clair."""
        ...

    @abstractmethod
    def verify(self, plain: str, hashed: str) -> bool:
        """Vérifie un secret en clair contre une empreinte stockée."""
        ...
