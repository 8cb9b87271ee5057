"""
Entités de compte utilisateur.

Entités représentant les utilisateurs du backoffice et les rôles
(autorités) qui leur sont attribués.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Role:
    """
    Rôle (autorité) attribuable à un utilisateur.

    Attributs :
        id : Identifiant base de données
        authority : Nom de l'autorité (ex: "ROLE_ADMIN")
    """

    id: Optional[int] = None
    authority: str = ""


@dataclass(frozen=True)
class User:
    """
    Utilisateur authentifiable par son e-mail.

    Le mot de passe n'est jamais conservé en clair : seule l'empreinte
    produite par le hacheur est stockée.

    Attributs :
        id : Identifiant base de données (None avant persistance)
        first_name : Prénom
        last_name : Nom
        email : Adresse e-mail unique, utilisée comme identifiant de connexion
        password_hash : Empreinte du mot de passe
        roles : Rôles attribués, uniques par id
    """

    id: Optional[int] = None
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    password_hash: str = ""
    roles: tuple[Role, ...] = ()

    @property
    def authorities(self) -> tuple[str, ...]:
        """Noms des autorités attribuées."""
        return tuple(role.authority for role in self.roles)
