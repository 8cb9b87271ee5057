"""
Service des comptes utilisateurs.

Responsabilites:
- Liste paginee, lecture par id ou par e-mail
- Creation avec hachage du mot de passe (seule l'empreinte est stockee)
- Mise a jour des informations et remplacement complet des roles
  (le mot de passe n'est pas modifie par ce chemin)
- Resolution d'identite pour l'authentification : une identite inconnue est
  un evenement de securite journalise, distinct d'un simple NotFound
"""

from dataclasses import replace
from typing import Optional

from loguru import logger

from catalog.core.entities import Role, User
from catalog.core.exceptions import ConflictError, IdentityUnknownError
from catalog.core.ports.repositories import IRoleRepository, IUserRepository
from catalog.core.ports.security import ISecretHasher
from catalog.core.value_objects import Page, PageRequest
from catalog.services.dto import (
    RoleView,
    UserCredentials,
    UserInsertView,
    UserUpdateView,
    UserView,
)
from catalog.services.errors import (
    raise_for_outcome,
    require_found,
    require_reference,
    store_constraints,
)
from catalog.services.mapping import (
    apply_user_view,
    referenced_ids,
    role_to_view,
    user_to_credentials,
    user_to_view,
)

USER = "User"
ROLE = "Role"

# Journal dedie aux evenements de securite (filtrable via extra["security"])
security_logger = logger.bind(security=True)


class AccountService:
    """
    Service des utilisateurs et roles.

    Example:
        service = AccountService(
            users=SQLModelUserRepository(session),
            roles=SQLModelRoleRepository(session),
            hasher=Pbkdf2SecretHasher(),
        )

        user = service.create_user(UserInsertView(first_name="Ana", email="ana@example.com", ...))
        credentials = service.resolve_identity("ana@example.com")
    """

    def __init__(
        self,
        users: IUserRepository,
        roles: IRoleRepository,
        hasher: ISecretHasher,
    ) -> None:
        """
        Initialise le service des comptes.

        Args:
            users: Repository des utilisateurs
            roles: Repository des roles (resolution des references)
            hasher: Hacheur a sens unique des mots de passe
        """
        self._users = users
        self._roles = roles
        self._hasher = hasher

    def list_users(self, page_request: Optional[PageRequest] = None) -> Page[UserView]:
        """Liste paginee des utilisateurs, roles compris."""
        page = self._users.find_page(page_request or PageRequest())
        return page.map(user_to_view)

    def get_user(self, user_id: int) -> UserView:
        """
        Retourne un utilisateur.

        Raises:
            NotFoundError: Aucun utilisateur avec cet id
        """
        return user_to_view(require_found(self._users.get_by_id(user_id), USER, user_id))

    def find_by_email(self, email: str) -> UserView:
        """
        Retourne l'utilisateur portant cet e-mail.

        Raises:
            NotFoundError: Aucun utilisateur avec cet e-mail
        """
        user = self._users.get_by_email(_normalize_email(email))
        return user_to_view(require_found(user, USER, email))

    def create_user(self, view: UserInsertView) -> UserView:
        """
        Cree un utilisateur.

        Le mot de passe en clair est confie au hacheur ; seule l'empreinte
        est persistee.

        Raises:
            UnresolvedReferenceError: Un role reference n'existe pas
            ConflictError: L'e-mail est deja utilise
        """
        roles = self._resolve_roles(view.roles)
        user = apply_user_view(User(), view, roles)
        self._ensure_email_available(user.email)
        user = replace(user, password_hash=self._hasher.hash(view.password))
        with store_constraints(USER, user.email, ROLE, _role_ids(user)):
            saved = self._users.save(user)
        logger.info(f"Utilisateur cree: {saved.id}")
        return user_to_view(saved)

    def update_user(self, user_id: int, view: UserUpdateView) -> UserView:
        """
        Met a jour un utilisateur.

        Nom, prenom et e-mail sont ecrases, les roles entierement remplaces.
        L'empreinte du mot de passe est conservee.

        Raises:
            NotFoundError: Aucun utilisateur avec cet id
            UnresolvedReferenceError: Un role reference n'existe pas
            ConflictError: L'e-mail appartient a un autre utilisateur
        """
        existing = require_found(self._users.get_by_id(user_id), USER, user_id)
        roles = self._resolve_roles(view.roles)
        updated = apply_user_view(existing, view, roles)
        self._ensure_email_available(updated.email, owner_id=user_id)
        with store_constraints(USER, updated.email, ROLE, _role_ids(updated)):
            saved = self._users.save(updated)
        logger.info(f"Utilisateur mis a jour: {user_id}")
        return user_to_view(saved)

    def delete_user(self, user_id: int) -> None:
        """
        Supprime un utilisateur.

        Raises:
            NotFoundError: Aucun utilisateur avec cet id
            ConflictError: L'utilisateur est encore reference ailleurs
        """
        raise_for_outcome(self._users.delete_by_id(user_id), USER, user_id)
        logger.info(f"Utilisateur supprime: {user_id}")

    def list_roles(self) -> list[RoleView]:
        return [role_to_view(role) for role in self._roles.list_all()]

    def resolve_identity(self, login: str) -> UserCredentials:
        """
        Resout une identite de connexion (e-mail).

        Raises:
            IdentityUnknownError: Aucun utilisateur pour cet identifiant
        """
        user = self._users.get_by_email(_normalize_email(login))
        if user is None:
            security_logger.warning(f"Identite inconnue: {login}")
            raise IdentityUnknownError(login)
        logger.info(f"Identite resolue: {login}")
        return user_to_credentials(user)

    def authenticate(self, login: str, password: str) -> UserCredentials:
        """
        Verifie un couple identifiant / mot de passe.

        Un mot de passe invalide est signale comme une identite inconnue :
        l'appelant ne doit pas savoir laquelle des deux verifications a echoue.

        Raises:
            IdentityUnknownError: Identifiant inconnu ou mot de passe invalide
        """
        credentials = self.resolve_identity(login)
        if not self._hasher.verify(password, credentials.password_hash):
            security_logger.warning(f"Mot de passe invalide pour {login}")
            raise IdentityUnknownError(login)
        return credentials

    def _resolve_roles(self, views: list[RoleView]) -> list[Role]:
        """Resout chaque role reference par id, en echouant au premier absent."""
        return [
            require_reference(
                self._roles.get_by_id(role_id) if role_id is not None else None,
                ROLE,
                role_id,
            )
            for role_id in referenced_ids(views)
        ]

    def _ensure_email_available(self, email: str, owner_id: Optional[int] = None) -> None:
        holder = self._users.get_by_email(email)
        if holder is not None and holder.id != owner_id:
            logger.warning(f"E-mail deja utilise: {email}")
            raise ConflictError(f"Email already registered: {email}", entity=USER, identifier=email)


def _normalize_email(email: str) -> str:
    return email.strip().lower()


def _role_ids(user: User) -> list[Optional[int]]:
    return [role.id for role in user.roles]
