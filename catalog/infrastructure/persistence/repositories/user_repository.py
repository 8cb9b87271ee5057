"""
Implementation SQLModel du repository User.

Implemente l'interface IUserRepository pour la persistance des utilisateurs
et de leurs liens de roles. Comme pour les produits, les roles d'une page
sont charges en une seule requete groupee.
"""

from collections import defaultdict
from collections.abc import Sequence
from dataclasses import replace
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, func, select

from catalog.core.entities.account import Role, User
from catalog.core.ports.repositories import IUserRepository, StoreOutcome
from catalog.core.value_objects import Page, PageRequest, SortDirection
from catalog.infrastructure.persistence.integrity import constraint_error
from catalog.infrastructure.persistence.models import RoleModel, UserModel, UserRoleLink
from catalog.infrastructure.persistence.repositories.role_repository import role_from_model

_SORTABLE = {
    "id": UserModel.id,
    "firstName": UserModel.first_name,
    "first_name": UserModel.first_name,
    "lastName": UserModel.last_name,
    "last_name": UserModel.last_name,
    "email": UserModel.email,
}


class SQLModelUserRepository(IUserRepository):
    """
    Repository SQLModel pour les utilisateurs.

    Implemente IUserRepository avec conversion bidirectionnelle
    entre l'entite User (domaine) et UserModel (persistance).
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    def _to_entity(self, model: UserModel) -> User:
        """Convertit un modele DB en entite domaine (roles non charges)."""
        return User(
            id=model.id,
            first_name=model.first_name,
            last_name=model.last_name,
            email=model.email,
            password_hash=model.password,
        )

    def _with_roles(self, users: Sequence[User]) -> list[User]:
        """Charge les roles de tous les utilisateurs en une seule requete."""
        ids = [user.id for user in users if user.id is not None]
        if not ids:
            return list(users)

        statement = (
            select(UserRoleLink.user_id, RoleModel)
            .join(RoleModel, RoleModel.id == UserRoleLink.role_id)
            .where(UserRoleLink.user_id.in_(ids))
            .order_by(RoleModel.id)
        )
        by_user: dict[int, list[Role]] = defaultdict(list)
        for user_id, model in self._session.exec(statement).all():
            by_user[user_id].append(role_from_model(model))

        return [replace(user, roles=tuple(by_user.get(user.id, ()))) for user in users]

    def get_by_id(self, user_id: int) -> Optional[User]:
        """Recupere un utilisateur par son ID, roles compris."""
        model = self._session.get(UserModel, user_id)
        if model is None:
            return None
        return self._with_roles([self._to_entity(model)])[0]

    def get_by_email(self, email: str) -> Optional[User]:
        """Recupere un utilisateur par son e-mail, roles compris."""
        statement = select(UserModel).where(UserModel.email == email)
        model = self._session.exec(statement).first()
        if model is None:
            return None
        return self._with_roles([self._to_entity(model)])[0]

    def find_page(self, page_request: PageRequest) -> Page[User]:
        """Liste paginee des utilisateurs."""
        total = self._session.exec(select(func.count()).select_from(UserModel)).one()

        column = _SORTABLE.get(page_request.sort or "id", UserModel.id)
        clause = column.desc() if page_request.direction is SortDirection.DESC else column.asc()
        statement = (
            select(UserModel)
            .order_by(clause, UserModel.id.asc())
            .offset(page_request.offset)
            .limit(page_request.size)
        )
        users = [self._to_entity(model) for model in self._session.exec(statement).all()]
        return Page(
            items=tuple(self._with_roles(users)),
            page=page_request.page,
            size=page_request.size,
            total=total,
        )

    def save(self, user: User) -> User:
        """
        Sauvegarde un utilisateur (insertion ou mise a jour) et reecrit ses roles.

        Un seul commit couvre les champs et les liens.
        """
        existing = None
        if user.id is not None:
            existing = self._session.get(UserModel, user.id)

        try:
            if existing:
                model = existing
                links = self._session.exec(
                    select(UserRoleLink).where(UserRoleLink.user_id == model.id)
                ).all()
                for link in links:
                    self._session.delete(link)
            else:
                model = UserModel(first_name=user.first_name, email=user.email, password="")
            model.first_name = user.first_name
            model.last_name = user.last_name
            model.email = user.email
            model.password = user.password_hash
            self._session.add(model)
            self._session.flush()

            for role_id in dict.fromkeys(role.id for role in user.roles):
                self._session.add(UserRoleLink(user_id=model.id, role_id=role_id))
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

    def delete_by_id(self, user_id: int) -> StoreOutcome:
        """Supprime un utilisateur et ses liens de roles."""
        model = self._session.get(UserModel, user_id)
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
