"""
Implementation SQLModel du repository Role.
"""

from typing import Optional

from sqlmodel import Session, select

from catalog.core.entities.account import Role
from catalog.core.ports.repositories import IRoleRepository
from catalog.infrastructure.persistence.models import RoleModel


def role_from_model(model: RoleModel) -> Role:
    """Convertit un modele DB en entite domaine."""
    return Role(id=model.id, authority=model.authority)


class SQLModelRoleRepository(IRoleRepository):
    """Repository SQLModel (lecture seule) pour les roles."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_by_id(self, role_id: int) -> Optional[Role]:
        """Recupere un role par son ID."""
        model = self._session.get(RoleModel, role_id)
        if model:
            return role_from_model(model)
        return None

    def list_all(self) -> list[Role]:
        """Liste tous les roles par ID."""
        statement = select(RoleModel).order_by(RoleModel.id)
        return [role_from_model(model) for model in self._session.exec(statement).all()]
