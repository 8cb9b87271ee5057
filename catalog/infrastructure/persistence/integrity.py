"""
Traduction des erreurs d'integrite SQLAlchemy en signal du port repository.

Les messages du pilote different selon le moteur :
- SQLite : "FOREIGN KEY constraint failed", "UNIQUE constraint failed: users.email"
- PostgreSQL : "... violates foreign key constraint ...", "duplicate key value ..."
"""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from catalog.core.ports.repositories import StoreConstraintError, ViolatedConstraint

_FOREIGN_KEY_MARKERS = ("foreign key",)
_UNIQUE_MARKERS = ("unique", "duplicate key")


def constraint_error(error: IntegrityError) -> Optional[StoreConstraintError]:
    """
    Classe une IntegrityError.

    Retourne :
        Le StoreConstraintError correspondant, ou None si la contrainte
        n'est ni une cle etrangere ni une unicite (NOT NULL, CHECK...)
    """
    detail = str(error.orig)
    lowered = detail.lower()
    if any(marker in lowered for marker in _FOREIGN_KEY_MARKERS):
        return StoreConstraintError(ViolatedConstraint.FOREIGN_KEY, detail)
    if any(marker in lowered for marker in _UNIQUE_MARKERS):
        return StoreConstraintError(ViolatedConstraint.UNIQUE, detail)
    return None
