"""
Normalisation des signaux du stockage en erreurs du domaine.

Les repositories retournent des resultats etiquetes (None, StoreOutcome) ;
ce module les confronte explicitement et leve le type d'erreur du domaine
correspondant. Une ecriture refusee par une contrainte (StoreConstraintError)
est traduite de la meme maniere par store_constraints. C'est le seul endroit
ou un signal du stockage est interprete.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Optional, TypeVar

from loguru import logger

from catalog.core.exceptions import ConflictError, NotFoundError, UnresolvedReferenceError
from catalog.core.ports.repositories import StoreConstraintError, StoreOutcome, ViolatedConstraint

T = TypeVar("T")


def require_found(entity: Optional[T], entity_name: str, identifier: object) -> T:
    """Retourne l'entite ou leve NotFoundError si le stockage n'a rien trouve."""
    if entity is None:
        raise NotFoundError(entity_name, identifier)
    return entity


def require_reference(entity: Optional[T], entity_name: str, identifier: object) -> T:
    """Retourne l'entite referencee ou leve UnresolvedReferenceError."""
    if entity is None:
        logger.warning("Reference non resolue", entity=entity_name, id=identifier)
        raise UnresolvedReferenceError(entity_name, identifier)
    return entity


def raise_for_outcome(outcome: StoreOutcome, entity_name: str, identifier: object) -> None:
    """
    Interprete le resultat d'une suppression.

    Raises :
        NotFoundError : L'entite n'existe pas
        ConflictError : L'entite est encore referencee (violation d'integrite)
    """
    match outcome:
        case StoreOutcome.DELETED:
            return
        case StoreOutcome.NOT_FOUND:
            raise NotFoundError(entity_name, identifier)
        case StoreOutcome.CONSTRAINT_VIOLATION:
            logger.warning("Suppression refusee (integrite)", entity=entity_name, id=identifier)
            raise ConflictError(
                f"Integrity violation: {entity_name} {identifier} is still referenced",
                entity=entity_name,
                identifier=identifier,
            )
    raise ValueError(f"StoreOutcome inattendu : {outcome!r}")


@contextmanager
def store_constraints(
    entity_name: str,
    identifier: object,
    reference_name: str,
    references: object,
) -> Iterator[None]:
    """
    Traduit une ecriture refusee par le stockage en erreur du domaine.

    Couvre la fenetre entre la resolution des references par le service
    et l'ecriture (reference supprimee, e-mail pris entre-temps).

    Raises :
        UnresolvedReferenceError : Cle etrangere violee sur les references
        ConflictError : Unicite violee sur l'identifiant
    """
    try:
        yield
    except StoreConstraintError as e:
        if e.constraint is ViolatedConstraint.FOREIGN_KEY:
            logger.warning("Reference refusee par le stockage", entity=reference_name, id=references)
            raise UnresolvedReferenceError(reference_name, references) from e
        logger.warning("Ecriture refusee (unicite)", entity=entity_name, id=identifier)
        raise ConflictError(
            f"Integrity violation: {entity_name} {identifier} already exists",
            entity=entity_name,
            identifier=identifier,
        ) from e
