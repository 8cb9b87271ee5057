"""
Gestionnaires d'erreurs globaux de l'API.

Traduit la taxonomie du domaine en codes HTTP :
- NotFoundError -> 404
- ConflictError -> 409
- UnresolvedReferenceError -> 422
- IdentityUnknownError -> 401 (sans detail sur la cause)

Les erreurs de forme (pydantic) restent gerees par FastAPI (422).
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from loguru import logger

from catalog.core.exceptions import (
    CatalogError,
    ConflictError,
    IdentityUnknownError,
    NotFoundError,
    UnresolvedReferenceError,
)
from catalog.web.schemas import ErrorResponse

_STATUS_BY_ERROR: dict[type[CatalogError], tuple[int, str]] = {
    NotFoundError: (status.HTTP_404_NOT_FOUND, "not_found"),
    ConflictError: (status.HTTP_409_CONFLICT, "conflict"),
    UnresolvedReferenceError: (422, "unresolved_reference"),
    IdentityUnknownError: (status.HTTP_401_UNAUTHORIZED, "identity_unknown"),
}


def status_for(exc: CatalogError) -> tuple[int, str]:
    """Code HTTP et type d'erreur pour une erreur du domaine."""
    for error_type in type(exc).__mro__:
        if error_type in _STATUS_BY_ERROR:
            return _STATUS_BY_ERROR[error_type]
    return status.HTTP_400_BAD_REQUEST, "catalog_error"


def register_error_handlers(app: FastAPI) -> None:
    """Enregistre les gestionnaires d'erreurs du domaine sur l'application."""

    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
        status_code, kind = status_for(exc)
        logger.debug(f"{kind} sur {request.url.path}: {exc.message}")
        body = ErrorResponse(error=kind, message=exc.message, path=request.url.path)
        return JSONResponse(status_code=status_code, content=body.model_dump())
