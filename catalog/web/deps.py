"""
Dépendances partagées de l'application web.

Chaque requête ouvre une session unique partagée par tous les repositories
du service construit pour elle, puis la ferme en fin de requête.
"""

from collections.abc import Iterator
from typing import Optional

from fastapi import Depends, HTTPException, Query, Request, status
from sqlmodel import Session

from ..container import Container
from ..core.value_objects import PageRequest
from ..services.account_service import AccountService
from ..services.catalog_service import CatalogService


def get_container(request: Request) -> Container:
    return request.app.state.container


def get_session(container: Container = Depends(get_container)) -> Iterator[Session]:
    session = container.session()
    try:
        yield session
    finally:
        session.close()


def get_catalog_service(
    container: Container = Depends(get_container),
    session: Session = Depends(get_session),
) -> CatalogService:
    return container.catalog_service(
        products=container.product_repository(session=session),
        categories=container.category_repository(session=session),
    )


def get_account_service(
    container: Container = Depends(get_container),
    session: Session = Depends(get_session),
) -> AccountService:
    return container.account_service(
        users=container.user_repository(session=session),
        roles=container.role_repository(session=session),
    )


def get_page_request(
    page: int = Query(0, ge=0),
    size: Optional[int] = Query(None, ge=1),
    sort: Optional[str] = Query(None, description='Champ et sens, ex: "name,desc"'),
    container: Container = Depends(get_container),
) -> PageRequest:
    """Construit la PageRequest, taille bornée par la configuration."""
    config = container.config()
    size = min(size or config.default_page_size, config.max_page_size)
    try:
        return PageRequest.parse(page=page, size=size, sort=sort)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
