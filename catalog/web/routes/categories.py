"""
Routes des categories.
"""

from fastapi import APIRouter, Depends, Response, status

from ...services.catalog_service import CatalogService
from ...services.dto import CategoryView
from ..deps import get_catalog_service

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=list[CategoryView])
def list_categories(service: CatalogService = Depends(get_catalog_service)):
    return service.list_categories()


@router.get("/{category_id}", response_model=CategoryView)
def get_category(category_id: int, service: CatalogService = Depends(get_catalog_service)):
    return service.get_category(category_id)


@router.post("", response_model=CategoryView, status_code=status.HTTP_201_CREATED)
def create_category(
    view: CategoryView,
    response: Response,
    service: CatalogService = Depends(get_catalog_service),
):
    created = service.create_category(view)
    response.headers["Location"] = f"{router.prefix}/{created.id}"
    return created


@router.put("/{category_id}", response_model=CategoryView)
def update_category(
    category_id: int,
    view: CategoryView,
    service: CatalogService = Depends(get_catalog_service),
):
    return service.update_category(category_id, view)


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_category(category_id: int, service: CatalogService = Depends(get_catalog_service)):
    """Supprime une categorie ; 409 si des produits la referencent encore."""
    service.delete_category(category_id)
