"""
Routes des produits.

Recherche paginee (categorie + fragment de nom), lecture, creation,
mise a jour et suppression.
"""

from fastapi import APIRouter, Depends, Query, Response, status

from ...core.value_objects import ALL_CATEGORIES, PageRequest
from ...services.catalog_service import CatalogService
from ...services.dto import ProductView
from ..deps import get_catalog_service, get_page_request
from ..schemas import PageResponse

router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=PageResponse[ProductView])
def list_products(
    category_id: int = Query(ALL_CATEGORIES, alias="categoryId", ge=0),
    name: str = Query(""),
    page_request: PageRequest = Depends(get_page_request),
    service: CatalogService = Depends(get_catalog_service),
):
    """Liste paginee ; categoryId=0 signifie toutes les categories."""
    return PageResponse.from_page(service.list_products(category_id, name, page_request))


@router.get("/{product_id}", response_model=ProductView)
def get_product(product_id: int, service: CatalogService = Depends(get_catalog_service)):
    return service.get_product(product_id)


@router.post("", response_model=ProductView, status_code=status.HTTP_201_CREATED)
def create_product(
    view: ProductView,
    response: Response,
    service: CatalogService = Depends(get_catalog_service),
):
    created = service.create_product(view)
    response.headers["Location"] = f"{router.prefix}/{created.id}"
    return created


@router.put("/{product_id}", response_model=ProductView)
def update_product(
    product_id: int,
    view: ProductView,
    service: CatalogService = Depends(get_catalog_service),
):
    return service.update_product(product_id, view)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(product_id: int, service: CatalogService = Depends(get_catalog_service)):
    service.delete_product(product_id)
