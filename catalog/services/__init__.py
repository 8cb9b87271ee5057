"""
Application services layer (use cases).

Services orchestrate the domain logic to fulfill application use cases.
They translate DTO views into entity values, resolve associations by id,
and normalise store signals into the domain error taxonomy.

Services depend on ports (interfaces) from core/, never on concrete
implementations from infrastructure/. Dependencies are passed to the
constructor (see catalog.container).
"""

from catalog.services.account_service import AccountService
from catalog.services.catalog_service import CatalogService

__all__ = [
    "AccountService",
    "CatalogService",
]
