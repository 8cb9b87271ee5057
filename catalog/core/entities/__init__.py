"""
Business entities representing core domain concepts.

Entities are immutable values with identity. Updates produce a new value
(dataclasses.replace) which is then persisted in a single save.

Exports:
- Category: Product category (shared reference entity)
- Product: Catalog product with its category set
- Role: Authority granted to a user
- User: Backoffice account identified by e-mail
"""

from catalog.core.entities.account import Role, User
from catalog.core.entities.catalog import Category, Product

__all__ = [
    "Category",
    "Product",
    "Role",
    "User",
]
