"""
Module de persistance du catalogue.

Ce module fournit l'infrastructure de stockage utilisant SQLModel (SQLAlchemy).
Il contient :

- database.py : Configuration de l'engine, initialisation des tables
- models.py : Modeles SQLModel representant les tables de la base de donnees
- repositories/ : Implementations des ports repository
- seed.py : Donnees initiales (roles, categories, produits de demonstration)

Les modeles ici sont des adapters de persistance, distincts des entites de domaine
(dataclass dans core/entities/). La conversion entre les deux se fait dans les
repositories.

Usage:
    from catalog.infrastructure.persistence import create_db_engine, init_db

    engine = create_db_engine("sqlite:///catalog.db")
    init_db(engine)
"""

from catalog.infrastructure.persistence.database import (
    create_db_engine,
    init_db,
)

__all__ = [
    "create_db_engine",
    "init_db",
]
