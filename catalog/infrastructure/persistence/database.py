"""
Configuration de la base de donnees du catalogue.

Ce module fournit :
- Engine SQLAlchemy (SQLite par defaut) avec cles etrangeres activees
- Fonction d'initialisation des tables

La base de donnees est configuree via CATALOG_DATABASE_URL (defaut: sqlite:///catalog.db).
"""

from pathlib import Path

from sqlalchemy import Engine, event
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Cree un engine pour l'URL donnee.

    Pour SQLite :
    - les cles etrangeres sont activees sur chaque connexion (PRAGMA),
      sans quoi les contraintes d'integrite ne sont pas verifiees
    - une base en memoire partage une connexion unique (StaticPool)
    - le repertoire parent d'un fichier de base est cree si necessaire

    Args :
        database_url : URL SQLAlchemy (ex: "sqlite:///catalog.db", "sqlite://")
        echo : Journalise les requetes SQL

    Retourne :
        L'engine configure
    """
    if not database_url.startswith("sqlite"):
        return create_engine(database_url, echo=echo)

    options = {"connect_args": {"check_same_thread": False}}
    if database_url in ("sqlite://", "sqlite:///:memory:"):
        options["poolclass"] = StaticPool
    else:
        db_path = Path(database_url.replace("sqlite:///", ""))
        db_path.parent.mkdir(exist_ok=True, parents=True)

    engine = create_engine(database_url, echo=echo, **options)

    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return engine


def init_db(engine: Engine) -> None:
    """
    Initialise la base de donnees en creant toutes les tables.

    Cette fonction importe les modeles pour enregistrer leurs metadonnees
    dans SQLModel.metadata, puis cree les tables correspondantes si elles
    n'existent pas deja.
    """
    # Import des modeles pour enregistrer leurs metadonnees
    # L'import est fait ici pour eviter les imports circulaires
    from catalog.infrastructure.persistence import models  # noqa: F401

    SQLModel.metadata.create_all(engine)
