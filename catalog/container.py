"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour les interfaces CLI et Web.
Le container ne fait que cabler des constructeurs : les services recoivent
leurs repositories et leur hacheur en parametres et ne consultent aucun
registre global.
"""

from dependency_injector import containers, providers
from sqlmodel import Session

from .config import Settings
from .infrastructure.persistence.database import create_db_engine, init_db
from .infrastructure.persistence.repositories import (
    SQLModelCategoryRepository,
    SQLModelProductRepository,
    SQLModelRoleRepository,
    SQLModelUserRepository,
)
from .infrastructure.security import Pbkdf2SecretHasher
from .services.account_service import AccountService
from .services.catalog_service import CatalogService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.database.init()  # Cree les tables une fois
        catalog = container.catalog_service()

    Pour partager une session entre repositories (une requete HTTP) :
        session = container.session()
        catalog = container.catalog_service(
            products=container.product_repository(session=session),
            categories=container.category_repository(session=session),
        )
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Engine - un seul pool de connexions par container
    engine = providers.Singleton(
        create_db_engine,
        database_url=config.provided.database_url,
        echo=config.provided.database_echo,
    )

    # Database - Resource pour initialisation unique
    database = providers.Resource(init_db, engine=engine)

    # Session - nouvelle session a chaque appel
    session = providers.Factory(Session, engine)

    # Repositories - Factory pour nouvelle instance avec session fraiche
    category_repository = providers.Factory(
        SQLModelCategoryRepository,
        session=session,
    )
    product_repository = providers.Factory(
        SQLModelProductRepository,
        session=session,
    )
    role_repository = providers.Factory(
        SQLModelRoleRepository,
        session=session,
    )
    user_repository = providers.Factory(
        SQLModelUserRepository,
        session=session,
    )

    # Hacheur (stateless - Singleton)
    secret_hasher = providers.Singleton(
        Pbkdf2SecretHasher,
        iterations=config.provided.password_hash_iterations,
    )

    # Services - Factory car dependent de repositories (sessions fraiches)
    catalog_service = providers.Factory(
        CatalogService,
        products=product_repository,
        categories=category_repository,
    )
    account_service = providers.Factory(
        AccountService,
        users=user_repository,
        roles=role_repository,
        hasher=secret_hasher,
    )
