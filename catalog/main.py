"""
Point d'entrée CLI du catalogue.

Initialise le container DI, configure le logging et fournit les commandes CLI
(administration de la base, consultation du catalogue, serveur web).
"""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Annotated, Optional

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from . import __version__
from .config import Settings
from .container import Container
from .core.exceptions import CatalogError
from .core.value_objects import ALL_CATEGORIES, PageRequest
from .infrastructure.persistence.seed import seed_database
from .logging_config import configure_from_settings
from .services.catalog_service import CatalogService

app = typer.Typer(
    name="catalog",
    help="Backend de gestion de catalogue (produits, catégories, comptes)",
)
container = Container()
console = Console()


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@contextmanager
def catalog_service() -> Iterator[CatalogService]:
    """Service catalogue sur une session unique, fermée en sortie."""
    container.database.init()
    session = container.session()
    try:
        yield container.catalog_service(
            products=container.product_repository(session=session),
            categories=container.category_repository(session=session),
        )
    finally:
        session.close()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration du catalogue")
    typer.echo(f"Base de données : {config.database_url}")
    typer.echo(f"Taille de page : {config.default_page_size} (max {config.max_page_size})")
    typer.echo(f"Niveau de log : {config.log_level}")
    typer.echo(f"Fichier de log : {config.log_file}")
    typer.echo(f"Journal de sécurité : {config.security_log_file}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"Catalog v{__version__}")


@app.command(name="init-db")
def init_db(
    seed: Annotated[bool, typer.Option(help="Insère les données de démonstration")] = False,
) -> None:
    """Crée les tables (et insère les données initiales avec --seed)."""
    container.database.init()
    typer.echo("Tables créées")
    if seed:
        session = container.session()
        try:
            inserted = seed_database(session)
        finally:
            session.close()
        typer.echo("Données initiales insérées" if inserted else "Base déjà peuplée")


@app.command()
def categories() -> None:
    """Liste les catégories."""
    with catalog_service() as service:
        views = service.list_categories()

    table = Table(title="Catégories")
    table.add_column("ID", justify="right")
    table.add_column("Nom")
    for view in views:
        table.add_row(str(view.id), view.name)
    console.print(table)


@app.command()
def products(
    category: Annotated[
        int, typer.Option("--category", "-c", help="ID de catégorie (0 = toutes)")
    ] = ALL_CATEGORIES,
    name: Annotated[str, typer.Option("--name", "-n", help="Fragment de nom")] = "",
    page: Annotated[int, typer.Option(min=0, help="Numéro de page (0-indexé)")] = 0,
    size: Annotated[Optional[int], typer.Option(min=1, help="Taille de page")] = None,
    sort: Annotated[Optional[str], typer.Option(help='Tri, ex: "price,desc"')] = None,
) -> None:
    """Recherche paginée des produits."""
    page_request = PageRequest.parse(
        page=page, size=size or get_config().default_page_size, sort=sort
    )
    with catalog_service() as service:
        result = service.list_products(category, name, page_request)

    table = Table(title=f"Produits (page {result.page + 1}/{max(result.total_pages, 1)})")
    table.add_column("ID", justify="right")
    table.add_column("Nom")
    table.add_column("Prix", justify="right")
    table.add_column("Catégories")
    for view in result.items:
        table.add_row(
            str(view.id),
            view.name,
            f"{view.price:.2f}",
            ", ".join(c.name for c in view.categories),
        )
    console.print(table)
    typer.echo(f"Total : {result.total}")


@app.command()
def product(product_id: Annotated[int, typer.Argument(help="ID du produit")]) -> None:
    """Affiche un produit."""
    try:
        with catalog_service() as service:
            view = service.get_product(product_id)
    except CatalogError as e:
        typer.echo(f"Erreur : {e.message}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"{view.id} - {view.name} ({view.price:.2f})")
    typer.echo(f"  {view.description}")
    typer.echo(f"  Catégories : {', '.join(c.name for c in view.categories) or '-'}")


@app.command()
def serve(
    host: Annotated[str, typer.Option(help="Adresse d'écoute")] = "0.0.0.0",
    port: Annotated[int, typer.Option(help="Port d'écoute")] = 8000,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance le serveur web du catalogue."""
    import uvicorn

    typer.echo(f"Démarrage du serveur sur {host}:{port}")
    uvicorn.run("catalog.web.app:app", host=host, port=port, reload=reload)


def main() -> None:
    """Point d'entrée de l'application."""
    configure_from_settings(container.config())

    logger.info("Démarrage du catalogue", version=__version__)

    # Lance la CLI
    app()


if __name__ == "__main__":
    main()
