"""
Tests unitaires pour les commandes CLI principales.

Tests couvrant:
- version / info : affichage simple
- init-db --seed : creation des tables et donnees initiales
- categories / products / product : consultation du catalogue
"""

import pytest
from dependency_injector import providers
from typer.testing import CliRunner

from catalog import __version__
from catalog.config import Settings
from catalog.container import Container
from catalog.main import app

runner = CliRunner()


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def container(monkeypatch):
    """Remplace le container du module CLI par un container sur base en memoire."""
    container = Container()
    container.config.override(
        providers.Object(Settings(_env_file=None, database_url="sqlite://"))
    )
    monkeypatch.setattr("catalog.main.container", container)
    yield container
    container.engine().dispose()


@pytest.fixture
def seeded(container):
    result = runner.invoke(app, ["init-db", "--seed"])
    assert result.exit_code == 0
    return container


# ============================================================================
# Commandes simples
# ============================================================================


class TestSimpleCommands:
    """Tests pour version et info."""

    def test_version(self):
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_info_shows_database(self, container):
        result = runner.invoke(app, ["info"])

        assert result.exit_code == 0
        assert "sqlite://" in result.output
        assert "12 (max 100)" in result.output


# ============================================================================
# Base de donnees
# ============================================================================


class TestInitDb:
    """Tests pour init-db."""

    def test_init_db_seed(self, container):
        result = runner.invoke(app, ["init-db", "--seed"])

        assert result.exit_code == 0
        assert "Données initiales insérées" in result.output

    def test_init_db_seed_twice(self, seeded):
        result = runner.invoke(app, ["init-db", "--seed"])

        assert result.exit_code == 0
        assert "Base déjà peuplée" in result.output


# ============================================================================
# Consultation
# ============================================================================


class TestCatalogCommands:
    """Tests pour categories, products et product."""

    def test_categories(self, seeded):
        result = runner.invoke(app, ["categories"])

        assert result.exit_code == 0
        for name in ("Books", "Computers", "Electronics"):
            assert name in result.output

    def test_products_by_category(self, seeded):
        result = runner.invoke(app, ["products", "--category", "3"])

        assert result.exit_code == 0
        assert "Total : 3" in result.output
        assert "PC Gamer" in result.output
        assert "Phone" not in result.output

    def test_products_by_name(self, seeded):
        result = runner.invoke(app, ["products", "-n", "phone"])

        assert result.exit_code == 0
        assert "Total : 1" in result.output

    def test_product_detail(self, seeded):
        result = runner.invoke(app, ["product", "5"])

        assert result.exit_code == 0
        assert "Phone (800.00)" in result.output
        assert "Electronics" in result.output

    def test_product_not_found(self, seeded):
        result = runner.invoke(app, ["product", "1000"])

        assert result.exit_code == 1
        assert "Product not found: 1000" in result.output
