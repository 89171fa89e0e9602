"""
Tests pour la creation de l'engine et l'initialisation de la base.
"""

import pytest

from restapi.core.entities import Company
from restapi.infrastructure.persistence.database import (
    dispose_engine,
    get_engine,
    get_session,
    init_db,
)
from restapi.infrastructure.persistence.repositories import SQLModelCompanyRepository


@pytest.fixture
def fresh_engine(monkeypatch):
    """Oublie l'engine global avant et apres le test."""
    dispose_engine()
    yield monkeypatch
    dispose_engine()


class TestInMemoryDatabase:
    """Une base en memoire doit etre partagee par toutes les sessions."""

    @pytest.mark.parametrize("url", ["sqlite://", "sqlite:///:memory:"])
    def test_tables_created_by_init_db_are_visible_to_new_sessions(self, fresh_engine, url):
        fresh_engine.setenv("RESTAPI_DATABASE_URL", url)

        init_db()
        saved = SQLModelCompanyRepository(next(get_session())).save(Company(name="OOCL"))

        found = SQLModelCompanyRepository(next(get_session())).find_by_id(saved.id)
        assert found == Company(id=saved.id, name="OOCL")

    def test_engine_is_reused(self, fresh_engine):
        fresh_engine.setenv("RESTAPI_DATABASE_URL", "sqlite://")

        assert get_engine() is get_engine()


class TestFileDatabase:
    def test_parent_directory_is_created(self, fresh_engine, tmp_path):
        db_path = tmp_path / "data" / "restapi.db"
        fresh_engine.setenv("RESTAPI_DATABASE_URL", f"sqlite:///{db_path}")

        init_db()

        assert db_path.parent.is_dir()
        assert db_path.exists()
