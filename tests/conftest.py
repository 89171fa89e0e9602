"""
Fixtures pytest partagees pour les tests RestAPI.

Ce module contient les fixtures communes utilisees dans les tests:
- Mocks des ports repository (IEmployeeRepository, ICompanyRepository)
- Session SQLModel sur une base SQLite en memoire
- Settings de test avec chemins temporaires
"""

from pathlib import Path
from typing import Iterator
from unittest.mock import MagicMock

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from restapi.config import Settings
from restapi.core.ports.repositories import ICompanyRepository, IEmployeeRepository
from restapi.infrastructure.persistence import models  # noqa: F401


@pytest.fixture
def mock_employee_repo() -> MagicMock:
    """
    Mock de IEmployeeRepository.

    save retourne l'entite recue ; les autres valeurs de retour
    sont a configurer dans chaque test.
    """
    mock = MagicMock(spec=IEmployeeRepository)
    mock.save.side_effect = lambda employee: employee
    mock.find_all.return_value = []
    mock.find_by_id.return_value = None
    mock.delete_by_id.return_value = True
    return mock


@pytest.fixture
def mock_company_repo() -> MagicMock:
    """Mock de ICompanyRepository."""
    mock = MagicMock(spec=ICompanyRepository)
    mock.save.side_effect = lambda company: company
    mock.find_all.return_value = []
    mock.find_by_id.return_value = None
    mock.delete_by_id.return_value = True
    return mock


@pytest.fixture
def session() -> Iterator[Session]:
    """Session SQLModel sur une base SQLite en memoire, tables creees."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session
    engine.dispose()


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings de test avec base et logs dans un repertoire temporaire."""
    return Settings(
        database_url=f"sqlite:///{tmp_path}/test.db",
        log_file=tmp_path / "logs" / "test.log",
        log_level="DEBUG",
    )
