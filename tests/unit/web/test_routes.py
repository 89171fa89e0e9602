"""
Tests des routes HTTP avec des repositories mockes.

Le Container DI est place directement dans app.state ; le lifespan
(creation de la base) n'est pas execute car le TestClient n'est pas
utilise comme context manager, sauf dans TestApplicationLifespan.
"""

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient

from restapi.container import Container
from restapi.core.entities import Company, Employee, EmployeeStatus
from restapi.infrastructure.persistence.database import dispose_engine
from restapi.web.app import app


@pytest.fixture
def container(mock_employee_repo, mock_company_repo):
    container = Container()
    container.employee_repository.override(providers.Object(mock_employee_repo))
    container.company_repository.override(providers.Object(mock_company_repo))
    yield container
    container.reset_override()


@pytest.fixture
def client(container):
    app.state.container = container
    return TestClient(app)


@pytest.fixture
def alice():
    return Employee(
        id=1, name="Alice", age=20, gender="Female", salary=3000,
        company_id=1, status=EmployeeStatus.ACTIVE,
    )


class TestEmployeeRoutes:
    def test_list_employees(self, client, mock_employee_repo, alice):
        mock_employee_repo.find_all.return_value = [alice]

        response = client.get("/employees")

        assert response.status_code == 200
        assert response.json() == [
            {
                "id": 1,
                "name": "Alice",
                "age": 20,
                "gender": "Female",
                "salary": 3000,
                "companyId": 1,
                "active": True,
            }
        ]

    def test_list_employees_by_gender(self, client, mock_employee_repo, alice):
        mock_employee_repo.find_all_by_gender.return_value = [alice]

        response = client.get("/employees", params={"gender": "Female"})

        assert response.status_code == 200
        mock_employee_repo.find_all_by_gender.assert_called_once_with("Female")

    def test_list_employees_by_page(self, client, mock_employee_repo, alice):
        mock_employee_repo.find_page.return_value = [alice]

        response = client.get("/employees", params={"pageNumber": 1, "pageSize": 1})

        assert response.status_code == 200
        assert len(response.json()) == 1
        mock_employee_repo.find_page.assert_called_once_with(0, 1)

    def test_invalid_page_returns_400(self, client, mock_employee_repo):
        response = client.get("/employees", params={"pageNumber": 0, "pageSize": 1})

        assert response.status_code == 400
        mock_employee_repo.find_page.assert_not_called()

    def test_page_offset_beyond_64_bits_returns_400(self, client, mock_employee_repo):
        response = client.get(
            "/employees", params={"pageNumber": 10**18, "pageSize": 100}
        )

        assert response.status_code == 400
        assert "pageNumber=1000000000000000000" in response.json()["detail"]
        mock_employee_repo.find_page.assert_not_called()

    @pytest.mark.parametrize("params", [{"pageNumber": 1}, {"pageSize": 5}])
    def test_partial_paging_returns_400(self, client, mock_employee_repo, params):
        response = client.get("/employees", params=params)

        assert response.status_code == 400
        mock_employee_repo.find_all.assert_not_called()

    def test_gender_with_paging_returns_400(self, client, mock_employee_repo):
        response = client.get(
            "/employees", params={"gender": "Female", "pageNumber": 1, "pageSize": 1}
        )

        assert response.status_code == 400
        mock_employee_repo.find_page.assert_not_called()
        mock_employee_repo.find_all_by_gender.assert_not_called()

    def test_get_unknown_employee_returns_404(self, client, mock_employee_repo):
        mock_employee_repo.find_by_id.return_value = None

        response = client.get("/employees/999")

        assert response.status_code == 404
        assert response.json() == {"detail": "Employee id not found"}

    def test_create_employee(self, client, mock_employee_repo):
        def assign_id(employee):
            employee.id = 1
            return employee

        mock_employee_repo.save.side_effect = assign_id

        response = client.post(
            "/employees",
            json={"name": "Alice", "age": 20, "gender": "Female", "salary": 3000, "companyId": 1},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["id"] == 1
        assert body["active"] is True
        assert body["companyId"] == 1

    def test_create_underage_employee_returns_400(self, client, mock_employee_repo):
        response = client.post(
            "/employees",
            json={"name": "Alice", "age": 16, "gender": "Female", "salary": 3000},
        )

        assert response.status_code == 400
        assert response.json() == {"detail": "Employee must be 18~65 years old"}
        mock_employee_repo.save.assert_not_called()

    def test_update_employee_partial(self, client, mock_employee_repo, alice):
        mock_employee_repo.find_by_id.return_value = alice

        response = client.put("/employees/1", json={"salary": 10000})

        assert response.status_code == 200
        assert response.json()["salary"] == 10000
        assert response.json()["age"] == 20

    def test_update_inactive_employee_returns_400(self, client, mock_employee_repo, alice):
        alice.active = False
        mock_employee_repo.find_by_id.return_value = alice

        response = client.put("/employees/1", json={"age": 30})

        assert response.status_code == 400
        assert response.json() == {"detail": "Employee is inactive"}

    def test_delete_employee(self, client, mock_employee_repo):
        response = client.delete("/employees/1")

        assert response.status_code == 204
        mock_employee_repo.delete_by_id.assert_called_once_with(1)


class TestCompanyRoutes:
    def test_list_companies(self, client, mock_company_repo):
        mock_company_repo.find_all.return_value = [Company(id=1, name="OOCL")]

        response = client.get("/companies")

        assert response.status_code == 200
        assert response.json() == [{"id": 1, "name": "OOCL"}]

    def test_list_companies_by_page(self, client, mock_company_repo):
        mock_company_repo.find_page.return_value = []

        response = client.get("/companies", params={"pageNumber": 2, "pageSize": 5})

        assert response.status_code == 200
        mock_company_repo.find_page.assert_called_once_with(1, 5)

    def test_partial_paging_returns_400(self, client, mock_company_repo):
        response = client.get("/companies", params={"pageSize": 5})

        assert response.status_code == 400
        mock_company_repo.find_all.assert_not_called()

    def test_get_unknown_company_returns_404(self, client, mock_company_repo):
        response = client.get("/companies/999")

        assert response.status_code == 404
        assert response.json() == {"detail": "Company id not found"}

    def test_list_company_employees(self, client, mock_employee_repo, alice):
        mock_employee_repo.find_by_company_id.return_value = [alice]

        response = client.get("/companies/1/employees")

        assert response.status_code == 200
        assert [e["name"] for e in response.json()] == ["Alice"]

    def test_create_company(self, client, mock_company_repo):
        mock_company_repo.save.side_effect = lambda company: Company(id=1, name=company.name)

        response = client.post("/companies", json={"name": "OOCL"})

        assert response.status_code == 201
        assert response.json() == {"id": 1, "name": "OOCL"}

    def test_update_company(self, client, mock_company_repo):
        mock_company_repo.find_by_id.return_value = Company(id=1, name="OOCL")

        response = client.put("/companies/1", json={"name": "CMA CGM"})

        assert response.status_code == 200
        assert response.json() == {"id": 1, "name": "CMA CGM"}

    def test_delete_company(self, client, mock_company_repo):
        response = client.delete("/companies/1")

        assert response.status_code == 204
        mock_company_repo.delete_by_id.assert_called_once_with(1)


class TestApplicationLifespan:
    """Demarrage complet : le lifespan cree le Container et les tables."""

    def test_in_memory_database_is_shared_across_requests(self, monkeypatch):
        monkeypatch.setenv("RESTAPI_DATABASE_URL", "sqlite://")
        dispose_engine()

        with TestClient(app) as client:
            created = client.post("/companies", json={"name": "OOCL"})
            listed = client.get("/companies")

        assert created.status_code == 201
        assert listed.json() == [created.json()]
        dispose_engine()
