import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app
from app.models.employee import Employee
from app.repositories.employee_store import EmployeeStore
from app.services.container import build_container


@pytest.fixture
def store():
    store = EmployeeStore()
    for employee in [
        Employee(id=1, name="John Doe", position="Engineer", salary=50000),
        Employee(id=2, name="Jane Smith", position="Manager", salary=60000),
        Employee(id=3, name="Alice Johnson", position="Analyst", salary=45000),
    ]:
        store.create(employee)
    return store


@pytest.fixture
def test_settings(tmp_path):
    return Settings(
        data_dir=tmp_path,
    )


@pytest.fixture
def container(test_settings):
    return build_container(test_settings)


@pytest.fixture
def client(container):
    with TestClient(create_app(container)) as c:
        yield c
