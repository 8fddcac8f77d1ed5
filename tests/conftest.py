import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from timetrack_admin.database import get_db
from timetrack_admin.models.base import Base
# Import all model classes to ensure they're registered with SQLAlchemy
from timetrack_admin.models.business import Business
from timetrack_admin.models.user import User
from timetrack_admin.models.department import Department
from timetrack_admin.models.employee import Employee
from timetrack_admin.models.employee_group import EmployeeGroup
# Import FastAPI app AFTER model imports
from timetrack_admin.main import app

# Test database (SQLite in-memory for speed)
# Use StaticPool to ensure all connections share the same in-memory database
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """Create fresh database for each test"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """FastAPI test client with test database"""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def register_payload(
    email: str = "admin@acme.com",
    first_name: str = "Ada",
    last_name: str = "Admin",
    business_name: str = "Acme",
) -> dict:
    """Build a complete registration body"""
    return {
        "user": {
            "email": email,
            "password": "pw123456",
            "firstName": first_name,
            "lastName": last_name,
        },
        "business": {
            "businessName": business_name,
            "address": "1 Main St",
            "typeOfBusiness": "retail",
            "employeesQty": 12,
        },
    }


@pytest.fixture
def create_user(client):
    """Register a user through the API and return its public fields"""

    def _create_user(email: str, first_name: str = "Test", last_name: str = "User") -> dict:
        response = client.post(
            "/auth/register",
            json=register_payload(email=email, first_name=first_name, last_name=last_name),
        )
        assert response.status_code == 200
        return response.json()["user"]

    return _create_user


@pytest.fixture
def create_department(client):
    """Create a department through the API and return the response body"""

    def _create_department(name: str = "Operations", **fields) -> dict:
        response = client.post("/departments", json={"name": name, **fields})
        assert response.status_code == 201
        return response.json()

    return _create_department


def employee_payload(user_id: str, department_id: str, **overrides) -> dict:
    """Build a complete employee body"""
    data = {
        "userId": user_id,
        "departmentId": department_id,
        "firstName": "Erin",
        "lastName": "Employee",
        "birthday": "1990-04-12",
        "sex": "FEMALE",
        "socialSecurityNo": "123-45-6789",
        "address": "2 Side St",
        "mobile": "+1 555 0100",
        "employeeNo": "E-001",
        "bankAccount": "DE89370400440532013000",
        "hoursPerMonth": "160.5",
        "dateOfHire": "2021-09-01",
        "isTeamLeader": False,
    }
    data.update(overrides)
    return data


@pytest.fixture
def create_employee(client, create_user, create_department):
    """Create an employee (with a fresh user, and department unless given)"""
    counter = {"n": 0}

    def _create_employee(department_id: str | None = None, **overrides) -> dict:
        counter["n"] += 1
        user = create_user(f"employee{counter['n']}@acme.com")
        if department_id is None:
            department_id = create_department(f"Department {counter['n']}")["id"]
        response = client.post(
            "/employees", json=employee_payload(user["id"], department_id, **overrides)
        )
        assert response.status_code == 201
        return response.json()

    return _create_employee
