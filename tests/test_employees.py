from timetrack_admin.models.employee import Employee
from timetrack_admin.models.employee_group import EmployeeGroup
from timetrack_admin.repositories.employee_repository import EmployeeRepository

from conftest import employee_payload


class TestEmployeeCreation:
    """Tests for creating employees"""

    def test_create_employee_success(self, client, create_user, create_department):
        """Employee is created and returned with user and department summaries"""
        user = create_user("erin@acme.com", first_name="Erin", last_name="Smith")
        department = create_department("Sales")

        response = client.post("/employees", json=employee_payload(user["id"], department["id"]))

        assert response.status_code == 201
        employee = response.json()
        assert employee["userId"] == user["id"]
        assert employee["departmentId"] == department["id"]
        assert employee["birthday"] == "1990-04-12"
        assert employee["dateOfHire"] == "2021-09-01"
        assert employee["hoursPerMonth"] == 160.5
        assert employee["sex"] == "FEMALE"
        assert employee["isTeamLeader"] is False
        assert employee["user"] == {"email": "erin@acme.com", "firstName": "Erin", "lastName": "Smith"}
        assert employee["department"] == {"name": "Sales"}

    def test_team_leader_defaults_to_false(self, client, create_user, create_department):
        """isTeamLeader is false when omitted"""
        user = create_user("erin@acme.com")
        department = create_department("Sales")
        data = employee_payload(user["id"], department["id"])
        del data["isTeamLeader"]

        response = client.post("/employees", json=data)

        assert response.status_code == 201
        assert response.json()["isTeamLeader"] is False

    def test_missing_user_id(self, client, db_session):
        """Employee without userId returns 400 and persists nothing"""
        response = client.post("/employees", json={"departmentId": "dX"})

        assert response.status_code == 400
        assert response.json() == {"error": "User ID and Department ID are required"}
        assert db_session.query(Employee).count() == 0

    def test_missing_department_id(self, client, create_user, db_session):
        """Employee without departmentId returns 400 and persists nothing"""
        user = create_user("erin@acme.com")

        response = client.post("/employees", json={"userId": user["id"], "firstName": "E"})

        assert response.status_code == 400
        assert response.json()["error"] == "User ID and Department ID are required"
        assert db_session.query(Employee).count() == 0

    def test_unknown_user(self, client, create_department):
        """userId must reference an existing user"""
        department = create_department("Sales")

        response = client.post("/employees", json=employee_payload("no-such-user", department["id"]))

        assert response.status_code == 400
        assert "not found" in response.json()["error"]

    def test_unknown_department(self, client, create_user):
        """departmentId must reference an existing department"""
        user = create_user("erin@acme.com")

        response = client.post("/employees", json=employee_payload(user["id"], "no-such-dept"))

        assert response.status_code == 400
        assert "not found" in response.json()["error"]

    def test_user_linked_once(self, client, create_user, create_department):
        """A user can back only one employee record"""
        user = create_user("erin@acme.com")
        department = create_department("Sales")
        client.post("/employees", json=employee_payload(user["id"], department["id"]))

        response = client.post(
            "/employees", json=employee_payload(user["id"], department["id"], employeeNo="E-002")
        )

        assert response.status_code == 400
        assert response.json()["error"] == "User is already linked to an employee"

    def test_commit_time_conflict_uses_generic_message(
        self, client, create_user, create_department, db_session, monkeypatch
    ):
        """A constraint violation at commit is a 400 conflict and persists nothing new"""
        user = create_user("erin@acme.com")
        department = create_department("Sales")
        client.post("/employees", json=employee_payload(user["id"], department["id"]))

        # Let the duplicate slip past the pre-check so the unique index rejects it
        monkeypatch.setattr(EmployeeRepository, "get_by_user_id", lambda self, user_id: None)

        response = client.post(
            "/employees", json=employee_payload(user["id"], department["id"], employeeNo="E-002")
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Employee conflicts with existing data"}
        assert db_session.query(Employee).count() == 1

    def test_non_numeric_hours_rejected(self, client, create_user, create_department):
        """hoursPerMonth must be a number"""
        user = create_user("erin@acme.com")
        department = create_department("Sales")

        response = client.post(
            "/employees",
            json=employee_payload(user["id"], department["id"], hoursPerMonth="lots"),
        )

        assert response.status_code == 400
        assert "hoursPerMonth" in response.json()["error"]

    def test_negative_hours_rejected(self, client, create_user, create_department):
        """hoursPerMonth cannot be negative"""
        user = create_user("erin@acme.com")
        department = create_department("Sales")

        response = client.post(
            "/employees", json=employee_payload(user["id"], department["id"], hoursPerMonth=-1)
        )

        assert response.status_code == 400

    def test_hours_above_month_length_rejected(self, client, create_user, create_department, db_session):
        """hoursPerMonth cannot exceed the hours in a 31-day month"""
        user = create_user("erin@acme.com")
        department = create_department("Sales")

        response = client.post(
            "/employees", json=employee_payload(user["id"], department["id"], hoursPerMonth=745)
        )

        assert response.status_code == 400
        assert "hoursPerMonth" in response.json()["error"]
        assert db_session.query(Employee).count() == 0

    def test_hours_at_month_length_accepted(self, client, create_user, create_department):
        """744 hours is the largest accepted value"""
        user = create_user("erin@acme.com")
        department = create_department("Sales")

        response = client.post(
            "/employees", json=employee_payload(user["id"], department["id"], hoursPerMonth=744)
        )

        assert response.status_code == 201
        assert response.json()["hoursPerMonth"] == 744.0

    def test_invalid_date_rejected(self, client, create_user, create_department):
        """birthday must be a calendar date"""
        user = create_user("erin@acme.com")
        department = create_department("Sales")

        response = client.post(
            "/employees",
            json=employee_payload(user["id"], department["id"], birthday="1990-13-45"),
        )

        assert response.status_code == 400

    def test_blank_optional_fields_accepted(self, client, create_user, create_department):
        """Empty strings from untouched form inputs are stored as null"""
        user = create_user("erin@acme.com")
        department = create_department("Sales")

        response = client.post(
            "/employees",
            json=employee_payload(
                user["id"], department["id"], birthday="", dateOfHire="", hoursPerMonth=""
            ),
        )

        assert response.status_code == 201
        employee = response.json()
        assert employee["birthday"] is None
        assert employee["dateOfHire"] is None
        assert employee["hoursPerMonth"] is None


class TestEmployeeRetrieval:
    """Tests for listing and fetching employees"""

    def test_list_empty_employees(self, client):
        """Listing employees when none exist returns empty list"""
        response = client.get("/employees")

        assert response.status_code == 200
        assert response.json() == []

    def test_list_employees_with_joins(self, client, create_employee):
        """Listed employees include user and department summaries"""
        create_employee()
        create_employee()

        response = client.get("/employees")

        assert response.status_code == 200
        employees = response.json()
        assert len(employees) == 2
        for employee in employees:
            assert set(employee["user"]) == {"email", "firstName", "lastName"}
            assert "name" in employee["department"]

    def test_get_employee_by_id(self, client, create_employee):
        """Employee can be retrieved by ID"""
        employee = create_employee()

        response = client.get(f"/employees/{employee['id']}")

        assert response.status_code == 200
        assert response.json()["id"] == employee["id"]

    def test_get_nonexistent_employee(self, client):
        """Retrieving non-existent employee returns 404"""
        response = client.get("/employees/does-not-exist")

        assert response.status_code == 404
        assert response.json() == {"error": "Employee not found"}


class TestEmployeeUpdate:
    """Tests for full-field employee updates"""

    def test_update_employee(self, client, create_employee, create_department):
        """All fields are rewritten, including the department"""
        employee = create_employee()
        new_department = create_department("Support")

        response = client.put(
            f"/employees/{employee['id']}",
            json=employee_payload(
                employee["userId"],
                new_department["id"],
                firstName="Erika",
                hoursPerMonth="120",
                isTeamLeader="true",
            ),
        )

        assert response.status_code == 200
        updated = response.json()
        assert updated["firstName"] == "Erika"
        assert updated["departmentId"] == new_department["id"]
        assert updated["department"] == {"name": "Support"}
        assert updated["hoursPerMonth"] == 120.0
        assert updated["isTeamLeader"] is True

    def test_update_is_not_a_merge(self, client, create_employee):
        """Fields omitted from an update are cleared"""
        employee = create_employee()
        data = employee_payload(employee["userId"], employee["departmentId"])
        del data["mobile"]
        del data["isTeamLeader"]

        response = client.put(f"/employees/{employee['id']}", json=data)

        assert response.status_code == 200
        assert response.json()["mobile"] is None
        assert response.json()["isTeamLeader"] is False

    def test_update_nonexistent_employee(self, client, create_user, create_department):
        """Updating non-existent employee returns 404"""
        user = create_user("erin@acme.com")
        department = create_department("Sales")

        response = client.put(
            "/employees/does-not-exist", json=employee_payload(user["id"], department["id"])
        )

        assert response.status_code == 404

    def test_update_to_user_of_other_employee(self, client, create_employee):
        """Cannot point an employee at a user already linked elsewhere"""
        first = create_employee()
        second = create_employee()

        response = client.put(
            f"/employees/{second['id']}",
            json=employee_payload(first["userId"], second["departmentId"]),
        )

        assert response.status_code == 400


class TestEmployeeDeletion:
    """Tests for deleting employees"""

    def test_delete_employee(self, client, create_employee, db_session):
        """Employee can be deleted"""
        employee = create_employee()

        response = client.delete(f"/employees/{employee['id']}")

        assert response.status_code == 200
        assert response.json() == {"message": "Employee deleted successfully"}
        assert db_session.query(Employee).count() == 0

    def test_delete_nonexistent_employee(self, client):
        """Deleting non-existent employee returns 404, not 500"""
        response = client.delete("/employees/does-not-exist")

        assert response.status_code == 404
        assert response.json() == {"error": "Employee not found"}

    def test_delete_removes_group_membership(self, client, create_employee, db_session):
        """Deleted employee disappears from its groups"""
        kept = create_employee()
        removed = create_employee()
        group = client.post(
            "/employee-groups", json={"name": "Night shift", "memberIds": [kept["id"], removed["id"]]}
        ).json()

        client.delete(f"/employees/{removed['id']}")

        response = client.get(f"/employee-groups/{group['id']}")
        assert response.json()["memberIds"] == [kept["id"]]
        assert db_session.query(EmployeeGroup).count() == 1
