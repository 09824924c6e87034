from domain.employee import Employee, EmployeeEvent, OperationType


def _john(id=1):
    return Employee(id=id, first_name="John", last_name="Doe", email="john@x.com", department="Eng")


def test_created_event_carries_snapshot_and_id():
    ev = EmployeeEvent.created(_john())
    assert ev.operation is OperationType.CREATE
    assert ev.employee_id == 1
    assert ev.routing_key == "1"
    assert ev.to_payload() == {
        "operation": "CREATE",
        "employee": {
            "id": 1,
            "first_name": "John",
            "last_name": "Doe",
            "email": "john@x.com",
            "department": "Eng",
        },
        "employee_id": 1,
        "message": "Employee created successfully",
    }


def test_retrieved_all_is_keyed_all_without_employee():
    ev = EmployeeEvent.retrieved_all(3)
    assert ev.operation is OperationType.READ
    assert ev.routing_key == "all"
    payload = ev.to_payload()
    assert payload["employee"] is None
    assert payload["employee_id"] is None
    assert payload["message"] == "Retrieved 3 employees"


def test_deleted_event_only_carries_id():
    ev = EmployeeEvent.deleted(7)
    assert ev.to_payload() == {
        "operation": "DELETE",
        "employee": None,
        "employee_id": 7,
        "message": "Employee deleted successfully",
    }
    assert ev.routing_key == "7"


def test_read_and_update_messages():
    assert EmployeeEvent.retrieved(_john()).message == "Employee retrieved successfully"
    assert EmployeeEvent.updated(_john()).operation is OperationType.UPDATE
    assert EmployeeEvent.updated(_john()).message == "Employee updated successfully"


def test_replace_details_keeps_identity():
    e = _john(id=5)
    e.replace_details(Employee(id=99, first_name="Jane", last_name="Roe", email="", department="Ops"))
    assert e.id == 5
    assert (e.first_name, e.last_name, e.email, e.department) == ("Jane", "Roe", "", "Ops")
