"""
End-to-end tests through the Flask app with a real in-memory repository.
"""

import threading

import pytest

pytestmark = pytest.mark.api

ANN = {"name": "Ann", "department": "Engineering", "salary": 75000}


def _hire(client, **overrides):
    resp = client.post("/api/employees", json={**ANN, **overrides})
    assert resp.status_code == 201, resp.get_json()
    return resp.get_json()


class TestEmployeeLifecycle:
    def test_create_then_fetch(self, client):
        created = _hire(client)

        assert created == {"id": 1, "name": "Ann", "department": "Engineering", "salary": 75000.0}
        fetched = client.get("/api/employees/1")
        assert fetched.status_code == 200
        assert fetched.get_json() == created

    def test_raise_then_raise_too_far(self, client):
        _hire(client)

        ok = client.put("/api/employees/1/raise?amount=5000")
        too_far = client.put("/api/employees/1/raise?amount=500000")

        assert ok.status_code == 200
        assert ok.get_json()["salary"] == 80000.0
        assert too_far.status_code == 400
        assert "exceeds maximum" in too_far.get_json()["detail"]
        assert client.get("/api/employees/1").get_json()["salary"] == 80000.0

    def test_transfer_rules(self, client):
        _hire(client)

        same = client.put("/api/employees/1/transfer?department=Engineering")
        moved = client.put("/api/employees/1/transfer?department=Sales")

        assert same.status_code == 400
        assert moved.status_code == 200
        assert moved.headers["X-New-Department"] == "Sales"
        assert client.get("/api/employees/1").get_json()["department"] == "Sales"

    def test_terminate_unknown_keeps_count(self, client):
        _hire(client)

        resp = client.delete("/api/employees/999")

        assert resp.status_code == 404
        assert client.get("/api/employees/count").get_json() == {"count": 1}

    def test_terminate_then_ids_not_reused(self, client):
        _hire(client)
        assert client.delete("/api/employees/1").status_code == 204
        assert client.get("/api/employees/1").status_code == 404

        assert _hire(client, name="Bob")["id"] == 2

    def test_new_hire_below_company_minimum_is_rejected(self, client):
        resp = client.post("/api/employees", json={**ANN, "salary": 29999})

        assert resp.status_code == 400
        assert resp.get_json()["title"] == "Invalid Request"
        assert client.get("/api/employees/count").get_json() == {"count": 0}

    def test_update_unknown_is_404_and_update_known_overwrites(self, client):
        assert client.put("/api/employees/5", json=ANN).status_code == 404

        _hire(client)
        resp = client.put("/api/employees/1", json={**ANN, "name": "Ann Lee"})

        assert resp.status_code == 200
        assert resp.get_json()["name"] == "Ann Lee"


class TestNonAsciiText:
    """Free text echoed in headers must stay encodable for the wire."""

    def test_transfer_to_non_latin1_department(self, client):
        _hire(client, name="Li Lei")

        resp = client.put(
            "/api/employees/1/transfer", query_string={"department": "研发部"}
        )

        assert resp.status_code == 200
        assert resp.get_json()["department"] == "研发部"
        resp.headers["X-New-Department"].encode("latin-1")
        assert client.get("/api/employees/1").get_json()["department"] == "研发部"

    def test_department_listing_and_expense_with_non_latin1_name(self, client):
        _hire(client, name="Li Lei", department="研发部", salary=90000)

        listing = client.get("/api/employees/department/%E7%A0%94%E5%8F%91%E9%83%A8")
        expense = client.get(
            "/api/employees/department/%E7%A0%94%E5%8F%91%E9%83%A8/expense"
        )

        assert [e["name"] for e in listing.get_json()] == ["Li Lei"]
        assert listing.headers["X-Department"] == "%E7%A0%94%E5%8F%91%E9%83%A8"
        assert expense.status_code == 200
        assert expense.get_json() == {"department": "研发部", "totalSalaryExpense": 90000.0}

    def test_find_with_non_latin1_query(self, client):
        _hire(client, name="李雷")

        resp = client.get("/api/employees/find", query_string={"query": "李"})

        assert resp.status_code == 200
        assert [e["name"] for e in resp.get_json()] == ["李雷"]
        resp.headers["X-Search-Query"].encode("latin-1")

    def test_department_with_encoded_newline_matches_nothing(self, client):
        _hire(client)

        listing = client.get("/api/employees/department/Eng%0Aineering")
        expense = client.get("/api/employees/department/Eng%0Aineering/expense")

        assert listing.status_code == 200
        assert listing.get_json() == []
        assert "\n" not in listing.headers["X-Department"]
        assert expense.status_code == 200
        assert expense.get_json()["totalSalaryExpense"] == 0.0


class TestQueries:
    @pytest.fixture(autouse=True)
    def staff(self, client):
        _hire(client, name="John Doe", salary=75000)
        _hire(client, name="Jane Smith", department="Marketing", salary=65000)
        _hire(client, name="Bob Johnson", salary=80000)
        _hire(client, name="Eve Adams", salary=50000)

    def test_filtered_list(self, client):
        resp = client.get("/api/employees?department=Engineering&minSalary=70000")

        assert {e["name"] for e in resp.get_json()} == {"John Doe", "Bob Johnson"}
        assert resp.headers["X-Total-Count"] == "2"

    def test_unfiltered_list(self, client):
        assert len(client.get("/api/employees").get_json()) == 4

    def test_high_performers_and_expense(self, client):
        performers = client.get("/api/employees/high-performers")
        expense = client.get("/api/employees/department/engineering/expense")

        assert [e["name"] for e in performers.get_json()] == ["Bob Johnson"]
        assert performers.headers["X-High-Performers-Count"] == "1"
        assert expense.get_json()["totalSalaryExpense"] == 205000.0

    def test_find_and_department_listing(self, client):
        found = client.get("/api/employees/find?query=jo")
        by_department = client.get("/api/employees/department/MARKETING")

        assert {e["name"] for e in found.get_json()} == {"John Doe", "Bob Johnson"}
        assert found.headers["X-Result-Count"] == "2"
        assert [e["name"] for e in by_department.get_json()] == ["Jane Smith"]

    def test_advanced_search_and_departments(self, client):
        resp = client.post(
            "/api/search/advanced", json={"minSalary": 60000, "maxSalary": 76000}
        )

        assert {e["name"] for e in resp.get_json()} == {"John Doe", "Jane Smith"}
        assert client.get("/api/search/departments").get_json() == [
            "Engineering",
            "Marketing",
        ]

    def test_standard_raise(self, client):
        resp = client.put("/api/employees/4/standard-raise")

        assert resp.get_json()["salary"] == pytest.approx(52500.0)


def test_concurrent_hires_get_distinct_ids(app):
    ids = []
    lock = threading.Lock()

    def worker(n):
        with app.test_client() as c:
            for i in range(10):
                body = c.post(
                    "/api/employees", json={**ANN, "name": f"W{n}-{i}"}
                ).get_json()
                with lock:
                    ids.append(body["id"])

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert sorted(ids) == list(range(1, 41))
