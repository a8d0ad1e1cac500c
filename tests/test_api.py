import pytest
from fastapi.testclient import TestClient
import main
from api.dependencies import get_service
from tests.conftest import NEURO


@pytest.fixture
def client(service, monkeypatch):
    monkeypatch.setattr(main, "API_KEY", None)
    main.app.dependency_overrides[get_service] = lambda: service
    yield TestClient(main.app)
    main.app.dependency_overrides.clear()


def proposal(day, shift_type, doctor_id="doc1", exclude=None):
    body = {"doctorId": doctor_id, "date": day, "shiftTypeId": shift_type}
    if exclude:
        body["excludeShiftId"] = exclude
    return {"proposal": body}


class TestShiftEndpoints:
    def test_assign_and_list(self, client):
        response = client.post("/api/shifts/assign", json=proposal("2024-05-10", "Morning"))
        assert response.status_code == 200
        shift_id = response.json()["shiftId"]
        assert response.json()["decision"]["accepted"] is True

        listed = client.get("/api/shifts", params={"doctorId": "doc1"}).json()
        assert [s["id"] for s in listed] == [shift_id]
        assert client.get("/api/shifts", params={"doctorId": "doc2"}).json() == []

    def test_rejected_assignment_is_409(self, client):
        client.post("/api/shifts/assign", json=proposal("2024-05-10", "Vacation"))
        response = client.post("/api/shifts/assign", json=proposal("2024-05-10", "Afternoon"))
        assert response.status_code == 409
        detail = response.json()["detail"]
        assert detail["accepted"] is False
        assert detail["reason"] == "VacationConflict"
        assert detail["details"]["direction"] == "incoming"

    def test_validate_does_not_commit(self, client, service):
        response = client.post("/api/shifts/validate", json=proposal("2024-05-10", "Bogus"))
        assert response.status_code == 200
        assert response.json()["reason"] == "UnknownShiftType"
        assert service.shifts() == []

    def test_validate_with_limits(self, client):
        body = proposal("2024-05-10", "DayGuard")
        body["limits"] = {"maxWeeklyHours": 10}
        response = client.post("/api/shifts/validate", json=body)
        assert response.json()["reason"] == "WeeklyCapExceeded"
        assert response.json()["details"]["max"] == 10

    def test_batch(self, client):
        body = {
            "proposals": [
                proposal("2024-05-10", "NightGuard")["proposal"],
                proposal("2024-05-11", "Morning")["proposal"],
                proposal("2024-05-12", "Morning")["proposal"],
            ]
        }
        response = client.post("/api/shifts/batch", json=body)
        assert response.status_code == 200
        data = response.json()
        assert (data["accepted"], data["rejected"]) == (2, 1)
        assert data["results"][1]["decision"]["reason"] == "InsufficientRest"

    def test_delete_shift(self, client, service):
        shift_id = client.post("/api/shifts/assign", json=proposal("2024-05-10", "Morning")).json()["shiftId"]
        assert client.delete(f"/api/shifts/{shift_id}").status_code == 204
        assert client.delete(f"/api/shifts/{shift_id}").status_code == 204
        assert service.shifts() == []

    def test_malformed_proposal(self, client):
        response = client.post("/api/shifts/assign", json={"proposal": {"doctorId": "doc1"}})
        assert response.status_code == 422


class TestCatalogEndpoints:
    def test_list_by_specialty(self, client):
        types = client.get("/api/catalog/types", params={"specialty": NEURO}).json()["types"]
        ids = {t["id"] for t in types}
        assert "Night" in ids
        assert "custom_7h" not in ids
        night = next(t for t in types if t["id"] == "Night")
        assert night["night"] is True
        assert night["standard"] is True
        assert night["displayBucket"] == "night"

    def test_create_and_delete(self, client):
        body = {
            "name": "Short",
            "abbreviation": "SH",
            "startTime": "08:00",
            "endTime": "10:00",
            "specialty": NEURO,
        }
        response = client.post("/api/catalog/types", json=body)
        assert response.status_code == 201
        created = response.json()
        assert created["durationHours"] == 2
        assert created["standard"] is False

        usage = client.get(f"/api/catalog/types/{created['id']}/in-use").json()
        assert usage["inUse"] is False
        assert client.delete(f"/api/catalog/types/{created['id']}").status_code == 204
        assert client.get(f"/api/catalog/types/{created['id']}/in-use").status_code == 404

    @pytest.mark.parametrize(
        "overrides,status",
        [
            ({"name": "long day"}, 409),
            ({"specialty": "Dermatología"}, 400),
            ({"endTime": "08:00"}, 400),
            ({"startTime": "8am"}, 422),
        ],
    )
    def test_create_errors(self, client, overrides, status):
        body = {
            "name": "Short",
            "abbreviation": "SH",
            "startTime": "08:00",
            "endTime": "10:00",
            "specialty": NEURO,
        }
        body.update(overrides)
        assert client.post("/api/catalog/types", json=body).status_code == status

    def test_delete_errors(self, client):
        client.post("/api/shifts/assign", json=proposal("2024-05-10", "custom_7h"))
        assert client.delete("/api/catalog/types/custom_7h").status_code == 409
        assert client.delete("/api/catalog/types/Night").status_code == 400
        assert client.delete("/api/catalog/types/Bogus").status_code == 404


class TestHoursEndpoints:
    def test_summary(self, client):
        client.post("/api/shifts/assign", json=proposal("2024-05-14", "DayGuard"))
        response = client.get(
            "/api/hours/summary", params={"year": 2024, "month": 5, "anchor": "2024-05-15"}
        )
        assert response.status_code == 200
        data = response.json()
        assert data["weekStart"] == "2024-05-12"
        doc1 = next(d for d in data["doctors"] if d["doctorId"] == "doc1")
        assert doc1["weeklyHours"] == 12
        assert doc1["status"] == "low"

    def test_summary_with_bad_limits(self, client):
        params = {"year": 2024, "month": 5, "monthlyWarningHours": 200}
        assert client.get("/api/hours/summary", params=params).status_code == 422

    def test_doctor_hours(self, client):
        client.post("/api/shifts/assign", json=proposal("2024-05-14", "DayGuard"))
        response = client.get("/api/hours/doc1", params={"year": 2024, "month": 5})
        assert response.json()["monthlyHours"] == 12
        assert client.get("/api/hours/ghost", params={"year": 2024, "month": 5}).status_code == 404

    def test_report(self, client):
        client.post("/api/shifts/assign", json=proposal("2024-05-14", "DayGuard"))
        data = client.get("/api/hours/report", params={"year": 2024, "month": 5}).json()
        doc1 = next(r for r in data["rows"] if r["id"] == "doc1")
        assert doc1["14"] == "GD"
        assert doc1["totalHours"] == 12


class TestRosterEndpoints:
    def test_replace_roster(self, client):
        client.post("/api/shifts/assign", json=proposal("2024-05-14", "DayGuard"))
        body = {
            "doctors": [{"id": "doc2", "name": "Thorne, Marcos", "specialty": NEURO}],
            "specialties": [{"name": NEURO}],
        }
        response = client.put("/api/roster", json=body)
        assert response.json() == {"doctors": 1, "specialties": 1, "removedShifts": 1}
        assert client.get("/api/roster").json()["doctors"][0]["id"] == "doc2"

    def test_duplicate_doctor_ids(self, client):
        doctor = {"id": "doc2", "name": "Thorne, Marcos", "specialty": NEURO}
        body = {"doctors": [doctor, doctor], "specialties": []}
        assert client.put("/api/roster", json=body).status_code == 422


class TestApiKey:
    def test_key_required_when_configured(self, client, monkeypatch):
        monkeypatch.setattr(main, "API_KEY", "s3cret")
        assert client.get("/api/shifts").status_code == 401
        assert client.get("/api/shifts", headers={"x-api-key": "s3cret"}).status_code == 200
        assert client.get("/api/health/check").status_code == 200


def test_healthcheck(client):
    data = client.get("/api/health/check").json()
    assert data == {"status": "ok", "doctors": 2, "shiftTypes": 10}
