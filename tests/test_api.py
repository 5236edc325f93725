from __future__ import annotations

import pytest

from supervision.extensions import db
from supervision.models import Schedule, ScheduleStatus

SCHEDULE_BODY = {
    "proposed_at": "2024-01-05T08:30:00",
    "start_time": "2024-01-10T09:00:00",
    "end_time": "2024-01-10T10:00:00",
    "description": "Review chapter 1",
    "location": "Room 101",
}


def _create(client, headers) -> dict:
    response = client.post("/api/v1/schedules", json=SCHEDULE_BODY, headers=headers)
    assert response.status_code == 201, response.get_json()
    return response.get_json()["data"]


def test_supervision_scenario_over_http(client, seed, auth_headers) -> None:
    student, lecturer = auth_headers(seed.dewi), auth_headers(seed.ani)

    created = _create(client, student)
    assert created["status"] == "pending"
    assert len(created["thesis"]["supervisors"]) == 2

    response = client.post(f"/api/v1/schedules/{created['id']}/approval",
                           json={"status": "approved"}, headers=lecturer)
    assert response.status_code == 200

    detail = client.get(f"/api/v1/schedules/{created['id']}", headers=student).get_json()["data"]
    assert detail["status"] == "approved"
    assert detail["approved_by"]["identifier"] == seed.ani_nip

    response = client.delete(f"/api/v1/schedules/{created['id']}", headers=student)
    assert response.status_code == 200
    assert response.get_json() == {"success": True, "message": "success delete schedule", "data": None}

    response = client.get(f"/api/v1/schedules/{created['id']}", headers=student)
    assert response.status_code == 404
    assert response.get_json()["success"] is False


def test_utc_suffix_round_trips(client, seed, auth_headers) -> None:
    body = dict(SCHEDULE_BODY, proposed_at="2024-01-05T08:30:00Z",
                start_time="2024-01-10T09:00:00Z", end_time="2024-01-10T10:00:00Z")
    headers = auth_headers(seed.dewi)

    created = client.post("/api/v1/schedules", json=body, headers=headers)
    assert created.status_code == 201

    detail = client.get(f"/api/v1/schedules/{created.get_json()['data']['id']}", headers=headers)
    data = detail.get_json()["data"]
    for field in ("proposed_at", "start_time", "end_time"):
        assert data[field] == body[field]


def test_offset_timestamps_are_stored_as_utc(client, seed, auth_headers) -> None:
    body = dict(SCHEDULE_BODY, start_time="2024-01-10T09:00:00+07:00",
                end_time="2024-01-10T10:00:00+07:00")

    response = client.post("/api/v1/schedules", json=body, headers=auth_headers(seed.dewi))

    assert response.status_code == 201
    data = response.get_json()["data"]
    assert data["start_time"] == "2024-01-10T02:00:00Z"
    assert data["end_time"] == "2024-01-10T03:00:00Z"


def test_unparseable_timestamp_is_reported_as_invalid(client, seed, auth_headers) -> None:
    body = dict(SCHEDULE_BODY, start_time="next tuesday")

    response = client.post("/api/v1/schedules", json=body, headers=auth_headers(seed.dewi))

    assert response.status_code == 400
    assert response.get_json()["error"]["start_time"] == [
        "start_time is not a valid ISO 8601 datetime."
    ]


def test_create_with_missing_fields_is_400(client, seed, auth_headers) -> None:
    response = client.post("/api/v1/schedules", json={"description": "no times"},
                           headers=auth_headers(seed.dewi))

    assert response.status_code == 400
    body = response.get_json()
    assert body["message"] == "invalid request body"
    assert set(body["error"]) == {"proposed_at", "start_time", "end_time"}


def test_create_with_reversed_window_is_400(client, seed, auth_headers) -> None:
    body = dict(SCHEDULE_BODY, end_time="2024-01-10T08:00:00")

    response = client.post("/api/v1/schedules", json=body, headers=auth_headers(seed.dewi))

    assert response.status_code == 400
    assert "end_time" in response.get_json()["error"]


def test_lecturer_create_is_403(client, seed, auth_headers) -> None:
    response = client.post("/api/v1/schedules", json=SCHEDULE_BODY, headers=auth_headers(seed.ani))

    assert response.status_code == 403


def test_list_returns_meta(client, seed, auth_headers) -> None:
    for _ in range(3):
        _create(client, auth_headers(seed.dewi))

    response = client.get("/api/v1/schedules?page=2&per_page=2", headers=auth_headers(seed.budi))

    body = response.get_json()
    assert response.status_code == 200
    assert len(body["data"]) == 1
    assert body["meta"] == {"page": 2, "per_page": 2, "max_page": 2, "count": 3}


def test_list_defaults_pagination(client, seed, auth_headers) -> None:
    response = client.get("/api/v1/schedules", headers=auth_headers(seed.eko))

    assert response.get_json()["meta"] == {"page": 1, "per_page": 10, "max_page": 0, "count": 0}


def test_update_by_creator(client, seed, auth_headers) -> None:
    created = _create(client, auth_headers(seed.dewi))
    body = dict(SCHEDULE_BODY, location="Online")

    response = client.put(f"/api/v1/schedules/{created['id']}", json=body,
                          headers=auth_headers(seed.dewi))

    assert response.status_code == 200
    assert response.get_json()["data"]["location"] == "Online"


def test_update_by_other_student_is_403(client, seed, auth_headers) -> None:
    created = _create(client, auth_headers(seed.dewi))

    response = client.put(f"/api/v1/schedules/{created['id']}", json=SCHEDULE_BODY,
                          headers=auth_headers(seed.eko))

    assert response.status_code == 403


def test_student_approval_is_403(client, seed, auth_headers) -> None:
    created = _create(client, auth_headers(seed.dewi))

    response = client.post(f"/api/v1/schedules/{created['id']}/approval",
                           json={"status": "approved"}, headers=auth_headers(seed.dewi))

    assert response.status_code == 403
    assert response.get_json()["error"] == "access denied"


def test_invalid_approval_status_is_400(client, seed, auth_headers) -> None:
    created = _create(client, auth_headers(seed.dewi))

    response = client.post(f"/api/v1/schedules/{created['id']}/approval",
                           json={"status": "maybe"}, headers=auth_headers(seed.ani))

    assert response.status_code == 400


def test_repeated_approval_is_409(app, client, seed, auth_headers) -> None:
    created = _create(client, auth_headers(seed.dewi))
    url = f"/api/v1/schedules/{created['id']}/approval"

    assert client.post(url, json={"status": "rejected"}, headers=auth_headers(seed.ani)).status_code == 200
    assert client.post(url, json={"status": "approved"}, headers=auth_headers(seed.budi)).status_code == 409

    with app.app_context():
        schedule = db.session.get(Schedule, created["id"])
        assert schedule.status is ScheduleStatus.REJECTED
        assert schedule.approved_by_id == seed.ani


def test_thesis_detail_and_update(client, seed, auth_headers) -> None:
    url = f"/api/v1/theses/{seed.thesis_a}"

    detail = client.get(url, headers=auth_headers(seed.citra)).get_json()["data"]
    assert detail["student"]["nim"] == seed.dewi_nim

    response = client.put(url, json={"title": "Thesis A", "progress": "bab2"},
                          headers=auth_headers(seed.dewi))
    assert response.status_code == 200
    assert response.get_json()["data"]["progress"] == "bab2"


def test_thesis_update_with_unknown_progress_is_400(client, seed, auth_headers) -> None:
    response = client.put(f"/api/v1/theses/{seed.thesis_a}",
                          json={"title": "Thesis A", "progress": "bab9"},
                          headers=auth_headers(seed.dewi))

    assert response.status_code == 400
    assert "progress" in response.get_json()["error"]


def test_lecturer_thesis_list(client, seed, auth_headers) -> None:
    url = f"/api/v1/theses/lecturer/{seed.ani_lecturer}"

    assert client.get(url, headers=auth_headers(seed.dewi)).status_code == 403

    body = client.get(url, headers=auth_headers(seed.budi)).get_json()
    assert [t["id"] for t in body["data"]] == [seed.thesis_a]
    assert body["meta"]["count"] == 1


def test_unknown_route_renders_json(client, seed) -> None:
    response = client.get("/api/v1/nothing-here")

    assert response.status_code == 404
    assert response.get_json()["success"] is False


@pytest.mark.parametrize("method, path, user", [
    ("post", "/api/v1/schedules", "dewi"),
    ("put", "/api/v1/schedules/{schedule}", "dewi"),
    ("post", "/api/v1/schedules/{schedule}/approval", "ani"),
    ("put", "/api/v1/theses/{thesis}", "dewi"),
])
@pytest.mark.parametrize("body", [["x"], "approved", 42])
def test_non_object_body_is_400(client, seed, auth_headers, method, path, user, body) -> None:
    schedule = _create(client, auth_headers(seed.dewi))
    url = path.format(schedule=schedule["id"], thesis=seed.thesis_a)

    response = getattr(client, method)(url, json=body, headers=auth_headers(getattr(seed, user)))

    assert response.status_code == 400
    assert response.get_json()["message"] == "request body must be a JSON object"


@pytest.mark.parametrize("query", ["page=abc", "per_page=1.5", "page=100000000000000000000"])
def test_bad_pagination_query_is_400(client, seed, auth_headers, query) -> None:
    for url in ("/api/v1/schedules", f"/api/v1/theses/lecturer/{seed.ani_lecturer}"):
        response = client.get(f"{url}?{query}", headers=auth_headers(seed.ani))

        assert response.status_code == 400
        assert response.get_json()["success"] is False


def test_far_page_within_range_is_empty(client, seed, auth_headers) -> None:
    _create(client, auth_headers(seed.dewi))

    response = client.get("/api/v1/schedules?page=1000000000000", headers=auth_headers(seed.dewi))

    body = response.get_json()
    assert response.status_code == 200
    assert body["data"] == []
    assert body["meta"] == {"page": 1000000000000, "per_page": 10, "max_page": 1, "count": 1}
