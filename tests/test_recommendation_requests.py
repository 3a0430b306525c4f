"""Tests for the /api/recommendationrequests routes."""

from datetime import datetime

import pytest

from ucsb_records_api.app.repositories import recommendation_request_repository
from ucsb_records_api.app.schemas import RecommendationRequest

BASE = "/api/recommendationrequests"


def make_request(**overrides) -> RecommendationRequest:
    fields = {
        "requester_email": "cgaucho@ucsb.edu",
        "professor_email": "phtcon@ucsb.edu",
        "explanation": "BS/MS program",
        "date_requested": datetime(2022, 4, 20),
        "date_needed": datetime(2022, 5, 1),
        "done": False,
    }
    fields.update(overrides)
    return RecommendationRequest(**fields)


@pytest.mark.parametrize(
    "method, path",
    [
        ("get", "/all"),
        ("get", "?id=1"),
        ("post", "/post"),
        ("put", "?id=1"),
        ("delete", "?id=1"),
    ],
)
def test_logged_out_users_are_forbidden(client, method, path):
    assert client.request(method.upper(), BASE + path).status_code == 403


@pytest.mark.parametrize("method, path", [("post", "/post"), ("put", "?id=1"), ("delete", "?id=1")])
def test_regular_users_cannot_modify(client, user_headers, method, path):
    recommendation_request_repository.save(make_request())

    response = client.request(method.upper(), BASE + path, headers=user_headers)

    assert response.status_code == 403
    assert recommendation_request_repository.find_by_id(1) == make_request(id=1)


def test_admin_without_user_role_cannot_read(client, admin_only_headers):
    assert client.get(f"{BASE}/all", headers=admin_only_headers).status_code == 403
    assert client.get(BASE, params={"id": 1}, headers=admin_only_headers).status_code == 403


def test_regular_users_cannot_post(client, user_headers):
    response = client.post(
        f"{BASE}/post",
        headers=user_headers,
        params={
            "requesterEmail": "cgaucho@ucsb.edu",
            "professorEmail": "phtcon@ucsb.edu",
            "explanation": "PhD",
            "dateRequested": "2022-04-20T00:00:00",
            "dateNeeded": "2022-05-01T00:00:00",
            "done": "false",
        },
    )
    assert response.status_code == 403
    assert recommendation_request_repository.find_all() == []


def test_logged_in_user_can_list_requests(client, user_headers):
    recommendation_request_repository.save(make_request())
    recommendation_request_repository.save(make_request(requester_email="ldelplaya@ucsb.edu", done=True))

    response = client.get(f"{BASE}/all", headers=user_headers)

    assert response.status_code == 200
    body = response.json()
    assert len(body) == 2
    assert body[0]["dateRequested"] == "2022-04-20T00:00:00"
    assert body[1]["requesterEmail"] == "ldelplaya@ucsb.edu"
    assert body[1]["done"] is True


def test_admin_can_post_a_new_request(client, admin_headers):
    response = client.post(
        f"{BASE}/post",
        headers=admin_headers,
        params={
            "requesterEmail": "cgaucho@ucsb.edu",
            "professorEmail": "phtcon@ucsb.edu",
            "explanation": "BS/MS program",
            "dateRequested": "2022-04-20T00:00:00",
            "dateNeeded": "2022-05-01T00:00:00",
            "done": "true",
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body == {
        "id": body["id"],
        "requesterEmail": "cgaucho@ucsb.edu",
        "professorEmail": "phtcon@ucsb.edu",
        "explanation": "BS/MS program",
        "dateRequested": "2022-04-20T00:00:00",
        "dateNeeded": "2022-05-01T00:00:00",
        "done": True,
    }
    assert body["id"] is not None


def test_post_with_bad_date_is_rejected(client, admin_headers):
    response = client.post(
        f"{BASE}/post",
        headers=admin_headers,
        params={
            "requesterEmail": "cgaucho@ucsb.edu",
            "professorEmail": "phtcon@ucsb.edu",
            "explanation": "BS/MS program",
            "dateRequested": "next tuesday",
            "dateNeeded": "2022-05-01T00:00:00",
            "done": "false",
        },
    )
    assert response.status_code == 422


def test_get_missing_request_returns_404(client, user_headers):
    response = client.get(BASE, params={"id": 7}, headers=user_headers)

    assert response.status_code == 404
    assert response.json() == {
        "type": "EntityNotFoundException",
        "message": "RecommendationRequest with id 7 not found",
    }


def test_update_replaces_every_field(client, admin_headers):
    saved = recommendation_request_repository.save(make_request())
    incoming = {
        "id": 999,
        "requesterEmail": "ldelplaya@ucsb.edu",
        "professorEmail": "richert@ucsb.edu",
        "explanation": "PhD CS Stanford",
        "dateRequested": "2022-05-20T00:00:00",
        "dateNeeded": "2022-11-15T00:00:00",
        "done": True,
    }

    response = client.put(BASE, params={"id": saved.id}, json=incoming, headers=admin_headers)

    assert response.status_code == 200
    assert response.json() == {**incoming, "id": saved.id}
    assert recommendation_request_repository.find_by_id(999) is None
    stored = recommendation_request_repository.find_by_id(saved.id)
    assert stored.professor_email == "richert@ucsb.edu"
    assert stored.date_needed == datetime(2022, 11, 15)
    assert stored.done is True


def test_update_missing_request_returns_404(client, admin_headers):
    incoming = make_request().model_dump(mode="json", by_alias=True)

    response = client.put(BASE, params={"id": 15}, json=incoming, headers=admin_headers)

    assert response.status_code == 404
    assert response.json()["message"] == "RecommendationRequest with id 15 not found"


def test_admin_can_delete_existing_request(client, admin_headers):
    saved = recommendation_request_repository.save(make_request())
    assert saved.id == 1

    response = client.delete(BASE, params={"id": 1}, headers=admin_headers)

    assert response.status_code == 200
    assert response.json() == {"message": "RecommendationRequest with id 1 deleted"}
    assert recommendation_request_repository.find_by_id(1) is None


def test_get_after_delete_returns_404(client, admin_headers):
    saved = recommendation_request_repository.save(make_request())
    client.delete(BASE, params={"id": saved.id}, headers=admin_headers)

    response = client.get(BASE, params={"id": saved.id}, headers=admin_headers)

    assert response.status_code == 404


def test_delete_missing_request_returns_404(client, admin_headers):
    response = client.delete(BASE, params={"id": 15}, headers=admin_headers)

    assert response.status_code == 404
    assert response.json()["message"] == "RecommendationRequest with id 15 not found"
