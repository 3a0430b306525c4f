"""Ids outside the SQLite integer range are rejected while binding the request."""

import pytest

PREFIXES = [
    "/api/commits",
    "/api/recommendationrequests",
    "/api/ucsbdiningcommonsmenuitem",
    "/api/ucsbdates",
]


@pytest.mark.parametrize("prefix", PREFIXES)
@pytest.mark.parametrize("method", ["GET", "DELETE"])
@pytest.mark.parametrize("entity_id", ["9223372036854775808", "-9223372036854775809"])
def test_out_of_range_id_is_rejected(client, admin_headers, prefix, method, entity_id):
    response = client.request(method, prefix, params={"id": entity_id}, headers=admin_headers)

    assert response.status_code == 422


def test_largest_id_is_a_plain_not_found(client, admin_headers):
    response = client.get("/api/commits", params={"id": 2**63 - 1}, headers=admin_headers)

    assert response.status_code == 404
    assert response.json()["message"] == "Commit with id 9223372036854775807 not found"


def test_out_of_range_id_still_needs_a_role(client):
    response = client.get("/api/commits", params={"id": 2**63})

    assert response.status_code == 403
