import logging
from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from ..core.security import StaticTokenVerifier, extract_token, get_token_verifier
from ..demo import app as demo_app

UNAUTHORIZED = {"message": "Authorization header missing or incorrect"}


def test_public_route(demo_client: TestClient) -> None:
    response = demo_client.get("/public")
    assert response.status_code == 200
    assert response.json() == {
        "message": "This is a public route. No authentication required."
    }


def test_root_lists_routes(demo_client: TestClient) -> None:
    response = demo_client.get("/")
    assert response.status_code == 200
    assert set(response.json()["routes"]) == {"public", "protected"}


@pytest.mark.parametrize(
    "headers",
    [
        {},
        {"Authorization": "Bearer wrongtoken"},
        {"Authorization": "Bearer"},
        {"Authorization": "mysecrettoken"},
    ],
)
def test_protected_rejects_missing_or_wrong_token(
    demo_client: TestClient, headers: dict
) -> None:
    response = demo_client.get("/protected", headers=headers)
    assert response.status_code == 401
    assert response.json() == UNAUTHORIZED


def test_protected_accepts_secret(demo_client: TestClient) -> None:
    response = demo_client.get(
        "/protected", headers={"Authorization": "Bearer mysecrettoken"}
    )
    assert response.status_code == 200
    assert response.json() == {
        "message": "You have accessed a protected route with a valid Bearer token!"
    }


def test_token_verifier_is_pluggable(demo_client: TestClient) -> None:
    demo_app.dependency_overrides[get_token_verifier] = lambda: StaticTokenVerifier("rotated")
    try:
        old = demo_client.get("/protected", headers={"Authorization": "Bearer mysecrettoken"})
        new = demo_client.get("/protected", headers={"Authorization": "Bearer rotated"})
    finally:
        demo_app.dependency_overrides.clear()
    assert old.status_code == 401
    assert new.status_code == 200


def test_extract_token() -> None:
    assert extract_token(None) is None
    assert extract_token("Bearer") is None
    assert extract_token("Bearer  abc") == "abc"
    assert extract_token("Token abc extra") == "abc"


def test_request_logger_emits_one_line_per_request(
    demo_client: TestClient, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.INFO, logger="transfer_api.requests"):
        demo_client.get("/public")
        demo_client.get("/protected")

    lines = [r.getMessage() for r in caplog.records if r.name == "transfer_api.requests"]
    assert len(lines) == 2
    assert lines[0].endswith("] GET /public")
    assert lines[1].endswith("] GET /protected")
    timestamp = lines[0][1 : lines[0].index("]")]
    assert datetime.fromisoformat(timestamp).tzinfo is not None
