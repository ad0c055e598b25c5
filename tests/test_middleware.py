from __future__ import annotations

import pytest
from fastapi.testclient import TestClient


@pytest.mark.parametrize("path", ["/video/5", "/video/101", "/anything/else", "/"])
def test_preflight_returns_204_with_cors_headers_only(client: TestClient, path: str) -> None:
    response = client.options(path)

    assert response.status_code == 204
    assert response.content == b""
    assert response.headers["access-control-allow-origin"] == "*"
    assert response.headers["access-control-allow-methods"] == "GET, OPTIONS"
    assert response.headers["access-control-allow-headers"] == "Content-Type, Authorization"
    assert "x-request-id" not in response.headers


def test_preflight_does_not_count_attempt(client: TestClient) -> None:
    client.options("/video/5")

    assert client.get("/video/5").json()["attempt"] == 1


def test_preserves_incoming_request_id_header(client: TestClient) -> None:
    incoming_id = "test-request-id-123"
    resp = client.get("/video/1", headers={"X-Request-ID": incoming_id})

    assert resp.status_code == 202
    assert resp.headers.get("X-Request-ID") == incoming_id


def test_generates_request_id_when_missing(client: TestClient) -> None:
    resp = client.get("/video/1")

    generated = resp.headers.get("X-Request-ID")
    assert generated
    assert resp.headers.get("X-Request-Duration-ms") is not None


def test_request_id_on_invalid_endpoint(client: TestClient) -> None:
    resp = client.get("/nope", headers={"X-Request-ID": "abc"})

    assert resp.status_code == 404
    assert resp.headers.get("X-Request-ID") == "abc"
