from photo_api.config import settings


def test_health_check(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "service": settings.app_name}


def test_oversized_body_is_rejected(client, alice_headers):
    payload = "x" * (settings.max_request_size + 1)

    response = client.post(
        "/api/photo/",
        content=payload,
        headers={**alice_headers, "Content-Type": "application/json"},
    )

    assert response.status_code == 413
    assert response.json()["success"] is False


def test_malformed_body_is_bad_request(client, alice_headers):
    response = client.post(
        "/api/photo/",
        content="{not json",
        headers={**alice_headers, "Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json()["success"] is False
