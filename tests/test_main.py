"""Tests for main API endpoints."""

from fastapi.testclient import TestClient


def test_root_endpoint(client: TestClient) -> None:
    """Test root endpoint returns welcome message."""
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "Welcome to LearnFlow API"}


def test_health_endpoint(client: TestClient) -> None:
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_api_root_endpoint(client: TestClient) -> None:
    """Test API root endpoint."""
    response = client.get("/api/")
    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "LearnFlow API"
    assert data["version"] == "0.1.0"
    assert data["docs"] == "/api/docs"


def test_domain_errors_use_detail_body(client: TestClient) -> None:
    """Domain errors are rendered as {"detail": message} with their status code."""
    response = client.get("/api/departments/unknown")
    assert response.status_code == 404
    assert response.json() == {"detail": "Department not found"}
