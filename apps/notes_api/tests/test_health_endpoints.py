"""Тесты health-check endpoint-ов."""

# --- Imports ---
from fastapi.testclient import TestClient

from apps.notes_api.main import app


client = TestClient(app)


# --- Основные блоки ---
def test_root_endpoint_returns_service_links() -> None:
    response = client.get('/')
    assert response.status_code == 200
    payload = response.json()
    assert payload['name'] == 'Notes API'
    assert payload['docs'] == '/docs'
    assert payload['health'] == '/health'


def test_health_endpoint_returns_ok() -> None:
    response = client.get('/health')
    assert response.status_code == 200
    assert response.json() == {'status': 'ok'}
