"""HTTP tests for the user endpoints, health check and request ids."""

from conftest import USER_ID

API = "/api/v1"


class TestHealth:
    """Test GET /health."""

    async def test_health(self, client):
        response = await client.get(f"{API}/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "version": "1.0.0"}


class TestRequestId:
    """Test X-Request-ID propagation."""

    async def test_incoming_request_id_is_echoed(self, client):
        response = await client.get(f"{API}/health", headers={"X-Request-ID": "req-123"})
        assert response.headers["X-Request-ID"] == "req-123"

    async def test_request_id_is_generated_when_missing(self, client):
        response = await client.get(f"{API}/health")
        assert len(response.headers["X-Request-ID"]) == 32

    async def test_error_body_carries_request_id(self, client):
        response = await client.delete(f"{API}/users/{USER_ID}", headers={"X-Request-ID": "req-404"})

        assert response.status_code == 404
        assert response.json()["request_id"] == "req-404"


class TestUsers:
    """Test POST / PATCH / DELETE /users."""

    async def test_create_user(self, client):
        response = await client.post(
            f"{API}/users", json={"email": "Taro@Example.com", "name": "taro_yamada"}
        )

        assert response.status_code == 201
        data = response.json()
        assert data["email"] == "Taro@Example.com"
        assert data["name"] == "taro_yamada"
        assert len(data["id"]) == 36

    async def test_invalid_email_is_422(self, client):
        response = await client.post(f"{API}/users", json={"email": "broken", "name": "taro"})

        assert response.status_code == 422
        assert response.json() == {
            "error": "validation_error",
            "message": "Invalid email format",
            "request_id": response.headers["X-Request-ID"],
        }

    async def test_update_name(self, client):
        created = (
            await client.post(f"{API}/users", json={"email": "taro@example.com", "name": "taro"})
        ).json()

        response = await client.patch(f"{API}/users/{created['id']}", json={"name": "hanako"})

        assert response.status_code == 200
        assert response.json()["name"] == "hanako"
        assert response.json()["email"] == "taro@example.com"

    async def test_update_missing_user_is_404(self, client):
        response = await client.patch(f"{API}/users/{USER_ID}", json={"name": "hanako"})
        assert response.status_code == 404

    async def test_delete_user(self, client):
        created = (
            await client.post(f"{API}/users", json={"email": "taro@example.com", "name": "taro"})
        ).json()

        assert (await client.delete(f"{API}/users/{created['id']}")).status_code == 204
        assert (await client.delete(f"{API}/users/{created['id']}")).status_code == 404
