"""HTTP tests for registration, login and user listing."""

from fastapi import status
from httpx import AsyncClient

from app.managers.token_manager import decode_access_token

NEW_USER = {"username": "root", "name": "Superuser", "password": "salainen"}


async def register(client: AsyncClient, **overrides: str) -> dict:
    response = await client.post("/api/users", json={**NEW_USER, **overrides})
    assert response.status_code == status.HTTP_201_CREATED
    return response.json()


class TestRegistration:
    async def test_creates_user(self, client: AsyncClient, user_store) -> None:
        body = await register(client)

        assert body["username"] == "root"
        assert body["name"] == "Superuser"
        assert body["blogs"] == []
        assert "password" not in body
        assert "password_hash" not in body
        stored = await user_store.get_by_username("root")
        assert stored.password_hash != "salainen"

    async def test_duplicate_username_is_409(self, client: AsyncClient) -> None:
        await register(client)

        response = await client.post("/api/users", json=NEW_USER)

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json() == {"error": "username must be unique"}

    async def test_short_username_is_400(self, client: AsyncClient) -> None:
        response = await client.post("/api/users", json={**NEW_USER, "username": "ro"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        body = response.json()
        assert body["error"] == "Validation failed"
        assert body["errors"][0]["field"] == "username"

    async def test_short_password_is_400(self, client: AsyncClient) -> None:
        response = await client.post("/api/users", json={**NEW_USER, "password": "pw"})
        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestLogin:
    async def test_returns_token_and_profile(self, client: AsyncClient) -> None:
        user = await register(client)

        response = await client.post(
            "/api/login",
            json={"username": "root", "password": "salainen"},
        )

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["username"] == "root"
        assert body["name"] == "Superuser"
        token_data = decode_access_token(body["token"])
        assert token_data is not None
        assert str(token_data.user_id) == user["id"]

    async def test_wrong_password_is_401(self, client: AsyncClient) -> None:
        await register(client)

        response = await client.post("/api/login", json={"username": "root", "password": "nope"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json() == {"error": "invalid username or password"}

    async def test_unknown_user_is_401(self, client: AsyncClient) -> None:
        response = await client.post("/api/login", json={"username": "ghost", "password": "x"})
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    async def test_token_can_create_blogs(self, client: AsyncClient) -> None:
        await register(client)
        login = await client.post("/api/login", json={"username": "root", "password": "salainen"})
        headers = {"Authorization": f"bearer {login.json()['token']}"}

        response = await client.post(
            "/api/blogs",
            json={"title": "Type wars", "url": "http://blog.cleancoder.com/"},
            headers=headers,
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["user"]["name"] == "Superuser"


class TestListUsers:
    async def test_lists_users_with_their_blogs(
        self,
        client: AsyncClient,
        owner_headers: dict[str, str],
    ) -> None:
        created = (
            await client.post(
                "/api/blogs",
                json={"title": "React patterns", "url": "https://reactpatterns.com/"},
                headers=owner_headers,
            )
        ).json()

        response = await client.get("/api/users")

        assert response.status_code == status.HTTP_200_OK
        users = response.json()
        assert len(users) == 1
        assert users[0]["username"] == "mluukkai"
        assert users[0]["blogs"] == [
            {
                "id": created["id"],
                "title": "React patterns",
                "author": None,
                "url": "https://reactpatterns.com/",
                "likes": 0,
            },
        ]

    async def test_deleted_blogs_are_skipped(
        self,
        client: AsyncClient,
        owner_headers: dict[str, str],
    ) -> None:
        created = (
            await client.post(
                "/api/blogs",
                json={"title": "Gone", "url": "https://example.com/"},
                headers=owner_headers,
            )
        ).json()
        await client.delete(f"/api/blogs/{created['id']}", headers=owner_headers)

        users = (await client.get("/api/users")).json()

        assert users[0]["blogs"] == []
