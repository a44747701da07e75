"""Route tests against the FastAPI app with the database replaced by fakes."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from roombook.dependencies import get_db
from roombook.enums import UserRole
from roombook.exceptions import UnknownRuleError, validator_configuration_exception_handler
from roombook.limiter import limiter
from roombook.main import app
from roombook.schemas.common_responses import PaginationMeta


class StoredRoom:
    def __init__(self, room_nr: str, name: str, location: str | None = None):
        self.id = f"room{room_nr}"
        self.room_nr = room_nr
        self.name = name
        self.location = location
        self.images: list[str] = []
        self.save = AsyncMock()
        self.soft_delete = AsyncMock()

    def has_images(self) -> bool:
        return bool(self.images)

    def get_images(self) -> list[str]:
        return list(self.images)


def make_user(username: str, role: UserRole) -> MagicMock:
    user = MagicMock()
    user.id = f"user-{username}"
    user.username = username
    user.role = role
    return user


@pytest.fixture
def client(database):
    limiter.enabled = False
    app.dependency_overrides[get_db] = lambda: database
    # no context manager: the lifespan would connect to MongoDB
    yield TestClient(app)
    app.dependency_overrides.clear()
    limiter.enabled = True


def login(client: TestClient, role: UserRole) -> None:
    user = make_user("jane", role)
    with patch("roombook.routes.auth.authenticate", AsyncMock(return_value=user)):
        response = client.post(
            "/login",
            data={"username": "jane", "password": "geheim123"},
            follow_redirects=False,
        )
    assert response.status_code == 303


@pytest.fixture
def rooms():
    stored = [StoredRoom("A101", "Seminarraum", "EG"), StoredRoom("B204", "Labor")]
    meta = PaginationMeta(total_items=2, total_pages=1, current_page=1, page_size=20)
    with patch("roombook.routes.rooms.list_rooms", AsyncMock(return_value=(stored, meta))):
        yield stored


class TestApi:
    def test_health(self, client):
        response = client.get("/api/health")

        assert response.status_code == 200
        assert response.json() == {"detail": "ok"}

    def test_info(self, client):
        response = client.get("/api")

        assert response.json()["title"] == "Roombook"


class TestRoomViews:
    def test_index_lists_rooms(self, client, rooms):
        response = client.get("/rooms")

        assert response.status_code == 200
        assert "Seminarraum" in response.text
        assert "B204" in response.text
        assert "/rooms/create" not in response.text

    def test_index_shows_admin_actions(self, client, rooms):
        login(client, UserRole.ADMIN)

        response = client.get("/rooms")

        assert "/rooms/create" in response.text
        assert "/rooms/roomA101/delete" in response.text

    def test_create_requires_login(self, client):
        assert client.get("/rooms/create").status_code == 401

    def test_create_requires_admin(self, client):
        login(client, UserRole.USER)

        assert client.get("/rooms/create").status_code == 403

    def test_store_invalid_form_renders_errors(self, client):
        login(client, UserRole.ADMIN)

        response = client.post("/rooms", data={"name": "", "room_nr": "A101"})

        assert response.status_code == 422
        assert "Name ist ein Pflichtfeld." in response.text
        assert "Raumnummer darf nur einmal verwendet werden." in response.text
        assert 'value="A101"' in response.text

    def test_store_valid_form_redirects(self, client):
        login(client, UserRole.ADMIN)

        with patch("roombook.services.rooms.Room") as room_cls:
            room_cls.return_value.insert = AsyncMock()
            room_cls.return_value.room_nr = "C300"
            response = client.post(
                "/rooms",
                data={"name": "Labor", "location": "", "room_nr": "C300"},
                follow_redirects=False,
            )

        assert response.status_code == 303
        assert response.headers["location"].endswith("/rooms")
        room_cls.return_value.insert.assert_awaited_once()

    def test_edit_unknown_room(self, client):
        login(client, UserRole.ADMIN)

        with patch("roombook.routes.rooms.get_room", AsyncMock(return_value=None)):
            response = client.get("/rooms/665f1c2b9a1e4c0012345678")

        assert response.status_code == 404

    def test_update_keeps_own_room_nr(self, client):
        login(client, UserRole.ADMIN)
        room = StoredRoom("A101", "Seminarraum")

        with patch("roombook.routes.rooms.get_room", AsyncMock(return_value=room)):
            response = client.post(
                "/rooms/roomA101",
                data={"name": "Großer Seminarraum", "room_nr": "A101"},
                follow_redirects=False,
            )

        assert response.status_code == 303
        assert room.name == "Großer Seminarraum"
        room.save.assert_awaited_once()

    def test_delete(self, client):
        login(client, UserRole.ADMIN)
        room = StoredRoom("A101", "Seminarraum")

        with patch("roombook.routes.rooms.get_room", AsyncMock(return_value=room)):
            response = client.get("/rooms/roomA101/delete", follow_redirects=False)

        assert response.status_code == 303
        room.soft_delete.assert_awaited_once()


class TestAuthViews:
    def test_login_failure(self, client):
        with patch("roombook.routes.auth.authenticate", AsyncMock(return_value=None)):
            response = client.post("/login", data={"username": "jane", "password": "x"})

        assert response.status_code == 401
        assert "Username oder Passwort sind falsch." in response.text

    def test_logout(self, client, rooms):
        login(client, UserRole.ADMIN)

        client.get("/logout", follow_redirects=False)

        assert "/rooms/create" not in client.get("/rooms").text

    def test_sign_up_errors(self, client):
        response = client.post(
            "/sign-up",
            data={
                "username": "admin",
                "password": "geheim123",
                "password_repeat": "geheim321",
            },
        )

        assert response.status_code == 422
        assert "Passwort und Passwort wiederholen müssen ident sein." in response.text
        assert "Nutzungsbedingungen ist ein Pflichtfeld." in response.text
        assert "Username darf nur einmal verwendet werden." in response.text


class TestRedirector:
    def test_redirect_counts_clicks(self, client):
        for _ in range(2):
            response = client.get(
                "/redirect", params={"url": "https://example.org/"}, follow_redirects=False
            )
            assert response.status_code == 302
            assert response.headers["location"] == "https://example.org/"

        stats = client.get("/redirect/stats")

        assert "https://example.org/" in stats.text
        assert "<td>2</td>" in stats.text

    def test_redirect_rejects_foreign_scheme(self, client):
        response = client.get(
            "/redirect", params={"url": "javascript:alert(1)"}, follow_redirects=False
        )

        assert response.status_code == 400


async def test_unknown_rule_handler_returns_500():
    request = MagicMock()
    request.method = "POST"
    request.url.path = "/rooms"

    response = await validator_configuration_exception_handler(
        request, UnknownRuleError("bogus")
    )

    assert response.status_code == 500
