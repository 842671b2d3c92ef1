from __future__ import annotations

import pytest
from flask import Flask
from flask.testing import FlaskClient

from identity_service.app import CONTAINER_EXTENSION, create_app
from identity_service.infrastructure.container import Container
from identity_service.shared.config import AppConfig, SecurityConfig
from identity_service.shared.utils import client_ip


def _config(**overrides) -> AppConfig:
    security = {"ENABLE_RATE_LIMIT": False, **overrides.pop("security", {})}
    return AppConfig(
        SECRET_KEY="test-secret",
        PASSWORD_HASH_METHOD="pbkdf2:sha256:1000",
        security=SecurityConfig(**security),
        **overrides,
    )


@pytest.fixture()
def app() -> Flask:
    return create_app(_config())


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    return app.test_client()


def _container(app: Flask) -> Container:
    return app.extensions[CONTAINER_EXTENSION]


def _register(client: FlaskClient, name: str, email: str, password: str = "pw") -> None:
    response = client.post(
        "/register", json={"name": name, "email": email, "password": password}
    )
    assert response.status_code == 201, response.get_json()


def _login(client: FlaskClient, email: str, password: str = "pw") -> str:
    response = client.post("/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.get_json()
    return response.get_json()["token"]


def _auth(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def test_register_login_list_flow(client: FlaskClient) -> None:
    register = client.post(
        "/register", json={"name": "A", "email": "a@x.com", "password": "pw"}
    )
    assert register.status_code == 201
    assert register.get_json() == {"message": "User registered successfully!"}

    token = _login(client, "a@x.com")

    listed = client.get("/users", headers=_auth(token))
    assert listed.status_code == 200
    body = listed.get_json()
    assert body == [{"id": 1, "name": "A", "email": "a@x.com"}]
    assert list(body[0]) == ["id", "name", "email"]
    assert b"password" not in listed.data


def test_register_duplicate_email(client: FlaskClient) -> None:
    _register(client, "A", "a@x.com")

    response = client.post(
        "/register", json={"name": "B", "email": "a@x.com", "password": "other"}
    )

    assert response.status_code == 400
    assert response.get_json() == {"message": "Email already registered."}


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"name": "A", "email": "a@x.com"},
        {"name": "", "email": "a@x.com", "password": "pw"},
        {"name": 123, "email": "a@x.com", "password": "pw"},
        {"name": "A", "email": None, "password": "pw"},
        ["A", "a@x.com", "pw"],
    ],
)
def test_register_requires_all_fields(client: FlaskClient, payload) -> None:
    response = client.post("/register", json=payload)

    assert response.status_code == 400
    assert response.get_json() == {"message": "Name, email, and password are required."}


def test_register_with_invalid_json_body(client: FlaskClient) -> None:
    response = client.post(
        "/register", data="{not json", content_type="application/json"
    )

    assert response.status_code == 400
    assert response.get_json() == {"message": "Name, email, and password are required."}


@pytest.mark.parametrize(
    "payload",
    [
        {"email": "a@x.com", "password": "wrong"},
        {"email": "nobody@x.com", "password": "pw"},
        {"email": "a@x.com"},
        {},
    ],
)
def test_login_failures(client: FlaskClient, payload: dict) -> None:
    _register(client, "A", "a@x.com")

    response = client.post("/login", json=payload)

    assert response.status_code == 401
    assert response.get_json() == {"message": "Invalid email or password."}


def test_missing_token_is_401(client: FlaskClient) -> None:
    response = client.get("/users")

    assert response.status_code == 401
    assert response.get_json() == {"message": "Access denied. No token provided."}


@pytest.mark.parametrize("header", ["Bearer not-a-jwt", "garbage", "Bearer "])
def test_invalid_token_is_403(client: FlaskClient, header: str) -> None:
    response = client.get("/users", headers={"Authorization": header})

    assert response.status_code == 403
    assert response.get_json() == {"message": "Invalid or expired token."}


def test_token_without_bearer_prefix_is_accepted(client: FlaskClient) -> None:
    _register(client, "A", "a@x.com")
    token = _login(client, "a@x.com")

    response = client.get("/users", headers={"Authorization": token})

    assert response.status_code == 200


def test_auth_runs_before_id_parsing(client: FlaskClient) -> None:
    assert client.put("/users/abc", json={"name": "x"}).status_code == 401
    assert client.delete("/users/abc").status_code == 401


def test_delete_is_self_only(client: FlaskClient) -> None:
    _register(client, "A", "a@x.com")
    _register(client, "B", "b@x.com")
    token_a = _login(client, "a@x.com")
    token_b = _login(client, "b@x.com")

    denied = client.delete("/users/1", headers=_auth(token_b))
    assert denied.status_code == 403
    assert denied.get_json() == {"message": "You are not authorized to delete this user."}
    remaining = client.get("/users", headers=_auth(token_a)).get_json()
    assert [user["id"] for user in remaining] == [1, 2]

    client.delete("/users/2", headers=_auth(token_b))
    deleted = client.delete("/users/1", headers=_auth(token_a))
    assert deleted.status_code == 200
    assert deleted.get_json() == {"message": "User with ID 1 deleted successfully."}
    assert client.get("/users", headers=_auth(token_a)).get_json() == []


def test_delete_self_twice_is_404(client: FlaskClient) -> None:
    _register(client, "A", "a@x.com")
    token = _login(client, "a@x.com")
    client.delete("/users/1", headers=_auth(token))

    response = client.delete("/users/1", headers=_auth(token))

    assert response.status_code == 404
    assert response.get_json() == {"message": "User with ID 1 not found."}


@pytest.mark.parametrize("raw_id", ["abc", "1.5", "1e3", "0x1", "١"])
def test_bad_user_id_never_reaches_directory(
    app: Flask, client: FlaskClient, monkeypatch: pytest.MonkeyPatch, raw_id: str
) -> None:
    _register(client, "A", "a@x.com")
    token = _login(client, "a@x.com")
    directory = _container(app).user_directory

    def _fail(*_a, **_kw):
        raise AssertionError("directory touched")

    for name in ("find_by_id", "find_by_email", "update", "delete", "list_all"):
        monkeypatch.setattr(directory, name, _fail)

    put = client.put(f"/users/{raw_id}", json={"name": "x"}, headers=_auth(token))
    delete = client.delete(f"/users/{raw_id}", headers=_auth(token))

    assert put.status_code == 400
    assert put.get_json() == {"message": "Invalid user ID"}
    assert delete.status_code == 400
    assert delete.get_json() == {"message": "Invalid user ID"}


def test_oversized_user_id_is_400(client: FlaskClient) -> None:
    _register(client, "A", "a@x.com")
    token = _login(client, "a@x.com")
    huge = "9" * 5000

    put = client.put(f"/users/{huge}", json={"name": "x"}, headers=_auth(token))
    delete = client.delete(f"/users/{huge}", headers=_auth(token))

    assert put.status_code == 400
    assert put.get_json() == {"message": "Invalid user ID"}
    assert delete.status_code == 400
    assert delete.get_json() == {"message": "Invalid user ID"}
    assert client.get("/health").get_json()["users"] == 1


def test_update_returns_user_without_hash(client: FlaskClient) -> None:
    _register(client, "A", "a@x.com")
    token = _login(client, "a@x.com")

    response = client.put("/users/1", json={"name": "Alice"}, headers=_auth(token))

    assert response.status_code == 200
    assert response.get_json() == {
        "message": "User with ID 1 updated successfully.",
        "user": {"id": 1, "name": "Alice", "email": "a@x.com"},
    }


def test_update_password_changes_login(client: FlaskClient) -> None:
    _register(client, "A", "a@x.com", "old")
    token = _login(client, "a@x.com", "old")

    client.put("/users/1", json={"password": "new"}, headers=_auth(token))

    assert client.post("/login", json={"email": "a@x.com", "password": "old"}).status_code == 401
    assert _login(client, "a@x.com", "new")


def test_update_treats_empty_and_null_as_absent(client: FlaskClient) -> None:
    _register(client, "A", "a@x.com")
    token = _login(client, "a@x.com")

    response = client.put(
        "/users/1",
        json={"name": "", "email": None, "password": ""},
        headers=_auth(token),
    )

    assert response.status_code == 200
    assert response.get_json()["user"] == {"id": 1, "name": "A", "email": "a@x.com"}
    assert _login(client, "a@x.com")


def test_update_rejects_non_string_fields(client: FlaskClient) -> None:
    _register(client, "A", "a@x.com")
    token = _login(client, "a@x.com")

    response = client.put("/users/1", json={"name": 42}, headers=_auth(token))

    assert response.status_code == 400
    assert response.get_json() == {"message": "Name, email, and password must be strings."}


def test_update_email_conflict_keeps_record(client: FlaskClient) -> None:
    _register(client, "A", "a@x.com")
    _register(client, "B", "b@x.com")
    token = _login(client, "a@x.com")

    response = client.put(
        "/users/1", json={"name": "Changed", "email": "b@x.com"}, headers=_auth(token)
    )

    assert response.status_code == 400
    assert response.get_json() == {"message": "Email already in use by another user."}
    users = client.get("/users", headers=_auth(token)).get_json()
    assert users[0] == {"id": 1, "name": "A", "email": "a@x.com"}


def test_update_unknown_user_is_404(client: FlaskClient) -> None:
    _register(client, "A", "a@x.com")
    token = _login(client, "a@x.com")

    response = client.put("/users/99", json={"name": "x"}, headers=_auth(token))

    assert response.status_code == 404
    assert response.get_json() == {"message": "User with ID 99 not found."}


def test_update_is_not_restricted_to_self(client: FlaskClient) -> None:
    _register(client, "A", "a@x.com")
    _register(client, "B", "b@x.com")
    token = _login(client, "a@x.com")

    response = client.put("/users/2", json={"name": "B2"}, headers=_auth(token))

    assert response.status_code == 200
    assert response.get_json()["user"]["name"] == "B2"


def test_ids_are_not_reused_through_api(client: FlaskClient) -> None:
    _register(client, "A", "a@x.com")
    token = _login(client, "a@x.com")
    client.delete("/users/1", headers=_auth(token))

    _register(client, "B", "b@x.com")

    assert client.get("/users", headers=_auth(token)).get_json() == [
        {"id": 2, "name": "B", "email": "b@x.com"}
    ]


def test_health_reports_user_count(client: FlaskClient) -> None:
    assert client.get("/health").get_json() == {"ok": True, "users": 0}

    _register(client, "A", "a@x.com")

    assert client.get("/health").get_json() == {"ok": True, "users": 1}


def test_security_headers_on_every_response(client: FlaskClient) -> None:
    for response in (client.get("/health"), client.get("/users"), client.get("/nope")):
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"
        assert response.headers["Referrer-Policy"] == "no-referrer"
        assert "Strict-Transport-Security" not in response.headers


def test_hsts_header_when_enabled() -> None:
    client = create_app(_config(security={"ENABLE_HSTS": True})).test_client()

    response = client.get("/health")

    assert response.headers["Strict-Transport-Security"].startswith("max-age=")


def test_unknown_route_and_method_are_json(client: FlaskClient) -> None:
    missing = client.get("/nope")
    wrong_method = client.post("/health")

    assert missing.status_code == 404
    assert isinstance(missing.get_json()["message"], str)
    assert wrong_method.status_code == 405
    assert isinstance(wrong_method.get_json()["message"], str)


def test_body_over_limit_is_413() -> None:
    client = create_app(_config(MAX_CONTENT_LENGTH=64)).test_client()

    response = client.post(
        "/register", json={"name": "A" * 200, "email": "a@x.com", "password": "pw"}
    )

    assert response.status_code == 413
    assert "message" in response.get_json()


@pytest.mark.parametrize("debug_logging", [False, True])
def test_unexpected_error_is_generic_500(
    monkeypatch: pytest.MonkeyPatch, debug_logging: bool
) -> None:
    app = create_app(_config(DEBUG_LOGGING=debug_logging))
    client = app.test_client()
    _register(client, "A", "a@x.com")
    token = _login(client, "a@x.com")

    def _boom():
        raise RuntimeError("database on fire")

    monkeypatch.setattr(_container(app).list_users_use_case, "execute", _boom)

    response = client.get("/users", headers=_auth(token))

    assert response.status_code == 500
    assert response.get_json() == {"message": "Something went wrong!"}
    assert b"database on fire" not in response.data


def test_client_ip_ignores_forwarded_for_by_default(app: Flask) -> None:
    with app.test_request_context(
        "/health",
        headers={"X-Forwarded-For": "6.6.6.6"},
        environ_base={"REMOTE_ADDR": "192.0.2.7"},
    ):
        assert client_ip() == "192.0.2.7"



def test_rate_limit_ignores_forwarded_for_by_default() -> None:
    client = create_app(
        _config(security={"ENABLE_RATE_LIMIT": True, "RL_LIMIT": 2})
    ).test_client()

    statuses = [
        client.get("/health", headers={"X-Forwarded-For": f"1.2.3.{i}"}).status_code
        for i in range(5)
    ]

    assert statuses == [200, 200, 429, 429, 429]
    limited = client.get("/health")
    assert limited.get_json() == {
        "message": "Too many requests from this IP, please try again later."
    }
    assert limited.headers["X-Content-Type-Options"] == "nosniff"


def test_rate_limit_per_forwarded_client_behind_trusted_proxy() -> None:
    client = create_app(
        _config(security={"ENABLE_RATE_LIMIT": True, "RL_LIMIT": 2, "TRUST_PROXY": True})
    ).test_client()
    first_ip = {"X-Forwarded-For": "10.0.0.1"}

    assert client.get("/health", headers=first_ip).status_code == 200
    assert client.get("/health", headers=first_ip).status_code == 200
    assert client.get("/health", headers=first_ip).status_code == 429
    assert client.get("/health", headers={"X-Forwarded-For": "10.0.0.2"}).status_code == 200



def test_each_app_has_its_own_directory() -> None:
    first = create_app(_config())
    second = create_app(_config())

    _register(first.test_client(), "A", "a@x.com")

    assert second.test_client().get("/health").get_json()["users"] == 0
