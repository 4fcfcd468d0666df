import pytest
from fastapi.testclient import TestClient

from blog.http_handler import app
from tests.helpers.utils import generate_jwt_token


@pytest.fixture
def test_client(initialize_posts_table) -> TestClient:
    return TestClient(app, raise_server_exceptions=True)


@pytest.fixture
def auth_headers(user_dict: dict[str, str | None]) -> dict[str, str]:
    jwt_token, _ = generate_jwt_token(pytest.jwt_secret, user_dict)
    return {"Authorization": f"Bearer {jwt_token}"}


@pytest.fixture
def other_auth_headers(other_user_dict: dict[str, str | None]) -> dict[str, str]:
    jwt_token, _ = generate_jwt_token(pytest.jwt_secret, other_user_dict)
    return {"Authorization": f"Bearer {jwt_token}"}


@pytest.fixture
def admin_auth_headers(admin_user_dict: dict[str, str | None]) -> dict[str, str]:
    jwt_token, _ = generate_jwt_token(pytest.jwt_secret, admin_user_dict)
    return {"Authorization": f"Bearer {jwt_token}"}
