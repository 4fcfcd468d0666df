import uuid

import pendulum
import pytest

from blog.jwt_bearer import JWTBearer
from blog.models.auth import JWTToken, User
from blog.repositories.post_repository import PostRepository
from blog.services.post_service import PostService


@pytest.fixture
def jwt_bearer() -> JWTBearer:
    return JWTBearer()


@pytest.fixture
def jwt_token(user_dict: dict[str, str | None]) -> JWTToken:
    now = pendulum.now()
    return JWTToken(
        exp=now.add(years=1).int_timestamp,
        iat=now.int_timestamp,
        iss="https://blog.example.com",
        jti=str(uuid.uuid4()),
        sub=user_dict["id"],
        user=user_dict,
    )


@pytest.fixture
def user(user_dict: dict[str, str | None]) -> User:
    return User(**user_dict)


@pytest.fixture
def post_repository(initialize_posts_table) -> PostRepository:
    return PostRepository()


@pytest.fixture
def post_service(initialize_posts_table) -> PostService:
    return PostService()
