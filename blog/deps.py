from fastapi import Depends

from blog.jwt_bearer import JWTBearer
from blog.models.auth import JWTToken, User
from blog.services.post_service import PostService

jwt_bearer = JWTBearer()


def current_user(token: JWTToken = Depends(jwt_bearer)) -> User:
    return User.from_token(token)


def post_service() -> PostService:
    return PostService()
