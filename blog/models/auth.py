from enum import Enum
from typing import Any

from pydantic import BaseModel

from blog.models.camel_model import CamelModel


class Role(str, Enum):
    ADMIN = "admin"
    USER = "user"


class JWTToken(BaseModel):
    exp: int
    iat: int
    iss: str | None = None
    jti: str
    sub: Any
    user: dict[str, str | None] | None = None


class User(CamelModel):
    id: str
    role: str = Role.USER.value
    username: str | None = None
    email: str | None = None

    @classmethod
    def from_token(cls, token: JWTToken) -> "User":
        claims = dict(token.user or {})
        claims["id"] = str(token.sub)
        if not claims.get("role"):
            claims["role"] = Role.USER.value
        return cls(**claims)

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN.value
