import jwt
from aws_lambda_powertools import Logger
from fastapi import Request
from fastapi.security.http import HTTPAuthorizationCredentials
from fastapi.security.http import HTTPBearer as FastAPIHTTPBearer
from fastapi.security.utils import get_authorization_scheme_param
from jwt import InvalidTokenError
from pydantic import ValidationError

from blog import settings
from blog.exceptions import AuthenticationException
from blog.models.auth import JWTToken

logger = Logger(utc=True)

BEARER_SCHEME = "bearer"
ERROR_MESSAGE_INVALID_CREDENTIALS = "Invalid authentication credentials"
ERROR_MESSAGE_NOT_AUTHENTICATED = "Not authenticated"


class HTTPBearer(FastAPIHTTPBearer):
    """Reads bearer credentials from the Authorization header, falling back to
    the ``token`` query parameter when the header is absent."""

    def __init__(self, auto_error: bool = True):
        super().__init__(auto_error=auto_error)
        self._auto_error = auto_error

    def __call__(self, request: Request) -> HTTPAuthorizationCredentials | None:
        authorization = request.headers.get("Authorization")
        if authorization is None:
            logger.info("Missing authentication header, falling back to token param")
            token = request.query_params.get("token")
            authorization = f"Bearer {token}" if token else ""
        scheme, credentials = get_authorization_scheme_param(authorization)
        if not (scheme and credentials):
            logger.warning(f"Missing credentials {scheme=}")
            return self._reject(ERROR_MESSAGE_NOT_AUTHENTICATED)
        if scheme.lower() != BEARER_SCHEME:
            logger.warning(f"Invalid {scheme=}")
            return self._reject(ERROR_MESSAGE_INVALID_CREDENTIALS)
        return HTTPAuthorizationCredentials(scheme=scheme, credentials=credentials)

    def _reject(self, detail: str) -> None:
        if self._auto_error:
            raise AuthenticationException(detail)
        return None


class JWTBearer:
    def __init__(self, auto_error: bool = True):
        self._auto_error = auto_error

    def __call__(self, request: Request) -> JWTToken | None:
        credentials = HTTPBearer(self._auto_error)(request)
        if not credentials:
            return None
        decoded_token = self._decode_token(credentials.credentials)
        if decoded_token is None and self._auto_error:
            logger.warning("Invalid authentication token")
            raise AuthenticationException(ERROR_MESSAGE_NOT_AUTHENTICATED)
        return decoded_token

    def _decode_token(self, token: str) -> JWTToken | None:
        try:
            return JWTToken(
                **jwt.decode(
                    token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
                )
            )
        except InvalidTokenError:
            logger.exception("Error occurred during token decoding")
        except ValidationError:
            logger.exception("Token is missing required claims")
        return None
