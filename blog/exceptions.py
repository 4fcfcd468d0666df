from typing import Any

from fastapi import HTTPException, status


class AuthenticationException(HTTPException):
    def __init__(self, detail: Any = None) -> None:
        super().__init__(
            status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class AuthorizationException(HTTPException):
    def __init__(self, detail: Any = None) -> None:
        super().__init__(status.HTTP_403_FORBIDDEN, detail=detail)


class PostNotFoundException(HTTPException):
    def __init__(self, detail: Any = None) -> None:
        super().__init__(status.HTTP_404_NOT_FOUND, detail=detail)


class ValidationException(HTTPException):
    def __init__(self, detail: Any = None) -> None:
        super().__init__(status.HTTP_400_BAD_REQUEST, detail=detail)


class SlugAlreadyExistsException(ValidationException):
    pass
