import uuid
from typing import Any, Sequence

import uvicorn
from aws_lambda_powertools import Logger
from aws_lambda_powertools.logging.logger import set_package_logger
from botocore.exceptions import BotoCoreError, ClientError
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import UJSONResponse
from mangum import Mangum
from starlette.exceptions import HTTPException as StarletteHTTPException

from blog import settings
from blog.api.api import router as api_router
from blog.middlewares import CorrelationIdMiddleware, RequestLoggingMiddleware
from blog.models.camel_model import CamelModel

ERROR_MESSAGE_INTERNAL_SERVER_ERROR = "Internal Server Error"

if settings.debug:
    set_package_logger()

logger = Logger(utc=True)

app = FastAPI(debug=settings.debug, title="BlogBackendService", version="1.0.0")
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(CorrelationIdMiddleware)
app.add_middleware(GZipMiddleware)
app.include_router(api_router)

handler = Mangum(app)
handler = logger.inject_lambda_context(handler, clear_state=True, log_event=True)


class ErrorResponse(CamelModel):
    success: bool = False
    status: int
    id: uuid.UUID
    message: str


class ValidationErrorResponse(ErrorResponse):
    errors: Sequence[Any]


def _validation_message(errors: Sequence[dict[str, Any]]) -> str:
    if not errors:
        return "Validation failed"
    error = errors[0]
    field = ".".join(str(loc) for loc in error.get("loc", ()) if loc != "body")
    return f"{field}: {error['msg']}" if field else error["msg"]


@app.exception_handler(BotoCoreError)
@app.exception_handler(ClientError)
async def botocore_error_handler(
    request: Request, error: BotoCoreError
) -> UJSONResponse:
    error_id = uuid.uuid4()
    error_message = str(error) if settings.debug else ERROR_MESSAGE_INTERNAL_SERVER_ERROR
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    logger.exception(f"Received botocore error {error_id=}")
    return UJSONResponse(
        content=jsonable_encoder(
            ErrorResponse(status=status_code, id=error_id, message=error_message)
        ),
        status_code=status_code,
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, error: Exception) -> UJSONResponse:
    error_id = uuid.uuid4()
    error_message = str(error) if settings.debug else ERROR_MESSAGE_INTERNAL_SERVER_ERROR
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    logger.exception(f"Received unhandled error {error_id=}")
    return UJSONResponse(
        content=jsonable_encoder(
            ErrorResponse(status=status_code, id=error_id, message=error_message)
        ),
        status_code=status_code,
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(
    request: Request, error: StarletteHTTPException
) -> UJSONResponse:
    error_id = uuid.uuid4()
    message = error.detail
    if error.status_code == status.HTTP_404_NOT_FOUND and message == "Not Found":
        message = f"Route {request.url.path} not found"
    logger.warning(
        f"Received http exception {error_id=} status={error.status_code} {message=}"
    )
    return UJSONResponse(
        content=jsonable_encoder(
            ErrorResponse(status=error.status_code, id=error_id, message=message)
        ),
        status_code=error.status_code,
        headers=getattr(error, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(
    request: Request, error: RequestValidationError
) -> UJSONResponse:
    error_id = uuid.uuid4()
    status_code = status.HTTP_400_BAD_REQUEST
    logger.warning(f"Received request validation error {error_id=}")
    return UJSONResponse(
        content=jsonable_encoder(
            ValidationErrorResponse(
                status=status_code,
                id=error_id,
                message=_validation_message(error.errors()),
                errors=error.errors(),
            )
        ),
        status_code=status_code,
    )


if __name__ == "__main__":
    uvicorn.run("blog.http_handler:app", host="localhost", port=8080, reload=True)
