from dataclasses import dataclass, asdict
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from core.logger import get_logger

logger = get_logger("errors", prefix="[ERRORS]")


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str
    value: Any
    location: str = "body"

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


class AppError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    error = "Internal Server Error"

    def __init__(self, detail: str | None = None):
        super().__init__(detail or self.error)
        self.detail = detail or self.error

    def body(self) -> dict[str, Any]:
        return {"error": self.error, "message": self.detail}


class ValidationFailed(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    error = "Validation Error"

    def __init__(self, errors: list[FieldError]):
        super().__init__(f"{len(errors)} invalid field(s)")
        self.errors = list(errors)

    def body(self) -> dict[str, Any]:
        return {"error": self.error, "details": [err.as_dict() for err in self.errors]}


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    error = "Not Found"


class Conflict(AppError):
    status_code = status.HTTP_409_CONFLICT
    error = "Conflict"


class Unauthorized(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    error = "Unauthorized"


_PYDANTIC_LOCATIONS = {"body": "body", "query": "query", "path": "params", "header": "headers"}


def _field_path(parts) -> str:
    """('reviews', 1, 'vocabularyId') -> 'reviews[1].vocabularyId'"""
    path = ""
    for part in parts:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else str(part)
    return path


def from_request_validation(exc: RequestValidationError) -> ValidationFailed:
    errors = []
    for err in exc.errors():
        loc = list(err.get("loc", ()))
        location = _PYDANTIC_LOCATIONS.get(str(loc[0]), "body") if loc else "body"
        if err.get("type") == "json_invalid":
            # loc carries the character offset of the decode error
            field, value = location, None
        else:
            field, value = _field_path(loc[1:]) or location, err.get("input")
        message = err.get("msg", "Invalid value").removeprefix("Value error, ")
        errors.append(FieldError(field=field, message=message, value=value, location=location))
    return ValidationFailed(errors)


def _respond(exc: AppError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=jsonable_encoder(exc.body()))


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def _app_error(request: Request, exc: AppError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.detail)
        return _respond(exc)

    @app.exception_handler(RequestValidationError)
    async def _request_validation(request: Request, exc: RequestValidationError):
        return _respond(from_request_validation(exc))

    @app.exception_handler(IntegrityError)
    async def _integrity(request: Request, exc: IntegrityError):
        logger.warning("constraint violation on %s %s: %s", request.method, request.url.path, exc.orig)
        return _respond(Conflict("Record conflicts with existing data"))

    @app.exception_handler(SQLAlchemyError)
    async def _storage(request: Request, exc: SQLAlchemyError):
        logger.error("storage failure on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"error": "Internal Server Error"})
