"""422 responses for malformed item ids, query strings and item bodies."""

from logging import getLogger
from typing import Any, cast

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_422_UNPROCESSABLE_CONTENT

from inventory_api.utils.helpers import file_logger, host

logger = file_logger(getLogger(__name__))


def format_error(error: dict[str, Any]) -> dict[str, Any]:
    """
    Flatten one pydantic error into the shape returned to clients.

    ``("path", "item_id")`` becomes ``location="path", field="item_id"``;
    ``("body", "price")`` becomes ``location="body", field="price"``.
    """
    location, *field_path = error.get("loc", ()) or ("body",)
    formatted = {
        "location": str(location),
        "field": ".".join(str(part) for part in field_path),
        "message": error.get("msg", "Invalid value"),
        "type": error.get("type", "validation_error"),
    }
    if "input" in error:
        formatted["input"] = error["input"]
    # ctx may hold exception instances, which orjson cannot encode
    if "ctx" in error:
        formatted["context"] = {
            key: str(value) if isinstance(value, Exception) else value
            for key, value in error["ctx"].items()
        }
    return formatted


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> ORJSONResponse:
    """
    Answer a RequestValidationError with 422 and one entry per bad field.

    Returns:
        ``{"detail": "Validation failed", "errors": [...]}``
    """
    errors = [format_error(error) for error in cast(RequestValidationError, exc).errors()]
    fields = ", ".join(f"{e['location']}.{e['field']}" for e in errors)

    logger.warning(f"Validation error for ip: {host(request)} at {request.url.path}: {fields}")

    return ORJSONResponse(
        status_code=HTTP_422_UNPROCESSABLE_CONTENT,
        content={"detail": "Validation failed", "errors": errors},
    )
