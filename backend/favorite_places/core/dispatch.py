"""
Request dispatch boundary.

Every request is normalized before routing: repeated slashes collapse into
one, a trailing slash is dropped and the method is upper-cased, so
``/places``, ``/places/`` and ``//places///`` all reach the same route. The
root path normalizes to the empty string.

Routing failures are mapped here too. Anything outside the route table is a
404 with a body (some HTTP clients choke on an empty 404), a payload that
fails validation is a 400, and an unexpected exception from a handler is
logged and turned into a 500 instead of reaching the transport.
"""
import logging
import re
from typing import Awaitable, Callable

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from favorite_places.core.logger import logs

JSON_MEDIA_TYPE = "application/json; charset=utf-8"
NOT_FOUND_BODY = "Not Found"
SERVER_ERROR_BODY = "Internal Server Error"

_REPEATED_SLASHES = re.compile(r"/+")


class UTF8JSONResponse(JSONResponse):
    media_type = JSON_MEDIA_TYPE


def normalize_path(path: str) -> str:
    collapsed = _REPEATED_SLASHES.sub("/", path)
    if collapsed.endswith("/"):
        collapsed = collapsed[:-1]
    return collapsed


def normalize_method(method: str) -> str:
    return method.upper()


def not_found() -> PlainTextResponse:
    return PlainTextResponse(NOT_FOUND_BODY, status_code=status.HTTP_404_NOT_FOUND)


def install_exception_handlers(app: FastAPI) -> None:
    """Map routing and validation failures onto the service's status codes."""

    @app.exception_handler(StarletteHTTPException)
    async def _handle_http_error(request: Request, exc: StarletteHTTPException) -> Response:
        # Unknown path and known path with the wrong method look the same to clients
        if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
            return not_found()
        return await http_exception_handler(request, exc)

    @app.exception_handler(RequestValidationError)
    async def _handle_validation_error(request: Request, exc: RequestValidationError) -> Response:
        logs.log(
            logging.WARNING,
            f"Rejected {request.method} {request.url.path}",
            extra={"errors": [error.get("msg") for error in exc.errors()]},
        )
        return Response(status_code=status.HTTP_400_BAD_REQUEST, media_type=JSON_MEDIA_TYPE)


def install_dispatch_middleware(app: FastAPI) -> None:
    """Normalize every request and catch whatever the handlers did not."""

    @app.middleware("http")
    async def _dispatch(
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        method = request.scope.get("method")
        path = request.scope.get("path")
        if not method or not path:
            logs.log(logging.WARNING, "Rejected malformed request", extra={"method": method, "path": path})
            return Response(status_code=status.HTTP_400_BAD_REQUEST)

        normalized = normalize_path(path)
        request.scope["path"] = normalized or "/"
        request.scope["method"] = normalize_method(method)

        try:
            response = await call_next(request)
        except Exception:
            logs.log(logging.ERROR, f"Unhandled error on {request.scope['method']} {normalized or '/'}", exc_info=True)
            return PlainTextResponse(SERVER_ERROR_BODY, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

        logs.log(logging.INFO, f"{request.scope['method']} {normalized or '/'} -> {response.status_code}")
        return response
