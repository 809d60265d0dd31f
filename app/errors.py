# app/errors.py
from __future__ import annotations

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.exceptions import CustomerError, CustomerNotFound

log = logging.getLogger("customers.http")


def error_response(status_code: int) -> PlainTextResponse:
    """본문은 상태 코드의 표준 문구만 (DB/드라이버 메시지는 로그에만 남긴다)."""
    return PlainTextResponse(HTTPStatus(status_code).phrase, status_code=status_code)


async def _bad_request(request: Request, exc: RequestValidationError) -> PlainTextResponse:
    log.warning("%s %s: bad request: %s", request.method, request.url.path, exc.errors())
    return error_response(status.HTTP_400_BAD_REQUEST)


async def _http_error(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    log.info("%s %s: %s", request.method, request.url.path, exc.status_code)
    resp = error_response(exc.status_code)
    if exc.headers:
        resp.headers.update(exc.headers)
    return resp


async def _not_found(request: Request, exc: CustomerNotFound) -> PlainTextResponse:
    log.info("%s %s: %s", request.method, request.url.path, exc)
    return error_response(status.HTTP_404_NOT_FOUND)


async def _store_failure(request: Request, exc: CustomerError) -> PlainTextResponse:
    log.error("%s %s: %s", request.method, request.url.path, exc, exc_info=exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, _bad_request)
    app.add_exception_handler(StarletteHTTPException, _http_error)
    app.add_exception_handler(CustomerNotFound, _not_found)
    app.add_exception_handler(CustomerError, _store_failure)
