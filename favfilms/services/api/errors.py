# favfilms/services/api/errors.py
from __future__ import annotations

from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from favfilms.domain.errors import (
    AuthError, Conflict, InvalidCredentials, MissingCredential,
    NotFound, StorageError, ValidationError,
)

_BEARER = {"WWW-Authenticate": "Bearer"}


def _details(errors) -> list[dict]:
    out = []
    for e in errors:
        loc = [str(p) for p in e.get("loc", ()) if p != "body"]
        out.append({"loc": loc, "msg": e.get("msg", ""), "type": e.get("type", "")})
    return out


def install_error_handlers(app: FastAPI) -> None:
    """
    Gate failures answer with {"message"}; everything else with {"error"}.
    Starlette picks the most specific handler along the exception's MRO.
    """

    @app.exception_handler(MissingCredential)
    async def _missing_credential(_: Request, exc: MissingCredential):
        return JSONResponse({"message": "No token provided"}, status_code=HTTPStatus.UNAUTHORIZED, headers=_BEARER)

    @app.exception_handler(AuthError)
    async def _unauthorized(_: Request, exc: AuthError):
        return JSONResponse({"message": "Invalid or expired token"}, status_code=HTTPStatus.UNAUTHORIZED, headers=_BEARER)

    @app.exception_handler(InvalidCredentials)
    async def _invalid_credentials(_: Request, exc: InvalidCredentials):
        return JSONResponse({"error": exc.message}, status_code=HTTPStatus.UNAUTHORIZED)

    @app.exception_handler(NotFound)
    async def _not_found(_: Request, exc: NotFound):
        return JSONResponse({"error": exc.message}, status_code=HTTPStatus.NOT_FOUND)

    @app.exception_handler(Conflict)
    async def _conflict(_: Request, exc: Conflict):
        return JSONResponse({"error": exc.message}, status_code=HTTPStatus.BAD_REQUEST)

    @app.exception_handler(ValidationError)
    async def _validation(_: Request, exc: ValidationError):
        return JSONResponse({"error": exc.message, "details": exc.details}, status_code=HTTPStatus.BAD_REQUEST)

    @app.exception_handler(RequestValidationError)
    async def _request_validation(_: Request, exc: RequestValidationError):
        details = _details(exc.errors())
        summary = "; ".join(f"{'.'.join(d['loc']) or 'body'}: {d['msg']}" for d in details)
        return JSONResponse(
            {"error": f"Invalid request: {summary}" if summary else "Invalid request", "details": details},
            status_code=HTTPStatus.BAD_REQUEST,
        )

    @app.exception_handler(StorageError)
    async def _storage(_: Request, exc: StorageError):
        # message passed through verbatim
        return JSONResponse({"error": exc.message}, status_code=HTTPStatus.INTERNAL_SERVER_ERROR)
