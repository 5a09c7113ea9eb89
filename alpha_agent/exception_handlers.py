from fastapi import Request
from fastapi.responses import JSONResponse

from alpha_agent.exceptions import AppError, ConflictError, NetworkFailure, NormalizationError


def _error_response(status_code: int, exc: AppError) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": exc.code, "message": exc.message},
    )


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return _error_response(500, exc)


async def conflict_handler(request: Request, exc: ConflictError) -> JSONResponse:
    return _error_response(409, exc)


async def upstream_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return _error_response(502, exc)


def register_exception_handlers(app):
    app.add_exception_handler(ConflictError, conflict_handler)
    app.add_exception_handler(NetworkFailure, upstream_error_handler)
    app.add_exception_handler(NormalizationError, upstream_error_handler)
    app.add_exception_handler(AppError, app_error_handler)
