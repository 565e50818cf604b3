# funcionarios/core/error_handlers.py
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from funcionarios.core.config import Settings
from funcionarios.core.exceptions import AppError, ValidationError

logger = logging.getLogger("funcionarios.errors")


def _error_body(error: str, message: str) -> dict:
    return {"error": error, "message": message}


def add_exception_handlers(app: FastAPI, settings: Settings) -> None:
    # details só vai no corpo com ENVIRONMENT=development
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        log = logger.error if exc.status_code >= 500 else logger.warning
        log(
            "%s: %s",
            exc.__class__.__name__,
            exc.message,
            extra={"path": request.url.path, "method": request.method, "status_code": exc.status_code},
        )
        body = _error_body(exc.__class__.__name__, exc.message)
        if isinstance(exc, ValidationError):
            body["errors"] = exc.violations
        if settings.is_development and exc.details:
            body["details"] = exc.details
        return JSONResponse(status_code=exc.status_code, content=body)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        # corpo malformado (JSON inválido, tipo inesperado) vira 400 como as demais violações
        violations = [f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg')}" for err in exc.errors()]
        logger.warning("Request validation failed: %s", violations, extra={"path": request.url.path})
        body = _error_body("ValidationError", "Requisição inválida")
        body["errors"] = violations
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled exception: %s",
            exc,
            exc_info=True,
            extra={"path": request.url.path, "method": request.method},
        )
        body = _error_body("InternalServerError", "Erro interno do servidor")
        if settings.is_development:
            body["details"] = str(exc)
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=body)
