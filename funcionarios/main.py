# funcionarios/main.py
import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import RedirectResponse
from fastapi.staticfiles import StaticFiles
from funcionarios.core.config import get_settings, Settings
from funcionarios.core.error_handlers import add_exception_handlers
from funcionarios.core.logging_config import setup_logging
from funcionarios.db import Database
from funcionarios.routers import employees
from funcionarios.routers import system

logger = logging.getLogger("funcionarios.startup")

tags_metadata = [
    {"name": "System", "description": "Saúde do serviço e metadados."},
    {"name": "Funcionarios", "description": "CRUD de funcionários (nome, cargo, salário)."},
]

def create_app(settings: Settings | None = None, database: Database | None = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db = database or Database.from_settings(settings)
        if settings.DB_CREATE_TABLES:
            db.create_tables()
        app.state.database = db
        logger.info("Database ready (%s)", db.engine.url.render_as_string(hide_password=True))
        try:
            yield
        finally:
            db.dispose()
            logger.info("Database disposed")

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description=settings.APP_DESCRIPTION,
        openapi_tags=tags_metadata,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.dependency_overrides[get_settings] = lambda: settings
    add_exception_handlers(app, settings)

    if settings.REQUEST_LOGGING:
        request_logger = logging.getLogger("funcionarios.requests")

        @app.middleware("http")
        async def log_requests(request: Request, call_next):
            start = time.perf_counter()
            response = await call_next(request)
            elapsed_ms = (time.perf_counter() - start) * 1000
            request_logger.info(
                "%s %s -> %d (%.1f ms)",
                request.method, request.url.path, response.status_code, elapsed_ms,
            )
            return response

    # Redireciona "/" -> "/docs"
    @app.get("/", include_in_schema=False)
    def root():
        return RedirectResponse(url="/docs")

    app.include_router(system.router)
    app.include_router(employees.router)

    if settings.SERVE_STATIC:
        if settings.static_path.is_dir():
            app.mount("/static", StaticFiles(directory=settings.static_path, html=True), name="static")
        else:
            logger.warning("SERVE_STATIC on but %s is not a directory", settings.static_path)
    return app

app = create_app()
