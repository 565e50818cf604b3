# funcionarios/routers/system.py
from fastapi import APIRouter, Depends, status
from funcionarios.core.config import get_settings, Settings
from funcionarios.db import Database, get_database

router = APIRouter()

@router.get("/health", tags=["System"], summary="Health check",
            responses={200: {"description": "Service healthy"}})
def health(database: Database = Depends(get_database)):
    return {"status": "ok", "db": "connected" if database.ping() else "error"}

@router.get("/info", tags=["System"], summary="Informações da aplicação",
            status_code=status.HTTP_200_OK)
def info(
    settings: Settings = Depends(get_settings),
    database: Database = Depends(get_database),
):
    return {
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
        "db": database.engine.url.database,
        "engine": f"SQLAlchemy + {database.engine.dialect.name}",
    }
