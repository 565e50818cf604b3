import logging

from fastapi import Request
from sqlalchemy import Engine, create_engine, text
from sqlalchemy.orm import sessionmaker, DeclarativeBase, Session
from funcionarios.core.config import Settings

logger = logging.getLogger("funcionarios.db")

class Base(DeclarativeBase):
    pass

class Database:
    """Handle do banco: criado no startup, liberado no shutdown, vive em app.state."""

    def __init__(self, engine: Engine):
        self.engine = engine
        self.SessionLocal = sessionmaker(
            bind=engine, autocommit=False, autoflush=False, expire_on_commit=False
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        engine = create_engine(
            settings.sqlalchemy_url,
            pool_pre_ping=True,
            pool_recycle=settings.DB_POOL_RECYCLE,
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_timeout=settings.DB_POOL_TIMEOUT,
            echo=False,
        )
        return cls(engine)

    def create_tables(self) -> None:
        # importa os modelos para registrá-los no metadata
        from funcionarios import models  # noqa: F401
        Base.metadata.create_all(bind=self.engine)

    def session(self) -> Session:
        return self.SessionLocal()

    def ping(self) -> bool:
        try:
            with self.engine.connect() as con:
                con.execute(text("SELECT 1"))
            return True
        except Exception as exc:
            logger.warning("Database ping failed: %s", exc)
            return False

    def dispose(self) -> None:
        self.engine.dispose()

# dependências para FastAPI
def get_database(request: Request) -> Database:
    return request.app.state.database

def get_db(request: Request):
    db = get_database(request).session()
    try:
        yield db
    finally:
        db.close()
