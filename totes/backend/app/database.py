"""
Database connection and session management
"""
from sqlalchemy import create_engine, pool
from sqlalchemy.orm import declarative_base, sessionmaker
from app.config import settings


def _build_engine(url: str):
    if url.startswith("sqlite"):
        # Local development and tests. In-memory databases share one connection.
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:") or ":memory:" in url:
            kwargs["poolclass"] = pool.StaticPool
        return create_engine(url, echo=settings.DEBUG, **kwargs)
    return create_engine(
        url,
        poolclass=pool.QueuePool,
        pool_size=5,
        max_overflow=10,
        pool_pre_ping=True,  # Verify connections before using
        pool_recycle=3600,  # Recycle connections after 1 hour
        connect_args={
            "connect_timeout": 10,
            "options": "-c statement_timeout=60000",
        },
        echo=settings.DEBUG,
    )


engine = _build_engine(settings.database_connection_string)

# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for models
Base = declarative_base()


def get_db():
    """
    Dependency for FastAPI to get database session
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
