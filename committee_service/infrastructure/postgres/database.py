#committee_service\infrastructure\postgres\database.py

"""SQLAlchemy database setup and session management."""

from contextlib import contextmanager
from typing import Generator, Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import declarative_base, sessionmaker, Session

from committee_service.infrastructure.postgres.config import get_settings


# ============================================
# Base for ORM models
# ============================================
Base = declarative_base()


# ============================================
# Engine configuration
# ============================================
def create_db_engine(database_url: Optional[str] = None) -> Engine:
    """
    Create SQLAlchemy engine.

    Pool sizing and the search_path hook apply to PostgreSQL URLs only;
    other backends (e.g. a sqlite DATABASE_URL_OVERRIDE) get dialect defaults.
    """

    settings = get_settings()
    url = make_url(database_url or settings.database_url)

    if url.get_backend_name() != "postgresql":
        return create_engine(url, echo=settings.echo_sql)

    engine = create_engine(
        url,
        echo=settings.echo_sql,
        pool_pre_ping=True,  # Verify connections before using
        pool_size=settings.pool_size,
        max_overflow=settings.max_overflow,
        pool_timeout=settings.pool_timeout,
        pool_recycle=settings.pool_recycle,
    )

    # Set PostgreSQL-specific settings
    @event.listens_for(engine, "connect")
    def set_search_path(dbapi_conn, connection_record):
        """Set default schema on connect."""
        cursor = dbapi_conn.cursor()
        cursor.execute("SET search_path TO public")
        cursor.close()

    return engine


# Process-wide engine and session factory, built on first use
_engine: Optional[Engine] = None
_session_factory: Optional[sessionmaker] = None


def get_engine() -> Engine:
    """Return the shared engine, creating it on first call."""
    global _engine
    if _engine is None:
        _engine = create_db_engine()
    return _engine


# ============================================
# Session factory function
# ============================================
def get_session_factory(engine_instance: Optional[Engine] = None) -> sessionmaker:
    """
    Get a session factory bound to the given engine.

    If no engine provided, returns the shared production factory.
    This allows tests to inject their own test engine.
    """
    global _session_factory

    if engine_instance is not None:
        return sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=engine_instance,
            expire_on_commit=False
        )

    if _session_factory is None:
        _session_factory = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=get_engine(),
            expire_on_commit=False
        )
    return _session_factory


# ============================================
# Session management
# ============================================
@contextmanager
def get_db_session(
    session_factory: Optional[sessionmaker] = None,
) -> Generator[Session, None, None]:
    """
    Context manager for database sessions.

    Usage:
        with get_db_session() as session:
            committee = session.get(CommitteeORM, 1)
    """
    session = (session_factory or get_session_factory())()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


# ============================================
# Database initialization
# ============================================
def init_db(engine_instance: Optional[Engine] = None) -> None:
    """Create all tables (for testing only - use Alembic in production)."""
    if engine_instance is None:
        engine_instance = get_engine()
    Base.metadata.create_all(bind=engine_instance)


def drop_db(engine_instance: Optional[Engine] = None) -> None:
    """Drop all tables (for testing only)."""
    if engine_instance is None:
        engine_instance = get_engine()
    Base.metadata.drop_all(bind=engine_instance)
