from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi import Request

# Create a Base class for declarative models
Base = declarative_base()


def create_db_engine(database_url: str) -> Engine:
    """
    Builds the SQLAlchemy engine for the given URL.

    SQLite connections are shared with the request threadpool, and an
    in-memory database has to live on a single connection or every
    session would see an empty schema.
    """
    if database_url.startswith("sqlite"):
        connect_args = {"check_same_thread": False}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            return create_engine(database_url, connect_args=connect_args, poolclass=StaticPool)
        return create_engine(database_url, connect_args=connect_args)

    return create_engine(
        database_url,
        pool_size=10,  # The number of connections to keep open in the pool.
        max_overflow=20, # The maximum number of connections to allow in addition to pool_size.
        pool_recycle=3600, # Recycle connections after 1 hour to prevent timeout issues.
        pool_pre_ping=True # Check if the connection is alive before using it.
    )


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


# --- Dependency for FastAPI ---
def get_db(request: Request):
    """
    FastAPI dependency that provides a database session per request,
    taken from the session factory the application built at startup.
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
