"""
Database connection and session management
Backs the key-value storage with a single table
"""
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from jobboard.core.config import settings

Base = declarative_base()


def make_engine(database_url: str, echo: bool = False):
    """Create an engine; SQLite needs the same-thread check disabled"""
    connect_args = {}
    if "sqlite" in database_url:
        connect_args = {"check_same_thread": False}

    return create_engine(
        database_url,
        connect_args=connect_args,
        pool_pre_ping=True,
        echo=echo
    )


engine = make_engine(settings.DATABASE_URL, echo=settings.DEBUG)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind=None):
    """Initialize database tables"""
    from jobboard.models import storage_entry  # noqa: F401
    Base.metadata.create_all(bind=bind or engine)
