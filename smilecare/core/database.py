from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session, declarative_base
from sqlalchemy.pool import StaticPool
from typing import Generator
from .config import settings

database_url = settings.get_database_url

if database_url.startswith("sqlite"):
    engine_options = {"connect_args": {"check_same_thread": False}}
    # In-memory SQLite must share one connection across threads
    if database_url in ("sqlite://", "sqlite:///:memory:"):
        engine_options["poolclass"] = StaticPool
else:
    engine_options = {
        "pool_size": 5,
        "max_overflow": 10,
        "pool_timeout": 30,
        "pool_recycle": 1800,  # Recycle connections after 30 minutes
    }

engine = create_engine(database_url, **engine_options)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

# Database dependency
def get_db() -> Generator[Session, None, None]:
    """Get database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

# Database initialization
def init_db():
    """Initialize database tables."""
    from ..models import appointment, user  # noqa: F401  register tables

    Base.metadata.create_all(bind=engine)
