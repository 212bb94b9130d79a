# nextup/db/session.py

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from nextup.core.config import settings

# Default to SQLite if no database URI is provided
database_uri = settings.SQLALCHEMY_DATABASE_URI or "sqlite:///./nextup.db"

engine_kwargs = {"pool_pre_ping": True}
if database_uri.startswith("sqlite"):
    engine_kwargs["connect_args"] = {"check_same_thread": False}
    # In-memory databases only live as long as their connection
    if database_uri in ("sqlite://", "sqlite:///:memory:"):
        engine_kwargs["poolclass"] = StaticPool

engine = create_engine(database_uri, **engine_kwargs)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

# Dependency to get DB session
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
