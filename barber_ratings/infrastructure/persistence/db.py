"""Database setup helpers (SQLAlchemy engine/session)."""
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from barber_ratings.config import settings

DATABASE_URL = settings.database_url

engine_kwargs = {"future": True, "pool_pre_ping": True}
if DATABASE_URL.startswith("sqlite"):
    engine_kwargs["connect_args"] = {"check_same_thread": False}

engine = create_engine(DATABASE_URL, **engine_kwargs)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine, future=True)
Base = declarative_base()

