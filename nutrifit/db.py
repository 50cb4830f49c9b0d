"""Database engine + session management for the card store."""

from __future__ import annotations

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from .clients import ClientState, Configured, Unconfigured
from .models import Base


def normalize_database_url(url: str) -> str:
    # Normalize postgres schemes to ensure SQLAlchemy uses psycopg v3
    if url.startswith("postgres://"):
        return "postgresql+psycopg://" + url[len("postgres://") :]
    if url.startswith("postgresql://") and "+" not in url.split("://", 1)[1].split("@", 1)[0]:
        return "postgresql+psycopg://" + url[len("postgresql://") :]
    return url


def init_store(database_url: str | None) -> ClientState:
    """Build the card store handle; ``Unconfigured`` when no URL is set."""
    if not database_url:
        return Unconfigured("DATABASE_URL not set")
    engine = create_engine(normalize_database_url(database_url), future=True, echo=False)
    return Configured(sessionmaker(bind=engine, autoflush=False, autocommit=False))


def get_engine(store: ClientState) -> Engine | None:
    if isinstance(store, Configured):
        return store.client.kw["bind"]
    return None


def new_session(store: ClientState) -> Session:
    if not isinstance(store, Configured):
        raise RuntimeError(f"Card store not configured: {store.reason}")
    return store.client()


def create_all(store: ClientState) -> None:
    # dev/test helper for fresh databases; use Alembic in normal flows.
    engine = get_engine(store)
    if engine is None:
        raise RuntimeError("Engine not initialized")
    Base.metadata.create_all(engine)
