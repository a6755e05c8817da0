"""Database package: engine, session, declarative base."""

from app.db.base import Base
from app.db.session import async_session_maker, engine, get_db

__all__ = ["Base", "async_session_maker", "engine", "get_db"]
