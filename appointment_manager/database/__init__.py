"""
Database Module

Async SQLAlchemy engine, sessions and declarative base.
"""

from appointment_manager.database.async_db import (
    dispose_engine,
    get_async_db,
    get_engine,
    get_session_factory,
    init_db,
)
from appointment_manager.database.base import Base

__all__ = [
    "Base",
    "dispose_engine",
    "get_async_db",
    "get_engine",
    "get_session_factory",
    "init_db",
]
