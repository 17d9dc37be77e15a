"""Database package"""

from store_admin.db.session import AsyncSessionLocal, engine, get_db
from store_admin.models.base import Base

__all__ = ["Base", "AsyncSessionLocal", "engine", "get_db"]
