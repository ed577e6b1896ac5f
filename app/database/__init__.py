"""
Database module for the remote job board.

This module provides the async SQLModel engine, session management and
startup/shutdown helpers for PostgreSQL.
"""

from .sqlmodel_engine import (
    SQLModelDatabaseManager,
    get_sqlmodel_db_manager,
    init_sqlmodel_database,
    shutdown_sqlmodel_database,
)

__all__ = [
    "SQLModelDatabaseManager",
    "get_sqlmodel_db_manager",
    "init_sqlmodel_database",
    "shutdown_sqlmodel_database",
]
