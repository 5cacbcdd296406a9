"""
Persistence layer for tactic templates.
No business logic, no allocation — only read/write interfaces.
"""
from .db import get_connection, init_db
from .repositories import (
    TacticTemplateRepository,
    SqliteTemplateStore,
)

__all__ = [
    "get_connection",
    "init_db",
    "TacticTemplateRepository",
    "SqliteTemplateStore",
]
