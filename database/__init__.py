"""
File: database/__init__.py
Location: res_range_bot/database/__init__.py
Purpose: Database package initialization
"""

from .db_manager import DatabaseManager
from .res_db import ResDB

__all__ = ['DatabaseManager', 'ResDB']
