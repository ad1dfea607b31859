"""
User API - CRUD-сервис для пользователей (FastAPI + SQLAlchemy).
"""

from .app import create_app

__all__ = ["create_app"]
