"""
Функциональные возможности приложения.

Этот модуль содержит все функциональные модули:
- system: системные функции (здоровье, статус)
- user: управление пользователями
"""

from .system.routes import system_router
from .user.routes import user_router

__all__ = [
    "system_router",
    "user_router"
]
