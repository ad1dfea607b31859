"""
Ядро приложения - настройки и инфраструктура.

Этот модуль содержит основные компоненты приложения:
- config: настройки приложения и переменные окружения
- database: подключение к базе данных
- exceptions: ошибки слоя хранения
- middleware: промежуточное ПО (CORS, логирование, обработчики ошибок)
"""

from .config import settings
from .database import Database, get_db
from .exceptions import StorageError, ConstraintViolationError
from .middleware import setup_middleware, setup_exception_handlers

__all__ = [
    "settings",
    "Database",
    "get_db",
    "StorageError",
    "ConstraintViolationError",
    "setup_middleware",
    "setup_exception_handlers"
]
