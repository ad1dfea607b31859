"""
Исключения слоя хранения.

CRUD-классы переводят ошибки SQLAlchemy в эти типы, чтобы маршруты
различали нарушение ограничений и прочие сбои БД.
"""


class StorageError(Exception):
    """Базовая ошибка работы с базой данных."""
    pass


class ConstraintViolationError(StorageError):
    """Нарушено ограничение уникальности или NOT NULL."""
    pass
