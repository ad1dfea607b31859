from typing import Optional
import logging

from fastapi import FastAPI
from sqlalchemy.exc import SQLAlchemyError

from .core.config import Settings, settings as default_settings
from .core.database import Database
from .core.middleware import setup_middleware, setup_exception_handlers
from .features.system.routes import system_router
from .features.user.routes import user_router

logger = logging.getLogger(__name__)


def create_app(
    database: Optional[Database] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """
    Собрать FastAPI приложение.

    Если database не передан, подключение создается по settings.DATABASE_URL.
    Таблицы создаются сразу; если БД недоступна, процесс завершается.
    """
    settings = settings or default_settings

    try:
        if database is None:
            database = Database(settings.DATABASE_URL, echo=settings.DEBUG)
        database.init_db()
    except (SQLAlchemyError, RuntimeError) as e:
        logger.critical(f"Не удалось подключиться к базе данных: {e}")
        raise SystemExit(1) from e

    # Создаем FastAPI приложение с настройками из config
    app = FastAPI(**settings.get_app_config())
    app.state.database = database
    app.state.settings = settings

    # Настраиваем middleware
    setup_middleware(app, settings)

    # Настраиваем обработчики исключений
    setup_exception_handlers(app)

    # Подключаем роутеры
    app.include_router(system_router)
    app.include_router(user_router, prefix=settings.API_PREFIX)

    return app
