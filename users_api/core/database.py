import logging
from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.orm import Session, sessionmaker, declarative_base

logger = logging.getLogger(__name__)

Base = declarative_base()


def normalize_database_url(url: str) -> str:
    """
    Привести строку подключения к виду, который понимает SQLAlchemy.

    Схема `postgres://` (Heroku, docker-compose) заменяется на `postgresql://`.
    """
    url = (url or "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL is not set.")
    if url.startswith("postgres://"):
        return "postgresql://" + url[len("postgres://"):]
    return url


class Database:
    """
    Подключение к БД: engine и фабрика сессий.

    Создается один раз при старте приложения и передается в него явно,
    у каждого теста свой экземпляр.
    """

    def __init__(self, url: str, **engine_kwargs):
        self.url = normalize_database_url(url)
        if self.url.startswith("sqlite"):
            # Сессии открываются в потоках пула FastAPI
            engine_kwargs.setdefault("connect_args", {"check_same_thread": False})
        self.engine = create_engine(self.url, **engine_kwargs)
        self.SessionLocal = sessionmaker(
            autocommit=False, autoflush=False, bind=self.engine
        )

    def init_db(self):
        """Инициализация базы данных - создание всех таблиц"""
        # Модели должны быть зарегистрированы в Base до create_all
        from ..features.user import models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)
        logger.info("Схема базы данных готова")

    def session(self) -> Iterator[Session]:
        db = self.SessionLocal()
        try:
            yield db
        finally:
            db.close()

    def ping(self):
        with self.engine.connect() as connection:
            connection.execute(text("SELECT 1"))

    def dispose(self):
        self.engine.dispose()


def get_db(request: Request) -> Iterator[Session]:
    """Зависимость FastAPI: сессия БД на время запроса"""
    database: Database = request.app.state.database
    yield from database.session()
