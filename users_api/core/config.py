import os
from typing import List
import logging


def _split(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings:
    """
    Настройки приложения
    """

    # === ОСНОВНЫЕ НАСТРОЙКИ ===
    APP_NAME: str = "User API"
    APP_DESCRIPTION: str = (
        "This is a simple API for managing users in a PostgreSQL database."
    )
    APP_VERSION: str = "1.0"
    API_PREFIX: str = "/api/v1"

    # === ДОКУМЕНТАЦИЯ (Swagger) ===
    DOCS_URL: str = "/swagger/index.html"
    OPENAPI_URL: str = "/swagger/doc.json"
    CONTACT: dict = {
        "name": "API Support",
        "url": "http://localhost:8000/support",
        "email": "support@localhost.com",
    }

    # === НАСТРОЙКИ СЕРВЕРА ===
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8000"))
    DEBUG: bool = os.getenv("DEBUG", "False").lower() == "true"

    # === НАСТРОЙКИ БАЗЫ ДАННЫХ ===
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./users.db")

    # Нарушение ограничений БД (дубликат email) отдавать как 409 вместо 500
    REPORT_CONFLICTS: bool = (
        os.getenv("REPORT_CONFLICTS", "False").lower() == "true"
    )

    # === НАСТРОЙКИ CORS ===
    CORS_ORIGINS: List[str] = _split(os.getenv("CORS_ORIGINS", "*"))
    CORS_ALLOW_CREDENTIALS: bool = (
        os.getenv("CORS_ALLOW_CREDENTIALS", "False").lower() == "true"
    )
    CORS_ALLOW_METHODS: List[str] = _split(os.getenv(
        "CORS_ALLOW_METHODS", "GET,POST,PUT,PATCH,DELETE,HEAD,OPTIONS"
    ))
    CORS_ALLOW_HEADERS: List[str] = _split(os.getenv(
        "CORS_ALLOW_HEADERS", "Origin,Content-Length,Content-Type"
    ))

    # === НАСТРОЙКИ БЕЗОПАСНОСТИ ===
    TRUSTED_HOSTS: List[str] = _split(os.getenv("TRUSTED_HOSTS", "*"))

    # === НАСТРОЙКИ ЛОГИРОВАНИЯ ===
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    def setup_logging(self):
        """
        Настройка логирования приложения
        """
        logging.basicConfig(
            level=getattr(logging, self.LOG_LEVEL.upper(), logging.INFO),
            format=self.LOG_FORMAT
        )

        if self.DEBUG:
            logging.getLogger("uvicorn").setLevel(logging.DEBUG)
            logging.getLogger("uvicorn.access").setLevel(logging.DEBUG)

    def get_cors_config(self) -> dict:
        """
        Получить конфигурацию CORS
        """
        return {
            "allow_origins": self.CORS_ORIGINS,
            "allow_credentials": self.CORS_ALLOW_CREDENTIALS,
            "allow_methods": self.CORS_ALLOW_METHODS,
            "allow_headers": self.CORS_ALLOW_HEADERS,
        }

    def get_trusted_hosts_config(self) -> dict:
        """
        Получить конфигурацию доверенных хостов
        """
        return {
            "allowed_hosts": self.TRUSTED_HOSTS
        }

    def get_app_config(self) -> dict:
        """
        Получить конфигурацию FastAPI приложения
        """
        return {
            "title": self.APP_NAME,
            "description": self.APP_DESCRIPTION,
            "version": self.APP_VERSION,
            "contact": self.CONTACT,
            "docs_url": self.DOCS_URL,
            "openapi_url": self.OPENAPI_URL,
            "redoc_url": None,
            "debug": self.DEBUG,
        }


# Создаем глобальный экземпляр настроек
settings = Settings()

# Настраиваем логирование при импорте модуля
settings.setup_logging()
