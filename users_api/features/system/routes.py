"""
Системные маршруты для проверки здоровья и статуса приложения.
"""

from fastapi import APIRouter, Request, HTTPException, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
import logging

logger = logging.getLogger(__name__)

system_router = APIRouter(prefix="/system", tags=["system"])


@system_router.get("/health")
def health_check(request: Request):
    """
    Проверка здоровья приложения и подключения к БД.
    """
    try:
        request.app.state.database.ping()
    except SQLAlchemyError as e:
        logger.error(f"Проверка здоровья: БД недоступна: {e}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Database connection failed"
        )
    return JSONResponse(
        status_code=200,
        content={
            "status": "healthy",
            "message": "Application is running",
            "database": "connected"
        }
    )


@system_router.get("/")
def root(request: Request):
    """
    Корневой эндпоинт API.
    """
    settings = request.app.state.settings
    return JSONResponse(
        status_code=200,
        content={
            "message": settings.APP_NAME,
            "status": "running",
            "version": settings.APP_VERSION
        }
    )
