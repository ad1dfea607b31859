from fastapi import APIRouter, Depends, HTTPException, Path, Request, status
from pydantic import ValidationError
from typing import List
import logging

from ...core.config import Settings
from ...core.exceptions import ConstraintViolationError, StorageError
from .crud import UserCRUD, get_user_crud
from .models import User
from .schemas import UserPayload, UserResponse, MessageResponse

# Настройка логирования для routes
logger = logging.getLogger(__name__)

# Создаем роутер для пользователей
# Префикс API (/api/v1) добавляется при подключении в create_app
user_router = APIRouter(prefix="/users", tags=["Users"])

ERROR_400 = {400: {"model": MessageResponse, "description": "Invalid input"}}
ERROR_404 = {404: {"model": MessageResponse, "description": "User not found"}}
ERROR_500 = {500: {"model": MessageResponse, "description": "Internal server error"}}

# Тело PUT разбирается вручную уже после поиска пользователя,
# поэтому схема для документации описывается явно
USER_PAYLOAD_BODY = {
    "requestBody": {
        "required": True,
        "content": {
            "application/json": {"schema": UserPayload.model_json_schema()}
        },
    }
}


async def read_body(request: Request) -> bytes:
    return await request.body()


def _find_user(crud: UserCRUD, user_id: str, for_update: bool = False) -> User:
    """Найти пользователя или ответить 404 (любая ошибка поиска - тоже 404)"""
    try:
        user = crud.get_user(user_id, for_update=for_update)
    except StorageError as e:
        logger.error(f"API: Ошибка БД при поиске пользователя id={user_id}: {e}")
        user = None

    if not user:
        logger.warning(f"API: Пользователь не найден: id={user_id}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )
    return user


def get_settings(request: Request) -> Settings:
    """Зависимость FastAPI: настройки, с которыми собрано приложение"""
    return request.app.state.settings


def _storage_failure(exc: StorageError, message: str, settings: Settings) -> HTTPException:
    if isinstance(exc, ConstraintViolationError) and settings.REPORT_CONFLICTS:
        return HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="User with this email already exists"
        )
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=message
    )


# === ПОЛЬЗОВАТЕЛИ ===

@user_router.get(
    "",
    response_model=List[UserResponse],
    summary="Get all users",
    description="Retrieve a list of all users in the database",
    responses=ERROR_500,
)
def get_users(crud: UserCRUD = Depends(get_user_crud)):
    try:
        return crud.get_all_users()
    except StorageError as e:
        logger.error(f"API: Ошибка получения списка пользователей: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error fetching users"
        )


@user_router.get(
    "/{user_id}",
    response_model=UserResponse,
    summary="Get user by ID",
    description="Retrieve a single user's details by their ID",
    responses=ERROR_404,
)
def get_user(
    user_id: str = Path(..., description="User ID"),
    crud: UserCRUD = Depends(get_user_crud)
):
    """
    Нечисловой id не отклоняется как 400, а дает 404 "User not found".
    """
    user = _find_user(crud, user_id)
    logger.info(f"API: Получен пользователь id={user.id}")
    return user


@user_router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new user",
    description="Create a new user by providing a name and email",
    responses={**ERROR_400, **ERROR_500},
)
def create_user(
    user_data: UserPayload,
    crud: UserCRUD = Depends(get_user_crud),
    settings: Settings = Depends(get_settings)
):
    try:
        return crud.create_user(user_data)
    except StorageError as e:
        raise _storage_failure(e, "Failed to create user", settings)


@user_router.put(
    "/{user_id}",
    response_model=UserResponse,
    summary="Update an existing user",
    description="Update a user's name and email by their ID",
    responses={**ERROR_400, **ERROR_404, **ERROR_500},
    openapi_extra=USER_PAYLOAD_BODY,
)
def update_user(
    user_id: str = Path(..., description="User ID"),
    body: bytes = Depends(read_body),
    crud: UserCRUD = Depends(get_user_crud),
    settings: Settings = Depends(get_settings)
):
    """
    Полная замена: поля, которых нет в теле, становятся пустыми строками.

    Строка блокируется до коммита, чтение и запись идут в одной транзакции.
    """
    user = _find_user(crud, user_id, for_update=True)

    try:
        user_data = UserPayload.model_validate_json(body)
    except ValidationError as e:
        logger.warning(f"API: Некорректное тело запроса для id={user_id}: {e.errors()}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid input"
        )

    try:
        return crud.update_user(user, user_data)
    except StorageError as e:
        raise _storage_failure(e, "Failed to update user", settings)


@user_router.delete(
    "/{user_id}",
    response_model=MessageResponse,
    summary="Delete a user",
    description="Delete a user by their ID",
    responses={**ERROR_404, **ERROR_500},
)
def delete_user(
    user_id: str = Path(..., description="User ID"),
    crud: UserCRUD = Depends(get_user_crud),
    settings: Settings = Depends(get_settings)
):
    user = _find_user(crud, user_id, for_update=True)

    try:
        crud.delete_user(user)
    except StorageError as e:
        raise _storage_failure(e, "Failed to delete user", settings)

    return {"message": "User deleted"}
