from typing import Optional

from fastapi import Depends
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ...core.database import get_db
from ...core.exceptions import ConstraintViolationError, StorageError
from .models import User
from .schemas import UserPayload
import logging
import re

logger = logging.getLogger(__name__)


USER_ID_PATTERN = re.compile(r"-?[0-9]+")

# Границы BIGINT: больший id не влезает в колонку и не может существовать
MIN_USER_ID = -(2 ** 63)
MAX_USER_ID = 2 ** 63 - 1


def parse_user_id(user_id) -> Optional[int]:
    """
    Идентификатор из пути; некорректный id считается несуществующим.

    Принимаются только ASCII-цифры с необязательным минусом: "+10", "1_0",
    " 10" и не-ASCII цифры, которые понимает int(), отклоняются.
    """
    if isinstance(user_id, int):
        value = user_id
    elif isinstance(user_id, str) and USER_ID_PATTERN.fullmatch(user_id):
        value = int(user_id)
    else:
        return None

    if not MIN_USER_ID <= value <= MAX_USER_ID:
        return None
    return value


class UserCRUD:
    def __init__(self, db: Session):
        self.db = db

    def get_all_users(self) -> list[User]:
        """Получить всех пользователей в порядке первичного ключа"""
        try:
            return self.db.query(User).order_by(User.id).all()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Ошибка получения списка пользователей: {e}")
            raise StorageError(str(e)) from e

    def get_user(self, user_id, for_update: bool = False) -> Optional[User]:
        """
        Получить пользователя по id.

        for_update=True блокирует строку до конца транзакции (SELECT ... FOR UPDATE),
        чтобы чтение и последующее изменение были атомарны. SQLite это игнорирует.
        """
        parsed_id = parse_user_id(user_id)
        if parsed_id is None:
            return None

        query = self.db.query(User).filter(User.id == parsed_id)
        if for_update:
            query = query.with_for_update()
        try:
            return query.first()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Ошибка получения пользователя id={user_id}: {e}")
            raise StorageError(str(e)) from e

    def create_user(self, user_data: UserPayload) -> User:
        """Создать нового пользователя"""
        user = User(name=user_data.name, email=user_data.email)
        self.db.add(user)
        self._commit("создания пользователя")
        self.db.refresh(user)
        logger.info(f"Создан пользователь: id={user.id}")
        return user

    def update_user(self, user: User, user_data: UserPayload) -> User:
        """
        Заменить данные пользователя.

        Полная замена: все поля берутся из user_data, id сохраняется.
        """
        user.name = user_data.name
        user.email = user_data.email
        self._commit(f"обновления пользователя id={user.id}")
        self.db.refresh(user)
        logger.info(f"Обновлен пользователь: id={user.id}")
        return user

    def delete_user(self, user: User) -> None:
        """Удалить пользователя (без мягкого удаления)"""
        user_id = user.id
        self.db.delete(user)
        self._commit(f"удаления пользователя id={user_id}")
        logger.info(f"Удален пользователь: id={user_id}")

    def _commit(self, action: str):
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.error(f"Нарушение ограничений БД при попытке {action}: {e}")
            raise ConstraintViolationError(str(e.orig)) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Ошибка БД при попытке {action}: {e}")
            raise StorageError(str(e)) from e


def get_user_crud(db: Session = Depends(get_db)) -> UserCRUD:
    """Зависимость FastAPI: CRUD поверх сессии запроса"""
    return UserCRUD(db)
