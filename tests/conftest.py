import pytest
from fastapi.testclient import TestClient

# Импорты из приложения
from users_api.app import create_app
from users_api.core.config import Settings
from users_api.core.database import Database
from users_api.features.user.models import User
from users_api.features.user.schemas import UserPayload


@pytest.fixture(scope="function")
def database(tmp_path):
    """Отдельная SQLite база на каждый тест"""
    db = Database(f"sqlite:///{tmp_path / 'test.db'}")
    db.init_db()
    yield db
    db.dispose()


@pytest.fixture(scope="function")
def db_session(database):
    """Фикстура для создания тестовой сессии БД"""
    session = database.SessionLocal()
    yield session
    session.close()


@pytest.fixture(scope="function")
def app(database):
    return create_app(database=database)


@pytest.fixture(scope="function")
def client(app):
    """Фикстура для тестового клиента FastAPI"""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(scope="function")
def conflict_client(database):
    """Клиент приложения, которое отдает нарушение уникальности как 409"""
    conflict_settings = Settings()
    conflict_settings.REPORT_CONFLICTS = True
    with TestClient(create_app(database=database, settings=conflict_settings)) as test_client:
        yield test_client


@pytest.fixture
def fetch_user(database):
    """Прочитать пользователя напрямую из БД, минуя API и кэш сессий"""
    def _fetch(user_id):
        with database.SessionLocal() as session:
            return session.get(User, user_id)
    return _fetch


@pytest.fixture
def sample_user_data():
    """Фикстура с тестовыми данными пользователя"""
    return {
        "name": "Charlie",
        "email": "charlie@example.com"
    }


@pytest.fixture
def sample_user_payload(sample_user_data):
    return UserPayload(**sample_user_data)


@pytest.fixture
def created_user(db_session, sample_user_data):
    """Фикстура с созданным пользователем в БД"""
    user = User(**sample_user_data)
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def multiple_users(db_session):
    """Фикстура с несколькими пользователями в БД"""
    users_data = [
        {"name": "Alice", "email": "alice@example.com"},
        {"name": "Bob", "email": "bob@example.com"},
        {"name": "Carol", "email": "carol@example.com"},
    ]

    users = []
    for user_data in users_data:
        user = User(**user_data)
        db_session.add(user)
        users.append(user)

    db_session.commit()
    for user in users:
        db_session.refresh(user)

    return users


@pytest.fixture
def ten_users(db_session):
    """Десять пользователей: id 1..10"""
    users = [User(name=f"u{i}", email=f"u{i}@example.com") for i in range(1, 11)]
    db_session.add_all(users)
    db_session.commit()
    for user in users:
        db_session.refresh(user)
    return users
