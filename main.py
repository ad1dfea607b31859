from dotenv import load_dotenv
import os

# Загружаем переменные окружения из .env файла рядом с main.py
# В Docker переменные окружения уже установлены через docker-compose
env_file = os.path.join(os.path.dirname(__file__), '.env')
if os.path.exists(env_file):
    load_dotenv(env_file)
else:
    load_dotenv(override=False)

from users_api.core.config import settings
from users_api.app import create_app

# Создаем приложение; без доступной БД процесс завершится здесь
app = create_app(settings=settings)


def run():
    import uvicorn
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower()
    )


if __name__ == "__main__":
    run()
