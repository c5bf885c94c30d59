"""
Скрипт для инициализации БД: создание таблиц и первого администратора.

Администратор создается, только если заданы ADMIN_EMAIL, ADMIN_USERNAME
и ADMIN_PASSWORD и пользователя с таким email/username еще нет.

Запуск: python -m jobportal.scripts.init_db
"""
import logging
from jobportal.core.config import settings
from jobportal.core.database import Base, SessionLocal, engine
from jobportal.core.security import get_password_hash
from jobportal.models import Role, User
from jobportal.repositories import user_repository
from jobportal.utils.dates import utcnow

logger = logging.getLogger(__name__)


def create_tables() -> None:
    Base.metadata.create_all(bind=engine)
    logger.info("Tables created")


def create_admin(db) -> bool:
    """Создает администратора из настроек; возвращает True, если пользователь добавлен"""
    if not (settings.ADMIN_EMAIL and settings.ADMIN_USERNAME and settings.ADMIN_PASSWORD):
        logger.info("ADMIN_* settings are not set, skipping admin creation")
        return False

    if user_repository.exists_by_email(db, settings.ADMIN_EMAIL) or \
            user_repository.exists_by_username(db, settings.ADMIN_USERNAME):
        logger.info(f"Admin {settings.ADMIN_USERNAME} already exists")
        return False

    now = utcnow()
    admin = User(
        email=settings.ADMIN_EMAIL,
        username=settings.ADMIN_USERNAME,
        password_hash=get_password_hash(settings.ADMIN_PASSWORD),
        first_name="System",
        last_name="Administrator",
        role=Role.ADMIN.value,
        is_active=True,
        created_at=now,
        updated_at=now,
    )
    db.add(admin)
    db.commit()
    logger.info(f"Admin {settings.ADMIN_USERNAME} created with ID: {admin.id}")
    return True


def main() -> None:
    logging.basicConfig(level=settings.LOG_LEVEL)
    create_tables()
    db = SessionLocal()
    try:
        create_admin(db)
    finally:
        db.close()


if __name__ == "__main__":
    main()
