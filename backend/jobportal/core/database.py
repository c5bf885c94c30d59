from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from jobportal.core.config import settings


def _build_engine(url: str):
    """Создание движка БД; для SQLite разрешаем доступ из разных потоков"""
    connect_args = {}
    if url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(url, connect_args=connect_args, pool_pre_ping=True)


engine = _build_engine(settings.get_database_url())
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """Сессия БД на время запроса"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
