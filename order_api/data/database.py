# order_api/data/database.py
from sqlalchemy import create_engine, event, text
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type

from order_api.utils.settings import DATABASE_URL, DB_POOL_SIZE, DB_CONNECT_RETRIES
from order_api.utils.logging import get_logger

logger = get_logger(__name__)


def _engine_kwargs(url: str) -> dict:
    if not url.startswith("sqlite"):
        return {"pool_size": DB_POOL_SIZE, "pool_pre_ping": True}

    kwargs = {"connect_args": {"check_same_thread": False}}
    # sqlite:// i sqlite:///:memory: - jedna wspoldzielona baza dla wszystkich watkow
    if url in ("sqlite://", "sqlite:///:memory:"):
        kwargs["poolclass"] = StaticPool
    return kwargs


engine = create_engine(DATABASE_URL, **_engine_kwargs(DATABASE_URL))

if engine.dialect.name == "sqlite":
    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_conn, _record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def db_retry():
    return retry(
        reraise=True,
        stop=stop_after_attempt(DB_CONNECT_RETRIES),
        wait=wait_exponential(multiplier=0.5, min=0.5, max=5),
        retry=retry_if_exception_type(OperationalError),
    )


@db_retry()
def init_db():
    # import modeli, zeby zarejestrowaly sie w Base.metadata
    import order_api.data.models  # noqa: F401

    logger.info(f"Creating tables: {list(Base.metadata.tables.keys())}")
    Base.metadata.create_all(bind=engine)


def ping_db() -> bool:
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except OperationalError as e:
        logger.warning(f"Database ping failed: {e}")
        return False
