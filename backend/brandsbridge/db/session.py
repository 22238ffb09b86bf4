from sqlmodel import SQLModel, create_engine
from brandsbridge.core.config import settings


def _connect_args(url: str) -> dict:
    # SQLite connections are shared across FastAPI's threadpool workers
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = create_engine(
    settings.DATABASE_URL,
    echo=False,
    pool_pre_ping=True,
    connect_args=_connect_args(settings.DATABASE_URL),
)


def create_db_and_tables() -> None:
    # Register every table on the metadata before creating them
    import brandsbridge.models  # noqa: F401

    SQLModel.metadata.create_all(engine)
