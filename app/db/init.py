"""Initialize database tables."""
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

from app.models.task import Task  # noqa: F401  registers the table on SQLModel.metadata
from app.utils.logger import get_logger

logger = get_logger(__name__)


def init_db(engine: Engine) -> None:
    """Create all tables in the database."""
    logger.info("Creating all tables")
    SQLModel.metadata.create_all(engine)
    logger.info("Tables created successfully", tables=sorted(SQLModel.metadata.tables))


if __name__ == "__main__":
    from app.config import Settings
    from app.db.config import create_db_engine

    init_db(create_db_engine(Settings.from_env().database_url))
