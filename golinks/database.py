import logging
from pathlib import Path

from sqlalchemy import create_engine, inspect, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

logger = logging.getLogger(__name__)

Base = declarative_base()

# Columns added after the first release, as (name, DDL type).
ADDITIVE_COLUMNS = [
    ("description", "TEXT"),
]

def make_engine(db_path: Path, timeout: float = 30) -> Engine:
    return create_engine(
        f"sqlite:///{db_path}",
        # sessions are shared across the server threadpool; timeout waits on the file lock
        connect_args={"check_same_thread": False, "timeout": timeout},
    )

def make_sessionmaker(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)

def create_schema(engine: Engine) -> None:
    # registers the models on Base.metadata
    from golinks import models  # noqa: F401

    Base.metadata.create_all(bind=engine)

    existing = {col["name"] for col in inspect(engine).get_columns("links")}
    with engine.begin() as conn:
        for name, ddl_type in ADDITIVE_COLUMNS:
            if name not in existing:
                logger.info("Migrating links table: adding column %s", name)
                conn.execute(text(f"ALTER TABLE links ADD COLUMN {name} {ddl_type}"))
