import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from pydantic import ValidationError
from sqlalchemy.exc import DatabaseError, IntegrityError
from sqlalchemy.orm import Session

from golinks import crud, database, models
from golinks.errors import (
    CorruptRecord,
    DuplicateShortcut,
    InvalidInput,
    StorageClosed,
    StorageUnavailable,
)
from golinks.schemas import Link

logger = logging.getLogger(__name__)

RESERVED_PREFIX = "_"

def _require(value: str | None, field: str) -> str:
    if value is None or not value.strip():
        raise InvalidInput(f"{field} must not be empty")
    return value

def _check_shortcut(shortcut: str | None) -> str:
    shortcut = _require(shortcut, "shortcut")
    if shortcut == RESERVED_PREFIX or shortcut.startswith(RESERVED_PREFIX + "/"):
        raise InvalidInput(f"'{shortcut}' is reserved for the management interface")
    return shortcut

def _to_link(row: models.GoLink) -> Link:
    try:
        return Link.model_validate(row)
    except ValidationError as exc:
        raise CorruptRecord(f"Link row {getattr(row, 'id', '?')} is invalid: {exc}") from exc

class LinkStore:
    """Durable registry of shortcut -> url records backed by one SQLite file.

    Every operation runs in its own session and transaction. Records are
    returned as detached ``Link`` copies.
    """

    def __init__(self, db_path: Path | str, timeout: float = 30):
        self.db_path = Path(db_path)
        self.timeout = timeout
        self._engine = None
        self._sessionmaker = None

    def __enter__(self) -> "LinkStore":
        self.init()
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def is_open(self) -> bool:
        return self._sessionmaker is not None

    def init(self) -> None:
        if self.is_open:
            return
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageUnavailable(f"Cannot create {self.db_path.parent}: {exc}") from exc

        engine = database.make_engine(self.db_path, timeout=self.timeout)
        try:
            database.create_schema(engine)
        except DatabaseError as exc:
            engine.dispose()
            raise StorageUnavailable(f"Cannot open database {self.db_path}: {exc}") from exc

        self._engine = engine
        self._sessionmaker = database.make_sessionmaker(engine)
        logger.debug("Opened link store at %s", self.db_path)

    def close(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
            logger.debug("Closed link store at %s", self.db_path)
        self._engine = None
        self._sessionmaker = None

    @contextmanager
    def _session(self) -> Iterator[Session]:
        if self._sessionmaker is None:
            raise StorageClosed("Link store is not open")
        db = self._sessionmaker()
        try:
            yield db
        except DatabaseError as exc:
            db.rollback()
            raise StorageUnavailable(f"Database error: {exc}") from exc
        finally:
            db.close()

    # --- operations ---

    def add(self, shortcut: str, url: str, description: str | None = None) -> None:
        shortcut = _check_shortcut(shortcut)
        url = _require(url, "url")
        with self._session() as db:
            try:
                crud.create_link(db, shortcut, url, description)
            except IntegrityError as exc:
                db.rollback()
                raise DuplicateShortcut(shortcut) from exc

    def get(self, shortcut: str) -> Link | None:
        with self._session() as db:
            row = crud.get_link(db, shortcut)
            return _to_link(row) if row else None

    def list(self) -> list[Link]:
        with self._session() as db:
            return [_to_link(row) for row in crud.get_links(db)]

    def update(self, shortcut: str, url: str, description: str | None = None) -> bool:
        url = _require(url, "url")
        with self._session() as db:
            return crud.update_link(db, shortcut, url, description) is not None

    def delete(self, shortcut: str) -> bool:
        with self._session() as db:
            return crud.delete_link(db, shortcut)

    def increment_clicks(self, shortcut: str) -> None:
        with self._session() as db:
            crud.increment_click(db, shortcut)
