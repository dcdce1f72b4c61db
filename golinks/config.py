import logging
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

DB_FILENAME = "db.sqlite"
LOG_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s"

def get_home_dir() -> Path:
    home = os.getenv("GOLINKS_HOME")
    if home:
        return Path(home).expanduser()
    return Path.home() / ".golinks"

def get_db_path() -> Path:
    return get_home_dir() / DB_FILENAME

def get_db_timeout() -> float:
    return float(os.getenv("GOLINKS_DB_TIMEOUT", 30))

def get_server_host() -> str:
    return os.getenv("GOLINKS_HOST", "0.0.0.0")

def get_server_port() -> int:
    return int(os.getenv("GOLINKS_PORT", 80))

def configure_logging(level: str | None = None) -> None:
    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)
