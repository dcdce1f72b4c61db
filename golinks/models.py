from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, String, Text

from golinks.database import Base

def utcnow() -> datetime:
    # SQLite drops tzinfo, so timestamps are stored as naive UTC
    return datetime.now(timezone.utc).replace(tzinfo=None)

class GoLink(Base):
    __tablename__ = "links"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    shortcut = Column(String, unique=True, nullable=False)
    url = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow)
    click_count = Column(Integer, nullable=False, default=0, server_default="0")
