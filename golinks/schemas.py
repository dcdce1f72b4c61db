from datetime import datetime

from pydantic import BaseModel, ConfigDict


class Link(BaseModel):
    id: int
    shortcut: str
    url: str
    description: str | None = None
    created_at: datetime
    updated_at: datetime
    click_count: int

    model_config = ConfigDict(from_attributes=True)

class LinkCreate(BaseModel):
    shortcut: str
    url: str
    description: str | None = None

class LinkUpdate(BaseModel):
    url: str
    description: str | None = None

class Stats(BaseModel):
    total_links: int
    total_clicks: int
    most_clicked: Link | None = None

class RedirectTarget(BaseModel):
    shortcut: str
    url: str

class MessageOut(BaseModel):
    ok: bool
    detail: str
