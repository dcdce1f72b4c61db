from sqlalchemy.orm import Session

from golinks import models

def create_link(db: Session, shortcut: str, url: str, description: str | None = None) -> models.GoLink:
    now = models.utcnow()
    link = models.GoLink(
        shortcut=shortcut,
        url=url,
        description=description or None,
        created_at=now,
        updated_at=now,
        click_count=0,
    )
    db.add(link)
    db.commit()
    db.refresh(link)
    return link

def get_link(db: Session, shortcut: str) -> models.GoLink | None:
    return db.query(models.GoLink).filter_by(shortcut=shortcut).first()

def get_links(db: Session) -> list[models.GoLink]:
    return (
        db.query(models.GoLink)
        .order_by(models.GoLink.created_at.desc(), models.GoLink.id.desc())
        .all()
    )

def update_link(db: Session, shortcut: str, url: str, description: str | None = None) -> models.GoLink | None:
    link = db.query(models.GoLink).filter_by(shortcut=shortcut).first()
    if not link:
        return None
    link.url = url
    link.description = description or None
    link.updated_at = max(models.utcnow(), link.created_at)
    db.commit()
    db.refresh(link)
    return link

def delete_link(db: Session, shortcut: str) -> bool:
    link = db.query(models.GoLink).filter_by(shortcut=shortcut).first()
    if not link:
        return False
    db.delete(link)
    db.commit()
    return True

def increment_click(db: Session, shortcut: str) -> None:
    # single UPDATE so concurrent resolutions never lose a count
    db.query(models.GoLink).filter_by(shortcut=shortcut).update(
        {models.GoLink.click_count: models.GoLink.click_count + 1},
        synchronize_session=False,
    )
    db.commit()
