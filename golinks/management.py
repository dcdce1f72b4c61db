import logging

from golinks.schemas import Link, Stats
from golinks.store import LinkStore

logger = logging.getLogger(__name__)

def add_link(store: LinkStore, shortcut: str, url: str, description: str | None = None) -> Link:
    store.add(shortcut, url, description)
    logger.info("Added link: %s -> %s", shortcut, url)
    return store.get(shortcut)

def update_link(store: LinkStore, shortcut: str, url: str, description: str | None = None) -> Link | None:
    if not store.update(shortcut, url, description):
        return None
    logger.info("Updated link %s -> %s", shortcut, url)
    return store.get(shortcut)

def delete_link(store: LinkStore, shortcut: str) -> bool:
    ok = store.delete(shortcut)
    if ok:
        logger.info("Deleted link %s", shortcut)
    return ok

def list_links(store: LinkStore) -> list[Link]:
    return store.list()

def compute_stats(links: list[Link]) -> Stats:
    most_clicked = None
    for link in links:
        # strict > keeps the first of equal counts
        if most_clicked is None or link.click_count > most_clicked.click_count:
            most_clicked = link
    return Stats(
        total_links=len(links),
        total_clicks=sum(link.click_count for link in links),
        most_clicked=most_clicked,
    )
