import logging
from typing import Any, Callable

from golinks.schemas import RedirectTarget
from golinks.store import LinkStore

logger = logging.getLogger(__name__)

Defer = Callable[..., Any]

def track_click(store: LinkStore, shortcut: str) -> None:
    # best-effort: failures are logged, never raised
    try:
        store.increment_clicks(shortcut)
    except Exception:
        logger.exception("Failed to increment click for %s", shortcut)

def resolve(store: LinkStore, path: str, defer: Defer | None = None) -> RedirectTarget | None:
    """Look up the shortcut named by ``path`` and record a visit.

    Returns None when the path is empty or the shortcut is unknown. ``defer``
    (e.g. ``BackgroundTasks.add_task``) dispatches the click update so the
    caller does not wait on it; without it the update runs inline.
    """
    shortcut = path[1:] if path.startswith("/") else path
    if not shortcut:
        return None

    link = store.get(shortcut)
    if link is None:
        return None

    if defer is not None:
        defer(track_click, store, shortcut)
    else:
        track_click(store, shortcut)
    return RedirectTarget(shortcut=link.shortcut, url=link.url)
