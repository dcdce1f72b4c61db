class GoLinksError(Exception):
    """Base class for all go links errors."""

class InvalidInput(GoLinksError, ValueError):
    """A shortcut or url is empty or otherwise unusable."""

class DuplicateShortcut(GoLinksError):
    def __init__(self, shortcut: str):
        super().__init__(f"Shortcut '{shortcut}' already exists")
        self.shortcut = shortcut

class StoreError(GoLinksError):
    """Base class for storage failures."""

class StorageUnavailable(StoreError):
    """The database location cannot be created, opened or written."""

class StorageClosed(StoreError):
    """The store was used before init() or after close()."""

class CorruptRecord(StoreError):
    """A stored row is missing required fields."""
