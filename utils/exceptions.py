class StorageError(Exception):
    """The database file could not be read, parsed or written."""

    def __init__(self, message: str, path=None):
        super().__init__(message)
        self.path = path


class InputError(Exception):
    """A request is missing required fields."""
