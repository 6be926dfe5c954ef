class PersistenceError(Exception):
    """Raised when a write to the notes store fails."""
