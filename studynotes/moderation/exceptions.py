class ModerationError(Exception):
    """Raised when content moderation cannot be completed."""


class ClassifierUnavailableError(ModerationError):
    """Raised when the external classifier fails due to network/infrastructure issues."""
