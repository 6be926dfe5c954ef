from abc import ABC, abstractmethod

from studynotes.moderation.models import ModerationVerdict


class BaseModerator(ABC):
    """Contract for content moderators."""

    @abstractmethod
    def moderate(self, text: str) -> ModerationVerdict:
        """Classify sanitized text as safe or unsafe.

        Never raises for classifier outages; those degrade to local checks.
        """
