from abc import ABC, abstractmethod


class BaseClassificationClient(ABC):
    """Contract for provider-specific text-safety classifiers."""

    @abstractmethod
    def classify(self, text: str) -> set[str]:
        """Return the set of flagged category names. Empty means clean.

        Raises:
            ClassifierUnavailableError: if the provider cannot be reached.
        """
