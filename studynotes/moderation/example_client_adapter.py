"""Offline classifier adapter for local development and tests."""

from studynotes.moderation.client_base import BaseClassificationClient


class ExampleClassificationAdapter(BaseClassificationClient):
    """Flags nothing. No network calls."""

    def classify(self, text: str) -> set[str]:
        _ = text
        return set()
