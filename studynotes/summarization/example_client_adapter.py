"""Example completion client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseCompletionClient and register the provider in SummarizerFactory.
"""

from typing import ClassVar

from studynotes.summarization.client_base import BaseCompletionClient


class ExampleClientAdapter(BaseCompletionClient):
    """Returns a fixed summary. No network calls."""

    DEFAULT_RESPONSE: ClassVar[str] = "Summary unavailable in offline mode."

    def complete(
        self,
        *,
        model: str,
        temperature: float,
        max_tokens: int,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        _ = model, temperature, max_tokens, system_prompt, user_prompt
        return self.DEFAULT_RESPONSE
