"""AI study-material summarizer."""

from pathlib import Path

from studynotes.logging.logger import Log
from studynotes.summarization.client_base import BaseCompletionClient
from studynotes.summarization.prompt_loader import load_prompt


class Summarizer:
    """Produces a short summary of note content through a completion client."""

    def __init__(
        self,
        *,
        client: BaseCompletionClient,
        model: str,
        temperature: float = 0.5,
        max_tokens: int = 500,
        max_input_chars: int = 8000,
        prompt_template_path: Path | None = None,
        system_prompt_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = temperature
        self._max_tokens = max_tokens
        self._max_input_chars = max_input_chars
        self._prompt_template = load_prompt("summary_prompt.txt", prompt_template_path)
        self._system_prompt = load_prompt("summary_system_prompt.txt", system_prompt_path).strip()

    def summarize(self, text: str) -> str:
        """Summarize the leading ``max_input_chars`` characters of ``text``.

        Raises:
            SummarizationError: on any provider failure.
        """
        prompt = self._prompt_template.format(content=text[: self._max_input_chars])
        Log.debug(f"Summary prompt length: {len(prompt)} chars")
        summary = self._client.complete(
            model=self._model,
            temperature=self._temperature,
            max_tokens=self._max_tokens,
            system_prompt=self._system_prompt,
            user_prompt=prompt,
        ).strip()
        Log.info(f"Summary generated: {len(summary)} chars")
        return summary
