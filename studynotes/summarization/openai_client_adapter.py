import httpx
import openai

from studynotes.summarization.client_base import BaseCompletionClient
from studynotes.summarization.exceptions import SummarizationError, SummarizationNetworkError


class OpenAIClientAdapter(BaseCompletionClient):
    """Completion client built on the OpenAI-compatible chat API (OpenAI, Groq, ...)."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
        )

    def complete(
        self,
        *,
        model: str,
        temperature: float,
        max_tokens: int,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                max_tokens=max_tokens,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise SummarizationNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise SummarizationNetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise SummarizationError("AI returned no choices")
        content = response.choices[0].message.content
        if not content:
            raise SummarizationError("AI returned empty response")
        return content
