import httpx
import openai

from studynotes.moderation.client_base import BaseClassificationClient
from studynotes.moderation.exceptions import ClassifierUnavailableError


class OpenAIModerationAdapter(BaseClassificationClient):
    """Classifier built on the OpenAI moderation endpoint."""

    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        timeout_seconds: int,
    ) -> None:
        self._model = model
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            max_retries=0,
        )

    def classify(self, text: str) -> set[str]:
        try:
            response = self._client.moderations.create(model=self._model, input=text)
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise ClassifierUnavailableError(f"Moderation network error: {exc}") from exc
        except openai.APIError as exc:
            raise ClassifierUnavailableError(f"Moderation API error: {exc}") from exc

        if not response.results:
            raise ClassifierUnavailableError("Moderation returned no results")
        result = response.results[0]
        if not result.flagged:
            return set()
        categories = result.categories.model_dump(by_alias=True)
        return {name for name, flagged in categories.items() if flagged}
