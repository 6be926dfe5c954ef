from typing import Any, ClassVar

from studynotes.config.settings import Settings
from studynotes.logging.logger import Log
from studynotes.summarization.client_base import BaseCompletionClient
from studynotes.summarization.example_client_adapter import ExampleClientAdapter
from studynotes.summarization.openai_client_adapter import OpenAIClientAdapter
from studynotes.summarization.summarizer import Summarizer


class SummarizerFactory:
    """Creates the configured summarizer, or None when no API key is available."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "groq": "https://api.groq.com/openai/v1",
        "openrouter": "https://openrouter.ai/api/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }
    KEYLESS_PROVIDERS: ClassVar[frozenset[str]] = frozenset({"ollama"})

    @classmethod
    def create(cls, settings: Settings) -> Summarizer | None:
        provider = settings.summarization_provider.lower()
        if provider == "example":
            return cls._build(settings, ExampleClientAdapter(), model="example")

        base_url = cls._resolve_base_url(provider, settings)
        api_key = cls._resolve_setting(provider, settings, "api_key")
        if not api_key:
            if provider not in cls.KEYLESS_PROVIDERS:
                Log.warning(
                    f"summarization_{provider}_api_key is not set - skipping summary generation"
                )
                return None
            api_key = provider

        client = OpenAIClientAdapter(
            api_key=api_key,
            timeout_seconds=cls._resolve_setting(provider, settings, "timeout_seconds") or 30,
            base_url=base_url,
        )
        return cls._build(
            settings,
            client,
            model=cls._resolve_setting(provider, settings, "model_name"),
        )

    @classmethod
    def _build(
        cls, settings: Settings, client: BaseCompletionClient, *, model: str
    ) -> Summarizer:
        return Summarizer(
            client=client,
            model=model,
            temperature=settings.summarization_temperature,
            max_tokens=settings.summarization_max_tokens,
            max_input_chars=settings.summarization_max_input_chars,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = settings.summarization_openai_compatible_base_url.strip()
            if not url:
                raise ValueError(
                    "summarization_openai_compatible_base_url is required for "
                    "summarization_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(
            f"Unknown summarization provider '{provider}'. Choose from: {supported}"
        )

    @staticmethod
    def _resolve_setting(provider: str, settings: Settings, suffix: str) -> Any:
        return getattr(settings, f"summarization_{provider}_{suffix}")
