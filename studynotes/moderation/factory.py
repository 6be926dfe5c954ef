from studynotes.config.settings import Settings
from studynotes.moderation.base import BaseModerator
from studynotes.moderation.client_base import BaseClassificationClient
from studynotes.moderation.example_client_adapter import ExampleClassificationAdapter
from studynotes.moderation.moderator import ContentModerator
from studynotes.moderation.openai_client_adapter import OpenAIModerationAdapter


class ModeratorFactory:
    """Creates the configured content moderator."""

    PROVIDERS = ("example", "openai")

    @classmethod
    def create(cls, settings: Settings) -> BaseModerator:
        return ContentModerator(
            client=cls._create_client(settings),
            min_length=settings.min_content_length,
            max_length=settings.max_content_length,
            max_classifier_chars=settings.moderation_max_input_chars,
        )

    @classmethod
    def _create_client(cls, settings: Settings) -> BaseClassificationClient:
        provider = settings.moderation_provider.lower()
        if provider == "example":
            return ExampleClassificationAdapter()
        if provider == "openai":
            if not settings.moderation_openai_api_key:
                raise ValueError(
                    "moderation_openai_api_key is required for moderation_provider=openai"
                )
            return OpenAIModerationAdapter(
                api_key=settings.moderation_openai_api_key,
                model=settings.moderation_openai_model_name,
                timeout_seconds=settings.moderation_timeout_seconds,
            )
        raise ValueError(
            f"Unknown moderation provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
        )
