from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 8000

    db_host: str = "host.docker.internal"
    db_port: int = 5432
    db_database: str = "studynotes"
    db_username: str = "studynotes"
    db_password: str = "secret"

    default_notebook_title: str = "My Notes"

    max_file_size_bytes: int = 10 * 1024 * 1024
    pdf_engine: str = "pdfplumber"

    min_content_length: int = 10
    max_content_length: int = 100_000

    moderation_provider: str = "openai"
    moderation_openai_api_key: str = ""
    moderation_openai_model_name: str = "omni-moderation-latest"
    moderation_timeout_seconds: int = 10
    moderation_max_input_chars: int = 32_000

    rate_limit_backend: str = "memory"
    rate_limit_max_requests: int = 20
    rate_limit_window_seconds: int = 60
    rate_limit_cleanup_threshold: int = 1000

    summarization_provider: str = "groq"
    summarization_temperature: float = 0.5
    summarization_max_tokens: int = 500
    summarization_max_input_chars: int = 8000

    summarization_openai_api_key: str = ""
    summarization_openai_model_name: str = "gpt-4o-mini"
    summarization_openai_timeout_seconds: int = 30

    summarization_openai_compatible_api_key: str = ""
    summarization_openai_compatible_model_name: str = ""
    summarization_openai_compatible_base_url: str = ""
    summarization_openai_compatible_timeout_seconds: int = 30

    summarization_groq_api_key: str = ""
    summarization_groq_model_name: str = "llama-3.3-70b-versatile"
    summarization_groq_timeout_seconds: int = 30

    summarization_openrouter_api_key: str = ""
    summarization_openrouter_model_name: str = ""
    summarization_openrouter_timeout_seconds: int = 30

    summarization_together_api_key: str = ""
    summarization_together_model_name: str = ""
    summarization_together_timeout_seconds: int = 30

    summarization_deepseek_api_key: str = ""
    summarization_deepseek_model_name: str = ""
    summarization_deepseek_timeout_seconds: int = 30

    summarization_ollama_api_key: str = ""
    summarization_ollama_model_name: str = ""
    summarization_ollama_timeout_seconds: int = 60
