import uvicorn

from studynotes.config.settings import Settings


def main() -> None:
    """Entry point: serve the ingestion API with uvicorn."""
    settings = Settings()
    uvicorn.run(
        "studynotes.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
