from studynotes.ingestion.models import ResponseCode


class IngestionError(Exception):
    """Base exception for every hard failure that aborts an ingestion run."""

    code: ResponseCode = ResponseCode.INTERNAL_ERROR


class RateLimitedError(IngestionError):
    """Raised when the requester has exhausted the upload window."""

    code = ResponseCode.RATE_LIMITED


class InvalidFileError(IngestionError):
    """Raised when a file fails validation or the request is incomplete."""

    code = ResponseCode.BAD_REQUEST

    def __init__(self, message: str, file_name: str | None = None) -> None:
        super().__init__(message)
        self.file_name = file_name


class ContentRejectedError(IngestionError):
    """Raised when moderation marks the aggregated content unsafe."""

    code = ResponseCode.CONTENT_REJECTED

    def __init__(self, message: str, categories: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.categories = categories


class PersistenceFailedError(IngestionError):
    """Raised when the note record cannot be created."""

    code = ResponseCode.INTERNAL_ERROR
