from dataclasses import dataclass
from enum import Enum


class ValidationFailure(str, Enum):
    SIZE_EXCEEDED = "SizeExceeded"
    UNSUPPORTED_TYPE = "UnsupportedType"
    SUSPICIOUS_FILE = "SuspiciousFile"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one file's metadata."""

    valid: bool
    failure: ValidationFailure | None = None
    error: str | None = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(valid=True)

    @classmethod
    def rejected(cls, failure: ValidationFailure, error: str) -> "ValidationResult":
        return cls(valid=False, failure=failure, error=error)
