from dataclasses import dataclass
from enum import Enum


class ExtractionOutcome(str, Enum):
    SUCCESS = "Success"
    FALLBACK_PLACEHOLDER = "FallbackPlaceholder"
    UNSUPPORTED_TYPE = "UnsupportedType"


@dataclass(frozen=True)
class ExtractionResult:
    """Text extracted from one file. `text` is a placeholder when degraded."""

    file_name: str
    text: str
    outcome: ExtractionOutcome

    @property
    def degraded(self) -> bool:
        return self.outcome is ExtractionOutcome.FALLBACK_PLACEHOLDER
