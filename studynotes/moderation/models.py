from dataclasses import dataclass, field

INSUFFICIENT_CONTENT = "insufficient-content"
EXCESSIVE_CONTENT = "excessive-content"
MALICIOUS_CONTENT = "malicious-content"


@dataclass(frozen=True)
class ModerationVerdict:
    """Safety decision for one aggregated content string."""

    safe: bool
    categories: frozenset[str] = field(default_factory=frozenset)
    reason: str | None = None

    def __post_init__(self) -> None:
        if not self.safe and not self.categories and not self.reason:
            raise ValueError("Unsafe verdict requires categories or a reason")

    @classmethod
    def approved(cls) -> "ModerationVerdict":
        return cls(safe=True)

    @classmethod
    def rejected(cls, categories: set[str] | frozenset[str], reason: str) -> "ModerationVerdict":
        return cls(safe=False, categories=frozenset(categories), reason=reason)
