"""Layered content moderation.

1. Length bounds.
2. Local blocklist of injection, code-execution and control-character patterns.
3. External classifier on the first ``max_classifier_chars`` characters.
4. Classifier outage: fail open after repeating the cheap local checks.
"""

import re
from typing import ClassVar

from studynotes.logging.logger import Log
from studynotes.moderation.base import BaseModerator
from studynotes.moderation.client_base import BaseClassificationClient
from studynotes.moderation.exceptions import ModerationError
from studynotes.moderation.models import (
    EXCESSIVE_CONTENT,
    INSUFFICIENT_CONTENT,
    MALICIOUS_CONTENT,
    ModerationVerdict,
)


class ContentModerator(BaseModerator):
    """Moderates aggregated note content before it is persisted."""

    _BLOCKLIST: ClassVar[tuple[re.Pattern[str], ...]] = (
        re.compile(r"<script|javascript:|onerror=|onclick=", re.IGNORECASE),
        re.compile(r"eval\(|exec\(|system\(", re.IGNORECASE),
        re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F]"),
    )
    _SCRIPT_TAG_RE: ClassVar[re.Pattern[str]] = re.compile(r"<script", re.IGNORECASE)
    _MAX_NUL_BYTES: ClassVar[int] = 10

    def __init__(
        self,
        *,
        client: BaseClassificationClient,
        min_length: int = 10,
        max_length: int = 100_000,
        max_classifier_chars: int = 32_000,
    ) -> None:
        self._client = client
        self._min_length = min_length
        self._max_length = max_length
        self._max_classifier_chars = max_classifier_chars

    def moderate(self, text: str) -> ModerationVerdict:
        if len(text) < self._min_length:
            return ModerationVerdict.rejected(
                {INSUFFICIENT_CONTENT}, "Content is too short to be meaningful"
            )
        if len(text) > self._max_length:
            return ModerationVerdict.rejected(
                {EXCESSIVE_CONTENT}, "Content exceeds maximum allowed length"
            )

        if any(pattern.search(text) for pattern in self._BLOCKLIST):
            return ModerationVerdict.rejected(
                {MALICIOUS_CONTENT}, "Content contains potentially malicious patterns"
            )

        try:
            flagged = self._client.classify(text[: self._max_classifier_chars])
        except ModerationError as exc:
            Log.warning(f"Classifier unavailable, applying local checks only: {exc}")
            return self._fail_open(text)

        if flagged:
            Log.info(f"Classifier flagged content: {sorted(flagged)}")
            return ModerationVerdict.rejected(
                flagged, "Content violates community guidelines and cannot be uploaded"
            )
        return ModerationVerdict.approved()

    def _fail_open(self, text: str) -> ModerationVerdict:
        if self._SCRIPT_TAG_RE.search(text) or text.count("\x00") > self._MAX_NUL_BYTES:
            return ModerationVerdict.rejected(
                {MALICIOUS_CONTENT}, "Content contains suspicious patterns"
            )
        return ModerationVerdict.approved()
