"""Cleans extracted text before moderation and storage.

Control characters go first so markup split by invisible characters
(``<scr\x00ipt>``) is reassembled before the markup filters see it.
"""

import re
from typing import ClassVar


class ContentSanitizer:
    """Pure, total text cleaner. ``sanitize(sanitize(x)) == sanitize(x)``."""

    _CONTROL_CHARS_RE: ClassVar[re.Pattern[str]] = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F]")
    _SCRIPT_BLOCK_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"<script\b[^>]*>.*?</script\s*>",
        re.IGNORECASE | re.DOTALL,
    )
    _SCRIPT_TAG_RE: ClassVar[re.Pattern[str]] = re.compile(r"</?script[^>]*>?", re.IGNORECASE)
    _EVENT_HANDLER_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"\bon\w+\s*=\s*(?:\"[^\"]*\"|'[^']*')",
        re.IGNORECASE,
    )
    _EMBEDDED_MARKUP_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"</?script\b|<[a-z][^<>]*\bon\w+\s*=",
        re.IGNORECASE,
    )
    _EXCESS_NEWLINES_RE: ClassVar[re.Pattern[str]] = re.compile(r"\n{3,}")

    def sanitize(self, text: str) -> str:
        cleaned = self._CONTROL_CHARS_RE.sub("", text)
        cleaned = self._strip_markup(cleaned)
        cleaned = self._EXCESS_NEWLINES_RE.sub("\n\n", cleaned)
        return cleaned.strip()

    def has_embedded_markup(self, text: str) -> bool:
        """True for a script tag, or an on* handler inside a tag, once control chars are gone.

        Narrower than what sanitize() strips: prose like ``one = 'uno'`` or
        ``<scripture>`` is cleaned but does not count.
        """
        return bool(self._EMBEDDED_MARKUP_RE.search(self._CONTROL_CHARS_RE.sub("", text)))

    def _strip_markup(self, text: str) -> str:
        # Repeat until stable: removing an inner block can reassemble an outer tag.
        while True:
            stripped = self._SCRIPT_BLOCK_RE.sub("", text)
            stripped = self._SCRIPT_TAG_RE.sub("", stripped)
            stripped = self._EVENT_HANDLER_RE.sub("", stripped)
            if stripped == text:
                return stripped
            text = stripped
