from abc import ABC, abstractmethod


class BaseDocumentDecoder(ABC):
    """Contract for all format-specific text decoders."""

    @abstractmethod
    def decode(self, data: bytes) -> str:
        """Extract plain text from raw document bytes.

        Args:
            data: Raw file content.

        Returns:
            Extracted text as a single stripped string. May be empty when the
            document holds no text layer.

        Raises:
            DecodingError: if the document cannot be read for any reason.
        """
