class DecodingError(Exception):
    """Raised by a decoder adapter when a document cannot be read."""
