"""Errors raised by the layout retrieval and overlay engine."""


class LayoutEngineError(Exception):
    """Base class for engine errors."""


class InvalidQueryError(LayoutEngineError, ValueError):
    """Query text is blank or the category hint is not a known category."""


class UnsupportedMediaError(LayoutEngineError, ValueError):
    """Image bytes could not be decoded or are not an accepted raster type."""

    def __init__(self, message: str, mime_type: str | None = None):
        super().__init__(message)
        self.mime_type = mime_type
