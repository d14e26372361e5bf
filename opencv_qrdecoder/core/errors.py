"""
Decoder error types.

Initialization and construction errors propagate to the orchestrator.
DecodeFailure is never raised out of a decode call; it is carried
inside a Failed outcome.
"""

from typing import Optional


class QrDecoderError(Exception):
    """Base class for all decoder errors."""


class TransportError(QrDecoderError, ConnectionError):
    """A model artifact could not be retrieved from the model origin."""

    def __init__(self, message: str, url: str, statusCode: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.statusCode = statusCode


class UnsupportedFormatError(QrDecoderError, ValueError):
    """A requested symbology cannot be serviced by the decoder."""

    def __init__(self, format, decoderName: str):
        name = getattr(format, "name", format)
        super().__init__(f"{name} is not supported by {decoderName}")
        self.format = format


class ConstructionError(QrDecoderError, RuntimeError):
    """The vision engine could not build a detector."""


class DecodeFailure(QrDecoderError):
    """The engine raised while processing a single frame."""

    def __init__(self, cause: BaseException):
        super().__init__(f"Decode failed: {cause}")
        self.cause = cause
