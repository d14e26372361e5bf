"""
QR Decoder Interface Module.

This module defines the decoder strategy contract shared by every
decoding backend, together with the result and format data classes.
Follows the Interface Segregation Principle (ISP) from SOLID.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Union
from pathlib import Path

import numpy as np

from opencv_qrdecoder.core.errors import DecodeFailure


# Frame accepted by decoders: numpy image (BGR, BGRA or grayscale) or image path
Frame = Union[np.ndarray, str, Path]


class Html5QrcodeSupportedFormats(IntEnum):
    """Symbologies known to the shared decoder contract."""
    QR_CODE = 0
    AZTEC = 1
    CODABAR = 2
    CODE_39 = 3
    CODE_93 = 4
    CODE_128 = 5
    DATA_MATRIX = 6
    MAXICODE = 7
    ITF = 8
    EAN_13 = 9
    EAN_8 = 10
    PDF_417 = 11
    RSS_14 = 12
    RSS_EXPANDED = 13
    UPC_A = 14
    UPC_E = 15
    UPC_EAN_EXTENSION = 16


@dataclass(frozen=True)
class QrcodeResultFormat:
    """
    Format of a decoded code.

    Attributes:
        format: Symbology enum value
        formatName: Human readable symbology name (e.g., "QR_CODE")
    """
    format: Html5QrcodeSupportedFormats
    formatName: str

    @staticmethod
    def create(format: Html5QrcodeSupportedFormats) -> "QrcodeResultFormat":
        return QrcodeResultFormat(format=format, formatName=format.name)


@dataclass(frozen=True)
class QrcodeResultDebugData:
    """Provenance tag naming the decoder that produced a result."""
    decoderName: str


@dataclass(frozen=True)
class QrcodeResult:
    """
    Decoded code.

    Attributes:
        text: Decoded content
        format: Format of the decoded code
        debugData: Provenance of the result
    """
    text: str
    format: QrcodeResultFormat
    debugData: Optional[QrcodeResultDebugData] = None


class DecodeOutcome(ABC):
    """
    Tagged result of one decode attempt.

    Exactly one of Found, NotFound or Failed is returned per call.
    """

    def isFound(self) -> bool:
        return False


@dataclass(frozen=True)
class Found(DecodeOutcome):
    """A code was decoded from the frame."""
    result: QrcodeResult

    @property
    def text(self) -> str:
        return self.result.text

    @property
    def format(self) -> QrcodeResultFormat:
        return self.result.format

    @property
    def debugData(self) -> Optional[QrcodeResultDebugData]:
        return self.result.debugData

    def isFound(self) -> bool:
        return True


@dataclass(frozen=True)
class NotFound(DecodeOutcome):
    """No code visible in the frame. Not an error."""


@dataclass(frozen=True)
class Failed(DecodeOutcome):
    """The engine raised while processing the frame."""
    error: DecodeFailure


class IQrcodeDecoderAsync(ABC):
    """
    Interface for asynchronous code decoders.

    Implementations wrap a recognition engine behind a uniform
    coroutine contract so the scanning loop can swap strategies.
    """

    @abstractmethod
    async def decodeAsync(self, frame: Frame) -> DecodeOutcome:
        """
        Decode a code from a frame.

        Must never raise: engine errors are reported as Failed.

        Args:
            frame: Input frame (numpy image or image path)

        Returns:
            DecodeOutcome: Found, NotFound or Failed
        """
        pass
