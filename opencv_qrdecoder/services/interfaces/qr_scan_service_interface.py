"""
QR Scan Service Interface Module.

Defines the interface for the scanning service that owns the decoder
lifecycle: one-time initialization, construction and per-frame decoding.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from opencv_qrdecoder.core.interfaces.qr_decoder_interface import DecodeOutcome, Frame


@dataclass
class QrScanResult:
    """
    Result of scanning one frame.

    Attributes:
        outcome: Decode outcome (Found, NotFound or Failed).
        frameId: Frame identifier.
        processingTimeMs: Time taken for decoding.
    """
    outcome: DecodeOutcome
    frameId: str
    processingTimeMs: float = 0.0


class IQrScanService(ABC):
    """Interface for QR scanning operations."""

    @abstractmethod
    async def start(self) -> bool:
        """
        Initialize engine storage and construct the decoder.

        Returns:
            bool: True if the decoder is available, False if construction failed.
        """
        pass

    @abstractmethod
    async def scanFrame(self, frame: Frame, frameId: str = "") -> QrScanResult:
        """
        Decode one frame.

        Args:
            frame: Input frame.
            frameId: Frame identifier for logging.

        Returns:
            QrScanResult: Outcome with timing.
        """
        pass

    @abstractmethod
    def isAvailable(self) -> bool:
        """Check if the decoder was constructed."""
        pass
