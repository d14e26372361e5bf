"""
QR Decoder Factory Module.

Factory function for creating decoder strategy instances based on backend
selection. Other strategies implement the same IQrcodeDecoderAsync
contract and are registered here.

Follows:
- OCP (Open/Closed Principle): Easy to extend with new backends
- DIP (Dependency Inversion): Returns IQrcodeDecoderAsync interface
- Factory Pattern: Encapsulates object creation logic
"""

import logging
from typing import Iterable, List, Optional

from opencv_qrdecoder.core.interfaces.qr_decoder_interface import (
    Html5QrcodeSupportedFormats,
    IQrcodeDecoderAsync
)
from opencv_qrdecoder.core.models.model_installer import EngineInitialization


logger = logging.getLogger(__name__)


def createQrDecoder(
    backend: str = "opencv",
    requestedFormats: Optional[Iterable[Html5QrcodeSupportedFormats]] = None,
    verbose: bool = False,
    decoderLogger: Optional[logging.Logger] = None,
    initialization: Optional[EngineInitialization] = None
) -> IQrcodeDecoderAsync:
    """
    Factory function to create a decoder based on backend.

    Supports:
    - "opencv": OpenCV WeChat QRCode backend (deep learning based,
      requires OpenCvQrcodeDecoder.init() beforehand)

    Args:
        backend: Backend name.
        requestedFormats: Formats to recognize (default: QR_CODE).
        verbose: Log per-frame outcomes.
        decoderLogger: Logger handed to the decoder.
        initialization: (opencv) Completed engine initialization.

    Returns:
        IQrcodeDecoderAsync: Decoder instance.

    Raises:
        ValueError: If backend is invalid.
        UnsupportedFormatError: If a requested format is not supported.
        ConstructionError: If the decoder cannot be built.
    """
    # Normalize backend name
    backend = backend.lower().strip()

    supportedBackends = getSupportedQrBackends()
    if backend not in supportedBackends:
        errorMsg = (
            f"Invalid QR backend: '{backend}'. "
            f"Supported backends: {supportedBackends}"
        )
        logger.error(errorMsg)
        raise ValueError(errorMsg)

    if requestedFormats is None:
        requestedFormats = [Html5QrcodeSupportedFormats.QR_CODE]

    if backend == "opencv":
        from opencv_qrdecoder.core.qr.opencv_qr_decoder import OpenCvQrcodeDecoder

        logger.info(f"Creating OpenCV QR decoder (verbose={verbose})")
        return OpenCvQrcodeDecoder(
            requestedFormats,
            verbose,
            decoderLogger,
            initialization=initialization
        )

    # Should never reach here due to validation above
    raise ValueError(f"Unsupported QR backend: {backend}")


def getSupportedQrBackends() -> List[str]:
    """
    Get list of supported QR backend names.

    Returns:
        List[str]: List of backend names ["opencv"].
    """
    return ["opencv"]


def isQrBackendAvailable(backend: str) -> bool:
    """
    Check if a QR backend is available (library installed).

    Args:
        backend: Backend name.

    Returns:
        bool: True if backend library is installed and available.
    """
    backend = backend.lower().strip()

    if backend == "opencv":
        try:
            import cv2
            # Check if wechat_qrcode module is available
            _ = cv2.wechat_qrcode.WeChatQRCode
            return True
        except (ImportError, AttributeError):
            return False

    return False
