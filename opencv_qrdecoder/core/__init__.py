# Core module for the OpenCV QR decoder
# Contains interfaces, errors and the decoder strategy

from opencv_qrdecoder.core.errors import (
    QrDecoderError,
    TransportError,
    UnsupportedFormatError,
    ConstructionError,
    DecodeFailure
)
from opencv_qrdecoder.core.interfaces import (
    Html5QrcodeSupportedFormats,
    QrcodeResult,
    DecodeOutcome,
    Found,
    NotFound,
    Failed,
    IQrcodeDecoderAsync,
    IVisionEngine
)
from opencv_qrdecoder.core.qr import OpenCvConfig, OpenCvQrcodeDecoder

__all__ = [
    "QrDecoderError",
    "TransportError",
    "UnsupportedFormatError",
    "ConstructionError",
    "DecodeFailure",
    "Html5QrcodeSupportedFormats",
    "QrcodeResult",
    "DecodeOutcome",
    "Found",
    "NotFound",
    "Failed",
    "IQrcodeDecoderAsync",
    "IVisionEngine",
    "OpenCvConfig",
    "OpenCvQrcodeDecoder",
]
