"""QR Decoding module."""

from opencv_qrdecoder.core.qr.opencv_qr_decoder import (
    DECODER_NAME,
    OpenCvConfig,
    OpenCvQrcodeDecoder
)
from opencv_qrdecoder.core.qr.format_validator import validateRequestedFormats
from opencv_qrdecoder.core.qr.qr_decoder_factory import (
    createQrDecoder,
    getSupportedQrBackends,
    isQrBackendAvailable
)

__all__ = [
    'DECODER_NAME',
    'OpenCvConfig',
    'OpenCvQrcodeDecoder',
    'validateRequestedFormats',
    'createQrDecoder',
    'getSupportedQrBackends',
    'isQrBackendAvailable'
]
