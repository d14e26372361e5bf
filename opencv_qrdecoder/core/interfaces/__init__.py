"""Interfaces and data classes of the core layer."""

from opencv_qrdecoder.core.interfaces.qr_decoder_interface import (
    Frame,
    Html5QrcodeSupportedFormats,
    QrcodeResultFormat,
    QrcodeResultDebugData,
    QrcodeResult,
    DecodeOutcome,
    Found,
    NotFound,
    Failed,
    IQrcodeDecoderAsync
)
from opencv_qrdecoder.core.interfaces.vision_engine_interface import (
    IVisionEngine,
    StorageFlags
)
from opencv_qrdecoder.core.interfaces.model_fetcher_interface import IModelFetcher

__all__ = [
    'Frame',
    'Html5QrcodeSupportedFormats',
    'QrcodeResultFormat',
    'QrcodeResultDebugData',
    'QrcodeResult',
    'DecodeOutcome',
    'Found',
    'NotFound',
    'Failed',
    'IQrcodeDecoderAsync',
    'IVisionEngine',
    'StorageFlags',
    'IModelFetcher'
]
