"""Service implementations."""

from opencv_qrdecoder.services.impl.config_service import ConfigService
from opencv_qrdecoder.services.impl.qr_scan_service import QrScanService, parseFormats

__all__ = [
    'ConfigService',
    'QrScanService',
    'parseFormats'
]
