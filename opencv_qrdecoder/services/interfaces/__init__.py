"""Service interfaces."""

from opencv_qrdecoder.services.interfaces.config_service_interface import IConfigService
from opencv_qrdecoder.services.interfaces.qr_scan_service_interface import (
    IQrScanService,
    QrScanResult
)

__all__ = [
    'IConfigService',
    'IQrScanService',
    'QrScanResult'
]
