# Services module for the OpenCV QR decoder
# Import implementations from services/impl/:
# from opencv_qrdecoder.services.impl.config_service import ConfigService
# from opencv_qrdecoder.services.impl.qr_scan_service import QrScanService

__all__ = []
