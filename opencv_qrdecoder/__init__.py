"""OpenCV WeChat QRCode decoder strategy."""

__version__ = "1.0.0"
