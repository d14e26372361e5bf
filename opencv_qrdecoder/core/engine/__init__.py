"""Vision engine adapters."""

from opencv_qrdecoder.core.engine.opencv_vision_engine import OpenCvVisionEngine

__all__ = ['OpenCvVisionEngine']
