"""
OpenCV Vision Engine Implementation.

This module adapts OpenCV's WeChat QRCode module to the IVisionEngine
boundary. WeChat QRCode is a CNN based detector with super-resolution
support; it is shipped in opencv-contrib-python.

Engine storage is a directory on disk: the detector constructor only
accepts file paths, so installed artifacts are written as files under
the storage root. A default (temporary) storage root is removed when
the engine is closed or garbage collected, and at interpreter exit;
a configured storage root is left in place.
"""

import os
import shutil
import logging
import tempfile
import weakref
from pathlib import Path
from typing import Any, List, Optional, Sequence

import cv2
import numpy as np

from opencv_qrdecoder.core.interfaces.vision_engine_interface import (
    IVisionEngine,
    StorageFlags
)


class OpenCvVisionEngine(IVisionEngine):
    """Vision engine backed by cv2.wechat_qrcode."""

    def __init__(
        self,
        storageRoot: Optional[str] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize OpenCvVisionEngine.

        Args:
            storageRoot: Directory holding installed entries
                (default: a per-process temporary directory)
            logger: Logger instance
        """
        self._logger = logger or logging.getLogger(__name__)
        self._cleanup: Optional[weakref.finalize] = None
        if storageRoot is None:
            storageRoot = tempfile.mkdtemp(prefix="opencv-qrdecoder-")
            self._cleanup = weakref.finalize(
                self, shutil.rmtree, storageRoot, ignore_errors=True
            )
        self._storageRoot = Path(storageRoot)

        self._logger.info(
            f"OpenCvVisionEngine initialized (storageRoot={self._storageRoot})"
        )

    @property
    def storageRoot(self) -> Path:
        return self._storageRoot

    def close(self) -> None:
        """Remove the temporary storage root, if this engine created one."""
        if self._cleanup is not None:
            self._cleanup()

    def _resolve(self, root: str, name: str) -> Path:
        # Storage paths are rooted at storageRoot, "/" maps to storageRoot itself
        return self._storageRoot / root.strip("/") / name

    def readGrayscaleImage(self, frame: Any) -> np.ndarray:
        if isinstance(frame, (str, Path)):
            image = cv2.imread(str(frame), cv2.IMREAD_GRAYSCALE)
            if image is None:
                raise ValueError(f"Cannot read image: {frame}")
            return image

        if not isinstance(frame, np.ndarray):
            raise ValueError(f"Unsupported frame type: {type(frame).__name__}")

        if frame.ndim == 2:
            return frame
        if frame.ndim == 3 and frame.shape[2] == 1:
            return frame[:, :, 0]
        if frame.ndim == 3 and frame.shape[2] == 3:
            return cv2.cvtColor(frame, cv2.COLOR_BGR2GRAY)
        if frame.ndim == 3 and frame.shape[2] == 4:
            return cv2.cvtColor(frame, cv2.COLOR_BGRA2GRAY)

        raise ValueError(f"Unsupported frame shape: {frame.shape}")

    def installStorageEntry(
        self,
        root: str,
        name: str,
        data: bytes,
        flags: StorageFlags
    ) -> None:
        # Flags are not mapped to file permissions; entries stay replaceable
        target = self._resolve(root, name)
        target.parent.mkdir(parents=True, exist_ok=True)

        # Write then replace so a reinstall never exposes a partial file
        fd, tmpPath = tempfile.mkstemp(dir=target.parent, prefix=f".{name}.")
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            os.replace(tmpPath, target)
        except OSError:
            if os.path.exists(tmpPath):
                os.remove(tmpPath)
            raise

        self._logger.debug(f"Storage entry written: {target}")

    def buildDetector(
        self,
        detectProto: str,
        detectWeight: str,
        srProto: str,
        srWeight: str
    ) -> Any:
        paths = [
            self._resolve("/", name)
            for name in (detectProto, detectWeight, srProto, srWeight)
        ]

        for path in paths:
            if not path.exists():
                raise FileNotFoundError(f"WeChat QR model file not found: {path}")

        try:
            wechatQrcode = cv2.wechat_qrcode
        except AttributeError as e:
            raise ImportError(
                "WeChat QRCode requires opencv-contrib-python. "
                "Install with: pip install opencv-contrib-python"
            ) from e

        # API: cv2.wechat_qrcode.WeChatQRCode(
        #     detector_prototxt_path,
        #     detector_caffe_model_path,
        #     super_resolution_prototxt_path,
        #     super_resolution_caffe_model_path
        # )
        detector = wechatQrcode.WeChatQRCode(*[str(p) for p in paths])
        self._logger.info("WeChat QRCode detector loaded successfully")
        return detector

    def detectAndDecode(
        self,
        detector: Any,
        image: np.ndarray,
        points: List[np.ndarray]
    ) -> Sequence[str]:
        # WeChat QRCode API: detectAndDecode(image) -> (texts, points)
        texts, corners = detector.detectAndDecode(image)
        if corners is not None:
            points.extend(corners)
        return list(texts)
