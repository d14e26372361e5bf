"""
QR Scan Service Implementation.

Owns the OpenCV decoder lifecycle for a scanning loop:
initialize engine storage once, construct the decoder, then decode frames.
A construction failure marks the strategy unavailable so the caller can
fall back to another decoder.

Follows:
- SRP: Only handles decoder lifecycle and frame scanning
- DIP: Depends on IConfigService and IVisionEngine abstractions
"""

import time
import asyncio
import logging
from typing import List, Optional

from opencv_qrdecoder.core.errors import ConstructionError, UnsupportedFormatError
from opencv_qrdecoder.core.interfaces.model_fetcher_interface import IModelFetcher
from opencv_qrdecoder.core.interfaces.qr_decoder_interface import (
    Found,
    Failed,
    Frame,
    Html5QrcodeSupportedFormats,
    IQrcodeDecoderAsync
)
from opencv_qrdecoder.core.interfaces.vision_engine_interface import IVisionEngine
from opencv_qrdecoder.core.qr import OpenCvConfig, OpenCvQrcodeDecoder, createQrDecoder
from opencv_qrdecoder.services.interfaces.config_service_interface import IConfigService
from opencv_qrdecoder.services.interfaces.qr_scan_service_interface import (
    IQrScanService,
    QrScanResult
)


def parseFormats(names: List[str]) -> List[Html5QrcodeSupportedFormats]:
    """
    Convert format names from config into enum values.

    Raises:
        ValueError: If a name is not a known format.
    """
    formats = []
    for name in names:
        try:
            formats.append(Html5QrcodeSupportedFormats[name.strip().upper()])
        except KeyError:
            raise ValueError(f"Unknown barcode format: {name}") from None
    return formats


class QrScanService(IQrScanService):
    """
    Implementation of IQrScanService over OpenCvQrcodeDecoder.

    Frames are decoded one at a time: the decoder's detector handle is not
    reentrant, so scanFrame serializes calls.
    """

    def __init__(
        self,
        configService: IConfigService,
        engine: Optional[IVisionEngine] = None,
        fetcher: Optional[IModelFetcher] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize QrScanService.

        Args:
            configService: Configuration source.
            engine: Vision engine (default: OpenCV engine).
            fetcher: Model fetcher (default: HTTP fetcher).
            logger: Logger instance.
        """
        self._configService = configService
        self._engine = engine
        self._fetcher = fetcher
        self._logger = logger or logging.getLogger(__name__)
        self._decoder: Optional[IQrcodeDecoderAsync] = None
        self._lock = asyncio.Lock()
        self._frameCount = 0

    async def start(self) -> bool:
        """
        Initialize engine storage and construct the decoder.

        Raises:
            TransportError: If the model artifacts cannot be fetched.
        """
        config = OpenCvConfig.fromConfigService(self._configService)
        initialization = await OpenCvQrcodeDecoder.init(
            config,
            engine=self._engine,
            fetcher=self._fetcher
        )

        requestedFormats = parseFormats(self._configService.getRequestedFormats())

        try:
            self._decoder = createQrDecoder(
                backend="opencv",
                requestedFormats=requestedFormats,
                verbose=self._configService.isVerbose(),
                initialization=initialization
            )
        except (UnsupportedFormatError, ConstructionError) as e:
            self._logger.error(f"OpenCV decoder unavailable: {e}")
            self._decoder = None
            return False

        self._logger.info("QrScanService started")
        return True

    def isAvailable(self) -> bool:
        return self._decoder is not None

    async def scanFrame(self, frame: Frame, frameId: str = "") -> QrScanResult:
        """
        Decode one frame.

        Raises:
            RuntimeError: If the service was not started successfully.
        """
        if self._decoder is None:
            raise RuntimeError("QrScanService is not started")

        async with self._lock:
            self._frameCount += 1
            frameId = frameId or f"frame_{self._frameCount:06d}"

            startTime = time.time()
            outcome = await self._decoder.decodeAsync(frame)
            processingTimeMs = (time.time() - startTime) * 1000

        if isinstance(outcome, Found):
            self._logger.info(
                f"[{frameId}] QR detected: {outcome.text} "
                f"(time={processingTimeMs:.2f}ms)"
            )
        elif isinstance(outcome, Failed):
            self._logger.warning(f"[{frameId}] {outcome.error}")
        else:
            self._logger.debug(f"[{frameId}] No QR code detected")

        return QrScanResult(
            outcome=outcome,
            frameId=frameId,
            processingTimeMs=processingTimeMs
        )
