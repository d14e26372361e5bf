"""
OpenCV QR Code Decoder Implementation.

Decoder strategy over OpenCV's WeChat QRCode detector. The detector needs
four model artifacts installed in engine storage before it can be built,
so the strategy has a one-time init() phase ahead of construction.

Lifecycle:
    initialization = await OpenCvQrcodeDecoder.init(OpenCvConfig(modelOrigin=...))
    decoder = OpenCvQrcodeDecoder([Html5QrcodeSupportedFormats.QR_CODE], False, logger)
    outcome = await decoder.decodeAsync(frame)

decodeAsync is not reentrant: the calling loop must await each call
before submitting the next frame to the same decoder. The detection
itself runs synchronously to completion and cannot be cancelled.
"""

import logging
from dataclasses import dataclass
from typing import Any, ClassVar, Iterable, List, Optional

import numpy as np

from opencv_qrdecoder.core.errors import ConstructionError, DecodeFailure
from opencv_qrdecoder.core.interfaces.model_fetcher_interface import IModelFetcher
from opencv_qrdecoder.core.interfaces.qr_decoder_interface import (
    DecodeOutcome,
    Failed,
    Found,
    Frame,
    Html5QrcodeSupportedFormats,
    IQrcodeDecoderAsync,
    NotFound,
    QrcodeResult,
    QrcodeResultDebugData,
    QrcodeResultFormat
)
from opencv_qrdecoder.core.interfaces.vision_engine_interface import IVisionEngine
from opencv_qrdecoder.core.models.model_installer import (
    DETECT_PROTO,
    DETECT_WEIGHT,
    SR_PROTO,
    SR_WEIGHT,
    EngineInitialization
)
from opencv_qrdecoder.core.qr.format_validator import validateRequestedFormats


DECODER_NAME = "opencv-js"


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OpenCvConfig:
    """
    Configuration of the initialization phase.

    Attributes:
        modelOrigin: Address serving the four model artifacts
        requestTimeout: Artifact request timeout in seconds
        storageRoot: Engine storage directory (None: temporary directory)
    """
    modelOrigin: str
    requestTimeout: float = 30.0
    storageRoot: Optional[str] = None

    @staticmethod
    def fromConfigService(configService) -> "OpenCvConfig":
        """Build from a config service exposing the opencv_decoder getters."""
        return OpenCvConfig(
            modelOrigin=configService.getModelOrigin(),
            requestTimeout=configService.getRequestTimeout(),
            storageRoot=configService.getStorageRoot()
        )


class OpenCvQrcodeDecoder(IQrcodeDecoderAsync):
    """
    QR code decoder using OpenCV WeChat QRCode.

    Supports QR_CODE only. Each instance owns exactly one detector handle,
    built in the constructor and reused for every decode call.
    """

    # Process-wide initialization shared by decoders built without an explicit handle
    _initialization: ClassVar[Optional[EngineInitialization]] = None
    _initializationConfig: ClassVar[Optional[OpenCvConfig]] = None

    def __init__(
        self,
        requestedFormats: Iterable[Html5QrcodeSupportedFormats],
        verbose: bool = False,
        logger: Optional[logging.Logger] = None,
        initialization: Optional[EngineInitialization] = None
    ):
        """
        Initialize OpenCvQrcodeDecoder.

        Args:
            requestedFormats: Formats to recognize (QR_CODE only)
            verbose: Log per-frame outcomes at debug level
            logger: Logger instance
            initialization: Completed engine initialization
                (default: the one created by init())

        Raises:
            UnsupportedFormatError: If a format other than QR_CODE is requested
            ConstructionError: If storage is not initialized or the
                engine cannot build the detector
        """
        self._verbose = verbose
        self._logger = logger or logging.getLogger(__name__)

        validateRequestedFormats(requestedFormats, self.__class__.__name__)

        if initialization is None:
            initialization = OpenCvQrcodeDecoder._initialization
        if initialization is None or not initialization.isComplete():
            raise ConstructionError(
                "Engine storage is not initialized; "
                "await OpenCvQrcodeDecoder.init() first"
            )

        self._engine: IVisionEngine = initialization.engine
        self._qrcodeDetector: Any = self._buildDetector()

    @classmethod
    async def init(
        cls,
        config: OpenCvConfig,
        engine: Optional[IVisionEngine] = None,
        fetcher: Optional[IModelFetcher] = None
    ) -> EngineInitialization:
        """
        Fetch and install the model artifacts once per process.

        The current initialization is reused only for an equal config.
        Without an explicit engine the production OpenCV engine is created;
        without an explicit fetcher an HTTP fetcher is created and closed
        when the initialization run finishes.

        Args:
            config: Initialization config
            engine: Vision engine receiving the artifacts
            fetcher: Artifact fetcher

        Returns:
            EngineInitialization: The completed initialization handle

        Raises:
            TransportError: If any artifact cannot be fetched
        """
        current = cls._initialization
        if current is not None and (engine is None or engine is current.engine):
            if config == cls._initializationConfig:
                await current.run()
                return current
            logger.info(
                f"Replacing engine initialization: config changed from "
                f"{cls._initializationConfig} to {config}"
            )

        if engine is None:
            from opencv_qrdecoder.core.engine.opencv_vision_engine import (
                OpenCvVisionEngine
            )
            engine = OpenCvVisionEngine(storageRoot=config.storageRoot)

        ownsFetcher = fetcher is None
        if fetcher is None:
            from opencv_qrdecoder.core.models.model_fetcher import HttpModelFetcher
            fetcher = HttpModelFetcher(timeout=config.requestTimeout)

        # The handle closes an owned fetcher once its shielded run finishes
        initialization = EngineInitialization(
            engine, fetcher, config.modelOrigin, ownsFetcher=ownsFetcher
        )
        cls._initialization = initialization
        cls._initializationConfig = config
        try:
            await initialization.run()
        except Exception:
            if cls._initialization is initialization:
                cls._initialization = None
                cls._initializationConfig = None
            raise

        return initialization

    @classmethod
    def resetInitialization(cls) -> None:
        """Forget the process-wide initialization handle."""
        cls._initialization = None
        cls._initializationConfig = None

    def _buildDetector(self) -> Any:
        try:
            detector = self._engine.buildDetector(
                DETECT_PROTO,
                DETECT_WEIGHT,
                SR_PROTO,
                SR_WEIGHT
            )
        except Exception as e:
            self._logger.error(f"Failed to build WeChat QR detector: {e}")
            raise ConstructionError(f"Failed to build WeChat QR detector: {e}") from e

        self._logger.info("OpenCvQrcodeDecoder initialized")
        return detector

    async def decodeAsync(self, frame: Frame) -> DecodeOutcome:
        try:
            inputImage = self._engine.readGrayscaleImage(frame)
            points: List[np.ndarray] = []
            texts = self._engine.detectAndDecode(
                self._qrcodeDetector, inputImage, points
            )
        except Exception as e:
            self._logger.error(f"Error during QR decoding: {e}")
            return Failed(DecodeFailure(e))

        # First candidate only; engine order is authoritative
        text = texts[0] if texts else None
        if not text:
            if self._verbose:
                self._logger.debug("No QR code detected")
            return NotFound()

        if self._verbose:
            self._logger.debug(
                f"QR code detected: {text} (candidates={len(texts)})"
            )

        return Found(QrcodeResult(
            text=text,
            format=QrcodeResultFormat.create(Html5QrcodeSupportedFormats.QR_CODE),
            debugData=self._createDebugData()
        ))

    def _createDebugData(self) -> QrcodeResultDebugData:
        return QrcodeResultDebugData(decoderName=DECODER_NAME)
