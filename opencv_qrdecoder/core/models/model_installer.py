"""
Model Installation Module.

Fetches the four WeChat QRCode model artifacts and installs them into the
vision engine's storage under their well-known names. Installation is a
one-time, process-wide phase represented by an EngineInitialization handle
that decoder constructors depend on.
"""

import asyncio
import logging
from typing import Dict, Optional

from opencv_qrdecoder.core.interfaces.model_fetcher_interface import IModelFetcher
from opencv_qrdecoder.core.interfaces.vision_engine_interface import (
    IVisionEngine,
    StorageFlags
)


# Artifact names expected by the model origin layout. Do not rename.
DETECT_PROTO = "detect.prototxt"
DETECT_WEIGHT = "detect.caffemodel"
SR_PROTO = "sr.prototxt"
SR_WEIGHT = "sr.caffemodel"

MODEL_ARTIFACTS = (DETECT_PROTO, DETECT_WEIGHT, SR_PROTO, SR_WEIGHT)

STORAGE_ROOT = "/"

# Readable, not writable, copied (not owned) by the engine
ARTIFACT_FLAGS = StorageFlags(canRead=True, canWrite=False, canOwn=False)


logger = logging.getLogger(__name__)


def installModelArtifact(
    engine: IVisionEngine,
    path: str,
    name: str,
    data: bytes
) -> None:
    """
    Install one artifact into engine storage.

    Args:
        engine: Vision engine owning the storage
        path: Storage root path
        name: Well-known artifact name
        data: Artifact bytes
    """
    engine.installStorageEntry(path, name, data, ARTIFACT_FLAGS)
    logger.info(f"Installed model artifact {name} ({len(data)} bytes)")


class EngineInitialization:
    """
    Awaitable one-time initialization of engine storage.

    run() fetches all artifacts concurrently, then installs them. The
    handle is complete only after all four installs succeed. Concurrent
    callers share one in-flight run; a failed run leaves the handle
    incomplete so it can be retried, including a run that was cancelled.
    """

    def __init__(
        self,
        engine: IVisionEngine,
        fetcher: IModelFetcher,
        modelOrigin: str,
        logger: Optional[logging.Logger] = None,
        ownsFetcher: bool = False
    ):
        """
        Initialize EngineInitialization.

        Args:
            engine: Vision engine receiving the artifacts
            fetcher: Artifact fetcher
            modelOrigin: Address the artifacts are fetched from
            logger: Logger instance
            ownsFetcher: Close the fetcher when a run finishes
        """
        self._engine = engine
        self._fetcher = fetcher
        self._ownsFetcher = ownsFetcher
        self._modelOrigin = modelOrigin
        self._logger = logger or logging.getLogger(__name__)
        self._task: Optional[asyncio.Future] = None
        self._complete = False

    @property
    def engine(self) -> IVisionEngine:
        return self._engine

    @property
    def modelOrigin(self) -> str:
        return self._modelOrigin

    def isComplete(self) -> bool:
        return self._complete

    async def run(self) -> None:
        """
        Run the initialization phase, or wait for the one in flight.

        Raises:
            TransportError: If any artifact cannot be fetched
        """
        if self._complete:
            return

        if self._task is None:
            self._task = asyncio.ensure_future(self._initialize())

        await asyncio.shield(self._task)

    async def _initialize(self) -> None:
        self._logger.info(
            f"Initializing engine storage from {self._modelOrigin}"
        )

        try:
            payloads = await self._fetchAll()

            for name in MODEL_ARTIFACTS:
                installModelArtifact(
                    self._engine, STORAGE_ROOT, name, payloads[name]
                )

            self._complete = True
            self._logger.info("Engine storage initialized")
        except Exception as e:
            self._logger.error(f"Engine storage initialization failed: {e}")
            raise
        finally:
            if not self._complete:
                self._task = None
            if self._ownsFetcher:
                await self._fetcher.close()

    async def _fetchAll(self) -> Dict[str, bytes]:
        tasks = [
            asyncio.ensure_future(self._fetcher.fetch(self._modelOrigin, name))
            for name in MODEL_ARTIFACTS
        ]

        try:
            results = await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            raise

        return dict(zip(MODEL_ARTIFACTS, results))
