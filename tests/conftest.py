"""
Shared pytest fixtures: vision engine and model origin test doubles.
"""
import asyncio
import json
from typing import Any, List, Optional, Sequence

import numpy as np
import pytest

from opencv_qrdecoder.core.errors import TransportError
from opencv_qrdecoder.core.interfaces.model_fetcher_interface import IModelFetcher
from opencv_qrdecoder.core.interfaces.vision_engine_interface import (
    IVisionEngine,
    StorageFlags
)
from opencv_qrdecoder.core.qr.opencv_qr_decoder import OpenCvQrcodeDecoder


class FakeDetector:
    """Opaque detector handle."""


class FakeVisionEngine(IVisionEngine):
    """
    In-memory engine stub.

    Set texts to the candidates detectAndDecode should report, or one of
    the *Error attributes to make the matching primitive raise.
    """

    def __init__(self):
        self.texts: List[str] = []
        self.storage = {}
        self.installCalls = []
        self.buildCount = 0
        self.decodeCount = 0
        self.detectors = []
        self.readError: Optional[Exception] = None
        self.decodeError: Optional[Exception] = None
        self.buildError: Optional[Exception] = None

    def readGrayscaleImage(self, frame: Any) -> np.ndarray:
        if self.readError is not None:
            raise self.readError
        return np.zeros((16, 16), dtype=np.uint8)

    def installStorageEntry(self, root: str, name: str, data: bytes, flags: StorageFlags) -> None:
        self.installCalls.append((root, name, flags))
        self.storage[(root, name)] = data

    def buildDetector(self, detectProto: str, detectWeight: str, srProto: str, srWeight: str) -> Any:
        self.buildCount += 1
        if self.buildError is not None:
            raise self.buildError
        for name in (detectProto, detectWeight, srProto, srWeight):
            if ("/", name) not in self.storage:
                raise FileNotFoundError(name)
        return FakeDetector()

    def detectAndDecode(self, detector: Any, image: np.ndarray, points: List[np.ndarray]) -> Sequence[str]:
        self.decodeCount += 1
        self.detectors.append(detector)
        if self.decodeError is not None:
            raise self.decodeError
        points.extend(np.zeros((4, 2), dtype=np.float32) for _ in self.texts)
        return list(self.texts)


class FakeModelFetcher(IModelFetcher):
    """Model origin stub that fails on the artifact named by failOn."""

    def __init__(self):
        self.calls = []
        self.failOn: Optional[str] = None
        self.closed = False

    async def fetch(self, baseAddress: str, artifactName: str) -> bytes:
        self.calls.append((baseAddress, artifactName))
        await asyncio.sleep(0)
        if artifactName == self.failOn:
            url = f"{baseAddress}/{artifactName}"
            raise TransportError(f"Failed to fetch {url}: HTTP 404", url=url, statusCode=404)
        return f"{artifactName}-payload".encode()

    async def close(self) -> None:
        self.closed = True


MODEL_ORIGIN = "https://models.example.com/wechat"


@pytest.fixture(autouse=True)
def resetDecoderInitialization():
    """Every test starts without a process-wide initialization."""
    OpenCvQrcodeDecoder.resetInitialization()
    yield
    OpenCvQrcodeDecoder.resetInitialization()


@pytest.fixture
def fakeEngine():
    return FakeVisionEngine()


@pytest.fixture
def fakeFetcher():
    return FakeModelFetcher()


@pytest.fixture
def writeConfig(tmp_path):
    """Factory writing a config file and returning its path."""
    def _write(decoderSection=None, debug=None):
        config = {
            "opencv_decoder": {
                "modelOrigin": MODEL_ORIGIN,
                "requestTimeout": 5,
                "requestedFormats": ["QR_CODE"],
                "verbose": True
            },
            "debug": {"enabled": False}
        }
        if decoderSection is not None:
            config["opencv_decoder"] = decoderSection
        if debug is not None:
            config["debug"] = debug
        path = tmp_path / "application_config.json"
        path.write_text(json.dumps(config), encoding="utf-8")
        return str(path)
    return _write
