"""
Vision Engine Interface Module.

Defines the capability boundary of the recognition engine used by the
OpenCV decoder. Production wires OpenCvVisionEngine; tests wire a stub.
Follows the Dependency Inversion Principle (DIP) from SOLID.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, List, Sequence

import numpy as np


@dataclass(frozen=True)
class StorageFlags:
    """
    Flags of an engine storage entry.

    Attributes:
        canRead: Entry is readable by the engine
        canWrite: Entry stays writable after installation
        canOwn: Engine takes ownership of the buffer instead of copying
    """
    canRead: bool = True
    canWrite: bool = False
    canOwn: bool = False


class IVisionEngine(ABC):
    """
    Interface for the vision engine behind the decoder.

    The detector handle returned by buildDetector is stateful and not
    reentrant: callers must not run two detectAndDecode calls on the
    same handle concurrently.
    """

    @abstractmethod
    def readGrayscaleImage(self, frame: Any) -> np.ndarray:
        """
        Read a frame into a single-channel engine image.

        Args:
            frame: Pixel surface (numpy image or image path)

        Returns:
            Grayscale image
        """
        pass

    @abstractmethod
    def installStorageEntry(
        self,
        root: str,
        name: str,
        data: bytes,
        flags: StorageFlags
    ) -> None:
        """
        Write a named entry into engine storage.

        Args:
            root: Storage root path
            name: Entry name
            data: Entry content
            flags: Entry flags
        """
        pass

    @abstractmethod
    def buildDetector(
        self,
        detectProto: str,
        detectWeight: str,
        srProto: str,
        srWeight: str
    ) -> Any:
        """
        Build a detector handle from installed storage entries.

        Args:
            detectProto: Detection network definition entry name
            detectWeight: Detection network weights entry name
            srProto: Super-resolution network definition entry name
            srWeight: Super-resolution network weights entry name

        Returns:
            Stateful detector handle
        """
        pass

    @abstractmethod
    def detectAndDecode(
        self,
        detector: Any,
        image: np.ndarray,
        points: List[np.ndarray]
    ) -> Sequence[str]:
        """
        Detect and decode codes in an image.

        Args:
            detector: Handle returned by buildDetector
            image: Grayscale image
            points: Output container, extended with one corner array per code

        Returns:
            Decoded strings in engine order (may be empty)
        """
        pass
