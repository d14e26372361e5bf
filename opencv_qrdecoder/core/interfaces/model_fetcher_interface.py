"""
Model Fetcher Interface Module.

Defines the interface for retrieving model artifacts from a model origin.
"""

from abc import ABC, abstractmethod


class IModelFetcher(ABC):
    """Interface for model artifact retrieval."""

    @abstractmethod
    async def fetch(self, baseAddress: str, artifactName: str) -> bytes:
        """
        Retrieve one artifact from "<baseAddress>/<artifactName>".

        Args:
            baseAddress: Model origin address
            artifactName: Well-known artifact name

        Returns:
            Raw artifact bytes

        Raises:
            TransportError: If the artifact cannot be retrieved
        """
        pass

    async def close(self) -> None:
        """Release transport resources."""
        return None
