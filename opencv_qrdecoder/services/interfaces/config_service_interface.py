"""
Config Service Interface Module.

Defines the interface for centralized configuration management.
The config service loads and provides access to all decoder settings.

Follows:
- SRP: Only handles configuration management
- DIP: Other services depend on this abstraction
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional


class IConfigService(ABC):
    """
    Interface for configuration management.

    Supports dot notation for nested config access.
    """

    @abstractmethod
    def loadConfig(self, configPath: str) -> bool:
        """
        Load configuration from a JSON file.

        Args:
            configPath: Path to the configuration file.

        Returns:
            bool: True if loaded successfully, False otherwise.
        """
        pass

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by key.

        Supports dot notation for nested access:
        - "debug" -> config["debug"]
        - "opencv_decoder.modelOrigin" -> config["opencv_decoder"]["modelOrigin"]

        Args:
            key: Configuration key (supports dot notation).
            default: Default value if key not found.

        Returns:
            Configuration value or default.
        """
        pass

    @abstractmethod
    def getServiceConfig(self, serviceName: str) -> Dict[str, Any]:
        """
        Get all configuration for a specific section.

        Args:
            serviceName: Section name (e.g., "opencv_decoder").

        Returns:
            Configuration dictionary for the section.
        """
        pass

    @abstractmethod
    def getModelOrigin(self) -> str:
        """Get address serving the model artifacts."""
        pass

    @abstractmethod
    def getRequestTimeout(self) -> float:
        """Get model request timeout in seconds."""
        pass

    @abstractmethod
    def getStorageRoot(self) -> Optional[str]:
        """Get engine storage directory (None for a temporary directory)."""
        pass

    @abstractmethod
    def getRequestedFormats(self) -> List[str]:
        """Get names of the formats the decoder is asked to recognize."""
        pass

    @abstractmethod
    def isVerbose(self) -> bool:
        """Check if per-frame decoder logging is enabled."""
        pass

    @abstractmethod
    def isDebugEnabled(self) -> bool:
        """Check if debug mode is enabled."""
        pass
