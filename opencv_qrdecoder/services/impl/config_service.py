"""
Config Service Implementation.

Centralized configuration management for the QR decoder.
Loads configuration from application_config.json organized by section.

Follows:
- SRP: Only handles configuration management
- DIP: Provides configuration to other services via interface
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from opencv_qrdecoder.services.interfaces.config_service_interface import IConfigService


logger = logging.getLogger(__name__)


class ConfigService(IConfigService):
    """
    Implementation of IConfigService.

    Loads and manages configuration from application_config.json.
    Configuration is organized by section (opencv_decoder, debug).
    """

    def __init__(self, configPath: str = "config/application_config.json"):
        """
        Initialize ConfigService.

        Args:
            configPath: Path to the configuration file.
        """
        self._config: Dict[str, Any] = {}
        self._configPath = Path(configPath)
        self._debugEnabled = False

        # Load config (required)
        if not self.loadConfig(configPath):
            raise RuntimeError(f"Failed to load configuration from: {configPath}")

    def loadConfig(self, configPath: str) -> bool:
        """Load configuration from JSON file."""
        try:
            path = Path(configPath)
            if not path.exists():
                logger.error(f"Config file not found: {configPath}")
                return False

            with open(path, 'r', encoding='utf-8') as f:
                self._config = json.load(f)

            self._debugEnabled = self.get("debug.enabled", False)

            logger.info(f"Configuration loaded from: {path.absolute()}")
            return True

        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in config file: {e}")
            return False
        except OSError as e:
            logger.error(f"Failed to load config: {e}")
            return False

    # ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
    # Generic Config Access
    # ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key with dot notation support.

        Examples:
            get("opencv_decoder.modelOrigin") -> "https://..."
            get("debug.enabled") -> False
        """
        value = self._config
        for part in key.split('.'):
            if isinstance(value, dict):
                value = value.get(part)
                if value is None:
                    return default
            else:
                return default
        return value

    def getServiceConfig(self, serviceName: str) -> Dict[str, Any]:
        config = self._config.get(serviceName, {})
        return config if isinstance(config, dict) else {}

    # ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
    # Debug Settings
    # ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

    def isDebugEnabled(self) -> bool:
        return self._debugEnabled

    # ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
    # OpenCV Decoder Settings
    # ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

    def getModelOrigin(self) -> str:
        origin = self.get("opencv_decoder.modelOrigin")
        if not origin:
            raise RuntimeError("opencv_decoder.modelOrigin is not configured")
        return origin

    def getRequestTimeout(self) -> float:
        return float(self.get("opencv_decoder.requestTimeout", 30.0))

    def getStorageRoot(self) -> Optional[str]:
        return self.get("opencv_decoder.storageRoot")

    def getRequestedFormats(self) -> List[str]:
        return self.get("opencv_decoder.requestedFormats", ["QR_CODE"])

    def isVerbose(self) -> bool:
        return self.get("opencv_decoder.verbose", False)
