"""Model artifact retrieval and installation."""

from opencv_qrdecoder.core.models.model_fetcher import HttpModelFetcher
from opencv_qrdecoder.core.models.model_installer import (
    DETECT_PROTO,
    DETECT_WEIGHT,
    SR_PROTO,
    SR_WEIGHT,
    MODEL_ARTIFACTS,
    STORAGE_ROOT,
    EngineInitialization,
    installModelArtifact
)

__all__ = [
    'HttpModelFetcher',
    'DETECT_PROTO',
    'DETECT_WEIGHT',
    'SR_PROTO',
    'SR_WEIGHT',
    'MODEL_ARTIFACTS',
    'STORAGE_ROOT',
    'EngineInitialization',
    'installModelArtifact'
]
