"""
Unit tests for the decoder factory and format validation.
"""
import pytest

from opencv_qrdecoder.core.errors import UnsupportedFormatError
from opencv_qrdecoder.core.interfaces.qr_decoder_interface import (
    Html5QrcodeSupportedFormats,
    QrcodeResultFormat
)
from opencv_qrdecoder.core.models.model_installer import EngineInitialization
from opencv_qrdecoder.core.qr import (
    OpenCvQrcodeDecoder,
    createQrDecoder,
    getSupportedQrBackends,
    isQrBackendAvailable,
    validateRequestedFormats
)


MODEL_ORIGIN = "https://models.example.com/wechat"


class TestValidateRequestedFormats:
    """Tests for validateRequestedFormats"""

    def test_qr_only_accepted(self):
        validateRequestedFormats([Html5QrcodeSupportedFormats.QR_CODE], "Decoder")

    def test_empty_accepted(self):
        validateRequestedFormats([], "Decoder")

    @pytest.mark.parametrize("format", [
        f for f in Html5QrcodeSupportedFormats if f != Html5QrcodeSupportedFormats.QR_CODE
    ])
    def test_every_other_format_rejected(self, format):
        with pytest.raises(UnsupportedFormatError, match=format.name):
            validateRequestedFormats([format], "Decoder")


def test_result_format_create():
    resultFormat = QrcodeResultFormat.create(Html5QrcodeSupportedFormats.DATA_MATRIX)
    assert resultFormat.format == Html5QrcodeSupportedFormats.DATA_MATRIX
    assert resultFormat.formatName == "DATA_MATRIX"


class TestFactory:
    """Tests for createQrDecoder"""

    def test_supported_backends(self):
        assert getSupportedQrBackends() == ["opencv"]

    def test_invalid_backend(self):
        with pytest.raises(ValueError, match="Invalid QR backend"):
            createQrDecoder(backend="zbar")

    def test_unknown_backend_unavailable(self):
        assert not isQrBackendAvailable("zxing")

    @pytest.mark.asyncio
    async def test_creates_opencv_decoder(self, fakeEngine, fakeFetcher):
        initialization = EngineInitialization(fakeEngine, fakeFetcher, MODEL_ORIGIN)
        await initialization.run()

        decoder = createQrDecoder(backend=" OpenCV ", initialization=initialization)

        assert isinstance(decoder, OpenCvQrcodeDecoder)
        assert fakeEngine.buildCount == 1
