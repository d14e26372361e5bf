"""Requested-format validation for single-symbology decoders."""

from typing import Iterable

from opencv_qrdecoder.core.errors import UnsupportedFormatError
from opencv_qrdecoder.core.interfaces.qr_decoder_interface import (
    Html5QrcodeSupportedFormats
)


def validateRequestedFormats(
    requestedFormats: Iterable[Html5QrcodeSupportedFormats],
    decoderName: str,
    supportedFormat: Html5QrcodeSupportedFormats = Html5QrcodeSupportedFormats.QR_CODE
) -> None:
    """
    Reject any requested format other than the supported one.

    Args:
        requestedFormats: Formats the caller asked the decoder to recognize
        decoderName: Decoder name used in the error message
        supportedFormat: The one format the decoder services

    Raises:
        UnsupportedFormatError: On the first unsupported format
    """
    for requestedFormat in requestedFormats:
        if requestedFormat != supportedFormat:
            raise UnsupportedFormatError(requestedFormat, decoderName)
