"""
OpenCV QR Decoder CLI

Decodes QR codes from image files with the OpenCV WeChat QRCode strategy.

Flow:
- ConfigService: Reads decoder settings from config file
- QrScanService: Fetches and installs models once, builds the decoder
- Each image is decoded and its text printed (empty line when not found)
"""

import sys
import os
import asyncio
import logging
import argparse

from opencv_qrdecoder.core.interfaces.qr_decoder_interface import Found, Failed
from opencv_qrdecoder.services.impl.config_service import ConfigService
from opencv_qrdecoder.services.impl.qr_scan_service import QrScanService


def setupLogging(debugMode: bool = False) -> None:
    """
    Setup application logging.

    Args:
        debugMode: If True, set log level to DEBUG.
    """
    level = logging.DEBUG if debugMode else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )


def parseArgs(argv=None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Decode QR codes from images with OpenCV WeChat QRCode",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py samples/label.png
  python main.py --debug samples/*.jpg
        """
    )

    parser.add_argument(
        "images",
        nargs="+",
        help="Image files to decode"
    )

    parser.add_argument(
        "--config", "-c",
        type=str,
        default="config/application_config.json",
        help="Path to configuration file"
    )

    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug logging"
    )

    return parser.parse_args(argv)


def isDebugMode(args: argparse.Namespace, configService: ConfigService) -> bool:
    """Debug logging is on if the flag, the DEBUG env or debug.enabled asks for it."""
    return (
        args.debug
        or os.environ.get("DEBUG", "").lower() == "true"
        or configService.isDebugEnabled()
    )


async def run(args: argparse.Namespace, configService: ConfigService) -> int:
    """Decode every image, returning the process exit code."""
    logger = logging.getLogger(__name__)

    scanService = QrScanService(configService)

    if not await scanService.start():
        logger.error("OpenCV decoder is unavailable")
        return 1

    exitCode = 0
    for imagePath in args.images:
        result = await scanService.scanFrame(imagePath, frameId=os.path.basename(imagePath))
        if isinstance(result.outcome, Found):
            print(f"{imagePath}: {result.outcome.text}")
        elif isinstance(result.outcome, Failed):
            print(f"{imagePath}: ERROR {result.outcome.error}")
            exitCode = 2
        else:
            print(f"{imagePath}:")

    return exitCode


def main(argv=None):
    """Main entry point."""
    args = parseArgs(argv)

    try:
        configService = ConfigService(args.config)
    except RuntimeError as e:
        setupLogging()
        logging.getLogger(__name__).error(str(e))
        sys.exit(1)

    setupLogging(debugMode=isDebugMode(args, configService))
    logger = logging.getLogger(__name__)

    try:
        exitCode = asyncio.run(run(args, configService))
    except Exception as e:
        logger.error(f"Decoder failed to start: {e}")
        sys.exit(1)

    sys.exit(exitCode)


if __name__ == "__main__":
    main()
