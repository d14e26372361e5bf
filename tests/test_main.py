"""
Tests for the command line entry point.
"""
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

import main
from opencv_qrdecoder.core.errors import DecodeFailure
from opencv_qrdecoder.core.interfaces.qr_decoder_interface import (
    Failed,
    Found,
    Html5QrcodeSupportedFormats,
    NotFound,
    QrcodeResult,
    QrcodeResultFormat
)
from opencv_qrdecoder.services.interfaces.qr_scan_service_interface import QrScanResult


def _found(text: str) -> Found:
    return Found(QrcodeResult(
        text=text,
        format=QrcodeResultFormat.create(Html5QrcodeSupportedFormats.QR_CODE)
    ))


def test_parse_args():
    args = main.parseArgs(["-d", "--config", "cfg.json", "a.png", "b.png"])

    assert args.debug
    assert args.config == "cfg.json"
    assert args.images == ["a.png", "b.png"]


@pytest.mark.asyncio
async def test_run_prints_results(capsys):
    scanService = MagicMock()
    scanService.start = AsyncMock(return_value=True)
    scanService.scanFrame = AsyncMock(side_effect=[
        QrScanResult(outcome=_found("HELLO"), frameId="a.png"),
        QrScanResult(outcome=NotFound(), frameId="b.png"),
    ])
    args = main.parseArgs(["a.png", "b.png"])

    with patch.object(main, "QrScanService", return_value=scanService):
        exitCode = await main.run(args, MagicMock())

    out = capsys.readouterr().out
    assert exitCode == 0
    assert "a.png: HELLO" in out
    assert "b.png:\n" in out


@pytest.mark.asyncio
async def test_run_reports_failures():
    scanService = MagicMock()
    scanService.start = AsyncMock(return_value=True)
    scanService.scanFrame = AsyncMock(return_value=QrScanResult(
        outcome=Failed(DecodeFailure(ValueError("bad"))), frameId="a.png"
    ))
    args = main.parseArgs(["a.png"])

    with patch.object(main, "QrScanService", return_value=scanService):
        assert await main.run(args, MagicMock()) == 2


@pytest.mark.asyncio
async def test_run_unavailable_decoder():
    scanService = MagicMock()
    scanService.start = AsyncMock(return_value=False)
    args = main.parseArgs(["a.png"])

    with patch.object(main, "QrScanService", return_value=scanService):
        assert await main.run(args, MagicMock()) == 1


def _configService(debugEnabled: bool) -> MagicMock:
    configService = MagicMock()
    configService.isDebugEnabled.return_value = debugEnabled
    return configService


@pytest.mark.parametrize("argv, env, debugEnabled, expected", [
    (["a.png"], "", False, False),
    (["--debug", "a.png"], "", False, True),
    (["a.png"], "true", False, True),
    (["a.png"], "", True, True),
])
def test_debug_mode_sources(monkeypatch, argv, env, debugEnabled, expected):
    monkeypatch.setenv("DEBUG", env)
    args = main.parseArgs(argv)

    assert main.isDebugMode(args, _configService(debugEnabled)) is expected


def test_main_uses_config_debug_setting(monkeypatch, writeConfig):
    monkeypatch.delenv("DEBUG", raising=False)
    configPath = writeConfig(debug={"enabled": True})

    with patch.object(main, "setupLogging") as setupLogging, \
            patch.object(main, "run", new=AsyncMock(return_value=0)):
        with pytest.raises(SystemExit) as excInfo:
            main.main(["--config", configPath, "a.png"])

    assert excInfo.value.code == 0
    setupLogging.assert_called_once_with(debugMode=True)


def test_main_missing_config_exits(tmp_path):
    with patch.object(main, "setupLogging"):
        with pytest.raises(SystemExit) as excInfo:
            main.main(["--config", str(tmp_path / "absent.json"), "a.png"])

    assert excInfo.value.code == 1
