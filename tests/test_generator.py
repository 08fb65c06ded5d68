"""Unit tests for the QR code generator."""

import base64

import pytest
from unittest.mock import Mock, patch

from qrcraft import (
    QRCodeError,
    QRCodeGenerator,
    QRCodeParams,
    UnknownQRCodeTypeError,
    ValidationError,
    WiFiData,
    generate_qr_code,
)
from qrcraft.errors import GENERIC_FAILURE_MESSAGE


def _make_generator(png=b"fake_qr_png_data"):
    qr = Mock()
    qr.generate.return_value = png
    logger = Mock()
    return QRCodeGenerator(qr, logger), qr, logger


@pytest.mark.asyncio
async def test_generate_returns_data_url():
    """Generator wraps rasterizer PNG in a data URI."""
    generator, qr, _ = _make_generator()

    result = await generator.generate("text", QRCodeParams(text="hello"))

    qr.generate.assert_called_once_with("hello")
    expected = base64.b64encode(b"fake_qr_png_data").decode("ascii")
    assert result == f"data:image/png;base64,{expected}"


@pytest.mark.asyncio
async def test_generate_passes_encoded_payload():
    generator, qr, _ = _make_generator()
    params = QRCodeParams(
        wifi_data=WiFiData(ssid="Home", encryption="nopass")
    )

    await generator.generate("wifi", params)

    qr.generate.assert_called_once_with("WIFI:T:nopass;S:Home;P:;;")


@pytest.mark.asyncio
async def test_generate_unknown_kind_skips_rasterizer():
    generator, qr, _ = _make_generator()

    with pytest.raises(UnknownQRCodeTypeError) as exc:
        await generator.generate("barcode", QRCodeParams(text="hello"))

    assert exc.value.message == "Invalid QR code type"
    qr.generate.assert_not_called()


@pytest.mark.asyncio
async def test_generate_propagates_validation_message():
    generator, qr, logger = _make_generator()

    with pytest.raises(ValidationError) as exc:
        await generator.generate("url", QRCodeParams(url="http://"))

    assert exc.value.message == "Please enter a valid website URL"
    qr.generate.assert_not_called()
    levels = [c.args[0] for c in logger.log.call_args_list]
    assert "warn" in levels


@pytest.mark.asyncio
async def test_generate_normalizes_rasterizer_failure():
    """Rasterizer errors become the generic retry message."""
    generator, qr, logger = _make_generator()
    qr.generate.side_effect = RuntimeError("Data too long")

    with pytest.raises(QRCodeError) as exc:
        await generator.generate("text", QRCodeParams(text="hello"))

    assert exc.value.message == GENERIC_FAILURE_MESSAGE
    assert isinstance(exc.value.__cause__, RuntimeError)
    assert not isinstance(exc.value, ValidationError)
    logger.log.assert_any_call(
        "error", "QR code generation failed: RuntimeError('Data too long')"
    )


@pytest.mark.asyncio
async def test_generate_normalizes_unexpected_encoder_failure():
    generator, qr, _ = _make_generator()

    with patch(
        'qrcraft.generator.encode_payload', side_effect=KeyError("boom")
    ):
        with pytest.raises(QRCodeError) as exc:
            await generator.generate("text", QRCodeParams(text="hello"))

    assert exc.value.message == GENERIC_FAILURE_MESSAGE
    qr.generate.assert_not_called()


@pytest.mark.asyncio
async def test_generate_does_not_log_payload():
    """Success log mentions kind and size, never the payload text."""
    generator, _, logger = _make_generator()
    params = QRCodeParams(
        wifi_data=WiFiData(ssid="Home", password="hunter2")
    )

    await generator.generate("wifi", params)

    for call in logger.log.call_args_list:
        assert "hunter2" not in call.args[1]
    logger.log.assert_any_call("info", "QR code generated: wifi, 29 chars")


@pytest.mark.asyncio
async def test_generate_qr_code_with_real_adapter():
    """Module-level entry point renders a real PNG by default."""
    logger = Mock()

    result = await generate_qr_code(
        "url", QRCodeParams(url="example.com"), logger=logger
    )

    assert result.startswith("data:image/png;base64,")
    png = base64.b64decode(result.split(",", 1)[1])
    assert png[:8] == b'\x89PNG\r\n\x1a\n'


@pytest.mark.asyncio
async def test_generate_qr_code_overflow_is_generic():
    logger = Mock()

    with pytest.raises(QRCodeError) as exc:
        await generate_qr_code(
            "text", QRCodeParams(text="x" * 5000), logger=logger
        )

    assert exc.value.message == GENERIC_FAILURE_MESSAGE
