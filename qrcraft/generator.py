"""QR code generation: dispatch, validation, rasterizing."""

import asyncio
from typing import Optional

from .adapters import QRCodeAdapter, StdoutAdapter, png_data_url
from .encoders import encode_payload
from .errors import QRCodeError
from .interfaces import IQRGenerator, ILogSink, QRCodeParams


class QRCodeGenerator:
    """Turns a kind tag plus payload bundle into a PNG data URI."""

    def __init__(self, qr: IQRGenerator, logger: ILogSink):
        self.qr = qr
        self.logger = logger

    async def generate(self, kind: str, params: QRCodeParams) -> str:
        """Generate a QR code image for the slot of ``params`` named by ``kind``.

        Raises QRCodeError with a user-facing message. Validation and
        unknown-kind errors keep their own text; anything else, including
        rasterizer failures, becomes the generic retry message.
        """
        self.logger.log("info", f"QR code requested: {kind}")

        try:
            payload = encode_payload(kind, params)
            png = await asyncio.to_thread(self.qr.generate, payload)
        except QRCodeError as e:
            self.logger.log("warn", f"Rejected {kind} request: {e.message}")
            raise
        except Exception as e:
            self.logger.log("error", f"QR code generation failed: {e!r}")
            raise QRCodeError() from e

        self.logger.log(
            "info", f"QR code generated: {kind}, {len(payload)} chars"
        )
        return png_data_url(png)


async def generate_qr_code(
    kind: str,
    params: QRCodeParams,
    qr: Optional[IQRGenerator] = None,
    logger: Optional[ILogSink] = None,
) -> str:
    """Generate a QR code PNG data URI; see QRCodeGenerator.generate."""
    generator = QRCodeGenerator(
        qr if qr is not None else QRCodeAdapter(),
        logger if logger is not None else StdoutAdapter(),
    )
    return await generator.generate(kind, params)
