"""QR code generator adapter."""

import base64
import io

import qrcode
from PIL import Image

from .. import config

ERROR_CORRECTION_LEVELS = {
    'L': qrcode.constants.ERROR_CORRECT_L,
    'M': qrcode.constants.ERROR_CORRECT_M,
    'Q': qrcode.constants.ERROR_CORRECT_Q,
    'H': qrcode.constants.ERROR_CORRECT_H,
}


class QRCodeAdapter:
    """Adapter for QR code generation on top of qrcode + Pillow."""

    def __init__(
        self,
        width: int = config.QR_WIDTH,
        margin: int = config.QR_MARGIN,
        error_correction: str = config.QR_ERROR_CORRECTION,
        dark_color: str = config.QR_DARK_COLOR,
        light_color: str = config.QR_LIGHT_COLOR,
    ):
        if error_correction not in ERROR_CORRECTION_LEVELS:
            raise ValueError(
                f"unknown error correction level: {error_correction}"
            )
        self.width = width
        self.margin = margin
        self.error_correction = error_correction
        self.dark_color = dark_color
        self.light_color = light_color

    def generate(self, data: str) -> bytes:
        """Generate QR code PNG from text, exactly width x width pixels."""
        qr = qrcode.QRCode(
            version=None,
            border=self.margin,
            error_correction=ERROR_CORRECTION_LEVELS[self.error_correction]
        )
        qr.add_data(data)
        qr.make(fit=True)

        # Render at the smallest whole box size covering the target width,
        # then scale down without blurring module edges.
        total_modules = qr.modules_count + 2 * self.margin
        qr.box_size = max(1, -(-self.width // total_modules))

        img = qr.make_image(
            fill_color=self.dark_color, back_color=self.light_color
        ).get_image()
        if img.size != (self.width, self.width):
            img = img.resize(
                (self.width, self.width), Image.Resampling.NEAREST
            )

        buf = io.BytesIO()
        img.save(buf, format='PNG')
        return buf.getvalue()

    def to_data_url(self, data: str) -> str:
        """Generate QR code PNG embedded in a data: URI."""
        return png_data_url(self.generate(data))


def png_data_url(png: bytes) -> str:
    encoded = base64.b64encode(png).decode('ascii')
    return f"data:image/png;base64,{encoded}"
