"""Errors surfaced to callers of the QR generator."""

GENERIC_FAILURE_MESSAGE = "Failed to generate QR code. Please try again."


class QRCodeError(Exception):
    """Error carrying a user-facing message."""

    def __init__(self, message: str = GENERIC_FAILURE_MESSAGE):
        super().__init__(message)
        self.message = message


class ValidationError(QRCodeError):
    """Required field missing or malformed."""


class UnknownQRCodeTypeError(QRCodeError):
    """Kind tag not in the encoder table."""

    def __init__(self, message: str = "Invalid QR code type"):
        super().__init__(message)
