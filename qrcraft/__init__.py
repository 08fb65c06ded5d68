"""Validate contact, network and messaging data and render it as QR codes."""

from .errors import QRCodeError, UnknownQRCodeTypeError, ValidationError
from .encoders import encode_payload
from .generator import QRCodeGenerator, generate_qr_code
from .interfaces import (
    QR_CODE_TYPES,
    EmailData,
    QRCodeParams,
    SMSData,
    VCardData,
    WiFiData,
)

__all__ = [
    'QRCodeError',
    'UnknownQRCodeTypeError',
    'ValidationError',
    'encode_payload',
    'QRCodeGenerator',
    'generate_qr_code',
    'QR_CODE_TYPES',
    'EmailData',
    'QRCodeParams',
    'SMSData',
    'VCardData',
    'WiFiData',
]
