"""Interface definitions and payload records for the QR generator."""

from .protocols import IQRGenerator, ILogSink
from .payloads import (
    QR_CODE_TYPES,
    EmailData,
    QRCodeParams,
    QRCodeType,
    SMSData,
    VCardData,
    WiFiData,
    WiFiEncryption,
)

__all__ = [
    'IQRGenerator',
    'ILogSink',
    'QR_CODE_TYPES',
    'EmailData',
    'QRCodeParams',
    'QRCodeType',
    'SMSData',
    'VCardData',
    'WiFiData',
    'WiFiEncryption',
]
