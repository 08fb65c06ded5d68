"""Adapter implementations for the QR generator."""

from .qr_code_adapter import QRCodeAdapter, png_data_url
from .stdout_adapter import StdoutAdapter

__all__ = [
    'QRCodeAdapter',
    'StdoutAdapter',
    'png_data_url',
]
