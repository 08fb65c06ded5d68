"""Configuration management."""

import os


# Rasterizer Configuration
QR_WIDTH = int(os.getenv("QR_WIDTH", "400"))
QR_MARGIN = int(os.getenv("QR_MARGIN", "2"))
QR_ERROR_CORRECTION = os.getenv("QR_ERROR_CORRECTION", "M").upper()
QR_DARK_COLOR = os.getenv("QR_DARK_COLOR", "#000000")
QR_LIGHT_COLOR = os.getenv("QR_LIGHT_COLOR", "#ffffff")

# Logging Configuration
LOG_LEVEL = os.getenv("LOG_LEVEL", "info").lower()
