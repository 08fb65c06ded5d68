"""Protocols for the rasterizer and log sink (adapter pattern)."""

from typing import Protocol


class IQRGenerator(Protocol):
    """Rasterizer: payload text in, PNG bytes out.

    Implementations raise when the text exceeds the symbol capacity for
    the configured error correction level.
    """

    def generate(self, data: str) -> bytes:
        ...


class ILogSink(Protocol):
    """Destination for log entries; level is debug/info/warn/error."""

    def log(self, level: str, message: str) -> None:
        ...
