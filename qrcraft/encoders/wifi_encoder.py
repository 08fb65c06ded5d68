"""WIFI: network config payload builder."""

from ..interfaces import WiFiData
from ..validators import validate_wifi_data


def build_wifi_string(data: WiFiData) -> str:
    """Build a WIFI: join string.

    The password segment is always present, even for open networks.
    """
    validate_wifi_data(data)
    hidden = ";H:true" if data.hidden else ""
    return (
        f"WIFI:T:{data.encryption};S:{data.ssid};"
        f"P:{data.password or ''}{hidden};;"
    )
