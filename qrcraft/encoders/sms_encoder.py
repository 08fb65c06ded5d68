"""sms: payload builder."""

from ..interfaces import SMSData
from ..validators import validate_sms_data
from .uri import encode_uri_component


def build_sms_string(data: SMSData) -> str:
    """Build an sms: URI; the message part is dropped when empty."""
    validate_sms_data(data)
    message = encode_uri_component(data.message or "")
    if not message:
        return f"sms:{data.phone}"
    return f"sms:{data.phone}:{message}"
