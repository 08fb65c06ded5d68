"""Payload builders for each QR code kind."""

from typing import Callable

from ..errors import UnknownQRCodeTypeError
from ..interfaces import QRCodeParams
from .url_encoder import build_url_string
from .vcard_encoder import build_vcard_string
from .email_encoder import build_email_string
from .sms_encoder import build_sms_string
from .text_encoder import build_text_string
from .wifi_encoder import build_wifi_string
from .uri import encode_uri_component

# Table-driven dispatch: kind tag -> builder reading its own slot
PAYLOAD_ENCODERS: dict[str, Callable[[QRCodeParams], str]] = {
    'url': lambda params: build_url_string(params.url),
    'vcard': lambda params: build_vcard_string(params.vcard_data),
    'email': lambda params: build_email_string(params.email_data),
    'sms': lambda params: build_sms_string(params.sms_data),
    'text': lambda params: build_text_string(params.text),
    'wifi': lambda params: build_wifi_string(params.wifi_data),
}


def encode_payload(kind: str, params: QRCodeParams) -> str:
    """Validate and encode the slot of ``params`` matching ``kind``."""
    encoder = PAYLOAD_ENCODERS.get(kind)
    if encoder is None:
        raise UnknownQRCodeTypeError()
    return encoder(params)


__all__ = [
    'PAYLOAD_ENCODERS',
    'encode_payload',
    'encode_uri_component',
    'build_url_string',
    'build_vcard_string',
    'build_email_string',
    'build_sms_string',
    'build_text_string',
    'build_wifi_string',
]
