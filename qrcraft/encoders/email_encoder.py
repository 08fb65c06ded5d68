"""mailto: payload builder."""

from ..interfaces import EmailData
from ..validators import validate_email_data
from .uri import encode_uri_component


def build_email_string(data: EmailData) -> str:
    """Build a mailto: URI with subject and body always present."""
    validate_email_data(data)
    subject = encode_uri_component(data.subject or "")
    body = encode_uri_component(data.body or "")
    return f"mailto:{data.email}?subject={subject}&body={body}"
