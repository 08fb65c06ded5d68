"""Input validation for each QR code kind.

Every validator raises ValidationError with a user-facing message on the
first failed check. Presence checks use trimmed values; format checks run
against the raw value the encoder will emit.
"""

import ipaddress
import re
from typing import Optional
from urllib.parse import quote, urlsplit

from .errors import ValidationError
from .interfaces import EmailData, SMSData, VCardData, WiFiData

EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
PHONE_RE = re.compile(r"[+0-9\s\-()]+")
HOST_RE = re.compile(r"[a-z0-9_-]+(\.[a-z0-9_-]+)*\.?")

# Schemes that require a host and get "/" as their empty path
DEFAULT_PORTS = {
    'http': 80,
    'https': 443,
    'ftp': 21,
    'ws': 80,
    'wss': 443,
}

# Percent-encode sets on top of C0 controls and non-ASCII (WHATWG URL)
FRAGMENT_SET = ' "<>`'
QUERY_SET = ' "#<>'
SPECIAL_QUERY_SET = QUERY_SET + "'"
PATH_SET = QUERY_SET + "?`{}"
USERINFO_SET = PATH_SET + "/:;=@[\\]^|"

_C0_OR_SPACE = "".join(chr(i) for i in range(0x21))


def _is_blank(value: Optional[str]) -> bool:
    return not (value or "").strip()


def _percent_encode(value: str, encode_set: str = "") -> str:
    return "".join(
        quote(ch, safe="")
        if ch in encode_set or not "\x20" <= ch <= "\x7e"
        else ch
        for ch in value
    )


def _canonical_host(host: str) -> Optional[str]:
    """Serialized host, or None if it is not a valid host name."""
    if ':' in host:
        try:
            return f"[{ipaddress.IPv6Address(host).compressed}]"
        except ValueError:
            return None
    if not host.isascii():
        try:
            host = host.encode('idna').decode('ascii')
        except UnicodeError:
            return None
    return host if HOST_RE.fullmatch(host) else None


def _parse_opaque(scheme: str, candidate: str) -> str:
    """Non-hierarchical URL: input kept as typed, scheme lowercased."""
    rest = candidate.partition(':')[2]
    rest, hash_, fragment = rest.partition('#')
    body, qmark, query = rest.partition('?')
    # Only a path after an authority uses the full path set
    body_set = PATH_SET if body.startswith('//') else ""
    return (
        f"{scheme}:{_percent_encode(body, body_set)}"
        f"{qmark}{_percent_encode(query, QUERY_SET)}"
        f"{hash_}{_percent_encode(fragment, FRAGMENT_SET)}"
    )


def _parse_absolute(candidate: str) -> Optional[str]:
    """Canonical form of an absolute URL, or None if it does not parse."""
    candidate = re.sub(r"[\t\n\r]", "", candidate).strip(_C0_OR_SPACE)
    try:
        parts = urlsplit(candidate)
    except ValueError:
        return None

    scheme = parts.scheme.lower()
    if not scheme:
        return None
    if scheme not in DEFAULT_PORTS:
        return _parse_opaque(scheme, candidate)

    # Backslash is a path separator before the query and fragment
    cut = min(
        (i for i in (candidate.find('?'), candidate.find('#')) if i >= 0),
        default=len(candidate),
    )
    candidate = candidate[:cut].replace('\\', '/') + candidate[cut:]
    try:
        parts = urlsplit(candidate)
    except ValueError:
        return None

    host = _canonical_host(parts.hostname or "")
    if not host:
        return None
    if parts.netloc.endswith(':'):
        return None
    try:
        port = parts.port
    except ValueError:
        return None

    netloc = host
    if port is not None and port != DEFAULT_PORTS[scheme]:
        netloc = f"{netloc}:{port}"
    if parts.password:
        netloc = (
            f"{_percent_encode(parts.username or '', USERINFO_SET)}:"
            f"{_percent_encode(parts.password, USERINFO_SET)}@{netloc}"
        )
    elif parts.username:
        netloc = f"{_percent_encode(parts.username, USERINFO_SET)}@{netloc}"

    url = f"{scheme}://{netloc}{_percent_encode(parts.path or '/', PATH_SET)}"
    if parts.query:
        url += f"?{_percent_encode(parts.query, SPECIAL_QUERY_SET)}"
    if parts.fragment:
        url += f"#{_percent_encode(parts.fragment, FRAGMENT_SET)}"
    return url


def validate_url(url: Optional[str]) -> str:
    """Validate a website address and return its canonical form.

    Input without a scheme is retried with ``https://`` in front, so
    ``example.com`` becomes ``https://example.com/``.
    """
    trimmed = (url or "").strip()
    if not trimmed:
        raise ValidationError("Please enter a URL")

    canonical = _parse_absolute(trimmed)
    if canonical is None:
        canonical = _parse_absolute(f"https://{trimmed}")
    if canonical is None:
        raise ValidationError("Please enter a valid website URL")
    return canonical


def validate_vcard_data(data: VCardData) -> None:
    """Validate contact details."""
    if _is_blank(data.first_name) or _is_blank(data.last_name):
        raise ValidationError("Please enter both first and last name")

    if data.email and not EMAIL_RE.fullmatch(data.email):
        raise ValidationError("Please enter a valid email address")

    for label, value in data.phone_fields():
        if value and not PHONE_RE.fullmatch(value):
            raise ValidationError(f"Please enter a valid {label}")


def validate_email_data(data: EmailData) -> None:
    """Validate an email message."""
    if _is_blank(data.email):
        raise ValidationError("Please enter an email address")

    if not EMAIL_RE.fullmatch(data.email):
        raise ValidationError("Please enter a valid email address")


def validate_sms_data(data: SMSData) -> None:
    """Validate a text message."""
    if _is_blank(data.phone):
        raise ValidationError("Please enter a phone number")

    if not PHONE_RE.fullmatch(data.phone):
        raise ValidationError("Please enter a valid phone number")


def validate_text(text: Optional[str]) -> None:
    """Validate plain text."""
    if _is_blank(text):
        raise ValidationError("Please enter some text")


def validate_wifi_data(data: WiFiData) -> None:
    """Validate network join details."""
    if _is_blank(data.ssid):
        raise ValidationError("Please enter a network name (SSID)")

    if data.encryption != 'nopass' and _is_blank(data.password):
        raise ValidationError("Please enter a network password")
