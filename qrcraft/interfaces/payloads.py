"""Payload records for each QR code kind."""

from dataclasses import dataclass, field
from typing import Literal

QRCodeType = Literal['url', 'vcard', 'email', 'sms', 'text', 'wifi']
WiFiEncryption = Literal['WPA', 'WEP', 'nopass']

QR_CODE_TYPES: tuple[str, ...] = (
    'url', 'vcard', 'email', 'sms', 'text', 'wifi'
)


@dataclass
class VCardData:
    """Contact details for a vCard."""
    first_name: str = ""
    last_name: str = ""
    mobile: str = ""
    phone: str = ""
    work_phone: str = ""
    fax: str = ""
    email: str = ""
    company: str = ""
    job_title: str = ""
    street: str = ""
    city: str = ""
    zip: str = ""
    state: str = ""
    country: str = ""
    website: str = ""

    def phone_fields(self) -> tuple[tuple[str, str], ...]:
        """Phone numbers paired with their display labels, in check order."""
        return (
            ("mobile", self.mobile),
            ("phone", self.phone),
            ("work phone", self.work_phone),
            ("fax", self.fax),
        )

    def address_fields(self) -> tuple[str, ...]:
        """ADR components after the empty PO box and extended slots."""
        return (self.street, self.city, self.state, self.zip, self.country)


@dataclass
class EmailData:
    """Pre-filled email message."""
    email: str = ""
    subject: str = ""
    body: str = ""


@dataclass
class SMSData:
    """Pre-filled text message."""
    phone: str = ""
    message: str = ""


@dataclass
class WiFiData:
    """Network join details."""
    ssid: str = ""
    password: str = ""
    encryption: WiFiEncryption = 'WPA'
    hidden: bool = False


@dataclass
class QRCodeParams:
    """One record per kind; only the slot matching the kind is read."""
    url: str = ""
    vcard_data: VCardData = field(default_factory=VCardData)
    email_data: EmailData = field(default_factory=EmailData)
    sms_data: SMSData = field(default_factory=SMSData)
    text: str = ""
    wifi_data: WiFiData = field(default_factory=WiFiData)
