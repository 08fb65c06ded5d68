"""vCard 3.0 payload builder."""

from ..interfaces import VCardData
from ..validators import validate_vcard_data


def _clean(value: str) -> str:
    return (value or "").strip()


def build_vcard_string(data: VCardData) -> str:
    """Build a vCard 3.0 block for a contact.

    Optional properties are emitted only when non-empty after trimming,
    in a fixed order. ADR is emitted when any address part is present.
    """
    validate_vcard_data(data)

    first = _clean(data.first_name)
    last = _clean(data.last_name)
    lines = [
        "BEGIN:VCARD",
        "VERSION:3.0",
        f"FN:{first} {last}",
        f"N:{last};{first};;;",
    ]

    optional = (
        ("EMAIL", data.email),
        ("TEL;TYPE=CELL", data.mobile),
        ("TEL;TYPE=HOME", data.phone),
        ("TEL;TYPE=WORK", data.work_phone),
        ("TEL;TYPE=FAX", data.fax),
        ("ORG", data.company),
        ("TITLE", data.job_title),
    )
    for prop, value in optional:
        if _clean(value):
            lines.append(f"{prop}:{_clean(value)}")

    address = [_clean(part) for part in data.address_fields()]
    if any(address):
        lines.append("ADR:;;" + ";".join(address))

    if _clean(data.website):
        lines.append(f"URL:{_clean(data.website)}")

    lines.append("END:VCARD")
    return "\n".join(lines)
