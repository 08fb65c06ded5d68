"""Plain text payload builder."""

from ..validators import validate_text


def build_text_string(text: str) -> str:
    """Return the text as entered once it has non-blank content."""
    validate_text(text)
    return text
