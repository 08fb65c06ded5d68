"""URL payload builder."""

from ..validators import validate_url


def build_url_string(url: str) -> str:
    """Return the canonical URL; validation does the normalizing."""
    return validate_url(url)
