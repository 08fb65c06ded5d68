"""URI component escaping shared by the mailto and sms builders."""

from urllib.parse import quote

# Characters JavaScript's encodeURIComponent leaves alone besides
# letters, digits and "-_.~", which quote() never escapes.
_COMPONENT_SAFE = "!*'()"


def encode_uri_component(value: str) -> str:
    """Percent-encode a value for use inside a URI query or path segment."""
    return quote(value, safe=_COMPONENT_SAFE)
