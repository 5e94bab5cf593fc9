"""Query-string construction for facade methods."""

from collections.abc import Mapping
from urllib.parse import quote

# Characters encodeURIComponent leaves alone besides alphanumerics and "-_.~"
_URI_COMPONENT_SAFE = "!*'()"


def encode_component(value: object) -> str:
    """Percent-encode a single key or value with URI component rules."""
    if isinstance(value, bool):
        text = "true" if value else "false"
    else:
        text = str(value)
    return quote(text, safe=_URI_COMPONENT_SAFE)


def build_query(params: Mapping[str, object | None]) -> str:
    """Build a "?k=v&..." suffix from ordered parameters.

    Parameters whose value is None are omitted. Order follows the mapping.
    Returns an empty string when nothing is left.
    """
    pairs = [
        f"{encode_component(key)}={encode_component(value)}"
        for key, value in params.items()
        if value is not None
    ]
    if not pairs:
        return ""
    return "?" + "&".join(pairs)
