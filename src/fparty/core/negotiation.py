"""Response mode selection from the Accept header.

A page is either rendered as a full HTML document or as a script fragment
that swaps the page body in place. Only these two modes exist.
"""

from enum import Enum

HTML_TYPES = frozenset({"text/html"})
SCRIPT_TYPES = frozenset({"text/javascript", "application/javascript"})


class ResponseMode(Enum):
    """How a page is rendered for the client."""

    FULL = "full"
    SCRIPT = "script"


def select_response_mode(accept: str | None) -> ResponseMode:
    """Choose the response mode for an Accept header value.

    HTML wins ties, so wildcard or missing headers get the full document.

    Args:
        accept: Raw Accept header value, if any

    Returns:
        ResponseMode.SCRIPT if a JavaScript type is strictly preferred,
        otherwise ResponseMode.FULL
    """
    if not accept:
        return ResponseMode.FULL

    html_q = 0.0
    script_q = 0.0
    for media_type, quality in _parse_accept(accept):
        if media_type in HTML_TYPES:
            html_q = max(html_q, quality)
        elif media_type in SCRIPT_TYPES:
            script_q = max(script_q, quality)

    if script_q > html_q:
        return ResponseMode.SCRIPT
    return ResponseMode.FULL


def _parse_accept(accept: str) -> list[tuple[str, float]]:
    ranges: list[tuple[str, float]] = []
    for part in accept.split(","):
        media_type, _, params = part.partition(";")
        media_type = media_type.strip().lower()
        if not media_type:
            continue
        quality = _parse_quality(params)
        if quality > 0:
            ranges.append((media_type, quality))
    return ranges


def _parse_quality(params: str) -> float:
    for param in params.split(";"):
        name, _, value = param.partition("=")
        if name.strip().lower() != "q":
            continue
        try:
            return float(value.strip())
        except ValueError:
            return 1.0
    return 1.0
