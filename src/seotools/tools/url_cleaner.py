"""Bulk URL cleaner: strips tracking query parameters, one URL per line."""
from __future__ import annotations
from urllib.parse import unquote_plus, urlsplit, urlunsplit

TRACKING_PARAMS = frozenset({
    "utm_source",
    "utm_medium",
    "utm_campaign",
    "utm_term",
    "utm_content",
    "fbclid",
    "gclid",
    "ref",
    "_ga",
})
INVALID_MARKER = " (Invalid URL)"

# Schemes that need a host and get "/" for an empty path.
_SPECIAL_SCHEMES = frozenset({"http", "https", "ftp", "ws", "wss"})

class InvalidURL(ValueError):
    pass

def _strip_query(query: str) -> tuple[str, bool]:
    """Drop tracking pairs, keeping the rest verbatim and in order."""
    kept, removed = [], False
    for pair in query.split("&"):
        if not pair:
            continue
        name = unquote_plus(pair.split("=", 1)[0])
        if name in TRACKING_PARAMS:
            removed = True
        else:
            kept.append(pair)
    return "&".join(kept), removed

def clean_url(url: str) -> str:
    """
    Remove tracking parameters from one absolute URL.

    Raises:
        InvalidURL: if the text does not parse as an absolute URL.
    """
    try:
        parts = urlsplit(url)
        parts.port  # validates the port
    except ValueError as e:
        raise InvalidURL(url) from e
    if not parts.scheme or any(c.isspace() for c in url):
        raise InvalidURL(url)
    if parts.scheme in _SPECIAL_SCHEMES and not parts.hostname:
        raise InvalidURL(url)

    path = parts.path
    if parts.scheme in _SPECIAL_SCHEMES and not path:
        path = "/"

    query, removed = _strip_query(parts.query)
    if not removed:
        if path == parts.path:
            return url
        query = parts.query
    return urlunsplit((parts.scheme, parts.netloc, path, query, parts.fragment))

def clean_line(line: str) -> str:
    trimmed = line.strip()
    if not trimmed:
        return ""
    try:
        return clean_url(trimmed)
    except InvalidURL:
        return f"{trimmed}{INVALID_MARKER}"

def clean_urls(text: str) -> str:
    """Clean every line of text; blank lines stay as empty lines."""
    return "\n".join(clean_line(line) for line in text.split("\n"))
