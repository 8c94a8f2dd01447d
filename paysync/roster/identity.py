import re

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_identity(raw: str | None) -> str:
    """Canonicalize an identity string for comparison and password use.

    Trims the value, then drops every whitespace character (spaces, tabs,
    CR, LF) anywhere inside it. ``None`` is treated as empty.
    """
    if raw is None:
        return ""
    return _WHITESPACE_RE.sub("", raw.strip())
