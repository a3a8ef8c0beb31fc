"""Reversible mapping between version identifiers and URL path segments.

``+`` and ``_`` are not safe in the documentation URL layout, so they are
spelled out as ``-plus-`` and ``-u-``. Versions that already contain those
literal sequences cannot be round-tripped and must not be published.
"""

_SUBSTITUTIONS = (
    ("+", "-plus-"),
    ("_", "-u-"),
)


def encode_version(version: str) -> str:
    """Return the URL-safe form of a version, e.g. 'v1.2.3+fix6' -> 'v1.2.3-plus-fix6'."""
    result = version
    for raw, encoded in _SUBSTITUTIONS:
        result = result.replace(raw, encoded)
    return result


def decode_version(segment: str) -> str:
    """Inverse of :func:`encode_version`."""
    result = segment
    for raw, encoded in _SUBSTITUTIONS:
        result = result.replace(encoded, raw)
    return result

