"""Stable, non-cryptographic identifiers for derived entities.

IDs are a djb2 rolling hash (seed 5381, ``h = h * 33 + unit``) truncated to
32 bits and rendered as lowercase hex behind an entity prefix:

    comp_   components
    style_  styles
    loc_    style locations

The browser-side viewer computes the same IDs, iterating UTF-16 code units
(``charCodeAt``). We therefore hash UTF-16 code units too, not code points,
so IDs match for text outside the Basic Multilingual Plane.
"""

COMPONENT_PREFIX = "comp_"
STYLE_PREFIX = "style_"
LOCATION_PREFIX = "loc_"

_SEED = 5381
_MASK = 0xFFFFFFFF


def djb2(text: str) -> int:
    """Return the unsigned 32-bit djb2 hash of *text*'s UTF-16 code units."""
    data = text.encode("utf-16-le", "surrogatepass")
    h = _SEED
    for i in range(0, len(data), 2):
        unit = data[i] | (data[i + 1] << 8)
        h = (h * 33 + unit) & _MASK
    return h


def stable_id(prefix: str, text: str) -> str:
    """Return ``prefix`` followed by the hex djb2 hash of *text*."""
    return f"{prefix}{djb2(text):x}"


def component_id(signature: str) -> str:
    return stable_id(COMPONENT_PREFIX, signature)


def style_id(key: str) -> str:
    return stable_id(STYLE_PREFIX, key)


def location_id(key: str) -> str:
    return stable_id(LOCATION_PREFIX, key)
