"""Lossy quantization of style values for exploratory grouping.

* pixels   ``"Npx"`` rounds to the nearest multiple of 4; anything else is ``"0"``
* colours  RGB channels round to the nearest multiple of 16, capped at 240;
           alpha rounds to the nearest 0.1; absent is ``"none"``
* shadow   presence plus layer count; absent or ``"none"`` is ``"noshadow"``

Rounding is half-to-even, so exact midpoints fall to the even bucket:
``"10px"`` is 2.5 steps and buckets to 8, a channel of 8 buckets to 0.
"""

from __future__ import annotations

import re
import unicodedata
from typing import Optional, Union

from ..evidence.models import Rgba

NO_COLOR = "none"
NO_SHADOW = "noshadow"

_PX_RE = re.compile(r"^([\d.]+)px$")
_LEADING_NUMBER_RE = re.compile(r"^\d*\.?\d+|^\d+")
_RGB_FUNC_RE = re.compile(r"^rgba?\((\d+),\s*(\d+),\s*(\d+)(?:,\s*([\d.]+))?\)$")
_RGB_LIST_RE = re.compile(r"^(\d+),\s*(\d+),\s*(\d+)(?:,\s*([\d.]+))?$")
_WHITESPACE_RE = re.compile(r"\s+")

_CHANNEL_STEP = 16
_CHANNEL_MAX = 240
_PX_STEP = 4


def format_number(value: float) -> str:
    """Render like a JavaScript number: ``1.0`` -> ``"1"``, ``0.5`` -> ``"0.5"``."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def bucket_px(value: Optional[str]) -> str:
    """Quantize a pixel length to a multiple of 4.

    >>> bucket_px("10px")
    '8'
    >>> bucket_px("auto")
    '0'
    """
    if not value or value == "0":
        return "0"
    match = _PX_RE.match(value)
    if not match:
        return "0"
    number = _LEADING_NUMBER_RE.match(match.group(1))
    if not number:
        return "0"
    px = float(number.group(0))
    return str(round(px / _PX_STEP) * _PX_STEP)


def _bucket_channel(channel: float) -> int:
    return min(_CHANNEL_MAX, round(channel / _CHANNEL_STEP) * _CHANNEL_STEP)


def _bucket_alpha(alpha: float) -> str:
    return format_number(round(alpha * 10) / 10)


def _bucket_channels(r: float, g: float, b: float, a: float) -> str:
    return f"{_bucket_channel(r)},{_bucket_channel(g)},{_bucket_channel(b)},{_bucket_alpha(a)}"


def bucket_rgba(value: Union[Rgba, str, None]) -> str:
    """Quantize a colour to ``"r,g,b,a"`` buckets.

    Accepts parsed channels or the legacy ``rgb()``/``rgba()``/``"r,g,b,a"``
    strings. Unrecognized input is ``"none"``.

    >>> bucket_rgba(Rgba(250, 8, 127, 1))
    '240,0,128,1'
    """
    if value is None:
        return NO_COLOR
    if isinstance(value, Rgba):
        return _bucket_channels(value.r, value.g, value.b, value.a)
    if isinstance(value, str):
        match = _RGB_FUNC_RE.match(value) or _RGB_LIST_RE.match(value)
        if match:
            r, g, b, a = match.groups()
            alpha = float(a) if a else 1.0
            return _bucket_channels(int(r), int(g), int(b), alpha)
    return NO_COLOR


def bucket_shadow(presence: Optional[str], layer_count: Optional[int]) -> str:
    """Reduce a shadow to ``"<presence>-<layers>"`` or ``"noshadow"``."""
    if not presence or presence == "none":
        return NO_SHADOW
    return f"{presence}-{layer_count or 0}"


def _is_name_char(ch: str) -> bool:
    # Letters, numbers and whitespace survive edge trimming.
    return unicodedata.category(ch)[0] in ("L", "N") or ch.isspace()


def normalize_name(name: Optional[str]) -> str:
    """Normalize an accessible name for grouping.

    Lowercase, trim, collapse internal whitespace, then strip leading and
    trailing runs of punctuation and symbols (Unicode-aware).

    >>> normalize_name("  Save   Changes! ")
    'save changes'
    """
    if not name:
        return ""
    text = _WHITESPACE_RE.sub(" ", name.lower().strip())

    start = 0
    while start < len(text) and not _is_name_char(text[start]):
        start += 1
    end = len(text)
    while end > start and not _is_name_char(text[end - 1]):
        end -= 1
    return text[start:end]
