"""Text encoding helpers for XML sitemap fragments."""

from __future__ import annotations

import html
from typing import Mapping

_CDATA_OPEN = "<![CDATA["
_CDATA_CLOSE = "]]>"


def encode(value: object) -> str:
    """Escape a value for use as URL text or an attribute value."""

    return html.escape(str(value), quote=True)


def cdata(value: object) -> str:
    """Wrap text in a CDATA section.

    An embedded ``]]>`` is split across two sections so the text can never close the section early.
    """

    text = str(value).replace(_CDATA_CLOSE, "]]" + _CDATA_CLOSE + _CDATA_OPEN + ">")
    return f"{_CDATA_OPEN}{text}{_CDATA_CLOSE}"


def format_attributes(attributes: Mapping[str, object]) -> str:
    """Compose ``name="value"`` pairs with a single leading space, or ``""`` when empty.

    Values are inserted verbatim; callers apply :func:`encode` where needed.
    """

    if not attributes:
        return ""
    return " " + " ".join(f'{name}="{value}"' for name, value in attributes.items())


__all__ = ["cdata", "encode", "format_attributes"]
