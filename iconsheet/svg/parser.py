"""SVG parser — facade over xml.etree.

Turns markup into an element tree free of the SVG namespace and back into inner markup,
plus the numeric helpers used to read symbol geometry.
"""

from __future__ import annotations

import math
import re
import xml.etree.ElementTree as ET
from html import escape

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"
XML_NS = "http://www.w3.org/XML/1998/namespace"

# xlink/xml attributes keep a literal prefix after stripping
_ATTR_PREFIXES = {XLINK_NS: "xlink", XML_NS: "xml"}

# Foreign content keeps its namespace; these prefixes are used when serializing it
_FOREIGN_PREFIXES = {
    "xhtml": "http://www.w3.org/1999/xhtml",
    "inkscape": "http://www.inkscape.org/namespaces/inkscape",
    "sodipodi": "http://sodipodi.sourceforge.net/DTD/sodipodi-0.dtd",
}
for _prefix, _uri in _FOREIGN_PREFIXES.items():
    ET.register_namespace(_prefix, _uri)

_UNIT_RE = re.compile(r"(px|pt)$", re.IGNORECASE)
_VIEWBOX_SPLIT_RE = re.compile(r"[\s,]+")


def parse_markup(svg_text: str | bytes) -> ET.Element:
    """Parse markup into an element tree with the SVG namespace stripped.

    Bytes are decoded by the parser using the XML declaration's encoding.
    ParseError from the underlying parser propagates unchanged.
    """
    root = ET.fromstring(svg_text.strip())
    strip_namespaces(root)
    return root


def strip_namespaces(root: ET.Element) -> None:
    """Rewrite SVG `{ns}tag` to `tag` in place; xlink/xml attributes keep their prefix.

    Elements and attributes from other namespaces (XHTML in <foreignObject>,
    editor metadata) are left namespaced and serialize with their declaration.
    """
    svg_prefix = f"{{{SVG_NS}}}"
    for element in root.iter():
        if isinstance(element.tag, str) and element.tag.startswith(svg_prefix):
            element.tag = element.tag[len(svg_prefix):]
        for key in [k for k in element.attrib if k.startswith("{")]:
            ns, name = key[1:].split("}", 1)
            if ns == SVG_NS:
                new_key = name
            elif ns in _ATTR_PREFIXES:
                new_key = f"{_ATTR_PREFIXES[ns]}:{name}"
            else:
                continue
            element.set(new_key, element.attrib.pop(key))


def local_name(tag: str) -> str:
    return tag.split("}")[-1] if "}" in tag else tag


def child_elements(element: ET.Element, tag: str) -> list[ET.Element]:
    """Direct children of ``element`` with the given local tag name."""
    return [child for child in element if local_name(child.tag) == tag]


def inner_markup(element: ET.Element) -> str:
    """Serialize everything inside ``element`` without its own tag."""
    parts: list[str] = []
    if element.text:
        parts.append(escape(element.text, quote=False))
    for child in element:
        # tostring() includes the child's tail text
        parts.append(ET.tostring(child, encoding="unicode"))
    return "".join(parts)


def parse_number(value: str | None) -> float | None:
    """Parse a numeric attribute, tolerating px/pt suffixes. None if unusable."""
    if value is None:
        return None
    try:
        number = float(_UNIT_RE.sub("", value.strip()))
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return number


def parse_viewbox(value: str | None) -> tuple[float, float, float, float] | None:
    """Parse ``viewBox`` into (left, top, width, height); needs exactly 4 numbers."""
    if value is None:
        return None
    parts = [p for p in _VIEWBOX_SPLIT_RE.split(value.strip()) if p]
    if len(parts) != 4:
        return None
    numbers = [parse_number(p) for p in parts]
    if any(n is None for n in numbers):
        return None
    left, top, width, height = numbers
    return left, top, width, height


def format_number(value: float) -> int | float:
    """24.0 -> 24, 0.5 -> 0.5"""
    value = float(value)
    return int(value) if value.is_integer() else value


def wrap_svg(body: str, width: float, height: float, left: float = 0.0, top: float = 0.0) -> str:
    """Build a standalone SVG document around inner markup."""
    w, h = format_number(width), format_number(height)
    l, t = format_number(left), format_number(top)
    xlink = f' xmlns:xlink="{XLINK_NS}"' if "xlink:" in body else ""
    return (
        f'<svg xmlns="{SVG_NS}"{xlink} width="{w}" height="{h}"'
        f' viewBox="{l} {t} {w} {h}">{body}</svg>'
    )
