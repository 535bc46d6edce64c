"""Single icon model: normalized inner markup plus dimensions."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field

from iconsheet.errors import InvalidDimensionsError, InvalidMarkupError
from iconsheet.svg.parser import inner_markup, parse_markup, parse_number, parse_viewbox, wrap_svg


def resolve_dimensions(attributes: Mapping[str, str]) -> tuple[float, float, float, float] | None:
    """Return (left, top, width, height) for an <svg> or <symbol> element.

    A 4-number viewBox wins over explicit width/height attributes.
    None when the result is not two positive dimensions.
    """
    viewbox = parse_viewbox(attributes.get("viewBox"))
    if viewbox is not None:
        left, top, width, height = viewbox
    else:
        left, top = 0.0, 0.0
        width = parse_number(attributes.get("width"))
        height = parse_number(attributes.get("height"))

    if width is None or height is None or width <= 0 or height <= 0:
        return None
    return left, top, width, height


def _hints(rotate: int, h_flip: bool, v_flip: bool) -> dict[str, Any]:
    hints: dict[str, Any] = {}
    if rotate:
        hints["rotate"] = rotate
    if h_flip:
        hints["hFlip"] = True
    if v_flip:
        hints["vFlip"] = True
    return hints


class AliasSpec(BaseModel):
    """Alternate name for an icon, with its own optional transform hints."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    rotate: int = Field(default=0, ge=0, le=3)
    h_flip: bool = Field(default=False, alias="hFlip")
    v_flip: bool = Field(default=False, alias="vFlip")

    def transform_hints(self) -> dict[str, Any]:
        return _hints(self.rotate, self.h_flip, self.v_flip)


class IconFragment(BaseModel):
    """Inner SVG markup (no <svg> wrapper) with its coordinate box.

    ``body`` is immutable. Transform hints and aliases are free-form metadata
    attached after creation.
    """

    model_config = ConfigDict(validate_assignment=True, populate_by_name=True)

    body: str = Field(frozen=True)
    width: float = Field(gt=0)
    height: float = Field(gt=0)
    left: float = 0.0
    top: float = 0.0
    # Quarter turns
    rotate: int = Field(default=0, ge=0, le=3)
    h_flip: bool = Field(default=False, alias="hFlip")
    v_flip: bool = Field(default=False, alias="vFlip")
    aliases: list[str | AliasSpec] = Field(default_factory=list)

    @classmethod
    def from_svg(cls, svg_text: str) -> IconFragment:
        """Build a fragment from a standalone SVG document."""
        try:
            root = parse_markup(svg_text)
        except ET.ParseError as e:
            raise InvalidMarkupError(f"Cannot parse SVG markup: {e}") from e

        if root.tag != "svg":
            raise InvalidMarkupError(f"Expected <svg> root element, found <{root.tag}>")

        dimensions = resolve_dimensions(root.attrib)
        if dimensions is None:
            raise InvalidDimensionsError("SVG has no usable width/height or viewBox")

        left, top, width, height = dimensions
        return cls(body=inner_markup(root).strip(), width=width, height=height, left=left, top=top)

    def to_svg(self) -> str:
        """Standalone document for this fragment."""
        return wrap_svg(self.body, self.width, self.height, self.left, self.top)

    def transform_hints(self) -> dict[str, Any]:
        """Non-neutral rotate/hFlip/vFlip values, keyed by their JSON names."""
        return _hints(self.rotate, self.h_flip, self.v_flip)
