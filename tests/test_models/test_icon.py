"""Tests for IconFragment and AliasSpec."""

import pytest
from pydantic import ValidationError

from iconsheet.errors import InvalidDimensionsError, InvalidMarkupError
from iconsheet.models.icon import AliasSpec, IconFragment, resolve_dimensions
from tests.conftest import ICON1_BODY, ICON1_SVG, ICON2_BODY, ICON2_SVG


def test_from_svg_viewbox_only():
    icon = IconFragment.from_svg(ICON1_SVG)
    assert icon.body == ICON1_BODY
    assert icon.width == 64
    assert icon.height == 64
    assert (icon.left, icon.top) == (0, 0)


def test_from_svg_viewbox_overrides_attributes():
    icon = IconFragment.from_svg(ICON2_SVG.replace("0 0 8 8", "-2 -1 24 12"))
    assert (icon.width, icon.height) == (24, 12)
    assert (icon.left, icon.top) == (-2, -1)
    assert icon.body == ICON2_BODY


def test_from_svg_attributes_fallback():
    icon = IconFragment.from_svg('<svg width="16px" height="10"><rect width="16" height="10"/></svg>')
    assert (icon.width, icon.height) == (16, 10)
    assert icon.body == '<rect width="16" height="10" />'


def test_from_svg_body_has_no_wrapper():
    icon = IconFragment.from_svg(ICON2_SVG)
    assert not icon.body.startswith("<svg")
    assert "</svg>" not in icon.body


@pytest.mark.parametrize("markup", ["<svg", "not markup", "<g><path d='M0 0'/></g>"])
def test_from_svg_invalid_markup(markup):
    with pytest.raises(InvalidMarkupError):
        IconFragment.from_svg(markup)


@pytest.mark.parametrize(
    "markup",
    [
        "<svg><path d='M0 0'/></svg>",
        '<svg viewBox="0 0 24"><path/></svg>',
        '<svg width="24"><path/></svg>',
        '<svg viewBox="0 0 0 24" width="24" height="24"><path/></svg>',
        '<svg width="-4" height="4"><path/></svg>',
    ],
)
def test_from_svg_invalid_dimensions(markup):
    with pytest.raises(InvalidDimensionsError):
        IconFragment.from_svg(markup)


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        IconFragment.from_svg("<svg/>")


def test_resolve_dimensions():
    assert resolve_dimensions({"viewBox": "1 2 3 4", "width": "100", "height": "100"}) == (1, 2, 3, 4)
    assert resolve_dimensions({"viewBox": "bad", "width": "10", "height": "20"}) == (0, 0, 10, 20)
    assert resolve_dimensions({"width": "10"}) is None


def test_to_svg_round_trip():
    icon = IconFragment.from_svg(ICON2_SVG.replace("0 0 8 8", "-2 -1 24 12"))
    assert IconFragment.from_svg(icon.to_svg()) == icon


def test_body_is_frozen():
    icon = IconFragment.from_svg(ICON2_SVG)
    with pytest.raises(ValidationError):
        icon.body = "<g />"


def test_transform_hints():
    icon = IconFragment.from_svg(ICON2_SVG)
    assert icon.transform_hints() == {}

    icon.rotate = 2
    icon.v_flip = True
    assert icon.transform_hints() == {"rotate": 2, "vFlip": True}


def test_rotate_is_quarter_turns():
    icon = IconFragment.from_svg(ICON2_SVG)
    with pytest.raises(ValidationError):
        icon.rotate = 4


def test_aliases_accept_names_and_specs():
    icon = IconFragment.from_svg(ICON1_SVG)
    icon.aliases = ["icon1-alias", {"name": "icon1-rtl", "hFlip": True}]
    assert icon.aliases[0] == "icon1-alias"
    assert isinstance(icon.aliases[1], AliasSpec)
    assert icon.aliases[1].h_flip
    assert icon.aliases[1].transform_hints() == {"hFlip": True}


def test_alias_spec_by_field_name():
    alias = AliasSpec(name="rotated", rotate=1, v_flip=True)
    assert alias.transform_hints() == {"rotate": 1, "vFlip": True}
