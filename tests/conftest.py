"""Shared test fixtures."""

from __future__ import annotations

import pytest


ICON1_BODY = (
    '<circle cx="32" cy="32" r="30" fill="#4fd1d9" />'
    '<path d="m28.6 17.5h6.9l10.3 29h-6.6l-1.9-6h-10.7l-2 6h-6.3l10.3-29m-.4 18h7.4l-3.6-11.4-3.8 11.4" fill="#fff" />'
)
ICON2_BODY = '<path d="M3 0v1h4v5h-4v1h5v-7h-5zm1 2v1h-4v1h4v1l2-1.5-2-1.5z" />'

ICON1_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 64 64" enable-background="new 0 0 64 64">'
    + ICON1_BODY
    + "</svg>"
)
ICON2_SVG = '<svg xmlns="http://www.w3.org/2000/svg" width="8" height="8" viewBox="0 0 8 8">' + ICON2_BODY + "</svg>"

HOME_BODY = '<path d="M3 10l9-7 9 7v11H3z" />'
ARROW_BODY = '<path d="M10 2L4 8l6 6" />'

# Two usable symbols, one without id, one with a zero-width viewBox
SHEET_SVG = '''<svg xmlns="http://www.w3.org/2000/svg">
  <defs>
    <symbol id="home" viewBox="0 0 24 24">
      <path d="M3 10l9-7 9 7v11H3z" />
    </symbol>
    <symbol id="Arrow_Left" width="16" height="16"><path d="M10 2L4 8l6 6" /></symbol>
    <symbol viewBox="0 0 24 24"><path d="M0 0h24v24H0z" /></symbol>
    <symbol id="broken" viewBox="0 0 0 24"><path d="M0 0" /></symbol>
  </defs>
  <use href="#home" />
</svg>'''

NO_DEFS_SVG = '<svg xmlns="http://www.w3.org/2000/svg"><symbol id="a" viewBox="0 0 24 24" /></svg>'

EMPTY_DEFS_SVG = '''<svg xmlns="http://www.w3.org/2000/svg">
  <defs>
    <linearGradient id="g" />
    <symbol viewBox="0 0 24 24"><path d="M0 0h24v24H0z" /></symbol>
  </defs>
</svg>'''


def sheet(*symbols: str) -> str:
    """Wrap symbol markup in an icon sheet."""
    return '<svg xmlns="http://www.w3.org/2000/svg"><defs>' + "".join(symbols) + "</defs></svg>"


@pytest.fixture
def sheet_svg() -> str:
    return SHEET_SVG


@pytest.fixture
def sheet_file(tmp_path):
    path = tmp_path / "sheet.svg"
    path.write_text(SHEET_SVG, encoding="utf-8")
    return path
