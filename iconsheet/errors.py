"""Error taxonomy for icon import and export.

Fragment-level errors are fatal to one icon only. Importer-level errors abort
the whole import.
"""

from __future__ import annotations


class IconSheetError(Exception):
    """Base class for all icon sheet errors."""


# ── Fragment-level ────────────────────────────────────────────────────────


class InvalidMarkupError(IconSheetError, ValueError):
    """Markup cannot be parsed as a single root <svg> element."""


class InvalidDimensionsError(IconSheetError, ValueError):
    """Neither width/height nor viewBox yields two positive dimensions."""


# ── Importer-level ────────────────────────────────────────────────────────


class MissingRootError(IconSheetError):
    """Document has no single <svg> root element."""


class MissingDefinitionsError(IconSheetError):
    """Root <svg> has no direct <defs> child."""


class NoIconsFoundError(IconSheetError):
    """No symbol survived the import."""
