"""Extract icons from SVG icon sheets and export them as icon set JSON."""

__version__ = "0.1.0"

from iconsheet.errors import (  # noqa: E402
    IconSheetError,
    InvalidDimensionsError,
    InvalidMarkupError,
    MissingDefinitionsError,
    MissingRootError,
    NoIconsFoundError,
)
from iconsheet.exporters.json_exporter import export_json, optimize_icon_set  # noqa: E402
from iconsheet.importers.web_icons import ImportOptions, default_keyword, import_web_icons  # noqa: E402
from iconsheet.models.collection import Collection  # noqa: E402
from iconsheet.models.icon import AliasSpec, IconFragment  # noqa: E402

__all__ = [
    "AliasSpec",
    "Collection",
    "IconFragment",
    "ImportOptions",
    "default_keyword",
    "import_web_icons",
    "export_json",
    "optimize_icon_set",
    "IconSheetError",
    "InvalidMarkupError",
    "InvalidDimensionsError",
    "MissingRootError",
    "MissingDefinitionsError",
    "NoIconsFoundError",
]
