"""Import icons from a web icon sheet: an <svg> with <symbol> elements in <defs>.

Symbol-level problems (missing id, unusable dimensions, duplicate keyword,
malformed body) skip that symbol. Document-level problems abort the import.
"""

from __future__ import annotations

import copy
import logging
import os
import re
import xml.etree.ElementTree as ET
from typing import Callable, Union
from xml.parsers.expat import errors as expat_errors

from pydantic import BaseModel, ConfigDict, Field

from iconsheet.errors import (
    InvalidDimensionsError,
    InvalidMarkupError,
    MissingDefinitionsError,
    MissingRootError,
    NoIconsFoundError,
)
from iconsheet.models.collection import Collection
from iconsheet.models.icon import IconFragment, resolve_dimensions
from iconsheet.svg.loader import load_svg_file
from iconsheet.svg.parser import child_elements, inner_markup, local_name, parse_markup, strip_namespaces, wrap_svg

logger = logging.getLogger(__name__)

SheetSource = Union[ET.Element, ET.ElementTree, str, os.PathLike]

_INVALID_KEYWORD_CHARS_RE = re.compile(r"[^a-zA-Z0-9\-_]")
_HYPHEN_RUN_RE = re.compile(r"-{2,}")

# Expat errors that mean "not exactly one root element"
_ROOT_ERROR_CODES = {
    expat_errors.codes[expat_errors.XML_ERROR_NO_ELEMENTS],
    expat_errors.codes[expat_errors.XML_ERROR_JUNK_AFTER_DOC_ELEMENT],
}


def default_keyword(raw_id: str) -> str:
    """Lowercase, '_' -> '-', drop anything outside [a-z0-9-_], collapse '--'.

    An empty result means the symbol is skipped.
    """
    keyword = raw_id.lower().replace("_", "-")
    keyword = _INVALID_KEYWORD_CHARS_RE.sub("", keyword)
    return _HYPHEN_RUN_RE.sub("-", keyword)


def _log_to_logger(message: str) -> None:
    logger.info("%s", message)


class ImportOptions(BaseModel):
    """Importer settings. ``headless`` and ``minify`` go to the file loader untouched.

    The keyword sanitizer is accepted as ``keyword_callback`` or ``keywordCallback``.
    Unknown options are rejected.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    keyword_callback: Callable[[str], Union[str, bool, None]] = Field(
        default=default_keyword, alias="keywordCallback"
    )
    headless: bool = True
    minify: bool = True
    debug: bool = False
    log: Callable[[str], None] = Field(default=_log_to_logger)


async def import_web_icons(
    source: SheetSource,
    options: ImportOptions | None = None,
    **overrides,
) -> Collection:
    """Extract every usable <symbol> of an icon sheet into a Collection.

    ``source`` is a parsed element tree, markup text starting with ``<``, or a
    path handed to the file loader. Keyword arguments override ``options``.
    """
    opts = options or ImportOptions()
    if overrides:
        opts = _merge_options(opts, overrides)

    root = await _load(source, opts)

    if local_name(root.tag) != "svg":
        raise MissingRootError("Missing SVG element")

    defs_list = child_elements(root, "defs")
    if not defs_list:
        raise MissingDefinitionsError("Missing definitions")

    collection = Collection()
    for defs in defs_list:
        for symbol in child_elements(defs, "symbol"):
            _import_symbol(symbol, collection, opts)

    if not collection.length():
        raise NoIconsFoundError("No images found.")

    logger.info("Imported %d icons from sheet", collection.length())
    return collection


def _merge_options(opts: ImportOptions, overrides: dict) -> ImportOptions:
    """Validate keyword overrides on top of ``opts``; aliases map to field names."""
    aliases = {f.alias: name for name, f in ImportOptions.model_fields.items() if f.alias}
    data = opts.model_dump()
    data.update((aliases.get(key, key), value) for key, value in overrides.items())
    return ImportOptions.model_validate(data)


async def _load(source: SheetSource, opts: ImportOptions) -> ET.Element:
    if isinstance(source, ET.ElementTree):
        source = source.getroot()
    if isinstance(source, ET.Element):
        # Work on a copy so the caller's tree keeps its namespaces
        root = copy.deepcopy(source)
        strip_namespaces(root)
        return root

    if not isinstance(source, (str, os.PathLike)):
        raise TypeError(f"Invalid source: {type(source).__name__}")

    try:
        if isinstance(source, str) and source.lstrip().startswith("<"):
            return parse_markup(source)
        return await load_svg_file(source, opts)
    except ET.ParseError as e:
        if e.code in _ROOT_ERROR_CODES:
            raise MissingRootError("Missing SVG element") from e
        raise


def _import_symbol(symbol: ET.Element, collection: Collection, opts: ImportOptions) -> None:
    symbol_id = symbol.get("id")
    if not symbol_id:
        return

    dimensions = resolve_dimensions(symbol.attrib)
    if dimensions is None:
        if opts.debug:
            opts.log(f"Invalid dimensions for symbol {symbol_id}")
        return
    left, top, width, height = dimensions

    svg_text = wrap_svg(inner_markup(symbol), width, height, left, top)

    keyword = opts.keyword_callback(symbol_id)
    if keyword is False or keyword is None or keyword == "":
        return

    if keyword in collection:
        opts.log(f"Duplicate entry for {keyword}")
        return

    try:
        fragment = IconFragment.from_svg(svg_text)
    except (InvalidMarkupError, InvalidDimensionsError) as e:
        if opts.debug:
            opts.log(f"Invalid symbol {symbol_id}: {e}")
        return

    collection.add(keyword, fragment)
