"""Load icon sheets from disk."""

from __future__ import annotations

import asyncio
import logging
import os
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any

from iconsheet.svg.parser import parse_markup

logger = logging.getLogger(__name__)


async def load_svg_file(path: str | os.PathLike[str], options: Any = None) -> ET.Element:
    """Read and parse an SVG file without blocking the event loop.

    ``options`` is accepted for the headless/minify flags, which are not
    interpreted here. The parser decodes the file using its XML declaration
    (UTF-8 when there is none). OSError and ParseError propagate unchanged.
    """
    file_path = Path(path)
    data = await asyncio.to_thread(file_path.read_bytes)
    logger.debug("Loaded %s (%d bytes)", file_path, len(data))
    return parse_markup(data)
