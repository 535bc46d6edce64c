"""Persist JSON documents atomically."""

from __future__ import annotations

import asyncio
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def _write_atomic(path: Path, text: str) -> None:
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(text)
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise


async def write_json(destination: str | os.PathLike[str], data: Any, indent: int | None = 4) -> None:
    """Serialize ``data`` in key order and replace ``destination`` with it."""
    path = Path(destination)
    text = json.dumps(data, indent=indent, ensure_ascii=False)
    await asyncio.to_thread(_write_atomic, path, text)
    logger.info("Wrote %s (%d bytes)", path, len(text))
