"""Public entry point: JSON text → ConversionResult."""

from __future__ import annotations

import logging
from dataclasses import replace

from .document import ConversionResult
from .errors import JsonToNestError
from .options import Mode, RenderOptions
from .reader import load_document
from .renderer import render
from .resolver import Resolver

logger = logging.getLogger(__name__)


def convert(
    json_text: str | bytes,
    mode: str | Mode = Mode.INTERFACE,
    options: RenderOptions | None = None,
) -> ConversionResult:
    """Convert *json_text* to interface or DTO declarations.

    Failures (invalid JSON, a top-level array) are reported in the result's
    ``error`` with an empty ``content``; they are never raised.
    """
    options = replace(options or RenderOptions(), mode=Mode.parse(mode))

    try:
        data = load_document(json_text)
    except JsonToNestError as exc:
        logger.debug("Conversion failed: %s", exc)
        return ConversionResult(content="", error=str(exc))

    root = Resolver(options).resolve_document(data)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Resolved %s with %d nested declaration(s)",
            root.name,
            sum(1 for _ in root.walk()),
        )
    return ConversionResult(content=render(root, options))
