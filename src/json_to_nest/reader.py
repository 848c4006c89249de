"""Reader layer: JSON text → value tree, plus per-value inference helpers."""

from __future__ import annotations

import json
import re

from .errors import ParseError, UnsupportedTopLevelShape
from .options import RenderOptions
from .typedef import Scalar


_DATE_TIME_RE = re.compile(r"\d{4}-\d\d-\d\dT\d\d:\d\d:\d\d(\.\d+)?(\+\d\d:\d\d|Z)")


# ---------------------------------------------------------------------------
# Document loading
# ---------------------------------------------------------------------------

def _reject_constant(name: str):
    raise ValueError(f"Unexpected token {name} in JSON")


def load_document(text: str | bytes):
    """Parse *text* and return the top-level value.

    Raises ParseError for malformed JSON (``NaN`` and ``Infinity`` included)
    and UnsupportedTopLevelShape when the document is an array.
    """
    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except ValueError as exc:
        raise ParseError(str(exc)) from exc
    except RecursionError as exc:
        raise ParseError(f"JSON nested too deeply: {exc}") from exc

    if isinstance(data, list):
        raise UnsupportedTopLevelShape()
    return data


# ---------------------------------------------------------------------------
# Inference helpers
# ---------------------------------------------------------------------------

def scalar_type(value) -> Scalar:
    """Map a non-container JSON value to its Scalar type."""
    if value is None:
        return Scalar("null")
    # bool is an int subclass; test it first
    if isinstance(value, bool):
        return Scalar("boolean")
    if isinstance(value, (int, float)):
        return Scalar("number")
    if isinstance(value, str):
        return Scalar("string")
    return Scalar("unknown")


def is_date_string(value: str) -> bool:
    """True when *value* contains an ISO-8601 date-time with offset or Z."""
    return _DATE_TIME_RE.search(value) is not None


def capitalize(segment: str) -> str:
    return segment[:1].upper() + segment[1:]


def format_object_name(field_name: str, options: RenderOptions) -> str:
    """Derive a declaration name from a field name.

    ``user_address`` → ``UserAddress`` (interface) / ``UserAddressDto`` (DTO).
    Only underscores separate segments; other characters are kept as-is.
    """
    name = "".join(capitalize(s) for s in field_name.split("_"))
    return name + options.name_suffix


def key_set(obj: dict) -> frozenset[str]:
    """The shape of an object: its field names, order-independent."""
    return frozenset(obj)
