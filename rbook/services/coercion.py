"""Explicit value conversions for the book's data-type examples.

R coerces quietly: ``as.numeric("1,234")`` gives ``NA`` with a warning. The
helpers here fail loudly with :class:`CoercionError` instead, and only strip
grouping marks when the caller asks for it (what ``readr::parse_number``
does for a locale).
"""
from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any, Iterable, Literal

from rbook.core.errors import CoercionError

ValueKind = Literal["logical", "integer", "double", "character", "missing"]

_TRUE = {"TRUE", "T", "true", "True"}
_FALSE = {"FALSE", "F", "false", "False"}
_NUMBER_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")
_INT_RE = re.compile(r"^[+-]?\d+$")


@dataclass(frozen=True)
class RValue:
    kind: ValueKind
    value: Any = None

    @property
    def is_missing(self) -> bool:
        return self.kind == "missing"


MISSING = RValue("missing")


def _clean(text: str, grouping_mark: str | None) -> str:
    s = (text or "").strip()
    if grouping_mark:
        s = s.replace(grouping_mark, "")
    return s


def as_numeric(text: str, grouping_mark: str | None = None) -> float:
    s = _clean(text, grouping_mark)
    if not _NUMBER_RE.match(s):
        raise CoercionError(text, "double")
    v = float(s)
    if not math.isfinite(v):
        raise CoercionError(text, "double")
    return v


def as_integer(text: str, grouping_mark: str | None = None) -> int:
    s = _clean(text, grouping_mark)
    if not _INT_RE.match(s):
        raise CoercionError(text, "integer")
    return int(s)


def as_logical(text: str) -> bool:
    s = (text or "").strip()
    if s in _TRUE:
        return True
    if s in _FALSE:
        return False
    raise CoercionError(text, "logical")


def infer(text: str | None, na_values: Iterable[str] = ("", "NA")) -> RValue:
    """Guess the narrowest kind for one cell of text, the way a CSV reader does."""
    if text is None or text.strip() in set(na_values):
        return MISSING
    s = text.strip()
    if s in _TRUE or s in _FALSE:
        return RValue("logical", as_logical(s))
    if _INT_RE.match(s):
        return RValue("integer", int(s))
    if _NUMBER_RE.match(s):
        v = float(s)
        if math.isfinite(v):
            return RValue("double", v)
    return RValue("character", text)


def convert(value: RValue, target: ValueKind) -> RValue:
    if value.is_missing or value.kind == target:
        return value
    if target == "character":
        if value.kind == "logical":
            return RValue("character", "TRUE" if value.value else "FALSE")
        return RValue("character", str(value.value))
    if target == "double":
        if value.kind in ("integer", "logical"):
            return RValue("double", float(value.value))
        return RValue("double", as_numeric(value.value))
    if target == "integer":
        if value.kind == "logical":
            return RValue("integer", int(value.value))
        if value.kind == "double":
            if not float(value.value).is_integer():
                raise CoercionError(value.value, "integer")
            return RValue("integer", int(value.value))
        return RValue("integer", as_integer(value.value))
    if target == "logical":
        if value.kind in ("integer", "double"):
            return RValue("logical", value.value != 0)
        return RValue("logical", as_logical(value.value))
    raise CoercionError(value.value, target)


def not_in(value: Any, collection: Iterable[Any]) -> bool:
    return all(value != x for x in collection)
