"""Reproducible request seeds — FNV-1a over a canonical JSON form.

Used only to break ties between otherwise-equal candidates. Not random
and not cryptographic: the same answers always give the same seed, and
stored palettes stay reproducible if the engine is reimplemented.

Character codes are taken as UTF-16 code units so seeds computed here
match seeds computed by JavaScript clients for any text, including
characters outside the Basic Multilingual Plane.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any, TypeVar

from pydantic import BaseModel

T = TypeVar("T")

FNV_OFFSET_BASIS = 0x811C9DC5
FNV_PRIME = 0x01000193
_MASK_32 = 0xFFFFFFFF


class EmptySelectionError(Exception):
    """Raised when pick() is handed nothing to choose from."""


def utf16_code_units(text: str) -> list[int]:
    """Return the UTF-16 code units of *text* (surrogate pairs split)."""
    data = text.encode("utf-16-le", "surrogatepass")
    return [int.from_bytes(data[i : i + 2], "little") for i in range(0, len(data), 2)]


def canonical_json(value: Any) -> str:
    """Serialize *value* to stable text: sorted keys, compact separators.

    Pydantic models are dumped by alias and without unset fields, so the
    text reflects what the caller submitted rather than schema defaults.
    """
    if isinstance(value, BaseModel):
        value = value.model_dump(mode="json", by_alias=True, exclude_unset=True)
    return json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def fnv1a_32(text: str) -> int:
    h = FNV_OFFSET_BASIS
    for unit in utf16_code_units(text):
        h ^= unit
        h = (h * FNV_PRIME) & _MASK_32
    return h


def hash_seed(value: Any) -> str:
    """Fingerprint *value* as lowercase hex.

    Strings are hashed as-is; anything else goes through canonical_json()
    first. No zero padding is added, matching historically stored seeds.
    """
    text = value if isinstance(value, str) else canonical_json(value)
    return format(fnv1a_32(text), "x")


def pick(candidates: Sequence[T], seed: str) -> T:
    """Choose one candidate by the first 8 hex digits of *seed*."""
    if not candidates:
        raise EmptySelectionError("Empty pick set")
    n = int(seed[:8], 16)
    return candidates[n % len(candidates)]
