"""
Key registry base - shared lookup logic for parameter and phase codes

Each registry is an Enum whose members carry a stable code, a canonical
name and textual aliases. Lookups by name are case-insensitive; lookups by
float truncate toward zero before validating the code.

Author: fluidprops contributors
Date: 2026-10-18
"""

import math
from enum import Enum
from functools import lru_cache
from typing import Dict, Type, TypeVar

from fluidprops.core.errors import UnknownKeyError

K = TypeVar("K", bound="KeyRegistry")

# Codes are stored in an unsigned byte by the backend
MIN_CODE = 0
MAX_CODE = 255


class KeyRegistry(Enum):
    """
    Base class of the closed key registries.

    Members are declared as ``NAME = code, canonical, *aliases``.
    """

    def __new__(cls, code: int, canonical: str, *aliases: str):
        obj = object.__new__(cls)
        obj._value_ = code
        obj.canonical = canonical
        obj.aliases = tuple(aliases)
        return obj

    def __str__(self) -> str:
        return self.canonical

    def __repr__(self) -> str:
        return f"<{type(self).__name__}.{self.name}: {self.value} ({self.canonical})>"

    @property
    def code(self) -> int:
        """Numeric code of this key."""
        return int(self.value)

    @classmethod
    def parse(cls: Type[K], name: str) -> K:
        """
        Find a key by canonical name, alias or member name (case-insensitive).

        Raises:
            UnknownKeyError: If no key matches
        """
        try:
            return _lookup_table(cls)[name.strip().lower()]
        except (KeyError, AttributeError):
            raise UnknownKeyError(
                f"Unknown {cls.__name__} name: {name!r}"
            ) from None

    @classmethod
    def from_code(cls: Type[K], code: int) -> K:
        """
        Find a key by its numeric code.

        Raises:
            UnknownKeyError: If the code matches no key
        """
        try:
            return cls(code)
        except ValueError:
            raise UnknownKeyError(
                f"Unknown {cls.__name__} code: {code!r}"
            ) from None

    @classmethod
    def from_float(cls: Type[K], value: float) -> K:
        """
        Find a key from a floating-point code, as returned by the backend.

        The fractional part is discarded (truncation toward zero) before the
        code is validated, so 5.9 resolves like 5.

        Raises:
            UnknownKeyError: If the truncated value is out of range or unknown
        """
        if not math.isfinite(value):
            raise UnknownKeyError(f"Unknown {cls.__name__} code: {value!r}")
        code = math.trunc(value)
        if code < MIN_CODE or code > MAX_CODE:
            raise UnknownKeyError(f"Unknown {cls.__name__} code: {value!r}")
        return cls.from_code(code)


@lru_cache(maxsize=None)
def _lookup_table(registry: Type[KeyRegistry]) -> Dict[str, KeyRegistry]:
    table: Dict[str, KeyRegistry] = {}
    for member in registry:
        for name in (member.canonical, member.name, *member.aliases):
            table.setdefault(name.lower(), member)
    return table


def name_of(registry: Type[KeyRegistry], code: int) -> str:
    """Canonical name of the key with the given code."""
    return registry.from_code(code).canonical


def code_of(registry: Type[KeyRegistry], name: str) -> int:
    """Numeric code of the key with the given name."""
    return registry.parse(name).code
