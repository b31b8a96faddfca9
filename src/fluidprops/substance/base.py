"""
Substance base - shared behaviour of the enumerated substance kinds

Author: fluidprops contributors
Date: 2026-10-18
"""

from enum import Enum
from functools import lru_cache
from typing import Dict, Type, TypeVar

from fluidprops.core.errors import UnknownKeyError

E = TypeVar("E", bound="SubstanceEnum")


class SubstanceEnum(Enum):
    """
    Enumerated substance whose value is the name understood by the backend.

    Subclasses override ``backend_name``.
    """

    def __str__(self) -> str:
        return self.value

    @property
    def fluid_name(self) -> str:
        """Name of the substance for the backend."""
        return self.value

    @property
    def backend_name(self) -> str:
        """Backend family evaluating this substance."""
        raise NotImplementedError

    @classmethod
    def parse(cls: Type[E], name: str) -> E:
        """
        Find a substance by backend name or member name (case-insensitive).

        Raises:
            UnknownKeyError: If no substance matches
        """
        try:
            return _lookup_table(cls)[name.strip().lower()]
        except (KeyError, AttributeError):
            raise UnknownKeyError(f"Unknown {cls.__name__}: {name!r}") from None


@lru_cache(maxsize=None)
def _lookup_table(kind: Type[SubstanceEnum]) -> Dict[str, SubstanceEnum]:
    table: Dict[str, SubstanceEnum] = {}
    for member in kind:
        table.setdefault(member.value.lower(), member)
        table.setdefault(member.name.lower(), member)
    return table
