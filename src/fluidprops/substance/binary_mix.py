"""
BinaryMix - incompressible binary mixtures (INCOMP backend)

Each kind has fixed fraction bounds. Kinds starting with "V" are
volume-based, all others are mass-based.

Author: fluidprops contributors
Date: 2026-10-18
"""

from dataclasses import dataclass

from fluidprops.core.errors import InvalidFractionError
from fluidprops.core.units import Scalar, si_magnitude
from fluidprops.substance.base import SubstanceEnum


class BinaryMixKind(SubstanceEnum):
    """Kinds of incompressible binary mixtures with their fraction bounds."""

    def __new__(cls, name: str, min_fraction: float, max_fraction: float):
        obj = object.__new__(cls)
        obj._value_ = name
        obj._min_fraction = min_fraction
        obj._max_fraction = max_fraction
        return obj

    FRE = "FRE", 0.19, 0.5
    ICE_EA = "IceEA", 0.05, 0.35
    ICE_NA = "IceNA", 0.05, 0.35
    ICE_PG = "IcePG", 0.05, 0.35
    LI_BR = "LiBr", 0.0, 0.75
    MAM = "MAM", 0.0, 0.3
    MAM2 = "MAM2", 0.078, 0.236
    MCA = "MCA", 0.0, 0.3
    MCA2 = "MCA2", 0.09, 0.294
    MEA = "MEA", 0.0, 0.6
    MEA2 = "MEA2", 0.11, 0.6
    MEG = "MEG", 0.0, 0.6
    MEG2 = "MEG2", 0.0, 0.56
    MGL = "MGL", 0.0, 0.6
    MGL2 = "MGL2", 0.195, 0.63
    MITSW = "MITSW", 0.0, 0.12
    MKA = "MKA", 0.0, 0.45
    MKA2 = "MKA2", 0.11, 0.41
    MKC = "MKC", 0.0, 0.4
    MKC2 = "MKC2", 0.0, 0.39
    MKF = "MKF", 0.0, 0.48
    MLI = "MLI", 0.0, 0.24
    MMA = "MMA", 0.0, 0.6
    MMA2 = "MMA2", 0.078, 0.474
    MMG = "MMG", 0.0, 0.3
    MMG2 = "MMG2", 0.0, 0.205
    MNA = "MNA", 0.0, 0.23
    MNA2 = "MNA2", 0.0, 0.23
    MPG = "MPG", 0.0, 0.6
    MPG2 = "MPG2", 0.15, 0.57
    VCA = "VCA", 0.147, 0.299
    VKC = "VKC", 0.128, 0.389
    VMA = "VMA", 0.1, 0.9
    VMG = "VMG", 0.072, 0.206
    VNA = "VNA", 0.07, 0.231
    AEG = "AEG", 0.1, 0.6
    AKF = "AKF", 0.4, 1.0
    AL = "AL", 0.1, 0.6
    AN = "AN", 0.1, 0.6
    APG = "APG", 0.1, 0.6
    GKN = "GKN", 0.1, 0.6
    PK2 = "PK2", 0.3, 1.0
    PKL = "PKL", 0.1, 0.6
    ZAC = "ZAC", 0.06, 0.5
    ZFC = "ZFC", 0.3, 0.6
    ZLC = "ZLC", 0.3, 0.7
    ZM = "ZM", 0.0, 1.0
    ZMC = "ZMC", 0.3, 0.7

    @property
    def backend_name(self) -> str:
        return "INCOMP"

    @property
    def min_fraction(self) -> float:
        """Minimum allowed fraction [-]."""
        return self._min_fraction

    @property
    def max_fraction(self) -> float:
        """Maximum allowed fraction [-]."""
        return self._max_fraction

    @property
    def fraction_basis(self) -> str:
        """'volume' for volume-based kinds, 'mass' otherwise."""
        return "volume" if self.value.startswith("V") else "mass"


@dataclass(frozen=True)
class BinaryMix:
    """
    Incompressible binary mixture of a given kind.

    Attributes:
        kind: Mixture kind
        fraction: Mass or volume fraction of the solute [-]
    """
    kind: BinaryMixKind
    fraction: float

    def __post_init__(self):
        fraction = self.fraction
        if not (self.kind.min_fraction <= fraction <= self.kind.max_fraction):
            raise InvalidFractionError(
                f"Fraction of {self.kind.value} must be in "
                f"[{self.kind.min_fraction}, {self.kind.max_fraction}], got {fraction}"
            )

    @classmethod
    def with_fraction(cls, kind: BinaryMixKind, fraction: Scalar) -> "BinaryMix":
        """
        Create a binary mixture, checking the fraction against the kind's bounds.

        Args:
            kind: Mixture kind
            fraction: Fraction as a pint quantity (e.g. percent) or a ratio

        Raises:
            InvalidFractionError: If the fraction is outside the kind's bounds
        """
        return cls(kind, si_magnitude(fraction, "dimensionless"))

    @property
    def fluid_name(self) -> str:
        return self.kind.fluid_name

    @property
    def backend_name(self) -> str:
        return self.kind.backend_name
