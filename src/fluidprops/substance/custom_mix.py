"""
CustomMix - user-defined mixtures of pure substances and pure refrigerants

Composition is validated once at construction; instances are immutable and
conversion between mass and mole fractions returns a new instance.

Author: fluidprops contributors
Date: 2026-10-18
"""

import logging
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Union

import numpy as np

from fluidprops.core.errors import (
    InvalidComponentError,
    InvalidFractionError,
    InvalidFractionsSumError,
    NotEnoughComponentsError,
)
from fluidprops.core.props_service import PropsService, get_props_service
from fluidprops.core.units import Scalar, si_magnitude
from fluidprops.io.fluid_param import FluidTrivialParam
from fluidprops.substance.pure import Pure
from fluidprops.substance.refrigerant import Refrigerant, RefrigerantCategory

logger = logging.getLogger(__name__)

CustomMixComponent = Union[Pure, Refrigerant]


class CustomMix:
    """
    Custom mixture (HEOS backend).

    Only pure substances and refrigerants of the PURE category can be mixed.
    Use the mole_based / mass_based constructors.
    """

    # Allowed deviation of the fractions sum from 1
    FRACTIONS_SUM_TOLERANCE = 1e-6

    __slots__ = ("_components", "_mass_based")

    def __init__(self, components: Mapping[CustomMixComponent, Scalar], mass_based: bool = False):
        fractions = {
            component: si_magnitude(fraction, "dimensionless")
            for component, fraction in components.items()
        }
        self._validate(fractions)
        self._components: Dict[CustomMixComponent, float] = fractions
        self._mass_based = mass_based

    @classmethod
    def mole_based(cls, components: Mapping[CustomMixComponent, Scalar]) -> "CustomMix":
        """
        Create a mole-based mixture.

        Args:
            components: Components and their mole fractions

        Raises:
            CompositionError: If the composition is invalid
        """
        return cls(components, mass_based=False)

    @classmethod
    def mass_based(cls, components: Mapping[CustomMixComponent, Scalar]) -> "CustomMix":
        """
        Create a mass-based mixture.

        Args:
            components: Components and their mass fractions

        Raises:
            CompositionError: If the composition is invalid
        """
        return cls(components, mass_based=True)

    @property
    def components(self) -> Mapping[CustomMixComponent, float]:
        """Components and their fractions (read-only)."""
        return MappingProxyType(self._components)

    @property
    def is_mass_based(self) -> bool:
        return self._mass_based

    @property
    def fractions(self) -> List[float]:
        """Fractions in component order."""
        return list(self._components.values())

    @property
    def fluid_name(self) -> str:
        """Components joined with '&', in component order."""
        return "&".join(component.fluid_name for component in self._components)

    @property
    def backend_name(self) -> str:
        return "HEOS"

    def to_mole_based(self, props_service: Optional[PropsService] = None) -> "CustomMix":
        """
        Convert to a mole-based mixture.

        Mass fractions are divided by the molar mass of each component and
        renormalized. A mole-based mixture is returned unchanged.

        Args:
            props_service: Source of backend handles for the molar masses
                (default: the global PropsService)

        Returns:
            Mole-based mixture with the same components

        Raises:
            BackendError: If a molar mass cannot be evaluated
        """
        if not self._mass_based:
            return self
        service = props_service if props_service is not None else get_props_service()
        components = list(self._components)
        molar_masses = np.array([
            service.create_backend(c.backend_name, c.fluid_name).keyed_output(
                FluidTrivialParam.MOLAR_MASS
            )
            for c in components
        ])
        amounts = np.array([self._components[c] for c in components]) / molar_masses
        mole_fractions = amounts / amounts.sum()
        logger.debug("Converted %s to mole fractions %s", self.fluid_name, mole_fractions)
        return CustomMix(dict(zip(components, mole_fractions.tolist())), mass_based=False)

    @classmethod
    def _validate(cls, fractions: Mapping[CustomMixComponent, float]) -> None:
        if len(fractions) < 2:
            raise NotEnoughComponentsError(
                f"Custom mixture needs at least 2 distinct components, got {len(fractions)}"
            )
        for component in fractions:
            if not _is_valid_component(component):
                raise InvalidComponentError(
                    f"Only pure substances and pure refrigerants can be mixed, got {component!r}"
                )
        for component, fraction in fractions.items():
            if not (0.0 < fraction < 1.0):
                raise InvalidFractionError(
                    f"Fraction of {component.fluid_name} must be in (0, 1), got {fraction}"
                )
        total = sum(fractions.values())
        if abs(total - 1.0) > cls.FRACTIONS_SUM_TOLERANCE:
            raise InvalidFractionsSumError(f"Fractions must sum to 1, got {total}")

    def __eq__(self, other) -> bool:
        if not isinstance(other, CustomMix):
            return NotImplemented
        return self._mass_based == other._mass_based and self._components == other._components

    def __hash__(self) -> int:
        return hash((self._mass_based, frozenset(self._components.items())))

    def __repr__(self) -> str:
        basis = "mass_based" if self._mass_based else "mole_based"
        items = ", ".join(f"{c.fluid_name}: {f:.6g}" for c, f in self._components.items())
        return f"CustomMix.{basis}({{{items}}})"


def _is_valid_component(component) -> bool:
    if isinstance(component, Pure):
        return True
    return isinstance(component, Refrigerant) and component.category is RefrigerantCategory.PURE
