"""
FluidInput - keyed inputs of a fluid state

A keyed input pairs a FluidParam with a value in SI units. Instances are
created through the factory methods, which reduce dimensioned values to
their SI magnitude via pint. Plain numbers are taken as already being SI.

Author: fluidprops contributors
Date: 2026-10-18
"""

from dataclasses import dataclass

from fluidprops.core.units import Scalar, si_magnitude
from fluidprops.io.fluid_param import FluidParam


@dataclass(frozen=True)
class FluidInput:
    """
    Fluid keyed input.

    Attributes:
        key: Parameter identifying the input
        si_value: Value in SI units
    """
    key: FluidParam
    si_value: float

    def __repr__(self) -> str:
        return f"FluidInput({self.key.canonical}={self.si_value!r})"

    @classmethod
    def density(cls, value: Scalar) -> "FluidInput":
        """Mass density (key: Dmass, SI units: kg/m³)."""
        return cls(FluidParam.D_MASS, si_magnitude(value, "kg/m**3"))

    @classmethod
    def enthalpy(cls, value: Scalar) -> "FluidInput":
        """Mass specific enthalpy (key: Hmass, SI units: J/kg)."""
        return cls(FluidParam.H_MASS, si_magnitude(value, "J/kg"))

    @classmethod
    def entropy(cls, value: Scalar) -> "FluidInput":
        """Mass specific entropy (key: Smass, SI units: J/kg/K)."""
        return cls(FluidParam.S_MASS, si_magnitude(value, "J/kg/K"))

    @classmethod
    def internal_energy(cls, value: Scalar) -> "FluidInput":
        """Mass specific internal energy (key: Umass, SI units: J/kg)."""
        return cls(FluidParam.U_MASS, si_magnitude(value, "J/kg"))

    @classmethod
    def molar_density(cls, value: Scalar) -> "FluidInput":
        """Molar density (key: Dmolar, SI units: mol/m³)."""
        return cls(FluidParam.D_MOLAR, si_magnitude(value, "mol/m**3"))

    @classmethod
    def molar_enthalpy(cls, value: Scalar) -> "FluidInput":
        """Molar specific enthalpy (key: Hmolar, SI units: J/mol)."""
        return cls(FluidParam.H_MOLAR, si_magnitude(value, "J/mol"))

    @classmethod
    def molar_entropy(cls, value: Scalar) -> "FluidInput":
        """Molar specific entropy (key: Smolar, SI units: J/mol/K)."""
        return cls(FluidParam.S_MOLAR, si_magnitude(value, "J/mol/K"))

    @classmethod
    def molar_internal_energy(cls, value: Scalar) -> "FluidInput":
        """Molar specific internal energy (key: Umolar, SI units: J/mol)."""
        return cls(FluidParam.U_MOLAR, si_magnitude(value, "J/mol"))

    @classmethod
    def pressure(cls, value: Scalar) -> "FluidInput":
        """Pressure (key: P, SI units: Pa)."""
        return cls(FluidParam.P, si_magnitude(value, "Pa"))

    @classmethod
    def quality(cls, value: Scalar) -> "FluidInput":
        """Vapor quality (key: Q, dimensionless, from 0 to 1)."""
        return cls(FluidParam.Q, si_magnitude(value, "dimensionless"))

    @classmethod
    def temperature(cls, value: Scalar) -> "FluidInput":
        """Temperature (key: T, SI units: K)."""
        return cls(FluidParam.T, si_magnitude(value, "K"))
